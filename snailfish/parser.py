import contextlib
import functools
import logging
import re
import sys
import threading

import parsley
from ometa.runtime import ParseError

from snailfish.errors import MalformedInputError, NestingTooDeepError, ValueOverflowError
from snailfish.tree import Leaf, Pair

log = logging.getLogger(__name__)

# Leaves were u8 in the puzzle input this notation comes from.
DEFAULT_BITS = 8

GRAMMAR_CACHE_SIZE = 16

# parsley spends about six interpreter frames per bracket level.
FRAMES_PER_LEVEL = 10
MAX_DEPTH = 2000

_grammar = r"""
# Single quotes match exactly one character; no whitespace is skipped.
digit = :x ?(x in '0123456789') -> x

leaf = <digit+>:ds -> make_leaf(ds)
pair = '[' snailfish:left ',' snailfish:right ']' -> Pair(left, right)

# '[' versus a digit decides the branch, so the choice never backtracks.
snailfish = pair | leaf
"""


def _leaf_maker(bits):
    if bits is None:
        return lambda digits: Leaf(int(digits))

    max_value = 2 ** bits - 1

    def make_leaf(digits):
        value = int(digits)
        if value > max_value:
            # Not a ParseError, so ordered choice can't swallow it.
            raise ValueOverflowError(digits, bits)
        return Leaf(value)

    return make_leaf


@functools.lru_cache(maxsize=GRAMMAR_CACHE_SIZE)
def _compile_grammar(bits):
    log.debug('compiling snailfish grammar for %s-bit leaves', bits)
    return parsley.makeGrammar(_grammar, {
        'Pair': Pair,
        'make_leaf': _leaf_maker(bits),
    }, name='Snailfish')


def make_grammar(bits=DEFAULT_BITS):
    """Return the parsley grammar class for leaves of `bits` unsigned bits.

    `bits=None` lifts the limit. The most recently used
    `GRAMMAR_CACHE_SIZE` widths stay compiled.
    """
    if bits is not None:
        if isinstance(bits, bool) or not isinstance(bits, int) or bits < 1:
            raise ValueError('bits must be a positive int or None, not {!r}'
                             .format(bits))
    return _compile_grammar(bits)


def nesting_depth(text):
    """Deepest bracket nesting in `text`, without parsing it."""
    depth = deepest = 0
    for char in text:
        if char == '[':
            depth += 1
            if depth > deepest:
                deepest = depth
        elif char == ']':
            depth -= 1
    return deepest


class _RecursionHeadroom:
    """Raise the interpreter recursion limit while deep inputs are parsed.

    The limit is process wide, so concurrent parses share one limit: the
    largest any of them currently needs. The original limit comes back
    once the last one finishes.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._needs = []
        self._base = None

    @contextlib.contextmanager
    def reserve(self, frames):
        with self._lock:
            if not self._needs:
                self._base = sys.getrecursionlimit()
            needed = self._base + frames
            self._needs.append(needed)
            if needed > sys.getrecursionlimit():
                sys.setrecursionlimit(needed)
        try:
            yield
        finally:
            with self._lock:
                self._needs.remove(needed)
                sys.setrecursionlimit(max(self._needs + [self._base]))


_headroom = _RecursionHeadroom()


def _overflow_position(text, digits):
    # Digit runs are consumed left to right and an equal earlier run would
    # already have overflowed, so the first whole run with these digits is
    # the culprit.
    match = re.search(r'(?<![0-9])' + digits + r'(?![0-9])', text)
    return match.start() if match else None


def _parse(grammar, text, line=None, offset=0, source=None):
    # `text` is what gets parsed; errors report `source` (the text as the
    # caller wrote it) with positions shifted by `offset`.
    if source is None:
        source = text
    depth = nesting_depth(text)
    if depth > MAX_DEPTH:
        log.debug('refusing input nested %d deep', depth)
        raise NestingTooDeepError(source, depth, MAX_DEPTH, line)
    try:
        with _headroom.reserve(FRAMES_PER_LEVEL * depth):
            return grammar(text).snailfish()
    except ParseError as e:
        log.debug('parse error in %r at %s: %s', text, e.position, e.formatReason())
        position = None if e.position is None else e.position + offset
        raise MalformedInputError(source, position, e.formatReason(), line) from e
    except ValueOverflowError as e:
        log.debug('leaf overflow in %r: %s', text, e)
        position = _overflow_position(text, e.digits)
        if position is not None:
            position += offset
        raise ValueOverflowError(e.digits, e.bits, position, line) from None
    except RecursionError as e:
        log.debug('ran out of stack on input nested %d deep', depth)
        raise NestingTooDeepError(source, depth, MAX_DEPTH, line) from e


def parse(text, bits=DEFAULT_BITS):
    """Parse one snailfish number, e.g. ``'[[1,2],3]'``, into a tree.

    The whole of `text` must be a single number with no whitespace.
    Raises `MalformedInputError` when the text doesn't match the grammar,
    `ValueOverflowError` when a leaf doesn't fit in `bits` unsigned bits
    and `NestingTooDeepError` when the input is nested deeper than
    `MAX_DEPTH`.
    """
    return _parse(make_grammar(bits), text)


def parse_lines(text, bits=DEFAULT_BITS):
    """Parse one number per non-blank line of `text`, in order.

    Surrounding whitespace on a line is ignored. Errors carry the 1-based
    line number, the line as written and the column within it.
    """
    grammar = make_grammar(bits)
    numbers = []
    for lineno, line in enumerate(text.splitlines(), 1):
        stripped = line.strip()
        if stripped:
            offset = len(line) - len(line.lstrip())
            numbers.append(_parse(grammar, stripped, lineno, offset, line))
    return numbers
