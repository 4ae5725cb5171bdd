from snailfish.errors import (
    MalformedInputError, NestingTooDeepError, SnailfishError, ValueOverflowError,
)
from snailfish.parser import (
    DEFAULT_BITS, MAX_DEPTH, make_grammar, nesting_depth, parse, parse_lines,
)
from snailfish.tree import Leaf, Pair, SnailfishNumber

__all__ = [
    'DEFAULT_BITS',
    'Leaf',
    'MAX_DEPTH',
    'MalformedInputError',
    'NestingTooDeepError',
    'Pair',
    'SnailfishError',
    'SnailfishNumber',
    'ValueOverflowError',
    'make_grammar',
    'nesting_depth',
    'parse',
    'parse_lines',
]
