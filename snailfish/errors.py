class SnailfishError(Exception):
    """Base class for errors raised while reading snailfish numbers."""


def _where(position, line):
    parts = []
    if line is not None:
        parts.append('line {}'.format(line))
    if position is not None:
        parts.append('position {}'.format(position))
    return ' at ' + ', '.join(parts) if parts else ''


class MalformedInputError(SnailfishError, ValueError):
    """The text doesn't match the snailfish grammar."""

    def __init__(self, text, position=None, reason=None, line=None):
        self.text = text
        self.position = position
        self.reason = reason
        self.line = line
        message = 'malformed snailfish number' + _where(position, line)
        if reason:
            message += ': ' + reason
        super().__init__(message)


class ValueOverflowError(SnailfishError, OverflowError):
    """A digit run is too large for the configured leaf width."""

    def __init__(self, digits, bits, position=None, line=None):
        self.digits = digits
        self.value = int(digits)
        self.bits = bits
        self.position = position
        self.line = line
        message = '{} does not fit in {} unsigned bits (max {}){}'.format(
            digits, bits, 2 ** bits - 1, _where(position, line))
        super().__init__(message)


class NestingTooDeepError(SnailfishError, RecursionError):
    """The input is nested deeper than the parser can recurse.

    This is a resource limit, not a grammar violation: the text may well
    be a valid snailfish number.
    """

    def __init__(self, text, depth, max_depth, line=None):
        self.text = text
        self.depth = depth
        self.max_depth = max_depth
        self.line = line
        message = 'snailfish number nested {} deep is too deep to parse (limit {}){}'.format(
            depth, max_depth, _where(None, line))
        super().__init__(message)
