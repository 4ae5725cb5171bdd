"""Snailfish number tree: a number is either a Leaf or a Pair of two numbers."""


class SnailfishNumber:
    """Base for the two node kinds. Nodes are immutable once built."""

    __slots__ = ()

    is_leaf = False
    is_pair = False

    def __setattr__(self, name, value):
        raise AttributeError('{} is immutable'.format(self.__class__.__name__))

    def __delattr__(self, name):
        raise AttributeError('{} is immutable'.format(self.__class__.__name__))


class Leaf(SnailfishNumber):
    """A single unsigned integer.

    A leaf fresh out of the parser, not yet placed inside a pair, is an
    orphan value.
    """

    __slots__ = ('_value',)

    is_leaf = True

    def __init__(self, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError('Leaf value must be an int, not {!r}'.format(value))
        if value < 0:
            raise ValueError('Leaf value must be non-negative, not {}'.format(value))
        object.__setattr__(self, '_value', value)

    @property
    def value(self):
        return self._value

    @property
    def depth(self):
        return 0

    def leaves(self):
        yield self._value

    def __eq__(self, other):
        if not isinstance(other, SnailfishNumber):
            return NotImplemented
        return other.is_leaf and self._value == other._value

    def __hash__(self):
        return hash(('leaf', self._value))

    def __str__(self):
        return str(self._value)

    def __repr__(self):
        return 'Leaf({})'.format(self._value)


class Pair(SnailfishNumber):
    """Two ordered child numbers. The pair owns both children."""

    __slots__ = ('_left', '_right')

    is_pair = True

    def __init__(self, left, right):
        for child in (left, right):
            if not isinstance(child, SnailfishNumber):
                raise TypeError('Pair children must be Leaf or Pair, not {!r}'
                                .format(child))
        object.__setattr__(self, '_left', left)
        object.__setattr__(self, '_right', right)

    @property
    def left(self):
        return self._left

    @property
    def right(self):
        return self._right

    @property
    def depth(self):
        # Iterative, so very deep trees don't hit the recursion limit.
        deepest = 0
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            if node.is_pair:
                stack.append((node._right, level + 1))
                stack.append((node._left, level + 1))
            elif level > deepest:
                deepest = level
        return deepest

    def leaves(self):
        """Yield leaf values from left to right."""
        stack = [self]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                yield node._value
            else:
                stack.append(node._right)
                stack.append(node._left)

    def _tokens(self):
        stack = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                yield item
            elif item.is_leaf:
                yield str(item._value)
            else:
                stack.extend((']', item._right, ',', item._left, '['))

    def __eq__(self, other):
        if not isinstance(other, SnailfishNumber):
            return NotImplemented
        stack = [(self, other)]
        while stack:
            mine, theirs = stack.pop()
            if mine is theirs:
                continue
            if mine.is_leaf:
                if not (theirs.is_leaf and mine._value == theirs._value):
                    return False
            elif theirs.is_leaf:
                return False
            else:
                stack.append((mine._right, theirs._right))
                stack.append((mine._left, theirs._left))
        return True

    def __hash__(self):
        # The notation is unambiguous, so equal text means equal trees.
        return hash(('pair', str(self)))

    def __str__(self):
        return ''.join(self._tokens())

    def __repr__(self):
        return 'Pair({!r}, {!r})'.format(self._left, self._right)
