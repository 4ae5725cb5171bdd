from unittest import main, TestCase

from snailfish import Leaf, Pair, SnailfishNumber


class TestLeaf(TestCase):

    def test_value(self):
        leaf = Leaf(3)
        self.assertEqual(leaf.value, 3)
        self.assertTrue(leaf.is_leaf)
        self.assertFalse(leaf.is_pair)
        self.assertIsInstance(leaf, SnailfishNumber)

    def test_rejects_non_ints(self):
        for value in ('3', 3.0, None, True):
            with self.assertRaises(TypeError):
                Leaf(value)

    def test_rejects_negative(self):
        with self.assertRaises(ValueError):
            Leaf(-1)

    def test_text(self):
        self.assertEqual(str(Leaf(12)), '12')
        self.assertEqual(repr(Leaf(12)), 'Leaf(12)')

    def test_depth_and_leaves(self):
        self.assertEqual(Leaf(4).depth, 0)
        self.assertEqual(list(Leaf(4).leaves()), [4])


class TestPair(TestCase):

    def setUp(self):
        self.number = Pair(Pair(Leaf(1), Leaf(2)), Leaf(3))

    def test_children(self):
        self.assertEqual(self.number.left, Pair(Leaf(1), Leaf(2)))
        self.assertEqual(self.number.right, Leaf(3))
        self.assertTrue(self.number.is_pair)
        self.assertFalse(self.number.is_leaf)

    def test_rejects_non_numbers(self):
        with self.assertRaises(TypeError):
            Pair(1, Leaf(2))
        with self.assertRaises(TypeError):
            Pair(Leaf(1), None)

    def test_text(self):
        self.assertEqual(str(self.number), '[[1,2],3]')
        self.assertEqual(repr(self.number), 'Pair(Pair(Leaf(1), Leaf(2)), Leaf(3))')

    def test_leaves_in_order(self):
        number = Pair(Pair(Leaf(1), Pair(Leaf(2), Leaf(3))), Pair(Leaf(4), Leaf(5)))
        self.assertEqual(list(number.leaves()), [1, 2, 3, 4, 5])

    def test_depth(self):
        self.assertEqual(Pair(Leaf(1), Leaf(2)).depth, 1)
        self.assertEqual(self.number.depth, 2)
        lopsided = Pair(Leaf(0), Pair(Leaf(1), Pair(Leaf(2), Leaf(3))))
        self.assertEqual(lopsided.depth, 3)


class TestEquality(TestCase):

    def test_structural(self):
        self.assertEqual(Pair(Leaf(1), Leaf(2)), Pair(Leaf(1), Leaf(2)))
        self.assertNotEqual(Pair(Leaf(1), Leaf(2)), Pair(Leaf(2), Leaf(1)))
        self.assertNotEqual(Pair(Pair(Leaf(1), Leaf(2)), Leaf(3)),
                            Pair(Leaf(1), Pair(Leaf(2), Leaf(3))))

    def test_leaf_never_equals_pair(self):
        self.assertNotEqual(Leaf(1), Pair(Leaf(1), Leaf(1)))
        self.assertNotEqual(Pair(Leaf(1), Leaf(1)), Leaf(1))

    def test_not_equal_to_plain_values(self):
        self.assertNotEqual(Leaf(1), 1)
        self.assertNotEqual(Pair(Leaf(1), Leaf(2)), [1, 2])

    def test_deep_trees(self):
        def chain(depth, last):
            number = Leaf(last)
            for _ in range(depth):
                number = Pair(number, Leaf(0))
            return number

        self.assertTrue(chain(5000, 1) == chain(5000, 1))
        self.assertFalse(chain(5000, 1) == chain(5000, 2))
        self.assertEqual(hash(chain(5000, 1)), hash(chain(5000, 1)))

    def test_hashable(self):
        seen = {Pair(Leaf(1), Leaf(2)), Pair(Leaf(1), Leaf(2)), Leaf(1)}
        self.assertEqual(len(seen), 2)


class TestImmutable(TestCase):

    def test_leaf(self):
        leaf = Leaf(1)
        with self.assertRaises(AttributeError):
            leaf.value = 2
        with self.assertRaises(AttributeError):
            leaf._value = 2
        self.assertEqual(leaf, Leaf(1))

    def test_pair(self):
        number = Pair(Leaf(1), Leaf(2))
        with self.assertRaises(AttributeError):
            number.left = Leaf(3)
        with self.assertRaises(AttributeError):
            del number._right
        self.assertEqual(number, Pair(Leaf(1), Leaf(2)))


if __name__ == '__main__':
    main()
