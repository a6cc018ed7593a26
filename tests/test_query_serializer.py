"""Tests for tsquery serialization."""

import unittest
from search.query_ast import And, Not, Or, Phrase, Term
from search.query_serializer import TsQuerySerializer


class TestTsQuerySerializer(unittest.TestCase):
    """Test canonical tsquery output."""

    def setUp(self):
        """Set up test fixtures."""
        self.serializer = TsQuerySerializer()

    def test_empty(self):
        self.assertEqual(self.serializer.serialize(None), "")

    def test_term(self):
        self.assertEqual(self.serializer.serialize(Term("cats")), "cats")

    def test_operators_padded(self):
        """Test single spaces around & and |."""
        self.assertEqual(
            self.serializer.serialize(And((Term("a"), Term("b")))),
            "a & b"
        )
        self.assertEqual(
            self.serializer.serialize(Or((Term("a"), Term("b"), Term("c")))),
            "a | b | c"
        )

    def test_not_glued(self):
        """Test that '!' touches its operand."""
        self.assertEqual(self.serializer.serialize(Not(Term("a"))), "!a")
        self.assertEqual(
            self.serializer.serialize(And((Term("a"), Not(Term("b"))))),
            "a & !b"
        )

    def test_parentheses_by_precedence(self):
        """Test that grouping is emitted only where needed."""
        self.assertEqual(
            self.serializer.serialize(And((Term("a"), Or((Term("b"), Term("c")))))),
            "a & ( b | c )"
        )
        self.assertEqual(
            self.serializer.serialize(Or((And((Term("a"), Term("b"))), Term("c")))),
            "a & b | c"
        )
        self.assertEqual(
            self.serializer.serialize(Not(Or((Term("a"), Term("b"))))),
            "!( a | b )"
        )
        self.assertEqual(
            self.serializer.serialize(Not(And((Term("a"), Term("b"))))),
            "!( a & b )"
        )

    def test_phrase(self):
        """Test the followed-by operator."""
        self.assertEqual(
            self.serializer.serialize(Phrase(("hello", "big", "world"))),
            "( hello <-> big <-> world )"
        )
        self.assertEqual(
            self.serializer.serialize(Not(Phrase(("foo", "bar")))),
            "!( foo <-> bar )"
        )
        self.assertEqual(
            self.serializer.serialize(And((Phrase(("a", "b")), Term("c")))),
            "( a <-> b ) & c"
        )


if __name__ == '__main__':
    unittest.main()
