"""Serializes query syntax trees into PostgreSQL tsquery text."""

from typing import Optional

from .query_ast import And, Not, Or, Phrase, QueryNode, Term
from .tokenizer_config import AND_SYMBOL, FOLLOWED_BY, NOT_SYMBOL, OR_SYMBOL


class TsQuerySerializer:
    """
    Emits tsquery text with canonical spacing.

    Binary operators and parentheses are padded with single spaces, the
    negation symbol is glued to its operand, and parentheses are only
    added where precedence needs them or around multi-word phrases:

        And(a, Or(b, c))      ->  a & ( b | c )
        Not(And(a, b))        ->  !( a & b )
        Phrase(hello, world)  ->  ( hello <-> world )
    """

    def serialize(self, node: Optional[QueryNode]) -> str:
        """Serialize a tree; None yields the empty string."""
        if node is None:
            return ''
        return self._emit(node)

    def _emit(self, node: QueryNode) -> str:
        if isinstance(node, Term):
            return node.text

        if isinstance(node, Phrase):
            return self._group(f' {FOLLOWED_BY} '.join(node.words))

        if isinstance(node, Not):
            operand = node.operand
            if isinstance(operand, (And, Or)):
                return NOT_SYMBOL + self._group(self._emit(operand))
            return NOT_SYMBOL + self._emit(operand)

        if isinstance(node, And):
            parts = []
            for operand in node.operands:
                text = self._emit(operand)
                parts.append(self._group(text) if isinstance(operand, Or) else text)
            return f' {AND_SYMBOL} '.join(parts)

        return f' {OR_SYMBOL} '.join(self._emit(operand) for operand in node.operands)

    @staticmethod
    def _group(text: str) -> str:
        return f'( {text} )'
