"""Tolerant recursive-descent parser for search queries."""

import logging
from typing import List, Optional

from .query_ast import Not, Phrase, QueryNode, Term, make_and, make_or
from .query_lexer import Token, TokenKind

logger = logging.getLogger(__name__)


class _TokenStream:
    """Cursor over a token list."""

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.index = 0

    def peek_kind(self) -> Optional[TokenKind]:
        if self.index < len(self.tokens):
            return self.tokens[self.index].kind
        return None

    def advance(self) -> Token:
        token = self.tokens[self.index]
        self.index += 1
        return token

    def at_end(self) -> bool:
        return self.index >= len(self.tokens)


class QueryParser:
    """
    Builds a syntax tree from lexer tokens.

    Grammar, from lowest to highest precedence:

        query    := or_expr
        or_expr  := and_expr ( "|" and_expr )*
        and_expr := unary ( "&"? unary )*
        unary    := "!"* primary
        primary  := WORD | PHRASE | "(" or_expr ")"?

    The parser never fails. Dangling operators and negations without an
    operand are dropped, unclosed groups end with the input, stray closing
    parentheses are skipped and empty groups or phrases vanish. Adjacent
    operands are joined by an implicit AND, so "a NOT b" parses as
    a & !b and "!a NOT b" as !a & !b.
    """

    # Groups nested deeper than this are flattened into their parent
    MAX_GROUP_DEPTH = 32

    STOP_KINDS = (None, TokenKind.OR, TokenKind.RPAREN)

    def parse(self, tokens: List[Token]) -> Optional[QueryNode]:
        """
        Parse tokens into a syntax tree.

        Args:
            tokens: Tokens produced by QueryLexer

        Returns:
            Root node, or None if the query has no operands
        """
        stream = _TokenStream(tokens)
        operands = []

        while not stream.at_end():
            node = self._parse_or(stream, 0)
            if node is not None:
                operands.append(node)
            if not stream.at_end():
                # Only an unmatched ')' stops the top level
                stray = stream.advance()
                logger.debug(f"Skipping unmatched '{stray.text}' at {stray.position}")

        return make_and(*operands) if operands else None

    def _parse_or(self, stream: _TokenStream, depth: int) -> Optional[QueryNode]:
        operands = []

        while True:
            node = self._parse_and(stream, depth)
            if node is not None:
                operands.append(node)
            if stream.peek_kind() is TokenKind.OR:
                stream.advance()
                continue
            break

        return make_or(*operands) if operands else None

    def _parse_and(self, stream: _TokenStream, depth: int) -> Optional[QueryNode]:
        operands = []

        while stream.peek_kind() not in self.STOP_KINDS:
            if stream.peek_kind() is TokenKind.AND:
                stream.advance()
                continue
            node = self._parse_unary(stream, depth)
            if node is not None:
                operands.append(node)

        return make_and(*operands) if operands else None

    def _parse_unary(self, stream: _TokenStream, depth: int) -> Optional[QueryNode]:
        negations = 0
        while stream.peek_kind() is TokenKind.NOT:
            stream.advance()
            negations += 1

        if stream.peek_kind() in self.STOP_KINDS or stream.peek_kind() is TokenKind.AND:
            return None

        operand = self._parse_primary(stream, depth)
        if operand is None:
            return None

        # !!x is x
        return Not(operand) if negations % 2 else operand

    def _parse_primary(self, stream: _TokenStream, depth: int) -> Optional[QueryNode]:
        token = stream.advance()

        if token.kind is TokenKind.WORD:
            return Term(token.text)

        if token.kind is TokenKind.PHRASE:
            if not token.words:
                return None
            if len(token.words) == 1:
                return Term(token.words[0])
            return Phrase(token.words)

        # LPAREN
        if depth >= self.MAX_GROUP_DEPTH:
            return None

        inner = self._parse_or(stream, depth + 1)
        if stream.peek_kind() is TokenKind.RPAREN:
            stream.advance()
        return inner
