"""Lexer turning sanitized query text into grammar tokens."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

from .tokenizer_config import KEYWORD_OPERATORS, WORD_PATTERN, is_searchable


class TokenKind(Enum):
    """Kinds of tokens produced by the lexer."""
    WORD = "word"
    PHRASE = "phrase"
    AND = "and"
    OR = "or"
    NOT = "not"
    LPAREN = "lparen"
    RPAREN = "rparen"


@dataclass(frozen=True)
class Token:
    """A single lexical token."""
    kind: TokenKind
    text: str
    position: int
    words: Tuple[str, ...] = ()

    @property
    def is_operand(self) -> bool:
        return self.kind in (TokenKind.WORD, TokenKind.PHRASE)


_SYMBOL_KINDS = {
    "&": TokenKind.AND,
    "|": TokenKind.OR,
    "!": TokenKind.NOT,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


class QueryLexer:
    """
    Splits sanitized query text into tokens.

    Keyword operators (AND, OR, NOT in any case) produce the same token
    kinds as their symbolic forms. Quoted phrases become a single PHRASE
    token carrying their words. Unmatched quotes and words without any
    letter or digit are dropped as noise.
    """

    # Match: quoted phrase | single grammar symbol | word | stray quote
    TOKEN_PATTERN = re.compile(
        r'"(?P<phrase>[^"]*)"|'
        r'(?P<symbol>[&|!()])|'
        r'(?P<word>[^\s&|!()"]+)|'
        r'(?P<quote>")'
    )

    SYMBOL_KINDS = _SYMBOL_KINDS

    KEYWORD_KINDS = {
        keyword: _SYMBOL_KINDS[symbol]
        for keyword, symbol in KEYWORD_OPERATORS.items()
    }

    def tokenize(self, text: str) -> List[Token]:
        """Tokenize text into a list of tokens."""
        return list(self.iter_tokens(text))

    def iter_tokens(self, text: str) -> Iterator[Token]:
        """Yield tokens from text, left to right."""
        for match in self.TOKEN_PATTERN.finditer(text):
            pos = match.start()

            if match.group('phrase') is not None:
                words = tuple(
                    w for w in WORD_PATTERN.findall(match.group('phrase'))
                    if is_searchable(w)
                )
                yield Token(TokenKind.PHRASE, match.group(0), pos, words)
                continue

            symbol = match.group('symbol')
            if symbol:
                yield Token(self.SYMBOL_KINDS[symbol], symbol, pos)
                continue

            word = match.group('word')
            if word:
                keyword_kind = self.KEYWORD_KINDS.get(word.lower())
                if keyword_kind is not None:
                    yield Token(keyword_kind, word, pos)
                elif is_searchable(word):
                    yield Token(TokenKind.WORD, word, pos, (word,))
            # Stray quotes fall through as noise
