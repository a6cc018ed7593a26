"""Splits query vocabulary into included and excluded terms."""

from typing import Optional

from .models import TermSets
from .query_lexer import QueryLexer, TokenKind
from .tokenizer_config import OPERATOR_TERMS

_DEFAULT_LEXER = QueryLexer()


def classify_terms(sanitized_query: str, lexer: Optional[QueryLexer] = None) -> TermSets:
    """
    Extract include and exclude terms from a sanitized query.

    A NOT keyword or '!' marks the next word or phrase as excluded. The mark
    carries across an opening parenthesis, so only the first word of a
    negated group is excluded, and is cleared by ')', '&' and '|'. Phrases
    contribute each of their words. Terms are lower-cased.

    Args:
        sanitized_query: Output of QuerySanitizer.sanitize

    Returns:
        TermSets with deduplicated include and exclude terms
    """
    lexer = lexer or _DEFAULT_LEXER
    include_terms = set()
    exclude_terms = set()
    negated = False

    for token in lexer.iter_tokens(sanitized_query):
        if token.kind is TokenKind.NOT:
            negated = not negated
            continue
        if token.kind is TokenKind.LPAREN:
            continue
        if not token.is_operand:
            negated = False
            continue

        words = [w.lower() for w in token.words]
        if len(words) == 1 and words[0] in OPERATOR_TERMS:
            words = []

        (exclude_terms if negated else include_terms).update(words)
        negated = False

    return TermSets(frozenset(include_terms), frozenset(exclude_terms))
