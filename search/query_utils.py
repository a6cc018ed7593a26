"""Utilities for query processing and manipulation."""

import re
from typing import FrozenSet

from .tokenizer_config import FOLLOWED_BY, LEGACY_PHRASE_MARKER

# Markers that older releases wrapped around phrase groups, e.g. __PHRASE__(a <-> b)__PHRASE__
_LEGACY_MARKERS = re.compile(
    re.escape(LEGACY_PHRASE_MARKER) + r'(?=\()|(?<=\))' + re.escape(LEGACY_PHRASE_MARKER)
)

# Operator characters left over once <-> has been removed
_COMPILED_OPERATORS = re.compile(r'[&|!()<>]')


def extract_all_terms(compiled_text: str) -> FrozenSet[str]:
    """
    Extract every term from a compiled tsquery string.

    Negated terms are included. Hyphens inside words are kept, so the
    result covers the include and exclude terms of the original query.
    """
    cleaned = _LEGACY_MARKERS.sub(' ', compiled_text)
    cleaned = cleaned.replace(FOLLOWED_BY, ' ')
    cleaned = _COMPILED_OPERATORS.sub(' ', cleaned)

    return frozenset(word.lower() for word in cleaned.split())

