"""Characters and keywords of the tsquery grammar."""

import re

# Symbols with a meaning in the output grammar
AND_SYMBOL = '&'
OR_SYMBOL = '|'
NOT_SYMBOL = '!'
FOLLOWED_BY = '<->'

# Keyword spellings, compared case-insensitively
KEYWORD_OPERATORS = {
    'and': AND_SYMBOL,
    'or': OR_SYMBOL,
    'not': NOT_SYMBOL,
}

# Terms that carry no vocabulary of their own
OPERATOR_TERMS = frozenset({'&', '|', '!', 'and', 'or', 'not'})

# Protection marker written into compiled text by earlier releases
LEGACY_PHRASE_MARKER = '__PHRASE__'

# Language names that symbol stripping would otherwise destroy
LANGUAGE_TOKENS = [
    (re.compile(r'C\+\+', re.IGNORECASE), 'cplusplus'),
    (re.compile(r'C#', re.IGNORECASE), 'csharp'),
    (re.compile(r'F#', re.IGNORECASE), 'fsharp'),
]

# Noise characters replaced with a space
NOISE_CHARS = ';@#$%^*=+[]{}\\/<>'

# Word characters: anything but whitespace and grammar symbols
WORD_PATTERN = re.compile(r'[^\s&|!()"]+')


def is_searchable(word: str) -> bool:
    """Check if a word has at least one letter or digit."""
    return any(ch.isalnum() for ch in word)
