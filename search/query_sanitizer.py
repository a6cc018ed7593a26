"""Query sanitizer that strips noise while preserving tsquery syntax."""

import re

from .tokenizer_config import LANGUAGE_TOKENS, NOISE_CHARS


class QuerySanitizer:
    """
    Sanitizes raw queries before they reach the lexer.

    This sanitizer takes a conservative approach:
    - Removes ASCII control characters (NUL through US, plus DEL)
    - Rewrites language names such as C++ and C# into searchable words
    - Replaces characters that are not part of the grammar with spaces
    - Preserves & | ! ( ) " ' and -
    """

    CONTROL_CHARS_PATTERN = re.compile(r'[\x00-\x1f\x7f]')

    NOISE_PATTERN = re.compile('[' + re.escape(NOISE_CHARS) + ']')

    def sanitize(self, query: str) -> str:
        """
        Sanitize a query.

        Args:
            query: Raw user query

        Returns:
            Query with control characters removed and noise replaced by spaces
        """
        sanitized = self.CONTROL_CHARS_PATTERN.sub('', query)

        # Must run before noise stripping removes '+' and '#'
        for pattern, replacement in LANGUAGE_TOKENS:
            sanitized = pattern.sub(replacement, sanitized)

        return self.NOISE_PATTERN.sub(' ', sanitized)
