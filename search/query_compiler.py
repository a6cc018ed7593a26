"""Compiles free-text search queries into PostgreSQL tsquery syntax."""

import logging
from typing import Any, FrozenSet, Optional

from config.compiler_config import CompilerConfig
from .models import CompiledQuery, TermSets
from .query_lexer import QueryLexer
from .query_parser import QueryParser
from .query_sanitizer import QuerySanitizer
from .query_serializer import TsQuerySerializer
from .query_utils import extract_all_terms
from .query_validator import QueryValidator
from .term_classifier import classify_terms

logger = logging.getLogger(__name__)


class QueryCompiler:
    """
    Turns a user query into a tsquery string plus highlight vocabulary.

    Accepted input: bare words, "quoted phrases", AND/OR/NOT in any case
    and the symbols & | ! ( ). Everything else is noise.

    Pipeline:
        validate -> sanitize -> classify terms
                             -> tokenize -> parse -> serialize

    Only validation can fail. Every other stage accepts any string, and
    the compiler holds no mutable state, so one instance can be shared
    between threads.
    """

    def __init__(self, config: Optional[CompilerConfig] = None):
        """
        Initialize compiler.

        Args:
            config: Compiler configuration (defaults to CompilerConfig())
        """
        self.config = config or CompilerConfig()
        self.validator = QueryValidator(self.config.max_query_length)
        self.sanitizer = QuerySanitizer()
        self.lexer = QueryLexer()
        self.parser = QueryParser()
        self.serializer = TsQuerySerializer()

    def compile(self, query: Any) -> CompiledQuery:
        """
        Compile a user query.

        Args:
            query: Raw user query

        Returns:
            CompiledQuery with tsquery text and include/exclude terms

        Raises:
            QueryValidationError: If the query is empty, not a string or too long
        """
        self.validator.validate(query)

        sanitized = self.sanitizer.sanitize(query)
        terms = self.classify(sanitized)
        compiled_text = self.compile_text(sanitized)

        logger.debug(f"Compiled query {query!r} -> {compiled_text!r}")

        return CompiledQuery(
            compiled_text=compiled_text,
            include_terms=terms.include_terms,
            exclude_terms=terms.exclude_terms
        )

    def parse(self, query: Any) -> str:
        """Compile a user query and return only the tsquery text."""
        return self.compile(query).compiled_text

    def validate(self, query: Any) -> None:
        """Validate a query without compiling it."""
        self.validator.validate(query)

    def sanitize(self, query: str) -> str:
        return self.sanitizer.sanitize(query)

    def classify(self, sanitized_query: str) -> TermSets:
        return classify_terms(sanitized_query, self.lexer)

    def compile_text(self, sanitized_query: str) -> str:
        """Tokenize, parse and serialize already sanitized text."""
        tokens = self.lexer.tokenize(sanitized_query)
        tree = self.parser.parse(tokens)
        return self.serializer.serialize(tree)

    def extract_terms(self, query: Any) -> TermSets:
        """
        Validate a query and classify its terms without compiling it.

        Raises:
            QueryValidationError: If the query is empty, not a string or too long
        """
        self.validator.validate(query)
        return self.classify(self.sanitize(query))

    def extract_include_terms(self, query: str) -> FrozenSet[str]:
        """Terms that should be matched (negated terms excluded)."""
        return self.classify(self.sanitize(query)).include_terms

    def extract_exclude_terms(self, query: str) -> FrozenSet[str]:
        """Terms prefixed with NOT or '!'."""
        return self.classify(self.sanitize(query)).exclude_terms

    @staticmethod
    def extract_all_terms(compiled_text: str) -> FrozenSet[str]:
        """All terms of an already compiled query, negated ones included."""
        return extract_all_terms(compiled_text)
