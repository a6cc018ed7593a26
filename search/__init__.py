"""Search module for compiling user queries into tsquery syntax."""

from .models import CompiledQuery, TermSets, SearchError, QueryValidationError
from .query_validator import QueryValidator
from .query_sanitizer import QuerySanitizer
from .term_classifier import classify_terms
from .query_lexer import QueryLexer, Token, TokenKind
from .query_ast import Term, Phrase, Not, And, Or, QueryNode
from .query_parser import QueryParser
from .query_serializer import TsQuerySerializer
from .query_utils import extract_all_terms
from .query_compiler import QueryCompiler

__all__ = [
    # Models
    'CompiledQuery',
    'TermSets',
    'SearchError',
    'QueryValidationError',

    # Pipeline stages
    'QueryValidator',
    'QuerySanitizer',
    'classify_terms',
    'QueryLexer',
    'Token',
    'TokenKind',
    'QueryParser',
    'TsQuerySerializer',

    # Syntax tree
    'Term',
    'Phrase',
    'Not',
    'And',
    'Or',
    'QueryNode',

    # Query Utils
    'extract_all_terms',

    # Compiler
    'QueryCompiler'
]
