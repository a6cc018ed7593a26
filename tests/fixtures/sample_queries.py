"""Query and configuration fixtures for unit tests."""

# Queries paired with their expected compiled text
COMPILED_QUERIES = {
    'implicit_and': ('cats dogs', 'cats & dogs'),
    'keyword_and': ('cats AND dogs', 'cats & dogs'),
    'keyword_or': ('cats OR dogs', 'cats | dogs'),
    'lowercase_or': ('cats or dogs', 'cats | dogs'),
    'not_after_word': ('cats NOT dogs', 'cats & !dogs'),
    'not_at_start': ('NOT cats', '!cats'),
    'not_after_or': ('cats OR NOT dogs', 'cats | !dogs'),
    'not_after_and': ('cats AND NOT dogs', 'cats & !dogs'),
    'not_in_group': ('(NOT cats)', '!cats'),
    'chained_not': ('a NOT b NOT c', 'a & !b & !c'),
    'leading_chained_not': ('NOT a NOT b', '!a & !b'),
    'symbolic_not': ('cats !dogs', 'cats & !dogs'),
    'negated_group': ('NOT (a OR b)', '!( a | b )'),
    'group_and_word': ('(cats | dogs) food', '( cats | dogs ) & food'),
    'precedence': ('a b OR c', 'a & b | c'),
    'repeated_and': ('cats && dogs', 'cats & dogs'),
    'repeated_or': ('cats || dogs', 'cats | dogs'),
    'phrase': ('"hello world"', '( hello <-> world )'),
    'single_word_phrase': ('"hello"', 'hello'),
    'empty_phrase': ('""', ''),
    'negated_phrase': ('"hello world" NOT "foo bar"', '( hello <-> world ) & !( foo <-> bar )'),
    'language_name': ('C++ programming', 'cplusplus & programming'),
    'noise': ('x; DROP TABLE y', 'x & DROP & TABLE & y'),
    'extra_whitespace': ('  cats    dogs  ', 'cats & dogs'),
}

# Inputs that pass validation but stress the pipeline
HOSTILE_QUERIES = [
    '&&&',
    '(((',
    ')))',
    '!!!',
    '"""',
    'NOT',
    'AND OR NOT',
    '| & ! ( )',
    '\x00\x01',
    '@@@ ###',
    'a ) ( b',
    '"unterminated phrase',
    'NOT NOT NOT x',
    '__PHRASE__ a __PHRASE__',
    '(' * 200 + 'deep' + ')' * 200,
    '!' * 300 + 'x',
    'a | ' * 100 + 'b',
]

# Valid configurations for testing
VALID_CONFIGS = {
    'empty': {},
    'default': {'max_query_length': 1000},
    'short': {'max_query_length': 10},
}

# Invalid configurations for testing validation
INVALID_CONFIGS = {
    'zero_length': {'max_query_length': 0},
    'negative_length': {'max_query_length': -5},
    'string_length': {'max_query_length': '100'},
    'bool_length': {'max_query_length': True},
    'too_large': {'max_query_length': 10_000_000},
    'unknown_field': {'max_query_length': 100, 'language': 'english'},
}
