"""Syntax tree nodes for parsed search queries."""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Term:
    """A single bare word."""
    text: str


@dataclass(frozen=True)
class Phrase:
    """Two or more words that must appear adjacent and in order."""
    words: Tuple[str, ...]


@dataclass(frozen=True)
class Not:
    """Negation of an operand."""
    operand: 'QueryNode'


@dataclass(frozen=True)
class And:
    """Conjunction of two or more operands."""
    operands: Tuple['QueryNode', ...]


@dataclass(frozen=True)
class Or:
    """Disjunction of two or more operands."""
    operands: Tuple['QueryNode', ...]


QueryNode = Union[Term, Phrase, Not, And, Or]


def make_and(*operands: QueryNode) -> QueryNode:
    """Build a conjunction, flattening nested conjunctions."""
    return _combine(And, operands)


def make_or(*operands: QueryNode) -> QueryNode:
    """Build a disjunction, flattening nested disjunctions."""
    return _combine(Or, operands)


def _combine(node_type, operands):
    flat = []
    for operand in operands:
        if isinstance(operand, node_type):
            flat.extend(operand.operands)
        else:
            flat.append(operand)
    if len(flat) == 1:
        return flat[0]
    return node_type(tuple(flat))

