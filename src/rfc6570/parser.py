"""Template expression parser.

Splits a template into literal runs and `{...}` expressions, and decomposes
each expression into an operator marker and its variable specs. Any string is
a valid template: unbalanced braces are simply left as literal text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache

OPERATOR_MARKERS = frozenset("+#./;?&")

EXPRESSION_PATTERN = re.compile(r"\{([^}]+)\}")

_PREFIX_PATTERN = re.compile(r"[0-9]+")

# Upper bound on distinct template strings whose parse is memoized.
PARSE_CACHE_SIZE = 512


@dataclass(frozen=True)
class VariableSpec:
    """One `name[*][:N]` entry of an expression."""

    name: str = field()
    explode: bool = field(default=False)
    prefix: int | None = field(default=None)


@dataclass(frozen=True)
class Expression:
    """A parsed `{...}` expression.

    `marker` is None for simple string expansion.
    """

    raw: str = field()
    marker: str | None = field(default=None)
    variables: tuple[VariableSpec, ...] = field(default=())

    @property
    def names(self) -> list[str]:
        return [spec.name for spec in self.variables]


Segment = str | Expression


def parse_variable_spec(text: str) -> VariableSpec:
    """Parse a single variable spec.

    A trailing `*` marks explode. The part after the first `:` is the prefix
    length when it is a run of digits; anything else leaves the prefix unset.
    """
    explode = text.endswith("*")
    if explode:
        text = text[:-1]

    prefix = None
    if ":" in text:
        text, raw_prefix = text.split(":", 1)
        if _PREFIX_PATTERN.fullmatch(raw_prefix):
            prefix = int(raw_prefix)

    return VariableSpec(name=text, explode=explode, prefix=prefix)


def parse_expression(body: str) -> Expression:
    """Decompose the text between braces into operator and variable specs."""
    marker = None
    variable_list = body
    if body[:1] in OPERATOR_MARKERS:
        marker = body[0]
        variable_list = body[1:]

    specs = tuple(parse_variable_spec(piece) for piece in variable_list.split(","))
    return Expression(raw=body, marker=marker, variables=specs)


def find_expressions(template: str) -> list[str]:
    """Return the raw bodies of every expression, left to right."""
    return EXPRESSION_PATTERN.findall(template)


@lru_cache(maxsize=PARSE_CACHE_SIZE)
def parse_segments(template: str) -> tuple[Segment, ...]:
    """Tokenize a template into literal strings and parsed expressions.

    Empty literal runs are skipped, so adjacent expressions appear back to
    back.
    """
    segments: list[Segment] = []
    position = 0
    for match in EXPRESSION_PATTERN.finditer(template):
        if match.start() > position:
            segments.append(template[position : match.start()])
        segments.append(parse_expression(match.group(1)))
        position = match.end()

    if position < len(template):
        segments.append(template[position:])

    return tuple(segments)


def parse_expressions(template: str) -> tuple[Expression, ...]:
    return tuple(s for s in parse_segments(template) if isinstance(s, Expression))


def variable_names(template: str) -> list[str]:
    """List every variable name in template order, duplicates included."""
    return [name for expr in parse_expressions(template) for name in expr.names]
