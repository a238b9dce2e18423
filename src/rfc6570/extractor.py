"""Reverse matching: recover variable bindings from a concrete URI.

Each variable of each expression becomes one capture group. Groups are
matched back to names by position, so a name used twice in a template keeps
whichever capture comes last.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from urllib.parse import unquote

from rfc6570.errors import PatternCompilationError
from rfc6570.operators import get_operator
from rfc6570.parser import PARSE_CACHE_SIZE, Expression, parse_segments, variable_names

logger = logging.getLogger(__name__)

OPERATOR_GROUP = r"(.*)"
SIMPLE_GROUP = r"([A-Za-z0-9%_.~\-]+)"


def expression_pattern(expression: Expression) -> str:
    """Build the regex fragment that stands in for one expression."""
    operator = get_operator(expression.marker)
    group = SIMPLE_GROUP if expression.marker is None else OPERATOR_GROUP
    return re.escape(operator.joiner).join(group for _ in expression.variables)


def build_pattern(template: str) -> str:
    """Build the (unanchored) extraction regex source for a template."""
    parts: list[str] = []
    for segment in parse_segments(template):
        if isinstance(segment, Expression):
            parts.append(expression_pattern(segment))
        else:
            parts.append(re.escape(segment))
    return "".join(parts)


@lru_cache(maxsize=PARSE_CACHE_SIZE)
def compile_pattern(template: str) -> re.Pattern[str]:
    """Compile the extraction regex for a template.

    Raises:
        PatternCompilationError: If the synthesized pattern is invalid.
    """
    source = build_pattern(template)
    try:
        pattern = re.compile(source)
    except re.error as e:
        raise PatternCompilationError(
            f"Invalid extraction pattern {source!r} for template {template!r}: {e}"
        ) from e

    logger.debug(f"Compiled extraction pattern for {template!r}: {source!r}")
    return pattern


def extract(template: str, candidate: str) -> dict[str, str] | None:
    """Extract the variable values that expand `template` into `candidate`.

    Args:
        template: The URI template text.
        candidate: A concrete string, usually a URI.

    Returns:
        Percent-decoded values keyed by variable name, or None if the
        candidate does not match the template's shape.
    """
    try:
        pattern = compile_pattern(template)
    except PatternCompilationError as e:
        logger.warning(f"Cannot extract variables: {e}")
        return None

    match = pattern.fullmatch(candidate)
    if match is None:
        logger.debug(f"{candidate!r} does not match template {template!r}")
        return None

    extracted: dict[str, str] = {}
    for index, name in enumerate(variable_names(template), start=1):
        captured = match.group(index)
        if captured is not None:
            extracted[name] = unquote(captured)

    return extracted


def matches(template: str, candidate: str) -> bool:
    """Check whether `candidate` could have been expanded from `template`."""
    return extract(template, candidate) is not None
