"""Forward expansion: template plus bindings to a concrete URI."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rfc6570.operators import get_operator
from rfc6570.parser import Expression, parse_segments
from rfc6570.values import Value, coerce_bindings


def expand_expression(expression: Expression, bindings: Mapping[str, Value]) -> str:
    """Render one expression against already coerced bindings.

    Variables that contribute nothing are skipped. If no variable contributes
    a non-empty string, the whole expression renders as "" and the operator
    prefix is dropped too.
    """
    operator = get_operator(expression.marker)

    contributions: list[str] = []
    for spec in expression.variables:
        rendered = operator.render(
            spec.name, bindings.get(spec.name), spec.explode, spec.prefix
        )
        if rendered is not None:
            contributions.append(rendered)

    if not any(contributions):
        return ""

    return operator.prefix + operator.joiner.join(contributions)


def expand(template: str, bindings: Mapping[str, Any] | None = None) -> str:
    """Expand a template with the given variable bindings.

    Literal text is copied unchanged. Missing variables, and variables bound
    to None, are omitted. This never raises.

    Args:
        template: The URI template text.
        bindings: Variable values; plain Python values are coerced with
            `rfc6570.values.coerce_value`.

    Returns:
        The expanded string.
    """
    values = coerce_bindings(bindings)

    parts: list[str] = []
    for segment in parse_segments(template):
        if isinstance(segment, Expression):
            parts.append(expand_expression(segment, values))
        else:
            parts.append(segment)

    return "".join(parts)
