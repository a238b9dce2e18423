"""RFC 6570 URI template expansion and variable extraction."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rfc6570.errors import PatternCompilationError, URITemplateError
from rfc6570.template import URITemplate, parse
from rfc6570.values import ListValue, MapValue, Scalar

__all__ = (
    "URITemplate",
    "Scalar",
    "ListValue",
    "MapValue",
    "URITemplateError",
    "PatternCompilationError",
    "parse",
    "expand",
    "extract",
    "matches",
    "variables",
)


def expand(
    template: str, var_dict: Mapping[str, Any] | None = None, /, **kwargs
) -> str:
    return parse(template).expand(var_dict, **kwargs)


def extract(template: str, candidate: str) -> dict[str, str] | None:
    return parse(template).extract(candidate)


def matches(template: str, candidate: str) -> bool:
    return parse(template).matches(candidate)


def variables(template: str) -> list[str]:
    return parse(template).variables
