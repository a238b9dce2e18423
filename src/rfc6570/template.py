"""The `URITemplate` value type.

A template is nothing more than its text. Parsing is memoized per distinct
template string, so building many `URITemplate` objects for the same text is
cheap. As a pydantic root model it serializes to, and validates from, a plain
string:

    >>> URITemplate("/users{/id}").model_dump()
    '/users{/id}'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ConfigDict, RootModel

from rfc6570 import expander, extractor
from rfc6570.parser import Expression, parse_expressions, variable_names


class URITemplate(RootModel[str]):
    """An RFC 6570 URI template."""

    model_config = ConfigDict(frozen=True)

    root: str
    """
    The template text.
    """

    @property
    def template(self) -> str:
        return self.root

    @property
    def expressions(self) -> tuple[Expression, ...]:
        """Parsed `{...}` expressions in template order."""
        return parse_expressions(self.root)

    @property
    def variables(self) -> list[str]:
        """Variable names in template order, one entry per occurrence."""
        return variable_names(self.root)

    def expand(
        self, var_dict: Mapping[str, Any] | None = None, /, **kwargs: Any
    ) -> str:
        """Expand the template with the given variables.

        Values can be passed as a mapping, as keyword arguments, or both.
        Keyword arguments win over entries of `var_dict` with the same name.

        Example::

            URITemplate("https://api.github.com{/end}").expand(end="gists")
        """
        bindings = dict(var_dict or {})
        bindings.update(kwargs)
        return expander.expand(self.root, bindings)

    def extract(self, candidate: str) -> dict[str, str] | None:
        """Extract variable values from a concrete URI, or None on mismatch."""
        return extractor.extract(self.root, candidate)

    def matches(self, candidate: str) -> bool:
        """Check if a concrete URI could have been generated from this template."""
        return extractor.matches(self.root, candidate)

    def __str__(self) -> str:
        return self.root

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URITemplate):
            return NotImplemented
        return self.root == other.root

    def __hash__(self) -> int:
        return hash(self.root)


def parse(template: str | URITemplate) -> URITemplate:
    """Create a `URITemplate`. Never fails: any string is a valid template."""
    if isinstance(template, URITemplate):
        return template
    return URITemplate(template)
