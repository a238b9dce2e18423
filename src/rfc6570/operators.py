"""
Expansion strategies for the eight RFC 6570 operators.

Each operator decides three things about an expression: what goes in front
of it, what goes between the values of its variables, and how each value is
formatted and percent-encoded.

## Operators

| Operator | Marker | Prefix | Joiner | Encodes | Named |
|---|---|---|---|---|---|
| Simple | (none) | | `,` | unreserved | no |
| Reserved | `+` | | `,` | unreserved + reserved | no |
| Fragment | `#` | `#` | `,` | fragment-safe | no |
| Label | `.` | `.` | `.` | unreserved | no |
| Path segment | `/` | `/` | `/` | unreserved | no |
| Path-style | `;` | `;` | `;` | unreserved | yes |
| Form query | `?` | `?` | `&` | unreserved | yes |
| Form continuation | `&` | `&` | `&` | unreserved | yes |

Named operators echo `name=` in front of values. Rendering methods return
None when the variable contributes nothing at all, which is different from
contributing an empty string.
"""

from __future__ import annotations

from urllib.parse import quote

from rfc6570.values import ListValue, MapValue, Value

# Characters left alone besides ALPHA, DIGIT and "-._~", which quote() never
# encodes.
UNRESERVED_SAFE = ""
RESERVED_SAFE = ":/?#[]@!$&'()*+,;="
FRAGMENT_SAFE = ":/?@!$&'()*+,;="


class Operator:
    """Default rendering shared by every operator.

    Subclasses set the class constants and override only the rules that
    differ from simple string expansion.
    """

    marker: str | None = None
    prefix: str = ""
    joiner: str = ","
    safe: str = UNRESERVED_SAFE

    omit_empty_list: bool = False
    omit_empty_map: bool = False

    def encode(self, value: str) -> str:
        return quote(value, safe=self.safe, errors="surrogatepass")

    def render(
        self, name: str, value: Value | None, explode: bool, prefix: int | None
    ) -> str | None:
        """Render one variable of an expression.

        Args:
            name: Variable name as written in the template.
            value: The bound value, or None when the variable is absent.
            explode: Whether the variable spec carries the `*` modifier.
            prefix: Prefix length from a `:N` modifier, if any.

        Returns:
            The rendered text, or None if the variable contributes nothing.
        """
        if value is None:
            return self.render_absent(name)
        if isinstance(value, ListValue):
            if not value.items and self.omit_empty_list:
                return None
            return self.render_list(name, list(value.items), explode)
        if isinstance(value, MapValue):
            if not value.pairs and self.omit_empty_map:
                return None
            return self.render_map(name, list(value.pairs), explode)
        return self.render_string(name, value.value, prefix)

    def render_scalar(self, value: str, prefix: int | None = None) -> str:
        """Truncate to `prefix` characters when longer, then encode."""
        if prefix is not None and len(value) > prefix:
            value = value[:prefix]
        return self.encode(value)

    def render_string(self, name: str, value: str, prefix: int | None) -> str | None:
        return self.render_scalar(value, prefix)

    def render_list(self, name: str, values: list[str], explode: bool) -> str | None:
        joiner = self.joiner if explode else ","
        return joiner.join(self.encode(v) for v in values)

    def render_map(
        self, name: str, pairs: list[tuple[str, str]], explode: bool
    ) -> str | None:
        joiner = self.joiner if explode else ","
        separator = "=" if explode else ","
        return joiner.join(
            f"{self.encode(key)}{separator}{self.encode(value)}" for key, value in pairs
        )

    def render_absent(self, name: str) -> str | None:
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(marker={self.marker!r})"


class NamedOperator(Operator):
    """Shared rules for operators that echo the variable name (`;`, `?`, `&`)."""

    def named(self, name: str, rendered: str) -> str:
        return f"{self.encode(name)}={rendered}"

    def render_string(self, name: str, value: str, prefix: int | None) -> str | None:
        return self.named(name, self.render_scalar(value, prefix))

    def render_list(self, name: str, values: list[str], explode: bool) -> str | None:
        if explode:
            return self.joiner.join(self.named(name, self.encode(v)) for v in values)
        return self.named(name, ",".join(self.encode(v) for v in values))

    def render_map(
        self, name: str, pairs: list[tuple[str, str]], explode: bool
    ) -> str | None:
        rendered = super().render_map(name, pairs, explode)
        if explode:
            return rendered
        return self.named(name, rendered)


class SimpleExpansion(Operator):
    """RFC 6570 (3.2.2) Simple String Expansion: {var}"""


class ReservedExpansion(Operator):
    """RFC 6570 (3.2.3) Reserved Expansion: {+var}"""

    marker = "+"
    safe = RESERVED_SAFE


class FragmentExpansion(Operator):
    """RFC 6570 (3.2.4) Fragment Expansion: {#var}"""

    marker = "#"
    prefix = "#"
    safe = FRAGMENT_SAFE


class LabelExpansion(Operator):
    """RFC 6570 (3.2.5) Label Expansion with Dot-Prefix: {.var}"""

    marker = "."
    prefix = "."
    joiner = "."
    omit_empty_list = True


class PathSegmentExpansion(Operator):
    """RFC 6570 (3.2.6) Path Segment Expansion: {/var}"""

    marker = "/"
    prefix = "/"
    joiner = "/"
    omit_empty_list = True


class PathStyleExpansion(NamedOperator):
    """RFC 6570 (3.2.7) Path-Style Parameter Expansion: {;var}

    An empty string renders as the bare name, without `=`.
    """

    marker = ";"
    prefix = ";"
    joiner = ";"

    def render_string(self, name: str, value: str, prefix: int | None) -> str | None:
        if not value:
            return self.encode(name)
        return super().render_string(name, value, prefix)


class FormQueryExpansion(NamedOperator):
    """RFC 6570 (3.2.8) Form-Style Query Expansion: {?var}"""

    marker = "?"
    prefix = "?"
    joiner = "&"
    omit_empty_list = True
    omit_empty_map = True


class FormContinuationExpansion(NamedOperator):
    """RFC 6570 (3.2.9) Form-Style Query Continuation: {&var}"""

    marker = "&"
    prefix = "&"
    joiner = "&"
    omit_empty_list = True
    omit_empty_map = True


SIMPLE = SimpleExpansion()

OPERATORS: dict[str, Operator] = {
    op.marker: op
    for op in (
        ReservedExpansion(),
        FragmentExpansion(),
        LabelExpansion(),
        PathSegmentExpansion(),
        PathStyleExpansion(),
        FormQueryExpansion(),
        FormContinuationExpansion(),
    )
}


def get_operator(marker: str | None) -> Operator:
    """Look up the operator for a marker, falling back to simple expansion."""
    if marker is None:
        return SIMPLE
    return OPERATORS.get(marker, SIMPLE)
