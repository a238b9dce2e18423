"""Exception hierarchy for URI template processing.

None of these escape the public API. Expansion is lenient by design and
extraction reports a mismatch as ``None``; these types only mark internal
failures so they can be logged and converted at the boundary.
"""

from __future__ import annotations


class URITemplateError(Exception):
    """Base exception for all URI template errors."""

    pass


class PatternCompilationError(URITemplateError):
    """Raised when the extraction pattern synthesized for a template is invalid.

    This indicates a bug in pattern synthesis, not a problem with the
    template or the candidate string.
    """

    pass
