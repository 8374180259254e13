"""
Core Exceptions

Custom exceptions for the blueprint engine.

Parse and schema errors are *returned* inside result objects by the
serializer and the schema validator; they are never raised across the
module boundary. Only BlueprintContractError is raised, and it signals a
programming error in the caller.
"""

from typing import Any


class BlueprintError(Exception):
    """Base class for every blueprint engine error."""

    def __init__(self, message: str = "Blueprint error"):
        self.message = message
        super().__init__(self.message)


class EmptyDocumentError(BlueprintError):
    """
    Raised (returned) when the blueprint text is empty or whitespace-only.

    Callers use this to decide whether to synthesize a fresh document
    rather than surfacing a warning.
    """

    def __init__(self, message: str = "Empty blueprint document"):
        super().__init__(message)


class DocumentSyntaxError(BlueprintError):
    """The blueprint text is not valid JSON."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.line = line
        self.column = column
        super().__init__(message)


class DocumentSchemaError(BlueprintError):
    """
    The value does not match the blueprint document shape.

    Attributes:
        path: Dotted location of the first mismatch (e.g. ``nodes.2.type``)
        expected: Human-readable description of what was expected there
        issues: Every issue reported by the validator, first one included
    """

    def __init__(
        self,
        message: str,
        path: str = "",
        expected: str = "",
        issues: list[dict[str, Any]] | None = None,
    ):
        self.path = path
        self.expected = expected
        self.issues = issues or []
        super().__init__(message)


class BlueprintContractError(BlueprintError):
    """
    A caller broke the engine's calling contract (wrong argument type,
    id generator producing malformed ids, ...). Treat as a bug.
    """
