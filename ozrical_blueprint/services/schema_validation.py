"""
Blueprint Schema Validation

Structural (type-level) validation of a raw, JSON-shaped value against the
BlueprintDocument shape. Graph-level checks (cycles, reachability, dangling
references) live in graph_inference.

Never raises for bad input: failures come back as a DocumentSchemaError
inside the result.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from ozrical_blueprint.core.exceptions import DocumentSchemaError
from ozrical_blueprint.models.contracts.blueprint import NODE_TYPES, BlueprintDocument

logger = logging.getLogger(__name__)

_ACCESS_MODES = "one of: read, write, delete, read_only"

# Strict coordinate fields and the union member tags pydantic appends under them
_COORDINATE_FIELDS = ("x", "y")
_NUMBER_MEMBER_TAGS = {"int", "float", "constrained-int", "constrained-float"}

# pydantic error type -> what the document should have held instead
EXPECTED_BY_ERROR_TYPE: dict[str, str] = {
    "missing": "required field",
    "string_type": "string",
    "string_too_short": "non-empty string",
    "string_pattern_mismatch": "UUID-shaped string",
    "int_type": "number",
    "float_type": "number",
    "float_parsing": "number",
    "bool_type": "boolean",
    "list_type": "array",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
    "union_tag_invalid": f"node type, one of: {', '.join(NODE_TYPES)}",
    "union_tag_not_found": "object with a 'type' field",
}


@dataclass
class SchemaValidationResult:
    """Outcome of validating a raw value."""
    success: bool
    document: BlueprintDocument | None = None
    error: DocumentSchemaError | None = None
    issues: list[dict[str, Any]] = field(default_factory=list)


def _format_path(loc: tuple[int | str, ...]) -> str:
    """
    Join a pydantic location into a dotted path.

    The discriminated node union inserts the node type into the location
    (``nodes.0.view.label``) and the strict number union inserts the member
    it tried (``position.x.int``); both segments are dropped.
    """
    parts: list[str] = []
    for index, segment in enumerate(loc):
        if index >= 1 and loc[index - 1] in _COORDINATE_FIELDS and segment in _NUMBER_MEMBER_TAGS:
            continue
        if (
            index >= 2
            and loc[0] == "nodes"
            and isinstance(loc[index - 1], int)
            and segment in NODE_TYPES
        ):
            continue
        parts.append(str(segment))
    return ".".join(parts)


def _expected_for(error: dict[str, Any]) -> str:
    error_type = error.get("type", "")
    if error_type == "value_error":
        return str((error.get("ctx") or {}).get("error", error.get("msg", "")))
    if error_type == "literal_error":
        expected = (error.get("ctx") or {}).get("expected")
        if expected and "read_only" in expected:
            return _ACCESS_MODES
        return f"one of: {expected}" if expected else error.get("msg", "")
    return EXPECTED_BY_ERROR_TYPE.get(error_type, error.get("msg", ""))


def _schema_error_from_validation(exc: ValidationError) -> DocumentSchemaError:
    errors = exc.errors(include_url=False)
    issues: list[dict[str, Any]] = []
    seen: set[tuple[str, str]] = set()
    for err in errors:
        path, expected = _format_path(tuple(err["loc"])), _expected_for(err)
        # A union reports one failure per member at the same place
        if (path, expected) in seen:
            continue
        seen.add((path, expected))
        issues.append({"path": path, "expected": expected, "message": err["msg"], "type": err["type"]})
    first = issues[0]
    where = first["path"] or "<document>"
    return DocumentSchemaError(
        message=f"Invalid blueprint at '{where}': expected {first['expected']} ({first['message']})",
        path=first["path"],
        expected=first["expected"],
        issues=issues,
    )


def _duplicate_id_error(document: BlueprintDocument) -> DocumentSchemaError | None:
    """Node ids and edge ids must each be unique within the document."""
    for collection, items in (("nodes", document.nodes), ("edges", document.edges)):
        seen: set[str] = set()
        for index, item in enumerate(items):
            if item.id not in seen:
                seen.add(item.id)
                continue
            path = f"{collection}.{index}.id"
            issue = {
                "path": path,
                "expected": "unique id",
                "message": f"Duplicate id {item.id}",
                "type": "duplicate_id",
            }
            return DocumentSchemaError(
                message=f"Invalid blueprint at '{path}': expected unique id (duplicate {item.id})",
                path=path,
                expected="unique id",
                issues=[issue],
            )
    return None


def validate_blueprint_document(raw: Any) -> SchemaValidationResult:
    """
    Validate an untyped, JSON-shaped value as a blueprint document.

    Checks:
    - ``version`` is a non-empty string
    - every node ``type`` is one of the known node types
    - node/edge ids, edge endpoints and ``entryNodeId`` are UUID-shaped
    - ``accessModeByRole`` values are read | write | delete | read_only
    - node ids and edge ids are unique

    Unknown keys on nodes are kept (forward compatibility).

    Args:
        raw: Parsed JSON value (usually a dict)

    Returns:
        SchemaValidationResult with the typed document on success, or the
        first mismatch (path + expected type) on failure
    """
    try:
        document = BlueprintDocument.model_validate(raw)
    except ValidationError as e:
        error = _schema_error_from_validation(e)
        logger.debug(f"Blueprint schema validation failed: {error.message}")
        return SchemaValidationResult(success=False, error=error, issues=error.issues)

    duplicate = _duplicate_id_error(document)
    if duplicate is not None:
        logger.debug(f"Blueprint schema validation failed: {duplicate.message}")
        return SchemaValidationResult(success=False, error=duplicate, issues=duplicate.issues)

    return SchemaValidationResult(success=True, document=document)
