"""
Blueprint serializer for .blueprint files.

Reads and writes the persisted JSON form of a BlueprintDocument. Parsing
applies the schema validator; every failure is returned as a discriminated
result, never raised:

- EmptyDocumentError: empty or whitespace-only text
- DocumentSyntaxError: text is not JSON
- DocumentSchemaError: JSON that does not match the document shape

Stateless: no file-system access, callers own reading and writing text.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import PurePath

from ozrical_blueprint.config import get_settings
from ozrical_blueprint.core.exceptions import (
    BlueprintError,
    DocumentSyntaxError,
    EmptyDocumentError,
)
from ozrical_blueprint.models.contracts.blueprint import BlueprintDocument, create_empty_blueprint
from ozrical_blueprint.services.schema_validation import validate_blueprint_document

logger = logging.getLogger(__name__)

BLUEPRINT_EXTENSION = ".blueprint"
DEFAULT_BLUEPRINT_FILENAME = "app.blueprint"


@dataclass
class ParseResult:
    """Result of parsing blueprint text. ``document`` is set iff ``ok``."""
    ok: bool
    document: BlueprintDocument | None = None
    error: BlueprintError | None = None


# =============================================================================
# Parse / Serialize
# =============================================================================


def parse_blueprint(text: str) -> ParseResult:
    """Parse blueprint JSON text into a validated BlueprintDocument."""
    trimmed = text.strip() if text else ""
    if not trimmed:
        return ParseResult(ok=False, error=EmptyDocumentError())

    try:
        data = json.loads(trimmed)
    except json.JSONDecodeError as e:
        return ParseResult(
            ok=False,
            error=DocumentSyntaxError(
                f"Invalid blueprint JSON: {e.msg} (line {e.lineno}, column {e.colno})",
                line=e.lineno,
                column=e.colno,
            ),
        )
    except (RecursionError, ValueError) as e:
        # Nesting deeper than the decoder's recursion limit, or a number too
        # long to convert
        return ParseResult(
            ok=False,
            error=DocumentSyntaxError(f"Invalid blueprint JSON: {e}"),
        )

    result = validate_blueprint_document(data)
    if not result.success:
        return ParseResult(ok=False, error=result.error)
    return ParseResult(ok=True, document=result.document)


def serialize_blueprint(doc: BlueprintDocument) -> str:
    """
    Serialize a BlueprintDocument to pretty-printed JSON.

    camelCase keys, None-valued optional fields omitted, unknown node keys
    written back as they were read. Non-ASCII text is kept as-is.
    """
    data = doc.model_dump(mode="json", by_alias=True)
    return json.dumps(data, indent=get_settings().json_indent, ensure_ascii=False)


def parse_blueprint_or_empty(text: str) -> tuple[BlueprintDocument, BlueprintError | None]:
    """
    Load contract used by editors: never lose the session over bad text.

    Returns the parsed document, or a fresh empty document plus the error
    that prevented parsing. Empty text yields an empty document and no
    warning.
    """
    result = parse_blueprint(text)
    if result.ok and result.document is not None:
        return result.document, None
    if isinstance(result.error, EmptyDocumentError):
        return create_empty_blueprint(), None

    logger.warning(f"Blueprint parse error, starting from an empty document: {result.error}")
    return create_empty_blueprint(), result.error


# =============================================================================
# Utilities
# =============================================================================


def is_blueprint_file(path: str | PurePath) -> bool:
    """True for ``*.blueprint`` files and ``*.blueprint.json`` files."""
    p = PurePath(path)
    if p.suffix == BLUEPRINT_EXTENSION:
        return True
    return p.suffix == ".json" and PurePath(p.stem).suffix == BLUEPRINT_EXTENSION
