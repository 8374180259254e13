"""
ozrical-blueprint: the app blueprint graph engine.

Public surface:
    parse_blueprint / serialize_blueprint      text <-> BlueprintDocument
    validate_blueprint_document                structural (schema) validation
    validate_graph                             graph diagnostics
    apply_command                              pure document edits
    evaluate_access_gate / AccessGateEvaluator role-based gates
    get_structural_routes                      path enumeration
    create_initial_debug_snapshot / step_debug debugger stepping
"""

from ozrical_blueprint.core.exceptions import (
    BlueprintContractError,
    BlueprintError,
    DocumentSchemaError,
    DocumentSyntaxError,
    EmptyDocumentError,
)
from ozrical_blueprint.core.ids import IdGenerator, create_id, sequential_id_generator
from ozrical_blueprint.models.contracts import BlueprintDocument, SessionContext, create_empty_blueprint
from ozrical_blueprint.services.access_gate_evaluator import (
    AccessGateEvaluator,
    ExpressionEvaluator,
    evaluate_access_gate,
)
from ozrical_blueprint.services.commands import apply_command, apply_commands
from ozrical_blueprint.services.debugger import create_initial_debug_snapshot, step_debug
from ozrical_blueprint.services.graph_inference import GraphIssue, GraphValidationResult, validate_graph
from ozrical_blueprint.services.routes import get_structural_routes
from ozrical_blueprint.services.schema_validation import (
    SchemaValidationResult,
    validate_blueprint_document,
)
from ozrical_blueprint.services.serializer import (
    ParseResult,
    parse_blueprint,
    parse_blueprint_or_empty,
    serialize_blueprint,
)

__version__ = "0.1.0"

__all__ = [
    "AccessGateEvaluator",
    "BlueprintContractError",
    "BlueprintDocument",
    "BlueprintError",
    "DocumentSchemaError",
    "DocumentSyntaxError",
    "EmptyDocumentError",
    "ExpressionEvaluator",
    "GraphIssue",
    "GraphValidationResult",
    "IdGenerator",
    "ParseResult",
    "SchemaValidationResult",
    "SessionContext",
    "apply_command",
    "apply_commands",
    "create_empty_blueprint",
    "create_id",
    "create_initial_debug_snapshot",
    "evaluate_access_gate",
    "get_structural_routes",
    "parse_blueprint",
    "parse_blueprint_or_empty",
    "sequential_id_generator",
    "serialize_blueprint",
    "step_debug",
    "validate_blueprint_document",
    "validate_graph",
]
