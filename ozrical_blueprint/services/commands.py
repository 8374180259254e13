"""
Blueprint Command Service

Applies one edit command to a blueprint document and returns the edited
copy. The input document is never modified, so whole-document snapshots
taken by an undo/redo stack stay valid.

Commands never reject edits based on graph invariants (dangling endpoints,
cycles...): graph_inference reports those after the fact. Commands that
name an id which does not exist are silent no-ops.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from ozrical_blueprint.core.exceptions import BlueprintContractError
from ozrical_blueprint.core.ids import IdGenerator, create_id
from ozrical_blueprint.models.contracts.blueprint import (
    AccessContextDefinition,
    AccessGateDefinition,
    BlueprintDocument,
    BlueprintEdge,
    BlueprintNode,
    BlueprintNodeBase,
)
from ozrical_blueprint.models.contracts.commands import (
    AddRole,
    CreateEdge,
    CreateNode,
    DeleteEdge,
    DeleteNode,
    EditAccessContext,
    EditAccessGate,
    MoveNode,
    RemoveRole,
    UpdateNode,
    parse_command,
)

logger = logging.getLogger(__name__)

_node_adapter: TypeAdapter[BlueprintNode] = TypeAdapter(BlueprintNode)


def _build_node(data: dict[str, Any]) -> BlueprintNodeBase:
    """Validate a node body into its typed model. Unknown keys go to the extension bag."""
    try:
        return _node_adapter.validate_python(data)
    except ValidationError as e:
        raise BlueprintContractError(f"Command produced an invalid node: {e}") from e


def _node_index(doc: BlueprintDocument, node_id: str) -> int | None:
    for index, node in enumerate(doc.nodes):
        if node.id == node_id:
            return index
    return None


# =============================================================================
# Command handlers (each receives a private deep copy it may edit)
# =============================================================================


def _create_node(doc: BlueprintDocument, cmd: CreateNode, id_gen: IdGenerator) -> None:
    body: dict[str, Any] = {
        "id": id_gen(),
        "type": cmd.type,
        "label": cmd.label,
        "position": cmd.position.model_dump(),
    }
    # Payload may add type-specific or unknown fields but never re-type the node
    payload = {k: v for k, v in (cmd.payload or {}).items() if k not in ("id", "type")}
    try:
        node = _node_adapter.validate_python({**body, **payload})
    except ValidationError as e:
        # Known fields with the wrong type are dropped; the node keeps its defaults
        rejected = {err["loc"][1] for err in e.errors() if len(err["loc"]) > 1}
        dropped = sorted(k for k in payload if k in rejected or to_camel(k) in rejected)
        if not dropped:
            raise BlueprintContractError(f"Command produced an invalid node: {e}") from e
        logger.warning(f"Dropping invalid CreateNode payload fields: {', '.join(dropped)}")
        node = _build_node({**body, **{k: v for k, v in payload.items() if k not in dropped}})
    doc.nodes.append(node)
    if len(doc.nodes) == 1 or node.type == "app_router":
        doc.entry_node_id = node.id


def _delete_node(doc: BlueprintDocument, cmd: DeleteNode) -> None:
    doc.nodes = [n for n in doc.nodes if n.id != cmd.node_id]
    doc.edges = [
        e for e in doc.edges
        if e.source_node_id != cmd.node_id and e.target_node_id != cmd.node_id
    ]
    if doc.entry_node_id == cmd.node_id:
        doc.entry_node_id = doc.nodes[0].id if doc.nodes else None


def _move_node(doc: BlueprintDocument, cmd: MoveNode) -> None:
    index = _node_index(doc, cmd.node_id)
    if index is None:
        return
    doc.nodes[index] = doc.nodes[index].model_copy(update={"position": cmd.position.model_copy()})


def _update_node(doc: BlueprintDocument, cmd: UpdateNode) -> None:
    index = _node_index(doc, cmd.node_id)
    if index is None:
        return
    changes = {
        k: v for k, v in cmd.patch.model_dump(by_alias=True, exclude_unset=True).items()
        if v is not None
    }
    if not changes:
        return
    body = doc.nodes[index].model_dump(by_alias=True)
    body.update(changes)
    doc.nodes[index] = _build_node(body)


def _create_edge(doc: BlueprintDocument, cmd: CreateEdge, id_gen: IdGenerator) -> None:
    try:
        edge = BlueprintEdge(
            id=id_gen(),
            source_node_id=cmd.source_node_id,
            target_node_id=cmd.target_node_id,
            source_handle=cmd.source_handle,
            target_handle=cmd.target_handle,
        )
    except ValidationError as e:
        raise BlueprintContractError(f"Command produced an invalid edge: {e}") from e
    doc.edges.append(edge)


def _delete_edge(doc: BlueprintDocument, cmd: DeleteEdge) -> None:
    doc.edges = [e for e in doc.edges if e.id != cmd.edge_id]


def _edit_access_gate(doc: BlueprintDocument, cmd: EditAccessGate) -> None:
    gates = doc.definitions.access_gates
    existing = gates.get(cmd.gate_id)
    merged: dict[str, Any] = {
        "id": cmd.gate_id,
        "allowed_roles": list(existing.allowed_roles) if existing else [],
        "expression": existing.expression if existing else None,
    }
    merged.update(cmd.definition.model_dump(exclude_unset=True))
    if merged["allowed_roles"] is None:
        merged["allowed_roles"] = []
    gates[cmd.gate_id] = AccessGateDefinition.model_validate(merged)


def _edit_access_context(doc: BlueprintDocument, cmd: EditAccessContext) -> None:
    contexts = doc.definitions.access_contexts
    existing = contexts.get(cmd.context_id)
    merged: dict[str, Any] = {
        "id": cmd.context_id,
        "access_mode_by_role": dict(existing.access_mode_by_role) if existing else {},
        "connector_bindings": existing.connector_bindings if existing else None,
    }
    merged.update(cmd.definition.model_dump(exclude_unset=True))
    if merged["access_mode_by_role"] is None:
        merged["access_mode_by_role"] = {}
    contexts[cmd.context_id] = AccessContextDefinition.model_validate(merged)


def _add_role(doc: BlueprintDocument, cmd: AddRole) -> None:
    profile = doc.definitions.user_profile
    if cmd.role not in profile.roles:
        profile.roles = [*profile.roles, cmd.role]


def _remove_role(doc: BlueprintDocument, cmd: RemoveRole) -> None:
    profile = doc.definitions.user_profile
    profile.roles = [r for r in profile.roles if r != cmd.role]


# =============================================================================
# Entry point
# =============================================================================


def apply_command(
    doc: BlueprintDocument,
    cmd: Any,
    id_gen: IdGenerator | None = None,
) -> BlueprintDocument:
    """
    Apply a single edit command.

    Args:
        doc: Current document; left untouched
        cmd: A command model, or a mapping with a ``kind`` key
        id_gen: Id generator for new nodes/edges (defaults to UUID v4)

    Returns:
        A new, structurally independent document with the edit applied.
        Unknown command kinds return an unmodified copy.

    Raises:
        BlueprintContractError: ``doc`` is not a BlueprintDocument, or the
            id generator produced an id that is not UUID-shaped, or a
            command mapping has a known kind but malformed fields
    """
    if not isinstance(doc, BlueprintDocument):
        raise BlueprintContractError(
            f"apply_command expects a BlueprintDocument, got {type(doc).__name__}"
        )
    generate = id_gen or create_id

    if isinstance(cmd, dict):
        try:
            cmd = parse_command(cmd)
        except ValidationError as e:
            raise BlueprintContractError(f"Malformed blueprint command: {e}") from e

    next_doc = doc.model_copy(deep=True)

    if isinstance(cmd, CreateNode):
        _create_node(next_doc, cmd, generate)
    elif isinstance(cmd, DeleteNode):
        _delete_node(next_doc, cmd)
    elif isinstance(cmd, MoveNode):
        _move_node(next_doc, cmd)
    elif isinstance(cmd, UpdateNode):
        _update_node(next_doc, cmd)
    elif isinstance(cmd, CreateEdge):
        _create_edge(next_doc, cmd, generate)
    elif isinstance(cmd, DeleteEdge):
        _delete_edge(next_doc, cmd)
    elif isinstance(cmd, EditAccessGate):
        _edit_access_gate(next_doc, cmd)
    elif isinstance(cmd, EditAccessContext):
        _edit_access_context(next_doc, cmd)
    elif isinstance(cmd, AddRole):
        _add_role(next_doc, cmd)
    elif isinstance(cmd, RemoveRole):
        _remove_role(next_doc, cmd)
    else:
        logger.warning(f"Ignoring unrecognized blueprint command: {type(cmd).__name__}")
        return next_doc

    logger.debug(f"Applied {cmd.kind} command")
    return next_doc


def apply_commands(
    doc: BlueprintDocument,
    commands: list[Any],
    id_gen: IdGenerator | None = None,
) -> BlueprintDocument:
    """Apply several commands in order; convenient for fixtures and replays."""
    for cmd in commands:
        doc = apply_command(doc, cmd, id_gen=id_gen)
    return doc
