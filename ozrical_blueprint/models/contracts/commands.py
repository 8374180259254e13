"""
Blueprint edit commands.

One command per user action in the editor. Commands are plain data,
discriminated by ``kind``; ``ozrical_blueprint.services.commands`` applies
them to a document.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import Field, TypeAdapter

from ozrical_blueprint.models.contracts.blueprint import (
    AccessMode,
    BlueprintModel,
    ConnectorBinding,
    LinkedResourceStatus,
    NodeType,
    Position,
)

HandleSide = Literal["left", "right"]


class CreateNode(BlueprintModel):
    """
    Append a node; ``payload`` is merged into the node body.

    Payload keys the node type does not model land in its extension bag.
    Modelled keys holding a value of the wrong type are dropped with a
    warning.
    """

    kind: Literal["CreateNode"] = "CreateNode"
    type: NodeType
    label: str
    position: Position
    payload: dict[str, Any] | None = None


class DeleteNode(BlueprintModel):
    """Remove a node and every edge touching it."""

    kind: Literal["DeleteNode"] = "DeleteNode"
    node_id: str


class MoveNode(BlueprintModel):
    kind: Literal["MoveNode"] = "MoveNode"
    node_id: str
    position: Position


class NodePatch(BlueprintModel):
    """Fields UpdateNode may change. Unset fields are left alone."""

    label: str | None = None
    resource_id: str | None = None
    route: str | None = None
    linked_resource_status: LinkedResourceStatus | None = None


class UpdateNode(BlueprintModel):
    kind: Literal["UpdateNode"] = "UpdateNode"
    node_id: str
    patch: NodePatch


class CreateEdge(BlueprintModel):
    """Append an edge. Endpoints are not checked here."""

    kind: Literal["CreateEdge"] = "CreateEdge"
    source_node_id: str
    target_node_id: str
    source_handle: HandleSide | None = None
    target_handle: HandleSide | None = None


class DeleteEdge(BlueprintModel):
    kind: Literal["DeleteEdge"] = "DeleteEdge"
    edge_id: str


class AccessGatePatch(BlueprintModel):
    """Partial AccessGateDefinition."""

    allowed_roles: list[str] | None = None
    expression: str | None = None


class AccessContextPatch(BlueprintModel):
    """Partial AccessContextDefinition."""

    access_mode_by_role: dict[str, AccessMode] | None = None
    connector_bindings: list[ConnectorBinding] | None = None


class EditAccessGate(BlueprintModel):
    """Upsert ``definitions.access_gates[gate_id]``."""

    kind: Literal["EditAccessGate"] = "EditAccessGate"
    gate_id: str
    definition: AccessGatePatch = Field(default_factory=AccessGatePatch)


class EditAccessContext(BlueprintModel):
    """Upsert ``definitions.access_contexts[context_id]``."""

    kind: Literal["EditAccessContext"] = "EditAccessContext"
    context_id: str
    definition: AccessContextPatch = Field(default_factory=AccessContextPatch)


class AddRole(BlueprintModel):
    kind: Literal["AddRole"] = "AddRole"
    role: str


class RemoveRole(BlueprintModel):
    kind: Literal["RemoveRole"] = "RemoveRole"
    role: str


BlueprintCommand = Annotated[
    Union[
        CreateNode,
        DeleteNode,
        MoveNode,
        UpdateNode,
        CreateEdge,
        DeleteEdge,
        EditAccessGate,
        EditAccessContext,
        AddRole,
        RemoveRole,
    ],
    Field(discriminator="kind"),
]

COMMAND_KINDS: frozenset[str] = frozenset(
    {
        "CreateNode",
        "DeleteNode",
        "MoveNode",
        "UpdateNode",
        "CreateEdge",
        "DeleteEdge",
        "EditAccessGate",
        "EditAccessContext",
        "AddRole",
        "RemoveRole",
    }
)

_command_adapter: TypeAdapter[BlueprintCommand] = TypeAdapter(BlueprintCommand)


def parse_command(raw: Any) -> BlueprintCommand | None:
    """
    Build a command from a mapping such as ``{"kind": "DeleteNode", "nodeId": ...}``.

    Returns None when ``kind`` is missing or not a known command kind.
    Raises pydantic.ValidationError when the kind is known but the fields
    do not match it.
    """
    if not isinstance(raw, dict) or raw.get("kind") not in COMMAND_KINDS:
        return None
    return _command_adapter.validate_python(raw)

