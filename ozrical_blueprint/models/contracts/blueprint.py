"""
App Blueprint Document Definitions

Core types for the blueprint graph: nodes, edges and the definitions
side-table (access gates, access contexts, user profile).

This module is the single source of truth for:
- Node types and their type-specific fields (AccessGateNode, ViewNode, etc.)
- Edges between nodes
- Rule definitions referenced by nodes (AccessGateDefinition, ...)
- The root BlueprintDocument aggregate

Python attributes are snake_case; the persisted JSON uses camelCase keys
(``entryNodeId``, ``allowedRoles``...). Both spellings are accepted on input.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    StrictFloat,
    StrictInt,
    StringConstraints,
    field_validator,
    model_serializer,
)
from pydantic.alias_generators import to_camel

from ozrical_blueprint.config import get_settings
from ozrical_blueprint.core.ids import UUID_PATTERN


# -----------------------------------------------------------------------------
# Literal Types
# -----------------------------------------------------------------------------

NodeType = Literal[
    # Root
    "app_router",
    # Navigation
    "menu",
    "view",
    "modal",
    # Logic
    "auth",
    "access_gate",
    "access_context",
    "redirector",
    "switch_role",
    # Data
    "connector",
    "state_injection",
]

NODE_TYPES: tuple[str, ...] = NodeType.__args__  # type: ignore[attr-defined]

# Nodes that may legitimately end a flow
TERMINAL_NODE_TYPES: frozenset[str] = frozenset({"view", "modal", "menu"})

LinkedResourceStatus = Literal["linked", "missing", "unassigned"]

AccessMode = Literal["read", "write", "delete", "read_only"]

UuidStr = Annotated[str, StringConstraints(pattern=UUID_PATTERN)]

VersionStr = Annotated[str, StringConstraints(min_length=1)]

# Coordinates must be JSON numbers: no numeric strings, no booleans
Coordinate = Union[StrictInt, StrictFloat]


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class BlueprintModel(BaseModel):
    """Shared config: camelCase aliases, None-valued optionals left out of dumps."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_serializer(mode="wrap")
    def _omit_empty_optionals(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if field.is_required() or getattr(self, name) is not None:
                continue
            data.pop(name, None)
            if field.alias:
                data.pop(field.alias, None)
        return data


class Position(BlueprintModel):
    """Editor-only canvas position. Semantically inert."""

    x: Coordinate
    y: Coordinate


# -----------------------------------------------------------------------------
# Nodes
# -----------------------------------------------------------------------------


class BlueprintNodeBase(BlueprintModel):
    """
    Base fields shared by all nodes.

    Unknown keys are kept in ``model_extra`` (the extension bag) and written
    back untouched, so documents produced by newer editors survive a
    load/save cycle.
    """

    model_config = ConfigDict(extra="allow")

    id: UuidStr = Field(description="Unique, stable node identifier")
    type: NodeType = Field(description="Node type")
    label: str = Field(description="Display label")
    position: Position = Field(description="Canvas position")

    @property
    def extension_fields(self) -> dict[str, Any]:
        """Unrecognised keys carried by this node."""
        return dict(self.model_extra or {})


class AppRouterNode(BlueprintNodeBase):
    """Application entry point."""

    type: Literal["app_router"] = "app_router"


class LinkedResourceNode(BlueprintNodeBase):
    """Navigation node that may point at an .ozw layout resource."""

    resource_id: str | None = Field(
        default=None, description="Workspace-relative path of the linked resource"
    )
    route: str | None = Field(default=None, description="Navigation route, e.g. /app/clients")
    linked_resource_status: LinkedResourceStatus | None = Field(
        default=None, description="Whether the linked resource exists"
    )


class MenuNode(LinkedResourceNode):
    """Menu entry."""

    type: Literal["menu"] = "menu"


class ViewNode(LinkedResourceNode):
    """Screen or view."""

    type: Literal["view"] = "view"


class ModalNode(LinkedResourceNode):
    """Modal dialog."""

    type: Literal["modal"] = "modal"


class AuthNode(BlueprintNodeBase):
    """Authentication point."""

    type: Literal["auth"] = "auth"


class AccessGateNode(BlueprintNodeBase):
    """Role-based gate; ``rule_id`` names an entry of ``definitions.access_gates``."""

    type: Literal["access_gate"] = "access_gate"
    rule_id: str | None = Field(default=None, description="Access gate definition id")


class AccessContextNode(BlueprintNodeBase):
    """Applies an access mode; ``context_id`` names an entry of ``definitions.access_contexts``."""

    type: Literal["access_context"] = "access_context"
    context_id: str | None = Field(default=None, description="Access context definition id")


class ConnectorNode(BlueprintNodeBase):
    """Binds data from a registered connector."""

    type: Literal["connector"] = "connector"
    connector_id: str | None = Field(default=None, description="Registered connector id")
    params: dict[str, Any] | None = Field(default=None, description="Connector parameters")


class StateInjectionNode(BlueprintNodeBase):
    """Injects a state key with a default value."""

    type: Literal["state_injection"] = "state_injection"
    key: str | None = None
    default_value: Any = None


class RedirectorNode(BlueprintNodeBase):
    """Redirects the flow."""

    type: Literal["redirector"] = "redirector"


class SwitchRoleNode(BlueprintNodeBase):
    """Branches the flow by role."""

    type: Literal["switch_role"] = "switch_role"


BlueprintNode = Annotated[
    Union[
        AppRouterNode,
        MenuNode,
        ViewNode,
        ModalNode,
        AuthNode,
        AccessGateNode,
        AccessContextNode,
        ConnectorNode,
        StateInjectionNode,
        RedirectorNode,
        SwitchRoleNode,
    ],
    Field(discriminator="type"),
]


# -----------------------------------------------------------------------------
# Edges
# -----------------------------------------------------------------------------


class BlueprintEdge(BlueprintModel):
    """Directed connection between two nodes. Endpoints may dangle."""

    id: UuidStr
    source_node_id: UuidStr
    target_node_id: UuidStr
    source_handle: str | None = None
    target_handle: str | None = None
    context_payload: dict[str, Any] | None = Field(
        default=None, description="Data injected into the target at traversal time"
    )


# -----------------------------------------------------------------------------
# Definitions
# -----------------------------------------------------------------------------


class AccessGateDefinition(BlueprintModel):
    """Who can pass a gate: allowed roles plus an optional expression."""

    id: str
    allowed_roles: list[str]
    expression: str | None = None


class ConnectorBinding(BlueprintModel):
    """Connector bound to an access context."""

    connector_id: str
    params: dict[str, Any] | None = None


class AccessContextDefinition(BlueprintModel):
    """Access mode per role, with optional connector bindings."""

    id: str
    access_mode_by_role: dict[str, AccessMode]
    connector_bindings: list[ConnectorBinding] | None = None


class UserProfileDefinition(BlueprintModel):
    """Roles known to the application."""

    roles: list[str]


class BlueprintDefinitions(BlueprintModel):
    """Named rule objects referenced by nodes."""

    access_gates: dict[str, AccessGateDefinition]
    access_contexts: dict[str, AccessContextDefinition]
    user_profile: UserProfileDefinition


# -----------------------------------------------------------------------------
# Document
# -----------------------------------------------------------------------------


class BlueprintDocument(BlueprintModel):
    """
    The root aggregate of an app blueprint.

    Immutable by convention: the command layer always returns a new
    document and never edits one in place.
    """

    version: VersionStr
    nodes: list[BlueprintNode]
    edges: list[BlueprintEdge]
    definitions: BlueprintDefinitions
    entry_node_id: UuidStr | None = Field(default=None, description="Traversal root")

    @field_validator("entry_node_id", mode="before")
    @classmethod
    def reject_null_entry(cls, value: Any) -> Any:
        """An absent entry is allowed; an explicit null is not."""
        if value is None:
            raise ValueError("entryNodeId must be a UUID string when present")
        return value

    def get_node(self, node_id: str) -> BlueprintNodeBase | None:
        """Return the node with ``node_id`` or None."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def get_edge(self, edge_id: str) -> BlueprintEdge | None:
        """Return the edge with ``edge_id`` or None."""
        for edge in self.edges:
            if edge.id == edge_id:
                return edge
        return None


def create_empty_blueprint(version: str | None = None) -> BlueprintDocument:
    """New document with no nodes, no edges, empty definitions and no entry."""
    return BlueprintDocument(
        version=version or get_settings().document_version,
        nodes=[],
        edges=[],
        definitions=BlueprintDefinitions(
            access_gates={},
            access_contexts={},
            user_profile=UserProfileDefinition(roles=[]),
        ),
    )
