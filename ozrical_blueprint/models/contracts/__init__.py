"""
Blueprint contract models (pydantic).

    from ozrical_blueprint.models.contracts import BlueprintDocument, CreateNode
    from ozrical_blueprint.models.contracts.blueprint import ViewNode  # Granular access
"""

from ozrical_blueprint.models.contracts.blueprint import (
    NODE_TYPES,
    TERMINAL_NODE_TYPES,
    AccessContextDefinition,
    AccessContextNode,
    AccessGateDefinition,
    AccessGateNode,
    AccessMode,
    AppRouterNode,
    AuthNode,
    BlueprintDefinitions,
    BlueprintDocument,
    BlueprintEdge,
    BlueprintNode,
    BlueprintNodeBase,
    ConnectorBinding,
    ConnectorNode,
    LinkedResourceNode,
    LinkedResourceStatus,
    MenuNode,
    ModalNode,
    NodeType,
    Position,
    RedirectorNode,
    StateInjectionNode,
    SwitchRoleNode,
    UserProfileDefinition,
    ViewNode,
    create_empty_blueprint,
)
from ozrical_blueprint.models.contracts.commands import (
    COMMAND_KINDS,
    AccessContextPatch,
    AccessGatePatch,
    AddRole,
    BlueprintCommand,
    CreateEdge,
    CreateNode,
    DeleteEdge,
    DeleteNode,
    EditAccessContext,
    EditAccessGate,
    MoveNode,
    NodePatch,
    RemoveRole,
    UpdateNode,
    parse_command,
)
from ozrical_blueprint.models.contracts.session import (
    AccessContextState,
    BlueprintDebugSnapshot,
    RouteStep,
    SessionContext,
)

__all__ = [
    # Document
    "NODE_TYPES",
    "TERMINAL_NODE_TYPES",
    "AccessContextDefinition",
    "AccessContextNode",
    "AccessGateDefinition",
    "AccessGateNode",
    "AccessMode",
    "AppRouterNode",
    "AuthNode",
    "BlueprintDefinitions",
    "BlueprintDocument",
    "BlueprintEdge",
    "BlueprintNode",
    "BlueprintNodeBase",
    "ConnectorBinding",
    "ConnectorNode",
    "LinkedResourceNode",
    "LinkedResourceStatus",
    "MenuNode",
    "ModalNode",
    "NodeType",
    "Position",
    "RedirectorNode",
    "StateInjectionNode",
    "SwitchRoleNode",
    "UserProfileDefinition",
    "ViewNode",
    "create_empty_blueprint",
    # Commands
    "COMMAND_KINDS",
    "AccessContextPatch",
    "AccessGatePatch",
    "AddRole",
    "BlueprintCommand",
    "CreateEdge",
    "CreateNode",
    "DeleteEdge",
    "DeleteNode",
    "EditAccessContext",
    "EditAccessGate",
    "MoveNode",
    "NodePatch",
    "RemoveRole",
    "UpdateNode",
    "parse_command",
    # Session
    "AccessContextState",
    "BlueprintDebugSnapshot",
    "RouteStep",
    "SessionContext",
]
