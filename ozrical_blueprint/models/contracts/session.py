"""
Runtime contract models: session context, access context state, route
steps and debugger snapshots.
"""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field

from ozrical_blueprint.models.contracts.blueprint import AccessMode, BlueprintModel, NodeType


class SessionContext(BlueprintModel):
    """
    Who is traversing the blueprint.

    Hosts may attach arbitrary extra keys (tenant, locale, ...); they are
    kept and available to expression evaluators.
    """

    model_config = ConfigDict(extra="allow")

    user_id: str | None = None
    roles: list[str] = Field(default_factory=list)


class AccessContextState(BlueprintModel):
    """Access context currently applied to the session."""

    context_id: str
    access_mode: AccessMode
    connector_data: dict[str, Any] | None = None


class RouteStep(BlueprintModel):
    """One node on a structural route."""

    node_id: str
    label: str
    type: NodeType


class BlueprintDebugSnapshot(BlueprintModel):
    """
    Debugger state after a step: where we are, which gate was evaluated
    last and whether it passed.
    """

    current_node_id: str | None = None
    last_evaluated_gate_id: str | None = None
    gate_passed: bool = True
    connector_data: dict[str, Any] = Field(default_factory=dict)
    session: SessionContext
