"""
Blueprint debugger stepping.

Pure one-step simulator for a debugger overlay: the editor keeps the
snapshot, calls step_debug() per click and highlights the current node and
the last gate decision.
"""

from __future__ import annotations

import logging

from ozrical_blueprint.models.contracts.blueprint import AccessGateNode, BlueprintDocument
from ozrical_blueprint.models.contracts.session import BlueprintDebugSnapshot, SessionContext
from ozrical_blueprint.services.access_gate_evaluator import AccessGateEvaluator
from ozrical_blueprint.services.graph_inference import nodes_by_id

logger = logging.getLogger(__name__)


def create_initial_debug_snapshot(session: SessionContext | dict) -> BlueprintDebugSnapshot:
    """Snapshot positioned before the entry node, with no gate evaluated yet."""
    if isinstance(session, dict):
        session = SessionContext.model_validate(session)
    return BlueprintDebugSnapshot(session=session)


def step_debug(
    blueprint: BlueprintDocument,
    snapshot: BlueprintDebugSnapshot,
    evaluator: AccessGateEvaluator | None = None,
) -> BlueprintDebugSnapshot:
    """
    Advance the debugger by one edge.

    From the current node (or the entry node, or the first node) follow the
    first outgoing edge, in document order, whose target exists. Entering an
    access gate node with a ``rule_id`` evaluates that gate for the
    snapshot's session; any other target is an unconditional pass.

    Returns:
        A new snapshot, or ``snapshot`` itself when there is nowhere to go
        (no current node, current node missing, no usable outgoing edge)
    """
    node_id = snapshot.current_node_id or blueprint.entry_node_id
    if node_id is None and blueprint.nodes:
        node_id = blueprint.nodes[0].id
    if node_id is None:
        return snapshot

    nodes = nodes_by_id(blueprint)
    if node_id not in nodes:
        return snapshot

    for edge in blueprint.edges:
        if edge.source_node_id != node_id or edge.target_node_id not in nodes:
            continue
        target = nodes[edge.target_node_id]

        if isinstance(target, AccessGateNode) and target.rule_id:
            gate_evaluator = evaluator or AccessGateEvaluator()
            passed = gate_evaluator.evaluate(target.rule_id, snapshot.session, blueprint)
            logger.debug(
                f"Debugger entered gate node {target.id}: "
                f"{target.rule_id} {'passed' if passed else 'denied'}"
            )
            return snapshot.model_copy(update={
                "current_node_id": target.id,
                "last_evaluated_gate_id": target.rule_id,
                "gate_passed": passed,
            })

        return snapshot.model_copy(update={
            "current_node_id": target.id,
            "last_evaluated_gate_id": None,
            "gate_passed": True,
        })

    return snapshot
