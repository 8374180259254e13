"""
Blueprint Graph Inference

Walks the node/edge graph of a blueprint and reports structural problems:
orphan edges, invalid entry, cycles, unreachable nodes, dead ends and
node references to undefined gate/context definitions.

Diagnostics are values, not exceptions. Callers decide what to block on
(typically: publish is gated on errors, warnings are shown as hints).
Pure and O(nodes + edges); safe to run on every edit.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Literal

from ozrical_blueprint.models.contracts.blueprint import (
    TERMINAL_NODE_TYPES,
    AccessContextNode,
    AccessGateNode,
    BlueprintDocument,
    BlueprintEdge,
    BlueprintNodeBase,
)

logger = logging.getLogger(__name__)

IssueKind = Literal[
    "dead_end",
    "cycle",
    "unreachable",
    "missing_gate_definition",
    "missing_context_definition",
    "invalid_entry",
    "orphan_edge",
]


@dataclass
class GraphIssue:
    """A single diagnostic. Which ids are set depends on ``kind``."""
    kind: IssueKind
    message: str
    node_id: str | None = None
    edge_id: str | None = None
    definition_id: str | None = None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "message": self.message,
            "nodeId": self.node_id,
            "edgeId": self.edge_id,
            "definitionId": self.definition_id,
        }


@dataclass
class GraphValidationResult:
    """``ok`` is True iff there are no errors; warnings never affect it."""
    ok: bool
    errors: list[GraphIssue] = field(default_factory=list)
    warnings: list[GraphIssue] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "errors": [issue.to_dict() for issue in self.errors],
            "warnings": [issue.to_dict() for issue in self.warnings],
        }


# =============================================================================
# Graph indexes
# =============================================================================


def nodes_by_id(doc: BlueprintDocument) -> dict[str, BlueprintNodeBase]:
    return {node.id: node for node in doc.nodes}


def edges_by_source(doc: BlueprintDocument) -> dict[str, list[BlueprintEdge]]:
    """Outgoing edges per node id, in document order."""
    index: dict[str, list[BlueprintEdge]] = defaultdict(list)
    for edge in doc.edges:
        index[edge.source_node_id].append(edge)
    return index


def edges_by_target(doc: BlueprintDocument) -> dict[str, list[BlueprintEdge]]:
    """Incoming edges per node id, in document order."""
    index: dict[str, list[BlueprintEdge]] = defaultdict(list)
    for edge in doc.edges:
        index[edge.target_node_id].append(edge)
    return index


def _reachable_with_cycle(
    start_id: str,
    nodes: dict[str, BlueprintNodeBase],
    by_source: dict[str, list[BlueprintEdge]],
) -> tuple[set[str], str | None]:
    """
    Depth-first walk from ``start_id``.

    Returns the visited node ids and the first node found to be re-entered
    while still on the active path (None when the reachable subgraph is
    acyclic). Edges to missing nodes are skipped.
    """
    reachable: set[str] = set()
    on_stack: set[str] = set()
    cycle_node_id: str | None = None

    # Iterative DFS: (node_id, index of next outgoing edge to try)
    reachable.add(start_id)
    on_stack.add(start_id)
    stack: list[tuple[str, int]] = [(start_id, 0)]
    while stack:
        node_id, next_edge = stack[-1]
        outgoing = by_source.get(node_id, [])
        if next_edge >= len(outgoing):
            stack.pop()
            on_stack.discard(node_id)
            continue
        stack[-1] = (node_id, next_edge + 1)

        target = outgoing[next_edge].target_node_id
        if target not in nodes:
            continue
        if target in on_stack:
            if cycle_node_id is None:
                cycle_node_id = target
            continue
        if target in reachable:
            continue
        reachable.add(target)
        on_stack.add(target)
        stack.append((target, 0))

    return reachable, cycle_node_id


# =============================================================================
# Validation
# =============================================================================


def validate_graph(doc: BlueprintDocument) -> GraphValidationResult:
    """
    Validate the blueprint graph.

    Checks, in emission order:
    1. Orphan edges: one error per endpoint that names a missing node
    2. Entry: explicit entry must exist (error); no entry -> first node is
       used, with a warning
    3. From the entry: first cycle found (error), unreachable nodes (warnings)
    4. Dead ends: non-terminal nodes with incoming but no outgoing edges
       (warnings); view, modal and menu may end a flow
    5. Access gate / access context nodes referencing undefined definitions
       (errors)

    Returns:
        GraphValidationResult with errors and warnings
    """
    errors: list[GraphIssue] = []
    warnings: list[GraphIssue] = []
    nodes = nodes_by_id(doc)
    by_source = edges_by_source(doc)
    by_target = edges_by_target(doc)

    # Step 1: Orphan edges
    for edge in doc.edges:
        if edge.source_node_id not in nodes:
            errors.append(GraphIssue(
                kind="orphan_edge",
                edge_id=edge.id,
                message=f"Edge {edge.id} references missing source node {edge.source_node_id}",
            ))
        if edge.target_node_id not in nodes:
            errors.append(GraphIssue(
                kind="orphan_edge",
                edge_id=edge.id,
                message=f"Edge {edge.id} references missing target node {edge.target_node_id}",
            ))

    # Step 2: Entry resolution
    entry_id: str | None = None
    if doc.entry_node_id is not None:
        if doc.entry_node_id in nodes:
            entry_id = doc.entry_node_id
        else:
            errors.append(GraphIssue(
                kind="invalid_entry",
                node_id=doc.entry_node_id,
                message=f"Entry node {doc.entry_node_id} not found in nodes",
            ))
    elif doc.nodes:
        entry_id = doc.nodes[0].id
        warnings.append(GraphIssue(
            kind="invalid_entry",
            node_id=entry_id,
            message="No entryNodeId set; first node will be used as entry",
        ))

    # Step 3: Reachability and cycles
    if entry_id is not None:
        reachable, cycle_node_id = _reachable_with_cycle(entry_id, nodes, by_source)
        if cycle_node_id is not None:
            errors.append(GraphIssue(
                kind="cycle",
                node_id=cycle_node_id,
                message=f"Cycle detected involving node {cycle_node_id}",
            ))
        for node in doc.nodes:
            if node.id not in reachable:
                warnings.append(GraphIssue(
                    kind="unreachable",
                    node_id=node.id,
                    message=f"Node {node.id} ({node.label}) is unreachable from entry",
                ))

    # Step 4: Dead ends
    for node in doc.nodes:
        if node.type in TERMINAL_NODE_TYPES or by_source.get(node.id):
            continue
        if by_target.get(node.id):
            warnings.append(GraphIssue(
                kind="dead_end",
                node_id=node.id,
                message=f"Node {node.id} ({node.label}) has no outgoing edges (dead end)",
            ))

    # Step 5: Definition references
    definitions = doc.definitions
    for node in doc.nodes:
        if isinstance(node, AccessGateNode) and node.rule_id:
            if node.rule_id not in definitions.access_gates:
                errors.append(GraphIssue(
                    kind="missing_gate_definition",
                    node_id=node.id,
                    definition_id=node.rule_id,
                    message=f"Access Gate node {node.id} references undefined gate definition {node.rule_id}",
                ))
        elif isinstance(node, AccessContextNode) and node.context_id:
            if node.context_id not in definitions.access_contexts:
                errors.append(GraphIssue(
                    kind="missing_context_definition",
                    node_id=node.id,
                    definition_id=node.context_id,
                    message=f"Access Context node {node.id} references undefined context definition {node.context_id}",
                ))

    logger.debug(
        f"Graph validation: {len(doc.nodes)} nodes, {len(doc.edges)} edges, "
        f"{len(errors)} errors, {len(warnings)} warnings"
    )
    return GraphValidationResult(ok=not errors, errors=errors, warnings=warnings)
