"""
Structural route enumeration.

Lists the paths a user could take through the blueprint, ignoring access
gates: the result describes structure (documentation, visualisation), not
what a given role may reach. For permission-qualified answers use the
access gate evaluator at runtime.
"""

from __future__ import annotations

import logging

from ozrical_blueprint.models.contracts.blueprint import BlueprintDocument, BlueprintEdge
from ozrical_blueprint.models.contracts.session import RouteStep
from ozrical_blueprint.services.graph_inference import edges_by_source, nodes_by_id

logger = logging.getLogger(__name__)


def get_structural_routes(
    doc: BlueprintDocument,
    from_node_id: str | None = None,
) -> list[list[RouteStep]]:
    """
    Enumerate every simple path from a start node.

    The walk starts at ``from_node_id``, else the entry node, else the first
    node. It branches at every node with several outgoing edges and records a
    route only at a node with no outgoing edges. A branch that re-enters a
    node already on its path, or follows an edge to a missing node, is
    abandoned without recording anything. The visited set is per path, so
    sibling branches may share nodes.

    Returns:
        List of routes, each a list of RouteStep, in depth-first order.
        Empty when there is no usable start node.
    """
    start_id = from_node_id or doc.entry_node_id or (doc.nodes[0].id if doc.nodes else None)
    if start_id is None:
        return []

    nodes = nodes_by_id(doc)
    if start_id not in nodes:
        return []
    by_source = edges_by_source(doc)
    routes: list[list[RouteStep]] = []

    def walk(path: list[RouteStep], node_id: str, visited: frozenset[str]) -> None:
        node = nodes.get(node_id)
        if node_id in visited or node is None:
            return
        visited = visited | {node_id}
        path = [*path, RouteStep(node_id=node.id, label=node.label, type=node.type)]

        outgoing: list[BlueprintEdge] = by_source.get(node_id, [])
        if not outgoing:
            routes.append(path)
            return
        for edge in outgoing:
            walk(path, edge.target_node_id, visited)

    walk([], start_id, frozenset())
    logger.debug(f"Enumerated {len(routes)} structural routes from {start_id}")
    return routes
