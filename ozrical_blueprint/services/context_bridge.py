"""
Context bridge: data flowing along edges.

Resolves the variables available when a flow arrives at a node, so a
player can inject them (e.g. a client id) into the target view.
"""

from typing import Any

from ozrical_blueprint.models.contracts.blueprint import BlueprintDocument, ConnectorNode
from ozrical_blueprint.services.graph_inference import nodes_by_id


def get_context_variables_for_node(
    blueprint: BlueprintDocument,
    node_id: str,
    runtime_variables: dict[str, Any],
) -> dict[str, Any]:
    """
    Collect the context variables visible at ``node_id``.

    Starts from ``runtime_variables`` and, for every incoming edge in
    document order:
    - merges the edge's ``context_payload`` (later edges win)
    - forwards the runtime value of an upstream connector node, keyed by
      its ``connector_id``

    Args:
        blueprint: Document to inspect
        node_id: Node the flow arrives at
        runtime_variables: Values known at runtime (connector outputs included)

    Returns:
        New dict; ``runtime_variables`` is not modified
    """
    result = dict(runtime_variables)
    nodes = nodes_by_id(blueprint)
    for edge in blueprint.edges:
        if edge.target_node_id != node_id:
            continue
        if edge.context_payload:
            result.update(edge.context_payload)
        source = nodes.get(edge.source_node_id)
        if isinstance(source, ConnectorNode) and source.connector_id:
            if runtime_variables.get(source.connector_id) is not None:
                result[source.connector_id] = runtime_variables[source.connector_id]
    return result
