"""
Node layers used by the editor's layer filter and toolbox grouping.
"""

from typing import Literal

from ozrical_blueprint.models.contracts.blueprint import BlueprintDocument, BlueprintNodeBase

NodeLayer = Literal["root", "navigation", "logic", "data"]
LayerFilter = Literal["all", "root", "navigation", "logic", "data"]

NODE_LAYERS: dict[str, NodeLayer] = {
    "app_router": "root",
    "menu": "navigation",
    "view": "navigation",
    "modal": "navigation",
    "auth": "logic",
    "access_gate": "logic",
    "access_context": "logic",
    "redirector": "logic",
    "switch_role": "logic",
    "connector": "data",
    "state_injection": "data",
}


def get_node_layer(node: BlueprintNodeBase) -> NodeLayer:
    return NODE_LAYERS[node.type]


def filter_nodes_by_layer(doc: BlueprintDocument, layer: LayerFilter) -> list[BlueprintNodeBase]:
    """Nodes of ``doc`` in ``layer``, in document order. ``"all"`` keeps every node."""
    if layer == "all":
        return list(doc.nodes)
    return [node for node in doc.nodes if NODE_LAYERS[node.type] == layer]
