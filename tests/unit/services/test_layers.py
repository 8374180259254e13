"""Unit tests for node layers."""

from ozrical_blueprint.models.contracts.blueprint import NODE_TYPES
from ozrical_blueprint.services.layers import NODE_LAYERS, filter_nodes_by_layer, get_node_layer
from tests.helpers.factories import NODE_A, NODE_B, NODE_C, NODE_D


class TestLayers:
    def test_every_node_type_has_a_layer(self):
        assert set(NODE_LAYERS) == set(NODE_TYPES)

    def test_get_node_layer(self, sample_blueprint):
        assert get_node_layer(sample_blueprint.get_node(NODE_A)) == "root"
        assert get_node_layer(sample_blueprint.get_node(NODE_B)) == "logic"

    def test_filter_by_layer(self, sample_blueprint):
        assert [n.id for n in filter_nodes_by_layer(sample_blueprint, "navigation")] == [NODE_C, NODE_D]
        assert [n.id for n in filter_nodes_by_layer(sample_blueprint, "logic")] == [NODE_B]
        assert filter_nodes_by_layer(sample_blueprint, "data") == []

    def test_all_keeps_everything(self, sample_blueprint):
        assert len(filter_nodes_by_layer(sample_blueprint, "all")) == 4
