"""Unit tests for context variables flowing along edges."""

from ozrical_blueprint.services.context_bridge import get_context_variables_for_node
from tests.helpers.factories import (
    EDGE_1,
    EDGE_2,
    NODE_A,
    NODE_B,
    NODE_C,
    NODE_D,
    build_document,
    edge_dict,
    node_dict,
)


class TestContextVariables:
    def test_edge_payload_merged(self, sample_blueprint):
        result = get_context_variables_for_node(sample_blueprint, NODE_C, {"locale": "es"})

        assert result == {"locale": "es", "clientId": 42}

    def test_payload_overrides_runtime_value(self, sample_blueprint):
        result = get_context_variables_for_node(sample_blueprint, NODE_C, {"clientId": 1})

        assert result["clientId"] == 42

    def test_node_without_incoming_payload(self, sample_blueprint):
        assert get_context_variables_for_node(sample_blueprint, NODE_D, {"x": 1}) == {"x": 1}

    def test_runtime_variables_not_modified(self, sample_blueprint):
        runtime = {"locale": "es"}

        get_context_variables_for_node(sample_blueprint, NODE_C, runtime)

        assert runtime == {"locale": "es"}

    def test_later_edges_win(self):
        doc = build_document(
            nodes=[node_dict(NODE_A, "auth"), node_dict(NODE_B, "auth"), node_dict(NODE_C, "view")],
            edges=[
                edge_dict(EDGE_1, NODE_A, NODE_C, contextPayload={"tab": "first", "a": 1}),
                edge_dict(EDGE_2, NODE_B, NODE_C, contextPayload={"tab": "second"}),
            ],
        )

        assert get_context_variables_for_node(doc, NODE_C, {}) == {"tab": "second", "a": 1}

    def test_upstream_connector_value_forwarded(self):
        doc = build_document(
            nodes=[node_dict(NODE_A, "connector", connectorId="crm"), node_dict(NODE_B, "view")],
            edges=[edge_dict(EDGE_1, NODE_A, NODE_B, contextPayload={"crm": "stale"})],
        )

        result = get_context_variables_for_node(doc, NODE_B, {"crm": [{"id": 1}]})

        assert result["crm"] == [{"id": 1}]

    def test_connector_without_runtime_value(self):
        doc = build_document(
            nodes=[node_dict(NODE_A, "connector", connectorId="crm"), node_dict(NODE_B, "view")],
            edges=[edge_dict(EDGE_1, NODE_A, NODE_B)],
        )

        assert get_context_variables_for_node(doc, NODE_B, {}) == {}
