"""
Unit tests for the blueprint serializer.

Parse failures are returned, never raised, and keep the three failure
kinds (empty, syntax, schema) distinguishable.
"""

import json
import logging

import pytest

from ozrical_blueprint.core.exceptions import (
    DocumentSchemaError,
    DocumentSyntaxError,
    EmptyDocumentError,
)
from ozrical_blueprint.services.serializer import (
    is_blueprint_file,
    parse_blueprint,
    parse_blueprint_or_empty,
    serialize_blueprint,
)
from tests.helpers.factories import NODE_A, build_document, document_dict, node_dict


class TestParseBlueprint:
    def test_parses_valid_text(self, sample_blueprint_dict, sample_blueprint):
        result = parse_blueprint(json.dumps(sample_blueprint_dict))

        assert result.ok is True
        assert result.error is None
        assert result.document == sample_blueprint

    @pytest.mark.parametrize("text", ["", "   ", "\n\t\n"])
    def test_empty_text(self, text):
        result = parse_blueprint(text)

        assert result.ok is False
        assert result.document is None
        assert isinstance(result.error, EmptyDocumentError)

    def test_syntax_error_reports_position(self):
        result = parse_blueprint('{\n  "version": "1.0",\n  "nodes": [\n')

        assert result.ok is False
        assert isinstance(result.error, DocumentSyntaxError)
        assert result.error.line is not None
        assert result.error.column is not None
        assert "Invalid blueprint JSON" in result.error.message

    def test_deeply_nested_json_is_syntax_error(self):
        depth = 100_000
        text = '{"version": "1.0", "nodes": ' + "[" * depth + "]" * depth + "}"

        result = parse_blueprint(text)

        assert result.ok is False
        assert result.document is None
        assert isinstance(result.error, DocumentSyntaxError)
        assert result.error.line is None
        assert "Invalid blueprint JSON" in result.error.message

    def test_deeply_nested_json_falls_back_to_empty(self):
        depth = 100_000
        doc, error = parse_blueprint_or_empty("[" * depth + "]" * depth)

        assert doc.nodes == []
        assert isinstance(error, DocumentSyntaxError)

    def test_schema_error_carries_detail(self):
        raw = document_dict(nodes=[node_dict(NODE_A, "spaceship")])

        result = parse_blueprint(json.dumps(raw))

        assert result.ok is False
        assert isinstance(result.error, DocumentSchemaError)
        assert result.error.path.startswith("nodes.0")
        assert result.error.issues

    def test_valid_json_of_wrong_shape_is_schema_error(self):
        result = parse_blueprint("[1, 2, 3]")

        assert isinstance(result.error, DocumentSchemaError)


class TestSerializeBlueprint:
    def test_two_space_indentation(self, sample_blueprint):
        text = serialize_blueprint(sample_blueprint)

        assert text.startswith('{\n  "version": "1.0",')
        assert not text.endswith("\n")

    def test_camel_case_keys_and_no_nulls(self, sample_blueprint):
        text = serialize_blueprint(sample_blueprint)

        assert '"entryNodeId"' in text
        assert '"sourceNodeId"' in text
        assert "entry_node_id" not in text
        assert "null" not in text

    def test_non_ascii_kept(self):
        doc = build_document(nodes=[node_dict(NODE_A, "view", "Clientes – España")])

        assert "Clientes – España" in serialize_blueprint(doc)

    def test_indent_from_settings(self, monkeypatch, sample_blueprint):
        monkeypatch.setenv("OZRICAL_BLUEPRINT_JSON_INDENT", "4")

        assert serialize_blueprint(sample_blueprint).startswith('{\n    "version"')


class TestRoundTrip:
    def test_sample_round_trip(self, sample_blueprint):
        result = parse_blueprint(serialize_blueprint(sample_blueprint))

        assert result.document == sample_blueprint

    def test_extension_keys_survive(self):
        doc = build_document(
            nodes=[node_dict(NODE_A, "connector", connectorId="crm", params={"limit": 5}, theme={"dark": True})],
            entry=NODE_A,
        )

        restored = parse_blueprint(serialize_blueprint(doc)).document

        assert restored == doc
        assert restored.nodes[0].extension_fields == {"theme": {"dark": True}}
        assert restored.nodes[0].params == {"limit": 5}

    def test_float_positions_survive(self):
        raw = document_dict(nodes=[node_dict(NODE_A)])
        raw["nodes"][0]["position"] = {"x": 12.5, "y": -3}
        doc = build_document(nodes=raw["nodes"])

        restored = parse_blueprint(serialize_blueprint(doc)).document

        assert restored.nodes[0].position.x == 12.5
        assert restored.nodes[0].position.y == -3


class TestParseBlueprintOrEmpty:
    def test_valid_text(self, sample_blueprint):
        document, error = parse_blueprint_or_empty(serialize_blueprint(sample_blueprint))

        assert document == sample_blueprint
        assert error is None

    def test_empty_text_gives_fresh_document_without_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="ozrical_blueprint"):
            document, error = parse_blueprint_or_empty("")

        assert document.nodes == []
        assert error is None
        assert not caplog.records

    def test_bad_text_falls_back_and_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="ozrical_blueprint"):
            document, error = parse_blueprint_or_empty("{not json")

        assert document.nodes == []
        assert document.version == "1.0"
        assert isinstance(error, DocumentSyntaxError)
        assert "starting from an empty document" in caplog.text


class TestIsBlueprintFile:
    @pytest.mark.parametrize(
        "path,expected",
        [
            ("app.blueprint", True),
            ("apps/crm/app.blueprint", True),
            ("app.blueprint.json", True),
            ("app.json", False),
            ("app.ozw", False),
            ("blueprint", False),
        ],
    )
    def test_recognises_extensions(self, path, expected):
        assert is_blueprint_file(path) is expected
