"""Unit tests for in-memory blueprint save points."""

import logging

from ozrical_blueprint.models.contracts.commands import AddRole
from ozrical_blueprint.services.commands import apply_command
from ozrical_blueprint.services.versioner import BlueprintVersioner


class TestBlueprintVersioner:
    def test_save_point_ids_are_sequential(self, sample_blueprint):
        versioner = BlueprintVersioner()

        first = versioner.save_point(sample_blueprint)
        second = versioner.save_point(sample_blueprint, label="before publish")

        assert first.startswith("v1_")
        assert second.startswith("v2_")

    def test_list_versions_newest_first(self, sample_blueprint):
        versioner = BlueprintVersioner()
        versioner.save_point(sample_blueprint, label="one")
        versioner.save_point(sample_blueprint, label="two")

        assert [v.label for v in versioner.list_versions()] == ["two", "one"]

    def test_stored_copy_is_independent(self, sample_blueprint):
        versioner = BlueprintVersioner()
        version_id = versioner.save_point(sample_blueprint)

        restored = versioner.get_version(version_id)
        restored.definitions.user_profile.roles.append("intruder")

        assert versioner.get_version(version_id) == sample_blueprint

    def test_rollback_returns_saved_document(self, sample_blueprint):
        versioner = BlueprintVersioner()
        version_id = versioner.save_point(sample_blueprint)
        edited = apply_command(sample_blueprint, AddRole(role="auditor"))
        versioner.save_point(edited)

        assert versioner.rollback(version_id) == sample_blueprint

    def test_rollback_unknown_version(self, caplog):
        versioner = BlueprintVersioner()

        with caplog.at_level(logging.WARNING, logger="ozrical_blueprint"):
            assert versioner.rollback("v9_0") is None

        assert "unknown blueprint version v9_0" in caplog.text

    def test_get_unknown_version(self):
        assert BlueprintVersioner().get_version("nope") is None
