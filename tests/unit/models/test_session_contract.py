"""Contract tests for runtime session models."""

import pytest
from pydantic import ValidationError

from ozrical_blueprint.models.contracts.session import (
    AccessContextState,
    BlueprintDebugSnapshot,
    SessionContext,
)


class TestSessionContext:
    def test_defaults(self):
        context = SessionContext()

        assert context.roles == []
        assert context.user_id is None

    def test_extra_keys_kept(self):
        context = SessionContext.model_validate({"roles": ["admin"], "userId": "u1", "tenant": "acme"})

        assert context.user_id == "u1"
        assert context.model_extra == {"tenant": "acme"}


class TestAccessContextState:
    def test_access_mode_is_closed(self):
        with pytest.raises(ValidationError):
            AccessContextState(context_id="ctx1", access_mode="admin")


class TestDebugSnapshot:
    def test_initial_state(self):
        snapshot = BlueprintDebugSnapshot(session=SessionContext(roles=["viewer"]))

        assert snapshot.current_node_id is None
        assert snapshot.last_evaluated_gate_id is None
        assert snapshot.gate_passed is True
        assert snapshot.connector_data == {}
