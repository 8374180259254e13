"""Unit tests for the runtime session manager."""

from ozrical_blueprint.models.contracts.session import AccessContextState, SessionContext
from ozrical_blueprint.services.session_manager import SessionManager


class TestSessionManager:
    def test_set_context_merges_and_notifies(self):
        manager = SessionManager(SessionContext(user_id="u1"))
        calls = []
        manager.on_context_changed(lambda: calls.append("changed"))

        manager.set_context(roles=["admin"], tenant="acme")

        context = manager.get_context()
        assert context.user_id == "u1"
        assert context.roles == ["admin"]
        assert context.model_extra == {"tenant": "acme"}
        assert calls == ["changed"]

    def test_get_context_returns_copy(self):
        manager = SessionManager()

        manager.get_context().roles.append("admin")

        assert manager.get_context().roles == []

    def test_unsubscribe(self):
        manager = SessionManager()
        calls = []
        unsubscribe = manager.on_context_changed(lambda: calls.append(1))

        unsubscribe()
        unsubscribe()
        manager.set_context_variable("clientId", 42)

        assert calls == []
        assert manager.get_context_variables() == {"clientId": 42}

    def test_access_context(self):
        manager = SessionManager()
        calls = []
        manager.on_context_changed(lambda: calls.append(1))
        state = AccessContextState(context_id="ctx1", access_mode="write")

        manager.set_current_access_context(state)

        assert manager.get_current_access_context() == state
        assert calls == [1]

        manager.set_current_access_context(None)
        assert manager.get_current_access_context() is None
