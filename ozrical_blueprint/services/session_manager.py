"""
Session Manager

Mutable holder for the runtime session of a blueprint player: the session
context, the access context currently applied, and context variables.
Listeners are notified after every change.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ozrical_blueprint.models.contracts.session import AccessContextState, SessionContext

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class SessionManager:
    """Runtime session state with change notification."""

    def __init__(self, context: SessionContext | None = None):
        self._context = context or SessionContext()
        self._access_context: AccessContextState | None = None
        self._context_variables: dict[str, Any] = {}
        self._listeners: list[Listener] = []

    def on_context_changed(self, listener: Listener) -> Callable[[], None]:
        """Subscribe ``listener``; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    def get_context(self) -> SessionContext:
        return self._context.model_copy(deep=True)

    def set_context(self, **changes: Any) -> None:
        """Merge ``changes`` (roles, user_id, extra keys) into the session context."""
        data = self._context.model_dump()
        data.update(changes)
        self._context = SessionContext.model_validate(data)
        self._notify()

    def get_current_access_context(self) -> AccessContextState | None:
        return self._access_context

    def set_current_access_context(self, state: AccessContextState | None) -> None:
        self._access_context = state
        self._notify()

    def get_context_variables(self) -> dict[str, Any]:
        return dict(self._context_variables)

    def set_context_variable(self, key: str, value: Any) -> None:
        self._context_variables[key] = value
        self._notify()
