"""
Data connectors.

The engine asks "I need data for this node"; the registry looks up the
connector bound to the node's ``connector_id`` and runs it. New connection
types (SQL, REST...) plug in without touching the core.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Connector(Protocol):
    """A data source addressable by id."""

    id: str

    async def fetch(self, params: dict[str, Any]) -> Any:
        ...


class ConnectorRegistry:
    """Connectors by id. Registering an existing id replaces it."""

    def __init__(self):
        self._connectors: dict[str, Connector] = {}

    def register(self, connector: Connector) -> None:
        if connector.id in self._connectors:
            logger.warning(f"Replacing registered connector '{connector.id}'")
        self._connectors[connector.id] = connector

    def unregister(self, connector_id: str) -> None:
        self._connectors.pop(connector_id, None)

    def get(self, connector_id: str) -> Connector | None:
        return self._connectors.get(connector_id)

    async def fetch(self, connector_id: str, params: dict[str, Any] | None = None) -> Any:
        """
        Run connector ``connector_id``.

        Raises:
            KeyError: No connector is registered under that id
        """
        connector = self._connectors.get(connector_id)
        if connector is None:
            raise KeyError(f"No connector registered with id '{connector_id}'")
        return await connector.fetch(params or {})


class MemoryConnector:
    """In-memory connector returning canned data keyed by the request params."""

    def __init__(self, id: str, data: dict[str, Any] | None = None):
        self.id = id
        self.data = data or {}

    @staticmethod
    def key_for(params: dict[str, Any]) -> str:
        return json.dumps(params, sort_keys=True, separators=(",", ":"))

    async def fetch(self, params: dict[str, Any]) -> Any:
        return self.data.get(self.key_for(params), [])
