"""
Blueprint Versioner

In-memory save points with rollback. Each save point stores an independent
copy of the document, so later edits never leak into stored versions.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from ozrical_blueprint.models.contracts.blueprint import BlueprintDocument

logger = logging.getLogger(__name__)


@dataclass
class BlueprintVersionEntry:
    """A stored save point."""
    id: str
    created_at: datetime
    document: BlueprintDocument
    label: str | None = None


class BlueprintVersioner:
    """Keeps save points for one blueprint in memory."""

    def __init__(self):
        self._versions: list[BlueprintVersionEntry] = []
        self._counter = itertools.count(1)

    def save_point(self, document: BlueprintDocument, label: str | None = None) -> str:
        """Store a copy of ``document`` and return the new version id."""
        created_at = datetime.now(timezone.utc)
        version_id = f"v{next(self._counter)}_{int(created_at.timestamp() * 1000)}"
        self._versions.append(BlueprintVersionEntry(
            id=version_id,
            created_at=created_at,
            label=label,
            document=document.model_copy(deep=True),
        ))
        logger.info(f"Saved blueprint version {version_id}" + (f" ({label})" if label else ""))
        return version_id

    def list_versions(self) -> list[BlueprintVersionEntry]:
        """Save points, newest first."""
        return list(reversed(self._versions))

    def get_version(self, version_id: str) -> BlueprintDocument | None:
        """A copy of the stored document, or None for an unknown id."""
        for entry in self._versions:
            if entry.id == version_id:
                return entry.document.model_copy(deep=True)
        return None

    def rollback(self, version_id: str) -> BlueprintDocument | None:
        """Document to restore for ``version_id``; the caller swaps it in."""
        document = self.get_version(version_id)
        if document is None:
            logger.warning(f"Cannot roll back to unknown blueprint version {version_id}")
        return document
