"""
Undo/redo history for a single open blueprint.

The command layer is stateless; this class owns the current document and
bounded stacks of whole-document snapshots taken around each command.
Single writer: one editor instance owns one history.
"""

from __future__ import annotations

import logging
from typing import Any

from ozrical_blueprint.config import get_settings
from ozrical_blueprint.core.ids import IdGenerator
from ozrical_blueprint.models.contracts.blueprint import BlueprintDocument, create_empty_blueprint
from ozrical_blueprint.services.commands import apply_command

logger = logging.getLogger(__name__)


class CommandHistory:
    """
    Current document plus undo/redo stacks.

    Executing a command pushes the previous document on the undo stack
    (dropping the oldest beyond ``max_depth``) and clears the redo stack.
    """

    def __init__(
        self,
        document: BlueprintDocument | None = None,
        max_depth: int | None = None,
        id_gen: IdGenerator | None = None,
    ):
        self.document = document if document is not None else create_empty_blueprint()
        self.max_depth = max_depth or get_settings().max_undo_depth
        self.id_gen = id_gen
        self._undo: list[BlueprintDocument] = []
        self._redo: list[BlueprintDocument] = []

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def execute(self, cmd: Any) -> BlueprintDocument:
        """Apply ``cmd`` to the current document and record the previous one."""
        next_doc = apply_command(self.document, cmd, id_gen=self.id_gen)
        self._undo.append(self.document)
        if len(self._undo) > self.max_depth:
            self._undo.pop(0)
        self._redo.clear()
        self.document = next_doc
        return self.document

    def undo(self) -> BlueprintDocument:
        """Restore the previous document. No-op when there is nothing to undo."""
        if not self._undo:
            return self.document
        self._redo.append(self.document)
        self.document = self._undo.pop()
        return self.document

    def redo(self) -> BlueprintDocument:
        """Re-apply the last undone change. No-op when there is nothing to redo."""
        if not self._redo:
            return self.document
        self._undo.append(self.document)
        self.document = self._redo.pop()
        return self.document

    def reset(self, document: BlueprintDocument) -> None:
        """Start over from ``document`` (e.g. after loading a file)."""
        self.document = document
        self._undo.clear()
        self._redo.clear()
        logger.debug("Command history reset")
