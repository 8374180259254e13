"""
Render archetype interpretation.

Maps a node plus the access context in force to the way a player should
render it. Lives outside the document model so another client can swap
the interpretation.
"""

from typing import Literal

from ozrical_blueprint.models.contracts.blueprint import BlueprintNodeBase
from ozrical_blueprint.models.contracts.session import AccessContextState

RenderArchetype = Literal["list", "form", "menu", "view", "modal"]


class ArchetypeInterpreter:
    """Default interpretation: read access lists, write/delete access edits."""

    def get_archetype(
        self,
        node: BlueprintNodeBase,
        access_context: AccessContextState | None,
    ) -> RenderArchetype:
        if node.type == "menu":
            return "menu"
        if node.type == "modal":
            return "modal"
        if node.type == "view":
            mode = access_context.access_mode if access_context else "read"
            return "list" if mode in ("read", "read_only") else "form"
        return "view"
