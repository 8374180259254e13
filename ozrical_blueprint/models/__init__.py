"""
Blueprint Models

Pydantic contracts for documents, commands and runtime state:
    from ozrical_blueprint.models import BlueprintDocument
    from ozrical_blueprint.models.contracts import BlueprintDocument
    from ozrical_blueprint.models.contracts.blueprint import ViewNode  # Granular access
"""

from ozrical_blueprint.models.contracts import *  # noqa: F401,F403
