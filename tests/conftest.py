"""
Pytest fixtures for blueprint engine tests.

This module provides:
1. Settings cache isolation
2. Deterministic id generation
3. A small, valid sample blueprint (see tests.helpers.factories)
"""

import pytest

from ozrical_blueprint.config import get_settings
from ozrical_blueprint.core.ids import sequential_id_generator
from ozrical_blueprint.models.contracts.blueprint import BlueprintDocument
from tests.helpers.factories import make_sample_blueprint_dict


# ==================== SETTINGS ====================


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached process-wide; isolate tests that patch the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ==================== BLUEPRINTS ====================


@pytest.fixture
def id_gen():
    """Deterministic UUID-shaped id generator."""
    return sequential_id_generator()


@pytest.fixture
def sample_blueprint_dict() -> dict:
    return make_sample_blueprint_dict()


@pytest.fixture
def sample_blueprint(sample_blueprint_dict) -> BlueprintDocument:
    return BlueprintDocument.model_validate(sample_blueprint_dict)
