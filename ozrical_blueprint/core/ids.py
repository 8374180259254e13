"""
Centralized id generation for blueprint entities.

Every node and edge id is a UUID-shaped string so that definitions,
versions and debugger snapshots can cross-reference them. Command entry
points accept an ``id_gen`` override; tests inject a deterministic one.
"""

import itertools
import re
import uuid
from collections.abc import Callable

IdGenerator = Callable[[], str]

UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
_UUID_RE = re.compile(UUID_PATTERN)


def create_id() -> str:
    """Return a random UUID v4 string."""
    return str(uuid.uuid4())


def is_uuid_shaped(value: object) -> bool:
    """True when ``value`` is a string in canonical 8-4-4-4-12 hex form."""
    return isinstance(value, str) and _UUID_RE.match(value) is not None


def sequential_id_generator(start: int = 1) -> IdGenerator:
    """
    Build a deterministic generator of UUID-shaped ids.

    >>> gen = sequential_id_generator()
    >>> gen()
    '00000000-0000-4000-8000-000000000001'
    """
    counter = itertools.count(start)

    def _next_id() -> str:
        return f"00000000-0000-4000-8000-{next(counter):012d}"

    return _next_id
