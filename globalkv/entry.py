"""Entry: the record stored for one key."""

from dataclasses import dataclass
from typing import Any, Callable

UpdateCallback = Callable[[str, Any, Any], None]
"""Update hook: (key, new_value, old_value) -> None."""

DeleteCallback = Callable[[str, Any], None]
"""Delete hook: (key, value) -> None."""


@dataclass
class Entry:
    """A stored value with its protection flag, timestamps and hooks."""

    key: str
    value: Any
    protected: bool
    created_at: float
    updated_at: float
    on_update: UpdateCallback | None = None
    on_delete: DeleteCallback | None = None
