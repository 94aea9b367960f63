"""Default options registry."""

import logging
from dataclasses import dataclass, fields, replace
from typing import Any

from .entry import DeleteCallback, UpdateCallback
from .errors import InvalidOption

logger = logging.getLogger(__name__)


@dataclass
class DefaultOptions:
    """Fallback values for every option a store operation accepts."""

    protected: bool = False
    force: bool = False
    silent: bool = False
    on_update: UpdateCallback | None = None
    on_delete: DeleteCallback | None = None


DEFAULT_OPTION_NAMES = frozenset(f.name for f in fields(DefaultOptions))


def _check_name(name: str) -> None:
    if name not in DEFAULT_OPTION_NAMES:
        raise InvalidOption(name)


class Defaults:
    """Holds the current ``DefaultOptions`` and the snapshot to reset to.

    The reset snapshot is captured at construction. Keyword arguments
    override the built-in defaults for that snapshot.

    Args:
        **initial: Option values to start from (see ``DefaultOptions``).
    """

    def __init__(self, **initial: Any) -> None:
        for name in initial:
            _check_name(name)
        self._initial = DefaultOptions(**initial)
        self._current = replace(self._initial)

    def set(self, name: str, value: Any) -> None:
        """Overwrite one default. Raises ``InvalidOption`` for unknown names."""
        _check_name(name)
        logger.debug("Default option %s set to %r", name, value)
        setattr(self._current, name, value)

    def get(self, name: str) -> Any:
        _check_name(name)
        return getattr(self._current, name)

    def snapshot(self) -> DefaultOptions:
        """A copy of the current defaults."""
        return replace(self._current)

    def reset(self) -> None:
        """Restore the defaults captured at construction."""
        logger.debug("Default options reset")
        self._current = replace(self._initial)

    def resolve(self, name: str, value: Any) -> Any:
        """Return ``value`` unless it is None, else the current default."""
        if value is not None:
            return value
        return self.get(name)
