"""GlobalStore: the entry store, and the factory that composes it."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator, MutableMapping
from dataclasses import replace
from typing import Any, Callable

from .entry import DeleteCallback, Entry, UpdateCallback
from .options import Defaults

logger = logging.getLogger(__name__)


class GlobalStore(MutableMapping[str, Any]):
    """In-memory key/value store with per-entry protection and hooks.

    Every write resolves its options against a ``Defaults`` registry:
    a per-call value wins, ``None`` falls back to the registry.

    - A protected entry rejects ``set`` unless forced; the rejected call
      returns the stored value and changes nothing.
    - ``on_update`` fires before an overwrite and ``on_delete`` before a
      removal, unless silenced. Hooks run inline and their exceptions
      propagate, leaving the entry as it was.
    - The first hook attached to an entry stays attached across later
      writes that do not carry one.

    Hooks may call back into the store. During ``flush`` keys removed by
    a hook are skipped and keys added by a hook are kept; other
    reentrant patterns during ``flush`` are unspecified.

    Args:
        defaults: Registry to read fallback options from. A fresh
            ``Defaults`` is created when omitted.
        clock: Timestamp source for ``created_at`` and ``updated_at``
            (default ``time.time``).
    """

    def __init__(
        self,
        defaults: Defaults | None = None,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if defaults is None:
            defaults = Defaults()
        self.defaults = defaults
        self._clock = clock
        self._entries: dict[str, Entry] = {}

    # -- Read operations --

    def get(self, key: str, default: Any = None) -> Any:
        entry = self._entries.get(key)
        if entry is None:
            return default
        return entry.value

    def get_metadata(self, key: str) -> Entry | None:
        """A copy of the entry for ``key``, or None."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        return replace(entry)

    def get_all_values(self) -> dict[str, Any]:
        return {key: entry.value for key, entry in self._entries.items()}

    def get_all_metadata(self) -> dict[str, Entry]:
        """Copies of every entry, in insertion order.

        The copies are shallow: stored values are shared with the store.
        """
        return {key: replace(entry) for key, entry in self._entries.items()}

    def is_set(self, key: str) -> bool:
        return key in self._entries

    def is_protected(self, key: str) -> bool:
        entry = self._entries.get(key)
        return entry is not None and bool(entry.protected)

    # -- Write operations --

    def set(
        self,
        key: str,
        value: Any,
        *,
        protected: bool | None = None,
        force: bool | None = None,
        silent: bool | None = None,
        on_update: UpdateCallback | None = None,
        on_delete: DeleteCallback | None = None,
    ) -> Any:
        """Store ``value`` under ``key`` and return the value now stored.

        Args:
            key: Entry key.
            value: Any object; the store never inspects it.
            protected: Block later non-forced writes. Recomputed on every
                successful write, so a forced write without it drops
                protection unless the default says otherwise.
            force: Overwrite even if the entry is protected.
            silent: Do not fire the entry's ``on_update`` hook.
            on_update: Hook attached if the entry has none yet.
            on_delete: Hook attached if the entry has none yet.

        Returns:
            ``value``, or the existing value when the write was rejected.
        """
        if not isinstance(key, str):
            raise TypeError(f"Expected str key, got {type(key).__name__}")

        defaults = self.defaults
        force = defaults.resolve("force", force)
        silent = defaults.resolve("silent", silent)
        entry = self._entries.get(key)

        if entry is not None and entry.protected and not force:
            logger.debug("Rejected write to protected key %r", key)
            return entry.value

        if entry is not None and entry.on_update is not None and not silent:
            logger.debug("Calling on_update for %r", key)
            entry.on_update(key, value, entry.value)

        now = self._clock()
        protected = bool(defaults.resolve("protected", protected))
        on_update = defaults.resolve("on_update", on_update)
        on_delete = defaults.resolve("on_delete", on_delete)

        if entry is None:
            entry = Entry(
                key=key,
                value=value,
                protected=protected,
                created_at=now,
                updated_at=now,
                on_update=on_update,
                on_delete=on_delete,
            )
        else:
            entry.value = value
            entry.protected = protected
            if entry.on_update is None:
                entry.on_update = on_update
            if entry.on_delete is None:
                entry.on_delete = on_delete
            entry.updated_at = now

        self._entries[key] = entry
        return value

    def unset(self, key: str, *, silent: bool | None = None) -> None:
        """Remove ``key``, protected or not. Missing keys are ignored."""
        entry = self._entries.get(key)
        if entry is None:
            return

        silent = self.defaults.resolve("silent", silent)
        if entry.on_delete is not None and not silent:
            logger.debug("Calling on_delete for %r", key)
            entry.on_delete(key, entry.value)

        # The hook may already have removed it.
        self._entries.pop(key, None)

    def flush(self, *, silent: bool | None = None) -> None:
        """Unset every key, firing each ``on_delete`` unless silenced."""
        keys = list(self._entries)
        logger.debug("Flushing %d keys", len(keys))
        for key in keys:
            self.unset(key, silent=silent)

    # -- MutableMapping --

    def __getitem__(self, key: str) -> Any:
        return self._entries[key].value

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        if key not in self._entries:
            raise KeyError(key)
        self.unset(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def store(defaults: Defaults | None = None, **initial: Any) -> GlobalStore:
    """Create a GlobalStore with its own or a supplied registry.

    Args:
        defaults: Registry to share. A new one is built when omitted.
        **initial: Initial default options for a new registry
            (see ``DefaultOptions``). Not allowed with ``defaults``.

    Returns:
        A ``GlobalStore`` instance.
    """
    if defaults is None:
        defaults = Defaults(**initial)
    elif initial:
        raise ValueError("Initial options are only valid without 'defaults'")
    return GlobalStore(defaults)
