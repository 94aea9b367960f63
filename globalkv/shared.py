"""Process-wide store and the module-level functions that use it."""

from typing import Any

from .entry import DeleteCallback, Entry, UpdateCallback
from .options import DefaultOptions, Defaults
from .store import GlobalStore, store

_defaults = Defaults()
_store = store(_defaults)


def get_store() -> GlobalStore:
    return _store


def get_defaults() -> Defaults:
    return _defaults


def set_value(
    key: str,
    value: Any,
    *,
    protected: bool | None = None,
    force: bool | None = None,
    silent: bool | None = None,
    on_update: UpdateCallback | None = None,
    on_delete: DeleteCallback | None = None,
) -> Any:
    return _store.set(
        key,
        value,
        protected=protected,
        force=force,
        silent=silent,
        on_update=on_update,
        on_delete=on_delete,
    )


def get_value(key: str) -> Any:
    return _store.get(key)


def get_metadata(key: str) -> Entry | None:
    return _store.get_metadata(key)


def get_all_values() -> dict[str, Any]:
    return _store.get_all_values()


def get_all_metadata() -> dict[str, Entry]:
    return _store.get_all_metadata()


def is_set(key: str) -> bool:
    return _store.is_set(key)


def is_protected(key: str) -> bool:
    return _store.is_protected(key)


def unset_value(key: str, *, silent: bool | None = None) -> None:
    _store.unset(key, silent=silent)


def flush(*, silent: bool | None = None) -> None:
    _store.flush(silent=silent)


def set_default_option(name: str, value: Any) -> None:
    _defaults.set(name, value)


def get_default_options() -> DefaultOptions:
    return _defaults.snapshot()


def reset_default_options() -> None:
    _defaults.reset()
