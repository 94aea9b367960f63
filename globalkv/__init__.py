"""globalkv: process-wide key/value store with protection and hooks."""

from .entry import DeleteCallback, Entry, UpdateCallback
from .errors import InvalidOption
from .options import DEFAULT_OPTION_NAMES, DefaultOptions, Defaults
from .shared import (
    flush,
    get_all_metadata,
    get_all_values,
    get_default_options,
    get_defaults,
    get_metadata,
    get_store,
    get_value,
    is_protected,
    is_set,
    reset_default_options,
    set_default_option,
    set_value,
    unset_value,
)
from .store import GlobalStore, store

__all__ = [
    "DEFAULT_OPTION_NAMES",
    "DefaultOptions",
    "Defaults",
    "DeleteCallback",
    "Entry",
    "GlobalStore",
    "InvalidOption",
    "UpdateCallback",
    "flush",
    "get_all_metadata",
    "get_all_values",
    "get_default_options",
    "get_defaults",
    "get_metadata",
    "get_store",
    "get_value",
    "is_protected",
    "is_set",
    "reset_default_options",
    "set_default_option",
    "set_value",
    "store",
    "unset_value",
]
