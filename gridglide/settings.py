"""Global, type-keyed store for settings groups and their change handlers."""

from __future__ import annotations

import copy
import threading
from typing import Any, Callable, Sequence, TypeVar

T = TypeVar("T")

UpdateHandlerFunc = Callable[[Any], None]
ReaderFunc = Callable[[], Any]


class Settings:
    """Holds one settings object per type plus named update and read handlers.

    Values are copied on the way in and on the way out, so callers never share
    state with the store.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._settings: dict[type, Any] = {}
        self._listeners: dict[str, UpdateHandlerFunc] = {}
        self._readers: dict[str, ReaderFunc] = {}

    def set_setting_handlers(
        self,
        property_name: str,
        update_func: UpdateHandlerFunc,
        reader_func: ReaderFunc,
    ) -> None:
        """Register the functions that apply and read the named property."""
        with self._lock:
            self._listeners[property_name] = update_func
            self._readers[property_name] = reader_func

    def set(self, value: Any) -> None:
        """Store a copy of value, replacing any stored object of the same type."""
        stored = copy.deepcopy(value)
        with self._lock:
            self._settings[type(value)] = stored

    def get(self, setting_type: type[T]) -> T:
        """Return a copy of the stored object of the given type."""
        with self._lock:
            try:
                value = self._settings[setting_type]
            except KeyError:
                raise KeyError(
                    "Trying to retrieve a settings object that doesn't exist: "
                    f"{setting_type.__name__}"
                ) from None
        return copy.deepcopy(value)

    @property
    def property_names(self) -> list[str]:
        """Names of all properties with registered handlers."""
        with self._lock:
            return list(self._listeners)

    def listener(self, property_name: str) -> UpdateHandlerFunc:
        """The update handler registered for a property."""
        with self._lock:
            return self._listeners[property_name]

    def reader(self, property_name: str) -> ReaderFunc:
        """The reader registered for a property."""
        with self._lock:
            return self._readers[property_name]

    def handle_changed_notification(self, arguments: Sequence[Any]) -> None:
        """Apply a (name, value) change notification to the matching listener."""
        if len(arguments) < 2:
            raise ValueError(
                "A setting change notification needs a name and a value"
            )
        name, value = arguments[0], arguments[1]
        if not isinstance(name, str):
            raise TypeError(f"Setting name must be a string, got {name!r}")
        self.listener(name)(value)


SETTINGS = Settings()