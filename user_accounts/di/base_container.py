# Standard library imports
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal registry mapping a key (usually an interface class) to either a
    shared instance or a factory that builds a fresh instance per lookup.
    """

    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}

    def register_singleton(self, key: Hashable, instance: Any) -> None:
        """Register a shared instance under ``key``"""
        self._factories.pop(key, None)
        self._singletons[key] = instance

    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        """Register a factory called on every ``get(key)``"""
        self._singletons.pop(key, None)
        self._factories[key] = factory

    def get(self, key: Hashable) -> Any:
        """
        Resolve a registered dependency

        Args:
            key: Interface class or string name used at registration

        Returns:
            The singleton instance or a freshly built one

        Raises:
            KeyError: If nothing is registered under ``key``
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise KeyError(f"No dependency registered for {name}")

    def has(self, key: Hashable) -> bool:
        return key in self._singletons or key in self._factories
