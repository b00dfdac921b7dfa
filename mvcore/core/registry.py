"""Keyed storage for the per-core actors.

Every Model, View, Controller and Facade is registered here under its
multiton key. Collaborators receive the registry by reference instead of
reaching into class-level state, so tests and embedding applications can run
isolated registries side by side. Code that does not care uses
:meth:`CoreRegistry.default`.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional, Type, TypeVar

from ..domain.errors import DuplicateKeyError
from ..domain.ports import MultitonKey
from ..utils.logging import apply_env_overrides

MODEL = "Model"
VIEW = "View"
CONTROLLER = "Controller"
FACADE = "Facade"
ROLES = (MODEL, VIEW, CONTROLLER, FACADE)

A = TypeVar("A", bound="MultitonActor")


class CoreRegistry:
    """Owns the ``key -> actor`` maps for every role."""

    _instance: Optional["CoreRegistry"] = None
    _lock = threading.Lock()

    @classmethod
    def default(cls) -> "CoreRegistry":
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)
        apply_env_overrides()
        self._actors: Dict[str, Dict[MultitonKey, Any]] = {role: {} for role in ROLES}

    def lookup(self, role: str, key: MultitonKey) -> Optional[Any]:
        return self._actors[role].get(key)

    def contains(self, role: str, key: MultitonKey) -> bool:
        return key in self._actors[role]

    def claim(self, role: str, key: MultitonKey, actor: Any) -> None:
        """Register ``actor`` as the ``role`` for ``key``.

        Raises:
            DuplicateKeyError: ``key`` already has an actor for ``role``.
        """
        actors = self._actors[role]
        if key in actors:
            raise DuplicateKeyError(role, key)
        actors[key] = actor
        self._log.debug("%s registered for key %r", role, key)

    def release(self, role: str, key: MultitonKey) -> Optional[Any]:
        actor = self._actors[role].pop(key, None)
        if actor is not None:
            self._log.debug("%s released for key %r", role, key)
        return actor

    def keys(self, role: str) -> List[MultitonKey]:
        return list(self._actors[role])

    def clear(self) -> None:
        for actors in self._actors.values():
            actors.clear()


class MultitonActor:
    """Base for actors that exist once per multiton key.

    Direct construction claims the key and raises
    :class:`~mvcore.domain.errors.DuplicateKeyError` when it is taken;
    :meth:`get_instance` returns the existing actor or creates it.
    """

    ROLE: str = ""

    def __init__(self, key: MultitonKey, registry: Optional[CoreRegistry] = None) -> None:
        self.multiton_key = key
        self.registry = registry if registry is not None else CoreRegistry.default()
        self.registry.claim(self.ROLE, key, self)

    @classmethod
    def get_instance(
        cls: Type[A], key: MultitonKey, registry: Optional[CoreRegistry] = None
    ) -> Optional[A]:
        """Return the actor for ``key``, constructing it on first use.

        Returns ``None`` when ``key`` is empty.
        """
        if not key:
            return None
        registry = registry if registry is not None else CoreRegistry.default()
        actor = registry.lookup(cls.ROLE, key)
        if actor is None:
            actor = cls(key, registry)
        return actor

    @classmethod
    def _release(cls, key: MultitonKey, registry: Optional[CoreRegistry]) -> Optional[Any]:
        registry = registry if registry is not None else CoreRegistry.default()
        return registry.release(cls.ROLE, key)


__all__ = [
    "CONTROLLER",
    "FACADE",
    "MODEL",
    "MultitonActor",
    "ROLES",
    "CoreRegistry",
    "VIEW",
]
