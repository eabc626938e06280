"""A store of custom entity definitions keyed by type."""

from __future__ import annotations

from kongclient.custom.entity_crud import EntityCRUDDefinition


class RegistryError(KeyError):
    """Raised on duplicate registration or unregistering an unknown type."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class Registry:
    """Holds one endpoint definition per custom entity type."""

    def __init__(self) -> None:
        self._store: dict[str, EntityCRUDDefinition] = {}

    def register(self, typ: str, definition: EntityCRUDDefinition) -> None:
        """Store ``definition`` under ``typ``; fail if the type is taken."""
        if typ in self._store:
            raise RegistryError("type already registered")
        self._store[typ] = definition

    def lookup(self, typ: str) -> EntityCRUDDefinition | None:
        """Return the definition for ``typ``, or None if none is registered."""
        return self._store.get(typ)

    def unregister(self, typ: str) -> None:
        """Remove the definition for ``typ``; fail if it was not registered."""
        if typ not in self._store:
            raise RegistryError("type not registered")
        del self._store[typ]

    def __contains__(self, typ: object) -> bool:
        return typ in self._store

    def __len__(self) -> int:
        return len(self._store)