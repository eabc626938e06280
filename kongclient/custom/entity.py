"""Custom entities in Kong: an object together with its foreign relations."""

from __future__ import annotations

from typing import Any

Object = dict[str, Any]


class EntityObject:
    """An instance of a custom entity along with its relations to other entities."""

    def __init__(self, typ: str) -> None:
        self._type = typ
        self._relations: dict[str, str] = {}
        self.object: Object | None = None

    @property
    def type(self) -> str:
        """The type of the entity, such as ``key-auth`` or ``acl``."""
        return self._type

    def add_relation(self, key: str, value: str) -> None:
        """Associate the foreign entity ``key`` with the ID ``value``."""
        self._relations[key] = value

    def get_relation(self, key: str) -> str:
        """Return the foreign entity's ID for ``key``, or an empty string."""
        return self._relations.get(key, "")

    def get_all_relations(self) -> dict[str, str]:
        """Return a copy of all relations of this entity."""
        return dict(self._relations)

    def __repr__(self) -> str:
        return (
            f"EntityObject(type={self._type!r}, object={self.object!r}, "
            f"relations={self._relations!r})"
        )