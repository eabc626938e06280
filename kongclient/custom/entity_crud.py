"""Endpoint rendering for custom entities on Kong's Admin API."""

from __future__ import annotations

import re
from dataclasses import dataclass

from kongclient.custom.entity import EntityObject

_PLACEHOLDER = re.compile(r"\$\{(\w+)\}")


class EndpointError(ValueError):
    """Raised when an endpoint for an entity cannot be rendered."""


def render(template: str, entity: EntityObject) -> str:
    """Substitute every ``${name}`` in ``template`` with the entity's relation."""

    def substitute(match: re.Match[str]) -> str:
        value = entity.get_relation(match.group(1))
        if not value:
            raise EndpointError(
                f"cannot substitute '{match.group(1)}' in URL: {template}"
            )
        return value

    return _PLACEHOLDER.sub(substitute, template)


@dataclass
class EntityCRUDDefinition:
    """Describes the RESTful endpoints of one custom entity type."""

    name: str
    crud_path: str = ""
    primary_key: str = ""

    @property
    def type(self) -> str:
        """The type of custom entity this definition serves."""
        return self.name

    def _render_with_pk(self, entity: EntityObject) -> str:
        endpoint = render(self.crud_path, entity)
        obj = entity.object or {}
        if self.primary_key not in obj:
            raise EndpointError("primary key not found in entity")
        key = obj[self.primary_key]
        if not isinstance(key, str):
            raise EndpointError("primary key can't be converted to string")
        return f"{endpoint}/{key}"

    def get_endpoint(self, entity: EntityObject) -> str:
        """URL to fetch an existing entity."""
        return self._render_with_pk(entity)

    def post_endpoint(self, entity: EntityObject) -> str:
        """URL to create an entity of this type."""
        return render(self.crud_path, entity)

    def patch_endpoint(self, entity: EntityObject) -> str:
        """URL to update an existing entity."""
        return self._render_with_pk(entity)

    def delete_endpoint(self, entity: EntityObject) -> str:
        """URL to delete an existing entity."""
        return self._render_with_pk(entity)

    def list_endpoint(self, entity: EntityObject) -> str:
        """URL to list all entities of this type."""
        return render(self.crud_path, entity)