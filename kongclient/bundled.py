"""Custom entity definitions that ship with the client."""

from __future__ import annotations

from kongclient.custom.entity_crud import EntityCRUDDefinition
from kongclient.custom.registry import Registry

_BUNDLED = (
    ("key-auth", "/consumers/${consumer_id}/key-auth"),
    ("basic-auth", "/consumers/${consumer_id}/basic-auth"),
    ("acl", "/consumers/${consumer_id}/acls"),
    ("hmac-auth", "/consumers/${consumer_id}/hmac-auth"),
    ("jwt", "/consumers/${consumer_id}/jwt"),
    ("oauth2", "/consumers/${consumer_id}/oauth2"),
    ("mtls-auth", "/consumers/${consumer_id}/mtls-auth"),
)


def default_custom_entities() -> list[EntityCRUDDefinition]:
    """Return fresh definitions of the bundled credential entities."""
    return [
        EntityCRUDDefinition(name=name, crud_path=path, primary_key="id")
        for name, path in _BUNDLED
    ]


def default_registry() -> Registry:
    """Return a registry with every bundled entity registered."""
    registry = Registry()
    for definition in default_custom_entities():
        registry.register(definition.name, definition)
    return registry