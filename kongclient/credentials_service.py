"""Generic CRUD for consumer credentials in Kong."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from kongclient.api import Transport
from kongclient.models import Model

CRED_PATHS = {
    "key-auth": "key-auth",
    "basic-auth": "basic-auth",
    "hmac-auth": "hmac-auth",
    "jwt-auth": "jwt",
    "acl": "acls",
    "oauth2": "oauth2",
    "mtls-auth": "mtls-auth",
}

Credential = Model | Mapping[str, Any] | None


def _sub_path(cred_type: str) -> str:
    try:
        return CRED_PATHS[cred_type]
    except KeyError:
        raise ValueError(f"unknown credential type: {cred_type}") from None


def _credential_id(credential: Credential) -> str | None:
    if credential is None:
        return None
    if isinstance(credential, Mapping):
        return credential.get("id") or None
    return getattr(credential, "id", None) or None


def _body(credential: Credential) -> Any:
    if credential is None:
        return None
    if isinstance(credential, Model):
        return credential.to_dict()
    return dict(credential)


def _require_consumer(consumer: str | None) -> str:
    if not consumer:
        raise ValueError("consumer username or ID cannot be empty")
    return consumer


class CredentialService:
    """Creates, fetches, updates and deletes credentials of any known type."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def create(
        self, cred_type: str, consumer: str | None, credential: Credential
    ) -> dict[str, Any]:
        """Create a credential; one carrying an ID is created with PUT at that ID."""
        consumer = _require_consumer(consumer)
        endpoint = f"/consumers/{consumer}/{_sub_path(cred_type)}"
        method = "POST"
        cred_id = _credential_id(credential)
        if cred_id:
            endpoint = f"{endpoint}/{cred_id}"
            method = "PUT"
        return self._transport.request(method, endpoint, body=_body(credential))

    def get(
        self, cred_type: str, consumer: str | None, cred_id: str | None
    ) -> dict[str, Any]:
        """Fetch the credential identified by ``cred_id``."""
        if not cred_id:
            raise ValueError("credential identifier cannot be empty for get")
        consumer = _require_consumer(consumer)
        endpoint = f"/consumers/{consumer}/{_sub_path(cred_type)}/{cred_id}"
        return self._transport.request("GET", endpoint)

    def update(
        self, cred_type: str, consumer: str | None, credential: Credential
    ) -> dict[str, Any]:
        """Update a credential; it must carry its ID."""
        consumer = _require_consumer(consumer)
        sub_path = _sub_path(cred_type)
        cred_id = _credential_id(credential)
        if not cred_id:
            raise ValueError("cannot update a credential without an ID")
        endpoint = f"/consumers/{consumer}/{sub_path}/{cred_id}"
        return self._transport.request("PATCH", endpoint, body=_body(credential))

    def delete(self, cred_type: str, consumer: str | None, cred_id: str | None) -> None:
        """Delete the credential identified by ``cred_id``."""
        if not cred_id:
            raise ValueError("credential identifier cannot be empty for delete")
        sub_path = _sub_path(cred_type)
        consumer = _require_consumer(consumer)
        self._transport.request("DELETE", f"/consumers/{consumer}/{sub_path}/{cred_id}")