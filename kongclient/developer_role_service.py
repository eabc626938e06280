"""Developer portal roles in Kong."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from kongclient.api import ListOpt, Transport, list_all

_PATH = "/developers/roles"


def _body(role: Mapping[str, Any] | None, operation: str) -> dict[str, Any]:
    if role is None:
        raise ValueError(f"cannot {operation} a nil role")
    return {key: value for key, value in role.items() if value is not None}


def _role_path(ref: str | None, what: str, operation: str) -> str:
    if not ref:
        raise ValueError(f"{what} cannot be empty for {operation} operation")
    return f"{_PATH}/{ref}"


class DeveloperRoleService:
    """Handles developer roles, each a JSON object such as ``{"name": ...}``."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def create(self, role: Mapping[str, Any] | None) -> dict[str, Any]:
        """Create a developer role; an ID in it is passed on in the body."""
        return self._transport.request("POST", _PATH, body=_body(role, "create"))

    def get(self, name_or_id: str | None) -> dict[str, Any]:
        """Fetch a developer role by its name or ID."""
        return self._transport.request("GET", _role_path(name_or_id, "name or ID", "get"))

    def update(self, role: Mapping[str, Any] | None) -> dict[str, Any]:
        """Update a developer role; it must carry its ID."""
        body = _body(role, "update")
        path = _role_path(body.get("id"), "ID", "update")
        return self._transport.request("PATCH", path, body=body)

    def delete(self, name_or_id: str | None) -> None:
        """Delete a developer role by its name or ID."""
        self._transport.request("DELETE", _role_path(name_or_id, "name or ID", "delete"))

    def list(
        self, opt: ListOpt | None = None
    ) -> tuple[list[dict[str, Any]], ListOpt | None]:
        """Fetch one page of developer roles."""
        return self._transport.list(f"{_PATH}/", opt)

    def list_all(self) -> list[dict[str, Any]]:
        """Fetch every developer role, following all pages."""
        return list_all(self.list)