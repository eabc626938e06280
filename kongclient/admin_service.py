"""Admins of Kong Enterprise and their roles, workspaces and consumers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from kongclient.api import APIError, ListOpt, Transport

_PATH = "/admins"


def _body(admin: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in admin.items() if value is not None}


def _require(value: str | None, what: str, operation: str) -> str:
    if not value:
        raise ValueError(f"{what} cannot be empty for {operation} operation")
    return value


def _roles_body(email_or_id: str, roles: Iterable[Mapping[str, Any]]) -> dict[str, str]:
    return {
        "name_or_id": email_or_id,
        "roles": ",".join(role["name"] for role in roles),
    }


class AdminService:
    """Handles admins, each a JSON object such as ``{"email": ..., "username": ...}``."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def invite(self, admin: Mapping[str, Any] | None) -> dict[str, Any]:
        """Create (invite) an admin and return the admin Kong created."""
        if admin is None:
            raise ValueError("cannot create a nil admin")
        response = self._transport.request("POST", _PATH, body=_body(admin)) or {}
        return response.get("admin") or {}

    def create(self, admin: Mapping[str, Any] | None) -> dict[str, Any]:
        """Create an admin; the same operation as :meth:`invite`."""
        return self.invite(admin)

    def get(self, name_or_id: str | None) -> dict[str, Any]:
        """Fetch an admin by its name or ID."""
        name_or_id = _require(name_or_id, "name or ID", "get")
        return self._transport.request("GET", f"{_PATH}/{name_or_id}")

    def generate_register_url(self, name_or_id: str | None) -> dict[str, Any]:
        """Fetch an admin together with a fresh registration URL."""
        name_or_id = _require(name_or_id, "name or ID", "get")
        return self._transport.request(
            "GET", f"{_PATH}/{name_or_id}", {"generate_register_url": "true"}
        )

    def update(self, admin: Mapping[str, Any] | None) -> dict[str, Any]:
        """Update an admin; it must carry its ID."""
        if admin is None:
            raise ValueError("cannot update a nil admin")
        admin_id = _require(admin.get("id"), "ID", "update")
        return self._transport.request("PATCH", f"{_PATH}/{admin_id}", body=_body(admin))

    def delete(self, name_or_id: str | None) -> None:
        """Delete an admin by its name or ID."""
        name_or_id = _require(name_or_id, "name or ID", "delete")
        self._transport.request("DELETE", f"{_PATH}/{name_or_id}")

    def list(
        self, opt: ListOpt | None = None
    ) -> tuple[list[dict[str, Any]], ListOpt | None]:
        """Fetch one page of admins."""
        return self._transport.list(f"{_PATH}/", opt)

    def register_credentials(self, admin: Mapping[str, Any] | None) -> None:
        """Register credentials for an existing admin."""
        if admin is None:
            raise ValueError("cannot register credentials for a nil admin")
        for key in ("username", "email", "password"):
            _require(admin.get(key), key, "registration")
        self._transport.request("POST", f"{_PATH}/register", body=_body(admin))

    def list_workspaces(self, email_or_id: str | None) -> list[dict[str, Any]]:
        """List the workspaces an admin belongs to."""
        email_or_id = _require(email_or_id, "email or ID", "list workspaces")
        try:
            response = self._transport.request("GET", f"{_PATH}/{email_or_id}/workspaces")
        except APIError as err:
            raise APIError(
                err.code, f"error updating admin workspaces: {err.message}"
            ) from err
        return list(response or [])

    def list_roles(
        self, email_or_id: str | None, opt: ListOpt | None = None
    ) -> list[dict[str, Any]]:
        """List the RBAC roles of an admin; ``opt`` is accepted but not used."""
        email_or_id = _require(email_or_id, "email or ID", "list roles")
        try:
            response = self._transport.request("GET", f"{_PATH}/{email_or_id}/roles")
        except APIError as err:
            raise APIError(err.code, f"error listing admin roles: {err.message}") from err
        return list((response or {}).get("roles") or [])

    def update_roles(
        self, email_or_id: str | None, roles: Iterable[Mapping[str, Any]]
    ) -> list[dict[str, Any]]:
        """Assign roles, given by their names, to an admin; return its roles."""
        email_or_id = _require(email_or_id, "email or ID", "update roles")
        body = _roles_body(email_or_id, roles)
        try:
            response = self._transport.request(
                "POST", f"{_PATH}/{email_or_id}/roles", body=body
            )
        except APIError as err:
            raise APIError(err.code, f"error updating admin roles: {err.message}") from err
        return list((response or {}).get("roles") or [])

    def delete_roles(
        self, email_or_id: str | None, roles: Iterable[Mapping[str, Any]]
    ) -> None:
        """Remove roles, given by their names, from an admin."""
        email_or_id = _require(email_or_id, "email or ID", "delete roles")
        body = _roles_body(email_or_id, roles)
        try:
            self._transport.request("DELETE", f"{_PATH}/{email_or_id}/roles", body=body)
        except APIError as err:
            raise APIError(err.code, f"error deleting admin roles: {err.message}") from err

    def get_consumer(self, email_or_id: str | None) -> dict[str, Any]:
        """Fetch the consumer Kong generated for an admin."""
        email_or_id = _require(email_or_id, "email or ID", "get consumer")
        return self._transport.request("GET", f"{_PATH}/{email_or_id}/consumer")