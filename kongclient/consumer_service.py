"""Consumers in Kong."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from kongclient.api import APIError, ListOpt, Transport, list_all

_PATH = "/consumers"


def _body(consumer: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in consumer.items() if value is not None}


class ConsumerService:
    """Handles consumers, each a JSON object such as ``{"username": ...}``."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def create(self, consumer: Mapping[str, Any]) -> dict[str, Any]:
        """Create a consumer; one carrying an ID is created with PUT at that ID."""
        path = _PATH
        method = "POST"
        consumer_id = consumer.get("id")
        if consumer_id is not None:
            path = f"{_PATH}/{consumer_id}"
            method = "PUT"
        return self._transport.request(method, path, body=_body(consumer))

    def get(self, username_or_id: str | None) -> dict[str, Any]:
        """Fetch a consumer by its username or ID."""
        if not username_or_id:
            raise ValueError("username or ID cannot be empty for get operation")
        return self._transport.request("GET", f"{_PATH}/{username_or_id}")

    def get_by_custom_id(self, custom_id: str | None) -> dict[str, Any]:
        """Fetch the consumer with the given custom ID; 404 if there is none."""
        if not custom_id:
            raise ValueError("custom ID cannot be empty for get operation")
        response = self._transport.request("GET", _PATH, {"custom_id": custom_id}) or {}
        data = response.get("data") or []
        if not data:
            raise APIError(404, "Not found")
        return data[0]

    def update(self, consumer: Mapping[str, Any]) -> dict[str, Any]:
        """Update a consumer; it must carry its ID."""
        consumer_id = consumer.get("id")
        if not consumer_id:
            raise ValueError("ID cannot be empty for update operation")
        return self._transport.request(
            "PATCH", f"{_PATH}/{consumer_id}", body=_body(consumer)
        )

    def delete(self, username_or_id: str | None) -> None:
        """Delete a consumer by its username or ID."""
        if not username_or_id:
            raise ValueError("username or ID cannot be empty for delete operation")
        self._transport.request("DELETE", f"{_PATH}/{username_or_id}")

    def list(
        self, opt: ListOpt | None = None
    ) -> tuple[list[dict[str, Any]], ListOpt | None]:
        """Fetch one page of consumers."""
        return self._transport.list(_PATH, opt)

    def list_all(self) -> list[dict[str, Any]]:
        """Fetch every consumer, following all pages."""
        return list_all(self.list)