"""CA certificates in Kong."""

from __future__ import annotations

from kongclient.api import ListOpt, Transport, list_all
from kongclient.models import CACertificate

_PATH = "/ca_certificates"


class CACertificateService:
    """Handles CA certificates."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def create(self, certificate: CACertificate) -> CACertificate:
        """Create a CA certificate; one carrying an ID is created with PUT at that ID."""
        path = _PATH
        method = "POST"
        if certificate.id is not None:
            path = f"{_PATH}/{certificate.id}"
            method = "PUT"
        data = self._transport.request(method, path, body=certificate.to_dict())
        return CACertificate.from_dict(data)

    def get(self, cert_id: str | None) -> CACertificate:
        """Fetch a CA certificate by its ID."""
        if not cert_id:
            raise ValueError("ID cannot be empty for get operation")
        return CACertificate.from_dict(self._transport.request("GET", f"{_PATH}/{cert_id}"))

    def update(self, certificate: CACertificate) -> CACertificate:
        """Update a CA certificate; it must carry its ID."""
        if not certificate.id:
            raise ValueError("ID cannot be empty for update operation")
        data = self._transport.request(
            "PATCH", f"{_PATH}/{certificate.id}", body=certificate.to_dict()
        )
        return CACertificate.from_dict(data)

    def delete(self, cert_id: str | None) -> None:
        """Delete a CA certificate by its ID."""
        if not cert_id:
            raise ValueError("ID cannot be empty for delete operation")
        self._transport.request("DELETE", f"{_PATH}/{cert_id}")

    def list(
        self, opt: ListOpt | None = None
    ) -> tuple[list[CACertificate], ListOpt | None]:
        """Fetch one page of CA certificates."""
        data, next_opt = self._transport.list(_PATH, opt)
        return [CACertificate.from_dict(item) for item in data], next_opt

    def list_all(self) -> list[CACertificate]:
        """Fetch every CA certificate, following all pages."""
        return list_all(self.list)