"""Kong credential and CA certificate entities."""

from __future__ import annotations

import copy
import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

M = TypeVar("M", bound="Model")


class Model:
    """Base for entities exchanged with the Admin API as JSON objects."""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out unset fields and empty lists."""
        result: dict[str, Any] = {}
        for f in dataclasses.fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if value is None or (isinstance(value, (list, dict)) and not value):
                continue
            result[f.name] = value.to_dict() if isinstance(value, Model) else copy.deepcopy(value)
        return result

    @classmethod
    def from_dict(cls: type[M], data: Mapping[str, Any]) -> M:
        """Build an instance from a JSON object; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise TypeError(f"expected a mapping, got {type(data).__name__}")
        kwargs: dict[str, Any] = {}
        for f in dataclasses.fields(cls):  # type: ignore[arg-type]
            if f.name not in data:
                continue
            value = data[f.name]
            model = f.metadata.get("model")
            if model is not None and value is not None:
                kwargs[f.name] = model.from_dict(value)
            else:
                kwargs[f.name] = copy.deepcopy(value)
        return cls(**kwargs)


@dataclass
class _Entity(Model):
    id: str | None = None
    created_at: int | None = None
    tags: list[str] | None = None


@dataclass
class CACertificate(_Entity):
    """A CA certificate in Kong."""

    cert: str | None = None


@dataclass
class _Credential(_Entity):
    consumer: dict[str, Any] | None = None


@dataclass
class KeyAuth(_Credential):
    """A key-auth credential."""

    key: str | None = None
    ttl: int | None = None


@dataclass
class BasicAuth(_Credential):
    """A basic-auth credential."""

    username: str | None = None
    password: str | None = None


@dataclass
class HMACAuth(_Credential):
    """A hmac-auth credential."""

    username: str | None = None
    secret: str | None = None


@dataclass
class Oauth2Credential(_Credential):
    """An OAuth2 application credential."""

    name: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    redirect_uris: list[str] | None = None


@dataclass
class JWTAuth(_Credential):
    """A JWT credential."""

    algorithm: str | None = None
    key: str | None = None
    rsa_public_key: str | None = None
    secret: str | None = None


@dataclass
class MTLSAuth(_Credential):
    """An mTLS credential."""

    subject_name: str | None = None
    ca_certificate: CACertificate | None = field(
        default=None, metadata={"model": CACertificate}
    )


@dataclass
class ACLGroup(_Credential):
    """An ACL group membership of a consumer."""

    group: str | None = None