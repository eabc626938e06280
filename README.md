# kongclient

A Python client for the Kong Admin API. It covers consumers, consumer
credentials (key-auth, basic-auth, hmac-auth, jwt, oauth2, mtls-auth and ACL
groups), CA certificates, developer roles and admins. For custom entities it
renders endpoints from path templates and keeps their definitions in a
registry. It has no dependencies outside the standard library.

## Installation

```
pip install kongclient
```

To run the tests:

```
pip install "kongclient[test]"
pytest
```

## The transport

Every service works through a `Transport` from `kongclient.api`:

```python
from kongclient.api import Transport

transport = Transport("http://localhost:8001", timeout=10)
```

`Transport(base_url, headers=None, send=None, timeout=None)` sends JSON
requests with `urllib`. `base_url` defaults to `http://localhost:8001`, and
`headers` are added to every request. `send` replaces the HTTP call with a
function `send(method, url, headers, body) -> (status, content_bytes)`, which
is useful in tests.

- `transport.request(method, path, params=None, body=None)` sends one request.
  It returns the decoded JSON reply, or `None` for an empty reply. A status of
  400 or above raises `APIError`. Its `code` and `message` come from the reply,
  and its `not_found` is true for a 404.
- `transport.list(path, opt=None)` fetches one page of a collection. It
  returns `(items, next_opt)`, and `next_opt` is `None` on the last page.
- `ListOpt(size=0, offset="", tags=[], match_all_tags=False)` controls
  paging and tag filtering. Tags are joined with `,` (match any) or, when
  `match_all_tags` is set, with `/` (match all).
- `list_all(list_page)` follows pages of size 1000 from a `list` method until
  none are left, and returns every item.

## Services

Each service takes a `Transport`. When a required ID or name is missing, the
service raises `ValueError` before any request is sent.

| Module | Class | Works on |
| --- | --- | --- |
| `kongclient.consumer_service` | `ConsumerService` | consumers, as dicts |
| `kongclient.credentials_service` | `CredentialService` | credentials of any known type |
| `kongclient.ca_certificate_service` | `CACertificateService` | `CACertificate` models |
| `kongclient.developer_role_service` | `DeveloperRoleService` | developer roles, as dicts |
| `kongclient.admin_service` | `AdminService` | Kong Enterprise admins, as dicts |

`ConsumerService` and `CACertificateService` have `create`, `get`, `update`,
`delete`, `list` and `list_all`. If the entity passed to `create` carries an
`id`, it is created with a `PUT` to that ID. Otherwise it is sent with a
`POST`. `ConsumerService.get_by_custom_id` raises `APIError` with code 404
when no consumer matches.

```python
from kongclient.api import ListOpt
from kongclient.consumer_service import ConsumerService

consumers = ConsumerService(transport)
consumer = consumers.create({"username": "foo", "custom_id": "custom_id_foo"})
same = consumers.get_by_custom_id("custom_id_foo")

page, next_opt = consumers.list(ListOpt(size=1, tags=["tag1"]))
everything = consumers.list_all()
```

`CredentialService` handles every credential type through one interface:
`create(cred_type, consumer, credential)`, `get(cred_type, consumer, cred_id)`,
`update(cred_type, consumer, credential)` and
`delete(cred_type, consumer, cred_id)`. The known types are `key-auth`,
`basic-auth`, `hmac-auth`, `jwt-auth`, `acl`, `oauth2` and `mtls-auth`. Any
other type raises `ValueError`. A credential may be a model or a mapping, and
the service returns the JSON object that Kong sent back:

```python
from kongclient.credentials_service import CredentialService
from kongclient.models import ACLGroup

credentials = CredentialService(transport)
created = ACLGroup.from_dict(
    credentials.create("acl", consumer["id"], ACLGroup(group="my-group"))
)
created.group = "my-new-group"
credentials.update("acl", consumer["id"], created)
credentials.delete("acl", consumer["id"], created.id)
```

`DeveloperRoleService` has `create`, `get`, `update`, `delete`, `list` and
`list_all`. `create` always sends a `POST`.

`AdminService` has `invite` (`create` is the same operation), `get`,
`generate_register_url`, `update`, `delete`, `list`, `register_credentials`
(which needs `username`, `email` and `password`), `list_workspaces`,
`list_roles`, `update_roles`, `delete_roles` and `get_consumer`. Roles are
passed as mappings with a `name`:

```python
from kongclient.admin_service import AdminService

admins = AdminService(transport)
admin = admins.invite({"email": "admin@example.com", "username": "newAdmin"})
admins.update_roles(admin["id"], [{"name": "read-only"}])
```

## Models

`kongclient.models` holds the entity types `KeyAuth`, `BasicAuth`,
`HMACAuth`, `Oauth2Credential`, `JWTAuth`, `MTLSAuth`, `ACLGroup` and
`CACertificate`. All are dataclasses built on `Model`. `to_dict()` returns the
JSON form and leaves out fields that are unset and lists that are empty.
`from_dict(data)` builds an instance and ignores unknown keys. The `consumer`
of a credential is kept as a plain dict, and the `ca_certificate` of an
`MTLSAuth` becomes a `CACertificate`.

## Custom entities

A custom entity is an `EntityObject` (`kongclient.custom.entity`). It holds a
`type`, an `object` dict and relations to other entities, which are set with
`add_relation`. An `EntityCRUDDefinition` (`kongclient.custom.entity_crud`)
turns a path template into concrete endpoints:

```python
from kongclient.custom.entity import EntityObject
from kongclient.custom.entity_crud import EntityCRUDDefinition

definition = EntityCRUDDefinition(
    name="foo", crud_path="/consumers/${consumer_id}/foo", primary_key="id"
)
entity = EntityObject("foo")
entity.add_relation("consumer_id", "gopher")
entity.object = {"id": "unique-id"}

definition.get_endpoint(entity)   # "/consumers/gopher/foo/unique-id"
definition.post_endpoint(entity)  # "/consumers/gopher/foo"
```

`render(template, entity)` does the substitution on its own. A missing
relation raises `EndpointError`, and so does a primary key that is missing or
is not a string.

Definitions are kept in a `Registry` (`kongclient.custom.registry`), which has
`register`, `lookup` and `unregister`. Registering a type twice, or
unregistering an unknown type, raises `RegistryError`.
`kongclient.bundled.default_custom_entities()` returns definitions for the
credential types that Kong ships with. `default_registry()` returns a registry
that already holds them.

## What this package does not do

- It does not send requests for custom entities. It renders their endpoints,
  and you pass those to `Transport.request` yourself.
- It has no service for TLS certificates other than CA certificates, and no
  per-type services for ACL groups or basic-auth credentials. Use
  `CredentialService` for credentials of those types.
- It has no command-line tool.