from kongclient.bundled import default_custom_entities, default_registry
from kongclient.custom.entity import EntityObject


def test_bundled_names_in_order():
    names = [d.name for d in default_custom_entities()]
    assert names == [
        "key-auth",
        "basic-auth",
        "acl",
        "hmac-auth",
        "jwt",
        "oauth2",
        "mtls-auth",
    ]


def test_all_use_id_primary_key_and_consumer_path():
    for d in default_custom_entities():
        assert d.primary_key == "id"
        assert d.crud_path.startswith("/consumers/${consumer_id}/")


def test_acl_path():
    defs = {d.name: d for d in default_custom_entities()}
    assert defs["acl"].crud_path == "/consumers/${consumer_id}/acls"


def test_fresh_list_each_call():
    first = default_custom_entities()
    first[0].crud_path = "/changed"
    first.clear()
    second = default_custom_entities()
    assert len(second) == 7
    assert second[0].crud_path == "/consumers/${consumer_id}/key-auth"


def test_default_registry_contains_all():
    registry = default_registry()
    for d in default_custom_entities():
        assert registry.lookup(d.name) == d
    assert registry.lookup("unknown") is None


def test_default_registry_renders_endpoints():
    registry = default_registry()
    definition = registry.lookup("key-auth")
    entity = EntityObject("key-auth")
    entity.add_relation("consumer_id", "bob")
    entity.object = {"id": "abc"}
    assert definition.post_endpoint(entity) == "/consumers/bob/key-auth"
    assert definition.get_endpoint(entity) == "/consumers/bob/key-auth/abc"