import pytest

from kongclient.models import (
    ACLGroup,
    BasicAuth,
    CACertificate,
    HMACAuth,
    JWTAuth,
    KeyAuth,
    MTLSAuth,
    Oauth2Credential,
)


def test_empty_model_serialises_to_empty_dict():
    assert ACLGroup().to_dict() == {}
    assert CACertificate().to_dict() == {}


def test_unset_and_empty_fields_omitted():
    acl = ACLGroup(group="my-group", tags=[])
    assert acl.to_dict() == {"group": "my-group"}


def test_acl_round_trip():
    acl = ACLGroup(id="abc", group="my-group", tags=["tag1", "tag2"], consumer={"id": "c1"})
    assert ACLGroup.from_dict(acl.to_dict()) == acl


def test_basic_auth_round_trip():
    password = "password"
    cred = BasicAuth(username="foo", password=password, created_at=5)
    data = cred.to_dict()
    assert data["password"] == password
    assert BasicAuth.from_dict(data) == cred


@pytest.mark.parametrize(
    "model",
    [
        KeyAuth(key="k", ttl=10, id="i"),
        HMACAuth(username="u", secret="secret"),
        Oauth2Credential(name="app", client_id="cid", redirect_uris=["http://localhost/cb"]),
        JWTAuth(algorithm="HS256", key="k", rsa_public_key="pem", secret="secret"),
        CACertificate(cert="pem", id="x", tags=["t"]),
    ],
)
def test_round_trip(model):
    assert type(model).from_dict(model.to_dict()) == model


def test_jwt_uses_source_field_names():
    data = JWTAuth(rsa_public_key="pem").to_dict()
    assert set(data) == {"rsa_public_key"}


def test_nested_ca_certificate():
    mtls = MTLSAuth(subject_name="sub", ca_certificate=CACertificate(id="ca1"))
    data = mtls.to_dict()
    assert data["ca_certificate"] == {"id": "ca1"}
    back = MTLSAuth.from_dict(data)
    assert isinstance(back.ca_certificate, CACertificate)
    assert back == mtls


def test_unknown_keys_ignored():
    acl = ACLGroup.from_dict({"group": "g", "unexpected": 1})
    assert acl == ACLGroup(group="g")


def test_to_dict_copies_lists():
    acl = ACLGroup(tags=["a"])
    data = acl.to_dict()
    data["tags"].append("b")
    assert acl.tags == ["a"]


def test_from_dict_rejects_non_mapping():
    with pytest.raises(TypeError):
        ACLGroup.from_dict(["group"])