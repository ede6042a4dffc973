import pytest

from glueops.core.auth import AuthError, get_client


@pytest.fixture(autouse=True)
def _isolated_aws_config(monkeypatch, tmp_path):
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "credentials"))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")
    for name in ("AWS_PROFILE", "AWS_DEFAULT_PROFILE", "AWS_REGION", "AWS_DEFAULT_REGION"):
        monkeypatch.delenv(name, raising=False)


def test_get_client_uses_region():
    client = get_client(None, "eu-west-1")

    assert client.meta.region_name == "eu-west-1"
    assert client.meta.service_model.service_name == "glue"


def test_unknown_profile_raises_auth_error():
    with pytest.raises(AuthError, match="profile 'missing' was not found"):
        get_client("missing", "us-east-1")


def test_missing_region_raises_auth_error():
    with pytest.raises(AuthError, match="No AWS region"):
        get_client(None, None)


def test_blank_profile_is_ignored():
    client = get_client("  ", "us-west-2")

    assert client.meta.region_name == "us-west-2"
