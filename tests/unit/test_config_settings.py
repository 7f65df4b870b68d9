import pytest

from pokitdok.config import settings
from pokitdok.config.settings import ClientConfig, read_secret, load_settings
from pokitdok.core.http import PokitdokClient, create_client, create_client_with_token


@pytest.fixture(autouse=True)
def secrets_dir(monkeypatch, tmp_path):
    """Point /run/secrets at an empty temp directory."""
    monkeypatch.setattr(settings, "SECRETS_DIR", str(tmp_path))
    return tmp_path


def make_config(**overrides):
    base = dict(
        base_url="http://localhost:5002",
        api_version="v4",
        client_id="<client_id>",
        client_secret="<client_secret>",
        redirect_uri="",
        scope="",
        access_token="",
        auto_refresh=False,
    )
    base.update(overrides)
    return ClientConfig(**base)


def test_secret_prefers_run_secrets(secrets_dir, monkeypatch):
    (secrets_dir / "pokitdok_client_secret").write_text("file-secret\n")
    monkeypatch.setenv("POKITDOK_CLIENT_SECRET", "env-secret")
    assert read_secret("pokitdok_client_secret", "POKITDOK_CLIENT_SECRET") == "file-secret"


def test_secret_falls_back_to_env(monkeypatch):
    monkeypatch.setenv("POKITDOK_CLIENT_SECRET", "env-secret")
    assert read_secret("pokitdok_client_secret", "POKITDOK_CLIENT_SECRET") == "env-secret"


def test_secret_ignores_empty_file(secrets_dir):
    (secrets_dir / "pokitdok_client_secret").write_text("   ")
    assert read_secret("pokitdok_client_secret") is None


def test_load_settings_defaults_with_token(monkeypatch):
    monkeypatch.setenv("POKITDOK_ACCESS_TOKEN", "preset-token")
    cfg = load_settings()
    assert cfg.base_url == "https://platform.pokitdok.com"
    assert cfg.api_version == "v4"
    assert cfg.access_token == "preset-token"
    assert cfg.auto_refresh is False
    assert cfg.has_credentials is False


def test_load_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("POKITDOK_CLIENT_ID", "id")
    monkeypatch.setenv("POKITDOK_CLIENT_SECRET", "secret")
    monkeypatch.setenv("POKITDOK_BASE_URL", "http://localhost:5002/")
    monkeypatch.setenv("POKITDOK_API_VERSION", "v5")
    monkeypatch.setenv("POKITDOK_REDIRECT_URI", "http://nowhere")
    monkeypatch.setenv("POKITDOK_SCOPE", "user_schedule")
    monkeypatch.setenv("POKITDOK_AUTO_REFRESH", "true")

    cfg = load_settings()

    assert cfg.client_id == "id"
    assert cfg.client_secret == "secret"
    assert cfg.base_url == "http://localhost:5002"
    assert cfg.api_version == "v5"
    assert cfg.redirect_uri == "http://nowhere"
    assert cfg.scope == "user_schedule"
    assert cfg.auto_refresh is True
    assert cfg.has_credentials is True


@pytest.mark.parametrize("raw,expected", [("1", True), ("YES", True), ("on", True), ("false", False), ("0", False)])
def test_auto_refresh_flag_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("POKITDOK_ACCESS_TOKEN", "t")
    monkeypatch.setenv("POKITDOK_AUTO_REFRESH", raw)
    assert load_settings().auto_refresh is expected


def test_load_settings_requires_credentials_or_token():
    with pytest.raises(ValueError):
        load_settings()


def test_load_settings_skip_validation():
    cfg = load_settings(validate=False)
    assert cfg.client_id == ""
    assert cfg.access_token == ""


def test_create_client_with_preset_token_skips_fetch(stub_transport):
    client = create_client(make_config(access_token="preset", auto_refresh=True), transport=stub_transport)
    assert isinstance(client, PokitdokClient)
    assert client.access_token == "preset"
    assert client.auto_refresh is True
    assert client.url_base == "http://localhost:5002/api/v4"
    assert stub_transport.token_calls == []


def test_create_client_with_credentials_fetches_token(stub_transport):
    client = create_client(make_config(), transport=stub_transport)
    assert client.access_token == "fresh-token"
    assert len(stub_transport.token_calls) == 1


def test_create_client_loads_settings_from_env(monkeypatch, stub_transport):
    monkeypatch.setenv("POKITDOK_ACCESS_TOKEN", "env-token")
    monkeypatch.setenv("POKITDOK_BASE_URL", "http://localhost:5002")
    client = create_client(transport=stub_transport)
    assert client.access_token == "env-token"
    assert client.token_url == "http://localhost:5002/oauth2/token"


def test_create_client_with_token(stub_transport):
    client = create_client_with_token("abc", base_url="http://localhost:5002", transport=stub_transport)
    assert client.access_token == "abc"
    assert client.auto_refresh is False
    assert client.client_id is None
    assert stub_transport.token_calls == []


def test_client_defaults_come_from_settings(stub_transport):
    client = PokitdokClient(token="t", transport=stub_transport)
    assert client.url_base == f"{settings.DEFAULT_BASE_URL}/api/{settings.DEFAULT_API_VERSION}"
    assert client.token_url == f"{settings.DEFAULT_BASE_URL}/oauth2/token"


def test_secret_unreadable_path_falls_back_to_env(secrets_dir, monkeypatch):
    (secrets_dir / "pokitdok_client_secret").mkdir()
    monkeypatch.setenv("POKITDOK_CLIENT_SECRET", "env-secret")
    assert read_secret("pokitdok_client_secret", "POKITDOK_CLIENT_SECRET") == "env-secret"
