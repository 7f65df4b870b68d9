"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

SECRETS_DIR = "/run/secrets"
DEFAULT_BASE_URL = "https://platform.pokitdok.com"
DEFAULT_API_VERSION = "v4"


def read_secret(name: str, env_var: str | None = None) -> str | None:
    """Return a secret from the secrets mount, else from ``env_var``.

    Blank values count as missing in both places.
    """
    path = Path(SECRETS_DIR) / name
    try:
        value = path.read_text().strip()
    except FileNotFoundError:
        value = ""
    except OSError as e:
        logger.warning(f"[settings] Cannot read secret {name}: {e}")
        value = ""

    if value:
        logger.debug(f"[settings] {name} read from secrets mount")
        return value
    if env_var:
        return os.environ.get(env_var, "").strip() or None
    return None


def _env_flag(var_name: str, default: bool = False) -> bool:
    value = os.environ.get(var_name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ClientConfig:
    """PokitDok client configuration container."""
    # Platform
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION

    # Client credentials
    client_id: str = ""
    client_secret: str = ""

    # Authorization code flow (stored, not used for requests)
    redirect_uri: str = ""
    scope: str = ""

    # Token handling
    access_token: str = ""
    auto_refresh: bool = False

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id and self.client_secret)

    def validate(self) -> None:
        """Ensure a client can be built from this config.

        Raises:
            ValueError: If neither an access token nor a full credential pair is configured
        """
        if not self.access_token and not self.has_credentials:
            raise ValueError(
                "POKITDOK_CLIENT_ID and POKITDOK_CLIENT_SECRET are required "
                "when POKITDOK_ACCESS_TOKEN is not set."
            )


def load_settings(validate: bool = True) -> ClientConfig:
    """Load client settings from environment and /run/secrets."""
    client_secret = read_secret("pokitdok_client_secret", "POKITDOK_CLIENT_SECRET")
    access_token = read_secret("pokitdok_access_token", "POKITDOK_ACCESS_TOKEN")

    config = ClientConfig(
        base_url=os.environ.get("POKITDOK_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        api_version=os.environ.get("POKITDOK_API_VERSION", DEFAULT_API_VERSION),
        client_id=os.environ.get("POKITDOK_CLIENT_ID", ""),
        client_secret=client_secret or "",
        redirect_uri=os.environ.get("POKITDOK_REDIRECT_URI", ""),
        scope=os.environ.get("POKITDOK_SCOPE", ""),
        access_token=access_token or "",
        auto_refresh=_env_flag("POKITDOK_AUTO_REFRESH"),
    )

    if validate:
        config.validate()

    token_label = "preset" if config.access_token else "client-credentials"
    logger.info(
        f"[settings] base_url={config.base_url}; version={config.api_version}; "
        f"token={token_label}; auto_refresh={config.auto_refresh}"
    )
    return config
