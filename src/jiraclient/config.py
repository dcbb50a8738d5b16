"""Configuration management for jiraclient.

Two layers live here:

- Client configurations (DefaultJiraConfig, ForgeJiraConfig). These are
  immutable values handed to JiraClient and threaded through every request.
- Ambient settings loaded from ./.jiraclient/settings.toml (in the current
  working directory) with the following precedence:
  1. Environment variables (highest)
  2. Settings file
  3. Built-in defaults (lowest)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

import toml

from .errors import ConfigError

if TYPE_CHECKING:
    from .transports.bridge import BridgeApi

# Default paths - stored in current working directory
JIRACLIENT_HOME = Path.cwd() / ".jiraclient"
SETTINGS_FILE = JIRACLIENT_HOME / "settings.toml"
LOGS_DIR = JIRACLIENT_HOME / "logs"

ATLASSIAN_API_GATEWAY = "https://api.atlassian.com/ex/jira"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class DefaultJiraConfig:
    """Direct HTTPS access to a Jira Cloud site.

    Authenticate either with ``email`` + ``api_token`` (basic auth) or with an
    OAuth ``access_token`` (bearer auth). With ``cloud_id`` set, requests go
    through the Atlassian API gateway instead of ``base_url``.
    """

    client_type: ClassVar[str] = "default"

    base_url: str = ""
    email: str = ""
    api_token: str = field(default="", repr=False)
    access_token: str = field(default="", repr=False)
    cloud_id: str = ""
    timeout: float = DEFAULT_TIMEOUT

    @property
    def api_base_url(self) -> str:
        """Base URL that request paths are appended to."""
        if self.cloud_id:
            return f"{ATLASSIAN_API_GATEWAY}/{self.cloud_id}"
        return self.base_url.rstrip("/")


@dataclass(frozen=True)
class ForgeJiraConfig:
    """In-platform access through a host-provided request bridge.

    ``api`` must expose ``as_user()`` and ``as_app()``, each returning an object
    with an async ``request_jira(route, *, method, headers, content)``.
    """

    client_type: ClassVar[str] = "forge"

    api: "BridgeApi"


JiraConfig = DefaultJiraConfig | ForgeJiraConfig


def validate_config(config: Any) -> None:
    """Validate a client configuration.

    Args:
        config: The configuration object to validate.

    Raises:
        ConfigError: If the configuration is invalid or missing required properties.
    """
    if config is None:
        raise ConfigError("Config is required")

    if isinstance(config, DefaultJiraConfig):
        if not config.base_url and not config.cloud_id:
            raise ConfigError("Default config must have a 'base_url' or a 'cloud_id'")
        if config.base_url and not config.base_url.startswith(("http://", "https://")):
            raise ConfigError(f"Invalid base_url: {config.base_url}")
        if config.timeout <= 0:
            raise ConfigError("Default config 'timeout' must be positive")
        if config.access_token:
            return
        if not config.email:
            raise ConfigError("Default config must have an 'email' property")
        if not config.api_token:
            raise ConfigError("Default config must have an 'api_token' property")
    elif isinstance(config, ForgeJiraConfig):
        if config.api is None:
            raise ConfigError("Forge config must have an 'api' property")
        for name in ("as_user", "as_app"):
            if not callable(getattr(config.api, name, None)):
                raise ConfigError(f"Forge config 'api' must provide {name}()")
    else:
        raise ConfigError(
            f"Invalid config type: {type(config).__name__}. "
            "Must be DefaultJiraConfig or ForgeJiraConfig"
        )


@dataclass
class JiraSettings:
    """Connection section of the settings file."""

    base_url: str = ""
    email: str = ""
    api_token: str = ""
    access_token: str = ""
    cloud_id: str = ""


@dataclass
class HttpSettings:
    """HTTP transport section."""

    timeout: float = DEFAULT_TIMEOUT


@dataclass
class LoggingSettings:
    """Logging section."""

    level: str = "info"  # file handler level
    console_level: str = "warning"


@dataclass
class Settings:
    """Main settings container."""

    jira: JiraSettings = field(default_factory=JiraSettings)
    http: HttpSettings = field(default_factory=HttpSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "JIRA_BASE_URL": ("jira", "base_url"),
    "JIRA_EMAIL": ("jira", "email"),
    "JIRA_API_TOKEN": ("jira", "api_token"),
    "JIRA_ACCESS_TOKEN": ("jira", "access_token"),
    "JIRA_CLOUD_ID": ("jira", "cloud_id"),
    "JIRACLIENT_TIMEOUT": ("http", "timeout"),
    "JIRACLIENT_LOG_LEVEL": ("logging", "level"),
}


def _merge_section(section: Any, data: dict) -> None:
    for key, value in data.items():
        if hasattr(section, key):
            current = getattr(section, key)
            setattr(section, key, type(current)(value))


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from settings.toml and the environment, merging with defaults."""
    settings = Settings()
    settings_file = path or SETTINGS_FILE

    if settings_file.exists():
        try:
            data = toml.load(settings_file)
        except (toml.TomlDecodeError, OSError):
            data = {}

        for section_name in ("jira", "http", "logging"):
            section_data = data.get(section_name)
            if isinstance(section_data, dict):
                try:
                    _merge_section(getattr(settings, section_name), section_data)
                except (TypeError, ValueError) as e:
                    raise ConfigError(f"Invalid [{section_name}] settings: {e}") from e

    for env_key, (section_name, key) in ENV_OVERRIDES.items():
        raw_value = os.environ.get(env_key)
        if raw_value is None:
            continue
        try:
            _merge_section(getattr(settings, section_name), {key: raw_value})
        except ValueError as e:
            raise ConfigError(f"Invalid value for {env_key}: {raw_value}") from e

    return settings


def save_settings(settings: Settings, path: Path | None = None) -> None:
    """Save settings to settings.toml."""
    settings_file = path or SETTINGS_FILE
    settings_file.parent.mkdir(parents=True, exist_ok=True)

    data: dict[str, Any] = {
        "jira": {
            "base_url": settings.jira.base_url,
            "email": settings.jira.email,
            "api_token": settings.jira.api_token,
            "access_token": settings.jira.access_token,
            "cloud_id": settings.jira.cloud_id,
        },
        "http": {
            "timeout": settings.http.timeout,
        },
        "logging": {
            "level": settings.logging.level,
            "console_level": settings.logging.console_level,
        },
    }

    with open(settings_file, "w") as f:
        toml.dump(data, f)


def create_default_settings(path: Path | None = None) -> bool:
    """Create a commented settings.toml if it doesn't exist.

    Returns:
        True if a new file was written, False if it already existed.
    """
    settings_file = path or SETTINGS_FILE
    if settings_file.exists():
        return False

    settings_file.parent.mkdir(parents=True, exist_ok=True)

    commented_settings = '''# jiraclient settings
# Values here can be overridden with JIRA_BASE_URL, JIRA_EMAIL, JIRA_API_TOKEN,
# JIRA_ACCESS_TOKEN, JIRA_CLOUD_ID and JIRACLIENT_TIMEOUT.

[jira]
# Your Jira Cloud site, e.g. https://yourcompany.atlassian.net
base_url = ""

# Basic auth: account email + API token
# (create one at https://id.atlassian.com/manage-profile/security/api-tokens)
email = ""
api_token = ""

# Bearer auth: an OAuth 2.0 access token. When cloud_id is set, requests go
# through https://api.atlassian.com/ex/jira/<cloud_id>
# access_token = ""
# cloud_id = ""

[http]
# Request timeout in seconds
timeout = 30.0

[logging]
# Levels: debug, info, warning, error
level = "info"
console_level = "warning"
'''

    settings_file.write_text(commented_settings)
    return True


def default_config_from_settings(settings: Settings | None = None) -> DefaultJiraConfig:
    """Build a DefaultJiraConfig from loaded settings."""
    settings = settings or load_settings()
    return DefaultJiraConfig(
        base_url=settings.jira.base_url,
        email=settings.jira.email,
        api_token=settings.jira.api_token,
        access_token=settings.jira.access_token,
        cloud_id=settings.jira.cloud_id,
        timeout=settings.http.timeout,
    )
