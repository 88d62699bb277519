import logging
import os
from dataclasses import dataclass, field
from typing import Optional

import yaml
from dotenv import load_dotenv

load_dotenv()  # Loads variables from .env into the environment

logger = logging.getLogger(__name__)

API_REGIONS = {
    "US": "us",
    "EU": "eu",
    "AU": "au",
    "ME": "me",
    "IN": "in",
}

ACCESS_TOKEN_ENV = "KONNECT_ACCESS_TOKEN"
REGION_ENV = "KONNECT_REGION"

DEFAULT_REGION = API_REGIONS["US"]
DEFAULT_HOST_TEMPLATE = "https://{region}.api.konghq.com"
DEFAULT_API_VERSION = "/v2"
DEFAULT_ALTERNATE_VERSION_PREFIX = "/v3"
DEFAULT_TIMEOUT = 30.0


class ConfigLoader:
    _instance = None
    _config = None

    def __new__(cls):
        """
        Create a singleton instance of ConfigLoader.
        Loads configuration from YAML file on first instantiation.
        """
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
            cls._load_config()
        return cls._instance

    @classmethod
    def _load_config(cls):
        """
        Load the package's config.yaml into the class variable _config.
        A missing file yields an empty configuration and the built-in defaults apply.
        """
        config_path = os.path.join(os.path.dirname(__file__), "..", "config.yaml")
        config_path = os.path.abspath(config_path)
        if not os.path.isfile(config_path):
            logger.warning("Config file %s not found; using built-in defaults", config_path)
            cls._config = {}
            return
        with open(config_path, "r") as f:
            cls._config = yaml.safe_load(f) or {}

    def get_config(self):
        """
        Return the loaded configuration dictionary.
        """
        return self._config


def get_config():
    """
    Helper function to get the singleton configuration instance's config dictionary.
    """
    return ConfigLoader().get_config()


@dataclass(frozen=True)
class KonnectSettings:
    """Connection settings for the Konnect API.

    Resolved once and immutable afterwards. Use `KonnectSettings.resolve()`
    rather than the constructor so the documented fallback order applies:
    explicit argument, then environment, then config.yaml, then built-in default.
    The access token never comes from config.yaml.
    """

    api_key: str
    region: str = DEFAULT_REGION
    timeout: float = DEFAULT_TIMEOUT
    host_template: str = DEFAULT_HOST_TEMPLATE
    api_version: str = DEFAULT_API_VERSION
    alternate_version_prefix: str = DEFAULT_ALTERNATE_VERSION_PREFIX
    base_url: str = field(init=False)

    def __post_init__(self):
        host = self.host_template.format(region=self.region).rstrip("/")
        object.__setattr__(self, "base_url", f"{host}{self.api_version}")

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def resolve(cls, api_key: Optional[str] = None, region: Optional[str] = None) -> "KonnectSettings":
        cfg = get_config() or {}

        resolved_key = api_key or os.getenv(ACCESS_TOKEN_ENV) or ""
        resolved_region = region or os.getenv(REGION_ENV) or cfg.get("default_region") or DEFAULT_REGION

        if not resolved_key:
            logger.warning(f"{ACCESS_TOKEN_ENV} not set in environment. API calls will fail.")
        if resolved_region not in API_REGIONS.values():
            logger.warning(f"Unknown Konnect region '{resolved_region}'; known regions: {sorted(API_REGIONS.values())}")

        return cls(
            api_key=resolved_key,
            region=resolved_region,
            timeout=float(cfg.get("request_timeout", DEFAULT_TIMEOUT)),
            host_template=cfg.get("api_host_template", DEFAULT_HOST_TEMPLATE),
            api_version=cfg.get("api_version", DEFAULT_API_VERSION),
            alternate_version_prefix=cfg.get("alternate_version_prefix", DEFAULT_ALTERNATE_VERSION_PREFIX),
        )
