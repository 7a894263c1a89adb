"""Config provider protocol and implementations. Extend by adding new providers."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

# .env holds per-machine values (API URL, etc.); config.yaml keeps only env var names
_project_root = Path(__file__).resolve().parent.parent.parent.parent
load_dotenv(_project_root / ".env")

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent.parent / "config" / "config.yaml"


class ConfigProvider:
    """Protocol for config sources. Implement to add env, vault, remote, etc."""

    def load(self) -> Dict[str, Any]:
        """Return the full config dict."""
        raise NotImplementedError


class YamlConfigProvider(ConfigProvider):
    """Load config from a YAML file. An empty file loads as {}."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else DEFAULT_CONFIG_PATH

    def load(self) -> Dict[str, Any]:
        with open(self.path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}


class DictConfigProvider(ConfigProvider):
    """In-memory config, mostly for tests and scripts that build config on the fly."""

    def __init__(self, data: Dict[str, Any]):
        self.data = data

    def load(self) -> Dict[str, Any]:
        return dict(self.data)


def get_config(provider: Optional[ConfigProvider] = None) -> Dict[str, Any]:
    """Get config from the given provider, or default YAML."""
    if provider is None:
        provider = YamlConfigProvider()
    return provider.load()


def section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return cfg[name] as a dict, {} when missing or null."""
    value = cfg.get(name)
    return value if isinstance(value, dict) else {}


def env_or(cfg_section: Dict[str, Any], key: str, env_key: str) -> Any:
    """
    Value of cfg_section[key], overridden by the env var named in cfg_section[env_key].
    e.g. store.base_url overridden by $BILLED_API_URL when store.base_url_env = BILLED_API_URL.
    """
    env_name = cfg_section.get(env_key)
    if env_name:
        env_value = os.getenv(env_name)
        if env_value:
            return env_value
    return cfg_section.get(key)
