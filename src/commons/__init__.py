"""
Extendible commons package.

Subpackages:
  config   - ConfigProvider, YamlConfigProvider; add env/vault by implementing ConfigProvider
  storage  - SessionStorage; add other session backends by implementing it

Public API: config, load_config, Constants, setup_logging.
"""

from commons.config import config, load_config
from commons.constants import Constants
from commons.logging_setup import setup_logging

__all__ = ["config", "load_config", "Constants", "setup_logging"]
