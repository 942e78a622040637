"""
Shared service instances for the Streamlit app and the API server.

Configuration, the geocode resolver and the report renderer are created
lazily on first use and reused for the lifetime of the process.
"""

from __future__ import annotations
import logging
import os
import threading
from typing import Optional

from .geocoding.resolver import GeocodeResolver
from .reporting.report_renderer import ReportRenderer
from .utils.config import Config
from .utils.errors import ConfigurationError
from .utils.logging import setup_logging_from_config

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "MULLAI_CONFIG"

_config: Optional[Config] = None
_resolver: Optional[GeocodeResolver] = None
_renderer: Optional[ReportRenderer] = None
_init_lock = threading.Lock()


def _initialize_system() -> None:
    """
    Load configuration and build the shared services.

    Raises:
        ConfigurationError: If the configuration cannot be loaded
    """
    global _config, _resolver, _renderer

    with _init_lock:
        if _config is not None:
            return

        config_path = os.getenv(CONFIG_PATH_ENV, "config.yaml")
        try:
            config = Config.load(config_path)
        except ConfigurationError:
            logger.error(f"Failed to load configuration from {config_path}", exc_info=True)
            raise

        setup_logging_from_config(config.logging)
        logger.info(
            f"Configuration loaded: geocoder={config.geocoder.base_url}, "
            f"report={config.report.filename}"
        )

        _resolver = GeocodeResolver.from_config(config.geocoder)
        _renderer = ReportRenderer.from_config(config.report)
        _config = config
        logger.info("System initialization complete")


def get_config() -> Config:
    _initialize_system()
    return _config


def get_resolver() -> GeocodeResolver:
    _initialize_system()
    return _resolver


def get_renderer() -> ReportRenderer:
    _initialize_system()
    return _renderer

