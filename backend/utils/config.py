"""Configuration management for the land claim app."""

import os
import yaml
from dataclasses import dataclass
from dotenv import load_dotenv

from .errors import ConfigurationError

load_dotenv()


@dataclass
class AppConfig:
    """Application display settings."""
    title: str
    default_center: tuple
    default_zoom: int
    about_text: str


@dataclass
class GeocoderConfig:
    """Place search service configuration."""
    base_url: str
    user_agent: str
    accept_language: str
    timeout: float
    min_interval: float


@dataclass
class ReportConfig:
    """PDF report export configuration."""
    filename: str
    title: str


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str
    format: str
    file: str


@dataclass
class Config:
    """Main configuration class."""
    app: AppConfig
    geocoder: GeocoderConfig
    report: ReportConfig
    logging: LoggingConfig

    @classmethod
    def load(cls, config_path: str = "config.yaml") -> "Config":
        """
        Load configuration from file and environment variables.

        Environment variables override config file values:
        - GEOCODER_BASE_URL
        - GEOCODER_USER_AGENT
        - GEOCODER_TIMEOUT
        - LOG_LEVEL

        Args:
            config_path: Path to YAML configuration file

        Returns:
            Config instance with loaded settings

        Raises:
            ConfigurationError: If the file is missing or a value is malformed
        """
        if not os.path.exists(config_path):
            raise ConfigurationError.missing(config_path)

        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        app_data = config_data.get("app", {}) or {}
        center = app_data.get("default_center", [20.0, 80.0])
        try:
            default_center = (float(center[0]), float(center[1]))
        except (TypeError, ValueError, IndexError) as e:
            raise ConfigurationError.invalid("app.default_center", e)

        app_config = AppConfig(
            title=app_data.get("title", "Mullai"),
            default_center=default_center,
            default_zoom=int(app_data.get("default_zoom", 5)),
            about_text=(app_data.get("about_text") or "").strip()
        )

        # Geocoder configuration with environment overrides
        geo_data = config_data.get("geocoder", {}) or {}
        try:
            timeout = float(os.getenv("GEOCODER_TIMEOUT", geo_data.get("timeout", 15)))
        except (TypeError, ValueError) as e:
            raise ConfigurationError.invalid("geocoder.timeout", e)
        try:
            min_interval = float(geo_data.get("min_interval", 1.0))
        except (TypeError, ValueError) as e:
            raise ConfigurationError.invalid("geocoder.min_interval", e)

        geocoder_config = GeocoderConfig(
            base_url=os.getenv("GEOCODER_BASE_URL", geo_data.get("base_url", "https://nominatim.openstreetmap.org/search")),
            user_agent=os.getenv("GEOCODER_USER_AGENT", geo_data.get("user_agent", "mullai-land-claims")),
            accept_language=geo_data.get("accept_language", "en"),
            timeout=timeout,
            min_interval=min_interval
        )

        report_data = config_data.get("report", {}) or {}
        report_config = ReportConfig(
            filename=report_data.get("filename", "report.pdf"),
            title=report_data.get("title", "Decision Report")
        )

        # Logging configuration
        log_data = config_data.get("logging", {}) or {}
        logging_config = LoggingConfig(
            level=os.getenv("LOG_LEVEL", log_data.get("level", "INFO")),
            format=log_data.get("format", "%(asctime)s - %(name)s - %(levelname)s - [session=%(session_id)s] %(message)s"),
            file=log_data.get("file", "")
        )

        return cls(
            app=app_config,
            geocoder=geocoder_config,
            report=report_config,
            logging=logging_config,
        )
