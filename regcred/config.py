import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from regcred.domain.image import DEFAULT_DOMAIN
from regcred.domain.shared.error import ConfigurationError


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from YAML file specified by REGCRED_CONFIG_FILE env var."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        config_file = os.environ.get("REGCRED_CONFIG_FILE")
        if config_file:
            path = Path(config_file)
            if path.exists():
                return yaml.safe_load(path.read_text()) or {}
        return {}


class Server(BaseModel):
    """Server configuration (nested in Config, uses env_nested_delimiter)."""

    name: str = "regcred-injector"
    version: str = "0.1.0"
    description: str = "Mutating webhook that injects registry imagePullSecrets into Pods"


class InjectorConfig(BaseModel):
    """Which registry triggers injection and which secret gets injected."""

    domain: str = DEFAULT_DOMAIN  # Registry domain, compared after docker.io normalisation
    secret_name: str = ""  # Must be set; empty means misconfigured
    secret_namespace: str = "default"  # Namespace holding the template secret


class KubernetesConfig(BaseModel):
    """How to reach the API server."""

    in_cluster: bool | None = None  # None = try in-cluster, fall back to kubeconfig
    kubeconfig: str | None = None
    context: str | None = None


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from REGCRED_LOG_FILE env var."""
        return os.environ.get("REGCRED_LOG_FILE")


class Config(BaseSettings):
    server: Server = Server()
    injector: InjectorConfig = InjectorConfig()
    kubernetes: KubernetesConfig = KubernetesConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = {
        "env_prefix": "REGCRED_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows REGCRED_INJECTOR__SECRET_NAME override
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config.

        Priority (highest to lowest):
        1. init_settings - values passed to Config()
        2. env_settings - environment variables
        3. dotenv_settings - .env file
        4. yaml_settings - REGCRED_CONFIG_FILE yaml
        5. file_secret_settings - secrets from files
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    def validate_injector(self) -> None:
        """Fail fast on settings the webhook cannot run without."""
        if not self.injector.secret_name:
            raise ConfigurationError(
                "No pull secret name configured (set REGCRED_INJECTOR__SECRET_NAME)"
            )
        if not self.injector.secret_namespace:
            raise ConfigurationError("No pull secret namespace configured")


def configure_logging(config: LoggingConfig) -> None:
    """Configure Python logging based on config.

    Should be called early in application startup so every logger picks up
    the configuration.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(config.level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("kubernetes").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
