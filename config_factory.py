"""
Configuration Factory - Centralized configuration management for WordDeck

Settings are read from environment variables into a validated ``AppConfig``.
The environment (FLASK_ENV) picks a profile of defaults, and every other
variable maps onto one ``AppConfig`` field.
"""

import os
import logging
from typing import Any, Dict, Optional, Type
from enum import Enum
from dataclasses import dataclass, field, fields


class Environment(Enum):
    """Environment types for configuration"""
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class ConfigError(Exception):
    """Configuration-related errors"""
    pass


DEFAULT_SECRET_KEY = 'dev-secret-key-change-in-production'
STORAGE_BACKENDS = ('memory', 'file')
ASYNC_MODES = ('threading', 'eventlet')


@dataclass
class AppConfig:
    """Application configuration with type safety and validation"""

    # Core Flask settings
    secret_key: str = field(default_factory=lambda: DEFAULT_SECRET_KEY)
    debug: bool = False
    flask_env: str = 'development'

    # Server settings
    host: str = '0.0.0.0'
    port: int = 5000
    socketio_async_mode: str = 'eventlet'

    # Game rules
    max_players_per_game: int = 4
    hand_size: int = 10
    challenge_penalty: int = 10
    enforce_turn_order: bool = True

    # State store settings
    storage_backend: str = 'memory'
    storage_dir: str = 'games'
    storage_retry_attempts: int = 3
    storage_retry_backoff_seconds: float = 0.05

    word_list_file: str = 'words.yaml'

    # Gunicorn settings
    worker_connections: int = 1000
    timeout: int = 30
    keepalive: int = 2
    log_level: str = 'info'

    environment: Environment = Environment.DEVELOPMENT

    def __post_init__(self):
        self._validate()

    def _validate(self):
        """Raise ConfigError for the first out-of-range value"""
        ranges = (
            ('port', 1, 65535),
            ('max_players_per_game', 1, 4),
            ('hand_size', 1, 10),
            ('challenge_penalty', 0, 1000),
            ('storage_retry_attempts', 1, 10),
            ('storage_retry_backoff_seconds', 0, 5),
        )
        for name, low, high in ranges:
            value = getattr(self, name)
            if not low <= value <= high:
                label = 'port number' if name == 'port' else name
                raise ConfigError(f"Invalid {label}: {value}")

        if self.socketio_async_mode not in ASYNC_MODES:
            raise ConfigError(f"Invalid socketio_async_mode: {self.socketio_async_mode}")

        if self.storage_backend not in STORAGE_BACKENDS:
            raise ConfigError(f"Invalid storage_backend: {self.storage_backend}")

        if self.environment == Environment.PRODUCTION and self.secret_key == DEFAULT_SECRET_KEY:
            raise ConfigError("Production environment requires a secure SECRET_KEY")

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING


# Defaults that depend on FLASK_ENV; anything else unknown counts as production
ENVIRONMENT_PROFILES = {
    'development': {'environment': Environment.DEVELOPMENT, 'debug': True, 'socketio_async_mode': 'eventlet'},
    'testing': {'environment': Environment.TESTING, 'debug': True, 'socketio_async_mode': 'threading'},
    'production': {'environment': Environment.PRODUCTION, 'debug': False, 'socketio_async_mode': 'eventlet'},
}

# Every field except environment and flask_env is read from its upper-cased name
_ENV_FIELDS = [f for f in fields(AppConfig) if f.name not in ('environment', 'flask_env')]


def _convert(raw: str, var_type: Type) -> Any:
    if var_type is bool:
        return raw.lower() in ('true', '1', 'yes', 'on')
    return var_type(raw)


class ConfigurationFactory:
    """
    Factory for creating and managing application configuration.

    A process-wide singleton: every ``ConfigurationFactory()`` call returns
    the same instance, so the app, Gunicorn hooks and the service container
    all read one loaded ``AppConfig``.
    """

    _instance: Optional['ConfigurationFactory'] = None
    _config: Optional[AppConfig] = None

    def __new__(cls) -> 'ConfigurationFactory':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not hasattr(self, '_initialized'):
            self._logger = logging.getLogger(__name__)
            self._env_overrides: Dict[str, Any] = {}
            self._initialized = True

    def load_from_environment(self, env_prefix: str = '') -> AppConfig:
        """
        Load configuration from environment variables.

        Values that fail type conversion are logged and replaced with the
        default for the current environment.

        Args:
            env_prefix: Optional prefix for environment variables (e.g., 'WORDDECK_')

        Returns:
            Configured AppConfig instance
        """
        flask_env = os.environ.get(f"{env_prefix}FLASK_ENV", 'development')
        profile = ENVIRONMENT_PROFILES.get(flask_env, ENVIRONMENT_PROFILES['production'])

        values: Dict[str, Any] = {'flask_env': flask_env, 'environment': profile['environment']}
        for config_field in _ENV_FIELDS:
            default = profile.get(config_field.name)
            env_key = f"{env_prefix}{config_field.name.upper()}"
            raw = os.environ.get(env_key)
            if raw is None:
                if default is not None:
                    values[config_field.name] = default
                continue
            try:
                values[config_field.name] = _convert(raw, config_field.type)
            except ValueError:
                self._logger.warning(f"Invalid {config_field.type.__name__} value for {env_key}: {raw}, using default")
                if default is not None:
                    values[config_field.name] = default

        values.update({key: value for key, value in self._env_overrides.items()
                       if key in AppConfig.__dataclass_fields__})

        self._config = AppConfig(**values)
        self._logger.info(f"Configuration loaded for environment: {self._config.environment.value}")
        return self._config

    def load_from_dict(self, config_dict: Dict[str, Any]) -> AppConfig:
        """Load configuration from a dictionary of field values (useful for testing)."""
        config_dict = dict(config_dict)
        if isinstance(config_dict.get('environment'), str):
            config_dict['environment'] = Environment(config_dict['environment'])

        self._config = AppConfig(**config_dict)
        return self._config

    def override_setting(self, key: str, value: Any) -> 'ConfigurationFactory':
        """
        Override one setting now and on every later load.

        Raises:
            ConfigError: If the new value fails validation
        """
        self._env_overrides[key] = value

        if self._config and hasattr(self._config, key):
            setattr(self._config, key, value)
            self._config._validate()

        return self

    def get_config(self) -> AppConfig:
        """
        Get the current configuration.

        Raises:
            ConfigError: If no configuration has been loaded
        """
        if self._config is None:
            raise ConfigError("Configuration not loaded. Call load_from_environment() or load_from_dict() first.")
        return self._config

    def reset(self) -> 'ConfigurationFactory':
        """Forget the loaded configuration and overrides"""
        self._config = None
        self._env_overrides.clear()
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict of the current configuration, with the environment as its string value"""
        config = self.get_config()
        return {
            f.name: getattr(config, f.name).value if f.name == 'environment' else getattr(config, f.name)
            for f in fields(config)
        }

    def get_flask_config(self) -> Dict[str, Any]:
        """Settings for Flask's app.config.update()"""
        config = self.get_config()
        return {
            'SECRET_KEY': config.secret_key,
            'DEBUG': config.debug,
            'ENV': config.flask_env,
            'MAX_PLAYERS_PER_GAME': config.max_players_per_game,
            'HAND_SIZE': config.hand_size,
            'CHALLENGE_PENALTY': config.challenge_penalty,
            'ENFORCE_TURN_ORDER': config.enforce_turn_order,
            'WORD_LIST_FILE': config.word_list_file,
        }


_config_factory = ConfigurationFactory()


def get_config() -> AppConfig:
    """Get the global application configuration"""
    return _config_factory.get_config()


def load_config(env_prefix: str = '') -> AppConfig:
    """Load configuration from environment variables"""
    return _config_factory.load_from_environment(env_prefix)


def reset_config() -> ConfigurationFactory:
    """Reset configuration (for testing)"""
    return _config_factory.reset()
