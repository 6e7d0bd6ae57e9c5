"""
Service Container for WordDeck.

A small dependency injection container: services are registered by name
with an explicit list of the services they depend on, built lazily on the
first ``get`` and cached unless registered as transient. Framework objects
such as the Flask-SocketIO instance are supplied as external dependencies.
"""

from typing import Dict, Any, List, Optional, Callable
import inspect
import os
from enum import Enum


class ServiceLifecycle(Enum):
    """How long a built service instance lives"""
    SINGLETON = "singleton"  # Built once per container
    TRANSIENT = "transient"  # Built on every get()


class ServiceDefinition:
    """Registration record for one service"""

    def __init__(self, name: str, factory: Callable, dependencies: List[str] = None,
                 lifecycle: ServiceLifecycle = ServiceLifecycle.SINGLETON):
        self.name = name
        self.factory = factory
        self.dependencies = dependencies or []
        self.lifecycle = lifecycle


class CircularDependencyError(Exception):
    """Raised when services depend on each other in a cycle"""
    pass


class ServiceNotFoundError(Exception):
    """Raised when a requested service was never registered"""
    pass


class ServiceContainer:
    """
    Registry and factory for the application's services.

    Dependencies are passed positionally to the factory in the order they
    were listed at registration.
    """

    def __init__(self):
        self._services: Dict[str, ServiceDefinition] = {}
        self._instances: Dict[str, Any] = {}
        self._creating: set = set()  # Names being built, for cycle detection
        self._config: Dict[str, Any] = {}

    def register(self, name: str, factory: Callable, dependencies: List[str] = None,
                 lifecycle: ServiceLifecycle = ServiceLifecycle.SINGLETON) -> 'ServiceContainer':
        """
        Register a service.

        Args:
            name: Name the service is retrieved by
            factory: Class or callable that builds the service
            dependencies: Names of the services passed to ``factory``
            lifecycle: Whether the built instance is cached

        Returns:
            Self for method chaining
        """
        if name in self._services:
            raise ValueError(f"Service '{name}' is already registered")
        if not callable(factory):
            raise ValueError(f"Factory for '{name}' must be callable")

        self._services[name] = ServiceDefinition(name, factory, dependencies, lifecycle)
        return self

    def configure_services(self) -> 'ServiceContainer':
        """
        Register all WordDeck services with their dependencies.
        This method contains the service configuration for the application.
        """
        from worddeck.config.game_settings import GameSettings
        from worddeck.services.validation_service import ValidationService
        from worddeck.services.error_response_factory import ErrorResponseFactory
        from worddeck.services.concurrency_control_service import ConcurrencyControlService
        from worddeck.services.state_store import create_state_store
        from worddeck.services.session_store import SessionStore
        from worddeck.services.turn_engine import TurnEngine
        from worddeck.services.challenge_resolver import ChallengeResolver
        from worddeck.services.game_state_presenter import GameStatePresenter
        from worddeck.services.game_service import GameService
        from worddeck.services.session_service import SessionService
        from worddeck.services.broadcast_service import BroadcastService

        # Configuration Factory (highest priority - no dependencies)
        from config_factory import ConfigurationFactory
        self.register('ConfigurationFactory', ConfigurationFactory)

        # Settings, validation and error handling - no dependencies
        self.register('GameSettings', lambda: GameSettings(self._get_app_config()))
        self.register('ValidationService', ValidationService)
        self.register('ErrorResponseFactory', ErrorResponseFactory)
        self.register('GameStatePresenter', GameStatePresenter)
        self.register('SessionService', SessionService)

        # Persistence and locking
        self.register('StateStore', lambda: create_state_store(self._config))
        self.register('ConcurrencyControlService', ConcurrencyControlService)
        self.register('SessionStore', SessionStore,
                      dependencies=['StateStore', 'ConcurrencyControlService', 'GameSettings'])

        # Game rules
        self.register('WordValidity', self._create_word_validity)
        self.register('TurnEngine', TurnEngine, dependencies=['GameSettings'])
        self.register('ChallengeResolver', ChallengeResolver, dependencies=['WordValidity', 'GameSettings'])

        self.register('GameService', GameService, dependencies=[
            'SessionStore', 'TurnEngine', 'ChallengeResolver', 'ValidationService', 'GameStatePresenter'
        ])

        # Broadcast service - subscribes to the session store on creation
        # Note: socketio will be injected as external dependency
        self.register('BroadcastService', BroadcastService, dependencies=[
            'socketio', 'SessionService', 'GameStatePresenter', 'SessionStore'
        ])

        return self

    def _get_app_config(self):
        """Rebuild the AppConfig the container was configured with, if any."""
        from config_factory import AppConfig, Environment

        if not self._config:
            return None
        values = {key: value for key, value in self._config.items() if key in AppConfig.__dataclass_fields__}
        if isinstance(values.get('environment'), str):
            values['environment'] = Environment(values['environment'])
        return AppConfig(**values)

    def _create_word_validity(self):
        """Load the word list named by ``word_list_file``, relative to this directory."""
        from worddeck.core.word_validity import WordListValidity

        path = self._config.get('word_list_file', 'words.yaml')
        if not os.path.isabs(path):
            path = os.path.join(os.path.dirname(os.path.abspath(__file__)), path)
        return WordListValidity.from_yaml(path)

    def set_external_dependency(self, name: str, instance: Any) -> 'ServiceContainer':
        """Provide an object built outside the container, such as the SocketIO instance."""
        self._instances[name] = instance
        return self

    def set_config(self, config: Dict[str, Any]) -> 'ServiceContainer':
        """Merge application configuration values into the container"""
        self._config.update(config)
        return self

    def get(self, name: str) -> Any:
        """
        Get a service, building it and its dependencies if needed.

        Raises:
            ServiceNotFoundError: If the service is not registered
            CircularDependencyError: If the service depends on itself
        """
        if name in self._instances:
            return self._instances[name]
        if name not in self._services:
            raise ServiceNotFoundError(f"Service '{name}' is not registered")
        return self._create_service(name)

    def _create_service(self, name: str) -> Any:
        if name in self._creating:
            cycle = ' -> '.join(list(self._creating) + [name])
            raise CircularDependencyError(f"Circular dependency detected: {cycle}")

        self._creating.add(name)
        try:
            service_def = self._services[name]
            dependencies = [self.get(dep_name) for dep_name in service_def.dependencies]

            if inspect.isclass(service_def.factory) and not dependencies:
                instance = service_def.factory()
            else:
                instance = service_def.factory(*dependencies)

            if service_def.lifecycle == ServiceLifecycle.SINGLETON:
                self._instances[name] = instance
            return instance
        finally:
            self._creating.discard(name)

    def has_service(self, name: str) -> bool:
        return name in self._services

    def get_service_names(self) -> List[str]:
        return list(self._services.keys())

    def clear(self) -> 'ServiceContainer':
        """Forget every registration, instance and config value"""
        self._services.clear()
        self._instances.clear()
        self._creating.clear()
        self._config.clear()
        return self

    def __repr__(self) -> str:
        return f"ServiceContainer(services={len(self._services)}, instances={len(self._instances)})"


# Global container instance for the application
_app_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    """Get the global application service container"""
    global _app_container
    if _app_container is None:
        _app_container = ServiceContainer()
    return _app_container


def configure_container(socketio=None, config=None) -> ServiceContainer:
    """
    Configure the global service container with WordDeck services.

    Args:
        socketio: Flask-SocketIO instance
        config: Application configuration as a dict (ConfigurationFactory.to_dict())

    Returns:
        Configured service container
    """
    container = get_container()
    container.clear()

    if socketio is not None:
        container.set_external_dependency('socketio', socketio)
    if config is not None:
        container.set_config(config)

    container.configure_services()

    # BroadcastService subscribes to SessionStore commits when created
    if socketio is not None:
        container.get('BroadcastService')

    return container


def reset_container() -> None:
    """Drop the global container (useful for testing)"""
    global _app_container
    _app_container = None
