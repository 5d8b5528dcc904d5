"""Dependency injection container.

The graph engine is never a module-level global: it is built by a
repository, registered here and handed to the services that need it.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap implementations
3. Lazy loading - instances created on first resolve
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(MetroService)

        # Testing
        container = Container()
        container.register(NetworkRepositoryPort, lambda: EmptyNetworkRepository())
        graph = container.resolve(NetworkRepositoryPort).load()

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)
            self._singletons.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Drop cached singletons; the next resolve builds fresh instances."""
        with self._lock:
            self._singletons.clear()

    def clear_all(self) -> None:
        """Clear all registrations and singletons."""
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.graph import EmptyNetworkRepository, SeedNetworkRepository
        from .ports.graph import NetworkRepositoryPort, TransitGraphPort
        from .services import MetroService

        config = config or get_config()
        container = cls(config=config)

        def create_repository() -> NetworkRepositoryPort:
            if config.graph.load_seed:
                return SeedNetworkRepository()
            return EmptyNetworkRepository()

        container.register(NetworkRepositoryPort, create_repository)

        # One graph per container, shared by every service
        container.register(
            TransitGraphPort,
            lambda: container.resolve(NetworkRepositoryPort).load(),
        )

        container.register(
            MetroService,
            lambda: MetroService(
                graph=container.resolve(TransitGraphPort),
                display=config.display,
            ),
        )

        return container

