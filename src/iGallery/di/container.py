from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Set, Type

from .lifetime import Lifetime
from ..errors import CircularDependencyError, ResolutionError


@dataclass
class Registration:
    interface: Type
    implementation: Optional[Type] = None
    lifetime: Lifetime = Lifetime.TRANSIENT
    factory: Optional[Callable[["Container"], Any]] = None
    kwargs: Dict[str, Any] = field(default_factory=dict)


class Container:
    """Minimal DI container.

    Factories receive the container so they can resolve their own
    dependencies; plain implementations are called with the registered
    keyword arguments.
    """

    def __init__(self):
        self._registrations: Dict[Type, Registration] = {}
        self._singleton_instances: Dict[Type, Any] = {}
        self._resolving: Set[Type] = set()

    def register_singleton(self, interface: Type, implementation: Optional[Type] = None, **kwargs):
        self._register(interface, implementation, Lifetime.SINGLETON, kwargs)

    def register_factory(
        self,
        interface: Type,
        factory: Callable[["Container"], Any],
        lifetime: Lifetime = Lifetime.TRANSIENT,
    ):
        self._singleton_instances.pop(interface, None)
        self._registrations[interface] = Registration(
            interface=interface,
            lifetime=lifetime,
            factory=factory,
        )

    def register_instance(self, interface: Type, instance: Any):
        self._registrations[interface] = Registration(interface=interface, lifetime=Lifetime.SINGLETON)
        self._singleton_instances[interface] = instance

    def is_registered(self, interface: Type) -> bool:
        return interface in self._registrations

    # --- Resolution ---

    def resolve(self, interface: Type) -> Any:
        reg = self._get_registration(interface)
        if reg.lifetime == Lifetime.SINGLETON and interface in self._singleton_instances:
            return self._singleton_instances[interface]
        if interface in self._resolving:
            raise CircularDependencyError(
                f"Circular dependency detected for {interface}"
            )
        self._resolving.add(interface)
        try:
            if reg.lifetime == Lifetime.SINGLETON:
                instance = self._create(reg)
                self._singleton_instances[interface] = instance
                return instance
            return self._create(reg)
        finally:
            self._resolving.discard(interface)

    # --- Helpers ---

    def _register(self, interface: Type, implementation: Optional[Type], lifetime: Lifetime, kwargs: Dict[str, Any]):
        self._singleton_instances.pop(interface, None)
        self._registrations[interface] = Registration(
            interface=interface,
            implementation=implementation or interface,
            lifetime=lifetime,
            kwargs=kwargs,
        )

    def _get_registration(self, interface: Type) -> Registration:
        if interface not in self._registrations:
            raise ResolutionError(f"No registration found for {interface}")
        return self._registrations[interface]

    def _create(self, reg: Registration) -> Any:
        if reg.factory:
            return reg.factory(self)
        impl = reg.implementation or reg.interface
        return impl(**reg.kwargs)
