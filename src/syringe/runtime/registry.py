# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Process-wide service registry consulted by generated injectors."""

from __future__ import annotations

import inspect
import threading
from dataclasses import dataclass, field
from typing import Any, TypeVar, cast

import structlog

from syringe.runtime.capabilities import ServiceProvider

T = TypeVar("T")

logger = structlog.get_logger("syringe.runtime.registry")


@dataclass
class Registration:
    """Metadata for a registered service."""

    impl_type: type
    name: str = ""
    instance: Any = field(default=None, repr=False)
    initialized: bool = False


class ServiceRegistry:
    """Registry of service providers, resolved by type or by name.

    Registering a class also binds it to every ServiceProvider subclass in
    its MRO, so a field typed with the interface resolves to the
    implementation. When several implementations bind the same interface,
    the most recently registered one wins.

    Lookups never raise for missing services: they return ``None`` and leave
    the decision to the caller (generated injectors validate required fields).
    Instances are singletons, created with a no-argument constructor and
    initialised through ``ServiceProvider.init()`` on first lookup.
    """

    _default: ServiceRegistry | None = None
    _default_lock = threading.Lock()

    def __init__(self) -> None:
        self._registrations: dict[type, Registration] = {}
        self._named: dict[str, Registration] = {}
        self._bindings: dict[type, type] = {}
        self._lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> ServiceRegistry:
        """Return the process-wide registry."""
        with cls._default_lock:
            if cls._default is None:
                cls._default = cls()
            return cls._default

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the process-wide registry (a fresh one is created on next use)."""
        with cls._default_lock:
            cls._default = None

    def register(self, cls: type, name: str = "") -> None:
        """Register a provider class, optionally under a name (service path)."""
        with self._lock:
            reg = Registration(impl_type=cls, name=name)
            self._registrations[cls] = reg
            if name:
                self._named[name] = reg
            self._auto_bind(cls)
        logger.debug("service_registered", service=cls.__qualname__, name=name or None)

    def register_instance(self, instance: Any, name: str = "") -> None:
        """Register an already constructed (and initialised) provider."""
        cls = type(instance)
        with self._lock:
            reg = Registration(impl_type=cls, name=name, instance=instance, initialized=True)
            self._registrations[cls] = reg
            if name:
                self._named[name] = reg
            self._auto_bind(cls)
        logger.debug("service_instance_registered", service=cls.__qualname__, name=name or None)

    def bind(self, interface: type, implementation: type) -> None:
        """Bind an interface to a registered implementation."""
        with self._lock:
            self._bindings[interface] = implementation

    def get_by_type(self, service_type: type[T]) -> T | None:
        """Resolve the provider registered for *service_type*, or ``None``."""
        with self._lock:
            reg = self._registrations.get(service_type)
            if reg is None:
                impl = self._bindings.get(service_type)
                reg = self._registrations.get(impl) if impl is not None else None
            if reg is None:
                return None
            return cast(T, self._resolve_registration(reg))

    def get_by_name(self, name: str) -> Any:
        """Resolve the provider registered under *name*, or ``None``."""
        with self._lock:
            reg = self._named.get(name)
            if reg is None:
                return None
            return self._resolve_registration(reg)

    def contains(self, name: str) -> bool:
        """Check if a named provider exists."""
        return name in self._named

    def clear(self) -> None:
        """Remove every registration."""
        with self._lock:
            self._registrations.clear()
            self._named.clear()
            self._bindings.clear()

    def _resolve_registration(self, reg: Registration) -> Any:
        """Create the singleton on first use and run its init hook once."""
        if reg.instance is None:
            reg.instance = reg.impl_type()
        if not reg.initialized:
            reg.initialized = True
            if isinstance(reg.instance, ServiceProvider):
                reg.instance.init()
        return reg.instance

    def _auto_bind(self, cls: type) -> None:
        """Bind a class to the ServiceProvider interfaces it implements."""
        for base in inspect.getmro(cls)[1:]:
            if base is object or base is ServiceProvider:
                continue
            if issubclass(base, ServiceProvider):
                self._bindings[base] = cls
