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
"""Runtime entry point that finds and runs generated injectors."""

from __future__ import annotations

import importlib
import inspect
import threading
from typing import Any, Protocol, runtime_checkable

import structlog

from syringe.runtime.naming import injector_class_name, injector_module_name

logger = structlog.get_logger("syringe.runtime.injector")


@runtime_checkable
class Syringe(Protocol):
    """Contract implemented by every generated injector."""

    def inject(self, target: Any) -> None: ...


class AutowiredInjector:
    """Injects a target by running the generated injector of its class.

    Injectors of base classes run first, so fields inherited from an
    annotated base class are populated as well. Injector instances are
    cached per class; classes without a generated injector are remembered
    and skipped on later calls.
    """

    def __init__(self) -> None:
        self._cache: dict[type, Syringe] = {}
        self._blacklist: set[type] = set()
        self._lock = threading.Lock()

    def inject(self, target: Any) -> None:
        for cls in reversed(inspect.getmro(type(target))):
            if cls is object:
                continue
            syringe = self._find(cls)
            if syringe is not None:
                syringe.inject(target)

    def _find(self, cls: type) -> Syringe | None:
        with self._lock:
            if cls in self._blacklist:
                return None
            cached = self._cache.get(cls)
            if cached is not None:
                return cached

        module_name = injector_module_name(cls)
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            # only a missing injector module blacklists; a broken one propagates
            if exc.name is None or not module_name.startswith(exc.name):
                raise
            with self._lock:
                self._blacklist.add(cls)
            logger.debug("injector_not_found", target=cls.__qualname__, module=module_name)
            return None

        syringe = getattr(module, injector_class_name(cls.__name__))()
        with self._lock:
            self._cache[cls] = syringe
        return syringe


_default_injector = AutowiredInjector()


def inject(target: Any) -> None:
    """Populate *target*'s autowired fields using the process-wide injector."""
    _default_injector.inject(target)
