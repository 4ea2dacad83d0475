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
"""Capability base classes recognised by the generator's type resolution."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ServiceProvider:
    """Base class for services published in the service registry.

    A field whose declared type is a ServiceProvider subclass is injected
    from the registry regardless of the owning class's role.
    """

    def init(self) -> None:
        """Called once, before the provider is first handed out."""


class Serializable:
    """Marker for values stored in argument bundles as-is."""


class Parcelable:
    """Marker for values flattened into argument bundles by the platform."""


class SerializationService(ServiceProvider, ABC):
    """Deserialization capability used for object-typed argument fields.

    Register an implementation in the service registry to enable injection
    of fields whose type is neither primitive, string, serializable nor
    parcelable.
    """

    @abstractmethod
    def parse_object(self, raw: str, target_type: Any) -> Any:
        """Parse *raw* into an instance of *target_type*; ``None`` on failure."""

    @abstractmethod
    def object_to_json(self, value: Any) -> str:
        """Serialize *value* so ``parse_object`` can read it back."""
