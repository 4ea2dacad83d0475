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
"""Syringe runtime — what annotated classes and generated injectors import."""

from syringe.runtime.autowired import Autowired
from syringe.runtime.bundle import Bundle, Intent
from syringe.runtime.capabilities import (
    Parcelable,
    Serializable,
    SerializationService,
    ServiceProvider,
)
from syringe.runtime.casts import checked_cast
from syringe.runtime.injector import AutowiredInjector, Syringe, inject
from syringe.runtime.primitives import Byte, Char, Double, Long, Short
from syringe.runtime.registry import ServiceRegistry
from syringe.runtime.screen import Screen, ScreenFragment
from syringe.runtime.serialization import PydanticSerializationService
from syringe.runtime.stereotypes import Role, consumer, fragment, role_of, screen

__all__ = [
    "Autowired",
    "AutowiredInjector",
    "Bundle",
    "Byte",
    "Char",
    "Double",
    "Intent",
    "Long",
    "Parcelable",
    "PydanticSerializationService",
    "Role",
    "Screen",
    "ScreenFragment",
    "Serializable",
    "SerializationService",
    "ServiceProvider",
    "ServiceRegistry",
    "Short",
    "Syringe",
    "checked_cast",
    "consumer",
    "fragment",
    "inject",
    "role_of",
    "screen",
]
