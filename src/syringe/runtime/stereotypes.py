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
"""Role stereotypes for classes whose fields are injected.

The role of an owning class decides which argument source its injector
reads. Without a stereotype the role is inferred from the class hierarchy:
Screen subclasses are screens, ScreenFragment subclasses are fragments,
ServiceProvider subclasses are service consumers.

A class given the screen stereotype must expose an ``extras`` Bundle, one
given the fragment stereotype an ``arguments`` Bundle.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

from syringe.runtime.capabilities import ServiceProvider
from syringe.runtime.screen import Screen, ScreenFragment

T = TypeVar("T", bound=type)

_ROLE_ATTR = "__syringe_role__"


class Role(Enum):
    """Role of a class whose fields are injected."""

    SCREEN = "screen"
    SCREEN_FRAGMENT = "fragment"
    SERVICE_CONSUMER = "consumer"
    UNKNOWN = "unknown"


def _make_stereotype(role: Role) -> Callable[..., Any]:
    """Factory that creates a stereotype decorator for the given role."""

    def stereotype(cls: T) -> T:
        setattr(cls, _ROLE_ATTR, role)
        return cls

    stereotype.__name__ = role.value
    stereotype.__qualname__ = role.value
    return stereotype


screen = _make_stereotype(Role.SCREEN)
fragment = _make_stereotype(Role.SCREEN_FRAGMENT)
consumer = _make_stereotype(Role.SERVICE_CONSUMER)


def role_of(cls: type) -> Role:
    """Return the role declared by a stereotype, else the one implied by *cls*'s bases."""
    declared = getattr(cls, _ROLE_ATTR, None)
    if isinstance(declared, Role):
        return declared
    if issubclass(cls, Screen):
        return Role.SCREEN
    if issubclass(cls, ScreenFragment):
        return Role.SCREEN_FRAGMENT
    if issubclass(cls, ServiceProvider):
        return Role.SERVICE_CONSUMER
    return Role.UNKNOWN
