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
"""Autowired descriptor marking a class attribute for generated injection."""

from __future__ import annotations

from typing import Any


class Autowired:
    """Marks a class attribute for injection by a generated injector.

    Usage::

        @screen
        class ProfileScreen(Screen):
            user_id: int = Autowired()
            nickname: str | None = Autowired(name="nick")
            hello: HelloService = Autowired(name="/service/hello", required=True)

    Until the injector assigns a value, reading the attribute on an instance
    returns ``default``, so a primitive read with a missing key keeps it.

    Args:
        name: Argument key or service path. Empty means the field name is the
            argument key, and providers are looked up by type.
        required: Validate the field is set after injection.
        default: Value seen before injection.
        desc: Free-form description shown by ``syringe inspect``.
    """

    __slots__ = ("name", "required", "default", "desc", "owner", "field_name")

    def __init__(
        self,
        *,
        name: str = "",
        required: bool = False,
        default: Any = None,
        desc: str = "",
    ) -> None:
        self.name = name
        self.required = required
        self.default = default
        self.desc = desc
        self.owner: type | None = None
        self.field_name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.owner = owner
        self.field_name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return self.default

    def __repr__(self) -> str:
        parts: list[str] = []
        if self.name:
            parts.append(f"name={self.name!r}")
        if self.required:
            parts.append("required=True")
        if self.default is not None:
            parts.append(f"default={self.default!r}")
        return f"Autowired({', '.join(parts)})"
