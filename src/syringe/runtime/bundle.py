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
"""Key-value argument sources read by generated injectors."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from syringe.runtime.capabilities import Parcelable, Serializable


class Bundle:
    """Typed key-value container carrying screen arguments.

    Typed getters never raise: an absent key or a value of another kind
    yields the supplied default, like a platform argument bundle.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Bundle({self._values!r})"

    def contains_key(self, key: str) -> bool:
        return key in self._values

    def put(self, key: str, value: Any) -> Bundle:
        self._values[key] = value
        return self

    def get(self, key: str) -> Any:
        """Return the raw value stored under *key*, or ``None``."""
        return self._values.get(key)

    def _typed(self, key: str, kind: type | tuple[type, ...], default: Any) -> Any:
        value = self._values.get(key)
        # bool is an int subclass; keep the two kinds apart
        if isinstance(value, bool) and kind is not bool:
            return default
        return value if isinstance(value, kind) else default

    def get_boolean(self, key: str, default: bool = False) -> bool:
        return self._typed(key, bool, default)

    def get_byte(self, key: str, default: int = 0) -> int:
        return self._typed(key, int, default)

    def get_short(self, key: str, default: int = 0) -> int:
        return self._typed(key, int, default)

    def get_int(self, key: str, default: int = 0) -> int:
        return self._typed(key, int, default)

    def get_long(self, key: str, default: int = 0) -> int:
        return self._typed(key, int, default)

    def get_char(self, key: str, default: str = "\0") -> str:
        value = self._typed(key, str, None)
        return value if value is not None and len(value) == 1 else default

    def get_float(self, key: str, default: float = 0.0) -> float:
        return self._typed(key, (float, int), default)

    def get_double(self, key: str, default: float = 0.0) -> float:
        return self._typed(key, (float, int), default)

    def get_string(self, key: str, default: str | None = None) -> str | None:
        return self._typed(key, str, default)

    def get_serializable(self, key: str) -> Any:
        return self._typed(key, Serializable, None)

    def get_parcelable(self, key: str) -> Any:
        return self._typed(key, Parcelable, None)


class Intent:
    """Navigation request that opened a screen, carrying its extras."""

    def __init__(self, path: str = "", extras: Bundle | Mapping[str, Any] | None = None) -> None:
        self.path = path
        if extras is None or isinstance(extras, Bundle):
            self.extras = extras
        else:
            self.extras = Bundle(extras)

    def __repr__(self) -> str:
        return f"Intent(path={self.path!r}, extras={self.extras!r})"
