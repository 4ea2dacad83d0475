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
"""Screen base classes whose arguments generated injectors read."""

from __future__ import annotations

from syringe.runtime.bundle import Bundle, Intent


class Screen:
    """A navigable screen; its arguments arrive as the extras of an Intent."""

    def __init__(self, intent: Intent | None = None) -> None:
        self.intent = intent

    @property
    def extras(self) -> Bundle | None:
        return self.intent.extras if self.intent is not None else None


class ScreenFragment:
    """A part of a screen; its arguments arrive as a Bundle."""

    def __init__(self, arguments: Bundle | None = None) -> None:
        self.arguments = arguments
