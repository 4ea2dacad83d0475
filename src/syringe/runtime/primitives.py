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
"""Primitive aliases for argument fields.

Python has a single ``int``, ``float`` and ``str``; these aliases let a field
declare the narrower kind its argument was stored with so the injector reads
it back with the matching bundle accessor::

    class DetailScreen(Screen):
        page: Short = Autowired(default=Short(0))
        ratio: Double = Autowired(default=Double(1.0))
"""

from __future__ import annotations

from typing import NewType

Byte = NewType("Byte", int)
Short = NewType("Short", int)
Long = NewType("Long", int)
Char = NewType("Char", str)
Double = NewType("Double", float)
