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
"""Screen fragments: role inferred from the base class."""

from __future__ import annotations

from syringe.runtime import Autowired, Long, ScreenFragment

from sample_app.services import HelloService


class HelloFragment(ScreenFragment):
    hello_service: HelloService | None = Autowired(name="/service/hello", required=True)
    title: str | None = Autowired()
    _visits: Long = Autowired(default=Long(0))
