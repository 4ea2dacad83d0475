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
"""Tests for checked_cast."""

import pytest

from syringe.kernel.exceptions import ServiceTypeMismatchError
from syringe.runtime import ServiceProvider, checked_cast


class Greeter(ServiceProvider):
    pass


class Other(ServiceProvider):
    pass


class TestCheckedCast:
    def test_none_passes_through(self):
        assert checked_cast(None, Greeter) is None

    def test_matching_instance(self):
        greeter = Greeter()
        assert checked_cast(greeter, Greeter) is greeter

    def test_subclass_instance(self):
        class LoudGreeter(Greeter):
            pass

        assert isinstance(checked_cast(LoudGreeter(), Greeter), LoudGreeter)

    def test_mismatch_raises(self):
        with pytest.raises(ServiceTypeMismatchError):
            checked_cast(Other(), Greeter)
