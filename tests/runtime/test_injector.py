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
"""Tests for the runtime injector lookup."""

import sys
import types

import pytest

from syringe.runtime import AutowiredInjector, Syringe, inject
from syringe.runtime.naming import injector_class_name, injector_module_name, owner_package

from sample_app.fragments import HelloFragment
from sample_app.screens import ProfileScreen, VipProfileScreen


class RecordingSyringe:
    calls: list[tuple[str, object]] = []

    def __init__(self, label: str) -> None:
        self.label = label

    def inject(self, target: object) -> None:
        RecordingSyringe.calls.append((self.label, target))


def _install(monkeypatch, owner: type, label: str) -> None:
    module = types.ModuleType(injector_module_name(owner))
    name = injector_class_name(owner.__name__)
    setattr(module, name, type(name, (RecordingSyringe,), {"__init__": lambda self: RecordingSyringe.__init__(self, label)}))
    monkeypatch.setitem(sys.modules, module.__name__, module)


@pytest.fixture(autouse=True)
def reset_calls():
    RecordingSyringe.calls = []


class TestNaming:
    def test_injector_names(self):
        assert injector_class_name("MainScreen") == "MainScreen__Syringe"
        assert injector_module_name(ProfileScreen) == "sample_app.ProfileScreen__Syringe"

    def test_owner_package(self):
        assert owner_package("sample_app.screens") == "sample_app"
        assert owner_package("sample_app") == "sample_app"


class TestAutowiredInjector:
    def test_runs_base_injectors_first(self, monkeypatch):
        _install(monkeypatch, ProfileScreen, "profile")
        _install(monkeypatch, VipProfileScreen, "vip")
        vip = VipProfileScreen()

        AutowiredInjector().inject(vip)

        assert RecordingSyringe.calls == [("profile", vip), ("vip", vip)]

    def test_class_without_injector_is_skipped(self):
        AutowiredInjector().inject(HelloFragment())
        assert RecordingSyringe.calls == []

    def test_missing_injector_is_remembered(self, monkeypatch):
        injector = AutowiredInjector()
        injector.inject(HelloFragment())

        _install(monkeypatch, HelloFragment, "late")
        injector.inject(HelloFragment())

        assert RecordingSyringe.calls == []

    def test_injector_instances_are_cached(self, monkeypatch):
        _install(monkeypatch, ProfileScreen, "profile")
        injector = AutowiredInjector()
        injector.inject(ProfileScreen())

        monkeypatch.delitem(sys.modules, injector_module_name(ProfileScreen))
        injector.inject(ProfileScreen())

        assert len(RecordingSyringe.calls) == 2

    def test_broken_injector_module_propagates(self, monkeypatch):
        module_name = injector_module_name(ProfileScreen)
        broken = types.ModuleType(module_name)
        monkeypatch.setitem(sys.modules, module_name, broken)

        with pytest.raises(AttributeError):
            AutowiredInjector().inject(ProfileScreen())

    def test_module_level_inject(self, monkeypatch):
        _install(monkeypatch, HelloFragment, "hello")
        fragment = HelloFragment()

        inject(fragment)

        assert ("hello", fragment) in RecordingSyringe.calls

    def test_generated_class_satisfies_protocol(self):
        assert isinstance(RecordingSyringe("x"), Syringe)
