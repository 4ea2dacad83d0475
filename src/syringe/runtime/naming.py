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
"""Naming convention shared by the generator and the runtime lookup."""

from __future__ import annotations

import sys

INJECTOR_SUFFIX = "__Syringe"


def injector_class_name(owner_simple_name: str) -> str:
    """Generated injector class name for an owning class."""
    return owner_simple_name + INJECTOR_SUFFIX


def owner_package(module_name: str) -> str:
    """Package holding *module_name*; a package's ``__init__`` is its own package."""
    module = sys.modules.get(module_name)
    if module is not None and module.__package__ is not None:
        return module.__package__
    return module_name.rpartition(".")[0]


def injector_module_name(owner: type) -> str:
    """Dotted name of the module holding *owner*'s generated injector."""
    package = owner_package(owner.__module__)
    name = injector_class_name(owner.__name__)
    return f"{package}.{name}" if package else name
