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
"""Injector generator: discovery, classification, dispatch, assembly and emission."""

from syringe.compiler.assembler import GeneratedUnit, assemble, render
from syringe.compiler.classifier import classify
from syringe.compiler.discovery import discover_module, discover_package, type_ref_of
from syringe.compiler.dispatcher import Injection, Strategy, dispatch
from syringe.compiler.model import AnnotatedProperty, AutowiredArgs, ClassRef, ImportRef, TypeRef, Visibility
from syringe.compiler.processor import AutowiredProcessor, ProcessReport
from syringe.compiler.sink import CodeGenerator, FileSystemSink
from syringe.compiler.types import TypeCategory, resolve, resolve_type

__all__ = [
    "AnnotatedProperty",
    "AutowiredArgs",
    "AutowiredProcessor",
    "ClassRef",
    "CodeGenerator",
    "FileSystemSink",
    "GeneratedUnit",
    "ImportRef",
    "Injection",
    "ProcessReport",
    "Strategy",
    "TypeCategory",
    "TypeRef",
    "Visibility",
    "assemble",
    "classify",
    "discover_module",
    "discover_package",
    "dispatch",
    "render",
    "resolve",
    "resolve_type",
    "type_ref_of",
]
