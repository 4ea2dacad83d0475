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
"""Annotation discovery: find Autowired fields in imported modules.

Discovery imports the scanned packages and reflects over class bodies:
every ``Autowired`` found in a class ``__dict__`` becomes an
:class:`AnnotatedProperty`, typed from the class's own annotations.
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
import types
import typing
from pathlib import Path
from typing import Annotated, Any, Union, get_args, get_origin

import structlog

from syringe.compiler.model import AnnotatedProperty, AutowiredArgs, ClassRef, TypeRef, Visibility
from syringe.kernel.exceptions import UsageError
from syringe.runtime.autowired import Autowired
from syringe.runtime.naming import INJECTOR_SUFFIX, owner_package
from syringe.runtime.stereotypes import role_of

logger = structlog.get_logger(__name__)


def discover_package(package_name: str) -> list[AnnotatedProperty]:
    """Import *package_name* and every submodule, and discover their Autowired fields.

    Submodules are visited in name order. Modules holding generated
    injectors are skipped.
    """
    package = importlib.import_module(package_name)
    modules = [package]
    if hasattr(package, "__path__"):
        infos = pkgutil.walk_packages(package.__path__, prefix=package.__name__ + ".")
        for info in sorted(infos, key=lambda i: i.name):
            if info.name.endswith(INJECTOR_SUFFIX):
                continue
            modules.append(importlib.import_module(info.name))

    properties: list[AnnotatedProperty] = []
    for module in modules:
        properties.extend(discover_module(module))
    logger.debug("package_scanned", package=package_name, modules=len(modules), fields=len(properties))
    return properties


def discover_module(module: types.ModuleType) -> list[AnnotatedProperty]:
    """Discover the Autowired fields declared in *module*.

    Classes are visited in definition order, nested classes after their
    enclosing class. An Autowired bound at module level is reported with
    no owner.
    """
    properties: list[AnnotatedProperty] = []
    seen: set[int] = set()

    for attr, value in list(vars(module).items()):
        if isinstance(value, Autowired) and value.owner is None:
            properties.append(
                AnnotatedProperty(
                    name=attr,
                    declared_type=TypeRef("typing", "Any", target=Any),
                    visibility=_visibility_of(attr, None)[1],
                    owner=None,
                    args=_args_of(value),
                    location=f"{module.__name__}.{attr}",
                )
            )

    for value in list(vars(module).values()):
        if inspect.isclass(value) and value.__module__ == module.__name__:
            _discover_class(value, properties, seen)
    return properties


def _discover_class(cls: type, properties: list[AnnotatedProperty], seen: set[int]) -> None:
    if id(cls) in seen:
        return
    seen.add(id(cls))

    markers = [(attr, value) for attr, value in vars(cls).items() if isinstance(value, Autowired)]
    if markers:
        owner = _class_ref(cls)
        annotations = _annotations_of(cls)
        for attr, marker in markers:
            location = f"{cls.__module__}:{cls.__qualname__}.{attr}"
            if attr not in annotations:
                raise UsageError(
                    f"The field [{attr}] in class [{owner.qualified_name}] is autowired but has no type annotation",
                    context={"field": attr, "owner": owner.qualified_name},
                )
            name, visibility = _visibility_of(attr, cls)
            properties.append(
                AnnotatedProperty(
                    name=name,
                    declared_type=_declared_type(annotations[attr], location),
                    visibility=visibility,
                    owner=owner,
                    args=_args_of(marker),
                    location=location,
                )
            )

    for value in list(vars(cls).values()):
        if inspect.isclass(value) and value.__module__ == cls.__module__ and value.__qualname__.startswith(cls.__qualname__ + "."):
            _discover_class(value, properties, seen)


def _class_ref(cls: type) -> ClassRef:
    if "<locals>" in cls.__qualname__:
        raise UsageError(
            f"Class '{cls.__qualname__}' declares Autowired fields but is local to a function",
            context={"owner": f"{cls.__module__}.{cls.__qualname__}"},
        )
    try:
        source = inspect.getsourcefile(cls)
    except TypeError:
        source = None
    return ClassRef(
        module=cls.__module__,
        qualname=cls.__qualname__,
        package=owner_package(cls.__module__),
        role=role_of(cls),
        origin=Path(source).resolve() if source else None,
    )


def _annotations_of(cls: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(cls, eval_str=True)
    except Exception as exc:  # any error raised while evaluating string annotations
        raise UsageError(
            f"Cannot resolve the type annotations of class '{cls.__module__}.{cls.__qualname__}': {exc}",
            context={"owner": f"{cls.__module__}.{cls.__qualname__}"},
        ) from exc


def _args_of(marker: Autowired) -> AutowiredArgs:
    return AutowiredArgs(name=marker.name, required=marker.required, desc=marker.desc)


def _visibility_of(attr: str, cls: type | None) -> tuple[str, Visibility]:
    """Display name and visibility of an attribute, undoing name mangling."""
    if cls is not None:
        mangled = f"_{cls.__name__.lstrip('_')}__"
        if attr.startswith(mangled) and len(attr) > len(mangled):
            return "__" + attr[len(mangled) :], Visibility.PRIVATE
    if attr.startswith("__") and not attr.endswith("__"):
        return attr, Visibility.PRIVATE
    if attr.startswith("_"):
        return attr, Visibility.PROTECTED
    return attr, Visibility.PUBLIC


def _declared_type(annotation: Any, location: str) -> TypeRef:
    try:
        return type_ref_of(annotation)
    except (UsageError, ValueError) as exc:
        raise UsageError(f"Unsupported type annotation for '{location}': {exc}", context={"location": location}) from exc


def type_ref_of(annotation: Any) -> TypeRef:
    """Reduce a resolved annotation to a :class:`TypeRef`.

    ``X | None`` and ``Optional[X]`` become a nullable ``X``; ``Annotated``
    metadata is dropped.

    Raises:
        UsageError: The annotation cannot be spelled in generated code.
    """
    origin = get_origin(annotation)

    if origin is Annotated:
        return type_ref_of(get_args(annotation)[0])

    if origin is Union or origin is types.UnionType:
        members = get_args(annotation)
        present = [member for member in members if member is not type(None)]
        nullable = len(present) < len(members)
        if len(present) == 1:
            ref = type_ref_of(present[0])
            return TypeRef(ref.module, ref.qualname, ref.args, nullable, ref.target)
        return TypeRef("typing", "Union", tuple(type_ref_of(m) for m in present), nullable, Union)

    if annotation is Ellipsis:
        return TypeRef("builtins", "Ellipsis", target=Ellipsis)
    if annotation is Any:
        return TypeRef("typing", "Any", target=Any)

    if origin is not None:
        base = type_ref_of(origin)
        return TypeRef(base.module, base.qualname, tuple(type_ref_of(arg) for arg in get_args(annotation)), False, origin)

    if isinstance(annotation, (type, typing.NewType)):
        return TypeRef(annotation.__module__, annotation.__qualname__, target=annotation)

    raise UsageError(f"cannot reference {annotation!r} from generated code")
