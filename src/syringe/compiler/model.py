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
"""Generation-time data model: annotated properties and their owners."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any

from syringe.runtime.stereotypes import Role

BUILTINS_MODULE = "builtins"


class Visibility(Enum):
    """Field visibility by Python naming convention."""

    PUBLIC = auto()  # name
    PROTECTED = auto()  # _name
    INTERNAL = auto()  # no Python spelling; never discovered
    PRIVATE = auto()  # __name (mangled)


@dataclass(frozen=True, slots=True)
class ImportRef:
    """A top-level name the generated module imports from another module."""

    module: str
    name: str


@dataclass(frozen=True, slots=True)
class TypeRef:
    """A declared type, reduced to what generated code needs to spell it.

    Attributes:
        module: Module defining the type (``builtins`` needs no import).
        qualname: Qualified name inside the module (``Outer.Inner``).
        args: Type arguments of a generic alias (``list[User]``).
        nullable: Declared as ``X | None``.
        target: The runtime object (class, NewType or typing special form)
            that type resolution inspects. Not part of equality.
    """

    module: str
    qualname: str
    args: tuple[TypeRef, ...] = ()
    nullable: bool = False
    target: Any = field(default=None, compare=False, hash=False, repr=False)

    def __post_init__(self) -> None:
        if not self.qualname:
            raise ValueError("type qualname must not be empty")
        if "<locals>" in self.qualname:
            raise ValueError(f"type '{self.qualname}' is local to a function and cannot be imported")

    @property
    def simple_name(self) -> str:
        return self.qualname.rpartition(".")[2]

    @property
    def is_generic(self) -> bool:
        return bool(self.args)

    def non_null(self) -> TypeRef:
        """This type without its ``None`` alternative."""
        if not self.nullable:
            return self
        return TypeRef(self.module, self.qualname, self.args, False, self.target)

    def origin(self) -> TypeRef:
        """This type without type arguments or nullability (usable in isinstance)."""
        return TypeRef(self.module, self.qualname, (), False, self.target)

    def import_ref(self) -> ImportRef | None:
        if self.module == BUILTINS_MODULE:
            return None
        return ImportRef(self.module, self.qualname.partition(".")[0])

    def iter_imports(self) -> Iterator[ImportRef]:
        ref = self.import_ref()
        if ref is not None:
            yield ref
        for arg in self.args:
            yield from arg.iter_imports()

    def render(self, local_name: Callable[[ImportRef], str]) -> str:
        """Spell this type, asking *local_name* for the name each import is bound to."""
        ref = self.import_ref()
        if ref is None:
            text = self.qualname
        else:
            _head, dot, rest = self.qualname.partition(".")
            text = local_name(ref) + dot + rest
        if self.args:
            text += "[" + ", ".join(arg.render(local_name) for arg in self.args) + "]"
        if self.nullable:
            text += " | None"
        return text

    def __str__(self) -> str:
        return self.render(lambda ref: ref.name)


@dataclass(frozen=True, slots=True)
class ClassRef:
    """A class owning injected fields.

    Attributes:
        module: Module defining the class.
        qualname: Qualified name inside the module.
        package: Package the generated injector is placed in.
        role: Which argument source the injector reads.
        origin: Source file defining the class (provenance for the sink).
    """

    module: str
    qualname: str
    package: str
    role: Role
    origin: Path | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not self.module:
            raise ValueError("class module must not be empty")
        if not self.qualname:
            raise ValueError("class qualname must not be empty")

    @property
    def simple_name(self) -> str:
        return self.qualname.rpartition(".")[2]

    @property
    def qualified_name(self) -> str:
        return f"{self.module}.{self.qualname}"

    def as_type(self) -> TypeRef:
        return TypeRef(self.module, self.qualname)

    def __str__(self) -> str:
        return self.qualified_name


@dataclass(frozen=True, slots=True)
class AutowiredArgs:
    """Arguments given to the Autowired marker."""

    name: str = ""
    required: bool = False
    desc: str = ""


@dataclass(frozen=True, slots=True)
class AnnotatedProperty:
    """A field marked for injection, as discovered.

    ``owner`` is ``None`` when the marker was bound outside a class body.
    """

    name: str
    declared_type: TypeRef
    visibility: Visibility
    owner: ClassRef | None
    args: AutowiredArgs = AutowiredArgs()
    location: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("property name must not be empty")

    @property
    def nullable(self) -> bool:
        return self.declared_type.nullable

    @property
    def bundle_key(self) -> str:
        """Argument key: the explicit name, else the field name."""
        return self.args.name or self.name
