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
"""Statement tree of a generated injection routine.

Strategies build these nodes; only the assembler turns them into Python
source. Expressions are evaluated inside ``inject(self, target)`` where
``substitute`` is the target cast to its owner class.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from syringe.compiler.model import ClassRef, TypeRef
from syringe.runtime.stereotypes import Role

# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Field:
    """A field of the injection target."""

    name: str


@dataclass(frozen=True, slots=True)
class SelfAttr:
    """An attribute of the generated injector itself."""

    name: str


@dataclass(frozen=True, slots=True)
class Local:
    """A local variable of the injection routine."""

    name: str


@dataclass(frozen=True, slots=True)
class Literal:
    value: str | int | float | bool | None


@dataclass(frozen=True, slots=True)
class TypeExpr:
    """A type used as a value; ``runtime_check`` drops arguments for isinstance."""

    type_ref: TypeRef
    runtime_check: bool = False

    @property
    def spelled(self) -> TypeRef:
        return self.type_ref.origin() if self.runtime_check else self.type_ref.non_null()


@dataclass(frozen=True, slots=True)
class SourceBundle:
    """The argument source of a role: screen extras or fragment arguments."""

    role: Role


@dataclass(frozen=True, slots=True)
class MethodCall:
    receiver: Expression
    method: str
    args: tuple[Expression, ...] = ()


@dataclass(frozen=True, slots=True)
class RegistryLookup:
    """Service registry lookup, by type when ``by_type`` is set, else by name."""

    by_type: TypeExpr | None = None
    by_name: str | None = None

    def __post_init__(self) -> None:
        if (self.by_type is None) == (self.by_name is None):
            raise ValueError("registry lookup needs exactly one of by_type and by_name")


@dataclass(frozen=True, slots=True)
class CheckedCast:
    value: Expression
    to: TypeExpr


@dataclass(frozen=True, slots=True)
class IsNone:
    operand: Expression


@dataclass(frozen=True, slots=True)
class NotNone:
    operand: Expression


@dataclass(frozen=True, slots=True)
class IsInstance:
    operand: Expression
    of: TypeExpr


@dataclass(frozen=True, slots=True)
class NotEmpty:
    """Truthiness test; ``None`` and ``""`` are both empty."""

    operand: Expression


@dataclass(frozen=True, slots=True)
class And:
    left: Expression
    right: Expression


Expression = (
    Field
    | SelfAttr
    | Local
    | Literal
    | TypeExpr
    | SourceBundle
    | MethodCall
    | RegistryLookup
    | CheckedCast
    | IsNone
    | NotNone
    | IsInstance
    | NotEmpty
    | And
)

# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Assign:
    target: Field | SelfAttr | Local
    value: Expression


@dataclass(frozen=True, slots=True)
class GuardedAssign:
    """Assign only when ``guard`` holds."""

    guard: Expression
    target: Field | SelfAttr | Local
    value: Expression


@dataclass(frozen=True, slots=True)
class Conditional:
    condition: Expression
    body: tuple[Statement, ...]
    orelse: tuple[Statement, ...] = ()

    def __post_init__(self) -> None:
        if not self.body:
            raise ValueError("conditional body must not be empty")


@dataclass(frozen=True, slots=True)
class CastTarget:
    """Bind ``substitute`` to the target, failing fast on a foreign object."""

    owner: ClassRef
    message: str


@dataclass(frozen=True, slots=True)
class RequiredCheck:
    """Validate a field is set; fatal checks raise, others log."""

    field: Field
    fatal: bool
    message: str


@dataclass(frozen=True, slots=True)
class LogDiagnostic:
    message: str


Statement = Assign | GuardedAssign | Conditional | CastTarget | RequiredCheck | LogDiagnostic


def walk(node: Any) -> Iterator[Any]:
    """Yield *node* and every statement or expression nested in it, depth first."""
    yield node
    if not dataclasses.is_dataclass(node) or isinstance(node, (TypeRef, ClassRef)):
        return
    for item in dataclasses.fields(node):
        value = getattr(node, item.name)
        children = value if isinstance(value, tuple) else (value,)
        for child in children:
            if dataclasses.is_dataclass(child) and not isinstance(child, (TypeRef, ClassRef)):
                yield from walk(child)
