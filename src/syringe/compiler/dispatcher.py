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
"""Strategy dispatch: pick the injection strategy of each property from its type category and owner role."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from syringe.compiler.model import AnnotatedProperty, ClassRef
from syringe.compiler.statements import (
    And,
    Assign,
    CheckedCast,
    Conditional,
    Field,
    GuardedAssign,
    IsInstance,
    Literal,
    Local,
    LogDiagnostic,
    MethodCall,
    NotEmpty,
    NotNone,
    RegistryLookup,
    RequiredCheck,
    SelfAttr,
    SourceBundle,
    Statement,
    TypeExpr,
)
from syringe.compiler.types import TypeCategory
from syringe.kernel.exceptions import UnreachableCategoryError, UsageError
from syringe.runtime.stereotypes import Role

SERIALIZATION_SERVICE_ATTR = "serialization_service"

BUNDLE_ROLES = frozenset({Role.SCREEN, Role.SCREEN_FRAGMENT})

_PRIMITIVE_ACCESSORS: dict[TypeCategory, str] = {
    TypeCategory.BOOL: "get_boolean",
    TypeCategory.BYTE: "get_byte",
    TypeCategory.SHORT: "get_short",
    TypeCategory.INT: "get_int",
    TypeCategory.LONG: "get_long",
    TypeCategory.CHAR: "get_char",
    TypeCategory.FLOAT: "get_float",
    TypeCategory.DOUBLE: "get_double",
}

_TYPED_VALUE_ACCESSORS: dict[TypeCategory, str] = {
    TypeCategory.SERIALIZABLE: "get_serializable",
    TypeCategory.PARCELABLE: "get_parcelable",
}


class Strategy(Enum):
    PROVIDER = "provider"
    PRIMITIVE = "primitive"
    STRING = "string"
    TYPED_VALUE = "typed-value"
    OBJECT = "object"


@dataclass(frozen=True, slots=True)
class Injection:
    """Statements injecting one property, followed by its required-field checks."""

    prop: AnnotatedProperty
    category: TypeCategory
    strategy: Strategy
    statements: tuple[Statement, ...]
    checks: tuple[RequiredCheck, ...] = ()

    def __post_init__(self) -> None:
        if not self.statements:
            raise ValueError(f"injection of '{self.prop.name}' has no statements")


def dispatch(prop: AnnotatedProperty, category: TypeCategory, role: Role) -> Injection:
    """Build the injection of *prop* for an owner playing *role*.

    Raises:
        UsageError: A bundle-based strategy is needed but the owner is
            neither a screen nor a screen fragment.
        UnreachableCategoryError: *category* is not handled by any strategy.
    """
    owner = _owner_of(prop)

    if category is TypeCategory.PROVIDER:
        return _provider(prop, owner)

    if role not in BUNDLE_ROLES:
        raise UsageError(
            f"The field [{prop.name}] need autowired from intent, "
            f"its parent [{owner.qualified_name}] must be a screen or a screen fragment!",
            context={"field": prop.name, "owner": owner.qualified_name, "role": role.value},
        )

    if category.is_primitive:
        strategy, statements = Strategy.PRIMITIVE, _primitive(prop, category, role)
    elif category is TypeCategory.STR:
        strategy, statements = Strategy.STRING, _string(prop, role)
    elif category in _TYPED_VALUE_ACCESSORS:
        strategy, statements = Strategy.TYPED_VALUE, _typed_value(prop, category, role)
    elif category is TypeCategory.OBJECT:
        strategy, statements = Strategy.OBJECT, _object(prop, owner, role)
    else:
        raise UnreachableCategoryError(
            f"No injection strategy for category '{category.value}' of field '{prop.name}'",
            context={"field": prop.name, "category": category.value},
        )

    checks: tuple[RequiredCheck, ...] = ()
    # a primitive always holds a value
    if prop.args.required and strategy is not Strategy.PRIMITIVE:
        checks = (
            RequiredCheck(
                field=Field(prop.name),
                fatal=False,
                message=f"The field '{prop.name}' in class '{owner.simple_name}' is null!",
            ),
        )
    return Injection(prop, category, strategy, tuple(statements), checks)


def _owner_of(prop: AnnotatedProperty) -> ClassRef:
    if prop.owner is None:
        raise UsageError(
            f"Property '{prop.name}' annotated with Autowired must be declared in a class body",
            context={"field": prop.name, "location": prop.location},
        )
    return prop.owner


def _provider(prop: AnnotatedProperty, owner: ClassRef) -> Injection:
    declared = TypeExpr(prop.declared_type, runtime_check=True)
    if prop.args.name:
        lookup = CheckedCast(RegistryLookup(by_name=prop.args.name), declared)
    else:
        lookup = RegistryLookup(by_type=declared)

    checks: tuple[RequiredCheck, ...] = ()
    if prop.args.required:
        checks = (
            RequiredCheck(
                field=Field(prop.name),
                fatal=True,
                message=f"The field '{prop.name}' is null, in class '{owner.simple_name}' !",
            ),
        )
    return Injection(
        prop,
        TypeCategory.PROVIDER,
        Strategy.PROVIDER,
        (Assign(Field(prop.name), lookup),),
        checks,
    )


def _primitive(prop: AnnotatedProperty, category: TypeCategory, role: Role) -> list[Statement]:
    source = SourceBundle(role)
    key = Literal(prop.bundle_key)
    accessor = _PRIMITIVE_ACCESSORS[category]
    if prop.nullable:
        return [
            GuardedAssign(
                guard=And(NotNone(source), MethodCall(source, "contains_key", (key,))),
                target=Field(prop.name),
                value=MethodCall(source, accessor, (key,)),
            )
        ]
    return [
        GuardedAssign(
            guard=NotNone(source),
            target=Field(prop.name),
            value=MethodCall(source, accessor, (key, Field(prop.name))),
        )
    ]


def _string(prop: AnnotatedProperty, role: Role) -> list[Statement]:
    source = SourceBundle(role)
    return [
        GuardedAssign(
            guard=NotNone(source),
            target=Field(prop.name),
            value=MethodCall(source, "get_string", (Literal(prop.bundle_key), Field(prop.name))),
        )
    ]


def _typed_value(prop: AnnotatedProperty, category: TypeCategory, role: Role) -> list[Statement]:
    source = SourceBundle(role)
    value = Local("value")
    return [
        Conditional(
            NotNone(source),
            (
                Assign(value, MethodCall(source, _TYPED_VALUE_ACCESSORS[category], (Literal(prop.bundle_key),))),
                GuardedAssign(
                    guard=IsInstance(value, TypeExpr(prop.declared_type, runtime_check=True)),
                    target=Field(prop.name),
                    value=value,
                ),
            ),
        )
    ]


def _object(prop: AnnotatedProperty, owner: ClassRef, role: Role) -> list[Statement]:
    source = SourceBundle(role)
    service = SelfAttr(SERIALIZATION_SERVICE_ATTR)
    raw = Local("raw")
    parsed = Local("parsed")
    message = (
        f"You want automatic inject the field '{prop.name}' in class '{owner.simple_name}', "
        f"then you should implement 'SerializationService' to support object auto inject!"
    )
    return [
        Conditional(
            NotNone(service),
            (
                Conditional(
                    NotNone(source),
                    (
                        Assign(raw, MethodCall(source, "get_string", (Literal(prop.bundle_key),))),
                        Conditional(
                            NotEmpty(raw),
                            (
                                Assign(parsed, MethodCall(service, "parse_object", (raw, TypeExpr(prop.declared_type)))),
                                GuardedAssign(guard=NotNone(parsed), target=Field(prop.name), value=parsed),
                            ),
                        ),
                    ),
                ),
            ),
            (LogDiagnostic(message),),
        )
    ]
