# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Semantic classification of Nix option type expressions.

Classification is a text heuristic, not a type-expression parser. Canonical
primitive expressions map to their kind by exact match; ``enum``, ``nullOr``
and ``either`` wrappers are recognised by substring and carry a placeholder
payload because their arguments are never parsed. Anything else is kept
verbatim as :class:`UnknownType`, so an option declared as
``lib.types.str`` displays exactly as written.
"""

from __future__ import annotations

from typing import Annotated, Final, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

ENUM_PLACEHOLDER: Final[str] = "..."
DEFAULT_RAW_TYPE: Final[str] = "any"


class _TypeKindBase(BaseModel):
    """Common configuration for the type-kind variants."""

    model_config = ConfigDict(frozen=True)


class BoolType(_TypeKindBase):
    kind: Literal["bool"] = "bool"

    def __str__(self) -> str:
        return "boolean"


class IntType(_TypeKindBase):
    kind: Literal["int"] = "int"

    def __str__(self) -> str:
        return "integer"


class FloatType(_TypeKindBase):
    kind: Literal["float"] = "float"

    def __str__(self) -> str:
        return "float"


class StrType(_TypeKindBase):
    kind: Literal["str"] = "str"

    def __str__(self) -> str:
        return "string"


class PathType(_TypeKindBase):
    kind: Literal["path"] = "path"

    def __str__(self) -> str:
        return "path"


class EnumType(_TypeKindBase):
    """Enumeration of permitted string values."""

    kind: Literal["enum"] = "enum"
    values: tuple[str, ...] = ()

    def __str__(self) -> str:
        if not self.values:
            return "enum"
        return f"enum: [{', '.join(self.values)}]"


class AttrsType(_TypeKindBase):
    kind: Literal["attrs"] = "attrs"

    def __str__(self) -> str:
        return "attribute set"


class ListType(_TypeKindBase):
    kind: Literal["list"] = "list"

    def __str__(self) -> str:
        return "list"


class SetType(_TypeKindBase):
    kind: Literal["set"] = "set"

    def __str__(self) -> str:
        return "set"


class OptionType(_TypeKindBase):
    """Nullable wrapper around an inner kind."""

    kind: Literal["option"] = "option"
    inner: TypeKind

    def __str__(self) -> str:
        return f"optional {self.inner}"


class EitherType(_TypeKindBase):
    """Union of alternative kinds."""

    kind: Literal["either"] = "either"
    alternatives: tuple[TypeKind, ...] = ()

    def __str__(self) -> str:
        if not self.alternatives:
            return "either"
        return f"either: [{', '.join(str(alternative) for alternative in self.alternatives)}]"


class UnknownType(_TypeKindBase):
    """Type expression passed through without interpretation."""

    kind: Literal["unknown"] = "unknown"
    raw: str

    def __str__(self) -> str:
        return self.raw


TypeKind = Annotated[
    Union[
        BoolType,
        IntType,
        FloatType,
        StrType,
        PathType,
        EnumType,
        AttrsType,
        ListType,
        SetType,
        OptionType,
        EitherType,
        UnknownType,
    ],
    Field(discriminator="kind"),
]

OptionType.model_rebuild()
EitherType.model_rebuild()

_EXACT_TYPES: Final[dict[str, TypeKind]] = {
    "types.bool": BoolType(),
    "types.int": IntType(),
    "types.integer": IntType(),
    "types.float": FloatType(),
    "types.str": StrType(),
    "types.string": StrType(),
    "types.path": PathType(),
    "types.attrs": AttrsType(),
    "types.listOf": ListType(),
}
_ENUM_MARKERS: Final[tuple[str, ...]] = ("types.enum",)
_OPTION_MARKERS: Final[tuple[str, ...]] = ("types.option", "types.nullOr")
_EITHER_MARKERS: Final[tuple[str, ...]] = ("types.either",)


def classify(raw: str) -> TypeKind:
    """Return the semantic kind described by the type expression ``raw``.

    Args:
        raw: Source text of the ``type`` attribute, already dedented.

    Returns:
        TypeKind: Matching kind, or :class:`UnknownType` carrying ``raw`` unmodified.
    """

    candidate = raw.strip()
    exact = _EXACT_TYPES.get(candidate)
    if exact is not None:
        return exact
    if any(marker in candidate for marker in _ENUM_MARKERS):
        return EnumType(values=(ENUM_PLACEHOLDER,))
    if any(marker in candidate for marker in _OPTION_MARKERS):
        return OptionType(inner=UnknownType(raw=""))
    if any(marker in candidate for marker in _EITHER_MARKERS):
        return EitherType()
    return UnknownType(raw=raw)


def unknown(raw: str = DEFAULT_RAW_TYPE) -> UnknownType:
    """Return the kind used when a declaration carries no ``type`` attribute."""

    return UnknownType(raw=raw)


__all__ = [
    "AttrsType",
    "BoolType",
    "DEFAULT_RAW_TYPE",
    "EitherType",
    "EnumType",
    "FloatType",
    "IntType",
    "ListType",
    "OptionType",
    "PathType",
    "SetType",
    "StrType",
    "TypeKind",
    "UnknownType",
    "classify",
    "unknown",
]
