"""TypeScript definitions for structs: named, newtype, tuple and unit structs."""

from __future__ import annotations

import copy
import itertools
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .attrs import AttrSpec, FieldAttr, StructAttr, parse_field_attr, parse_struct_attr
from .builtins import OptionType
from .core import TS, Dependencies, TypeParam
from .naming import DeriveError, Inflection, raw_name_to_ts_field, to_ts_ident
from .typeexpr import format_generics, format_type

Render = Callable[[], str]

_ids = itertools.count(1)


def _const(text: str) -> Render:
    return lambda: text


def _export_path(name: str, export_to: str | None) -> str:
    if export_to is None:
        return f"bindings/{name}.ts"
    if export_to.endswith("/"):
        return f"{export_to}{name}.ts"
    return export_to


@dataclass(frozen=True)
class Field:
    """A struct field: ``name`` is ``None`` for the fields of tuple structs.

    ``ty`` may be left out only when a ``type`` override is given.
    """

    name: str | None
    ty: TS | None = None
    ts: AttrSpec = None
    serde: AttrSpec = None


class DerivedType(TS):
    """A user-defined type with a TypeScript declaration.

    Renderings are produced on demand, so a type that cannot be inlined or
    flattened only fails when that rendering is asked for.
    """

    def __init__(
        self,
        name: str,
        *,
        inline: Render,
        decl: Render,
        inline_flattened: Render | None = None,
        dependency_types: Sequence[TS] = (),
        generics: Sequence[TypeParam] = (),
        export: bool = False,
        export_to: str | None = None,
    ) -> None:
        self._name = name
        self._inline = inline
        self._decl = decl
        self._inline_flattened = inline_flattened
        self.dependency_types: tuple[TS, ...] = tuple(dependency_types)
        self.params: tuple[TypeParam, ...] = tuple(generics)
        self.export = export
        self.export_to = _export_path(name, export_to)
        self.id = next(_ids)
        self.type_args: tuple[TS, ...] = ()

    def __repr__(self) -> str:
        args = ", ".join(repr(a) for a in self.type_args)
        return f"DerivedType({self._name!r}{', ' if args else ''}{args})"

    def of(self, *args: TS) -> DerivedType:
        """This type applied to the type arguments ``args``.

        Trailing arguments may be left out where their parameter has a default.
        """
        if len(args) > len(self.params):
            raise TypeError(
                f"{self._name} takes {len(self.params)} type arguments, got {len(args)}"
            )
        for param in self.params[len(args):]:
            if param.default is None:
                raise TypeError(f"{self._name} needs a type argument for {param.ident}")
        bound = copy.copy(self)
        bound.type_args = tuple(args)
        return bound

    @property
    def flattenable(self) -> bool:
        """Whether the fields of this type can be merged into another object type."""
        return self._inline_flattened is not None

    def _arguments(self) -> list[TS]:
        rest = [p.default if p.default is not None else p for p in self.params[len(self.type_args):]]
        return [*self.type_args, *rest]

    def name(self) -> str:
        return self._name

    def generics(self) -> str | None:
        if not self.params:
            return None
        return ", ".join(arg.name_with_generics() for arg in self._arguments())

    def inline(self) -> str:
        return self._inline()

    def inline_flattened(self) -> str:
        if self._inline_flattened is None:
            return super().inline_flattened()
        return self._inline_flattened()

    def decl(self) -> str | None:
        return self._decl()

    def dependencies_inner(self, dependencies: Dependencies) -> None:
        arguments = self._arguments()
        bindings = {param.ident: arg for param, arg in zip(self.params, arguments)}
        for ty in self.dependency_types:
            if isinstance(ty, TypeParam) and ty.ident in bindings:
                ty = bindings[ty.ident]
            dependencies.add(ty)
        for arg in arguments:
            dependencies.add(arg)


def _require_type(field: Field) -> TS:
    if field.ty is None:
        label = field.name if field.name is not None else "of a tuple struct"
        raise DeriveError(f"field {label} needs a type or a `type` override")
    return field.ty


def _option_argument(field: Field) -> TS:
    ty = field.ty
    if not isinstance(ty, OptionType):
        raise DeriveError("`optional` can only be used on an Option<T> type")
    return ty.inner


def _field_type(
    attr: FieldAttr,
    ty: TS | None,
    field: Field,
    deps: list[TS],
    generics: Sequence[TypeParam],
) -> Render:
    if attr.type_override is not None:
        return _const(attr.type_override)
    if ty is None:
        ty = _require_type(field)
    if attr.inline:
        deps.append(ty)
        return ty.inline
    return _const(format_type(ty, deps, generics))


def _named_field(
    field: Field,
    deps: list[TS],
    rename_all: Inflection | None,
    generics: Sequence[TypeParam],
) -> Render | None:
    attr = parse_field_attr(field.ts, field.serde)
    if attr.skip:
        return None

    ty = field.ty
    annotation = ""
    if attr.optional:
        ty = _option_argument(field)
        annotation = "?"

    if attr.flatten:
        if attr.type_override is not None:
            raise DeriveError("`type` is not compatible with `flatten`")
        if attr.rename is not None:
            raise DeriveError("`rename` is not compatible with `flatten`")
        if attr.inline:
            raise DeriveError("`inline` is not compatible with `flatten`")
        flat = ty if ty is not None else _require_type(field)
        deps.append(flat)
        return flat.inline_flattened

    formatted = _field_type(attr, ty, field, deps, generics)
    assert field.name is not None
    field_name = to_ts_ident(field.name)
    if attr.rename is not None:
        renamed = attr.rename
    elif rename_all is not None:
        renamed = rename_all.apply(field_name)
    else:
        renamed = field_name
    valid_name = raw_name_to_ts_field(renamed)
    return lambda: f"{valid_name}{annotation}: {formatted()},"


def _named(
    attr: StructAttr, name: str, fields: Sequence[Field], generics: Sequence[TypeParam]
) -> DerivedType:
    parts: list[Render] = []
    deps: list[TS] = []
    if attr.tag is not None:
        parts.append(_const(f'{attr.tag}: "{name}",'))
    for field in fields:
        part = _named_field(field, deps, attr.rename_all, generics)
        if part is not None:
            parts.append(part)
    generic_args = format_generics(deps, generics)

    def flattened() -> str:
        return " ".join(part() for part in parts)

    def inline() -> str:
        return f"{{ {flattened()} }}"

    def decl() -> str:
        return f"interface {name}{generic_args} {inline()}"

    return DerivedType(
        name,
        inline=inline,
        decl=decl,
        inline_flattened=flattened,
        dependency_types=deps,
        generics=generics,
        export=attr.export,
        export_to=attr.export_to,
    )


def _newtype(
    attr: StructAttr, name: str, field: Field, generics: Sequence[TypeParam]
) -> DerivedType:
    if attr.rename_all is not None:
        raise DeriveError("`rename_all` is not applicable to newtype structs")
    if attr.tag is not None:
        raise DeriveError("`tag` is not applicable to newtype structs")
    field_attr = parse_field_attr(field.ts, field.serde)
    if field_attr.rename is not None:
        raise DeriveError("`rename` is not applicable to newtype fields")
    if field_attr.skip:
        raise DeriveError("`skip` is not applicable to newtype fields")
    if field_attr.optional:
        raise DeriveError("`optional` is not applicable to newtype fields")
    if field_attr.flatten:
        raise DeriveError("`flatten` is not applicable to newtype fields")

    deps: list[TS] = []
    inline_def: Render
    if field_attr.type_override is not None:
        inline_def = _const(field_attr.type_override)
    else:
        inner = _require_type(field)
        deps.append(inner)
        if field_attr.inline:
            inline_def = inner.inline
        else:
            inline_def = _const(format_type(inner, deps, generics))
    generic_args = format_generics(deps, generics)

    def decl() -> str:
        return f"type {name}{generic_args} = {inline_def()};"

    return DerivedType(
        name,
        inline=inline_def,
        decl=decl,
        dependency_types=deps,
        generics=generics,
        export=attr.export,
        export_to=attr.export_to,
    )


def _tuple_field(
    field: Field, deps: list[TS], generics: Sequence[TypeParam]
) -> Render | None:
    attr = parse_field_attr(field.ts, field.serde)
    if attr.skip:
        return None
    if attr.rename is not None:
        raise DeriveError("`rename` is not applicable to tuple structs")
    if attr.optional:
        raise DeriveError("`optional` is not applicable to tuple fields")
    if attr.flatten:
        raise DeriveError("`flatten` is not applicable to tuple fields")
    if attr.type_override is not None:
        return _const(attr.type_override)
    ty = _require_type(field)
    rendered = ty.inline if attr.inline else _const(format_type(ty, deps, generics))
    deps.append(ty)
    return rendered


def _tuple(
    attr: StructAttr, name: str, fields: Sequence[Field], generics: Sequence[TypeParam]
) -> DerivedType:
    if attr.rename_all is not None:
        raise DeriveError("`rename_all` is not applicable to tuple structs")
    if attr.tag is not None:
        raise DeriveError("`tag` is not applicable to tuple structs")
    deps: list[TS] = []
    parts = [part for field in fields if (part := _tuple_field(field, deps, generics)) is not None]
    generic_args = format_generics(deps, generics)

    def inline() -> str:
        return f"[{', '.join(part() for part in parts)}]"

    def decl() -> str:
        return f"type {name}{generic_args} = {inline()};"

    return DerivedType(
        name,
        inline=inline,
        decl=decl,
        dependency_types=deps,
        generics=generics,
        export=attr.export,
        export_to=attr.export_to,
    )


def _unit(attr: StructAttr, name: str) -> DerivedType:
    if attr.rename_all is not None:
        raise DeriveError("`rename_all` is not applicable to unit structs")
    if attr.tag is not None:
        raise DeriveError("`tag` is not applicable to unit structs")
    return DerivedType(
        name,
        inline=_const("null"),
        decl=_const(f"type {name} = null;"),
        export=attr.export,
        export_to=attr.export_to,
    )


def type_def(
    attr: StructAttr,
    name: str,
    fields: Sequence[Field],
    generics: Sequence[TypeParam] = (),
) -> DerivedType:
    """Build the TypeScript type of a struct with the given attributes and fields.

    Fields must be either all named or all unnamed; no fields makes a unit struct.
    """
    ts_name = attr.rename if attr.rename is not None else to_ts_ident(name)
    fields = list(fields)
    if not fields:
        return _unit(attr, ts_name)
    named = [field.name is not None for field in fields]
    if all(named):
        return _named(attr, ts_name, fields, generics)
    if any(named):
        raise DeriveError("a struct's fields must be either all named or all unnamed")
    if len(fields) == 1:
        return _newtype(attr, ts_name, fields[0], generics)
    return _tuple(attr, ts_name, fields, generics)


def define_struct(
    name: str,
    fields: Sequence[Field] = (),
    generics: Sequence[TypeParam] = (),
    ts: AttrSpec = None,
    serde: AttrSpec = None,
) -> DerivedType:
    """Define a struct from its name, fields, type parameters and attributes."""
    attr = parse_struct_attr(ts, serde)
    return type_def(attr, name, fields, generics)