"""TypeScript definitions for enums: string enums and tagged or untagged unions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .attrs import (
    AttrSpec,
    EnumAttr,
    TagKind,
    parse_enum_attr,
    parse_variant_attr,
    struct_attr_from_variant,
)
from .core import TS, TypeParam
from .naming import DeriveError
from .structs import DerivedType, Field, Render, type_def
from .typeexpr import format_generics, format_type

_ENUM_KINDS = ("enum", "const enum")


def _const(text: str) -> Render:
    return lambda: text


@dataclass(frozen=True)
class Variant:
    """An enum variant.

    A variant without fields is a unit variant. Fields follow the rules of
    struct fields: all named, or all unnamed. ``discriminant`` is an explicit
    value, used when the enum is rendered as a TypeScript ``enum``.
    """

    name: str
    fields: Sequence[Field] = ()
    ts: AttrSpec = None
    serde: AttrSpec = None
    discriminant: int | str | None = None

    @property
    def is_unit(self) -> bool:
        """Whether this variant carries no data."""
        return not self.fields

    def single_unnamed(self) -> Field | None:
        """The only field of a one-field tuple variant, else ``None``."""
        fields = list(self.fields)
        if len(fields) == 1 and fields[0].name is None:
            return fields[0]
        return None


def _union_member(
    enum_attr: EnumAttr,
    variant: Variant,
    deps: list[TS],
    generics: Sequence[TypeParam],
) -> Render | None:
    attr = parse_variant_attr(variant.ts, variant.serde)
    if attr.skip:
        return None

    if attr.rename is not None:
        name = attr.rename
    elif enum_attr.rename_all is not None:
        name = enum_attr.rename_all.apply(variant.name)
    else:
        name = variant.name

    # The variant's data is rendered as an anonymous struct.
    variant_type = type_def(struct_attr_from_variant(attr), "_", variant.fields, generics)
    inline = variant_type.inline
    tagged = enum_attr.tagged()
    single = variant.single_unnamed()
    tag, content = tagged.tag, tagged.content

    rendered: Render
    match tagged.kind:
        case TagKind.UNTAGGED:
            rendered = inline
        case TagKind.EXTERNALLY:
            if variant.is_unit:
                rendered = _const(f'"{name}"')
            else:
                rendered = lambda: f"{{ {name}: {inline()} }}"
        case TagKind.ADJACENTLY:
            if single is not None and single.ty is not None:
                ty = format_type(single.ty, deps, generics)
                rendered = _const(f'{{ {tag}: "{name}", {content}: {ty} }}')
            elif variant.is_unit:
                rendered = _const(f'{{ {tag}: "{name}" }}')
            else:
                rendered = lambda: f'{{ {tag}: "{name}", {content}: {inline()} }}'
        case _:
            if variant_type.flattenable:
                flattened = variant_type.inline_flattened
                rendered = lambda: f'{{ {tag}: "{name}", {flattened()} }}'
            elif single is not None and single.ty is not None:
                ty = format_type(single.ty, deps, generics)
                rendered = _const(f'{{ {tag}: "{name}" }} & {ty}')
            elif variant.is_unit:
                rendered = _const(f'{{ {tag}: "{name}" }}')
            else:
                rendered = lambda: f'{{ {tag}: "{name}" }} & {inline()}'

    deps.extend(variant_type.dependency_types)
    return rendered


def _enum_member(enum_attr: EnumAttr, variant: Variant) -> str | None:
    attr = parse_variant_attr(variant.ts, variant.serde)
    if attr.skip:
        return None
    if attr.inline:
        raise DeriveError("`inline` is not applicable to enum variants when type enum")

    name = variant.name
    if attr.rename is not None:
        renamed = attr.rename
    elif enum_attr.rename_all is not None:
        renamed = enum_attr.rename_all.apply(name)
    else:
        renamed = name

    forbidden = {
        "tag": enum_attr.tag is not None,
        "content": enum_attr.content is not None,
        "untagged": enum_attr.untagged,
    }
    for attr_name, present in forbidden.items():
        if present:
            raise DeriveError(f'Invalid enum attribute "{attr_name}" when the type is "enum".')

    if variant.discriminant is not None:
        if attr.rename is not None:
            raise DeriveError(
                f'"{name}" cannot be both renamed and have a discriminant {variant.discriminant}'
            )
        return f"{name} = {variant.discriminant}"
    return f'{name} = "{renamed}"'


def define_enum(
    name: str,
    variants: Sequence[Variant] = (),
    generics: Sequence[TypeParam] = (),
    ts: AttrSpec = None,
    serde: AttrSpec = None,
) -> DerivedType:
    """Define an enum from its name, variants, type parameters and attributes.

    An enum whose variants are all units, and that has no tag, content or
    untagged attribute, becomes a TypeScript ``enum``; any other enum becomes
    a union type. An enum without variants is ``never``.
    """
    enum_attr = parse_enum_attr(ts, serde)
    ts_name = enum_attr.rename if enum_attr.rename is not None else name
    variants = list(variants)

    if not variants:
        return DerivedType(
            ts_name,
            inline=_const("never"),
            decl=_const(f"type {ts_name} = never;"),
            generics=generics,
            export=enum_attr.export,
            export_to=enum_attr.export_to,
        )

    match enum_attr.type_override:
        case "enum" | "const enum":
            is_enum = True
        case None | "type":
            is_enum = False
        case other:
            raise DeriveError(f'Either `const enum`, `enum` or `type` accepted; was: "{other}"')

    if (
        all(variant.is_unit for variant in variants)
        and not enum_attr.untagged
        and enum_attr.tag is None
        and enum_attr.content is None
    ):
        is_enum = True

    deps: list[TS] = []
    inline: Render
    if is_enum:
        members = [m for v in variants if (m := _enum_member(enum_attr, v)) is not None]
        joined = ", ".join(members)
        inline = _const(joined)
    else:
        parts = [
            part
            for variant in variants
            if (part := _union_member(enum_attr, variant, deps, generics)) is not None
        ]

        def inline() -> str:
            return " | ".join(part() for part in parts)

    if enum_attr.type_override is not None:
        kind = enum_attr.type_override
    else:
        kind = "enum" if is_enum else "type"

    generic_args = format_generics(deps, generics)

    def decl() -> str:
        if is_enum:
            return f"{kind} {ts_name} {{ {inline()} }}"
        return f"{kind} {ts_name}{generic_args} = {inline()};"

    return DerivedType(
        ts_name,
        inline=inline,
        decl=decl,
        dependency_types=deps,
        generics=generics,
        export=enum_attr.export,
        export_to=enum_attr.export_to,
    )