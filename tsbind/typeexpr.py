"""Formatting of field types and generic parameter lists into TypeScript.

Functions here collect the types a formatted expression refers to in a plain
list, ``dependencies``; the caller later resolves them into imports.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from .builtins import TupleType
from .core import TS, TypeParam


def extract_type_args(ty: TS) -> list[TS] | None:
    """The type arguments of ``ty``, or ``None`` if it has none."""
    args = list(getattr(ty, "type_args", ()))
    return args or None


def _is_generic(ty: TS, generics: Sequence[TypeParam]) -> bool:
    return isinstance(ty, TypeParam) and any(p.ident == ty.ident for p in generics)


def _format_tuple(
    ty: TupleType, dependencies: MutableSequence[TS], generics: Sequence[TypeParam]
) -> str:
    collected: list[TS] = []
    if len(ty.elements) == 1:
        (element,) = ty.elements
        collected.append(element)
        formatted = format_type(element, collected, generics)
    else:
        parts = []
        for element in ty.elements:
            parts.append(format_type(element, collected, generics))
            collected.append(element)
        formatted = f"[{', '.join(parts)}]"
    dependencies.extend(collected)
    return formatted


def format_type(
    ty: TS, dependencies: MutableSequence[TS], generics: Sequence[TypeParam] = ()
) -> str:
    """Render ``ty`` as it appears in a field, with generic parameters left by name.

    Every type referred to is appended to ``dependencies``.
    """
    if _is_generic(ty, generics):
        assert isinstance(ty, TypeParam)
        return ty.ident
    if isinstance(ty, TupleType):
        return _format_tuple(ty, dependencies, generics)
    dependencies.append(ty)
    args = extract_type_args(ty)
    if args is None:
        return ty.name()
    return ty.name_with_type_args([format_type(a, dependencies, generics) for a in args])


def format_generics(dependencies: MutableSequence[TS], generics: Sequence[TypeParam]) -> str:
    """Render a generic parameter list such as ``<A, B = string>``, or ``""`` if empty.

    Types used as defaults are appended to ``dependencies``.
    """
    if not generics:
        return ""
    params = [
        p.ident
        if p.default is None
        else f"{p.ident} = {format_type(p.default, dependencies, generics)}"
        for p in generics
    ]
    return f"<{', '.join(params)}>"