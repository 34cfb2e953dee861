"""TypeScript representations of primitives, collections, containers and date/time types.

Sets and fixed-size arrays are written as ``ArrayType``; ordered and indexed
maps as ``RecordType``; byte buffers as ``ArrayType(NUMBER)``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .core import TS, Dependencies, Id


def _check_arity(type_name: str, args: Sequence[str], expected: int) -> None:
    if len(args) != expected:
        raise ValueError(
            f"{type_name}.name_with_type_args called with {len(args)} args, expected {expected}"
        )


@dataclass(frozen=True)
class Primitive(TS):
    """A type that maps directly onto a TypeScript primitive.

    With ``ignores_type_args`` set, type arguments are accepted and dropped,
    as for time-zone-parameterised date types.
    """

    ts_name: str
    ignores_type_args: bool = False

    @property
    def type_args(self) -> tuple[TS, ...]:
        return ()

    def name(self) -> str:
        return self.ts_name

    def name_with_type_args(self, args: list[str]) -> str:
        if args and not self.ignores_type_args:
            raise ValueError("called name_with_type_args on primitive")
        return self.ts_name

    def inline(self) -> str:
        return self.ts_name


NUMBER = Primitive("number")
BIGINT = Primitive("bigint")
BOOLEAN = Primitive("boolean")
STRING = Primitive("string")
NULL = Primitive("null")
DATE_TIME = Primitive("string", ignores_type_args=True)
DATE = Primitive("string", ignores_type_args=True)


@dataclass(frozen=True)
class OptionType(TS):
    """A value that may be absent: ``T | null``."""

    inner: TS

    id = 4048293303

    @property
    def type_args(self) -> tuple[TS, ...]:
        return (self.inner,)

    def decl(self) -> str | None:
        return "type Option<T> = T | null;"

    def name(self) -> str:
        return "Option"

    def generics(self) -> str | None:
        return self.inner.name_with_generics()

    def name_with_type_args(self, args: list[str]) -> str:
        _check_arity("Option", args, 1)
        return f"Option<{args[0]}>"

    def inline(self) -> str:
        return f"{self.inner.inline()} | null"

    def dependencies_inner(self, dependencies: Dependencies) -> None:
        dependencies.add(self.inner)

    def transparent(self) -> bool:
        return True


@dataclass(frozen=True)
class ResultType(TS):
    """Either a success value or an error value.

    With ``tagged`` set, the declaration uses a ``result`` discriminator field.
    """

    ok: TS
    err: TS
    tagged: bool = False

    id = 4048293304

    @property
    def type_args(self) -> tuple[TS, ...]:
        return (self.ok, self.err)

    def decl(self) -> str | None:
        if self.tagged:
            return 'type Result<T, E> = { result: "Ok", value: T } | { result: "Err", value: E };'
        return "type Result<T, E> = { Ok: T } | { Err: E };"

    def name(self) -> str:
        return "Result"

    def generics(self) -> str | None:
        return f"{self.ok.name_with_generics()}, {self.err.name_with_generics()}"

    def name_with_type_args(self, args: list[str]) -> str:
        _check_arity("Result", args, 2)
        return f"Result<{args[0]}, {args[1]}>"

    def inline(self) -> str:
        return f"Result<{self.ok.inline()}, {self.err.inline()}>"

    def dependencies_inner(self, dependencies: Dependencies) -> None:
        dependencies.add(self.ok)
        dependencies.add(self.err)

    def transparent(self) -> bool:
        return True


@dataclass(frozen=True)
class ArrayType(TS):
    """A list, set or fixed-size array of elements: ``Array<T>``."""

    element: TS

    id = 4048293305

    @property
    def type_args(self) -> tuple[TS, ...]:
        return (self.element,)

    def name(self) -> str:
        return "Array"

    def generics(self) -> str | None:
        return self.element.name_with_generics()

    def name_with_type_args(self, args: list[str]) -> str:
        _check_arity("Array", args, 1)
        return f"Array<{args[0]}>"

    def inline(self) -> str:
        return f"Array<{self.element.inline()}>"

    def dependencies_inner(self, dependencies: Dependencies) -> None:
        dependencies.add(self.element)

    def transparent(self) -> bool:
        return True


@dataclass(frozen=True)
class RecordType(TS):
    """A map from keys to values: ``Record<K, V>``."""

    key: TS
    value: TS

    id = 4048293306

    @property
    def type_args(self) -> tuple[TS, ...]:
        return (self.key, self.value)

    def name(self) -> str:
        return "Record"

    def generics(self) -> str | None:
        return f"{self.key.name_with_generics()}, {self.value.name_with_generics()}"

    def name_with_type_args(self, args: list[str]) -> str:
        _check_arity("Record", args, 2)
        return f"Record<{args[0]}, {args[1]}>"

    def inline(self) -> str:
        return f"Record<{self.key.inline()}, {self.value.inline()}>"

    def dependencies_inner(self, dependencies: Dependencies) -> None:
        dependencies.add(self.key)
        dependencies.add(self.value)

    def transparent(self) -> bool:
        return True


@dataclass(frozen=True)
class _Range(TS):
    inner: TS

    _label = "Range"

    @property
    def type_args(self) -> tuple[TS, ...]:
        return (self.inner,)

    def decl(self) -> str | None:
        return f"type {self._label}<T> = {{ start: T, end: T, }};"

    def name(self) -> str:
        return self._label

    def generics(self) -> str | None:
        return self.inner.name_with_generics()

    def name_with_type_args(self, args: list[str]) -> str:
        _check_arity(self._label, args, 1)
        return f"{{ start: {args[0]}, end: {args[0]}, }}"

    def dependencies_inner(self, dependencies: Dependencies) -> None:
        dependencies.add(self.inner)

    def transparent(self) -> bool:
        return True


class RangeType(_Range):
    """A half-open range with ``start`` and ``end``."""

    id = 4048293307
    _label = "Range"


class RangeInclusiveType(_Range):
    """A closed range with ``start`` and ``end``."""

    id = 4048293308
    _label = "RangeInclusive"


class TupleType(TS):
    """A fixed sequence of one to ten element types: ``[A, B, ...]``."""

    MAX_ARITY = 10

    def __init__(self, *elements: TS) -> None:
        if not 1 <= len(elements) <= self.MAX_ARITY:
            raise ValueError(
                f"a tuple has between 1 and {self.MAX_ARITY} elements, got {len(elements)}"
            )
        self.elements: tuple[TS, ...] = elements

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TupleType):
            return NotImplemented
        return self.elements == other.elements

    def __hash__(self) -> int:
        return hash((TupleType, self.elements))

    def __repr__(self) -> str:
        return f"TupleType{self.elements!r}"

    def name(self) -> str:
        return f"[{', '.join(e.name() for e in self.elements)}]"

    def name_with_generics(self) -> str:
        return f"[{', '.join(e.name_with_generics() for e in self.elements)}]"

    def inline(self) -> str:
        return f"[{', '.join(e.inline() for e in self.elements)}]"

    def dependencies_inner(self, dependencies: Dependencies) -> None:
        for element in self.elements:
            dependencies.add(element)

    def transparent(self) -> bool:
        return True


@dataclass(frozen=True)
class Wrapper(TS):
    """A pointer, cell, lock or marker around another type; rendered as that type."""

    inner: TS

    @property
    def id(self) -> Id:  # type: ignore[override]
        return self.inner.id

    @property
    def type_args(self) -> tuple[TS, ...]:
        return (self.inner,)

    def decl(self) -> str | None:
        return self.inner.decl()

    def name(self) -> str:
        return self.inner.name()

    def name_with_generics(self) -> str:
        return self.inner.name_with_generics()

    def name_with_type_args(self, args: list[str]) -> str:
        _check_arity("Wrapper", args, 1)
        return args[0]

    def inline(self) -> str:
        return self.inner.inline()

    def inline_flattened(self) -> str:
        return self.inner.inline_flattened()

    def dependencies_inner(self, dependencies: Dependencies) -> None:
        self.inner.dependencies_inner(dependencies)

    def transparent(self) -> bool:
        return self.inner.transparent()