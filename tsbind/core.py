"""The ``TS`` protocol and the dependency tracking used to resolve imports."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

Id = int


class TS(ABC):
    """A type that can be represented in TypeScript.

    ``id`` identifies the type independently of its type arguments, so that
    e.g. ``Option<number>`` and ``Option<string>`` share one id. Types without
    a declaration may leave it at ``0``. ``export_to`` is the path the type is
    written to when exported, or ``None`` if it cannot be exported.
    """

    id: Id = 0
    export_to: str | None = None

    @abstractmethod
    def name(self) -> str:
        """Name of this type in TypeScript."""

    def generics(self) -> str | None:
        """Type arguments of this instance, e.g. ``"number, string"``."""
        return None

    def name_with_generics(self) -> str:
        """Name of this type with its type arguments, e.g. ``"Result<number, string>"``."""
        generics = self.generics()
        if generics is not None:
            return f"{self.name()}<{generics}>"
        return self.name()

    def name_with_type_args(self, args: list[str]) -> str:
        """Name of this type applied to already formatted type arguments."""
        return f"{self.name()}<{', '.join(args)}>"

    def inline(self) -> str:
        """The definition of this type written in place, e.g. ``{ user_id: number, }``."""
        raise TypeError(f"{self.name()} cannot be inlined")

    def inline_flattened(self) -> str:
        """The fields of this type, for merging into another object type."""
        raise TypeError(f"{self.name()} cannot be flattened")

    def decl(self) -> str | None:
        """The declaration of this type, e.g. ``interface User { ... }``, if it has one."""
        return None

    def dependencies(self) -> Dependencies:
        """All types this type depends on, recursively."""
        dependencies = Dependencies()
        self.dependencies_inner(dependencies)
        return dependencies

    def dependencies_inner(self, dependencies: Dependencies) -> None:
        """Add the direct dependencies of this type (and theirs) to ``dependencies``."""

    def transparent(self) -> bool:
        """Whether this type is only a container around others, like a tuple or a list."""
        return False


@dataclass(frozen=True)
class TypeParam(TS):
    """A generic type parameter such as ``T``, optionally with a default type."""

    ident: str
    default: TS | None = None

    def name(self) -> str:
        return self.ident

    def inline(self) -> str:
        return self.ident


@dataclass(frozen=True, order=True)
class Dependency:
    """A declared TypeScript type that other types depend upon."""

    id: Id
    ts_name: str
    ts_declaration: str
    exported_to: str | None


def dependency_of(ty: TS) -> Dependency | None:
    """Describe ``ty`` as a dependency, or ``None`` if it has no declaration."""
    declaration = ty.decl()
    if declaration is None:
        return None
    return Dependency(
        id=ty.id,
        ts_name=ty.name(),
        ts_declaration=declaration,
        exported_to=ty.export_to,
    )


class Dependencies(dict[Id, Dependency]):
    """Dependencies keyed by type id."""

    def add(self, ty: TS) -> None:
        """Add ``ty`` and, recursively, everything it depends on.

        A type whose id is already present is ignored, on the assumption that
        its own dependencies were added with it.
        """
        if ty.id in self:
            return
        dependency = dependency_of(ty)
        if dependency is not None:
            self[ty.id] = dependency
        ty.dependencies_inner(self)

    def extend(self, other: Dependencies) -> None:
        """Merge every entry of ``other`` into this collection."""
        self.update(other)