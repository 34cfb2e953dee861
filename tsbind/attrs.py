"""Attributes that shape how structs, enums, variants and fields are rendered.

Attributes come in two flavours: ``ts`` attributes, whose unknown keys are
errors, and ``serde`` attributes, whose unparseable entries are ignored with a
warning. Each flavour is given as a mapping of key to value, or as a sequence
of such mappings (one per attribute). Keys that are plain flags take ``True``.
"""

from __future__ import annotations

import warnings
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from .naming import DeriveError, Inflection, parse_inflection

AttrSpec = Mapping[str, Any] | Iterable[Mapping[str, Any]] | None
_Handler = Callable[[Any, str, Any], None]
_A = TypeVar("_A")


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise DeriveError("expected string")
    return value


def _flag(key: str, value: Any) -> bool:
    if value is not True:
        raise DeriveError(f"expected `,` after `{key}`")
    return True


def _set_str(name: str) -> _Handler:
    def handler(out: Any, key: str, value: Any) -> None:
        setattr(out, name, _string(value))

    return handler


def _set_flag(name: str) -> _Handler:
    def handler(out: Any, key: str, value: Any) -> None:
        setattr(out, name, _flag(key, value))

    return handler


def _set_inflection(name: str) -> _Handler:
    def handler(out: Any, key: str, value: Any) -> None:
        setattr(out, name, parse_inflection(_string(value)))

    return handler


def _accept_default(out: Any, key: str, value: Any) -> None:
    if value is not True:
        _string(value)


def _set_optional_if(out: Any, key: str, value: Any) -> None:
    out.optional = _string(value) == "Option::is_none"


def _entries(spec: AttrSpec) -> list[Mapping[str, Any]]:
    if spec is None:
        return []
    if isinstance(spec, Mapping):
        return [spec]
    entries = list(spec)
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise TypeError(f"attribute must be a mapping, got {type(entry).__name__}")
    return entries


def _parse_one(factory: Callable[[], _A], handlers: Mapping[str, _Handler], entry: Mapping[str, Any]) -> _A:
    out = factory()
    for key, value in entry.items():
        handler = handlers.get(key)
        if handler is None:
            raise DeriveError("unexpected attribute")
        handler(out, key, value)
    return out


def _parse_all(
    factory: Callable[[], _A],
    ts_handlers: Mapping[str, _Handler],
    serde_handlers: Mapping[str, _Handler],
    ts: AttrSpec,
    serde: AttrSpec,
) -> _A:
    result = factory()
    for entry in _entries(ts):
        result.merge(_parse_one(factory, ts_handlers, entry))  # type: ignore[attr-defined]
    for entry in _entries(serde):
        try:
            parsed = _parse_one(factory, serde_handlers, entry)
        except DeriveError:
            warnings.warn(
                f"failed to parse serde attribute {dict(entry)!r}; it will be ignored",
                UserWarning,
                stacklevel=3,
            )
            continue
        result.merge(parsed)  # type: ignore[attr-defined]
    return result


@dataclass
class FieldAttr:
    """Attributes of a single struct or tuple field."""

    type_override: str | None = None
    rename: str | None = None
    inline: bool = False
    skip: bool = False
    optional: bool = False
    flatten: bool = False

    def merge(self, other: FieldAttr) -> None:
        """Fill unset values from ``other``; flags are combined."""
        self.rename = self.rename if self.rename is not None else other.rename
        if self.type_override is None:
            self.type_override = other.type_override
        self.inline = self.inline or other.inline
        self.skip = self.skip or other.skip
        self.optional = self.optional or other.optional
        self.flatten = self.flatten or other.flatten


@dataclass
class StructAttr:
    """Attributes of a struct."""

    rename_all: Inflection | None = None
    rename: str | None = None
    export_to: str | None = None
    export: bool = False
    tag: str | None = None

    def merge(self, other: StructAttr) -> None:
        """Fill unset values from ``other``; flags are combined."""
        self.rename = self.rename if self.rename is not None else other.rename
        self.rename_all = self.rename_all if self.rename_all is not None else other.rename_all
        self.export_to = self.export_to if self.export_to is not None else other.export_to
        self.export = self.export or other.export
        self.tag = self.tag if self.tag is not None else other.tag


class TagKind(Enum):
    """How an enum's variant tag is represented."""

    EXTERNALLY = "externally"
    ADJACENTLY = "adjacently"
    INTERNALLY = "internally"
    UNTAGGED = "untagged"


@dataclass(frozen=True)
class Tagged:
    """An enum representation with its tag and content field names."""

    kind: TagKind
    tag: str | None = None
    content: str | None = None


@dataclass
class EnumAttr:
    """Attributes of an enum."""

    rename_all: Inflection | None = None
    rename: str | None = None
    export_to: str | None = None
    export: bool = False
    tag: str | None = None
    untagged: bool = False
    content: str | None = None
    type_override: str | None = None

    def tagged(self) -> Tagged:
        """Return the representation selected by ``tag``, ``content`` and ``untagged``."""
        match (self.untagged, self.tag, self.content):
            case (False, None, None):
                return Tagged(TagKind.EXTERNALLY)
            case (False, str() as tag, None):
                return Tagged(TagKind.INTERNALLY, tag=tag)
            case (False, str() as tag, str() as content):
                return Tagged(TagKind.ADJACENTLY, tag=tag, content=content)
            case (True, None, None):
                return Tagged(TagKind.UNTAGGED)
            case (True, str(), None):
                raise DeriveError("untagged cannot be used with tag")
            case (True, _, _):
                raise DeriveError("untagged cannot be used with content")
            case _:
                raise DeriveError("content cannot be used without tag")

    def merge(self, other: EnumAttr) -> None:
        """Fill unset values from ``other``; flags are combined."""
        if self.type_override is None:
            self.type_override = other.type_override
        self.rename = self.rename if self.rename is not None else other.rename
        self.rename_all = self.rename_all if self.rename_all is not None else other.rename_all
        self.tag = self.tag if self.tag is not None else other.tag
        self.untagged = self.untagged or other.untagged
        self.content = self.content if self.content is not None else other.content
        self.export = self.export or other.export
        self.export_to = self.export_to if self.export_to is not None else other.export_to


@dataclass
class VariantAttr:
    """Attributes of a single enum variant."""

    rename: str | None = None
    rename_all: Inflection | None = None
    inline: bool = False
    skip: bool = False

    def merge(self, other: VariantAttr) -> None:
        """Fill unset values from ``other``; flags are combined."""
        self.rename = self.rename if self.rename is not None else other.rename
        self.rename_all = self.rename_all if self.rename_all is not None else other.rename_all
        self.inline = self.inline or other.inline
        self.skip = self.skip or other.skip


_FIELD_TS = {
    "type": _set_str("type_override"),
    "rename": _set_str("rename"),
    "inline": _set_flag("inline"),
    "skip": _set_flag("skip"),
    "optional": _set_flag("optional"),
    "flatten": _set_flag("flatten"),
}

_FIELD_SERDE = {
    "rename": _set_str("rename"),
    "skip": _set_flag("skip"),
    "skip_serializing": _set_flag("skip"),
    "skip_deserializing": _set_flag("skip"),
    "skip_serializing_if": _set_optional_if,
    "flatten": _set_flag("flatten"),
    "default": _accept_default,
}

_STRUCT_TS = {
    "rename": _set_str("rename"),
    "rename_all": _set_inflection("rename_all"),
    "export": _set_flag("export"),
    "export_to": _set_str("export_to"),
}

_STRUCT_SERDE = {
    "rename": _set_str("rename"),
    "rename_all": _set_inflection("rename_all"),
    "tag": _set_str("tag"),
    "default": _accept_default,
}

_ENUM_TS = {
    "rename": _set_str("rename"),
    "rename_all": _set_inflection("rename_all"),
    "export_to": _set_str("export_to"),
    "export": _set_flag("export"),
    "type": _set_str("type_override"),
}

_ENUM_SERDE = {
    "rename": _set_str("rename"),
    "rename_all": _set_inflection("rename_all"),
    "tag": _set_str("tag"),
    "content": _set_str("content"),
    "untagged": _set_flag("untagged"),
    "type": _set_str("type_override"),
}

_VARIANT_TS = {
    "rename": _set_str("rename"),
    "rename_all": _set_inflection("rename_all"),
    "inline": _set_flag("inline"),
    "skip": _set_flag("skip"),
}

_VARIANT_SERDE = {
    "rename": _set_str("rename"),
    "rename_all": _set_inflection("rename_all"),
    "skip": _set_flag("skip"),
    "skip_serializing": _set_flag("skip"),
    "skip_deserializing": _set_flag("skip"),
}


def parse_field_attr(ts: AttrSpec = None, serde: AttrSpec = None) -> FieldAttr:
    """Build the attributes of a field from its ``ts`` and ``serde`` attributes."""
    return _parse_all(FieldAttr, _FIELD_TS, _FIELD_SERDE, ts, serde)


def parse_struct_attr(ts: AttrSpec = None, serde: AttrSpec = None) -> StructAttr:
    """Build the attributes of a struct from its ``ts`` and ``serde`` attributes."""
    return _parse_all(StructAttr, _STRUCT_TS, _STRUCT_SERDE, ts, serde)


def parse_enum_attr(ts: AttrSpec = None, serde: AttrSpec = None) -> EnumAttr:
    """Build the attributes of an enum from its ``ts`` and ``serde`` attributes."""
    return _parse_all(EnumAttr, _ENUM_TS, _ENUM_SERDE, ts, serde)


def parse_variant_attr(ts: AttrSpec = None, serde: AttrSpec = None) -> VariantAttr:
    """Build the attributes of an enum variant from its ``ts`` and ``serde`` attributes."""
    return _parse_all(VariantAttr, _VARIANT_TS, _VARIANT_SERDE, ts, serde)


def struct_attr_from_variant(variant: VariantAttr) -> StructAttr:
    """Struct attributes for rendering a variant's fields as an anonymous struct."""
    return StructAttr(rename=variant.rename, rename_all=variant.rename_all)