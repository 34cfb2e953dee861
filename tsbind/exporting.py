"""Writing TypeScript declarations, with the imports they need, to files."""

from __future__ import annotations

import json
import os
from pathlib import Path

from .config import PROJECT_DIR_VAR
from .core import TS

NOTE = "// This file was generated by tsbind. Do not edit this file manually.\n"

_ROOT = "/"
_CUR = "."
_PARENT = ".."

StrPath = str | os.PathLike[str]


class ExportError(Exception):
    """Raised when a type cannot be exported."""


def _target(ty: TS) -> str:
    if ty.export_to is None:
        raise ExportError("this type cannot be exported")
    return ty.export_to


def export_type(ty: TS, root: StrPath | None = None) -> Path:
    """Write ``ty`` to its ``export_to`` path below ``root`` and return the file's path.

    Without ``root``, the directory named by ``TSBIND_PROJECT_DIR`` is used.
    """
    if root is None:
        try:
            root = os.environ[PROJECT_DIR_VAR]
        except KeyError:
            raise ExportError(f"the environment variable {PROJECT_DIR_VAR} is not set") from None
    path = Path(root) / _target(ty)
    export_type_to(ty, path)
    return path


def export_type_to(ty: TS, path: StrPath) -> None:
    """Write ``ty`` to ``path``, ignoring its ``export_to`` setting."""
    content = export_type_to_string(ty)
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content.encode("utf-8"))
    except OSError as error:
        raise ExportError("an error occurred while performing IO") from error


def export_type_to_string(ty: TS) -> str:
    """The generated file for ``ty``: header, imports and exported declaration."""
    out = [NOTE, _imports(ty)]
    declaration = ty.decl()
    if declaration is not None:
        out.append(f"export {declaration}")
    return "".join(out)


def _imports(ty: TS) -> str:
    source = _target(ty)
    unique = {dep.ts_name: dep for dep in ty.dependencies().values() if dep.id != ty.id}
    lines = [
        f"import {{ {name} }} from {json.dumps(import_path(source, dep.exported_to), ensure_ascii=False)};\n"
        for name, dep in sorted(unique.items())
        if dep.exported_to is not None
    ]
    return "".join(lines) + "\n"


def _components(path: StrPath) -> list[str]:
    text = os.fspath(path)
    comps = [_ROOT] if text.startswith("/") else []
    for position, segment in enumerate(text.split("/")):
        if not segment:
            continue
        if segment == _CUR and (position != 0 or comps):
            continue
        comps.append(segment)
    return comps


def _join(comps: list[str]) -> str:
    if comps and comps[0] == _ROOT:
        return _ROOT + "/".join(comps[1:])
    return "/".join(comps)


def _diff(path: list[str], base: list[str]) -> list[str] | None:
    path_abs = bool(path) and path[0] == _ROOT
    base_abs = bool(base) and base[0] == _ROOT
    if path_abs != base_abs:
        return list(path) if path_abs else None

    ita, itb = iter(path), iter(base)
    comps: list[str] = []
    while True:
        a, b = next(ita, None), next(itb, None)
        if a is None and b is None:
            break
        if b is None:
            comps.append(a)  # type: ignore[arg-type]
            comps.extend(ita)
            break
        if a is None:
            comps.append(_PARENT)
            continue
        if not comps and a == b:
            continue
        if b == _CUR:
            comps.append(a)
            continue
        if b == _PARENT:
            return None
        comps.append(_PARENT)
        comps.extend(_PARENT for _ in itb)
        comps.append(a)
        comps.extend(ita)
        break
    return comps


def diff_paths(path: StrPath, base: StrPath) -> str | None:
    """The path that leads from the directory ``base`` to ``path``.

    Returns ``None`` when no such relative path can be worked out.
    """
    comps = _diff(_components(path), _components(base))
    return None if comps is None else _join(comps)


def import_path(source: StrPath, target: StrPath) -> str:
    """The module specifier used in ``source`` to import the file ``target``."""
    source_comps = _components(source)
    if not source_comps or source_comps == [_ROOT]:
        raise ValueError("failed to calculate import path")
    rel = _diff(_components(target), source_comps[:-1])
    if rel is None:
        raise ValueError("failed to calculate import path")
    text = _join(rel)
    if rel and rel[0] not in (_ROOT, _CUR, _PARENT):
        text = f"./{text}"
    while text.endswith(".ts"):
        text = text[: -len(".ts")]
    return text