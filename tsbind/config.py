"""Project configuration read from a ``ts.toml`` file."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from functools import cache
from pathlib import Path
from typing import Any

FILE_NAME = "ts.toml"
PROJECT_DIR_VAR = "TSBIND_PROJECT_DIR"


@dataclass(frozen=True)
class Config:
    """Settings for generating bindings."""

    ambient_declarations: bool = False
    out_dir: str = "typescript"


def _require(table: dict[str, Any], key: str, kind: type) -> Any:
    if key not in table:
        raise ValueError(f"missing field `{key}` in {FILE_NAME}")
    value = table[key]
    if not isinstance(value, kind):
        raise ValueError(f"invalid type for `{key}` in {FILE_NAME}: expected {kind.__name__}")
    return value


def load_config(directory: str | os.PathLike[str]) -> Config:
    """Read ``ts.toml`` from ``directory``, or return the defaults if there is none.

    Raises ``ValueError`` if the file is not valid TOML or lacks a field.
    """
    path = Path(directory) / FILE_NAME
    if not path.is_file():
        return Config()
    table = tomllib.loads(path.read_text(encoding="utf-8"))
    return Config(
        ambient_declarations=_require(table, "ambient_declarations", bool),
        out_dir=_require(table, "out_dir", str),
    )


@cache
def get_config() -> Config:
    """The configuration of the project directory named by ``TSBIND_PROJECT_DIR``.

    The first successful load is kept for later calls.
    """
    try:
        directory = os.environ[PROJECT_DIR_VAR]
    except KeyError:
        raise KeyError(f"the environment variable {PROJECT_DIR_VAR} is not set") from None
    return load_config(directory)