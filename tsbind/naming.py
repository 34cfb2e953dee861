"""Identifier handling and case conversion for generated TypeScript names."""

from __future__ import annotations

from enum import Enum


class DeriveError(Exception):
    """Raised when a type definition or its attributes cannot be turned into TypeScript."""


def _words(text: str) -> list[str]:
    """Split an identifier into words on separators and case boundaries."""
    words: list[str] = []
    current = ""
    for ch, nxt in zip(text, text[1:] + " "):
        if not ch.isalnum():
            if current:
                words.append(current)
                current = ""
            continue
        if current and ch.isupper():
            prev = current[-1]
            lower_to_upper = prev.islower() or prev.isdigit()
            acronym_end = prev.isupper() and nxt.islower()
            if lower_to_upper or acronym_end:
                words.append(current)
                current = ""
        current += ch
    if current:
        words.append(current)
    return words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


class Inflection(Enum):
    """A renaming rule applied to every field or variant of a type."""

    LOWER = "lowercase"
    UPPER = "UPPERCASE"
    CAMEL = "camelCase"
    SNAKE = "snake_case"
    PASCAL = "PascalCase"
    SCREAMING_SNAKE = "SCREAMING_SNAKE_CASE"
    KEBAB = "kebab-case"

    def apply(self, string: str) -> str:
        """Rename ``string`` according to this rule."""
        match self:
            case Inflection.LOWER:
                return string.lower()
            case Inflection.UPPER:
                return string.upper()
        words = _words(string)
        match self:
            case Inflection.CAMEL:
                if not words:
                    return ""
                return words[0].lower() + "".join(_capitalize(w) for w in words[1:])
            case Inflection.SNAKE:
                return "_".join(w.lower() for w in words)
            case Inflection.PASCAL:
                return "".join(_capitalize(w) for w in words)
            case Inflection.SCREAMING_SNAKE:
                return "_".join(w.upper() for w in words)
            case _:
                return "-".join(w.lower() for w in words)


_INFLECTIONS = {
    "lowercase": Inflection.LOWER,
    "uppercase": Inflection.UPPER,
    "camelcase": Inflection.CAMEL,
    "snakecase": Inflection.SNAKE,
    "pascalcase": Inflection.PASCAL,
    "screamingsnakecase": Inflection.SCREAMING_SNAKE,
    "kebabcase": Inflection.KEBAB,
}


def parse_inflection(value: str) -> Inflection:
    """Parse a rename rule such as ``"camelCase"`` or ``"SCREAMING_SNAKE_CASE"``."""
    key = value.lower().replace("_", "").replace("-", "")
    try:
        return _INFLECTIONS[key]
    except KeyError:
        raise DeriveError(f"invalid inflection: '{value}'") from None


def to_ts_ident(ident: str) -> str:
    """Strip the raw-identifier prefix ``r#`` from an identifier."""
    while ident.startswith("r#"):
        ident = ident[2:]
    return ident


def raw_name_to_ts_field(value: str) -> str:
    """Return ``value`` as a field name, quoted if it is not a plain identifier."""
    valid = all(c.isalnum() or c in "_$" for c in value) and not value[:1].isnumeric()
    return value if valid else f'"{value}"'