# tsbind

tsbind writes TypeScript declarations for your data types, so that a backend
and a frontend can share one definition of each structure. You describe
structs and enums once, in Python; tsbind produces `interface`, `type` and
`enum` declarations for them, and writes `.ts` files that import whatever
other exported types they refer to.

## Installing

```
pip install tsbind
```

tsbind has no runtime dependencies. To run the test suite:

```
pip install "tsbind[test]"
pytest
```

## A first example

```python
from tsbind.builtins import BOOLEAN, NUMBER, STRING
from tsbind.exporting import export_type_to_string
from tsbind.structs import Field, define_struct

user = define_struct(
    "User",
    [Field("name", STRING), Field("age", NUMBER), Field("active", BOOLEAN)],
)
user.decl()
# 'interface User { name: string, age: number, active: boolean, }'

print(export_type_to_string(user))
```

An internally tagged enum:

```python
from tsbind.enums import Variant, define_enum

tagged = define_enum(
    "EnumWithInternalTag",
    [Variant("A", [Field("foo", STRING)]), Variant("B", [Field("bar", NUMBER)])],
    serde={"tag": "type"},
)
tagged.decl()
# 'type EnumWithInternalTag = { type: "A", foo: string, } | { type: "B", bar: number, };'
```

Generic types:

```python
from tsbind.core import TypeParam

T = TypeParam("T")
generic = define_struct("Generic", [Field("value", T)], generics=[T])
generic.decl()                          # 'interface Generic<T> { value: T, }'
generic.of(NUMBER).name_with_generics() # 'Generic<number>'
```

## What it covers

- **The `TS` protocol** (`tsbind.core`): every type offers `name()`,
  `name_with_generics()`, `inline()`, `inline_flattened()`, `decl()` and
  `dependencies()`. `TypeParam` stands for a generic parameter, optionally
  with a default type. `Dependencies` collects, by type id, the declared
  types a type refers to, recursively.
- **Built-in types** (`tsbind.builtins`): `Primitive` with the ready-made
  `NUMBER`, `BIGINT`, `BOOLEAN`, `STRING`, `NULL`, `DATE` and `DATE_TIME`;
  `OptionType`, `ResultType`, `ArrayType`, `RecordType`, `RangeType`,
  `RangeInclusiveType`, `TupleType` (one to ten elements) and `Wrapper`,
  which renders exactly as the type it wraps.
- **Structs** (`tsbind.structs.define_struct`, one `Field` per field):
  named fields become interfaces, a single unnamed field becomes a type
  alias, several unnamed fields become a TypeScript tuple, and no fields
  become `null`. The result is a `DerivedType`; `DerivedType.of(...)`
  applies type arguments, where trailing ones may be left to their defaults.
- **Enums** (`tsbind.enums.define_enum`, one `Variant` per variant):
  all-unit enums become TypeScript `enum`s (or `const enum` with
  `ts={"type": "const enum"}`), with explicit discriminants where given;
  enums with data become unions in externally, internally or adjacently
  tagged form, or untagged. An empty enum becomes `never`.
- **Attributes** (`tsbind.attrs`): each definition takes `ts` and `serde`
  attributes as a mapping, or a list of mappings, of key to value (flags
  take `True`). Understood keys include `rename`, `rename_all`, `type`,
  `inline`, `skip`, `optional`, `flatten`, `tag`, `content`, `untagged`,
  `export` and `export_to`, and for serde `skip_serializing`,
  `skip_deserializing`, `skip_serializing_if = "Option::is_none"` and
  `default`. Unknown `ts` keys and invalid combinations raise
  `tsbind.naming.DeriveError`; serde entries that cannot be parsed are
  ignored with a `UserWarning`.
- **Renaming** (`tsbind.naming`): `Inflection` and `parse_inflection`
  handle `lowercase`, `UPPERCASE`, `camelCase`, `snake_case`, `PascalCase`,
  `SCREAMING_SNAKE_CASE` and `kebab-case`. A leading `r#` is dropped from
  identifiers, and field names that are not valid identifiers are quoted.
- **Exporting** (`tsbind.exporting`): `export_type_to_string` returns the
  file text: a generated-file notice, the import lines (sorted by name,
  deduplicated, with relative paths), a blank line and the `export`ed
  declaration. `export_type_to` writes it to a path; `export_type` writes it
  below a root directory, or below the directory named by the
  `TSBIND_PROJECT_DIR` environment variable, at the type's `export_to`
  location (by default `bindings/<Name>.ts`; a location ending in `/` is a
  directory) and returns the path. Failures raise `ExportError`.
  `import_path` and `diff_paths` compute the relative module specifiers.
- **Configuration** (`tsbind.config`): `load_config` reads an optional
  `ts.toml` (`ambient_declarations`, `out_dir`) from a directory, falling
  back to the defaults; `get_config` loads it once from
  `TSBIND_PROJECT_DIR` and keeps it.

## What it does not do

- Types are described by hand with `Field`, `Variant` and the built-in
  types; tsbind does not inspect Python classes or annotations itself.
- There is no command-line program; everything is called from Python.
- Generated text is not reformatted; declarations come out on one line.
- The values read by `load_config` are not used by the export functions;
  the output location is always the type's `export_to` below the root.