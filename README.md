# genco

Small building blocks for generating and inspecting Java source code.

## Installation

```
pip install genco
```

## What it provides

- `genco.node_types`: the `NodeType` enumeration of Java syntax-tree node kinds.
  `parse_node_type(kind)` maps a grammar kind such as `"class_declaration"` to
  its member, and `is_visibility(node_type)` tells whether a node is `public`,
  `private` or `protected`.
- `genco.indentation`: `Indentation`, which tracks the nesting level of the
  generated code. It starts with four spaces per level at level 0.
- `genco.imports`: `JavaImport` and the functions that create one.
  `route_import("org.test.*")` takes a dotted route as written.
  `explicit_import("org.test.Class")` does the same but requires the import to
  name a type rather than a wildcard. `import_from_file(path)` builds the
  import from a `.java` file inside a `src/main/java` tree. An error is raised
  as `JavaImportError`.
- `genco.data_types`: `DataType`, which is either a primitive, a boxed type or
  a type that comes from an import. `basic_data_type(name)` recognises names
  such as `"int"` or `"Integer"`.

## Example

```python
from genco.data_types import DataType, basic_data_type
from genco.imports import explicit_import
from genco.indentation import Indentation

imp = explicit_import("java.time.OffsetDateTime")
print(str(imp))              # import java.time.OffsetDateTime;
print(imp.last_node())       # OffsetDateTime

print(str(DataType.from_import(imp)))   # OffsetDateTime
print(str(DataType.int()))              # int
print(str(basic_data_type("Integer")))  # Integer

indent = Indentation()
indent.increase()
print(repr(indent.current()))  # '    '
```

## Running the tests

```
pip install -e ".[test]"
pytest
```