"""Java data types: primitives, boxed built-ins and imported types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from genco.imports import JavaImport


class PrimitiveType(Enum):
    """A Java primitive type, valued by its keyword."""

    BYTE = "byte"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    CHAR = "char"
    BOOLEAN = "boolean"

    def __str__(self) -> str:
        return self.value


class BoxedType(Enum):
    """A non-primitive Java type that needs no import, valued by its name."""

    BYTE = "Byte"
    SHORT = "Short"
    INTEGER = "Integer"
    LONG = "Long"
    FLOAT = "Float"
    DOUBLE = "Double"
    BOOLEAN = "Boolean"
    STRING = "String"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DataType:
    """A Java data type: exactly one of a primitive, a boxed type or an import."""

    primitive: PrimitiveType | None = None
    boxed: BoxedType | None = None
    imported: JavaImport | None = None

    def __post_init__(self) -> None:
        given = sum(
            part is not None for part in (self.primitive, self.boxed, self.imported)
        )
        if given != 1:
            raise ValueError(
                "A java data type needs exactly one of primitive, boxed or imported"
            )

    @classmethod
    def int(cls) -> DataType:
        """The ``int`` primitive."""
        return cls(primitive=PrimitiveType.INT)

    @classmethod
    def long(cls) -> DataType:
        """The ``long`` primitive."""
        return cls(primitive=PrimitiveType.LONG)

    @classmethod
    def float(cls) -> DataType:
        """The ``float`` primitive."""
        return cls(primitive=PrimitiveType.FLOAT)

    @classmethod
    def double(cls) -> DataType:
        """The ``double`` primitive."""
        return cls(primitive=PrimitiveType.DOUBLE)

    @classmethod
    def boolean(cls) -> DataType:
        """The ``boolean`` primitive."""
        return cls(primitive=PrimitiveType.BOOLEAN)

    @classmethod
    def string(cls) -> DataType:
        """The ``String`` type."""
        return cls(boxed=BoxedType.STRING)

    @classmethod
    def char(cls) -> DataType:
        """The ``char`` primitive."""
        return cls(primitive=PrimitiveType.CHAR)

    @classmethod
    def byte(cls) -> DataType:
        """The ``byte`` primitive."""
        return cls(primitive=PrimitiveType.BYTE)

    @classmethod
    def short(cls) -> DataType:
        """The ``short`` primitive."""
        return cls(primitive=PrimitiveType.SHORT)

    @classmethod
    def from_import(cls, java_import: JavaImport) -> DataType:
        """A type referred to by an explicit import."""
        return cls(imported=java_import)

    def java_import(self) -> JavaImport | None:
        """Return the import this type needs, or None."""
        return self.imported

    def __str__(self) -> str:
        if self.primitive is not None:
            return str(self.primitive)
        if self.boxed is not None:
            return str(self.boxed)
        assert self.imported is not None
        return self.imported.last_node()


_PRIMITIVES = {member.value: member for member in PrimitiveType}
_BOXED = {member.value: member for member in BoxedType}


def basic_data_type(name: str) -> DataType | None:
    """Return the primitive or boxed type written as ``name``, or None."""
    if name in _PRIMITIVES:
        return DataType(primitive=_PRIMITIVES[name])
    if name in _BOXED:
        return DataType(boxed=_BOXED[name])
    return None