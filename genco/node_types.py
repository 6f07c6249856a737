"""Node kinds produced by the Java syntax parser."""

from __future__ import annotations

from enum import Enum


class NodeType(Enum):
    """A recognised Java syntax node kind, valued by its parser kind string."""

    # Modularization
    PROGRAM = "program"
    PACKAGE_DECL = "package_declaration"
    PACKAGE = "package"
    SCOPED_IDENTIFIER = "scoped_identifier"
    IMPORT_DECL = "import_declaration"
    IMPORT = "import"
    ID = "identifier"
    MODIFIERS = "modifiers"

    # Expressions
    STATEMENT_EXPR = "expression_statement"
    METHOD_INVOCATION = "method_invocation"
    FIELD_ACCESS = "field_access"
    ARGUMENT_LIST = "argument_list"
    STRING_LITERAL = "string_literal"
    RETURN_STATEMENT = "return_statement"
    RETURN = "return"
    PARENTHESIZED_EXPR = "parenthesized_expression"
    BINARY_EXPRESSION = "binary_expression"
    CAST_EXPRESSION = "cast_expression"
    LAMBDA_EXPRESSION = "lambda_expression"
    LAMBDA_ARROW = "->"
    OBJECT_CREATION_EXPRESSION = "object_creation_expression"
    FILE_OVERWRITING = "file_overwriting"
    ASSIGNMENT_EXPRESSION = "assignment_expression"
    TERNARY_EXPRESSION = "ternary_expression"
    INSTANCEOF_EXPRESSION = "instanceof_expression"
    INSTANCEOF = "instanceof"
    FIELD_DECLARATION = "field_declaration"

    # Exceptions
    THROWS = "throws"
    TRY_STATEMENT = "try_statement"
    TRY = "try"
    CATCH_CLAUSE = "catch_clause"
    CATCH = "catch"
    CATCH_FORMAL_PARAMETER = "catch_formal_parameter"
    CATCH_TYPE = "catch_type"
    THROW_STATEMENT = "throw_statement"
    THROW = "throw"
    FINALLY_CLAUSE = "finally_clause"
    FINALLY = "finally"
    ASSERT_STATEMENT = "assert_statement"
    ASSERT = "assert"

    # Literals
    UNARY_EXPRESSION = "unary_expression"
    DECIMAL_INTEGER_LITERAL = "decimal_integer_literal"
    FLOATING_POINT_TYPE = "floating_point_type"
    DECIMAL_FLOATING_POINT_LITERAL = "decimal_floating_point_literal"
    CHARACTER_LITERAL = "character_literal"
    TRUE = "true"
    FALSE = "false"
    NULL_LITERAL = "null_literal"
    ARRAY_INITIALIZER = "array_initializer"

    # Class
    CLASS_DECL = "class_declaration"
    CLASS = "class"
    CLASS_BODY = "class_body"
    SUPERCLASS = "superclass"
    EXTENDS = "extends"
    IMPLEMENTS = "implements"
    CONSTRUCTOR_DECLARATION = "constructor_declaration"
    CONSTRUCTOR_BODY = "constructor_body"
    SUPER = "super"
    EXPLICIT_CONSTRUCTOR_INVOCATION = "explicit_constructor_invocation"
    CLASS_LITERAL = "class_literal"
    WILDCARD = "wildcard"
    ABSTRACT = "abstract"

    # Enum
    ENUM_DECLARATION = "enum_declaration"
    ENUM = "enum"
    ENUM_BODY = "enum_body"
    ENUM_CONSTANT = "enum_constant"

    # Interface
    INTERFACE_DECLARATION = "interface_declaration"
    SUPER_INTERFACES = "super_interfaces"
    INTERFACE_TYPE_LIST = "interface_type_list"
    TYPE_LIST = "type_list"
    INTERFACE = "interface"
    INTERFACE_BODY = "interface_body"
    AT_INTERFACE = "@interface"

    # Annotations
    MARKER_ANNOTATION = "marker_annotation"
    AT = "@"
    ANNOTATION_TYPE_DECLARATION = "annotation_type_declaration"
    ANNOTATION = "annotation"
    ANNOTATION_ARGUMENT_LIST = "annotation_argument_list"
    ELEMENT_VALUE_PAIR = "element_value_pair"
    ANNOTATION_TYPE_BODY = "annotation_type_body"

    # Method
    METHOD_DECL = "method_declaration"
    FORMAL_PARAMS = "formal_parameters"
    FORMAL_PARAM = "formal_parameter"
    BLOCK = "block"
    LOCAL_VAR_DECL = "local_variable_declaration"
    VARIABLE_DECLARATOR = "variable_declarator"
    METHOD_REFERENCE = "method_reference"
    METHOD_REFERENCE_OPERATOR = "::"
    SPREAD_PARAMETERS = "spread_parameters"
    SPREAD_PARAMETER = "spread_parameter"
    THREE_DOTS = "..."
    SYNCHRONIZED = "synchronized"
    TYPE_PARAMETERS = "type_parameters"
    TYPE_PARAMETER = "type_parameter"

    # Types
    FINAL = "final"
    VOID_TYPE = "void_type"
    VOID = "void"
    GENERIC_TYPE = "generic_type"
    TYPE_ARGUMENTS = "type_arguments"
    ARRAY_TYPE = "array_type"
    NEW = "new"
    SCOPED_TYPE_IDENTIFIER = "scoped_type_identifier"
    TYPE_IDENTIFIER = "type_identifier"
    DIMENSIONS = "dimensions"
    INTEGRAL_TYPE = "integral_type"
    INT = "int"
    FLOAT = "float"
    DOUBLE = "double"
    LONG = "long"
    CHAR = "char"
    BOOLEAN = "boolean_type"
    STRING = "string"
    BYTE = "byte"
    SHORT = "short"

    # Visibility and other modifiers
    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
    STATIC = "static"
    VOLATILE = "volatile"
    TRANSIENT = "transient"
    THIS = "this"

    # Simple signs
    DOT = "."
    EQUALS = "="
    SEMICOLON = ";"
    COMMA = ","

    # Comments
    COMMENT = "comment"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"

    # Control flow
    IF_STATEMENT = "if_statement"
    IF = "if"
    ELSE = "else"
    EQUALITY = "=="
    NO_EQUALITY = "!="
    OR = "||"
    AND = "&&"
    EXCLAMATION_MARK = "!"
    LESS_OR_EQUAL = "<="
    GREATER_OR_EQUAL = ">="
    OR_COMPOSITION = "|="
    AND_COMPOSITION = "&="
    QUESTION_MARK = "?"
    COLON = ":"
    SWITCH_EXPRESSION = "switch_expression"
    SWITCH_BLOCK = "switch_block"
    SWITCH = "switch"
    SWITCH_STATEMENT = "switch_statement"
    SWITCH_BLOCK_STATEMENT_GROUP = "switch_block_statement_group"
    SWITCH_LABEL = "switch_label"
    CASE = "case"
    BREAK_STATEMENT = "break_statement"
    BREAK = "break"
    DEFAULT = "default"
    SWITCH_RULE = "switch_rule"
    FOR_STATEMENT = "for_statement"
    ENHANCED_FOR_STATEMENT = "enhanced_for_statement"
    FOR = "for"
    DO_STATEMENT = "do_statement"
    DO = "do"
    WHILE_STATEMENT = "while_statement"
    WHILE = "while"
    CONTINUE_STATEMENT = "continue_statement"
    CONTINUE = "continue"

    # Mathematical operators
    PLUS = "+"
    MINUS = "-"
    MODULUS = "%"
    MULTIPLICATION = "*"
    DIVISION = "/"
    UPDATE_EXPRESSION = "update_expression"
    PLUS_PLUS = "++"
    MINUS_MINUS = "--"
    PLUS_COMPOSITION = "+="
    MINUS_COMPOSITION = "-="
    MULTIPLICATION_COMPOSITION = "*="
    DIVISION_COMPOSITION = "/="
    MODULE_COMPOSITION = "%="
    EXPONENT_COMPOSITION = "^="
    BITWISE_SHIFT_LEFT = "<<"
    BITWISE_SHIFT_RIGHT = ">>"
    BITWISE_SHIFT_RIGHT_UNSIGNED = ">>>"
    BITWISE_SHIFT_RIGHT_UNSIGNED_COMPOSITION = ">>>="
    BITWISE_SHIFT_LEFT_COMPOSITION = "<<="
    BITWISE_SHIFT_RIGHT_COMPOSITION = ">>="
    AMPERSAND = "&"
    TILDE = "~"

    # Brackets
    L_PARENTHESES = "("
    R_PARENTHESES = ")"
    L_BRACE = "{"
    R_BRACE = "}"
    L_BRACKET = "["
    R_BRACKET = "]"
    LESS_THAN = "<"
    GREATER_THAN = ">"

    def is_structure(self) -> bool:
        """True for class, interface and enum declarations."""
        return self in _STRUCTURES

    def is_data_type_identifier(self) -> bool:
        """True for plain and scoped type identifiers."""
        return self in _TYPE_IDENTIFIERS

    def __str__(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))


_STRUCTURES = frozenset(
    {NodeType.CLASS_DECL, NodeType.INTERFACE_DECLARATION, NodeType.ENUM_DECLARATION}
)
_TYPE_IDENTIFIERS = frozenset(
    {NodeType.TYPE_IDENTIFIER, NodeType.SCOPED_TYPE_IDENTIFIER}
)
_VISIBILITIES = frozenset({NodeType.PRIVATE, NodeType.PUBLIC, NodeType.PROTECTED})


def parse_node_type(kind: str) -> NodeType:
    """Return the node type for a parser kind string.

    Raises ValueError when the kind is not recognised.
    """
    try:
        return NodeType(kind)
    except ValueError:
        raise ValueError(f"Unrecognized java node type {kind!r}") from None


def is_visibility(node_type: NodeType | None) -> bool:
    """True when the node type is a public, private or protected modifier."""
    return node_type in _VISIBILITIES