from enum import Enum


class ValueKind(str, Enum):
    """Kinds of token a pretty-printed value is broken into for coloring."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    STRING_QUOTATION = "string_quotation"
    ESCAPED_CHAR = "escaped_char"
    FIELD_NAME = "field_name"
    POINTER_ADDRESS = "pointer_address"
    NULL = "null"
    TIMESTAMP = "timestamp"
    STRUCT_NAME = "struct_name"
    CONTAINER_LENGTH = "container_length"
