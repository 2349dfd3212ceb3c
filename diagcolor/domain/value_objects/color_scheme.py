from pydantic import BaseModel, Field

from diagcolor.domain.value_objects.value_kind import ValueKind

NO_COLOR = "none"


class ValueColorScheme(BaseModel, frozen=True):
    """Rich style per value kind, used when pretty-printing structured values.

    Styles use Rich syntax (e.g. "bold cyan"); "none" leaves a token unstyled.
    """

    boolean: str = Field(default=NO_COLOR)
    integer: str = Field(default=NO_COLOR)
    float: str = Field(default=NO_COLOR)
    string: str = Field(default=NO_COLOR)
    string_quotation: str = Field(default=NO_COLOR)
    escaped_char: str = Field(default=NO_COLOR)
    field_name: str = Field(default=NO_COLOR)
    pointer_address: str = Field(default=NO_COLOR)
    null: str = Field(default=NO_COLOR)
    timestamp: str = Field(default=NO_COLOR)
    struct_name: str = Field(default=NO_COLOR)
    container_length: str = Field(default=NO_COLOR)

    def style_for(self, kind: ValueKind) -> str:
        return getattr(self, kind.value)

    def is_colorless(self) -> bool:
        return all(self.style_for(kind) == NO_COLOR for kind in ValueKind)
