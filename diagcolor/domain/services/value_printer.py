import dataclasses
import inspect
from collections.abc import Callable, Iterable
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from io import StringIO
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.text import Text

from diagcolor.domain.value_objects.color_scheme import ValueColorScheme
from diagcolor.domain.value_objects.value_kind import ValueKind

ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}

BRACKETS: dict[type, tuple[str, str]] = {
    list: ("[", "]"),
    tuple: ("(", ")"),
    set: ("{", "}"),
    frozenset: ("{", "}"),
    dict: ("{", "}"),
}


class ValuePrinter:
    """Pretty-prints Python values, coloring each token by its ValueKind.

    Containers and objects span multiple lines with one item per line.
    A container or object that is already being printed further up the
    tree is shown as its address (``&0x...``) instead of recursing.
    """

    def __init__(self, scheme: ValueColorScheme, indent: int = 2, max_depth: int = 10) -> None:
        self._scheme = scheme
        self._indent = indent
        self._max_depth = max_depth

    @property
    def scheme(self) -> ValueColorScheme:
        return self._scheme

    def to_text(self, value: Any) -> Text:
        text = Text()
        self._render(value, text, 0, set())
        return text

    def pformat(self, value: Any, ansi: bool = True) -> str:
        """Render value to a string, with ANSI escapes only when ansi is True."""
        buffer = StringIO()
        console = Console(
            file=buffer,
            force_terminal=ansi,
            color_system="256" if ansi else None,
            no_color=False,
            force_jupyter=False,
            highlight=False,
        )
        console.print(self.to_text(value), end="", soft_wrap=True)
        return buffer.getvalue()

    def _append(self, text: Text, token: str, kind: ValueKind) -> None:
        text.append(token, style=self._scheme.style_for(kind))

    def _render(self, value: Any, text: Text, level: int, path: set[int]) -> None:
        if level > self._max_depth:
            text.append("...")
            return

        if value is None:
            self._append(text, "None", ValueKind.NULL)
        elif isinstance(value, bool):
            self._append(text, str(value), ValueKind.BOOLEAN)
        elif isinstance(value, Enum):
            self._append(text, f"{type(value).__name__}.{value.name}", ValueKind.STRUCT_NAME)
        elif isinstance(value, int):
            self._append(text, str(value), ValueKind.INTEGER)
        elif isinstance(value, (float, Decimal)):
            self._append(text, str(value), ValueKind.FLOAT)
        elif isinstance(value, str):
            self._render_string(value, text)
        elif isinstance(value, (datetime, date, time)):
            self._append(text, value.isoformat(), ValueKind.TIMESTAMP)
        elif _is_namedtuple(value):
            self._guarded(value, text, level, path, self._render_struct)
        elif isinstance(value, (list, tuple, set, frozenset, dict)):
            self._guarded(value, text, level, path, self._render_container)
        elif _is_struct(value):
            self._guarded(value, text, level, path, self._render_struct)
        else:
            text.append(repr(value))

    def _guarded(
        self,
        value: Any,
        text: Text,
        level: int,
        path: set[int],
        render: Callable[[Any, Text, int, set[int]], None],
    ) -> None:
        if id(value) in path:
            self._append(text, f"&{id(value):#x}", ValueKind.POINTER_ADDRESS)
            return
        path.add(id(value))
        try:
            render(value, text, level, path)
        finally:
            path.discard(id(value))

    def _render_string(self, value: str, text: Text) -> None:
        self._append(text, '"', ValueKind.STRING_QUOTATION)
        run: list[str] = []
        for char in value:
            escaped = ESCAPES.get(char)
            if escaped is None and not char.isprintable():
                escaped = repr(char)[1:-1]
            if escaped is None:
                run.append(char)
                continue
            if run:
                self._append(text, "".join(run), ValueKind.STRING)
                run = []
            self._append(text, escaped, ValueKind.ESCAPED_CHAR)
        if run:
            self._append(text, "".join(run), ValueKind.STRING)
        self._append(text, '"', ValueKind.STRING_QUOTATION)

    def _render_container(self, value: Any, text: Text, level: int, path: set[int]) -> None:
        base = next(kind for kind in BRACKETS if isinstance(value, kind))
        opening, closing = BRACKETS[base]

        text.append(f"{type(value).__name__}(")
        self._append(text, str(len(value)), ValueKind.CONTAINER_LENGTH)
        text.append(f"){opening}")
        if not value:
            text.append(closing)
            return

        pad = " " * (self._indent * (level + 1))
        if isinstance(value, dict):
            for key, item in value.items():
                text.append(f"\n{pad}")
                self._render(key, text, level + 1, path)
                text.append(": ")
                self._render(item, text, level + 1, path)
                text.append(",")
        else:
            for item in _ordered(value):
                text.append(f"\n{pad}")
                self._render(item, text, level + 1, path)
                text.append(",")
        text.append(f"\n{' ' * (self._indent * level)}{closing}")

    def _render_struct(self, value: Any, text: Text, level: int, path: set[int]) -> None:
        self._append(text, type(value).__name__, ValueKind.STRUCT_NAME)
        fields = _struct_fields(value)
        if not fields:
            text.append("{}")
            return

        text.append("{")
        pad = " " * (self._indent * (level + 1))
        for name, item in fields:
            text.append(f"\n{pad}")
            self._append(text, name, ValueKind.FIELD_NAME)
            text.append(": ")
            self._render(item, text, level + 1, path)
            text.append(",")
        text.append(f"\n{' ' * (self._indent * level)}}}")


def _ordered(items: Iterable[Any]) -> list[Any]:
    if isinstance(items, (set, frozenset)):
        return sorted(items, key=repr)
    return list(items)


def _is_struct(value: Any) -> bool:
    if isinstance(value, (type, BaseException)):
        return False
    if inspect.isroutine(value) or inspect.ismodule(value):
        return False
    if dataclasses.is_dataclass(value) or isinstance(value, BaseModel):
        return True
    return hasattr(value, "__dict__")


def _is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(value, "_fields")


def _struct_fields(value: Any) -> list[tuple[str, Any]]:
    if _is_namedtuple(value):
        return list(zip(value._fields, value))
    if dataclasses.is_dataclass(value):
        return [(field.name, getattr(value, field.name)) for field in dataclasses.fields(value)]
    if isinstance(value, BaseModel):
        return [(name, getattr(value, name)) for name in type(value).model_fields]
    return [(name, item) for name, item in vars(value).items() if not name.startswith("_")]
