from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .errors import ToolArgumentsError


_JSON_TYPES: dict[str, tuple[type, ...]] = {
    "string": (str,),
    "integer": (int,),
    "boolean": (bool,),
    "number": (int, float),
    "object": (dict,),
    "array": (list,),
}


def _type_matches(value: Any, json_type: str) -> bool:
    expected = _JSON_TYPES.get(json_type)
    if expected is None:
        return True
    # bool is an int subclass; JSON keeps them apart.
    if isinstance(value, bool) and json_type in {"integer", "number"}:
        return False
    return isinstance(value, expected)


@dataclass(frozen=True, slots=True)
class ToolDescriptor:
    """A catalog entry: tool name, description and JSON input schema."""

    name: str
    description: str
    input_schema: Mapping[str, Any]

    @property
    def properties(self) -> Mapping[str, Mapping[str, Any]]:
        return self.input_schema.get("properties", {})

    @property
    def required(self) -> tuple[str, ...]:
        return tuple(self.input_schema.get("required", ()))

    def validate(self, arguments: Mapping[str, Any]) -> None:
        """Check required presence, primitive types and enums.

        Unknown fields are ignored. A null optional field counts as absent.

        Raises:
            ToolArgumentsError: On the first violation found.
        """

        for name in self.required:
            if arguments.get(name) is None:
                raise ToolArgumentsError(self.name, "missing required field", field=name)

        for name, schema in self.properties.items():
            value = arguments.get(name)
            if value is None:
                continue
            json_type = schema.get("type")
            if isinstance(json_type, str) and not _type_matches(value, json_type):
                raise ToolArgumentsError(self.name, f"expected {json_type}", field=name)
            allowed = schema.get("enum")
            if allowed is not None and value not in allowed:
                raise ToolArgumentsError(self.name, f"must be one of {list(allowed)}", field=name)


@dataclass(frozen=True, slots=True)
class ToolCall:
    name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TextContent:
    text: str
    type: str = "text"


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Uniform envelope returned from every tool call."""

    content: tuple[TextContent, ...]
    is_error: bool = False

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)
