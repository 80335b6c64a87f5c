from dataclasses import dataclass
from string import Formatter
from typing import Any, Callable, Optional
from urllib.parse import quote

from mcp.types import Tool

from productplan_mcp.client import ProductPlanClient

Arguments = dict[str, Any]
PathBuilder = Callable[[Arguments], str]
BodyBuilder = Callable[[Arguments], dict[str, Any]]


class MissingArgumentError(ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing required argument: {name}")


@dataclass(frozen=True)
class Endpoint:
    """One tool and the single HTTP call it maps to."""

    tool: Tool
    method: str
    path: PathBuilder
    body: Optional[BodyBuilder] = None
    transform: Optional[Callable[[Any], Any]] = None

    @property
    def name(self) -> str:
        return self.tool.name

    async def call(self, client: ProductPlanClient, arguments: Arguments) -> Any:
        path = self.path(arguments)
        body = self.body(arguments) if self.body else None

        result = await client.request(self.method, path, body)

        if self.transform:
            return self.transform(result)
        return result


def path(template: str) -> PathBuilder:
    """Build a path from a template like ``/roadmaps/{roadmap_id}/bars``.

    Each placeholder is filled from the argument of the same name.
    """
    fields = [field for _, field, _, _ in Formatter().parse(template) if field]

    def build(arguments: Arguments) -> str:
        values = {}
        for field in fields:
            value = arguments.get(field)
            if value is None or value == "":
                raise MissingArgumentError(field)
            values[field] = quote(str(value), safe="")
        return template.format(**values)

    return build


def fields(*names: str) -> BodyBuilder:
    """Body with every listed field the caller supplied, sent verbatim."""

    def build(arguments: Arguments) -> dict[str, Any]:
        return {name: arguments[name] for name in names if name in arguments}

    return build


def partial_body(*names: str) -> BodyBuilder:
    """Body for partial updates.

    A field is sent only when it is present and truthy, so omitting it leaves
    the remote value unchanged. Empty strings count as omitted too.
    """

    def build(arguments: Arguments) -> dict[str, Any]:
        return {name: arguments[name] for name in names if arguments.get(name)}

    return build


def string_param(description: str) -> dict[str, str]:
    return {"type": "string", "description": description}


def input_schema(
    properties: Optional[dict[str, dict]] = None,
    required: Optional[list[str]] = None
) -> dict[str, Any]:
    schema: dict[str, Any] = {
        "type": "object",
        "properties": properties or {},
    }
    if required:
        schema["required"] = required
    return schema
