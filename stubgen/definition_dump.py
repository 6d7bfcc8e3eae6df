from __future__ import annotations

from dataclasses import fields, is_dataclass
from enum import Enum
import json
from typing import Any, Iterable

from stubgen.stub_model import StubDefinition


def definition_to_debug_data(node: Any, *, include_sources: bool = False) -> Any:
    if node is None:
        return None

    if isinstance(node, Enum):
        return node.value

    if isinstance(node, (str, int, bool)):
        return node

    if isinstance(node, (list, tuple)):
        return [definition_to_debug_data(item, include_sources=include_sources) for item in node]

    if is_dataclass(node):
        result: dict[str, Any] = {"node": type(node).__name__}
        for field in fields(node):
            if not include_sources and field.name == "source":
                continue
            result[field.name] = definition_to_debug_data(getattr(node, field.name), include_sources=include_sources)
        return result

    raise TypeError(f"Unsupported definition debug serialization value: {type(node).__name__}")


def definitions_to_debug_json(definitions: Iterable[StubDefinition], *, include_sources: bool = False) -> str:
    data = [definition_to_debug_data(definition, include_sources=include_sources) for definition in definitions]
    return json.dumps(data, indent=2, sort_keys=True)
