"""
Schema declaration interface.

SchemaComposer collects the interface and object type declarations a
customization pass produces and renders them as GraphQL SDL. It never
builds an executable schema; the declarations are handed to whatever
consumes the SDL.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

from contentful_schema.reporting import DuplicateTypeError

logger = logging.getLogger(__name__)

NODE_INTERFACE_SDL = """interface Node {
  id: ID!
}"""

OBJECT = "type"
INTERFACE = "interface"


@dataclass
class TypeDefinition:
    kind: str
    name: str
    fields: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    interfaces: List[str] = field(default_factory=list)
    extensions: Dict[str, Any] = field(default_factory=dict)

    def to_sdl(self) -> str:
        header = f"{self.kind} {self.name}"
        if self.interfaces:
            header += " implements " + " & ".join(self.interfaces)
        for name, args in self.extensions.items():
            header += " " + _render_directive(name, args)

        lines = [header + " {"]
        for field_name, field_config in self.fields.items():
            lines.append(f"  {field_name}: {field_config['type']}")
        lines.append("}")
        return "\n".join(lines)


def _render_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return json.dumps(value)


def _render_directive(name: str, args: Any) -> str:
    if not args or not isinstance(args, dict):
        return f"@{name}"
    rendered = ", ".join(f"{key}: {_render_value(value)}" for key, value in args.items())
    return f"@{name}({rendered})"


def _normalize_fields(fields: Dict[str, Union[str, Dict[str, Any]]]) -> Dict[str, Dict[str, Any]]:
    # Accept the shorthand {"id": "ID!"} as well as {"id": {"type": "ID!"}}
    return {name: config if isinstance(config, dict) else {"type": config} for name, config in fields.items()}


class SchemaComposer:
    def __init__(self):
        self.type_definitions: List[TypeDefinition] = []

    def build_object_type(
        self,
        name: str,
        fields: Dict[str, Union[str, Dict[str, Any]]],
        interfaces: Optional[List[str]] = None,
        extensions: Optional[Dict[str, Any]] = None,
    ) -> TypeDefinition:
        return TypeDefinition(OBJECT, name, _normalize_fields(fields), list(interfaces or []), dict(extensions or {}))

    def build_interface_type(
        self,
        name: str,
        fields: Dict[str, Union[str, Dict[str, Any]]],
        interfaces: Optional[List[str]] = None,
        extensions: Optional[Dict[str, Any]] = None,
    ) -> TypeDefinition:
        return TypeDefinition(INTERFACE, name, _normalize_fields(fields), list(interfaces or []), dict(extensions or {}))

    def create_types(self, types: Union[TypeDefinition, Iterable[TypeDefinition]]) -> None:
        """
        Register type definitions.

        Raises:
            DuplicateTypeError: A name is already declared or repeats within ``types``.
                Nothing from the batch is registered.
        """
        if isinstance(types, TypeDefinition):
            types = [types]
        types = list(types)

        seen = set(self.type_names)
        for type_definition in types:
            if type_definition.name in seen:
                logger.error(f"Type {type_definition.name} is declared more than once")
                raise DuplicateTypeError(type_definition.name)
            seen.add(type_definition.name)

        self.type_definitions.extend(types)

    def get_type(self, name: str) -> Optional[TypeDefinition]:
        for type_definition in self.type_definitions:
            if type_definition.name == name:
                return type_definition
        return None

    @property
    def type_names(self) -> List[str]:
        return [t.name for t in self.type_definitions]

    def to_sdl(self) -> str:
        blocks = [NODE_INTERFACE_SDL] + [t.to_sdl() for t in self.type_definitions]
        return "\n\n".join(blocks) + "\n"
