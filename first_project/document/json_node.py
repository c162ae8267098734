"""
Tree-structured view of a JSON document.

Every value in the document becomes a node. Containers (ObjectNode, ArrayNode) are navigated with get(), which never raises:
asking for an absent field or index returns the MISSING node, so chained lookups like node.get("a").get("b") are always safe.
Leaf accessors mirror that: text_value() is None and int_value() is 0 on nodes that don't hold text or a number.
"""
from collections.abc import Iterator
from typing import Any


class JsonNode:
	""" Base class of all nodes. """

	def get(self, name_or_index: str | int) -> 'JsonNode':
		return MISSING

	def text_value(self) -> str | None:
		return None

	def int_value(self) -> int:
		return 0

	def is_missing(self) -> bool:
		return False

	def is_container(self) -> bool:
		return False

	def __iter__(self) -> Iterator['JsonNode']:
		return iter(())

	def __len__(self) -> int:
		return 0

	def to_primitive(self) -> Any:
		raise NotImplementedError

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, JsonNode):
			return NotImplemented
		return type(self) is type(other) and self.to_primitive() == other.to_primitive()

	__hash__ = None  # type: ignore[assignment]


class ValueNode(JsonNode):
	""" A leaf node holding a single primitive value. """

	def __init__(self, value: Any) -> None:
		self.value = value

	def to_primitive(self) -> Any:
		return self.value

	def __repr__(self) -> str:
		return f"{type(self).__name__}({self.value!r})"


class TextNode(ValueNode):
	def text_value(self) -> str | None:
		return self.value


class IntNode(ValueNode):
	def int_value(self) -> int:
		return self.value


class FloatNode(ValueNode):
	def int_value(self) -> int:
		return int(self.value)


class BooleanNode(ValueNode):
	pass


class NullNode(ValueNode):
	def __init__(self) -> None:
		super().__init__(None)


class MissingNode(JsonNode):
	""" Returned for absent fields and indexes. There is only one. """
	_instance = None

	def __new__(cls):
		if cls._instance is None:
			cls._instance = super().__new__(cls)
		return cls._instance

	def is_missing(self) -> bool:
		return True

	def to_primitive(self) -> Any:
		return None

	def __repr__(self) -> str:
		return "MISSING"

	def __bool__(self) -> bool:
		return False

MISSING = MissingNode()


class ObjectNode(JsonNode):
	""" A JSON object. Field order follows the source document. """

	def __init__(self, children: dict[str, JsonNode] | None = None) -> None:
		self.children: dict[str, JsonNode] = children if children is not None else {}

	def get(self, name_or_index: str | int) -> JsonNode:
		if not isinstance(name_or_index, str):
			return MISSING
		return self.children.get(name_or_index, MISSING)

	def field_names(self) -> list[str]:
		return list(self.children)

	def is_container(self) -> bool:
		return True

	def __iter__(self) -> Iterator[JsonNode]:
		return iter(self.children.values())

	def __len__(self) -> int:
		return len(self.children)

	def __contains__(self, name: object) -> bool:
		return name in self.children

	def to_primitive(self) -> dict[str, Any]:
		return { name: child.to_primitive() for name, child in self.children.items() }

	def __repr__(self) -> str:
		return f"ObjectNode({self.children!r})"


class ArrayNode(JsonNode):
	def __init__(self, elements: list[JsonNode] | None = None) -> None:
		self.elements: list[JsonNode] = elements if elements is not None else []

	def get(self, name_or_index: str | int) -> JsonNode:
		if isinstance(name_or_index, bool) or not isinstance(name_or_index, int):
			return MISSING
		if not 0 <= name_or_index < len(self.elements):
			return MISSING
		return self.elements[name_or_index]

	def is_container(self) -> bool:
		return True

	def __iter__(self) -> Iterator[JsonNode]:
		return iter(self.elements)

	def __len__(self) -> int:
		return len(self.elements)

	def to_primitive(self) -> list[Any]:
		return [element.to_primitive() for element in self.elements]

	def __repr__(self) -> str:
		return f"ArrayNode({self.elements!r})"


def value_to_node(value: Any, path: str = "$") -> JsonNode:
	""" Converts a decoded JSON value into a tree of nodes. Raises ValueError for values JSON can't hold. """

	# bool must be checked before int, as bool is a subclass of int
	if value is None:
		return NullNode()
	elif isinstance(value, bool):
		return BooleanNode(value)
	elif isinstance(value, int):
		return IntNode(value)
	elif isinstance(value, float):
		return FloatNode(value)
	elif isinstance(value, str):
		return TextNode(value)
	elif isinstance(value, dict):
		children: dict[str, JsonNode] = {}
		for name, child in value.items():
			if not isinstance(name, str):
				raise ValueError(f"Object keys must be strings. Got {type(name).__name__} at {path}.")
			children[name] = value_to_node(child, f"{path}.{name}")
		return ObjectNode(children)
	elif isinstance(value, (list, tuple)):
		return ArrayNode([value_to_node(element, f"{path}[{idx}]") for idx, element in enumerate(value)])
	else:
		raise ValueError(f"Unable to convert value of type {type(value).__name__} at {path} into a JSON node.")
