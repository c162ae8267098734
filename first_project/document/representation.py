"""
The three ways the walkthrough reads a document.

A document is fetched from the server once, as a plain dict. Each representation is a projection of that dict:
	- MAP: a BaseDocument, attributes accessed by name
	- RAW: the document encoded as BSON bytes, decoded lazily on access (bson.raw_bson.RawBSONDocument)
	- TREE: a tree of JsonNodes
All three hold the same logical content.
"""
from enum import StrEnum, auto
from typing import Any

import bson
from bson.errors import InvalidDocument
from bson.raw_bson import RawBSONDocument

from .base_document import BaseDocument, KEY
from .json_node import IntNode, ObjectNode, TextNode, value_to_node


class Representation(StrEnum):
	""" Describes the target schema a fetched document is decoded into. """
	MAP = auto()
	RAW = auto()
	TREE = auto()

	@property
	def label(self) -> str:
		return REPRESENTATION_LABELS[self]

REPRESENTATION_LABELS = {
	Representation.MAP: "attribute map",
	Representation.RAW: "raw BSON",
	Representation.TREE: "JSON tree",
}


def to_base_document(document: dict[str, Any]) -> BaseDocument:
	return BaseDocument.from_document(document)

def to_raw_bson(document: dict[str, Any]) -> RawBSONDocument:
	""" Encode the document as BSON and wrap the bytes without decoding them. Fields are decoded on access. """
	# bson.encode raises InvalidDocument for values BSON can't hold and OverflowError for ints beyond 64 bits
	try:
		data = bson.encode(document)
	except OverflowError as e:
		raise InvalidDocument(f"Document can't be encoded as BSON: {e}") from e
	return RawBSONDocument(data)

def to_json_node(document: dict[str, Any]) -> ObjectNode:
	node = value_to_node(document)
	if not isinstance(node, ObjectNode):
		raise ValueError(f"Expected the document to convert into an ObjectNode. Got {type(node).__name__}.")
	return node

def project(document: dict[str, Any], representation: Representation) -> BaseDocument | RawBSONDocument | ObjectNode:
	""" Decode a fetched document into the requested representation. """
	if representation is Representation.MAP:
		return to_base_document(document)
	elif representation is Representation.RAW:
		return to_raw_bson(document)
	elif representation is Representation.TREE:
		return to_json_node(document)
	else:
		raise ValueError(f"Unknown representation {representation}")


def describe(projection: Any, representation: Representation, attribute_names: list[str]) -> list[str]:
	""" Render the "Key: ..." and "Attribute x: ..." lines for a projection, reading each value through the projection's own accessors. """
	lines: list[str] = []

	if representation is Representation.MAP:
		assert isinstance(projection, BaseDocument)
		lines.append(f"Key: {projection.key}")
		for name in attribute_names:
			lines.append(f"Attribute {name}: {projection.get_attribute(name, None)}")

	elif representation is Representation.RAW:
		assert isinstance(projection, RawBSONDocument)
		lines.append(f"Key: {projection[KEY]}")
		for name in attribute_names:
			lines.append(f"Attribute {name}: {projection.get(name)}")

	elif representation is Representation.TREE:
		assert isinstance(projection, ObjectNode)
		lines.append(f"Key: {projection.get(KEY).text_value()}")
		for name in attribute_names:
			node = projection.get(name)
			if isinstance(node, TextNode):
				lines.append(f"Attribute {name}: {node.text_value()}")
			elif isinstance(node, IntNode):
				lines.append(f"Attribute {name}: {node.int_value()}")
			else:
				lines.append(f"Attribute {name}: {node.to_primitive()}")

	else:
		raise ValueError(f"Unknown representation {representation}")

	return lines
