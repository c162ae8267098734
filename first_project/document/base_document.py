from dataclasses import dataclass, field
from typing import Any, Self

from .document_key import DocumentKey
from ..utilities.undefined import UNDEFINED, Undefined


KEY = "_key"
ID = "_id"
REVISION = "_rev"
SYSTEM_ATTRIBUTES = (KEY, ID, REVISION)


@dataclass
class BaseDocument:
	""" A schemaless ArangoDB document: the system attributes plus a free-form map of attributes.

	Documents built locally usually only set a key; _id and _rev are assigned by the server and are filled in when a document is read back (see from_document).
	"""
	key: DocumentKey | None = None
	id: str | None = None
	revision: str | None = None
	properties: dict[str, Any] = field(default_factory=dict)

	def __post_init__(self) -> None:
		if self.key is not None and not isinstance(self.key, DocumentKey):
			self.key = DocumentKey(self.key)

	# region: Attributes
	def add_attribute(self, name: str, value: Any) -> Self:
		""" Set an attribute. Returns self so attributes can be chained. """
		if name in SYSTEM_ATTRIBUTES:
			raise ValueError(f"'{name}' is a system attribute. Use the key, id and revision fields instead.")
		self.properties[name] = value
		return self

	def update_attribute(self, name: str, value: Any) -> Self:
		""" Set an attribute that must already exist. """
		if name not in self.properties:
			raise KeyError(f"Document {self.key} has no attribute '{name}'")
		self.properties[name] = value
		return self

	def remove_attribute(self, name: str) -> Any:
		return self.properties.pop(name)

	def get_attribute(self, name: str, default: Any | Undefined = UNDEFINED) -> Any:
		""" Return the attribute value. Raises KeyError for a missing attribute unless a default is given (None is a valid default). """
		if name in self.properties:
			return self.properties[name]
		if isinstance(default, Undefined):
			raise KeyError(f"Document {self.key} has no attribute '{name}'")
		return default
	# endregion

	# region: BaseDocument <> driver document
	# NOTE: The driver speaks plain dicts. to_document and from_document are the only places where system attributes are mapped.
	def to_document(self) -> dict[str, Any]:
		document: dict[str, Any] = dict(self.properties)
		if self.key is not None:
			document[KEY] = str(self.key)
		if self.id is not None:
			document[ID] = self.id
		if self.revision is not None:
			document[REVISION] = self.revision
		return document

	@classmethod
	def from_document(cls, document: Any) -> Self:
		if not isinstance(document, dict):
			raise TypeError(f"Expected a document dict, got {type(document).__name__}")

		key = document.get(KEY)
		return cls(
			key=DocumentKey(key) if key is not None else None,
			id=document.get(ID),
			revision=document.get(REVISION),
			properties={ name: value for name, value in document.items() if name not in SYSTEM_ATTRIBUTES }
		)
	# endregion

	def with_metadata(self, metadata: dict[str, Any]) -> Self:
		""" Return a copy of self carrying the _key, _id and _rev the server returned for a write. """
		key = metadata.get(KEY, self.key)
		return type(self)(
			key=DocumentKey(key) if key is not None else None,
			id=metadata.get(ID, self.id),
			revision=metadata.get(REVISION, self.revision),
			properties=dict(self.properties)
		)
