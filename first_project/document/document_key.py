import re

from ..utilities.validation_error import ValidationError


KEY_PATTERN = re.compile(r"^[a-zA-Z0-9_\-:.@()+,=;$!*'%]+$")
MAX_KEY_LENGTH = 254

class DocumentKey(str):
	""" The _key of an ArangoDB document. Unique within its collection.
	Keys are validated on construction, so a DocumentKey can always be sent to the server as is. """
	def __new__(cls, key: str | int):
		if isinstance(key, int) and not isinstance(key, bool):
			key = str(key)
		cls._validate(key)
		instance = super().__new__(cls, key)
		return instance

	@staticmethod
	def _validate(key) -> None:
		if not isinstance(key, str):
			raise ValidationError(f"Document key must be a string, got {type(key).__name__}.")
		if not key:
			raise ValidationError("Document key must not be empty.")
		if len(key) > MAX_KEY_LENGTH:
			raise ValidationError(f"Document key is {len(key)} characters long. The maximum is {MAX_KEY_LENGTH}.")
		if not KEY_PATTERN.match(key):
			raise ValidationError(f"Document key '{key}' contains characters that are not allowed in a document key.")
