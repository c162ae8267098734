from collections.abc import Iterator
from typing import Any
import time

from arango.collection import StandardCollection
from arango.database import StandardDatabase

from .base_document import BaseDocument, KEY
from .document_key import DocumentKey
from ..utilities.document_not_found_error import DocumentNotFoundError
from ..utilities.logger import logger


# Administration
def create_database(sys_db: StandardDatabase, name: str) -> str:
	""" Create a database. The driver raises DatabaseCreateError if it already exists or the name is invalid. """
	sys_db.create_database(name)
	return name

def create_collection(db: StandardDatabase, name: str) -> str:
	""" Create a collection and return the name the server assigned to it. """
	collection = db.create_collection(name)
	return collection.name


# DB Document Methods
def insert_document(collection: StandardCollection, document: BaseDocument) -> BaseDocument:
	""" Insert the document. Returns a copy carrying the _id and _rev the server assigned. """
	if not isinstance(document, BaseDocument):
		raise TypeError(f"Expected BaseDocument type, but got {type(document).__name__}")

	metadata = collection.insert(document.to_document())
	return document.with_metadata(metadata)

def get_document(collection: StandardCollection, key: str) -> dict[str, Any]:
	""" Fetch the document stored under key as a plain dict. Raises DocumentNotFoundError if there is none. """
	start_time = time.time()

	document = collection.get(str(DocumentKey(key)))

	logger.debug(f"Database Usage Logging: Retrieved document '{key}' from '{collection.name}' in {(time.time() - start_time):.3f} seconds")

	if document is None:
		raise DocumentNotFoundError(collection.name, key)
	return document

def update_document(collection: StandardCollection, key: str, partial: dict[str, Any]) -> None:
	""" Merge the attributes in partial into the stored document. Attributes not named in partial are kept. """
	if KEY in partial and partial[KEY] != key:
		raise ValueError(f"Update for document '{key}' carries a different _key '{partial[KEY]}'.")

	# merge=True also merges nested objects instead of replacing them
	collection.update({ **partial, KEY: str(DocumentKey(key)) }, merge=True, keep_none=True)

def delete_document(collection: StandardCollection, key: str) -> None:
	""" Delete the document. The driver raises DocumentDeleteError if no document has this key. """
	collection.delete(str(DocumentKey(key)), ignore_missing=False)


# Queries
def query_documents(db: StandardDatabase, query: str, bind_vars: dict[str, Any] | None = None) -> Iterator[BaseDocument]:
	""" Execute an AQL query and yield each result as a BaseDocument. The cursor is read lazily and only once.
	If the caller stops early or reading fails, the server-side cursor is released. """
	start_time = time.time()

	cursor = db.aql.execute(query, bind_vars=bind_vars or {})

	count = 0
	try:
		for document in cursor:
			count += 1
			yield BaseDocument.from_document(document)
	finally:
		# Cursors that fit in a single batch have no server-side id
		if getattr(cursor, "id", None) is not None:
			cursor.close(ignore_missing=True)

	logger.debug(f"Database Usage Logging: Read {count} documents for query: {query} in {(time.time() - start_time):.3f} seconds")
