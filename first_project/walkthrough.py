"""
A walkthrough of the ArangoDB Python driver.

Runs, top to bottom:
	connect, create a database, create a collection, insert a document, read it three ways, update it, delete it,
	bulk insert ten documents, select them with AQL, remove them with AQL, close the connection.

Every step that talks to the server produces a StepResult. A failing step is reported on stderr and the walkthrough moves on,
except for connecting and the bulk insert, whose errors end the run. The connection is closed either way.
"""
import os
import sys
from collections.abc import Callable
from typing import Any

from arango import ArangoClient
from arango.exceptions import ArangoError
from bson.errors import BSONError

from .document.arango_db import ArangoConfig, arango_connection, open_db, open_system_db
from .document.base_document import BaseDocument
from .document.document_api import (
	create_collection,
	create_database,
	delete_document,
	get_document,
	insert_document,
	query_documents,
	update_document,
)
from .document.representation import Representation, describe, project
from .utilities.document_not_found_error import DocumentNotFoundError
from .utilities.logger import configure_logging, logger
from .utilities.result import StepResult, WalkthroughReport


DATABASE_NAME = "mydb"
COLLECTION_NAME = "firstCollection"
DOCUMENT_KEY = "myKey"
BULK_DOCUMENT_COUNT = 10
BULK_NAME = "Homer"
SEPARATOR = "-----------"

SELECT_QUERY = "FOR t IN @@collection FILTER t.name == @name RETURN t"
REMOVE_QUERY = "FOR t IN @@collection FILTER t.name == @name REMOVE t IN @@collection LET removed = OLD RETURN removed"

DATABASE_ERRORS: tuple[type[Exception], ...] = (ArangoError, BSONError, DocumentNotFoundError)
""" Errors a guarded step reports and recovers from. Anything else propagates. """


def run_step(report: WalkthroughReport, action: str, func: Callable[[], Any], *, guarded: bool = True) -> StepResult:
	""" Run one step and record its result. Unguarded steps let database errors propagate. """
	logger.debug(f"Running step: {action}")

	if not guarded:
		return report.add(StepResult(action, True, value=func()))

	try:
		value = func()
	except DATABASE_ERRORS as e:
		logger.info(f"Step '{action}' failed: {e!r}")
		return fail_step(report, action, str(e))
	return report.add(StepResult(action, True, value=value))

def fail_step(report: WalkthroughReport, action: str, message: str) -> StepResult:
	print(f"Failed to {action}: {message}", file=sys.stderr)
	return report.add(StepResult(action, False, message))

def print_lines(lines: list[str]) -> None:
	for line in lines:
		print(line)


def run_walkthrough(client: ArangoClient, config: ArangoConfig, database_name: str = DATABASE_NAME, collection_name: str = COLLECTION_NAME) -> WalkthroughReport:
	report = WalkthroughReport()

	# Connect. There is nothing to walk through without a server, so this step is not guarded.
	def connect():
		sys_db = open_system_db(client, config)
		print(f"Connected to {config.url}")
		return sys_db
	sys_db = run_step(report, "connect", connect, guarded=False).value

	# Database
	def create_db():
		create_database(sys_db, database_name)
		print(f"Database created: {database_name}")
	run_step(report, f"create database {database_name}", create_db)
	db = open_db(client, config, database_name)

	# Collection
	def create_coll():
		name = create_collection(db, collection_name)
		print(f"Collection created: {name}")
		return name
	run_step(report, f"create collection {collection_name}", create_coll)
	collection = db.collection(collection_name)

	# Create a document
	my_object = BaseDocument(key=DOCUMENT_KEY).add_attribute("a", "Foo").add_attribute("b", 42)
	def insert():
		inserted = insert_document(collection, my_object)
		print("Document created")
		return inserted
	run_step(report, f"create document {DOCUMENT_KEY}", insert)

	# Read the document once, then decode it three ways
	fetched = run_step(report, f"get document {DOCUMENT_KEY}", lambda: get_document(collection, DOCUMENT_KEY))
	for representation in Representation:
		action = f"read document {DOCUMENT_KEY} as {representation.label}"
		if not fetched.success:
			fail_step(report, action, f"document was not fetched; {fetched.message}")
		else:
			def read(representation=representation):
				projection = project(fetched.value, representation)
				print_lines(describe(projection, representation, ["a", "b"]))
				return projection
			run_step(report, action, read)
		print(SEPARATOR)

	# Update the document. The update merges c into the stored attributes.
	run_step(report, f"update document {DOCUMENT_KEY}", lambda: update_document(collection, DOCUMENT_KEY, {"c": "Bar"}))

	def read_updated():
		updated = project(get_document(collection, DOCUMENT_KEY), Representation.MAP)
		print_lines(describe(updated, Representation.MAP, ["a", "b", "c"]))
		return updated
	run_step(report, f"get updated document {DOCUMENT_KEY}", read_updated)

	# Delete the document
	def delete():
		delete_document(collection, DOCUMENT_KEY)
		print(f"Document deleted: {DOCUMENT_KEY}")
	run_step(report, f"delete document {DOCUMENT_KEY}", delete)

	# Bulk insert, one document at a time. Not guarded.
	def bulk_insert():
		inserted = []
		for i in range(BULK_DOCUMENT_COUNT):
			value = BaseDocument(key=str(i)).add_attribute("name", BULK_NAME)
			inserted.append(insert_document(collection, value))
		print(f"Documents created: {len(inserted)}")
		return inserted
	run_step(report, "create documents", bulk_insert, guarded=False)

	bind_vars = { "@collection": collection_name, "name": BULK_NAME }

	# Select with AQL
	def select():
		keys = []
		for document in query_documents(db, SELECT_QUERY, bind_vars):
			print(f"Key: {document.key}")
			keys.append(document.key)
		return keys
	run_step(report, "execute select query", select)

	# Remove with AQL. The query returns the removed documents as they were before removal.
	def remove():
		keys = []
		for document in query_documents(db, REMOVE_QUERY, bind_vars):
			print(f"Removed document {document.key}")
			keys.append(document.key)
		return keys
	run_step(report, "execute remove query", remove)

	return report


def main() -> int:
	configure_logging(os.environ.get("FIRST_PROJECT_LOG_LEVEL") or "WARNING")
	config = ArangoConfig.from_env()

	with arango_connection(config) as client:
		report = run_walkthrough(client, config)

	print(report.summary())
	return 0
