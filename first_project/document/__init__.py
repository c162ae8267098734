"""
Document module for ArangoDB document operations.

This module provides functionality for:
- Connecting to an ArangoDB server
- Document CRUD operations and AQL queries
- Reading a fetched document as an attribute map, raw BSON or a JSON tree
"""

from .arango_db import ArangoConfig, arango_connection, create_arango_client, open_db, open_system_db
from .document_key import DocumentKey
from .base_document import BaseDocument
from .document_api import create_database, create_collection, insert_document, get_document, update_document, delete_document, query_documents
from .representation import Representation, project, describe
from .json_node import JsonNode, ObjectNode, ArrayNode, MISSING, value_to_node
