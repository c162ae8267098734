class DocumentNotFoundError(Exception):
    """Exception raised when a document key does not exist in its collection.
    The driver returns None for a missing key on reads; we raise this instead so that reads fail like updates and deletes do. """

    def __init__(self, collection_name: str, key: str) -> None:
        self.collection_name = collection_name
        self.key = key
        self.message = f"Document '{key}' not found in collection '{collection_name}'."
        super().__init__(self.message)
