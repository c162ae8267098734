class ValidationError(Exception):
    """Exception raised when a value cannot be used as part of a document.
    NOTE: Messages in these errors name the offending value so they can be printed as is. """
    
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)
