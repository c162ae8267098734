class SetupError(Exception):
    """Exception raised for configuration errors, such as a malformed ARANGO_URL."""
    
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)
