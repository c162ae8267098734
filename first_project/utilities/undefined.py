class Undefined:
    """ Utilize this singleton when you need to disambiguate between an attribute which is set to None vs. an attribute which has not been set at all.
    NOTE: This is currently used in:
        - BaseDocument.get_attribute() defaults
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNDEFINED"

    def __bool__(self):
        return False

UNDEFINED = Undefined()
