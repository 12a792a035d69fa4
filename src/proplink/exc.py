class ProplinkError(Exception):
    pass


class InvalidOperation(ProplinkError, TypeError):
    def __init__(self, message=None, *, obj=None, field=None):
        super().__init__(message)
        self.obj = obj
        self.field = field

    @property
    def message(self):
        return self.args[0]


class ConstructionFailure(ProplinkError):
    def __init__(self, message=None, *, exc=None, factory=None):
        if message is None:
            name = getattr(factory, "__qualname__", repr(factory))
            message = f"Could not construct {name}: {type(exc).__name__}: {exc}"
        super().__init__(message)
        self.exc = exc
        self.factory = factory

    @property
    def message(self):
        return self.args[0]


class KeyNotFound(ProplinkError, KeyError):
    def __init__(self, key, message=None):
        if message is None:
            message = f"No member is contained under key '{key}'"
        super().__init__(message)
        self.key = key

    @property
    def message(self):
        return self.args[0]

    def __str__(self):
        # KeyError.__str__ would show the repr of the message
        return self.message
