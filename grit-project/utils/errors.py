# What it does: Defines the exceptions raised by the grit library code
# How it does: Every failure is a subclass of GritError so the command layer can catch one type, print it and exit


class GritError(Exception):
    """Base class for every error grit reports to the user."""


class RepositoryIOError(GritError):
    # Reading, writing or creating something on disk failed
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ObjectNotFoundError(GritError):
    pass


class CorruptObjectError(GritError):
    pass


class TypeMismatchError(CorruptObjectError):
    def __init__(self, oid, expected, actual):
        self.oid = oid
        self.expected = expected
        self.actual = actual
        super().__init__(f"object {oid} is a {actual}, expected {expected}")


class InvalidCommitFormatError(CorruptObjectError):
    pass


class InvalidPathError(GritError):
    pass
