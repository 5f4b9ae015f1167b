"""
Exceptions raised when a lens is built against a field or record
that cannot support it.
"""
from collections.abc import Iterable


class LensError(Exception):
    """
    Base class for lens construction errors.
    """


class UnknownFieldError(LensError, AttributeError):
    """
    Raised when a lens names a field the record type does not declare.
    """
    def __init__(self, owner: type, field_name: str, known: Iterable[str]):
        self.owner = owner
        self.field_name = field_name
        self.known = tuple(known)
        super().__init__(
            f"{owner.__name__} has no field '{field_name}' "
            f"(fields: {', '.join(self.known) or 'none'})")


class UnsupportedRecordError(LensError, TypeError):
    """
    Raised when the owner is not a record type a lens can copy,
    or the field cannot be passed to its constructor.
    """
