"""
Field discovery and shallow copying for the record kinds a lens can
focus on: dataclasses, NamedTuples and pydantic models.
"""
import dataclasses
from dataclasses import MISSING, fields, is_dataclass, replace
from typing import Any, get_type_hints

from pydantic import BaseModel

from .errors import UnknownFieldError, UnsupportedRecordError


def _is_namedtuple(owner: type) -> bool:
    return issubclass(owner, tuple) and hasattr(owner, "_fields")


def field_names(owner: type) -> tuple[str, ...]:
    """
    Names of the fields declared by a record type, in declaration order.
    """
    if not isinstance(owner, type):
        raise UnsupportedRecordError(f"expected a record class, got {owner!r}")
    if issubclass(owner, BaseModel):
        return tuple(owner.model_fields)
    if is_dataclass(owner):
        return tuple(f.name for f in fields(owner))
    if _is_namedtuple(owner):
        return tuple(owner._fields)
    raise UnsupportedRecordError(
        f"{owner.__name__} is not a dataclass, NamedTuple or pydantic model")


def required_initvars(owner: type) -> tuple[str, ...]:
    """
    InitVar pseudo-fields without a default. replace() cannot rebuild a
    dataclass that has any, whichever field is being replaced.
    """
    if not is_dataclass(owner):
        return ()
    return tuple(
        f.name for f in owner.__dataclass_fields__.values()
        if f._field_type is dataclasses._FIELD_INITVAR  # pylint: disable=W0212
        and f.default is MISSING
    )


def is_replaceable(owner: type, field_name: str) -> bool:
    """
    Whether a copy with this field replaced can be built.
    Dataclass fields declared with init=False cannot be passed to replace(),
    and no field can be replaced while a required InitVar exists.
    """
    if is_dataclass(owner):
        if required_initvars(owner):
            return False
        return next(f.init for f in fields(owner) if f.name == field_name)
    return True


def check_field(owner: type, field_name: str) -> None:
    """
    Raise unless `field_name` is a replaceable field of `owner`.
    """
    known = field_names(owner)
    if field_name not in known:
        raise UnknownFieldError(owner, field_name, known)
    initvars = required_initvars(owner)
    if initvars:
        raise UnsupportedRecordError(
            f"{owner.__name__} cannot be copied: InitVar "
            f"{', '.join(initvars)} has no default")
    if not is_replaceable(owner, field_name):
        raise UnsupportedRecordError(
            f"{owner.__name__}.{field_name} is declared with init=False")


def field_type(owner: type, field_name: str) -> Any:
    """
    Declared type of a field, used to walk dotted paths.
    """
    check_field(owner, field_name)
    if issubclass(owner, BaseModel):
        return owner.model_fields[field_name].annotation
    try:
        return get_type_hints(owner)[field_name]
    except NameError as ex:
        raise UnsupportedRecordError(
            f"cannot resolve the type of {owner.__name__}.{field_name}: {ex}"
        ) from ex


def replace_field[R](record: R, field_name: str, value: Any) -> R:
    """
    Shallow copy of `record` with one field replaced.
    Sibling values are carried over as-is; `record` is left untouched.
    """
    match record:
        case BaseModel():
            return record.model_copy(update={field_name: value})
        case tuple() if hasattr(record, "_replace"):
            return record._replace(**{field_name: value})  # pylint: disable=W0212
        case _:
            return replace(record, **{field_name: value})
