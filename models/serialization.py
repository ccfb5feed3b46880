# -*- coding: utf-8 -*-
"""
Dict conversion shared by every BEP model.

Attributes are snake_case in Python and camelCase in JSON. A field whose
JSON key does not follow the mechanical conversion declares it through
``field(metadata={"json": "softwareIT"})``.
"""

from dataclasses import fields, is_dataclass
from datetime import datetime
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, List, Union, get_args, get_origin, get_type_hints

from services.exceptions import ValidationException
from utils.datetime_utils import from_isoformat, to_isoformat
from utils.helpers import snake_to_camel


def json_key(f) -> str:
    """JSON key for a dataclass field."""
    return f.metadata.get("json", snake_to_camel(f.name))


@lru_cache(maxsize=None)
def _field_types(cls) -> Dict[str, Any]:
    return get_type_hints(cls)


def _encode(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return to_isoformat(value)
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    return value


def _decode(field_type: Any, raw: Any, field_name: str) -> Any:
    if raw is None:
        return None

    origin = get_origin(field_type)
    if origin is Union:
        # Optional[X]
        inner = [arg for arg in get_args(field_type) if arg is not type(None)]
        return _decode(inner[0], raw, field_name) if inner else raw

    if origin in (list, List):
        (item_type,) = get_args(field_type) or (Any,)
        return [_decode(item_type, item, field_name) for item in raw]

    if isinstance(field_type, type):
        if issubclass(field_type, Enum):
            try:
                return field_type(raw)
            except ValueError:
                allowed = [member.value for member in field_type]
                raise ValidationException(
                    f"Invalid {field_type.__name__} value: {raw!r}",
                    field=field_name,
                    errors=[f"expected one of {allowed}"],
                )
        if is_dataclass(field_type):
            return field_type.from_dict(raw)
        if field_type is datetime:
            return from_isoformat(raw)

    return raw


def coerce_value(field_type: Any, value: Any, field_name: str) -> Any:
    """
    Bring ``value`` to ``field_type``.

    Values that already have the declared type pass through unchanged;
    JSON-style values (dicts, enum strings, ISO dates) are decoded the same
    way ``from_dict`` decodes them.

    Raises:
        ValidationException: for an unknown enum value or a value of the
            wrong shape (e.g. a string where a record is expected)
        ValueError: for an unparseable date
    """
    if value is None or field_type is Any:
        return value

    origin = get_origin(field_type)
    if origin is Union:
        inner = [arg for arg in get_args(field_type) if arg is not type(None)]
        return coerce_value(inner[0], value, field_name) if inner else value

    if origin in (list, List):
        if not isinstance(value, (list, tuple)):
            raise ValidationException(f"Expected a list for {field_name}", field=field_name)
        (item_type,) = get_args(field_type) or (Any,)
        return [coerce_value(item_type, item, field_name) for item in value]

    if isinstance(field_type, type):
        if isinstance(value, field_type):
            return value
        if is_dataclass(field_type) and not isinstance(value, dict):
            raise ValidationException(
                f"Expected {field_type.__name__} for {field_name}, got {type(value).__name__}",
                field=field_name,
            )

    return _decode(field_type, value, field_name)


def field_types(cls) -> Dict[str, Any]:
    """Resolved type hints of a dataclass, cached per class."""
    return _field_types(cls)


class SerializableMixin:
    """to_dict / from_dict for dataclasses with camelCase JSON keys."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {json_key(f): _encode(getattr(self, f.name)) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """
        Create an instance from a dictionary.

        Keys may be camelCase (JSON) or snake_case. Unknown keys are ignored;
        missing keys fall back to the field defaults.

        Raises:
            ValidationException: if an enumerated field holds an unknown value
        """
        types = _field_types(cls)
        kwargs = {}
        for f in fields(cls):
            key = json_key(f)
            if key in data:
                raw = data[key]
            elif f.name in data:
                raw = data[f.name]
            else:
                continue
            kwargs[f.name] = _decode(types[f.name], raw, f.name)
        return cls(**kwargs)
