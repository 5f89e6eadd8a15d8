"""Typed views of the submitted form fields.

Create forms fill every column; update forms leave a field as ``None`` when
it was absent or empty so the stored value is kept.
"""
import re
from dataclasses import dataclass, asdict
from typing import Optional

from .errors import NotFound, ValidationError

_INTEGER = re.compile(r'[+-]?[0-9]+')
# columns are stored as signed 64-bit integers
INT_MIN, INT_MAX = -2 ** 63, 2 ** 63 - 1


def parse_int(raw, message):
    if raw is None or not _INTEGER.fullmatch(raw):
        raise ValidationError(message)
    value = int(raw)
    if not INT_MIN <= value <= INT_MAX:
        raise ValidationError(message)
    return value


def parse_optional_int(fields, name, message):
    raw = _optional(fields, name)
    return parse_int(raw, message) if raw is not None else None


def parse_id(raw, entity):
    """Path ids that are not integers can never match a row."""
    try:
        return parse_int(raw, f"{entity} not found")
    except ValidationError as e:
        raise NotFound(e.message)


def _optional(fields, name):
    value = fields.get(name)
    return value if value else None


@dataclass
class UserForm:
    name: Optional[str] = None
    email: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[int] = None

    @classmethod
    def for_create(cls, fields):
        return cls(
            name=fields.get('name', ''),
            email=fields.get('email', ''),
            gender=fields.get('gender', ''),
            age=parse_int(fields.get('age'), "invalid age format"),
        )

    @classmethod
    def for_update(cls, fields):
        return cls(
            name=_optional(fields, 'name'),
            email=_optional(fields, 'email'),
            gender=_optional(fields, 'gender'),
            age=parse_optional_int(fields, 'age', "invalid age format"),
        )

    def changes(self):
        return {field: value for field, value in asdict(self).items() if value is not None}


@dataclass
class ProductForm:
    user_id: Optional[int] = None
    name: Optional[str] = None
    price: Optional[int] = None

    @classmethod
    def for_create(cls, fields, user_id):
        return cls(
            user_id=user_id,
            name=fields.get('name', ''),
            price=parse_int(fields.get('price'), "invalid price format"),
        )

    @classmethod
    def for_update(cls, fields):
        return cls(
            user_id=parse_optional_int(fields, 'user_id', "invalid user ID format"),
            name=_optional(fields, 'name'),
            price=parse_optional_int(fields, 'price', "invalid price format"),
        )

    def changes(self):
        return {field: value for field, value in asdict(self).items() if value is not None}
