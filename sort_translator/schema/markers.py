"""
Annotation markers describing persistence and serialization of model fields.

Markers are attached with ``typing.Annotated``::

    class Person(BaseModel):
        name: Annotated[Name, Unwrapped(prefix="name_")]
        owner: Annotated[Optional[Account], Association()]
        cached_score: Annotated[float, Transient()] = 0.0
"""

import types
from dataclasses import dataclass
from typing import Annotated, Any, List, Optional, Type, TypeVar, Union, get_args, get_origin

from pydantic.fields import FieldInfo

M = TypeVar("M")


@dataclass(frozen=True)
class Unwrapped:
    """
    The field's own fields are inlined into the parent's serialized form.

    ``prefix`` and ``suffix`` are added around each inlined field name.
    """

    prefix: str = ""
    suffix: str = ""
    enabled: bool = True

    def transform(self, name: str) -> str:
        return f"{self.prefix}{name}{self.suffix}"


@dataclass(frozen=True)
class Association:
    """The field is a relationship to another aggregate, not an embedded value."""


@dataclass(frozen=True)
class Transient:
    """The field is not persisted."""


def field_markers(field_info: FieldInfo) -> List[Any]:
    """
    Collect Annotated metadata for a field.

    Includes metadata nested inside Optional, e.g. ``Optional[Annotated[X, m]]``.
    """
    markers = list(field_info.metadata)
    annotation = field_info.annotation

    while annotation is not None:
        origin = get_origin(annotation)
        if origin is Annotated:
            args = get_args(annotation)
            markers.extend(args[1:])
            annotation = args[0]
        elif origin is Union or origin is types.UnionType:
            non_none = [arg for arg in get_args(annotation) if arg is not type(None)]
            annotation = non_none[0] if len(non_none) == 1 else None
        else:
            annotation = None

    return markers


def find_marker(field_info: FieldInfo, marker_type: Type[M]) -> Optional[M]:
    """Return the first marker of the given type, or None."""
    for marker in field_markers(field_info):
        if isinstance(marker, marker_type):
            return marker
    return None
