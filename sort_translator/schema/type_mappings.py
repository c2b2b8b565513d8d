"""
Type mapping utilities for deriving persistent property types from annotations.
"""

import inspect
import types
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Optional, Tuple, Union, get_args, get_origin
from uuid import UUID

from pydantic import BaseModel


class TypeMapper:
    """Maps field annotations to declared and element types."""

    # Types that are stored as plain values and never get metadata
    SIMPLE_TYPES = (
        str,
        bytes,
        bool,
        int,
        float,
        Decimal,
        datetime,
        date,
        time,
        timedelta,
        UUID,
        Enum,
    )

    # Origins treated as collections of a single element type
    COLLECTION_TYPES = (list, set, frozenset, tuple)

    @classmethod
    def strip_optional(cls, annotation: Any) -> Any:
        """
        Remove Optional and Annotated wrappers from an annotation.

        Args:
            annotation: Field annotation

        Returns:
            The wrapped type, or the annotation itself for real unions
        """
        while True:
            origin = get_origin(annotation)
            if origin is Annotated:
                annotation = get_args(annotation)[0]
            elif origin is Union or origin is types.UnionType:
                non_none = [arg for arg in get_args(annotation) if arg is not type(None)]
                if len(non_none) != 1:
                    return annotation
                annotation = non_none[0]
            else:
                return annotation

    @classmethod
    def resolve(cls, annotation: Any) -> Tuple[Any, Optional[Any]]:
        """
        Resolve the declared type and collection element type of an annotation.

        Args:
            annotation: Field annotation

        Returns:
            Tuple of (declared type, element type). Collections are reported
            with their raw type (e.g. list) and the element type; everything
            else has an element type of None.
        """
        declared = cls.strip_optional(annotation)
        origin = get_origin(declared)

        if origin in cls.COLLECTION_TYPES:
            args = [arg for arg in get_args(declared) if arg is not Ellipsis]
            element = cls.strip_optional(args[0]) if args else Any
            return origin, element

        if declared in cls.COLLECTION_TYPES:
            return declared, Any

        if origin is not None and origin is not Union and origin is not types.UnionType:
            # Parameterized non-collection types such as Dict[str, X]
            return origin, None

        return declared, None

    @classmethod
    def is_model_type(cls, type_: Any) -> bool:
        """Check whether a type is a pydantic model that can carry metadata."""
        return inspect.isclass(type_) and issubclass(type_, BaseModel)

    @classmethod
    def is_simple_type(cls, type_: Any) -> bool:
        """Check whether a type is stored as a plain value."""
        return inspect.isclass(type_) and issubclass(type_, cls.SIMPLE_TYPES)
