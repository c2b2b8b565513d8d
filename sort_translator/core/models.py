"""
Shared data models for the sort translator.
"""

from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Direction(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_string(cls, value: str) -> "Direction":
        """
        Parse a direction case-insensitively.

        Raises:
            ValueError: If the value is neither 'asc' nor 'desc'
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                f"Invalid value '{value}' for orders given; Has to be either 'desc' or 'asc' (case insensitive)"
            ) from None

    @classmethod
    def from_optional_string(cls, value: Optional[str]) -> Optional["Direction"]:
        """Parse a direction, returning None instead of raising."""
        if value is None:
            return None
        try:
            return cls.from_string(value)
        except ValueError:
            return None


class NullHandling(str, Enum):
    """Where null values end up in the ordering."""

    NATIVE = "native"
    NULLS_FIRST = "nulls_first"
    NULLS_LAST = "nulls_last"


class Order(BaseModel):
    """A single sort clause: property path plus ordering flags."""

    model_config = ConfigDict(frozen=True)

    property: str
    direction: Direction = Direction.ASC
    null_handling: NullHandling = NullHandling.NATIVE
    ignore_case: bool = False

    @field_validator("property")
    @classmethod
    def validate_property(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Property must not be None or empty")
        return value

    @classmethod
    def asc(cls, property: str) -> "Order":
        return cls(property=property, direction=Direction.ASC)

    @classmethod
    def desc(cls, property: str) -> "Order":
        return cls(property=property, direction=Direction.DESC)

    @property
    def is_ascending(self) -> bool:
        return self.direction is Direction.ASC

    def with_property(self, property: str) -> "Order":
        """Return a copy pointing at another property, keeping all flags."""
        return Order(
            property=property,
            direction=self.direction,
            null_handling=self.null_handling,
            ignore_case=self.ignore_case,
        )

    def ignoring_case(self) -> "Order":
        """Return a case-insensitive copy of this order."""
        return self.model_copy(update={"ignore_case": True})


class Sort(BaseModel):
    """
    Ordered sequence of sort clauses.

    Order within the sequence is significant. The absence of any sort is
    represented by None rather than an empty Sort.
    """

    model_config = ConfigDict(frozen=True)

    orders: Tuple[Order, ...] = Field(default_factory=tuple)

    @classmethod
    def by(cls, *orders: Order) -> "Sort":
        return cls(orders=tuple(orders))

    @classmethod
    def by_properties(cls, direction: Direction, *properties: str) -> "Sort":
        return cls(orders=tuple(Order(property=p, direction=direction) for p in properties))

    def __iter__(self) -> Iterator[Order]:  # type: ignore[override]
        return iter(self.orders)

    def __len__(self) -> int:
        return len(self.orders)

    def __bool__(self) -> bool:
        return bool(self.orders)


class PersistentProperty(BaseModel):
    """A declared persistent property of a modeled type."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    type: Any  # declared type; raw collection type for collections
    element_type: Any = None
    is_association: bool = False

    @property
    def is_collection(self) -> bool:
        return self.element_type is not None

    @property
    def actual_type(self) -> Any:
        """Element type for collections, the declared type otherwise."""
        return self.element_type if self.element_type is not None else self.type


class PersistentEntity(BaseModel):
    """Metadata of a modeled type: its persistent properties by internal name."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: Any
    properties: Dict[str, PersistentProperty] = Field(default_factory=dict)

    @property
    def name(self) -> str:
        return getattr(self.type, "__name__", str(self.type))

    def get_persistent_property(self, name: str) -> Optional[PersistentProperty]:
        return self.properties.get(name)

    def __iter__(self) -> Iterator[PersistentProperty]:  # type: ignore[override]
        return iter(self.properties.values())


class TranslatorConfig(BaseModel):
    """Configuration for sort parsing and translation."""

    sort_parameter: str = "sort"
    property_delimiter: str = ","
    by_alias: bool = True
    base_path: str = ""
    log_level: str = "INFO"
