from typing import Annotated, List, Optional
from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from sort_translator.schema import Association, Transient, Unwrapped


# Account lives in its own repository, people only reference it
class Account(BaseModel):
    id: str = Field(..., description="Account identifier.")
    username: str = Field(..., description="Login name.")


# Name fields are inlined into the person's JSON ("first", "last")
class Name(BaseModel):
    first_name: str = Field(..., alias="first", description="Given name.")
    last_name: str = Field(..., alias="last", description="Family name.")


class Profile(BaseModel):
    full_name: str = Field(..., alias="displayName", description="Name shown to other users.")
    bio: Optional[str] = Field(None, description="Short self description.")


# camelCase naming strategy for every field
class Address(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    street_name: str = Field(..., description="Street and house number.")
    zip_code: str = Field(..., description="Postal code.")
    city: Optional[str] = Field(None, description="City name.")


class Person(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="Person identifier.")
    name: Annotated[Name, Unwrapped()]
    profile: Optional[Profile] = Field(None, alias="userProfile", description="Public profile.")
    address: Optional[Address] = Field(None, description="Postal address.")
    previous_addresses: List[Address] = Field(default_factory=list, description="Former addresses.")
    owner: Annotated[Optional[Account], Association()] = None
    birth_date: Optional[date] = Field(None, description="Date of birth.")
    tags: List[str] = Field(default_factory=list, description="Free-form labels.")
    password_hash: Optional[str] = Field(None, exclude=True)
    score: Annotated[float, Transient()] = 0.0
