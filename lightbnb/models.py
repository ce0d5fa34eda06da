# lightbnb/models.py
from pydantic import BaseModel, ConfigDict, Field
from decimal import Decimal
from typing import Optional, Union

class SearchFilters(BaseModel):
    # unrecognized keys are dropped, never turned into predicates
    model_config = ConfigDict(extra="ignore")

    city: Optional[str] = None
    owner_id: Optional[Union[int, str]] = None  # opaque key
    minimum_price_per_night: Optional[Decimal] = None  # cents
    maximum_price_per_night: Optional[Decimal] = None  # cents
    minimum_rating: Optional[float] = None

class UserIn(BaseModel):
    name: str
    email: str
    password: str

class PropertyIn(BaseModel):
    owner_id: int
    title: str
    description: Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    cover_photo_url: Optional[str] = None
    cost_per_night: int = Field(ge=0)  # major units, as stored
    street: Optional[str] = None
    city: str
    province: Optional[str] = None
    post_code: Optional[str] = None
    country: Optional[str] = None
    parking_spaces: int = Field(default=0, ge=0)
    number_of_bathrooms: int = Field(default=0, ge=0)
    number_of_bedrooms: int = Field(default=0, ge=0)

class ReservationQuery(BaseModel):
    guest_id: int
    limit: int = Field(default=10, ge=1, le=500)
