from pydantic import BaseModel, Field
from typing import List, Literal


class Hotel(BaseModel):
    name: str
    description: str
    price_range: str = Field(alias="priceRange")

    class Config:
        populate_by_name = True


class HotelSuggestions(BaseModel):
    """Result of a hotel lookup: either the model's answer or the canned list."""
    hotels: List[Hotel]
    source: Literal["upstream", "fallback"]

    @property
    def from_fallback(self) -> bool:
        return self.source == "fallback"
