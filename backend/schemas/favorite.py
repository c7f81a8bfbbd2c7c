from pydantic import BaseModel, Field


class FavoriteCreate(BaseModel):
    place_id: int = Field(alias="placeId")

    class Config:
        populate_by_name = True


class MessageResponse(BaseModel):
    message: str
