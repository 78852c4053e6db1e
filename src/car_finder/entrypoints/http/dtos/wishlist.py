from pydantic import BaseModel

from car_finder.entrypoints.http.dtos.catalog import CarResponseDTO


class WishlistResponseDTO(BaseModel):
    cars: list[CarResponseDTO]
    count: int


class WishlistToggleResponseDTO(BaseModel):
    car_id: int | str
    wishlisted: bool
    cars: list[CarResponseDTO]
    count: int
