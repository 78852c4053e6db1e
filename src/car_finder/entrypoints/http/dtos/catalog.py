from pydantic import BaseModel, Field

# Non-negative decimal, or empty for a cleared price input
PRICE_BOUND_PATTERN = r"^(\d+(\.\d+)?)?$"


class CarResponseDTO(BaseModel):
    id: int | str
    brand: str
    name: str
    year: int | None = None
    color: str | None = None
    mileage: int | float | None = None
    price: float | None = None
    fuel: str | None = None
    transmission: str | None = None
    engine: str | None = None
    horsepower: int | float | None = None
    features: list[str] = Field(default_factory=list)
    owners: int | None = None
    image: str
    seats: str
    wishlisted: bool = False


class CarsBrowseQueryDTO(BaseModel):
    """Query parameters for browsing the catalog."""

    brand: str | None = Field(
        default=None,
        description="Filter by brand (case-insensitive substring match)",
        examples=["toy"],
    )
    fuel: str | None = Field(
        default=None,
        description="Filter by fuel type (case-insensitive exact match)",
        examples=["Gasoline"],
    )
    seats: str | None = Field(
        default=None,
        description="Filter by seats (exact text match against the seats value)",
        examples=["5 (est.)"],
    )
    min_price: str | None = Field(
        default=None,
        description="Minimum price (inclusive); empty means no bound",
        examples=["15000"],
        pattern=PRICE_BOUND_PATTERN,
    )
    max_price: str | None = Field(
        default=None,
        description="Maximum price (inclusive); empty means no bound",
        examples=["30000"],
        pattern=PRICE_BOUND_PATTERN,
    )
    search: str = Field(
        default="",
        description="Free-text search on the model name (case-insensitive substring)",
        examples=["civic"],
    )
    sort: str | None = Field(
        default=None,
        description="Sort key: none, price_asc, price_desc (also low, high)",
        examples=["price_asc"],
    )
    page: int = Field(
        default=1,
        description="1-based page index",
        examples=[1],
        ge=1,
    )
    page_size: int | None = Field(
        default=None,
        description="Cars per page (server default when omitted)",
        examples=[10],
        ge=1,
        le=200,
    )


class CatalogPageResponseDTO(BaseModel):
    status: str
    error: str | None = None
    cars: list[CarResponseDTO]
    page: int
    page_size: int
    page_count: int
    total: int


class SessionResponseDTO(BaseModel):
    status: str
    error: str | None = None
    catalog_size: int
    dark_mode: bool
