from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PriceLevel(str, Enum):
    UNSPECIFIED = "PRICE_LEVEL_UNSPECIFIED"
    FREE = "PRICE_LEVEL_FREE"
    INEXPENSIVE = "PRICE_LEVEL_INEXPENSIVE"
    MODERATE = "PRICE_LEVEL_MODERATE"
    EXPENSIVE = "PRICE_LEVEL_EXPENSIVE"
    VERY_EXPENSIVE = "PRICE_LEVEL_VERY_EXPENSIVE"

    def dollar_sign_count(self) -> int:
        return _DOLLAR_SIGNS[self]


_DOLLAR_SIGNS = {
    PriceLevel.UNSPECIFIED: 0,
    PriceLevel.FREE: 0,
    PriceLevel.INEXPENSIVE: 1,
    PriceLevel.MODERATE: 2,
    PriceLevel.EXPENSIVE: 3,
    PriceLevel.VERY_EXPENSIVE: 4,
}


class ApiModel(BaseModel):
    # Places API는 camelCase, 모르는 필드는 무시
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LocalizedText(ApiModel):
    text: str = ""
    language_code: Optional[str] = Field(default=None, alias="languageCode")


class LatLng(ApiModel):
    latitude: float
    longitude: float


class OpeningHours(ApiModel):
    open_now: Optional[bool] = Field(default=None, alias="openNow")
    weekday_descriptions: List[str] = Field(default_factory=list, alias="weekdayDescriptions")


class Place(ApiModel):
    id: str
    display_name: Optional[LocalizedText] = Field(default=None, alias="displayName")
    formatted_address: Optional[str] = Field(default=None, alias="formattedAddress")
    location: Optional[LatLng] = None
    rating: Optional[float] = None
    user_rating_count: int = Field(default=0, alias="userRatingCount")
    price_level: PriceLevel = Field(default=PriceLevel.UNSPECIFIED, alias="priceLevel")
    types: List[str] = Field(default_factory=list)
    primary_type_display_name: Optional[LocalizedText] = Field(default=None, alias="primaryTypeDisplayName")
    current_opening_hours: Optional[OpeningHours] = Field(default=None, alias="currentOpeningHours")
    regular_opening_hours: Optional[OpeningHours] = Field(default=None, alias="regularOpeningHours")
    utc_offset_minutes: Optional[int] = Field(default=None, alias="utcOffsetMinutes")

    @property
    def name(self) -> str:
        return self.display_name.text if self.display_name else ""

    @property
    def opening_hours(self) -> Optional[OpeningHours]:
        """
        오늘 기준 영업시간(currentOpeningHours)을 우선, 없으면 regularOpeningHours
        """
        return self.current_opening_hours or self.regular_opening_hours
