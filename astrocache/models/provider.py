"""Pydantic schemas for the weather provider's JSON payloads."""

from pydantic import BaseModel, Field


class AstroBlock(BaseModel):
    model_config = {"strict": True}

    sunrise: str
    sunset: str
    moonrise: str
    moonset: str
    moon_phase: str
    moon_illumination: int = Field(ge=0, le=100)


class ForecastDay(BaseModel):
    model_config = {"strict": True}

    astro: AstroBlock
    date: str | None = None
    date_epoch: int | None = None
    mintemp: int | None = None
    maxtemp: int | None = None
    avgtemp: int | None = None
    totalsnow: int | None = None
    sunhour: float | None = None
    uv_index: int | None = None


class ProviderLocation(BaseModel):
    model_config = {"strict": True}

    name: str
    country: str = ""
    region: str = ""
    localtime: str
    timezone_id: str


class ForecastPayload(BaseModel):
    model_config = {"strict": True}

    location: ProviderLocation
    forecast: dict[str, ForecastDay]


class ErrorDetail(BaseModel):
    model_config = {"strict": True}

    code: int
    type: str
    info: str = ""


class ErrorEnvelope(BaseModel):
    model_config = {"strict": True}

    success: bool = False
    error: ErrorDetail
