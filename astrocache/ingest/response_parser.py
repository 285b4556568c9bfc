"""Decode provider responses into forecast results or structured API errors."""

import logging
from dataclasses import dataclass

from pydantic import ValidationError as SchemaError

from astrocache.errors import MalformedErrorPayload, MalformedPayload
from astrocache.models.astro import ApiError, AstroData
from astrocache.models.provider import (
    ErrorEnvelope,
    ForecastDay,
    ForecastPayload,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastResult:
    name: str
    region: str
    country: str
    localtime: str
    timezone_id: str
    date: str
    astro: AstroData


@dataclass(frozen=True)
class ProviderFailure:
    api_error: ApiError
    status_code: int


ParseResult = ForecastResult | ProviderFailure


def parse_response(status_code: int, body: bytes | str) -> ParseResult:
    """Parse a provider response.

    Non-200 bodies, and 200 bodies carrying ``"success": false``, are
    decoded as the error envelope. Raises MalformedPayload or
    MalformedErrorPayload when the body does not match its schema.
    """
    if status_code != 200 or _looks_like_error(body):
        return ProviderFailure(
            api_error=_parse_error(body), status_code=status_code
        )
    return _parse_forecast(body)


def _parse_forecast(body: bytes | str) -> ForecastResult:
    try:
        payload = ForecastPayload.model_validate_json(body)
    except SchemaError as e:
        raise MalformedPayload(
            f"failed to unmarshal forecast response: {e.error_count()} error(s)"
        ) from e

    if not payload.forecast:
        raise MalformedPayload("forecast response contains no forecast dates")

    forecast_date, day = _select_forecast(payload.forecast)
    loc = payload.location
    a = day.astro
    return ForecastResult(
        name=loc.name,
        region=loc.region,
        country=loc.country,
        localtime=loc.localtime,
        timezone_id=loc.timezone_id,
        date=forecast_date,
        astro=AstroData(
            sunrise=a.sunrise,
            sunset=a.sunset,
            moonrise=a.moonrise,
            moonset=a.moonset,
            moon_phase=a.moon_phase,
            moon_illumination=a.moon_illumination,
        ),
    )


def _select_forecast(forecast: dict[str, ForecastDay]) -> tuple[str, ForecastDay]:
    """Pick the earliest date when the provider sends more than one."""
    dates = sorted(forecast)
    if len(dates) > 1:
        logger.warning(
            "Forecast contains %d dates (%s); using %s",
            len(dates), ", ".join(dates), dates[0],
        )
    return dates[0], forecast[dates[0]]


def _parse_error(body: bytes | str) -> ApiError:
    try:
        envelope = ErrorEnvelope.model_validate_json(body)
    except SchemaError as e:
        raise MalformedErrorPayload(
            f"failed to unmarshal error response: {e.error_count()} error(s)"
        ) from e
    err = envelope.error
    return ApiError(code=err.code, type=err.type, info=err.info)


def _looks_like_error(body: bytes | str) -> bool:
    # Weatherstack sometimes reports errors with HTTP 200
    try:
        envelope = ErrorEnvelope.model_validate_json(body)
    except SchemaError:
        return False
    return envelope.success is False
