"""API Routes."""

import platform
from typing import Annotated

from babel.dates import format_date
from fastapi import APIRouter, Depends

from adhan_core import __version__
from adhan_core.api.dependencies import AppState, get_app_state
from adhan_core.api.schemas import (
    CalculationRequest,
    CoordinatesValidationSchema,
    CurrentPrayerRequest,
    CurrentPrayerSchema,
    ErrorSchema,
    LibraryInfoSchema,
    MethodSchema,
    PrayerTimeSchema,
    PrayerTimesSchema,
    QiblaSchema,
    RangeRequest,
    SunnahTimesSchema,
)
from adhan_core.domain.methods import CalculationParameters, MethodParameters
from adhan_core.domain.models import CalculationDate, Coordinates, Prayer, PrayerTimes
from adhan_core.services.prayer_service import validate_coordinates

router = APIRouter(responses={422: {"model": ErrorSchema}, 500: {"model": ErrorSchema}})


def _prepare(
    body: CalculationRequest, state: AppState
) -> tuple[Coordinates, CalculationDate, CalculationParameters]:
    """İstek gövdesini motor girdilerine çevir."""
    coordinates = Coordinates(latitude=body.latitude, longitude=body.longitude)
    tz = state.timezone_resolver.resolve(coordinates, body.timezone)
    day = CalculationDate.parse(body.date, tz)
    params = state.prayer_service.parameters_for(
        body.method or state.config.default_method,
        madhab=body.madhab or state.config.default_madhab,
        high_latitude_rule=body.high_latitude_rule,
        shafaq=body.shafaq,
        rounding=body.rounding,
        fajr_angle=body.fajr_angle,
        isha_angle=body.isha_angle,
        isha_interval=body.isha_interval,
        maghrib_angle=body.maghrib_angle,
    )
    return coordinates, day, params


def _times_schema(times: PrayerTimes, day: CalculationDate, method: str, locale: str) -> PrayerTimesSchema:
    data = times.to_dict()
    return PrayerTimesSchema(
        date=times.date,
        date_formatted=format_date(times.date, "d MMMM yyyy, EEEE", locale=locale),
        timezone=str(day.tz),
        method=method,
        **data,
    )


def _method_schema(preset: MethodParameters) -> MethodSchema:
    return MethodSchema(**preset.to_dict())


# ============== Prayer Times ==============


@router.post("/prayer-times", response_model=PrayerTimesSchema)
async def calculate_prayer_times(
    body: CalculationRequest,
    state: Annotated[AppState, Depends(get_app_state)],
) -> PrayerTimesSchema:
    """Bir gün için namaz vakitlerini hesapla."""
    coordinates, day, params = _prepare(body, state)
    times = state.prayer_service.compute(coordinates, day, params, body.adjustments)
    return _times_schema(times, day, params.method.value, state.config.locale)


@router.post("/prayer-times/range", response_model=list[PrayerTimesSchema])
async def calculate_prayer_times_range(
    body: RangeRequest,
    state: Annotated[AppState, Depends(get_app_state)],
) -> list[PrayerTimesSchema]:
    """Tarih aralığı için namaz vakitlerini hesapla."""
    coordinates, start, params = _prepare(body, state)
    end = CalculationDate.parse(body.end_date, start.tz)
    results = state.prayer_service.compute_range(coordinates, start, end, params, body.adjustments)
    return [
        _times_schema(times, start, params.method.value, state.config.locale) for times in results
    ]


@router.post("/prayer-times/{prayer}", response_model=PrayerTimeSchema)
async def get_time_for_prayer(
    prayer: str,
    body: CalculationRequest,
    state: Annotated[AppState, Depends(get_app_state)],
) -> PrayerTimeSchema:
    """Tek bir vaktin anını getir."""
    target = Prayer.parse(prayer)
    coordinates, day, params = _prepare(body, state)
    instant = state.prayer_service.time_for_prayer(
        coordinates, day, params, target, body.adjustments
    )
    return PrayerTimeSchema(prayer=target, display_name=target.display_name, time=instant.isoformat())


@router.post("/sunnah-times", response_model=SunnahTimesSchema)
async def calculate_sunnah_times(
    body: CalculationRequest,
    state: Annotated[AppState, Depends(get_app_state)],
) -> SunnahTimesSchema:
    """Gece yarısı ve gecenin son üçte birini hesapla."""
    coordinates, day, params = _prepare(body, state)
    sunnah = state.prayer_service.sunnah_times(coordinates, day, params, body.adjustments)
    return SunnahTimesSchema(**sunnah.to_dict())


@router.post("/current-prayer", response_model=CurrentPrayerSchema)
async def get_current_prayer(
    body: CurrentPrayerRequest,
    state: Annotated[AppState, Depends(get_app_state)],
) -> CurrentPrayerSchema:
    """Verilen anda içinde bulunulan ve sıradaki vakti getir."""
    coordinates, day, params = _prepare(body, state)
    current, next_prayer = state.prayer_service.current_and_next(
        coordinates, day, params, body.at, body.adjustments
    )
    return CurrentPrayerSchema(
        current=current.value if current else "none",
        next=next_prayer.value if next_prayer else "none",
    )


# ============== Qibla & Coordinates ==============


@router.get("/qibla", response_model=QiblaSchema)
async def get_qibla(
    latitude: float,
    longitude: float,
    state: Annotated[AppState, Depends(get_app_state)],
) -> QiblaSchema:
    """Kıble yönünü getir."""
    direction = state.prayer_service.qibla(Coordinates(latitude=latitude, longitude=longitude))
    return QiblaSchema(direction=direction)


@router.get("/coordinates/validate", response_model=CoordinatesValidationSchema)
async def get_coordinates_validation(latitude: float, longitude: float) -> CoordinatesValidationSchema:
    """Koordinatları doğrula."""
    return CoordinatesValidationSchema(valid=validate_coordinates(latitude, longitude))


# ============== Methods & Info ==============


@router.get("/methods", response_model=list[MethodSchema])
async def get_methods(state: Annotated[AppState, Depends(get_app_state)]) -> list[MethodSchema]:
    """Tüm hesaplama metotlarını getir."""
    return [_method_schema(preset) for preset in state.prayer_service.methods()]


@router.get("/methods/{method}", response_model=MethodSchema)
async def get_method(
    method: str,
    state: Annotated[AppState, Depends(get_app_state)],
) -> MethodSchema:
    """Bir metodun hazır parametrelerini getir."""
    return _method_schema(state.prayer_service.method_parameters(method))


@router.get("/info", response_model=LibraryInfoSchema)
async def get_library_info(state: Annotated[AppState, Depends(get_app_state)]) -> LibraryInfoSchema:
    """Kütüphane sürümü ve platform bilgisi."""
    return LibraryInfoSchema(
        version=__version__,
        platform="python",
        python_version=platform.python_version(),
        started_at=state.started_at,
    )
