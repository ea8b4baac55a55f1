"""Pydantic schemas for API."""

from datetime import date, datetime
from typing import Annotated

from pydantic import BaseModel, Field

from adhan_core.domain.models import Prayer


class CalculationRequest(BaseModel):
    """Hesaplama isteği şeması.

    Coordinate ranges and the date string are checked by the engine so that
    failures come back as structured ``{kind, message}`` errors.
    """

    latitude: float = Field(description="Enlem")
    longitude: float = Field(description="Boylam")
    date: str = Field(description="ISO-8601 tarih (YYYY-MM-DD)")
    method: str | None = Field(default=None, description="Hesaplama metodu")
    madhab: str | None = Field(default=None, description="shafi veya hanafi")
    high_latitude_rule: str | None = Field(default=None, description="Yüksek enlem kuralı")
    shafaq: str | None = Field(default=None, description="general, ahmer, abyad")
    rounding: str | None = Field(default=None, description="nearest, up, down, none")
    fajr_angle: float | None = Field(default=None, description="İmsak açısı")
    isha_angle: float | None = Field(default=None, description="Yatsı açısı")
    isha_interval: Annotated[int | None, Field(ge=0, description="Akşamdan sonra dakika")] = None
    maghrib_angle: float | None = Field(default=None, description="Akşam açısı")
    adjustments: dict[str, int] = Field(default_factory=dict, description="Vakit -> dakika")
    timezone: str | None = Field(default=None, description="IANA saat dilimi")


class RangeRequest(CalculationRequest):
    """Tarih aralığı isteği şeması."""

    end_date: str = Field(description="ISO-8601 bitiş tarihi (dahil)")


class CurrentPrayerRequest(CalculationRequest):
    """Mevcut vakit isteği şeması."""

    at: datetime | None = Field(default=None, description="Sorgu anı (varsayılan: şimdi)")


class PrayerTimesSchema(BaseModel):
    """Günlük namaz vakitleri şeması."""

    date: date
    date_formatted: str
    timezone: str
    method: str
    fajr: str
    sunrise: str
    dhuhr: str
    asr: str
    maghrib: str
    isha: str


class PrayerTimeSchema(BaseModel):
    """Tek namaz vakti şeması."""

    prayer: Prayer
    display_name: str
    time: str


class SunnahTimesSchema(BaseModel):
    """Gece vakitleri şeması."""

    middle_of_the_night: str
    last_third_of_the_night: str


class CurrentPrayerSchema(BaseModel):
    """Mevcut ve sıradaki vakit şeması."""

    current: str
    next: str


class QiblaSchema(BaseModel):
    """Kıble yönü şeması."""

    direction: float


class CoordinatesValidationSchema(BaseModel):
    """Koordinat doğrulama şeması."""

    valid: bool


class MethodSchema(BaseModel):
    """Hesaplama metodu şeması."""

    name: str
    display_name: str
    fajr_angle: float
    isha_angle: float
    isha_interval: int
    maghrib_angle: float | None
    method_adjustments: dict[str, int]
    rounding: str
    high_latitude_rule: str | None
    seasonal_twilight: bool
    night_fraction_latitude: float | None
    description: str


class LibraryInfoSchema(BaseModel):
    """Kütüphane bilgisi şeması."""

    version: str
    platform: str
    python_version: str
    started_at: datetime


class ErrorSchema(BaseModel):
    """Yapılandırılmış hata şeması."""

    kind: str
    message: str
