"""Solar time for one day and observer, and conversion of hours to instants."""

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from adhan_core.domain.errors import AngleUnattainable, InvalidDate
from adhan_core.domain.models import Coordinates, PrayerAdjustments, Prayer, Rounding
from adhan_core.services.astronomy import (
    SolarCoordinates,
    approximate_transit,
    corrected_hour_angle,
    corrected_transit,
    julian_day,
)

# Standart gün doğumu/batımı yüksekliği (kırılma + güneş yarıçapı)
SOLAR_ALTITUDE = -50.0 / 60.0


@dataclass(frozen=True)
class SolarTime:
    """Bir gün ve gözlemci için güneş geometrisi (UTC saat cinsinden)."""

    observer: Coordinates
    solar: SolarCoordinates
    previous_solar: SolarCoordinates
    next_solar: SolarCoordinates
    approximate_transit: float
    transit: float

    @classmethod
    def for_julian_day(cls, jd: float, coordinates: Coordinates) -> "SolarTime":
        """Julian gün (0h UT) için hesapla."""
        solar = SolarCoordinates.for_julian_day(jd)
        previous_solar = SolarCoordinates.for_julian_day(jd - 1)
        next_solar = SolarCoordinates.for_julian_day(jd + 1)
        m0 = approximate_transit(
            coordinates.longitude, solar.apparent_sidereal_time, solar.right_ascension
        )
        transit = corrected_transit(
            m0,
            coordinates.longitude,
            solar.apparent_sidereal_time,
            solar.right_ascension,
            previous_solar.right_ascension,
            next_solar.right_ascension,
        )
        return cls(
            observer=coordinates,
            solar=solar,
            previous_solar=previous_solar,
            next_solar=next_solar,
            approximate_transit=m0,
            transit=transit,
        )

    @classmethod
    def for_date(cls, day: date, coordinates: Coordinates) -> "SolarTime":
        """Takvim günü için hesapla."""
        return cls.for_julian_day(julian_day(day.year, day.month, day.day), coordinates)

    def hour_angle(self, angle: float, after_transit: bool) -> float:
        """Güneşin `angle` yüksekliğinde olduğu UTC saat (AngleUnattainable fırlatabilir)."""
        hours = corrected_hour_angle(
            self.approximate_transit,
            angle,
            self.observer,
            after_transit,
            self.solar.apparent_sidereal_time,
            self.solar.right_ascension,
            self.previous_solar.right_ascension,
            self.next_solar.right_ascension,
            self.solar.declination,
            self.previous_solar.declination,
            self.next_solar.declination,
        )
        # Düzeltilmiş saat istenen tarafta kalmalı; öğle yüksekliğine yakın açılarda taşabilir
        if (hours <= self.transit) if after_transit else (hours >= self.transit):
            side = "sonrasında" if after_transit else "öncesinde"
            raise AngleUnattainable(angle, f"Güneş {angle:.2f}° yüksekliğe öğle {side} ulaşmıyor")
        return hours

    def sunrise(self) -> float:
        return self.hour_angle(SOLAR_ALTITUDE, after_transit=False)

    def sunset(self) -> float:
        return self.hour_angle(SOLAR_ALTITUDE, after_transit=True)

    def afternoon(self, shadow_length: float) -> float:
        """Gölge boyu katsayısına göre ikindi anı, UTC saat."""
        tangent = abs(self.observer.latitude - self.solar.declination)
        inverse = shadow_length + math.tan(math.radians(tangent))
        angle = math.degrees(math.atan(1.0 / inverse))
        return self.hour_angle(angle, after_transit=True)


def hours_to_instant(day: date, hours: float) -> datetime:
    """Günün 0h UTC'sinden itibaren saat değerini saniyeye yuvarlanmış ana çevir."""
    try:
        midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
        return midnight + timedelta(seconds=math.floor(hours * 3600))
    except OverflowError as e:
        raise InvalidDate(f"Vakit desteklenen tarih aralığının dışında: {day}") from e


def round_to_minute(instant: datetime, rounding: Rounding) -> datetime:
    """Anı seçilen yönteme göre dakikaya yuvarla."""
    if rounding is Rounding.NONE:
        return instant
    base = instant.replace(second=0, microsecond=0)
    has_seconds = instant.second > 0 or instant.microsecond > 0
    if rounding is Rounding.NEAREST and instant.second >= 30:
        return base + timedelta(minutes=1)
    if rounding is Rounding.UP and has_seconds:
        return base + timedelta(minutes=1)
    return base


def apply_adjustment(
    instant: datetime,
    prayer: Prayer,
    adjustments: PrayerAdjustments,
    rounding: Rounding,
) -> datetime:
    """Dakika düzeltmesini ekle ve yuvarla."""
    try:
        adjusted = instant + timedelta(minutes=adjustments.get_offset(prayer))
    except OverflowError as e:
        raise InvalidDate(f"Düzeltilmiş vakit desteklenen aralığın dışında: {prayer.value}") from e
    return round_to_minute(adjusted, rounding)
