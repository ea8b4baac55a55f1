"""Prayer time calculation service."""

import logging
from datetime import date, datetime, timedelta, timezone
from functools import cache

from adhan_core.domain.errors import (
    AngleUnattainable,
    InternalInconsistency,
    InvalidCoordinates,
    InvalidDate,
    InvalidParameter,
    TimeUnavailable,
)
from adhan_core.domain.methods import (
    DEFAULT_REGISTRY,
    CalculationParameters,
    MethodParameters,
    MethodRegistry,
)
from adhan_core.domain.models import (
    CalculationDate,
    Coordinates,
    Prayer,
    PrayerAdjustments,
    PrayerTimes,
    Rounding,
    SunnahTimes,
    is_valid_coordinates,
)
from adhan_core.services.astronomy import julian_day, qibla_direction
from adhan_core.services.high_latitude import HighLatitudeResolver, Night
from adhan_core.services.ports import (
    AdjustmentsSpec,
    DateSpec,
    MethodSpec,
    PrayerTimeCalculatorPort,
)
from adhan_core.services.solar_time import (
    SOLAR_ALTITUDE,
    SolarTime,
    apply_adjustment,
    hours_to_instant,
    round_to_minute,
)

logger = logging.getLogger(__name__)

MAX_RANGE_DAYS = 366


def validate_coordinates(latitude: float, longitude: float) -> bool:
    """Koordinatlar geçerli mi? Hiçbir zaman hata fırlatmaz."""
    return is_valid_coordinates(latitude, longitude)


class PrayerService(PrayerTimeCalculatorPort):
    """Namaz vakti hesaplama servisi.

    Holds nothing but a reference to the read-only method registry, so a single
    instance can be shared between threads and requests.
    """

    def __init__(self, registry: MethodRegistry = DEFAULT_REGISTRY) -> None:
        """
        Initialize prayer service.

        Args:
            registry: Hesaplama metotlarının kayıt defteri
        """
        self._registry = registry

    @property
    def registry(self) -> MethodRegistry:
        """Metot kayıt defteri."""
        return self._registry

    # ============== Methods ==============

    def methods(self) -> list[MethodParameters]:
        """Tüm hesaplama metotları."""
        return self._registry.all()

    def method_parameters(self, identifier: str) -> MethodParameters:
        """Metot kimliğinden hazır parametreler."""
        return self._registry.get_method(identifier)

    def parameters_for(self, method: MethodSpec, **overrides) -> CalculationParameters:
        """Metot ve kullanıcı seçimlerinden hesaplama parametreleri oluştur.

        Accepted overrides: madhab, high_latitude_rule, shafaq, rounding,
        fajr_angle, isha_angle, isha_interval, maghrib_angle. None values keep
        the preset's value.
        """
        if isinstance(method, CalculationParameters):
            return method.with_overrides(**overrides)
        return self._registry.parameters(method, **overrides)

    # ============== Prayer times ==============

    def compute(
        self,
        coordinates: Coordinates,
        day: DateSpec,
        method: MethodSpec,
        adjustments: AdjustmentsSpec = None,
    ) -> PrayerTimes:
        """Belirtilen gün için namaz vakitlerini hesapla."""
        coordinates = self._validate_coordinates(coordinates)
        calculation_date = self._validate_date(day)
        params = self._validate_parameters(self.parameters_for(method))
        manual = PrayerAdjustments.from_mapping(adjustments)
        return self._calculate(coordinates, calculation_date, params, manual)

    def compute_range(
        self,
        coordinates: Coordinates,
        start: DateSpec,
        end: DateSpec,
        method: MethodSpec,
        adjustments: AdjustmentsSpec = None,
    ) -> list[PrayerTimes]:
        """Başlangıç ve bitiş dahil her gün için vakitleri hesapla."""
        coordinates = self._validate_coordinates(coordinates)
        first = self._validate_date(start)
        last = self._validate_date(end)
        params = self._validate_parameters(self.parameters_for(method))
        manual = PrayerAdjustments.from_mapping(adjustments)

        days = (last.calendar_date - first.calendar_date).days + 1
        if days < 1:
            raise InvalidDate(f"Bitiş tarihi başlangıçtan önce: {first.calendar_date} > {last.calendar_date}")
        if days > MAX_RANGE_DAYS:
            raise InvalidDate(f"Tarih aralığı en fazla {MAX_RANGE_DAYS} gün olabilir: {days}")

        results = []
        for offset in range(days):
            current = first.shifted(offset)
            try:
                results.append(self._calculate(coordinates, current, params, manual))
            except TimeUnavailable as e:
                logger.warning(f"{current.calendar_date} atlandı: {e.message}")
        return results

    def time_for_prayer(
        self,
        coordinates: Coordinates,
        day: DateSpec,
        method: MethodSpec,
        prayer: Prayer | str,
        adjustments: AdjustmentsSpec = None,
    ) -> datetime:
        """Tek bir vaktin anını döndür."""
        target = Prayer.parse(prayer)
        return self.compute(coordinates, day, method, adjustments).time_for(target)

    def current_and_next(
        self,
        coordinates: Coordinates,
        day: DateSpec,
        method: MethodSpec,
        at: datetime | None = None,
        adjustments: AdjustmentsSpec = None,
    ) -> tuple[Prayer | None, Prayer | None]:
        """Verilen anda içinde bulunulan ve sıradaki vakit."""
        calculation_date = self._validate_date(day)
        times = self.compute(coordinates, calculation_date, method, adjustments)
        if at is None:
            at = datetime.now(timezone.utc)
        elif at.tzinfo is None:
            at = at.replace(tzinfo=calculation_date.tz)
        return times.current_prayer(at), times.next_prayer(at)

    def sunnah_times(
        self,
        coordinates: Coordinates,
        day: DateSpec,
        method: MethodSpec,
        adjustments: AdjustmentsSpec = None,
    ) -> SunnahTimes:
        """Akşamdan ertesi imsaka kadar gecenin yarısı ve son üçte biri."""
        calculation_date = self._validate_date(day)
        today = self.compute(coordinates, calculation_date, method, adjustments)
        tomorrow = self.compute(coordinates, calculation_date.shifted(1), method, adjustments)

        maghrib = today.maghrib.astimezone(timezone.utc)
        night = tomorrow.fajr.astimezone(timezone.utc) - maghrib
        tz = calculation_date.tz
        return SunnahTimes(
            middle_of_the_night=round_to_minute(maghrib + night / 2, Rounding.NEAREST).astimezone(tz),
            last_third_of_the_night=round_to_minute(
                maghrib + night * 2 / 3, Rounding.NEAREST
            ).astimezone(tz),
        )

    def qibla(self, coordinates: Coordinates) -> float:
        """Kâbe yönü (kuzeyden derece)."""
        return qibla_direction(self._validate_coordinates(coordinates))

    # ============== Internals ==============

    def _calculate(
        self,
        coordinates: Coordinates,
        day: CalculationDate,
        params: CalculationParameters,
        manual: PrayerAdjustments,
    ) -> PrayerTimes:
        calendar_day = day.calendar_date
        jd = julian_day(calendar_day.year, calendar_day.month, calendar_day.day)
        solar_time = SolarTime.for_julian_day(jd, coordinates)

        def instant(hours: float) -> datetime:
            return hours_to_instant(calendar_day, hours)

        try:
            sunrise = instant(solar_time.sunrise())
            sunset = instant(solar_time.sunset())
            asr = instant(solar_time.afternoon(params.madhab.shadow_length))
        except AngleUnattainable as e:
            raise TimeUnavailable(
                f"{calendar_day} için güneş doğuşu/batışı veya ikindi hesaplanamıyor: {e.message}"
            ) from e
        dhuhr = instant(solar_time.transit)
        if not sunrise <= dhuhr <= sunset:
            logger.error(f"Öğle gün doğumu ile batımı arasında değil: {sunrise} {dhuhr} {sunset}")
            raise InternalInconsistency(f"{calendar_day} için öğle, gün doğumu ile batımı arasında değil")

        @cache
        def night() -> Night:
            tomorrow = SolarTime.for_julian_day(jd + 1, coordinates)
            try:
                next_sunrise = instant(24 + tomorrow.sunrise())
            except AngleUnattainable as e:
                raise TimeUnavailable(f"Ertesi gün doğuşu hesaplanamıyor: {e.message}") from e
            return Night(sunrise=sunrise, sunset=sunset, next_sunrise=next_sunrise)

        resolver = HighLatitudeResolver(params, coordinates, calendar_day)
        fraction_rule = (
            params.night_fraction_latitude is not None
            and abs(coordinates.latitude) >= params.night_fraction_latitude
        )

        if fraction_rule:
            fajr = resolver.seventh_of_the_night(Prayer.FAJR, night())
        else:
            try:
                fajr = instant(solar_time.hour_angle(-params.fajr_angle, after_transit=False))
            except AngleUnattainable as e:
                fajr = resolver.resolve(Prayer.FAJR, night(), e)

        if params.isha_interval > 0:
            isha = sunset + timedelta(minutes=params.isha_interval)
        elif fraction_rule:
            isha = resolver.seventh_of_the_night(Prayer.ISHA, night())
        else:
            try:
                isha = instant(solar_time.hour_angle(-params.isha_angle, after_transit=True))
            except AngleUnattainable as e:
                isha = resolver.resolve(Prayer.ISHA, night(), e)

        maghrib = sunset
        if params.maghrib_angle is not None:
            try:
                angle_based = instant(solar_time.hour_angle(-params.maghrib_angle, after_transit=True))
            except AngleUnattainable:
                logger.debug("Akşam açısına ulaşılamıyor, gün batımı kullanıldı")
            else:
                if sunset < angle_based < isha:
                    maghrib = angle_based

        raw = {
            Prayer.FAJR: fajr,
            Prayer.SUNRISE: sunrise,
            Prayer.DHUHR: dhuhr,
            Prayer.ASR: asr,
            Prayer.MAGHRIB: maghrib,
            Prayer.ISHA: isha,
        }
        method_times = self._finalize(raw, calendar_day, day, params.method_adjustments, params.rounding)
        if not method_times.is_strictly_increasing():
            logger.warning(f"Vakitler ayrıştırılamıyor: {method_times.to_dict()}")
            raise TimeUnavailable(
                f"{calendar_day} için hiçbir kural vakitleri sıralı çözemiyor: {method_times.to_dict()}"
            )
        if manual == PrayerAdjustments():
            times = method_times
        else:
            total = params.method_adjustments + manual
            times = self._finalize(raw, calendar_day, day, total, params.rounding)
            if not times.is_strictly_increasing():
                raise InvalidParameter(f"Düzeltmeler vakitlerin sırasını bozuyor: {times.to_dict()}")

        logger.debug(
            f"Vakitler hesaplandı: ({coordinates.latitude}, {coordinates.longitude}) "
            f"{calendar_day} {params.method.value}"
        )
        return times

    @staticmethod
    def _finalize(
        raw: dict[Prayer, datetime],
        calendar_day: date,
        day: CalculationDate,
        adjustments: PrayerAdjustments,
        rounding: Rounding,
    ) -> PrayerTimes:
        """Düzeltme ve yuvarlamayı uygulayıp yerel saate çevir."""
        try:
            final = {
                prayer.value: apply_adjustment(value, prayer, adjustments, rounding).astimezone(day.tz)
                for prayer, value in raw.items()
            }
        except OverflowError as e:
            raise InvalidDate(f"Vakitler desteklenen tarih aralığının dışında: {calendar_day}") from e
        return PrayerTimes(date=calendar_day, **final)

    @staticmethod
    def _validate_coordinates(coordinates: Coordinates | tuple[float, float]) -> Coordinates:
        if isinstance(coordinates, Coordinates):
            if not is_valid_coordinates(coordinates.latitude, coordinates.longitude):
                raise InvalidCoordinates(f"Geçersiz koordinat: {coordinates}")
            return coordinates
        try:
            latitude, longitude = coordinates
        except (TypeError, ValueError) as e:
            raise InvalidCoordinates(f"Geçersiz koordinat: {coordinates!r}") from e
        return Coordinates(latitude=latitude, longitude=longitude)

    @staticmethod
    def _validate_date(day: DateSpec) -> CalculationDate:
        if isinstance(day, CalculationDate):
            return day
        if isinstance(day, datetime):
            return CalculationDate.from_date(day.date(), day.tzinfo or timezone.utc)
        if isinstance(day, date):
            return CalculationDate.from_date(day)
        if isinstance(day, str):
            return CalculationDate.parse(day)
        raise InvalidDate(f"Geçersiz tarih: {day!r}")

    @staticmethod
    def _validate_parameters(params: CalculationParameters) -> CalculationParameters:
        # Açılar gün doğumu/batımı derinliğinden büyük olmalı, aksi halde sıra bozulur
        min_angle = -SOLAR_ALTITUDE
        if not min_angle < params.fajr_angle < 90:
            raise InvalidParameter(f"İmsak açısı ({min_angle:.3f}, 90) aralığında olmalı: {params.fajr_angle}")
        if params.isha_interval < 0:
            raise InvalidParameter(f"Yatsı aralığı negatif olamaz: {params.isha_interval}")
        if params.isha_interval == 0 and not min_angle < params.isha_angle < 90:
            raise InvalidParameter(f"Yatsı açısı ({min_angle:.3f}, 90) aralığında olmalı: {params.isha_angle}")
        if params.maghrib_angle is not None and not 0 < params.maghrib_angle < 90:
            raise InvalidParameter(f"Akşam açısı (0, 90) aralığında olmalı: {params.maghrib_angle}")
        return params
