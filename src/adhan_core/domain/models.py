"""Domain models and value objects."""

import math
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from enum import Enum
from typing import Self

from adhan_core.domain.errors import (
    AdhanError,
    InvalidCoordinates,
    InvalidDate,
    InvalidParameter,
    InvalidPrayer,
    UnknownMethod,
)

# Hesap komşu günlerin güneş konumlarını da kullanır; uçlarda birer gün pay bırakılır
MIN_DATE = date(1, 1, 2)
MAX_DATE = date(9999, 12, 30)


def _normalize(identifier: str) -> str:
    return re.sub(r"[\s_\-]", "", identifier).lower()


class _LenientEnum(str, Enum):
    """Büyük/küçük harf ve ayraçlardan bağımsız ayrıştırılan enum."""

    @classmethod
    def parse(cls, value: "str | Self") -> Self:
        """Metin veya enum değerinden üye döndür."""
        if isinstance(value, cls):
            return value
        key = _normalize(str(value))
        for member in cls:
            if key in (_normalize(member.value), _normalize(member.name)):
                return member
        raise cls._invalid(value)

    @classmethod
    def _invalid(cls, value: object) -> AdhanError:
        return InvalidParameter(f"Geçersiz {cls.__name__} değeri: {value!r}")


class Prayer(_LenientEnum):
    """Namaz vakti isimleri (kanonik sırada)."""

    FAJR = "fajr"
    SUNRISE = "sunrise"
    DHUHR = "dhuhr"
    ASR = "asr"
    MAGHRIB = "maghrib"
    ISHA = "isha"

    @classmethod
    def _invalid(cls, value: object) -> AdhanError:
        return InvalidPrayer(f"Geçersiz vakit adı: {value!r}")

    @property
    def display_name(self) -> str:
        """Türkçe görüntüleme adı."""
        names = {
            Prayer.FAJR: "İmsak",
            Prayer.SUNRISE: "Güneş",
            Prayer.DHUHR: "Öğle",
            Prayer.ASR: "İkindi",
            Prayer.MAGHRIB: "Akşam",
            Prayer.ISHA: "Yatsı",
        }
        return names[self]

    @property
    def icon(self) -> str:
        """Emoji ikonu."""
        icons = {
            Prayer.FAJR: "🌙",
            Prayer.SUNRISE: "🌅",
            Prayer.DHUHR: "☀️",
            Prayer.ASR: "🌤️",
            Prayer.MAGHRIB: "🌇",
            Prayer.ISHA: "🌃",
        }
        return icons[self]


class CalculationMethod(_LenientEnum):
    """Hazır hesaplama metotları."""

    MUSLIM_WORLD_LEAGUE = "muslimWorldLeague"
    EGYPTIAN = "egyptian"
    KARACHI = "karachi"
    UMM_AL_QURA = "ummAlQura"
    DUBAI = "dubai"
    MOONSIGHTING_COMMITTEE = "moonsightingCommittee"
    NORTH_AMERICA = "northAmerica"
    KUWAIT = "kuwait"
    QATAR = "qatar"
    SINGAPORE = "singapore"
    TEHRAN = "tehran"
    TURKEY = "turkey"
    OTHER = "other"

    @classmethod
    def _invalid(cls, value: object) -> AdhanError:
        return UnknownMethod(f"Bilinmeyen hesaplama metodu: {value!r}")


class Madhab(_LenientEnum):
    """İkindi vaktini belirleyen fıkhi mezhep."""

    SHAFI = "shafi"
    HANAFI = "hanafi"

    @property
    def shadow_length(self) -> int:
        """Gölge boyu katsayısı (Şafi=1, Hanefi=2)."""
        return 2 if self is Madhab.HANAFI else 1


class HighLatitudeRule(_LenientEnum):
    """Yüksek enlem kuralı."""

    MIDDLE_OF_THE_NIGHT = "middleOfTheNight"
    SEVENTH_OF_THE_NIGHT = "seventhOfTheNight"
    TWILIGHT_ANGLE = "twilightAngle"
    NONE = "none"

    @classmethod
    def recommended(cls, coordinates: "Coordinates") -> Self:
        """Konum için önerilen kural."""
        if abs(coordinates.latitude) > 48:
            return cls.SEVENTH_OF_THE_NIGHT
        return cls.MIDDLE_OF_THE_NIGHT


class Shafaq(_LenientEnum):
    """Yatsı için şafak türü."""

    GENERAL = "general"
    AHMER = "ahmer"
    ABYAD = "abyad"


class Rounding(_LenientEnum):
    """Dakikaya yuvarlama yöntemi."""

    NEAREST = "nearest"
    UP = "up"
    DOWN = "down"
    NONE = "none"


@dataclass(frozen=True)
class Coordinates:
    """Konum bilgisi (immutable value object)."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Koordinat doğrulaması."""
        if not is_valid_coordinates(self.latitude, self.longitude):
            raise InvalidCoordinates(
                f"Geçersiz koordinat: enlem={self.latitude}, boylam={self.longitude}"
            )


def is_valid_coordinates(latitude: float, longitude: float) -> bool:
    """Enlem [-90, 90], boylam [-180, 180] aralığında mı?"""
    try:
        lat = float(latitude)
        lng = float(longitude)
    except (TypeError, ValueError):
        return False
    if not (math.isfinite(lat) and math.isfinite(lng)):
        return False
    return -90 <= lat <= 90 and -180 <= lng <= 180


@dataclass(frozen=True)
class CalculationDate:
    """Takvim günü ve sonuçların ifade edileceği saat dilimi."""

    year: int
    month: int
    day: int
    tz: tzinfo = timezone.utc

    def __post_init__(self) -> None:
        """Tarih doğrulaması."""
        try:
            value = date(self.year, self.month, self.day)
        except (TypeError, ValueError) as e:
            raise InvalidDate(f"Geçersiz tarih: {self.year}-{self.month}-{self.day}") from e
        if not MIN_DATE <= value <= MAX_DATE:
            raise InvalidDate(f"Desteklenen aralığın ({MIN_DATE} - {MAX_DATE}) dışında: {value}")

    @property
    def calendar_date(self) -> date:
        """Date nesnesi olarak döndür."""
        return date(self.year, self.month, self.day)

    @property
    def day_of_year(self) -> int:
        """Yılın kaçıncı günü."""
        return self.calendar_date.timetuple().tm_yday

    def shifted(self, days: int) -> Self:
        """Aynı saat dilimiyle n gün sonrası."""
        try:
            target = self.calendar_date + timedelta(days=days)
        except OverflowError as e:
            raise InvalidDate(f"Tarih desteklenen aralığın dışında: {self.calendar_date}") from e
        return type(self).from_date(target, self.tz)

    @classmethod
    def from_date(cls, value: date, tz: tzinfo = timezone.utc) -> Self:
        """Date nesnesinden oluştur."""
        return cls(year=value.year, month=value.month, day=value.day, tz=tz)

    @classmethod
    def parse(cls, text: str, tz: tzinfo = timezone.utc) -> Self:
        """ISO-8601 metninden oluştur (YYYY-MM-DD veya tam datetime)."""
        if not isinstance(text, str):
            raise InvalidDate(f"Geçersiz tarih: {text!r}")
        try:
            if "T" in text or " " in text.strip():
                parsed = datetime.fromisoformat(text.strip()).date()
            else:
                parsed = date.fromisoformat(text.strip())
        except ValueError as e:
            raise InvalidDate(f"Geçersiz tarih: {text!r}") from e
        return cls.from_date(parsed, tz)


@dataclass(frozen=True)
class PrayerAdjustments:
    """Vakitlere uygulanacak işaretli dakika düzeltmeleri."""

    fajr: int = 0
    sunrise: int = 0
    dhuhr: int = 0
    asr: int = 0
    maghrib: int = 0
    isha: int = 0

    def get_offset(self, prayer: Prayer) -> int:
        """Belirtilen vakit için düzeltmeyi döndür."""
        return getattr(self, prayer.value)

    def __add__(self, other: "PrayerAdjustments") -> "PrayerAdjustments":
        if not isinstance(other, PrayerAdjustments):
            return NotImplemented
        return PrayerAdjustments(
            **{p.value: self.get_offset(p) + other.get_offset(p) for p in Prayer}
        )

    def to_dict(self) -> dict[str, int]:
        """Dictionary olarak döndür."""
        return {p.value: self.get_offset(p) for p in Prayer}

    @classmethod
    def from_mapping(cls, data: "dict[str, int] | PrayerAdjustments | None") -> Self:
        """Vakit adı -> dakika eşlemesinden oluştur."""
        if data is None:
            return cls()
        if isinstance(data, cls):
            return data
        values: dict[str, int] = {}
        for key, minutes in data.items():
            prayer = Prayer.parse(key)
            if isinstance(minutes, bool) or not isinstance(minutes, int):
                raise InvalidParameter(f"Geçersiz düzeltme ({key}): {minutes!r}")
            values[prayer.value] = minutes
        return cls(**values)


@dataclass(frozen=True)
class PrayerTimes:
    """Bir günün tüm namaz vakitleri (saat dilimi bilgili anlar)."""

    date: date
    fajr: datetime
    sunrise: datetime
    dhuhr: datetime
    asr: datetime
    maghrib: datetime
    isha: datetime

    def time_for(self, prayer: Prayer) -> datetime:
        """Belirtilen vaktin anını döndür."""
        return getattr(self, prayer.value)

    def items(self) -> list[tuple[Prayer, datetime]]:
        """Tüm vakitleri kanonik sırada döndür."""
        return [(prayer, self.time_for(prayer)) for prayer in Prayer]

    def is_strictly_increasing(self) -> bool:
        """Vakitler kanonik sırada kesin artan mı?"""
        instants = [instant for _, instant in self.items()]
        return all(a < b for a, b in zip(instants, instants[1:]))

    def current_prayer(self, at: datetime) -> Prayer | None:
        """Verilen anda içinde bulunulan vakit (imsaktan önce None)."""
        for prayer, instant in reversed(self.items()):
            if at >= instant:
                return prayer
        return None

    def next_prayer(self, at: datetime) -> Prayer | None:
        """Verilen andan sonraki ilk vakit (yatsıdan sonra None)."""
        for prayer, instant in self.items():
            if at < instant:
                return prayer
        return None

    def to_dict(self) -> dict[str, str]:
        """ISO-8601 metinleri olarak döndür."""
        return {prayer.value: instant.isoformat() for prayer, instant in self.items()}


@dataclass(frozen=True)
class SunnahTimes:
    """Gece yarısı ve gecenin son üçte biri."""

    middle_of_the_night: datetime
    last_third_of_the_night: datetime

    def to_dict(self) -> dict[str, str]:
        """ISO-8601 metinleri olarak döndür."""
        return {
            "middle_of_the_night": self.middle_of_the_night.isoformat(),
            "last_third_of_the_night": self.last_third_of_the_night.isoformat(),
        }
