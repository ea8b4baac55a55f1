"""Solar position and related spherical astronomy.

Truncated solar series from Jean Meeus, *Astronomical Algorithms* (2nd ed.).
Angles are handled in degrees and converted to radians only at the trigonometric
call sites. Times returned by the transit/hour-angle helpers are UTC hours of the
day the Julian day refers to.
"""

import math
from dataclasses import dataclass

from adhan_core.domain.errors import AngleUnattainable
from adhan_core.domain.models import Coordinates, Shafaq

J2000 = 2451545.0
SIDEREAL_RATE = 360.985647
MAKKAH = Coordinates(latitude=21.4225241, longitude=39.8261818)


# ============== Angle helpers ==============


def normalize_to_scale(value: float, max_value: float) -> float:
    """Değeri [0, max_value) aralığına indir."""
    return value - max_value * math.floor(value / max_value)


def unwind_angle(angle: float) -> float:
    """Açıyı [0, 360) aralığına indir."""
    return normalize_to_scale(angle, 360.0)


def closest_angle(angle: float) -> float:
    """Açıyı [-180, 180] aralığına indir."""
    if -180.0 <= angle <= 180.0:
        return angle
    return angle - 360.0 * round(angle / 360.0)


# ============== Time ==============


def julian_day(year: int, month: int, day: int, hours: float = 0.0) -> float:
    """Gregoryen tarih için Julian gün sayısı (Meeus 7.1)."""
    y = year if month > 2 else year - 1
    m = month if month > 2 else month + 12
    d = day + hours / 24
    a = y // 100
    b = 2 - a + a // 4
    i0 = math.floor(365.25 * (y + 4716))
    i1 = math.floor(30.6001 * (m + 1))
    return i0 + i1 + d + b - 1524.5


def julian_century(jd: float) -> float:
    """J2000'den bu yana Julian yüzyıl (Meeus 12.1)."""
    return (jd - J2000) / 36525


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and not (year % 100 == 0 and year % 400 != 0)


# ============== Solar series ==============


def mean_solar_longitude(t: float) -> float:
    """Güneşin ortalama boylamı, L0 (Meeus 25.2)."""
    return unwind_angle(280.4664567 + 36000.76983 * t + 0.0003032 * t**2)


def mean_lunar_longitude(t: float) -> float:
    """Ayın ortalama boylamı, L' (Meeus s. 144)."""
    return unwind_angle(218.3165 + 481267.8813 * t)


def ascending_lunar_node_longitude(t: float) -> float:
    """Ay yükselen düğümünün boylamı, Ω (Meeus s. 144)."""
    return unwind_angle(
        125.04452 - 1934.136261 * t + 0.0020708 * t**2 + t**3 / 450000
    )


def mean_solar_anomaly(t: float) -> float:
    """Güneşin ortalama anomalisi, M (Meeus 25.3)."""
    return unwind_angle(357.52911 + 35999.05029 * t - 0.0001537 * t**2)


def solar_equation_of_the_center(t: float, m: float) -> float:
    """Merkez denklemi, C (Meeus s. 164)."""
    mrad = math.radians(m)
    term1 = (1.914602 - 0.004817 * t - 0.000014 * t**2) * math.sin(mrad)
    term2 = (0.019993 - 0.000101 * t) * math.sin(2 * mrad)
    term3 = 0.000289 * math.sin(3 * mrad)
    return term1 + term2 + term3


def apparent_solar_longitude(t: float, l0: float) -> float:
    """Görünür güneş boylamı, λ (Meeus s. 164)."""
    longitude = l0 + solar_equation_of_the_center(t, mean_solar_anomaly(t))
    omega = 125.04 - 1934.136 * t
    return unwind_angle(longitude - 0.00569 - 0.00478 * math.sin(math.radians(omega)))


def mean_obliquity_of_the_ecliptic(t: float) -> float:
    """Ekliptiğin ortalama eğikliği, ε0 (Meeus 22.2)."""
    return 23.439291 - 0.013004167 * t - 0.0000001639 * t**2 + 0.0000005036 * t**3


def apparent_obliquity_of_the_ecliptic(t: float, e0: float) -> float:
    """Görünür eğiklik, ε (Meeus s. 165)."""
    omega = 125.04 - 1934.136 * t
    return e0 + 0.00256 * math.cos(math.radians(omega))


def mean_sidereal_time(t: float) -> float:
    """Greenwich ortalama yıldız zamanı, θ0 (Meeus 12.4)."""
    jd = t * 36525 + J2000
    theta = (
        280.46061837
        + 360.98564736629 * (jd - J2000)
        + 0.000387933 * t**2
        - t**3 / 38710000
    )
    return unwind_angle(theta)


def nutation_in_longitude(l0: float, lp: float, omega: float) -> float:
    """Boylamda nütasyon, ΔΨ derece (Meeus s. 144)."""
    term1 = (-17.2 / 3600) * math.sin(math.radians(omega))
    term2 = (1.32 / 3600) * math.sin(2 * math.radians(l0))
    term3 = (0.23 / 3600) * math.sin(2 * math.radians(lp))
    term4 = (0.21 / 3600) * math.sin(2 * math.radians(omega))
    return term1 - term2 - term3 + term4


def nutation_in_obliquity(l0: float, lp: float, omega: float) -> float:
    """Eğiklikte nütasyon, Δε derece (Meeus s. 144)."""
    term1 = (9.2 / 3600) * math.cos(math.radians(omega))
    term2 = (0.57 / 3600) * math.cos(2 * math.radians(l0))
    term3 = (0.10 / 3600) * math.cos(2 * math.radians(lp))
    term4 = (0.09 / 3600) * math.cos(2 * math.radians(omega))
    return term1 + term2 + term3 - term4


def altitude_of_celestial_body(phi: float, delta: float, hour_angle: float) -> float:
    """Gök cisminin yüksekliği, h (Meeus 13.6)."""
    term1 = math.sin(math.radians(phi)) * math.sin(math.radians(delta))
    term2 = (
        math.cos(math.radians(phi))
        * math.cos(math.radians(delta))
        * math.cos(math.radians(hour_angle))
    )
    return math.degrees(math.asin(max(-1.0, min(1.0, term1 + term2))))


# ============== Interpolation ==============


def interpolate(y2: float, y1: float, y3: float, n: float) -> float:
    """Üç noktalı interpolasyon (Meeus 3.3)."""
    a = y2 - y1
    b = y3 - y2
    c = b - a
    return y2 + (n / 2) * (a + b + n * c)


def interpolate_angles(y2: float, y1: float, y3: float, n: float) -> float:
    """Açılar için üç noktalı interpolasyon (360° sarmasına dayanıklı)."""
    a = unwind_angle(y2 - y1)
    b = unwind_angle(y3 - y2)
    c = b - a
    return y2 + (n / 2) * (a + b + n * c)


# ============== Transit & hour angle ==============


def approximate_transit(longitude: float, sidereal_time: float, right_ascension: float) -> float:
    """Yaklaşık meridyen geçişi, m0 (gün kesri, Meeus 15.2)."""
    lw = -longitude
    return normalize_to_scale((right_ascension + lw - sidereal_time) / 360, 1)


def corrected_transit(
    m0: float,
    longitude: float,
    sidereal_time: float,
    right_ascension: float,
    previous_right_ascension: float,
    next_right_ascension: float,
) -> float:
    """Düzeltilmiş meridyen geçişi, UTC saat (Meeus s. 102)."""
    lw = -longitude
    theta = unwind_angle(sidereal_time + SIDEREAL_RATE * m0)
    alpha = unwind_angle(
        interpolate_angles(right_ascension, previous_right_ascension, next_right_ascension, m0)
    )
    h = closest_angle(theta - lw - alpha)
    dm = h / -360
    return (m0 + dm) * 24


def corrected_hour_angle(
    m0: float,
    h0: float,
    coordinates: Coordinates,
    after_transit: bool,
    sidereal_time: float,
    right_ascension: float,
    previous_right_ascension: float,
    next_right_ascension: float,
    declination: float,
    previous_declination: float,
    next_declination: float,
) -> float:
    """Güneşin h0 yüksekliğine ulaştığı an, UTC saat (Meeus s. 102-103).

    Raises AngleUnattainable when the sun never reaches h0 on that day at that
    latitude.
    """
    lw = -coordinates.longitude
    phi = math.radians(coordinates.latitude)
    term1 = math.sin(math.radians(h0)) - math.sin(phi) * math.sin(math.radians(declination))
    term2 = math.cos(phi) * math.cos(math.radians(declination))
    if abs(term2) < 1e-12:
        raise AngleUnattainable(h0, f"Kutup noktasında {h0:.2f}° için saat açısı tanımsız")
    cos_h0 = term1 / term2
    if not -1.0 <= cos_h0 <= 1.0:
        raise AngleUnattainable(h0)

    hour_angle0 = math.degrees(math.acos(cos_h0))
    m = m0 + hour_angle0 / 360 if after_transit else m0 - hour_angle0 / 360
    theta = unwind_angle(sidereal_time + SIDEREAL_RATE * m)
    alpha = unwind_angle(
        interpolate_angles(right_ascension, previous_right_ascension, next_right_ascension, m)
    )
    delta = interpolate(declination, previous_declination, next_declination, m)
    hour_angle = theta - lw - alpha
    h = altitude_of_celestial_body(coordinates.latitude, delta, hour_angle)
    term3 = h - h0
    term4 = (
        360
        * math.cos(math.radians(delta))
        * math.cos(phi)
        * math.sin(math.radians(hour_angle))
    )
    if term4 == 0:
        return m * 24
    return (m + term3 / term4) * 24


# ============== Solar coordinates ==============


@dataclass(frozen=True)
class SolarCoordinates:
    """Bir Julian gün için güneşin ekvatoral koordinatları."""

    declination: float
    right_ascension: float
    apparent_sidereal_time: float
    equation_of_time: float  # dakika

    @classmethod
    def for_julian_day(cls, jd: float) -> "SolarCoordinates":
        """Julian gün için koordinatları hesapla."""
        t = julian_century(jd)
        l0 = mean_solar_longitude(t)
        lp = mean_lunar_longitude(t)
        omega = ascending_lunar_node_longitude(t)
        lam = math.radians(apparent_solar_longitude(t, l0))
        theta0 = mean_sidereal_time(t)
        d_psi = nutation_in_longitude(l0, lp, omega)
        d_epsilon = nutation_in_obliquity(l0, lp, omega)
        epsilon0 = mean_obliquity_of_the_ecliptic(t)
        epsilon_app = math.radians(apparent_obliquity_of_the_ecliptic(t, epsilon0))

        declination = math.degrees(math.asin(math.sin(epsilon_app) * math.sin(lam)))
        right_ascension = unwind_angle(
            math.degrees(math.atan2(math.cos(epsilon_app) * math.sin(lam), math.cos(lam)))
        )
        apparent_sidereal_time = theta0 + (
            d_psi * 3600 * math.cos(math.radians(epsilon0 + d_epsilon))
        ) / 3600

        # Meeus 28.1, dakikaya çevrilmiş
        eot = closest_angle(
            l0 - 0.0057183 - right_ascension + d_psi * math.cos(epsilon_app)
        )
        return cls(
            declination=declination,
            right_ascension=right_ascension,
            apparent_sidereal_time=apparent_sidereal_time,
            equation_of_time=eot * 4,
        )


# ============== Seasonal twilight ==============


def days_since_solstice(day_of_year: int, year: int, latitude: float) -> int:
    """Son gündönümünden bu yana geçen gün (yarım küreye göre)."""
    northern_offset = 10
    days_in_year = 366 if is_leap_year(year) else 365
    southern_offset = 173 if is_leap_year(year) else 172
    if latitude >= 0:
        days = day_of_year + northern_offset
        if days >= days_in_year:
            days -= days_in_year
    else:
        days = day_of_year - southern_offset
        if days < 0:
            days += days_in_year
    return days


def _seasonal_interpolation(a: float, b: float, c: float, d: float, dyy: int) -> float:
    if dyy < 91:
        return a + (b - a) / 91 * dyy
    if dyy < 137:
        return b + (c - b) / 46 * (dyy - 91)
    if dyy < 183:
        return c + (d - c) / 46 * (dyy - 137)
    if dyy < 229:
        return d + (c - d) / 46 * (dyy - 183)
    if dyy < 275:
        return c + (b - c) / 46 * (dyy - 229)
    return b + (a - b) / 91 * (dyy - 275)


def season_adjusted_morning_twilight(latitude: float, day_of_year: int, year: int) -> float:
    """Mevsime göre güneş doğuşundan önceki imsak süresi (dakika)."""
    lat = abs(latitude)
    a = 75 + 28.65 / 55.0 * lat
    b = 75 + 19.44 / 55.0 * lat
    c = 75 + 32.74 / 55.0 * lat
    d = 75 + 48.10 / 55.0 * lat
    return _seasonal_interpolation(a, b, c, d, days_since_solstice(day_of_year, year, latitude))


def season_adjusted_evening_twilight(
    latitude: float, day_of_year: int, year: int, shafaq: Shafaq = Shafaq.GENERAL
) -> float:
    """Mevsime ve şafak türüne göre gün batımından sonraki yatsı süresi (dakika)."""
    lat = abs(latitude)
    if shafaq is Shafaq.AHMER:
        a = 62 + 17.40 / 55.0 * lat
        b = 62 - 7.16 / 55.0 * lat
        c = 62 + 5.12 / 55.0 * lat
        d = 62 + 19.44 / 55.0 * lat
    elif shafaq is Shafaq.ABYAD:
        a = 75 + 25.60 / 55.0 * lat
        b = 75 + 7.16 / 55.0 * lat
        c = 75 + 36.84 / 55.0 * lat
        d = 75 + 81.84 / 55.0 * lat
    else:
        a = 75 + 25.60 / 55.0 * lat
        b = 75 + 2.050 / 55.0 * lat
        c = 75 - 9.21 / 55.0 * lat
        d = 75 + 6.14 / 55.0 * lat
    return _seasonal_interpolation(a, b, c, d, days_since_solstice(day_of_year, year, latitude))


# ============== Qibla ==============


def qibla_direction(coordinates: Coordinates) -> float:
    """Kâbe yönü, kuzeyden saat yönünde derece [0, 360)."""
    phi = math.radians(coordinates.latitude)
    d_lambda = math.radians(MAKKAH.longitude - coordinates.longitude)
    term1 = math.sin(d_lambda)
    term2 = math.cos(phi) * math.tan(math.radians(MAKKAH.latitude))
    term3 = math.sin(phi) * math.cos(d_lambda)
    return unwind_angle(math.degrees(math.atan2(term1, term2 - term3)))
