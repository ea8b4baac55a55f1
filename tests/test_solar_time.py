"""Tests for daily solar time."""

from datetime import date, datetime, timezone

import pytest

from adhan_core.domain.errors import AngleUnattainable, InvalidDate
from adhan_core.domain.models import Coordinates, Prayer, PrayerAdjustments, Rounding
from adhan_core.services.solar_time import (
    SolarTime,
    apply_adjustment,
    hours_to_instant,
    round_to_minute,
)


class TestSolarTime:
    """SolarTime tests."""

    @pytest.fixture
    def greenwich(self) -> SolarTime:
        """Solar time at Greenwich on an equinox."""
        return SolarTime.for_date(date(2024, 3, 20), Coordinates(51.4769, 0.0))

    def test_event_order(self, greenwich: SolarTime) -> None:
        """Test sunrise, transit and sunset order."""
        assert greenwich.sunrise() < greenwich.transit < greenwich.sunset()

    def test_transit_follows_equation_of_time(self, greenwich: SolarTime) -> None:
        """Test transit on the prime meridian is noon minus the equation of time."""
        expected = 12 - greenwich.solar.equation_of_time / 60
        assert greenwich.transit == pytest.approx(expected, abs=1 / 60)

    def test_day_length_at_equinox(self, greenwich: SolarTime) -> None:
        """Test day is slightly longer than twelve hours at the equinox."""
        length = greenwich.sunset() - greenwich.sunrise()
        assert 12.0 < length < 12.4

    def test_hanafi_afternoon_is_later(self, greenwich: SolarTime) -> None:
        """Test double shadow length gives a later afternoon."""
        assert greenwich.transit < greenwich.afternoon(1) < greenwich.afternoon(2) < greenwich.sunset()

    def test_transit_moves_with_longitude(self) -> None:
        """Test fifteen degrees east is one hour earlier."""
        day = date(2024, 3, 20)
        west = SolarTime.for_date(day, Coordinates(30.0, 0.0))
        east = SolarTime.for_date(day, Coordinates(30.0, 15.0))
        assert west.transit - east.transit == pytest.approx(1.0, abs=1 / 60)

    def test_midnight_sun(self) -> None:
        """Test sunrise is unattainable during midnight sun."""
        tromso = SolarTime.for_date(date(2024, 6, 21), Coordinates(69.65, 18.96))
        with pytest.raises(AngleUnattainable):
            tromso.sunrise()

    def test_twilight_unattainable_in_summer(self) -> None:
        """Test 18 degree twilight is unattainable in Oslo in June."""
        oslo = SolarTime.for_date(date(2024, 6, 21), Coordinates(59.9139, 10.7522))
        assert oslo.sunrise() < oslo.sunset()
        with pytest.raises(AngleUnattainable):
            oslo.hour_angle(-18, after_transit=False)


class TestInstants:
    """Instant conversion and rounding tests."""

    def test_hours_to_instant(self) -> None:
        """Test hours past midnight UTC."""
        assert hours_to_instant(date(2024, 1, 1), 10.5) == datetime(
            2024, 1, 1, 10, 30, tzinfo=timezone.utc
        )

    def test_hours_past_midnight(self) -> None:
        """Test hours spilling into the next and previous day."""
        assert hours_to_instant(date(2024, 1, 1), 25.5) == datetime(
            2024, 1, 2, 1, 30, tzinfo=timezone.utc
        )
        assert hours_to_instant(date(2024, 1, 1), -0.5) == datetime(
            2023, 12, 31, 23, 30, tzinfo=timezone.utc
        )

    def test_hours_beyond_supported_range(self) -> None:
        """Test overflow is reported as InvalidDate."""
        with pytest.raises(InvalidDate):
            hours_to_instant(date(9999, 12, 31), 24.5)

    @pytest.mark.parametrize(
        ("second", "rounding", "expected_minute"),
        [
            (29, Rounding.NEAREST, 0),
            (30, Rounding.NEAREST, 1),
            (1, Rounding.UP, 1),
            (0, Rounding.UP, 0),
            (59, Rounding.DOWN, 0),
        ],
    )
    def test_round_to_minute(self, second: int, rounding: Rounding, expected_minute: int) -> None:
        """Test rounding modes."""
        instant = datetime(2024, 1, 1, 12, 0, second, tzinfo=timezone.utc)
        assert round_to_minute(instant, rounding) == datetime(
            2024, 1, 1, 12, expected_minute, tzinfo=timezone.utc
        )

    def test_no_rounding(self) -> None:
        """Test rounding none keeps seconds."""
        instant = datetime(2024, 1, 1, 12, 0, 42, tzinfo=timezone.utc)
        assert round_to_minute(instant, Rounding.NONE) == instant

    def test_apply_adjustment(self) -> None:
        """Test minutes are added before rounding."""
        instant = datetime(2024, 1, 1, 12, 0, 40, tzinfo=timezone.utc)
        adjusted = apply_adjustment(
            instant, Prayer.DHUHR, PrayerAdjustments(dhuhr=5), Rounding.NEAREST
        )
        assert adjusted == datetime(2024, 1, 1, 12, 6, tzinfo=timezone.utc)
