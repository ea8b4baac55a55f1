"""Command-line interface for Adhan-Core."""

import argparse
import sys
from datetime import datetime

from adhan_core import __version__


def _add_location_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--lat", type=float, required=True, help="Enlem")
    parser.add_argument("--lng", type=float, required=True, help="Boylam")


def _add_calculation_arguments(parser: argparse.ArgumentParser) -> None:
    _add_location_arguments(parser)
    parser.add_argument(
        "--date",
        help="Tarih, YYYY-MM-DD (varsayılan: bugün)",
    )
    parser.add_argument(
        "--method",
        "-m",
        default="muslimWorldLeague",
        help="Hesaplama metodu (varsayılan: muslimWorldLeague)",
    )
    parser.add_argument(
        "--madhab",
        default="shafi",
        help="İkindi için mezhep: shafi veya hanafi (varsayılan: shafi)",
    )
    parser.add_argument(
        "--high-latitude-rule",
        help="middleOfTheNight, seventhOfTheNight, twilightAngle veya none",
    )
    parser.add_argument(
        "--tz",
        help="IANA saat dilimi (varsayılan: koordinattan bulunur)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="adhan-core",
        description="Namaz vakti, kıble ve güneş konumu hesaplama aracı",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"adhan-core {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Komutlar")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="HTTP servisini başlat")
    serve_parser.add_argument(
        "--host",
        "-H",
        default="0.0.0.0",
        help="Sunucu adresi (varsayılan: 0.0.0.0)",
    )
    serve_parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=8080,
        help="Sunucu portu (varsayılan: 8080)",
    )
    serve_parser.add_argument(
        "--log-level",
        "-l",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Log seviyesi (varsayılan: INFO)",
    )

    # times command
    times_parser = subparsers.add_parser("times", help="Namaz vakitlerini göster")
    _add_calculation_arguments(times_parser)
    times_parser.add_argument(
        "--days",
        "-d",
        type=int,
        default=1,
        help="Kaç günlük (varsayılan: 1)",
    )

    # sunnah command
    sunnah_parser = subparsers.add_parser("sunnah", help="Gece yarısı ve son üçte biri göster")
    _add_calculation_arguments(sunnah_parser)

    # qibla command
    qibla_parser = subparsers.add_parser("qibla", help="Kıble yönünü göster")
    _add_location_arguments(qibla_parser)

    # methods command
    subparsers.add_parser("methods", help="Hesaplama metotlarını listele")

    return parser


def _prepare(args: argparse.Namespace):
    from adhan_core.domain.models import CalculationDate, Coordinates
    from adhan_core.services.prayer_service import PrayerService
    from adhan_core.services.timezone_lookup import TimezoneResolver

    service = PrayerService()
    coordinates = Coordinates(latitude=args.lat, longitude=args.lng)
    tz = TimezoneResolver().resolve(coordinates, args.tz)
    if args.date:
        day = CalculationDate.parse(args.date, tz)
    else:
        day = CalculationDate.from_date(datetime.now(tz).date(), tz)
    params = service.parameters_for(
        args.method,
        madhab=args.madhab,
        high_latitude_rule=args.high_latitude_rule,
    )
    return service, coordinates, day, params


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the web server."""
    import uvicorn

    from adhan_core.api.app import create_app
    from adhan_core.config import get_config, setup_logging

    setup_logging(args.log_level)

    app = create_app(get_config())

    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def cmd_times(args: argparse.Namespace) -> None:
    """Show prayer times."""
    service, coordinates, day, params = _prepare(args)
    last = day.shifted(max(args.days, 1) - 1)
    times_list = service.compute_range(coordinates, day, last, params)

    print(f"\n📍 Konum: {args.lat:.4f}, {args.lng:.4f}")
    print(f"🌍 Timezone: {day.tz}")
    print(f"🧭 Metot: {params.method.value} ({params.madhab.value})")
    print()

    print("=" * 75)
    print(
        f"{'Tarih':<15} {'İmsak':>8} {'Güneş':>8} {'Öğle':>8} {'İkindi':>8} {'Akşam':>8} {'Yatsı':>8}"
    )
    print("-" * 75)

    for times in times_list:
        print(
            f"{times.date.strftime('%d.%m.%Y'):<15} "
            f"{times.fajr.strftime('%H:%M'):>8} "
            f"{times.sunrise.strftime('%H:%M'):>8} "
            f"{times.dhuhr.strftime('%H:%M'):>8} "
            f"{times.asr.strftime('%H:%M'):>8} "
            f"{times.maghrib.strftime('%H:%M'):>8} "
            f"{times.isha.strftime('%H:%M'):>8}"
        )

    print("=" * 75)


def cmd_sunnah(args: argparse.Namespace) -> None:
    """Show sunnah times."""
    service, coordinates, day, params = _prepare(args)
    sunnah = service.sunnah_times(coordinates, day, params)

    print(f"\n📅 Tarih: {day.calendar_date.strftime('%d.%m.%Y')} ({day.tz})")
    print(f"🌓 Gece yarısı: {sunnah.middle_of_the_night.strftime('%d.%m.%Y %H:%M')}")
    print(f"🌌 Son üçte bir: {sunnah.last_third_of_the_night.strftime('%d.%m.%Y %H:%M')}")


def cmd_qibla(args: argparse.Namespace) -> None:
    """Show qibla direction."""
    from adhan_core.domain.models import Coordinates
    from adhan_core.services.prayer_service import PrayerService

    direction = PrayerService().qibla(Coordinates(latitude=args.lat, longitude=args.lng))
    print(f"🕋 Kıble yönü: {direction:.2f}° (kuzeyden saat yönünde)")


def cmd_methods(args: argparse.Namespace) -> None:
    """List calculation methods."""
    from adhan_core.services.prayer_service import PrayerService

    print(f"{'Metot':<24} {'İmsak':>7} {'Yatsı':>10}  Açıklama")
    print("-" * 75)
    for preset in PrayerService().methods():
        isha = f"{preset.isha_interval} dk" if preset.isha_interval else f"{preset.isha_angle}°"
        print(f"{preset.method.value:<24} {preset.fajr_angle:>6}° {isha:>10}  {preset.display_name}")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from adhan_core.domain.errors import AdhanError

    parser = create_parser()
    args = parser.parse_args(argv)

    commands = {
        "serve": cmd_serve,
        "times": cmd_times,
        "sunnah": cmd_sunnah,
        "qibla": cmd_qibla,
        "methods": cmd_methods,
    }

    cmd_func = commands.get(args.command)
    if cmd_func is None:
        parser.print_help()
        return 1

    try:
        cmd_func(args)
    except AdhanError as e:
        print(f"❌ {e.kind}: {e.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
