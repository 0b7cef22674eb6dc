# solaredge_api/cli.py
import argparse
from datetime import date

from solaredge_api.models.enums import TimeUnit


def _iso_date(raw: str) -> date:
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date '{raw}' (expected YYYY-MM-DD)") from exc


def _add_site_id(cmd):
    cmd.add_argument(
        "--site-id",
        type=int,
        help="Site id (defaults to [solaredge_api] site_id)",
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="solaredge-api",
        description="Query the SolarEdge Monitoring API"
    )

    parser.add_argument(
        "--config",
        default="solaredge_api.conf",
        help="Path to configuration file"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable verbose debug logging (request URLs, responses)"
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress log output"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("version", help="Show current and supported API versions")

    cmd_sites = sub.add_parser("sites", help="List sites visible to the API key")
    cmd_sites.add_argument("--search", help="Search text (name, address, city, ...)")
    cmd_sites.add_argument("--size", type=int, help="Maximum number of sites (<= 100)")
    cmd_sites.add_argument("--start-index", type=int, help="Index of the first site returned")

    for name, help_text in (
        ("details", "Show site details"),
        ("overview", "Show site overview (lifetime, year, month, day, current power)"),
        ("inventory", "Show site equipment inventory"),
        ("power-flow", "Show current power flow between grid, load, PV and storage"),
        ("equipment", "List inverters/SMIs of the site"),
    ):
        _add_site_id(sub.add_parser(name, help=help_text))

    cmd_energy = sub.add_parser("energy", help="Show site energy for a date range")
    _add_site_id(cmd_energy)
    cmd_energy.add_argument("--start", type=_iso_date, required=True, help="Start date (YYYY-MM-DD)")
    cmd_energy.add_argument("--end", type=_iso_date, required=True, help="End date (YYYY-MM-DD)")
    cmd_energy.add_argument(
        "--time-unit",
        choices=[unit.value for unit in TimeUnit],
        default=TimeUnit.DAY.value,
        help="Aggregation granularity",
    )

    return parser
