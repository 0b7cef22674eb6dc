# solaredge_api/main.py

import sys

from .cli import build_parser
from .config import Config
from .errors import ApiError, SolarEdgeError
from .logging import ConsoleLog
from .models.enums import TimeUnit
from .models.request import SiteEnergy, SitesList
from .services.output_formatter import emit_json
from .services.se_api_client import SolarEdgeAPIClient

SITE_COMMANDS = {"details", "overview", "inventory", "power-flow", "equipment", "energy"}


def run_command(client: SolarEdgeAPIClient, args, site_id):
    if args.command == "version":
        return {
            "current": client.version_current(),
            "supported": [v.release for v in client.version_supported()],
        }
    if args.command == "sites":
        params = SitesList(
            size=args.size,
            start_index=args.start_index,
            search_text=args.search,
        )
        return client.sites_list(params)
    if args.command == "details":
        return client.site_details(site_id)
    if args.command == "overview":
        return client.site_overview(site_id)
    if args.command == "inventory":
        return client.site_inventory(site_id)
    if args.command == "power-flow":
        return client.site_current_power_flow(site_id)
    if args.command == "equipment":
        return client.equipment_list(site_id)
    if args.command == "energy":
        params = SiteEnergy(
            start_date=args.start,
            end_date=args.end,
            time_unit=TimeUnit(args.time_unit),
        )
        return client.site_energy(site_id, params)
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv=None, transport=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        app_cfg = Config.load(args.config)
    except (FileNotFoundError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    console_logger = ConsoleLog(
        level="DEBUG" if args.debug else app_cfg.logging.console_level,
        quiet=args.quiet or app_cfg.logging.console_quiet,
        debug_modules=app_cfg.logging.debug_modules,
        secrets=[app_cfg.solaredge_api.api_key],
    )
    log = console_logger.setup()

    site_id = getattr(args, "site_id", None) or app_cfg.solaredge_api.site_id
    if args.command in SITE_COMMANDS and site_id is None:
        print("ERROR: --site-id is required (or set site_id in [solaredge_api])", file=sys.stderr)
        return 1

    client = SolarEdgeAPIClient(app_cfg.solaredge_api, log.getChild("api"), transport=transport)
    try:
        result = run_command(client, args, site_id)
    except ApiError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        if exc.body:
            print(exc.text, file=sys.stderr)
        return 2
    except SolarEdgeError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    emit_json(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
