"""servicedash entry point.

Commands:
  serve      Run the REST API (and the front-end, if static_dir is set)
  links      List, add or remove links through the API, offline-capable
  settings   Show the dashboard settings
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from servicedash import __version__
from servicedash.client import (
    ApiClient,
    DashboardSettingsService,
    FileLocalCache,
    LinkService,
    SortOption,
)
from servicedash.client.images import image_to_data_url
from servicedash.config import Settings, get_settings
from servicedash.logging_setup import setup_logging

logger = logging.getLogger(__name__)

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="servicedash",
        description="Services dashboard - your local services in one place",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  servicedash serve                          Start the API on 127.0.0.1:3001
  servicedash serve --host 0.0.0.0 -p 8080   Listen on all interfaces
  servicedash links list --sort name         Show links sorted by name
  servicedash links add Router http://192.168.1.1 -d admin
  servicedash links remove <id>
""",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument(
        "--api-url",
        default=None,
        help="API base URL for client commands (default: SERVICEDASH_API_URL or "
        "http://localhost:3001/api)",
    )

    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Run the API server")
    serve.add_argument("--host", default=None, help="Host to bind (default: 127.0.0.1)")
    serve.add_argument("--port", "-p", type=int, default=None, help="Port (default: 3001)")
    serve.add_argument("--data-dir", type=Path, default=None, help="Where documents live")
    serve.add_argument("--dev", action="store_true", help="Development mode with auto-reload")

    links = sub.add_parser("links", help="Manage links")
    links_sub = links.add_subparsers(dest="links_command", required=True)

    ls = links_sub.add_parser("list", help="List links")
    ls.add_argument(
        "--sort",
        choices=[option.value for option in SortOption],
        default=SortOption.CUSTOM.value,
    )
    ls.add_argument("--search", default="", help="Filter by name or description")

    add = links_sub.add_parser("add", help="Add a link")
    add.add_argument("name")
    add.add_argument("url")
    add.add_argument("--description", "-d", default="")
    add.add_argument("--image", type=Path, default=None, help="Image file for the card")

    rm = links_sub.add_parser("remove", help="Remove a link")
    rm.add_argument("id")

    sub.add_parser("settings", help="Show dashboard settings")

    return parser


def _client_parts(args: argparse.Namespace, settings: Settings):
    api = ApiClient(base_url=args.api_url or settings.api_url, timeout=settings.request_timeout)
    cache = FileLocalCache(settings.cache_dir)
    return api, cache


async def _links_command(args: argparse.Namespace, settings: Settings) -> int:
    service = LinkService(*_client_parts(args, settings))

    if args.links_command == "list":
        links = await service.get_sorted_links(args.sort, args.search)
        if not links:
            console.print(
                "No services found matching your search." if args.search else "No services yet."
            )
            return 0
        table = Table(show_header=True, header_style="bold")
        table.add_column("ID", style="dim")
        table.add_column("Name")
        table.add_column("URL", style="cyan")
        table.add_column("Description")
        for link in links:
            table.add_row(link.id, link.name, link.url, link.description)
        console.print(table)
        return 0

    if args.links_command == "add":
        image_url = None
        if args.image is not None:
            try:
                image_url = image_to_data_url(args.image)
            except (OSError, ValueError) as e:
                console.print(f"[red]Cannot use image:[/red] {e}")
                return 1
        link = await service.add_link(args.name, args.url, args.description, image_url)
        console.print(f"Added [bold]{escape(link.name)}[/bold] ({link.id})")
        return 0

    if all(link.id != args.id for link in await service.get_links()):
        console.print(f"[red]No link with id[/red] {escape(args.id)}")
        return 1
    await service.delete_link(args.id)
    console.print(f"Removed {args.id}")
    return 0


async def _settings_command(args: argparse.Namespace, settings: Settings) -> int:
    service = DashboardSettingsService(*_client_parts(args, settings))
    dashboard = await service.get_settings()
    for key, value in dashboard.to_dict().items():
        console.print(f"[bold]{key}[/bold]: {value}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(level="DEBUG" if args.verbose else settings.log_level)

    if args.command == "serve":
        from servicedash.api.serve import run_api_server

        run_api_server(host=args.host, port=args.port, data_dir=args.data_dir, dev=args.dev)
        return 0
    if args.command == "links":
        return asyncio.run(_links_command(args, settings))
    if args.command == "settings":
        return asyncio.run(_settings_command(args, settings))

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
