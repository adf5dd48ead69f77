"""CLI for querying NewsAPI endpoints."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any

import httpx
import yaml
from pydantic import BaseModel, ValidationError

from news_pages import __version__
from news_pages.client import NewsAPIClient
from news_pages.config import (
    NewsPagesConfig,
    create_from_config,
    get_default_config_path,
    load_config,
)
from news_pages.data import UnifiedResult
from news_pages.endpoints import ENDPOINTS, EndpointSpec, get_endpoint
from news_pages.errors import NewsPagesError
from news_pages.fetch import PageFetcher
from news_pages.output import persist, project, render
from news_pages.query import normalize_query

logger = logging.getLogger(__name__)

SORT_ORDERS = ("relevancy", "popularity", "publishedAt")


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


# Filter name -> (flags, argparse keyword arguments). The dest of every option
# is the filter name itself, so parsed values map straight onto query params.
FILTER_OPTIONS: dict[str, tuple[tuple[str, ...], dict[str, Any]]] = {
    "from": (
        ("-f", "--from"),
        {"help": "Articles published after this ISO 8601 date (e.g. 2018-07-07T01:07:36)"},
    ),
    "to": (
        ("-t", "--to"),
        {"help": "Articles published before this ISO 8601 date (e.g. 2018-07-07T01:07:36)"},
    ),
    "sources": (
        ("-s", "--sources"),
        {"type": _split_csv, "help": "A list of comma-separated news source ids"},
    ),
    "domains": (
        ("-d", "--domains"),
        {"type": _split_csv, "help": "A list of comma-separated whitelisted domains"},
    ),
    "language": (
        ("-l", "--language"),
        {"help": "Only return results written in this language"},
    ),
    "country": (
        ("-u", "--country"),
        {"help": "Only return articles relevant to this country"},
    ),
    "category": (
        ("-c", "--category"),
        {"help": "Only return results relevant to this category"},
    ),
    "sortBy": (
        ("-o", "--order"),
        {"choices": SORT_ORDERS, "help": 'Order by "relevancy", "popularity", or "publishedAt"'},
    ),
}


class CommandArgs(BaseModel):
    """Validated arguments of one endpoint command."""

    endpoint: str
    query: str | None = None
    filters: dict[str, Any] = {}
    pages: int = 1
    page_size: int | None = None
    verbose: bool = False
    write: Path | None = None

    def raw_params(self, spec: EndpointSpec) -> dict[str, Any]:
        """Collect the raw query parameters, before normalization."""
        params: dict[str, Any] = dict(self.filters)
        if spec.accepts_query:
            params["q"] = self.query
        if spec.paginated:
            params["pageSize"] = self.page_size
        return params


async def run(args: CommandArgs, fetcher: PageFetcher, *, default_page_size: int) -> UnifiedResult:
    """Fetch, display and optionally save the results of one command.

    Args:
        args: Validated command arguments.
        fetcher: Page fetcher bound to a remote client.
        default_page_size: Page size used when none was requested.

    Returns:
        The unified result.
    """
    spec = get_endpoint(args.endpoint)
    params = normalize_query(args.raw_params(spec), default_page_size=default_page_size)

    result = await fetcher.fetch(spec, params, pages=args.pages)

    view = project(result, spec, verbose=args.verbose)
    for line in render(view):
        print(line)

    if args.write is not None:
        path = persist(result, args.write)
        print(f"SAVED TO: {path}")

    return result


async def _execute(
    args: CommandArgs,
    client: NewsAPIClient,
    fetcher: PageFetcher,
    config: NewsPagesConfig,
) -> None:
    async with client:
        await run(args, fetcher, default_page_size=config.defaults.page_size)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser, one subcommand per endpoint."""
    parser = argparse.ArgumentParser(
        prog="news-pages",
        description="Query the NewsAPI search service.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="endpoint", required=True)
    for spec in ENDPOINTS.values():
        sub = subparsers.add_parser(spec.name, aliases=list(spec.aliases), help=spec.description)
        if spec.accepts_query:
            sub.add_argument(
                "query", nargs="?", default=None, help="Keywords or phrase to search for"
            )
        for name in spec.filters:
            flags, kwargs = FILTER_OPTIONS[name]
            sub.add_argument(*flags, dest=name, default=None, **kwargs)
        if spec.paginated:
            sub.add_argument("-p", "--pages", type=int, default=1, help="Number of pages to fetch")
            sub.add_argument(
                "-z",
                "--page-size",
                type=int,
                default=None,
                help="Number of results per page (max 100)",
            )
        sub.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            default=False,
            help=f"If enabled, also show {', '.join(spec.verbose_fields)}",
        )
        sub.add_argument("-w", "--write", type=Path, default=None, help="Save the result to PATH")
    return parser


def _load(config_path: Path | None) -> NewsPagesConfig:
    if config_path is not None:
        return load_config(config_path)
    default_path = get_default_config_path()
    if default_path.exists():
        return load_config(default_path)
    return NewsPagesConfig()


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    ns = build_parser().parse_args(argv)
    spec = get_endpoint(ns.endpoint)

    logging.basicConfig(level=logging.DEBUG if ns.debug else logging.INFO, format="%(message)s")

    try:
        config = _load(ns.config)
        args = CommandArgs(
            endpoint=spec.name,
            query=getattr(ns, "query", None),
            filters={name: getattr(ns, name) for name in spec.filters},
            pages=getattr(ns, "pages", 1),
            page_size=getattr(ns, "page_size", None),
            verbose=ns.verbose,
            write=ns.write,
        )
    except (OSError, ValidationError, yaml.YAMLError) as e:
        logger.error(str(e))
        sys.exit(1)

    if not ns.debug:
        logging.getLogger().setLevel(config.logging.level)

    try:
        client, fetcher = create_from_config(config)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(_execute(args, client, fetcher, config))
    except NewsPagesError as e:
        logger.error(str(e))
        sys.exit(1)
    except httpx.HTTPStatusError as e:
        logger.error(f"NewsAPI request failed: {_describe_status_error(e)}")
        sys.exit(1)
    except httpx.HTTPError as e:
        logger.error(f"NewsAPI request failed: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


def _describe_status_error(error: httpx.HTTPStatusError) -> str:
    """Prefer the service's own error message over the bare status line."""
    try:
        body = error.response.json()
    except ValueError:
        return str(error)
    message = body.get("message") if isinstance(body, dict) else None
    if not message:
        return str(error)
    return f"{error.response.status_code} {body.get('code', '')}: {message}".strip()
