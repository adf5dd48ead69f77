"""Declarative table of the remote endpoints.

Each entry drives the CLI command, the client call and the field projection
for one endpoint, so all three endpoints share a single handler.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EndpointSpec:
    """How to query, paginate and display one endpoint.

    Args:
        name: CLI command name.
        method: Name of the ``NewsClient`` method serving the endpoint.
        path: URL path under the API base URL.
        items_key: Payload key holding the item list.
        base_fields: Fields always rendered for each item.
        verbose_fields: Fields rendered after the base fields in verbose mode.
        filters: Query filters the endpoint accepts, in CLI option order.
        paginated: Whether ``page``/``pageSize`` apply.
        accepts_query: Whether a free-text query positional is accepted.
        aliases: Extra CLI command names.
        description: Help text for the CLI command.
    """

    name: str
    method: str
    path: str
    items_key: str
    base_fields: tuple[str, ...]
    verbose_fields: tuple[str, ...]
    filters: tuple[str, ...] = ()
    paginated: bool = True
    accepts_query: bool = True
    aliases: tuple[str, ...] = ()
    description: str = ""


SOURCES = EndpointSpec(
    name="sources",
    method="sources",
    path="/sources",
    items_key="sources",
    base_fields=("name", "id"),
    verbose_fields=("description", "country", "category", "url"),
    filters=("language", "category"),
    paginated=False,
    accepts_query=False,
    description="List the news sources available",
)

EVERYTHING = EndpointSpec(
    name="everything",
    method="everything",
    path="/everything",
    items_key="articles",
    base_fields=("title", "author"),
    verbose_fields=("url",),
    filters=("from", "to", "sources", "domains", "language", "sortBy"),
    description="Search every article",
)

TOP_HEADLINES = EndpointSpec(
    name="topHeadlines",
    method="top_headlines",
    path="/top-headlines",
    items_key="articles",
    base_fields=("title", "author"),
    verbose_fields=("url",),
    filters=("country", "category", "sources"),
    aliases=("top-headlines",),
    description="Search breaking news headlines",
)

ENDPOINTS: dict[str, EndpointSpec] = {
    spec.name: spec for spec in (SOURCES, EVERYTHING, TOP_HEADLINES)
}


def get_endpoint(name: str) -> EndpointSpec:
    """Look up an endpoint by command name or alias."""
    for spec in ENDPOINTS.values():
        if name == spec.name or name in spec.aliases or name == spec.method:
            return spec
    msg = f"Unknown endpoint: {name!r}"
    raise ValueError(msg)
