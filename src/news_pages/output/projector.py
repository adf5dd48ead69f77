"""Project a unified result onto the fields shown to the user."""

from news_pages.data import ProjectedItem, ProjectedView, ProjectionSummary, UnifiedResult
from news_pages.endpoints import EndpointSpec
from news_pages.errors import EmptyOrMalformedResult

SEPARATOR = "-" * 20


def project(
    result: UnifiedResult,
    endpoint: EndpointSpec,
    *,
    verbose: bool = False,
) -> ProjectedView:
    """Select the displayed fields of every item, in result order.

    Base fields come first; in verbose mode the endpoint's extended fields
    follow for the same item. The summary carries the processed count and,
    for multi-page results, the reported total.

    Args:
        result: The unified result to display.
        endpoint: Endpoint the result came from.
        verbose: Whether to include the extended fields.

    Returns:
        The projected view.

    Raises:
        EmptyOrMalformedResult: If the result has no item collection.
    """
    if result.items is None:
        raise EmptyOrMalformedResult(result.items_key)

    fields = endpoint.base_fields + (endpoint.verbose_fields if verbose else ())
    records = tuple(
        ProjectedItem(fields=tuple((name, item.get(name)) for name in fields))
        for item in result.items
    )
    summary = ProjectionSummary(
        processed=len(records),
        total_results=result.total_results if result.is_multi_page else None,
    )
    return ProjectedView(records=records, summary=summary)


def render(view: ProjectedView) -> list[str]:
    """Turn a projected view into output lines."""
    lines: list[str] = []
    for record in view.records:
        lines.extend(f"{name}: {value}" for name, value in record.fields)
        lines.append(SEPARATOR)
    lines.append(f"RESULTS PROCESSED: {view.summary.processed}")
    if view.summary.total_results is not None:
        lines.append(f"TOTAL RESULTS: {view.summary.total_results}")
    return lines
