"""Write a unified result to disk as JSON."""

import json
import logging
from pathlib import Path

from news_pages.data import UnifiedResult
from news_pages.errors import PersistenceError

logger = logging.getLogger(__name__)


def persist(result: UnifiedResult, destination: Path | str) -> Path:
    """Serialize the full result as UTF-8 JSON, overwriting ``destination``.

    Every original item field is kept, not just the projected ones.

    Args:
        result: The unified result.
        destination: File path to write.

    Returns:
        The path written.

    Raises:
        PersistenceError: If the file cannot be written.
    """
    path = Path(destination)
    text = json.dumps(result.to_payload(), ensure_ascii=False)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise PersistenceError(path, e.strerror or str(e)) from e

    logger.debug("Wrote %d bytes to %s", len(text.encode("utf-8")), path)
    return path
