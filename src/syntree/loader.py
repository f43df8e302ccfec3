"""Load annotation text from local files or over HTTP."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Final

import httpx

from syntree.config import (
    SYNTREE_ENCODING,
    SYNTREE_FETCH_BACKOFF_S,
    SYNTREE_FETCH_MAX_RETRIES,
    SYNTREE_FETCH_TIMEOUT_S,
    SYNTREE_USER_AGENT,
)
from syntree.exceptions import LoadError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_URL_SCHEMES: Final[tuple[str, ...]] = ("http://", "https://")
_MAX_REDIRECTS: Final[int] = 5


def is_url(source: str | Path) -> bool:
    return isinstance(source, str) and source.lower().startswith(_URL_SCHEMES)


def load_text(source: str | Path, *, encoding: str = SYNTREE_ENCODING) -> str:
    """Read an annotation from a file path or an http(s) URL.

    Args:
        source: Local path, or a URL starting with ``http://`` or ``https://``.
        encoding: Text encoding used for local files.

    Returns:
        The annotation text.

    Raises:
        LoadError: If the file cannot be read or the URL cannot be fetched.
            The underlying error is chained as ``__cause__``.
    """
    if is_url(source):
        return fetch_with_retries(str(source))

    path = Path(source).expanduser()
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"Failed to read {path}: {exc}") from exc


def fetch_with_retries(url: str, *, client: httpx.Client | None = None) -> str:
    """Fetch text from a URL, retrying transient failures.

    Args:
        url: The URL to fetch.
        client: Optional ``httpx.Client`` to reuse. A new client is created
            for this request when omitted.

    Returns:
        The response body as text.

    Raises:
        LoadError: On 404, or when every attempt failed.
    """

    def do_fetch(http_client: httpx.Client) -> str:
        last_exc: Exception | None = None

        for attempt in range(SYNTREE_FETCH_MAX_RETRIES + 1):
            try:
                response = http_client.get(url)

                if response.status_code == 404:
                    raise LoadError(f"Annotation not found at {url}")

                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = LoadError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    return response.text
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                last_exc = exc

            if attempt < SYNTREE_FETCH_MAX_RETRIES:
                backoff = SYNTREE_FETCH_BACKOFF_S * (2**attempt)
                logger.debug("Retrying %s in %.2fs after %s", url, backoff, last_exc)
                time.sleep(backoff)

        raise LoadError(f"Failed to fetch {url}: {last_exc}") from last_exc

    if client is not None:
        return do_fetch(client)

    with httpx.Client(
        timeout=httpx.Timeout(SYNTREE_FETCH_TIMEOUT_S),
        headers={"User-Agent": SYNTREE_USER_AGENT},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return do_fetch(new_client)
