"""Network link check."""

import logging

import requests  # type: ignore

from ...constants import REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


def is_url_valid(url: str, timeout: float = REQUEST_TIMEOUT) -> bool:
    """Return True only if a single GET of ``url`` answers with status 200.

    Timeouts, connection errors, malformed URLs and any other status count as invalid.
    No retries.
    """
    try:
        response = requests.get(url, timeout=timeout)
    except (requests.RequestException, ValueError) as exc:
        logger.info(f"Request failed for {url}: {exc}")
        return False

    if response.status_code != 200:
        logger.info(f"Unexpected status {response.status_code} for {url}")
        return False
    return True
