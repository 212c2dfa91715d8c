from __future__ import annotations

"""
Record Source Reader.

Streams raw record lines from a local file, standard input or a remote
HTTP(S) resource. Every failure to reach the source is reported as a
SourceUnavailableError so callers deal with a single error kind.
"""

import logging
import sys
from typing import Iterator

import requests

from leafpaths import __version__
from leafpaths.domain.config import DEFAULT_REQUEST_TIMEOUT
from leafpaths.domain.errors import SourceUnavailableError

logger = logging.getLogger(__name__)

USER_AGENT = f"LeafPaths-Client/{__version__}"
STDIN_SOURCE = "-"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def is_remote_source(source: str) -> bool:
    """Check whether the source identifier is an HTTP(S) URL."""
    return source.lower().startswith(("http://", "https://"))


def stream_record_lines(source: str, timeout: float = DEFAULT_REQUEST_TIMEOUT) -> Iterator[str]:
    """
    Generate a line-by-line stream of raw records.

    Local files are decoded as UTF-8 with the 'replace' strategy so stray
    bytes end up in labels instead of aborting the read.

    Args:
        source: File path, '-' for stdin, or an http(s) URL.
        timeout: Network timeout in seconds for remote sources.

    Yields:
        str: Raw lines, line terminators included for local sources.

    Raises:
        SourceUnavailableError: If the source cannot be opened or read.
    """
    if not source:
        raise SourceUnavailableError(source, "no source given")

    if source == STDIN_SOURCE:
        logger.debug("Reading records from standard input.")
        yield from sys.stdin
        return

    if is_remote_source(source):
        yield from _stream_remote(source, timeout)
        return

    yield from _stream_local(source)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _stream_local(path: str) -> Iterator[str]:
    logger.debug(f"Reading records from file: {path}")
    try:
        f = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        raise SourceUnavailableError(path, e.strerror or str(e)) from e

    with f:
        try:
            for line in f:
                yield line
        except OSError as e:
            raise SourceUnavailableError(path, e.strerror or str(e)) from e


def _stream_remote(url: str, timeout: float) -> Iterator[str]:
    headers = {"User-Agent": USER_AGENT}
    logger.debug(f"Fetching records from: {url}")

    try:
        response = requests.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise SourceUnavailableError(url, f"timed out after {timeout}s") from e
    except requests.exceptions.RequestException as e:
        raise SourceUnavailableError(url, str(e)) from e

    size_kb = len(response.content) / 1024
    logger.info(f"Network: Record source downloaded ({size_kb:.1f} KB).")

    # Records are UTF-8 regardless of the charset the server advertises
    yield from response.content.decode("utf-8", errors="replace").splitlines()
