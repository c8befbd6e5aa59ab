"""HTTP GET with a fixed-delay retry policy."""

import json
import logging
import time
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Callable, Optional

from wallpaper_selector.errors import FetchExhausted


logger = logging.getLogger(__name__)

DEFAULT_RETRIES = 3
RETRY_DELAY_MS = 500


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a retried operation: a value or the last error."""

    value: Any = None
    error: Optional[BaseException] = None
    attempts: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class HttpResponse:
    """Body and status of a successful GET."""

    url: str
    status: int
    body: bytes

    def json(self) -> Any:
        return json.loads(self.body.decode())


def retry(
    operation: Callable[[], Any],
    retries: int = DEFAULT_RETRIES,
    delay_ms: int = RETRY_DELAY_MS,
    sleep: Callable[[float], None] = time.sleep,
    describe: str = "operation",
) -> FetchResult:
    """
    Run an operation until it succeeds or the attempts run out.

    The delay between attempts is fixed; there is no backoff and no jitter.
    Every kind of exception counts as a retriable failure.

    Args:
        operation: Zero-argument callable
        retries: Total number of attempts (>= 1)
        delay_ms: Milliseconds to wait between attempts
        sleep: Sleep function, takes seconds
        describe: Label used in log messages

    Returns:
        FetchResult holding the value, or the error of the last attempt
    """
    if retries < 1:
        raise ValueError(f"retries must be at least 1, got: {retries}")

    last_error = None
    for attempt in range(1, retries + 1):
        try:
            return FetchResult(value=operation(), attempts=attempt)
        except Exception as e:
            last_error = e
            logger.warning(f"Attempt {attempt} failed for {describe}: {e}")
            if attempt < retries:
                sleep(delay_ms / 1000)

    return FetchResult(error=last_error, attempts=retries)


def _get(url: str, timeout: Optional[float], opener: Callable) -> HttpResponse:
    """Single GET attempt; raises on any non-2xx status."""
    logger.debug(f"GET {url}")
    kwargs = {} if timeout is None else {'timeout': timeout}
    with opener(url, **kwargs) as response:
        status = getattr(response, 'status', 200)
        if not (200 <= status < 300):
            raise urllib.error.HTTPError(url, status, "Non-success status", None, None)
        return HttpResponse(url=url, status=status, body=response.read())


def fetch_with_retry(
    url: str,
    retries: int = DEFAULT_RETRIES,
    delay_ms: int = RETRY_DELAY_MS,
    timeout: Optional[float] = None,
    opener: Optional[Callable] = None,
    sleep: Optional[Callable[[float], None]] = None,
) -> HttpResponse:
    """
    GET a URL, retrying on any failure.

    A 4xx is retried the same as a 5xx, a refused connection or a timeout.

    Args:
        url: URL to fetch
        retries: Total number of attempts
        delay_ms: Milliseconds to wait between attempts
        timeout: Socket timeout in seconds (None = urllib default)
        opener: urlopen-compatible callable (default urllib.request.urlopen)
        sleep: Sleep function, takes seconds (default time.sleep)

    Returns:
        HttpResponse of the first successful attempt

    Raises:
        FetchExhausted: If every attempt failed
    """
    opener = opener or urllib.request.urlopen
    result = retry(
        lambda: _get(url, timeout, opener),
        retries=retries,
        delay_ms=delay_ms,
        sleep=sleep or time.sleep,
        describe=url,
    )
    if result.ok:
        return result.value

    raise FetchExhausted(url, result.attempts, result.error) from result.error
