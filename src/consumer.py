"""Sequential page consumer for the dataproxy ``/page`` endpoint.

Walks a paginated result one page at a time:
 - POSTs ``{"hash", "token"}`` to ``<url>/page``
 - times the network call separately from decoding the body into a ``ResultSet``
 - follows ``meta.next`` until the server hands back an empty token

Every failure surfaces as ``TransportError``. There is no retry; the first
failing page ends the walk and nothing gathered before it is reported.
Runtime HTTP callable is injectable for deterministic tests.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional, Protocol

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from app_logging import get_logger
from exceptions import TransportError
from models import PageRequest, ResultSet

DEFAULT_URL = "http://localhost:8090"
PAGE_PATH = "/page"


def _one_line(error: Exception) -> str:
    """Collapse an exception message onto a single line."""
    if isinstance(error, ValidationError):
        parts = []
        for err in error.errors(include_url=False):
            loc = ".".join(str(p) for p in err["loc"])
            parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
        return "; ".join(parts)
    return "; ".join(line.strip() for line in str(error).splitlines() if line.strip())


class HTTPClient(Protocol):
    def __call__(self, url: str, data: bytes, headers: dict[str, str]) -> tuple[int, bytes]:  # noqa: D401
        ...


@dataclass
class PageResult:
    next_token: str
    record_count: int
    request_duration: int  # ns
    decode_duration: int  # ns


@dataclass
class Consumption:
    """Aggregate of a full pagination walk.

    On failure every counter is zero, ``record_counts`` is empty and ``error``
    holds the exception that stopped the walk.
    """

    page_count: int = 0
    record_counts: list[int] = field(default_factory=list)
    request_duration: int = 0
    decode_duration: int = 0
    error: Optional[TransportError] = None

    @property
    def total_records(self) -> int:
        return sum(self.record_counts)

    @classmethod
    def failed(cls, error: TransportError) -> "Consumption":
        return cls(error=error)


class PageConsumer:
    """Fetches pages for a ``(hash, token)`` pair from one dataproxy."""

    name: str = "dataproxy"

    def __init__(self, url: str = DEFAULT_URL, http: HTTPClient | None = None):
        self.url = url
        self._http = http or self._default_http
        self._session = None
        self._log = get_logger("dataproxy.consumer")

    # ----------------- Public API -----------------
    def fetch_page(self, hash: str, token: str) -> PageResult:
        """Retrieve and decode a single page.

        Raises:
            TransportError: when the request cannot be encoded, sent, or its
                response decoded.
        """
        try:
            body = PageRequest(hash=hash, token=token).model_dump_json().encode("utf-8")
        except (ValidationError, PydanticSerializationError, UnicodeEncodeError, TypeError) as e:
            raise TransportError(self.name, f"encode request: {_one_line(e)}") from e

        endpoint = self.url + PAGE_PATH
        self._log.debug("request", extra={"url": endpoint, "token": token})

        t1 = time.perf_counter_ns()
        try:
            status, raw = self._http(endpoint, data=body, headers={"Content-Type": "application/json"})
        except TransportError:
            raise
        except Exception as e:  # broad catch to wrap network errors
            raise TransportError(self.name, _one_line(e)) from e
        t2 = time.perf_counter_ns()

        if not 200 <= status < 300:
            self._log.warning("unexpected_status", extra={"status": status, "token": token})

        try:
            result = ResultSet.model_validate_json(raw)
        except ValidationError as e:
            raise TransportError(self.name, f"decode response: {_one_line(e)}") from e
        t3 = time.perf_counter_ns()

        page = PageResult(
            next_token=result.meta.next_token,
            record_count=result.record_count,
            request_duration=t2 - t1,
            decode_duration=t3 - t2,
        )
        self._log.debug(
            "page",
            extra={
                "token": token,
                "next": page.next_token,
                "records": page.record_count,
                "request_ns": page.request_duration,
                "decode_ns": page.decode_duration,
            },
        )
        return page

    def fetch_all_pages(self, hash: str, first_token: str) -> Consumption:
        """Follow the token chain from ``first_token`` until it runs out.

        An empty ``first_token`` is valid and yields an empty consumption.
        """
        consumption = Consumption()
        next_token = first_token
        while next_token:
            try:
                page = self.fetch_page(hash, next_token)
            except TransportError as e:
                self._log.error(
                    "fetch_failed",
                    extra={"error": str(e), "token": next_token, "pages": consumption.page_count},
                )
                return Consumption.failed(e)

            next_token = page.next_token
            consumption.page_count += 1
            consumption.record_counts.append(page.record_count)
            consumption.request_duration += page.request_duration
            consumption.decode_duration += page.decode_duration

        self._log.info("consumed", extra={"pages": consumption.page_count, "records": consumption.total_records})
        return consumption

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    # Default HTTP client using requests; one session so pages reuse the connection
    def _default_http(self, url: str, data: bytes, headers: dict[str, str]) -> tuple[int, bytes]:  # noqa: D401
        import requests

        if self._session is None:
            self._session = requests.Session()
        r = self._session.post(url, data=data, headers=headers)
        return r.status_code, r.content


__all__ = ["PageConsumer", "PageResult", "Consumption", "HTTPClient", "DEFAULT_URL"]
