"""HTTP client for the MS Academic Knowledge API Evaluate endpoint."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

from msacademic_sync._version import __version__
from msacademic_sync.config import SyncConfig


class ResponseKind(Enum):
    SUCCESS = "success"
    DOMAIN_ERROR = "domain_error"
    NO_RESPONSE = "no_response"


def is_domain_error(status: int) -> bool:
    """HTTP statuses for which the API returns a structured error body."""
    return 400 <= status <= 410


@dataclass
class RemoteResponse:
    """Outcome of one query: the final HTTP status and, if kept, the body.

    ``status`` is 0 when no HTTP response was received at all.
    """

    status: int
    kind: ResponseKind
    content: str | None = None

    @classmethod
    def classify(cls, status: int, content: str | None) -> RemoteResponse:
        if status == 200:
            return cls(status, ResponseKind.SUCCESS, content)
        if is_domain_error(status):
            return cls(status, ResponseKind.DOMAIN_ERROR, content)
        return cls(status, ResponseKind.NO_RESPONSE, None)

    @property
    def is_success(self) -> bool:
        return self.kind is ResponseKind.SUCCESS

    @property
    def is_domain_error(self) -> bool:
        return self.kind is ResponseKind.DOMAIN_ERROR


class AcademicClient:
    """Evaluate-endpoint client with bounded retries and a fixed crawl delay.

    Every attempt is followed by a ``crawl_delay`` pause, so consecutive
    queries are always spaced out. A 200 or a 400-410 ends the attempts
    early; timeouts, connection errors and any other status are retried
    until ``crawl_retry`` attempts have been made.
    """

    def __init__(
        self,
        config: SyncConfig,
        logger: logging.Logger,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Run configuration (endpoint, key, attributes, retry policy)
            logger: Logger for request tracing and failures
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self.uri = config.uri
        self.attributes = config.attributes
        self.answer_count = config.answer_count
        self.crawl_delay = config.crawl_delay
        self.crawl_retry = config.crawl_retry
        self.logger = logger
        user_agent = f"msacademic-sync/{__version__}"
        if config.repository_url:
            user_agent += f"; {config.repository_url}"
        self.client = httpx.Client(
            timeout=httpx.Timeout(config.timeout),
            headers={
                "Accept": "application/json",
                "Accept-Charset": "utf-8",
                "User-Agent": user_agent,
                "Ocp-Apim-Subscription-Key": config.api_key or "",
            },
            transport=transport,
        )

    def request_params(self, expression: str) -> dict[str, Any]:
        return {
            "expr": expression,
            "model": "latest",
            "count": self.answer_count,
            "offset": 0,
            "attributes": self.attributes,
        }

    def submit(self, expression: str) -> RemoteResponse:
        """Run a query expression and classify the final outcome."""
        params = self.request_params(expression)
        self.logger.debug("MS Academic Knowledge API query: %s", expression)

        status = 0
        content: str | None = None
        for attempt in range(1, self.crawl_retry + 1):
            try:
                resp = self.client.get(self.uri, params=params)
                status = resp.status_code
                content = resp.text
            except httpx.HTTPError as e:
                status = 0
                content = None
                self.logger.debug("Request #%d failed: %s", attempt, e)
            else:
                self.logger.debug("Request #%d: HTTP %d", attempt, status)
            time.sleep(self.crawl_delay)
            if status == 200 or is_domain_error(status):
                break

        response = RemoteResponse.classify(status, content)
        if response.kind is ResponseKind.NO_RESPONSE:
            self.logger.warning(
                "No response from MS Academic Knowledge API after %d attempts (last status %d) for %s",
                self.crawl_retry,
                status,
                expression,
            )
        return response

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> AcademicClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
