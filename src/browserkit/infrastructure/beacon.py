"""Fire-and-forget delivery of formatted records to a remote endpoint."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from concurrent.futures import Future, ThreadPoolExecutor

import httpx

from browserkit.domain.shared.constants import MAX_URL_LENGTH
from browserkit.domain.shared.exceptions import UrlTooLongError
from browserkit.infrastructure.formatters import QueryStringFormatter

BEACON_TIMEOUT: float = 5.0


class BeaconSender(ABC):
    """One-way transport for a fully built beacon URL."""

    @abstractmethod
    def send(self, url: str) -> None:
        """Dispatch ``url`` without waiting for a response."""
        ...

    def close(self) -> None:
        """Release transport resources."""


class HttpxBeaconSender(BeaconSender):
    """Issues GET requests on a single background worker.

    Responses and failures are never observed; delivery is best effort.
    Closing drops queued sends instead of draining them.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float = BEACON_TIMEOUT,
    ) -> None:
        self._client = client or httpx.Client(timeout=timeout)
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="beacon")

    def send(self, url: str) -> Future[httpx.Response]:
        return self._executor.submit(self._client.get, url)

    def close(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
        self._client.close()


class BeaconHandler(logging.Handler):
    """Ships each record as ``url + query_string`` through a :class:`BeaconSender`.

    URLs longer than :data:`MAX_URL_LENGTH` are not sent; the failure goes to
    :meth:`logging.Handler.handleError` and never reaches the log caller.
    """

    def __init__(
        self,
        url: str,
        sender: BeaconSender | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        super().__init__(level)
        self.url = url
        self.sender = sender or HttpxBeaconSender()
        self.setFormatter(QueryStringFormatter())

    def build_url(self, record: logging.LogRecord) -> str:
        complete_url = self.url + self.format(record)
        if len(complete_url) > MAX_URL_LENGTH:
            raise UrlTooLongError(len(complete_url), MAX_URL_LENGTH)
        return complete_url

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.sender.send(self.build_url(record))
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        self.acquire()
        try:
            self.sender.close()
        finally:
            self.release()
            super().close()
