"""Synchronous HTTP transport for the upload API.

Each call performs exactly one request (no retries):

1. POST the form fields (and optional multipart file) to an endpoint.
2. On ``2xx`` -- return the parsed JSON object.
3. On any other status -- raise :class:`CloudupUploadFailedError`.
4. On any transport failure (timeout, dropped connection, proxy) --
   raise :class:`CloudupUploadFailedError` wrapping the httpx exception.
5. On a body that is not a JSON object -- raise
   :class:`CloudupMalformedResponseError`.
"""

from __future__ import annotations

import json as _json
import sys
import time
from typing import Any

import httpx

from cloudup.config import ServiceConfig
from cloudup.errors import CloudupMalformedResponseError, CloudupUploadFailedError
from cloudup.observability import NoopMetricsHook, get_logger

log = get_logger("cloudup.transport")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _error_message(response: httpx.Response) -> str:
    """Extract the service's error message, falling back to the raw body."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:500]
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and "message" in error:
            return str(error["message"])
        if "message" in body:
            return str(body["message"])
    return response.text[:500]


def _raise_for_status(response: httpx.Response, url: str) -> None:
    """Raise :class:`CloudupUploadFailedError` for non-2xx responses."""
    status = response.status_code
    if 200 <= status < 300:
        return
    raise CloudupUploadFailedError(
        message=f"Upload to {url} failed with status {status}: {_error_message(response)}",
        context={"status_code": status, "url": url},
    )


def _parse_body(response: httpx.Response, url: str) -> dict[str, Any]:
    """Return the JSON object carried by a success response."""
    try:
        body = response.json()
    except ValueError as exc:
        raise CloudupMalformedResponseError(
            message=f"Response from {url} is not valid JSON",
            context={"url": url, "body": response.text[:500]},
            cause=exc,
        ) from exc
    if not isinstance(body, dict):
        raise CloudupMalformedResponseError(
            message=f"Response from {url} is not a JSON object",
            context={"url": url, "body": body},
        )
    return body


def _dump_payload(
    url: str,
    form: dict[str, Any],
    response_status: int | None,
    response_body: Any | None,
    secret: str | None = None,
) -> None:
    """Write a redacted debug dump of the request/response to stderr."""
    from cloudup.utils.redact import redact

    dump: dict[str, Any] = {"method": "POST", "url": url, "request_form": form}
    if response_status is not None:
        dump["response_status"] = response_status
    if response_body is not None:
        dump["response_body"] = response_body
    print(
        _json.dumps(redact(dump, secret), indent=2, default=str),
        file=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Sync transport
# ---------------------------------------------------------------------------

class UploadTransport:
    """Synchronous HTTP transport for signed form posts.

    Parameters
    ----------
    config:
        The :class:`ServiceConfig` controlling timeout, proxy and metrics.
    client:
        Optional pre-built :class:`httpx.Client` (e.g. one mounted on an
        ``httpx.MockTransport``).  When given, the transport does not own
        it and :meth:`close` leaves it open.
    """

    def __init__(
        self,
        config: ServiceConfig,
        client: httpx.Client | None = None,
    ) -> None:
        self._config = config
        self._metrics = config.metrics if config.metrics is not None else NoopMetricsHook()
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(config.timeout_seconds),
            proxy=config.http_proxy,
        )

    def post(
        self,
        url: str,
        data: dict[str, Any],
        files: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """POST *data* (and optional multipart *files*) to *url*.

        Returns
        -------
        dict
            Parsed JSON response body.

        Raises
        ------
        CloudupUploadFailedError
            On non-2xx responses and transport-level failures.
        CloudupMalformedResponseError
            When a success response does not carry a JSON object.
        """
        t0 = time.monotonic()
        try:
            response = self._client.post(url, data=data, files=files)
        except httpx.TransportError as exc:
            self._metrics.increment(
                "cloudup.requests_total",
                tags={"url": url, "status": "error"},
            )
            log.warning(
                "Request transport error",
                extra={
                    "extra_fields": {
                        "op": "request",
                        "url": url,
                        "error": str(exc),
                    }
                },
            )
            raise CloudupUploadFailedError(
                message=f"Transport error on POST {url}: {exc}",
                context={"url": url, "status_code": None},
                cause=exc,
            ) from exc

        elapsed_ms = (time.monotonic() - t0) * 1000
        tags = {"url": url, "status": str(response.status_code)}
        self._metrics.increment("cloudup.requests_total", tags=tags)
        self._metrics.timing("cloudup.request_duration_ms", elapsed_ms, tags=tags)

        if self._config.debug_dump_payload:
            try:
                resp_body: Any = response.json()
            except ValueError:
                resp_body = response.text[:1000]
            _dump_payload(
                url, data, response.status_code, resp_body,
                secret=self._config.api_secret,
            )

        _raise_for_status(response, url)
        return _parse_body(response, url)

    def close(self) -> None:
        """Close the underlying HTTP client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> UploadTransport:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
