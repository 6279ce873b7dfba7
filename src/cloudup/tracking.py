"""Optional MongoDB bookkeeping of successful uploads.

:class:`TrackingStore` binds a MongoDB session and a collection named
after the service's account.  Each successful upload inserts one
:class:`cloudup.models.TrackingRecord`; records are never updated or
deleted here.  Insert failures are reported to the caller as ``False``
and logged, never raised, so that tracking cannot invalidate an upload
that already succeeded.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from cloudup.config import split_descriptor
from cloudup.errors import CloudupStoreUnavailableError
from cloudup.models import TrackingRecord
from cloudup.observability import NoopMetricsHook, get_logger

log = get_logger("cloudup.tracking")

STORE_SCHEME = "mongodb"
"""Scheme accepted by :meth:`TrackingStore.attach`."""

DEFAULT_DATABASE = "cloudinary"
"""Database used when the descriptor carries no path."""

SERVER_SELECTION_TIMEOUT_MS = 5000


class TrackingStore:
    """Live MongoDB session and collection handles.

    Use :meth:`attach` rather than the constructor.

    Parameters
    ----------
    client:
        An open :class:`pymongo.MongoClient`.
    collection:
        The collection records are inserted into.
    metrics:
        Optional metrics backend.
    """

    def __init__(self, client: MongoClient, collection: Collection, metrics=None) -> None:
        self.client = client
        self.collection = collection
        self._metrics = metrics if metrics is not None else NoopMetricsHook()

    @classmethod
    def attach(
        cls,
        descriptor: str,
        account: str,
        *,
        client_factory: Callable[..., Any] = MongoClient,
        metrics=None,
    ) -> TrackingStore:
        """Open a session on *descriptor* and resolve the account collection.

        Parameters
        ----------
        descriptor:
            ``mongodb://<host>/<db_name>``.
        account:
            Account (cloud) name; used as the collection name.
        client_factory:
            Callable building the client, :class:`pymongo.MongoClient` by
            default.

        Raises
        ------
        CloudupInvalidDescriptorError
            If *descriptor* is not a parsable URI.
        CloudupUnsupportedSchemeError
            If the scheme is not ``mongodb``.
        CloudupStoreUnavailableError
            If the server cannot be reached.
        """
        parts = split_descriptor(descriptor, STORE_SCHEME)
        database = parts.path.strip("/") or DEFAULT_DATABASE

        client = None
        try:
            client = client_factory(
                descriptor,
                serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS,
            )
            client.admin.command("ping")
            collection = client[database][account]
        except PyMongoError as exc:
            if client is not None:
                client.close()
            raise CloudupStoreUnavailableError(
                message=f"Tracking store at {parts.hostname} is unavailable: {exc}",
                context={"database": database, "collection": account},
                cause=exc,
            ) from exc

        log.info(
            "Tracking store attached",
            extra={
                "extra_fields": {
                    "op": "attach",
                    "database": database,
                    "collection": account,
                }
            },
        )
        return cls(client, collection, metrics=metrics)

    def record(self, record: TrackingRecord) -> bool:
        """Insert *record*; return ``False`` (and log) on failure."""
        try:
            self.collection.insert_one(record.to_document())
        except PyMongoError as exc:
            self._metrics.increment("cloudup.tracking_failure_total")
            log.warning(
                "Tracking record insert failed",
                extra={
                    "extra_fields": {
                        "op": "track",
                        "public_id": record.public_id,
                        "error": str(exc),
                    }
                },
            )
            return False
        return True

    def close(self) -> None:
        """Close the underlying session."""
        self.client.close()
