"""Retention of local files after a successful upload.

A :class:`RetentionFilter` holds an optional compiled regular expression.
After each successful live upload of a local file the orchestrator asks
the filter whether to keep the file; matching paths survive, every other
uploaded file is deleted.  Without a pattern nothing is retained.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from cloudup.errors import CloudupInvalidPatternError
from cloudup.observability import NoopMetricsHook, get_logger

log = get_logger("cloudup.retention")


def _as_posix(path: str | os.PathLike[str]) -> str:
    return os.fspath(path).replace("\\", "/")


class RetentionFilter:
    """Decide which uploaded local files are preserved.

    Parameters
    ----------
    pattern:
        Optional initial pattern; see :meth:`set_pattern`.
    metrics:
        Optional metrics backend.
    """

    def __init__(self, pattern: str = "", metrics=None) -> None:
        self._pattern: re.Pattern[str] | None = None
        self._metrics = metrics if metrics is not None else NoopMetricsHook()
        self.set_pattern(pattern)

    @property
    def pattern(self) -> re.Pattern[str] | None:
        """The compiled pattern, or ``None`` when nothing is retained."""
        return self._pattern

    def set_pattern(self, pattern: str) -> None:
        """Compile and store *pattern*.

        An empty pattern clears the filter (retain nothing).  An invalid
        pattern raises and leaves the current pattern untouched.

        Raises
        ------
        CloudupInvalidPatternError
            If *pattern* is not a valid regular expression.
        """
        if not pattern:
            self._pattern = None
            return
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            raise CloudupInvalidPatternError(
                message=f"Invalid retention pattern {pattern!r}: {exc}",
                context={"pattern": pattern, "position": exc.pos},
                cause=exc,
            ) from exc
        self._pattern = compiled

    def should_keep(self, path: str | os.PathLike[str]) -> bool:
        """Return ``True`` if *path* matches the retention pattern."""
        if self._pattern is None:
            return False
        return self._pattern.search(_as_posix(path)) is not None

    def apply(self, path: str | os.PathLike[str]) -> bool:
        """Keep or delete the uploaded file at *path*.

        Returns
        -------
        bool
            ``True`` if the file was kept, ``False`` if it was deleted.
        """
        if self.should_keep(path):
            self._metrics.increment("cloudup.files_kept_total")
            log.debug(
                "Keeping uploaded file",
                extra={"extra_fields": {"op": "retention", "path": _as_posix(path)}},
            )
            return True

        Path(path).unlink(missing_ok=True)
        self._metrics.increment("cloudup.files_deleted_total")
        log.debug(
            "Deleted uploaded file",
            extra={"extra_fields": {"op": "retention", "path": _as_posix(path)}},
        )
        return False
