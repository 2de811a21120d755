from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable

from ..attendance.model import ClassifiedRecord, SkippedRecord
from ..common.datetime_utils import coerce_timestamp, to_wall_clock

logger = logging.getLogger(__name__)


def timestamped(records: Iterable[ClassifiedRecord]) -> tuple[list[tuple[ClassifiedRecord, datetime]], list[SkippedRecord]]:
    """Pair each record with a usable timestamp; collect the rest as skipped.

    Timestamps come back naive (wall clock as recorded), so one batch may
    mix naive and offset-carrying values and still sort.
    """
    good: list[tuple[ClassifiedRecord, datetime]] = []
    skipped: list[SkippedRecord] = []

    for index, record in enumerate(records):
        ts = coerce_timestamp(getattr(record, "timestamp", None))
        if ts is None:
            reason = f"malformed timestamp: {getattr(record, 'timestamp', None)!r}"
            logger.warning("Skipping record #%d: %s", index, reason)
            skipped.append(SkippedRecord(index=index, item=record, reason=reason))
            continue
        good.append((record, to_wall_clock(ts)))

    return good, skipped
