"""Timestamp detection for raw selected text."""

from __future__ import annotations

import logging
import re

from pytimetransform._constants import (
    MAX_EPOCH_MILLISECONDS,
    MAX_EPOCH_SECONDS,
    MILLISECONDS_DIGITS,
    MIN_EPOCH_MILLISECONDS,
    MIN_EPOCH_SECONDS,
    SECONDS_DIGITS,
)
from pytimetransform._types import TimestampInfo

logger = logging.getLogger(__name__)

DIGITS_RE = re.compile(r"[0-9]+")


def detect_timestamp(text: str) -> TimestampInfo | None:
    """Classify text as a seconds or milliseconds timestamp.

    Length is checked on the trimmed digit string, so leading zeros count.

    Returns:
        TimestampInfo, or None when the text is not a supported timestamp.
    """
    digits = text.strip()
    if not DIGITS_RE.fullmatch(digits):
        return None

    value = int(digits, 10)
    if value <= 0:
        return None

    if len(digits) == SECONDS_DIGITS and MIN_EPOCH_SECONDS <= value <= MAX_EPOCH_SECONDS:
        logger.debug("classified %r as seconds timestamp", digits)
        return TimestampInfo(value=value, is_seconds=True)
    if (
        len(digits) == MILLISECONDS_DIGITS
        and MIN_EPOCH_MILLISECONDS <= value <= MAX_EPOCH_MILLISECONDS
    ):
        logger.debug("classified %r as milliseconds timestamp", digits)
        return TimestampInfo(value=value, is_seconds=False)

    logger.debug("digit string %r is outside the timestamp window", digits)
    return None
