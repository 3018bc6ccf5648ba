"""Shared utilities: UTC datetimes and id generators."""

from app.shared.utils.datetime import (
    ensure_utc,
    next_timestamp,
    parse_iso_utc,
    utc_now,
)
from app.shared.utils.generators import generate_cuid, generate_prefixed_id

__all__ = [
    "generate_cuid",
    "generate_prefixed_id",
    "utc_now",
    "ensure_utc",
    "parse_iso_utc",
    "next_timestamp",
]
