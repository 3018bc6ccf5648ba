"""Shared utilities: telemetry (logging) and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.utils import (
    ensure_utc,
    generate_cuid,
    generate_prefixed_id,
    parse_iso_utc,
    utc_now,
)

__all__ = [
    "generate_cuid",
    "generate_prefixed_id",
    "utc_now",
    "ensure_utc",
    "parse_iso_utc",
]
