"""
Email Delay Trigger Parser

Turns a supplier/logistics delay alert, pasted as free text, into a
DelayTrigger for the mitigation engine.

Expected lines (anywhere in the body, in any order):
    SKU: ECU-101
    Supplier: AlphaElectronics
    ETA: 2024-02-15
    Delay: 7 days
    Reason: Port congestion
    Inventory: 2 days remaining

Each line is checked for the markers in the order above and only the first
marker found is used. Numbers are read like a leading integer ("7 days" → 7).
Lines that fail to parse are ignored; the email is rejected (None) only when
one of the six fields is still missing at the end.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any

import structlog
from pydantic import ValidationError

from supply_chain.models import DelayTrigger

logger = structlog.get_logger()

# Marker → (DelayTrigger field, value kind), in per-line checking order
FIELD_MARKERS: dict[str, tuple[str, str]] = {
    "SKU:": ("sku", "text"),
    "Supplier:": ("supplier_name", "text"),
    "ETA:": ("original_eta", "date"),
    "Delay:": ("delay_days", "int"),
    "Reason:": ("reason", "text"),
    "Inventory:": ("inventory_days_remaining", "int"),
}

REQUIRED_FIELDS = tuple(field_name for field_name, _ in FIELD_MARKERS.values())

ETA_FORMATS = ("%m/%d/%Y", "%b %d, %Y", "%B %d, %Y")

_LEADING_INT = re.compile(r"^[+-]?\d+")


def parse_leading_int(raw: str) -> int | None:
    """Integer prefix of `raw` ("7 days" → 7); None when there is no digit to read."""
    match = _LEADING_INT.match(raw.strip())
    if match is None:
        return None
    try:
        return int(match.group(0))
    except ValueError:
        # Past the interpreter's int-string digit limit
        return None


def parse_eta(raw: str) -> date | None:
    raw = raw.strip()
    if not raw:
        return None
    try:
        return datetime.fromisoformat(raw).date()
    except ValueError:
        pass
    for fmt in ETA_FORMATS:
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    return None


def _convert(raw: str, kind: str) -> Any:
    if kind == "int":
        return parse_leading_int(raw)
    if kind == "date":
        return parse_eta(raw)
    return raw or None


def extract_fields(email_body: str) -> dict[str, Any]:
    """Scan every line and collect marker values; later lines overwrite earlier ones."""
    fields: dict[str, Any] = {}
    for line in email_body.split("\n"):
        for marker, (field_name, kind) in FIELD_MARKERS.items():
            if marker not in line:
                continue
            # Text between this marker and any repeat of it on the same line
            raw = line.split(marker)[1].strip()
            fields[field_name] = _convert(raw, kind)
            break
    return fields


def parse_email_content(email_body: str) -> DelayTrigger | None:
    """
    Extract a DelayTrigger from an alert email.

    Returns None instead of a partially populated trigger when any of
    sku, supplier, ETA, delay, reason or inventory is missing or unreadable.
    """
    fields = extract_fields(email_body)
    missing = [name for name in REQUIRED_FIELDS if fields.get(name) is None]
    if missing:
        logger.info("email_trigger.incomplete", missing=missing)
        return None

    try:
        trigger = DelayTrigger(**fields)
    except ValidationError as exc:
        logger.warning("email_trigger.invalid", sku=fields.get("sku"), errors=exc.error_count())
        return None

    logger.debug("email_trigger.parsed", sku=trigger.sku, supplier=trigger.supplier_name)
    return trigger
