"""
Inbound integration parsers.

Converts external, semi-structured inputs into ChainWatch domain records:
  - Email delay alerts  (free text → DelayTrigger)

Usage:
    from integrations import parse_email_content

    trigger = parse_email_content(email_body)
    if trigger is not None:
        recommendation = DelayMitigationEngine().analyze_delay(trigger)
"""

from integrations.email_trigger import FIELD_MARKERS, extract_fields, parse_email_content

__all__ = ["FIELD_MARKERS", "extract_fields", "parse_email_content"]
