"""
Unit tests for the email delay-trigger parser.
"""

from datetime import date

import pytest

from integrations.email_trigger import extract_fields, parse_email_content, parse_eta, parse_leading_int
from supply_chain.mitigation import analyze_delay
from supply_chain.models import MitigationType
from supply_chain.samples import SAMPLE_DELAY_EMAIL

COMPLETE_BODY = "\n".join(
    [
        "SKU: ECU-101",
        "Supplier: AlphaElectronics",
        "ETA: 2024-02-15",
        "Delay: 7",
        "Reason: Port congestion",
        "Inventory: 2",
    ]
)


def _without(marker: str) -> str:
    return "\n".join(line for line in COMPLETE_BODY.split("\n") if not line.startswith(marker))


class TestParseEmailContent:
    def test_sample_email_parses(self):
        trigger = parse_email_content(SAMPLE_DELAY_EMAIL)

        assert trigger is not None
        assert trigger.sku == "ECU-101"
        assert trigger.supplier_name == "AlphaElectronics"
        assert trigger.original_eta == date(2024, 2, 15)
        assert trigger.delay_days == 7
        assert trigger.reason == "Port congestion"
        assert trigger.inventory_days_remaining == 2
        assert trigger.alternate_suppliers == ()
        assert trigger.other_dc_stock is None

    def test_bare_marker_block_parses(self):
        trigger = parse_email_content(COMPLETE_BODY)
        assert trigger is not None
        assert trigger.delay_days == 7

    @pytest.mark.parametrize("marker", ["SKU:", "Supplier:", "ETA:", "Delay:", "Reason:", "Inventory:"])
    def test_missing_marker_returns_none(self, marker):
        assert parse_email_content(_without(marker)) is None

    def test_non_numeric_delay_returns_none(self):
        body = COMPLETE_BODY.replace("Delay: 7", "Delay: about a week")
        assert parse_email_content(body) is None

    def test_unreadable_eta_returns_none(self):
        body = COMPLETE_BODY.replace("ETA: 2024-02-15", "ETA: sometime next month")
        assert parse_email_content(body) is None

    def test_empty_value_returns_none(self):
        body = COMPLETE_BODY.replace("Reason: Port congestion", "Reason:   ")
        assert parse_email_content(body) is None

    def test_negative_delay_is_rejected_without_raising(self):
        body = COMPLETE_BODY.replace("Delay: 7", "Delay: -3")
        assert parse_email_content(body) is None

    def test_oversized_number_returns_none(self):
        body = COMPLETE_BODY.replace("Delay: 7", "Delay: " + "9" * 5000)
        assert parse_email_content(body) is None

    def test_empty_text_returns_none(self):
        assert parse_email_content("") is None

    def test_crlf_line_endings(self):
        trigger = parse_email_content(COMPLETE_BODY.replace("\n", "\r\n"))
        assert trigger is not None
        assert trigger.sku == "ECU-101"
        assert trigger.inventory_days_remaining == 2

    def test_later_lines_overwrite_earlier(self):
        trigger = parse_email_content(COMPLETE_BODY + "\nDelay: 9 days (revised)")
        assert trigger.delay_days == 9

    def test_parsed_trigger_feeds_engine(self):
        rec = analyze_delay(parse_email_content(SAMPLE_DELAY_EMAIL))
        assert rec.recommended_action.type == MitigationType.AIR_FREIGHT
        assert rec.recommended_action.confidence == 95


class TestExtractFields:
    def test_first_marker_in_checking_order_wins(self):
        fields = extract_fields("Reason: Supplier: strike at the plant")
        assert fields == {"supplier_name": "strike at the plant"}

    def test_marker_inside_sentence(self):
        fields = extract_fields("Please note the affected SKU: PCB-501")
        assert fields["sku"] == "PCB-501"

    def test_markers_are_case_sensitive(self):
        assert extract_fields("notification of a delivery delay:\nsku: ECU-101") == {}

    def test_repeated_marker_keeps_first_segment(self):
        fields = extract_fields("SKU: ECU-101 SKU: ECU-999")
        assert fields["sku"] == "ECU-101"


class TestValueParsing:
    @pytest.mark.parametrize(
        "raw, expected",
        [("7", 7), ("7 days", 7), ("  12abc", 12), ("+4", 4), ("-3", -3), ("2 days remaining", 2)],
    )
    def test_leading_int(self, raw, expected):
        assert parse_leading_int(raw) == expected

    @pytest.mark.parametrize("raw", ["", "seven", "days 7", "-"])
    def test_leading_int_unreadable(self, raw):
        assert parse_leading_int(raw) is None

    def test_leading_int_too_many_digits(self):
        assert parse_leading_int("9" * 5000 + " days") is None

    @pytest.mark.parametrize(
        "raw",
        ["2024-02-15", "2024-02-15T08:30:00", "02/15/2024", "Feb 15, 2024", "February 15, 2024"],
    )
    def test_eta_formats(self, raw):
        assert parse_eta(raw) == date(2024, 2, 15)

    @pytest.mark.parametrize("raw", ["", "TBD", "2024-13-45"])
    def test_eta_unreadable(self, raw):
        assert parse_eta(raw) is None
