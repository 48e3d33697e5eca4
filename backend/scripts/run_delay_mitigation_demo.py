#!/usr/bin/env python3
"""
Delay Mitigation Demo — Run the rule engine over the sample delay triggers.

Usage:
  python backend/scripts/run_delay_mitigation_demo.py
  python backend/scripts/run_delay_mitigation_demo.py --format table
  python backend/scripts/run_delay_mitigation_demo.py --sample-email
  python backend/scripts/run_delay_mitigation_demo.py --email-file alert.txt
  cat alert.txt | python backend/scripts/run_delay_mitigation_demo.py --email-file -

Reports go to stdout; log events go to stderr.
"""

import argparse
import json
import os
import sys
from pathlib import Path

# Add backend to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import structlog  # noqa: E402

from core.config import OUTPUT_FORMATS, get_settings  # noqa: E402
from core.log_config import configure_logging  # noqa: E402
from integrations.email_trigger import parse_email_content  # noqa: E402
from supply_chain.mitigation import DelayMitigationEngine  # noqa: E402
from supply_chain.reporting import (  # noqa: E402
    format_recommendation_detail,
    recommendation_to_dict,
    to_json,
    to_table,
)
from supply_chain.samples import SAMPLE_DELAY_EMAIL, SAMPLE_DELAY_TRIGGERS  # noqa: E402

logger = structlog.get_logger()

RULE = "=" * 50


def _run_batch_demo(engine: DelayMitigationEngine, output_format: str) -> None:
    recommendations = engine.process_delay_triggers(SAMPLE_DELAY_TRIGGERS)
    logger.info("demo.batch_processed", triggers=len(recommendations))

    if output_format == "json":
        print(to_json(recommendations))
        return
    if output_format == "table":
        print(to_table(recommendations))
        return
    if output_format == "detail":
        print("\n\n".join(format_recommendation_detail(i, rec) for i, rec in enumerate(recommendations, start=1)))
        return

    print("=== Delivery Delay Mitigation Demo ===\n")
    print("JSON Output:")
    print(to_json(recommendations))
    print(f"\n{RULE}\n")
    print("Table Output:")
    print(to_table(recommendations))
    print(f"\n{RULE}\n")
    print("Detailed Analysis:")
    for index, rec in enumerate(recommendations, start=1):
        print()
        print(format_recommendation_detail(index, rec))


def _read_email(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _run_email_demo(engine: DelayMitigationEngine, email_body: str) -> int:
    trigger = parse_email_content(email_body)
    if trigger is None:
        print("Failed to parse email content")
        return 1

    recommendation = engine.analyze_delay(trigger)
    payload = {
        "trigger": trigger.model_dump(mode="json"),
        "recommendation": recommendation_to_dict(recommendation),
    }
    print(json.dumps(payload, indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="ChainWatch delay mitigation demo")
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=settings.demo_output_format,
        help="Report format for the sample trigger batch (default: %(default)s)",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--email-file", default=None, help="Parse an alert email from a file ('-' for stdin)")
    source.add_argument("--sample-email", action="store_true", help="Parse the built-in sample alert email")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL for this run")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    engine = DelayMitigationEngine()

    if args.sample_email:
        return _run_email_demo(engine, SAMPLE_DELAY_EMAIL)
    if args.email_file is not None:
        try:
            email_body = _read_email(args.email_file)
        except OSError as exc:
            logger.error("demo.email_unreadable", path=args.email_file, error=str(exc))
            print(f"Failed to read email file: {args.email_file}")
            return 1
        return _run_email_demo(engine, email_body)

    _run_batch_demo(engine, args.format)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
