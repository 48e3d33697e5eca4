"""
Recommendation Reports — JSON, fixed-column table, and per-SKU detail text.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from supply_chain.mitigation import classify_confidence, classify_delay_severity
from supply_chain.models import MitigationAction, MitigationRecommendation

TABLE_HEADERS = [
    "SKU",
    "Supplier",
    "Delay Days",
    "Inventory Days",
    "Mitigation Method",
    "Action",
    "Confidence",
    "Cost",
]


def _action_to_dict(action: MitigationAction | None) -> dict[str, Any] | None:
    if action is None:
        return None
    payload = asdict(action)
    payload["type"] = action.type.value
    payload["priority"] = action.priority.value
    return payload


def recommendation_to_dict(rec: MitigationRecommendation) -> dict[str, Any]:
    """JSON-ready dict; alternative_actions is omitted when there are none."""
    payload: dict[str, Any] = {
        "sku": rec.sku,
        "supplier_name": rec.supplier_name,
        "delay_days": rec.delay_days,
        "reason": rec.reason,
        "inventory_days_remaining": rec.inventory_days_remaining,
        "recommended_action": _action_to_dict(rec.recommended_action),
    }
    if rec.alternative_actions:
        payload["alternative_actions"] = [_action_to_dict(a) for a in rec.alternative_actions]
    payload["analysis"] = rec.analysis
    return payload


def to_json(recommendations: list[MitigationRecommendation]) -> str:
    return json.dumps([recommendation_to_dict(r) for r in recommendations], indent=2)


def _table_row(rec: MitigationRecommendation) -> list[str]:
    action = rec.recommended_action
    if action is None:
        method, text, confidence, cost = "NONE", "-", "-", "-"
    else:
        method = action.type.method_label
        text = action.action
        confidence = f"{action.confidence}%"
        cost = f"${action.estimated_cost}"
    return [
        rec.sku,
        rec.supplier_name,
        str(rec.delay_days),
        str(rec.inventory_days_remaining),
        method,
        text,
        confidence,
        cost,
    ]


def to_table(recommendations: list[MitigationRecommendation]) -> str:
    """Render the primary action of each recommendation as a padded text table."""
    rows = [_table_row(rec) for rec in recommendations]
    widths = [max([len(header)] + [len(row[i]) for row in rows]) for i, header in enumerate(TABLE_HEADERS)]

    def format_row(row: list[str]) -> str:
        return " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(row))

    separator = "-+-".join("-" * width for width in widths)
    return "\n".join([format_row(TABLE_HEADERS), separator, *(format_row(row) for row in rows)])


def format_recommendation_detail(index: int, rec: MitigationRecommendation) -> str:
    """Numbered multi-line summary of one recommendation, alternatives included."""
    lines = [
        f"{index}. {rec.sku} - {rec.supplier_name}",
        f"   Delay: {rec.delay_days} days ({rec.reason})",
        f"   Inventory: {rec.inventory_days_remaining} days remaining",
        f"   Severity: {classify_delay_severity(rec.delay_days, rec.inventory_days_remaining)}",
    ]
    action = rec.recommended_action
    if action is None:
        lines.append("   Recommendation: none")
    else:
        lines += [
            f"   Recommendation: {action.description}",
            f"   Action: {action.action}",
            f"   Confidence: {action.confidence}% ({classify_confidence(action.confidence)})",
            f"   Cost: ${action.estimated_cost}",
            f"   Time: {action.estimated_time} days",
        ]
    lines.append(f"   Analysis: {rec.analysis}")

    if rec.alternative_actions:
        lines.append("   Alternative actions:")
        lines += [f"     - {alt.description} ({alt.confidence}% confidence)" for alt in rec.alternative_actions]
    return "\n".join(lines)
