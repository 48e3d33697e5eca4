"""
Delay Mitigation Engine — Rule-based response to inbound delivery delays.

When a supplier shipment slips, the planner needs to know whether stock runs
out before it lands and, if so, what to do about it. The engine evaluates a
fixed, ordered set of heuristic rules against one delay trigger, ranks every
action that fired, and writes a short rationale.

Rules (evaluated in order, several may fire):
  1. Air freight       delay > inventory, no alternates, no other-DC stock   (95)
  2. Alternate source  fastest alternate lead time <= delay + inventory     (85)
  3. Inventory buffer  other DC holds stock → transfer min(stock, cap)     (90)
  4. Production adjust production impacted, delay <= inventory + slack   (75)
  5. Dynamic reroute   other DC is closer to the demand point             (80)
  6. Fallback          nothing fired and delay > inventory → air freight  (70)

Ranking: confidence desc, then priority high > medium > low, then rule order.
"""

from collections.abc import Callable, Iterable

import structlog

from core.config import get_settings
from supply_chain.models import (
    ActionTemplate,
    DelayTrigger,
    MitigationAction,
    MitigationRecommendation,
    MitigationType,
    Priority,
)
from supply_chain.proximity import ProximityTable

logger = structlog.get_logger()

ACTION_TEMPLATES: dict[MitigationType, ActionTemplate] = {
    MitigationType.AIR_FREIGHT: ActionTemplate(
        description="Expedite shipment via air freight",
        action="Ship remaining units via Air Freight",
        priority=Priority.HIGH,
        estimated_cost=2500,
        estimated_time=2,
    ),
    MitigationType.ALTERNATE_SOURCING: ActionTemplate(
        description="Switch to alternate supplier",
        action="Use alternate supplier for remaining order",
        priority=Priority.MEDIUM,
        estimated_cost=500,
        estimated_time=5,
    ),
    MitigationType.INVENTORY_BUFFER: ActionTemplate(
        description="Use inventory from other DC",
        action="Transfer stock from other distribution center",
        priority=Priority.LOW,
        estimated_cost=200,
        estimated_time=1,
    ),
    MitigationType.PRODUCTION_ADJUSTMENT: ActionTemplate(
        description="Adjust production schedule",
        action="Reschedule production to accommodate delay",
        priority=Priority.MEDIUM,
        estimated_cost=1000,
        estimated_time=3,
    ),
    MitigationType.DYNAMIC_REROUTING: ActionTemplate(
        description="Reroute from closer DC",
        action="Source from closer distribution center",
        priority=Priority.LOW,
        estimated_cost=300,
        estimated_time=2,
    ),
}

_missing_templates = set(MitigationType) - set(ACTION_TEMPLATES)
if _missing_templates:
    raise RuntimeError(f"No action template for: {sorted(t.value for t in _missing_templates)}")

CONFIDENCE = {
    "air_freight": 95,
    "alternate_sourcing": 85,
    "inventory_buffer": 90,
    "production_adjustment": 75,
    "dynamic_rerouting": 80,
    "fallback_air_freight": 70,
}

CONFIDENCE_BANDS = {"high": 90, "medium": 75}


def build_action(
    mitigation_type: MitigationType,
    confidence: int,
    action: str | None = None,
) -> MitigationAction:
    """Fill a catalog template with a per-trigger confidence and optional action text."""
    template = ACTION_TEMPLATES[mitigation_type]
    return MitigationAction(
        type=mitigation_type,
        description=template.description,
        action=action if action is not None else template.action,
        priority=template.priority,
        estimated_cost=template.estimated_cost,
        estimated_time=template.estimated_time,
        confidence=confidence,
    )


def rank_actions(actions: Iterable[MitigationAction]) -> list[MitigationAction]:
    """Sort by confidence, then priority rank. Stable, so rule order breaks the remaining ties."""
    return sorted(actions, key=lambda a: (-a.confidence, -a.priority.rank))


def classify_delay_severity(delay_days: int, inventory_days_remaining: int) -> str:
    """Bucket a delay against remaining cover: critical, at_risk or on_track."""
    if delay_days > inventory_days_remaining:
        return "critical"
    elif delay_days > inventory_days_remaining - 2:
        return "at_risk"
    return "on_track"


def classify_confidence(confidence: int) -> str:
    if confidence >= CONFIDENCE_BANDS["high"]:
        return "high"
    elif confidence >= CONFIDENCE_BANDS["medium"]:
        return "medium"
    return "low"


def generate_analysis(trigger: DelayTrigger, action: MitigationAction | None) -> str:
    criticality = "CRITICAL" if trigger.is_critical else "MODERATE"
    summary = (
        f"Delay is {criticality} - {trigger.delay_days} days delay with only "
        f"{trigger.inventory_days_remaining} days of inventory remaining. "
        f"Reason: {trigger.reason}. "
    )
    if action is None:
        return summary + "No mitigation action required; monitor the revised ETA."
    return (
        summary
        + f"Recommended action: {action.description} with {action.confidence}% confidence. "
        + f"Estimated cost: ${action.estimated_cost} and {action.estimated_time} days to implement."
    )


class DelayMitigationEngine:
    """Map delay triggers to ranked mitigation recommendations.

    Stateless apart from its configuration: the proximity table and the two
    rule tunables are fixed at construction.
    """

    def __init__(
        self,
        proximity: ProximityTable | None = None,
        transfer_cap_units: int | None = None,
        production_slack_days: int | None = None,
    ):
        settings = get_settings()
        self.proximity = proximity if proximity is not None else ProximityTable()
        self.transfer_cap_units = (
            transfer_cap_units if transfer_cap_units is not None else settings.mitigation_transfer_cap_units
        )
        self.production_slack_days = (
            production_slack_days if production_slack_days is not None else settings.mitigation_production_slack_days
        )
        self._rules: tuple[Callable[[DelayTrigger], MitigationAction | None], ...] = (
            self._air_freight_rule,
            self._alternate_sourcing_rule,
            self._inventory_buffer_rule,
            self._production_adjustment_rule,
            self._dynamic_rerouting_rule,
        )

    # ── Rules ────────────────────────────────────────────────────────────

    def _air_freight_rule(self, trigger: DelayTrigger) -> MitigationAction | None:
        if trigger.is_critical and not trigger.alternate_suppliers and not trigger.other_dc_stock:
            return build_action(MitigationType.AIR_FREIGHT, CONFIDENCE["air_freight"])
        return None

    def _alternate_sourcing_rule(self, trigger: DelayTrigger) -> MitigationAction | None:
        if not trigger.alternate_suppliers:
            return None
        # min() keeps the first supplier on equal lead times
        best = min(trigger.alternate_suppliers, key=lambda s: s.lead_time)
        if best.lead_time > trigger.delay_days + trigger.inventory_days_remaining:
            return None
        return build_action(
            MitigationType.ALTERNATE_SOURCING,
            CONFIDENCE["alternate_sourcing"],
            action=f"Use {best.name} instead of {trigger.supplier_name}",
        )

    def _inventory_buffer_rule(self, trigger: DelayTrigger) -> MitigationAction | None:
        if not trigger.other_dc_stock or trigger.other_dc_stock <= 0:
            return None
        quantity = min(trigger.other_dc_stock, self.transfer_cap_units)
        location = trigger.other_dc_location or "other DC"
        return build_action(
            MitigationType.INVENTORY_BUFFER,
            CONFIDENCE["inventory_buffer"],
            action=f"Transfer {quantity} units from {location}",
        )

    def _production_adjustment_rule(self, trigger: DelayTrigger) -> MitigationAction | None:
        if trigger.production_impact and (
            trigger.delay_days <= trigger.inventory_days_remaining + self.production_slack_days
        ):
            return build_action(MitigationType.PRODUCTION_ADJUSTMENT, CONFIDENCE["production_adjustment"])
        return None

    def _dynamic_rerouting_rule(self, trigger: DelayTrigger) -> MitigationAction | None:
        dc, demand = trigger.other_dc_location, trigger.demand_location
        if not dc or not demand or not self.proximity.is_closer(dc, demand):
            return None
        return build_action(
            MitigationType.DYNAMIC_REROUTING,
            CONFIDENCE["dynamic_rerouting"],
            action=f"Source from {dc} (closer to {demand})",
        )

    # ── Evaluation ───────────────────────────────────────────────────────

    def evaluate_rules(self, trigger: DelayTrigger) -> tuple[MitigationAction, ...]:
        """Every action that fired, in rule order (unranked)."""
        fired = tuple(action for action in (rule(trigger) for rule in self._rules) if action is not None)
        if not fired and trigger.is_critical:
            fired = (build_action(MitigationType.AIR_FREIGHT, CONFIDENCE["fallback_air_freight"]),)
        return fired

    def analyze_delay(self, trigger: DelayTrigger) -> MitigationRecommendation:
        """Analyze one delay trigger and pick the best mitigation."""
        ranked = rank_actions(self.evaluate_rules(trigger))
        primary = ranked[0] if ranked else None

        if primary is None:
            logger.info("mitigation.no_action", sku=trigger.sku, supplier=trigger.supplier_name)
        else:
            logger.debug(
                "mitigation.analyzed",
                sku=trigger.sku,
                action=primary.type.value,
                confidence=primary.confidence,
                alternatives=len(ranked) - 1,
            )

        return MitigationRecommendation(
            sku=trigger.sku,
            supplier_name=trigger.supplier_name,
            delay_days=trigger.delay_days,
            reason=trigger.reason,
            inventory_days_remaining=trigger.inventory_days_remaining,
            recommended_action=primary,
            alternative_actions=tuple(ranked[1:]),
            analysis=generate_analysis(trigger, primary),
        )

    def process_delay_triggers(self, triggers: Iterable[DelayTrigger]) -> list[MitigationRecommendation]:
        """Analyze each trigger independently; output order matches input order."""
        return [self.analyze_delay(trigger) for trigger in triggers]


def analyze_delay(trigger: DelayTrigger) -> MitigationRecommendation:
    return DelayMitigationEngine().analyze_delay(trigger)


def process_delay_triggers(triggers: Iterable[DelayTrigger]) -> list[MitigationRecommendation]:
    return DelayMitigationEngine().process_delay_triggers(triggers)
