"""
Delay Mitigation Models — Delay triggers in, ranked mitigation actions out.

Input records (DelayTrigger, AlternateSupplier) are pydantic models so that
structurally invalid events (negative delays, empty SKUs) are rejected at the
boundary. Engine outputs (MitigationAction, MitigationRecommendation) are
frozen dataclasses built fresh for every analysis.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from pydantic import BaseModel, Field


class MitigationType(str, Enum):
    """The five fixed response strategies."""

    AIR_FREIGHT = "air-freight"
    ALTERNATE_SOURCING = "alternate-sourcing"
    INVENTORY_BUFFER = "inventory-buffer"
    PRODUCTION_ADJUSTMENT = "production-adjustment"
    DYNAMIC_REROUTING = "dynamic-rerouting"

    @property
    def method_label(self) -> str:
        """Upper-case label used in tabular reports, e.g. AIR FREIGHT."""
        return self.value.replace("-", " ").upper()


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.HIGH: 3, Priority.MEDIUM: 2, Priority.LOW: 1}


# ── Input records ─────────────────────────────────────────────────────────


class AlternateSupplier(BaseModel):
    """A supplier that could take over the delayed order."""

    name: str = Field(min_length=1)
    lead_time: float = Field(ge=0)  # days
    reliability: float = Field(ge=0, le=100)  # on-time percentage
    id: str | None = None
    email: str | None = None
    phone: str | None = None
    rating: float | None = Field(default=None, ge=1, le=5)
    specialties: list[str] = Field(default_factory=list)
    location: str | None = None
    is_preferred: bool = False

    model_config = {"frozen": True}


class DelayTrigger(BaseModel):
    """An observed delay event for one SKU at one supplier."""

    sku: str = Field(min_length=1)
    supplier_name: str = Field(min_length=1)
    original_eta: date
    delay_days: int = Field(ge=0)
    reason: str = Field(min_length=1)
    inventory_days_remaining: int = Field(ge=0)
    alternate_suppliers: tuple[AlternateSupplier, ...] = ()
    other_dc_stock: int | None = Field(default=None, ge=0)
    other_dc_location: str | None = None
    demand_location: str | None = None
    production_impact: bool = False

    model_config = {"frozen": True, "str_strip_whitespace": True}

    @property
    def is_critical(self) -> bool:
        """Stock runs out before the delayed shipment lands."""
        return self.delay_days > self.inventory_days_remaining


# ── Engine outputs ────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ActionTemplate:
    """Canonical, trigger-independent fields of a mitigation action."""

    description: str
    action: str
    priority: Priority
    estimated_cost: int  # currency units
    estimated_time: int  # days


@dataclass(frozen=True)
class MitigationAction:
    """One candidate response to a delay."""

    type: MitigationType
    description: str
    action: str
    priority: Priority
    estimated_cost: int
    estimated_time: int
    confidence: int  # 0-100


@dataclass(frozen=True)
class MitigationRecommendation:
    """Engine output for one trigger.

    recommended_action is None when no rule applies and the delay is covered
    by on-hand inventory.
    """

    sku: str
    supplier_name: str
    delay_days: int
    reason: str
    inventory_days_remaining: int
    recommended_action: MitigationAction | None
    alternative_actions: tuple[MitigationAction, ...]
    analysis: str

    @property
    def ranked_actions(self) -> tuple[MitigationAction, ...]:
        if self.recommended_action is None:
            return ()
        return (self.recommended_action, *self.alternative_actions)
