"""
Demonstration delay triggers and alert email for the mitigation dashboard.
"""

from datetime import date

from supply_chain.models import AlternateSupplier, DelayTrigger

SAMPLE_DELAY_TRIGGERS: tuple[DelayTrigger, ...] = (
    DelayTrigger(
        sku="ECU-101",
        supplier_name="AlphaElectronics",
        original_eta=date(2024, 2, 15),
        delay_days=7,
        reason="Port congestion",
        inventory_days_remaining=2,
        alternate_suppliers=[
            AlternateSupplier(
                id="supplier-b",
                name="BetaElectronics",
                email="orders@betaelectronics.com",
                phone="+1-555-0123",
                lead_time=5,
                reliability=85,
                rating=4,
                specialties=["electronics", "automotive"],
                location="Taiwan",
            )
        ],
    ),
    DelayTrigger(
        sku="MOTOR-204",
        supplier_name="DriveMakers",
        original_eta=date(2024, 2, 18),
        delay_days=10,
        reason="Capacity issues",
        inventory_days_remaining=5,
        other_dc_stock=300,
        other_dc_location="Chicago DC",
    ),
    DelayTrigger(
        sku="PCB-501",
        supplier_name="GreenCircuits",
        original_eta=date(2024, 2, 12),
        delay_days=3,
        reason="Customs hold",
        inventory_days_remaining=1,
        alternate_suppliers=[
            AlternateSupplier(
                id="supplier-c",
                name="CircuitPro",
                email="orders@circuitpro.com",
                phone="+1-555-0456",
                lead_time=4,
                reliability=90,
                rating=4.5,
                specialties=["pcb", "electronics"],
                location="Mexico",
            )
        ],
    ),
    DelayTrigger(
        sku="SENSOR-302",
        supplier_name="SensorTech",
        original_eta=date(2024, 2, 20),
        delay_days=5,
        reason="Quality inspection delay",
        inventory_days_remaining=8,
        production_impact=True,
    ),
    DelayTrigger(
        sku="BATTERY-405",
        supplier_name="PowerCell",
        original_eta=date(2024, 2, 22),
        delay_days=12,
        reason="Transportation strike",
        inventory_days_remaining=3,
        other_dc_stock=150,
        other_dc_location="Los Angeles DC",
        demand_location="San Francisco",
    ),
    DelayTrigger(
        sku="DISPLAY-608",
        supplier_name="ScreenMasters",
        original_eta=date(2024, 2, 25),
        delay_days=15,
        reason="Component shortage",
        inventory_days_remaining=1,
        alternate_suppliers=[
            AlternateSupplier(
                id="supplier-d",
                name="DisplayPro",
                email="orders@displaypro.com",
                phone="+1-555-0789",
                lead_time=8,
                reliability=75,
                rating=3.5,
                specialties=["displays", "screens"],
                location="South Korea",
            )
        ],
    ),
)

SAMPLE_DELAY_EMAIL = """
Subject: Delivery Delay Alert - ECU-101

Dear Supply Chain Team,

We have received notification of a delivery delay:

SKU: ECU-101
Supplier: AlphaElectronics
ETA: 2024-02-15
Delay: 7 days
Reason: Port congestion
Inventory: 2 days remaining

Please take appropriate action.

Best regards,
Logistics Team
"""
