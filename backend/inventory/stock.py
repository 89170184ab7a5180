"""
Stored Produce Lots — quantities, value, shelf life and alerts.

Derived fields kept in sync on every write:
  available_quantity = max(0, current_quantity - reserved_quantity)
  total_market_value = market_value_per_unit * current_quantity
  days_in_storage    = today - storage_date
  profit_margin      = (market - purchase) / purchase * 100, on update,
                       refreshed when either price changes

Status auto-transitions (EXPIRED past the expiry date, DAMAGED on a major
infestation) only fire from AVAILABLE, so a status set explicitly by the
caller is kept.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import Decimal

import structlog
from dateutil.relativedelta import relativedelta

from core.identifiers import IdentifierGenerator
from core.numbers import HUNDRED, ZERO, money, percent, ratio, to_decimal
from db.enums import InventoryAlert, InventoryStatus, PackagingCondition, PestStatus
from db.records import changed, stamp_created, stamp_updated

logger = structlog.get_logger()

EXPIRY_WARNING_DAYS = 7
HIGH_LOSS_PERCENT = Decimal("5")
PRICE_FIELDS = ("purchase_price_per_unit", "market_value_per_unit")
HIGH_VALUE_THRESHOLD = Decimal("100000")
QUALITY_DEGRADATION_LIMIT = Decimal("10")


# ── Lifecycle ──────────────────────────────────────────────────────────────


def recompute(inventory, today: date):
    current = to_decimal(inventory.current_quantity)
    if current is not None:
        reserved = to_decimal(inventory.reserved_quantity) or ZERO
        inventory.available_quantity = money(max(ZERO, current - reserved))

    if inventory.storage_date is not None:
        inventory.days_in_storage = (today - inventory.storage_date).days

    value = to_decimal(inventory.market_value_per_unit)
    if value is not None and current is not None:
        inventory.total_market_value = money(value * current)
    return inventory


def on_create(inventory, now: datetime, ids: IdentifierGenerator) -> None:
    stamp_created(inventory, now, ids)
    today = now.date()
    if inventory.storage_date is None:
        inventory.storage_date = today
    if inventory.expiry_date is None and inventory.expected_shelf_life_days is not None:
        inventory.expiry_date = inventory.storage_date + timedelta(days=inventory.expected_shelf_life_days)
    if inventory.next_inspection_date is None:
        inventory.next_inspection_date = today + relativedelta(months=1)
    recompute(inventory, today)


def on_update(inventory, now: datetime) -> None:
    stamp_updated(inventory, now)
    today = now.date()
    recompute(inventory, today)
    _auto_transition(inventory, today)
    _refresh_profit_margin(inventory)


def _refresh_profit_margin(inventory) -> None:
    """Margin over purchase price; follows price changes unless set in the same write."""
    if changed(inventory, "profit_margin"):
        return
    if inventory.profit_margin is not None and not changed(inventory, *PRICE_FIELDS):
        return
    purchase = to_decimal(inventory.purchase_price_per_unit)
    market = to_decimal(inventory.market_value_per_unit)
    if purchase and purchase > 0 and market is not None:
        inventory.profit_margin = percent(market - purchase, purchase)
    else:
        inventory.profit_margin = None


def _auto_transition(inventory, today: date) -> None:
    if inventory.status is not InventoryStatus.AVAILABLE:
        return
    if inventory.expiry_date is not None and today > inventory.expiry_date:
        inventory.status = InventoryStatus.EXPIRED
        logger.info("inventory.auto_expired", inventory_id=inventory.id, expiry_date=str(inventory.expiry_date))
    elif inventory.pest_status is PestStatus.MAJOR_INFESTATION:
        inventory.status = InventoryStatus.DAMAGED
        logger.info("inventory.auto_damaged", inventory_id=inventory.id)


# ── Reservations ───────────────────────────────────────────────────────────


def can_reserve(inventory, quantity) -> bool:
    quantity = to_decimal(quantity)
    available = to_decimal(inventory.available_quantity)
    return (
        inventory.status is InventoryStatus.AVAILABLE
        and quantity is not None
        and quantity > 0
        and available is not None
        and quantity <= available
    )


def reserve(inventory, quantity) -> None:
    """Move `quantity` from available to reserved; no-op when it does not fit."""
    if not can_reserve(inventory, quantity):
        logger.debug("inventory.transition_skipped", action="reserve", inventory_id=inventory.id)
        return
    reserved = to_decimal(inventory.reserved_quantity) or ZERO
    inventory.reserved_quantity = money(reserved + to_decimal(quantity))
    inventory.available_quantity = money(to_decimal(inventory.available_quantity) - to_decimal(quantity))


def can_release(inventory, quantity) -> bool:
    quantity = to_decimal(quantity)
    reserved = to_decimal(inventory.reserved_quantity) or ZERO
    return quantity is not None and quantity > 0 and quantity <= reserved


def release(inventory, quantity) -> None:
    if not can_release(inventory, quantity):
        logger.debug("inventory.transition_skipped", action="release", inventory_id=inventory.id)
        return
    inventory.reserved_quantity = money(to_decimal(inventory.reserved_quantity) - to_decimal(quantity))
    current = to_decimal(inventory.current_quantity) or ZERO
    inventory.available_quantity = money(max(ZERO, current - inventory.reserved_quantity))


# ── Predicates ─────────────────────────────────────────────────────────────


def is_expiring_soon(inventory, today: date) -> bool:
    if inventory.expiry_date is None:
        return False
    return (inventory.expiry_date - today).days <= EXPIRY_WARNING_DAYS


def is_expired(inventory, today: date) -> bool:
    return inventory.expiry_date is not None and today > inventory.expiry_date


def is_low_stock(inventory) -> bool:
    available = to_decimal(inventory.available_quantity)
    minimum = to_decimal(inventory.minimum_stock_level)
    return available is not None and minimum is not None and available <= minimum


def is_overstock(inventory) -> bool:
    current = to_decimal(inventory.current_quantity)
    maximum = to_decimal(inventory.maximum_stock_level)
    return current is not None and maximum is not None and current >= maximum


def needs_reorder(inventory) -> bool:
    available = to_decimal(inventory.available_quantity)
    reorder = to_decimal(inventory.reorder_level)
    return available is not None and reorder is not None and available <= reorder


def has_high_loss(inventory) -> bool:
    loss = to_decimal(inventory.loss_percentage)
    return loss is not None and loss >= HIGH_LOSS_PERCENT


def has_pest_issue(inventory) -> bool:
    return inventory.pest_status is not None and inventory.pest_status is not PestStatus.PEST_FREE


def requires_inspection(inventory, today: date) -> bool:
    return inventory.next_inspection_date is not None and today > inventory.next_inspection_date


def is_high_value(inventory) -> bool:
    total = to_decimal(inventory.total_market_value)
    return total is not None and total >= HIGH_VALUE_THRESHOLD


def is_profitable(inventory) -> bool:
    margin = to_decimal(inventory.profit_margin)
    return margin is not None and margin > 0


def is_sustainable(inventory) -> bool:
    return bool(inventory.organic_certified or inventory.fair_trade_certified or inventory.local_sourcing)


def is_quality_degrading(inventory) -> bool:
    rate = to_decimal(inventory.quality_degradation_rate)
    if rate is None or inventory.days_in_storage is None:
        return False
    return rate * inventory.days_in_storage >= QUALITY_DEGRADATION_LIMIT


def in_optimal_sale_period(inventory, today: date) -> bool:
    period = (inventory.optimal_sale_period or "").strip()
    if not period:
        return True
    return today.strftime("%B").lower() in period.lower()


# ── Derived views ──────────────────────────────────────────────────────────


def storage_capacity_utilization(inventory) -> Decimal:
    return percent(inventory.current_quantity, inventory.storage_capacity) or money(ZERO)


def current_value(inventory) -> Decimal | None:
    """Market value of the lot after recorded losses."""
    current = to_decimal(inventory.current_quantity)
    value = to_decimal(inventory.market_value_per_unit)
    if current is None or value is None:
        return None
    loss_share = ratio(inventory.loss_percentage or ZERO, HUNDRED)
    return money(current * value * (1 - loss_share))


def remaining_shelf_life(inventory, today: date) -> str:
    if inventory.expiry_date is None:
        return "Unknown"
    days = (inventory.expiry_date - today).days
    if days <= 0:
        return "Expired"
    if days == 1:
        return "1 day"
    return f"{days} days"


def _moisture_score(moisture: Decimal) -> int:
    if Decimal("10") <= moisture <= Decimal("15"):
        return 4
    if moisture <= Decimal("20"):
        return 2
    return 1


def storage_quality_score(inventory) -> str:
    scores = []
    if isinstance(inventory.packaging_condition, PackagingCondition):
        scores.append(inventory.packaging_condition.score)
    if isinstance(inventory.pest_status, PestStatus):
        scores.append(inventory.pest_status.score)
    moisture = to_decimal(inventory.moisture_content)
    if moisture is not None:
        scores.append(_moisture_score(moisture))
    if not scores:
        return "N/A"

    average = sum(scores) / len(scores)
    if average >= 3.5:
        return "Excellent"
    if average >= 2.5:
        return "Good"
    if average >= 1.5:
        return "Fair"
    return "Poor"


def active_alerts(inventory, today: date) -> list[InventoryAlert]:
    alerts = []
    if is_expiring_soon(inventory, today):
        alerts.append(InventoryAlert.EXPIRING_SOON)
    if is_low_stock(inventory):
        alerts.append(InventoryAlert.LOW_STOCK)
    if has_high_loss(inventory):
        alerts.append(InventoryAlert.HIGH_LOSS)
    if has_pest_issue(inventory):
        alerts.append(InventoryAlert.PEST_DETECTED)
    if is_quality_degrading(inventory):
        alerts.append(InventoryAlert.QUALITY_DEGRADING)
    if is_overstock(inventory):
        alerts.append(InventoryAlert.OVERSTOCK)
    return alerts


def formatted_quantity(inventory) -> str:
    current = to_decimal(inventory.current_quantity)
    if current is None:
        return "N/A"
    return f"{current:.2f} {inventory.unit or 'KG'}"


def formatted_market_value(inventory) -> str:
    total = to_decimal(inventory.total_market_value)
    if total is None:
        return "N/A"
    return f"RWF {total:.2f}"


def summary(inventory) -> str:
    facility = inventory.facility_type.label if inventory.facility_type else "Unknown"
    status = inventory.status.label if inventory.status else "Unknown"
    return (
        f"{inventory.inventory_code} - {formatted_quantity(inventory)} "
        f"({facility}) - {status}"
    )
