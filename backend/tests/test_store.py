"""
Unit Tests — Record write path (validation, lifecycle hooks, identifier uniqueness).
"""

from decimal import Decimal

import pytest
from sqlalchemy import func, select


def _transaction_payload(**overrides):
    payload = {
        "farmer_id": "F001",
        "buyer_id": "BY001",
        "crop_id": "CR001",
        "quantity": Decimal("100"),
        "price_per_unit": Decimal("350.50"),
    }
    payload.update(overrides)
    return payload


def _sequence(chars):
    it = iter(chars)
    return lambda alphabet: next(it)


@pytest.mark.asyncio
class TestCreateRecord:
    async def test_create_assigns_id_code_and_timestamps(self, test_db, clock):
        """A created record gets its id, business code and both timestamps."""
        from core.identifiers import IdentifierGenerator
        from db.models import Transaction
        from db.store import create_record

        ids = IdentifierGenerator(lambda alphabet: "A")
        tx = await create_record(test_db, Transaction, _transaction_payload(), clock=clock, ids=ids)

        assert tx.id == "TX620000AAAAAA"
        assert tx.transaction_code == "TXN2403051407000AAA"
        assert tx.created_at == clock()
        assert tx.updated_at == clock()

    async def test_all_violations_reported_together(self, test_db, clock, ids):
        """Missing and out-of-range fields come back in one error."""
        from core.errors import RecordValidationError
        from db.models import Transaction
        from db.store import create_record

        payload = _transaction_payload(quantity=Decimal("-5"))
        del payload["buyer_id"]

        with pytest.raises(RecordValidationError, match="2 error") as exc_info:
            await create_record(test_db, Transaction, payload, clock=clock, ids=ids)

        failed = {err["loc"][0] for err in exc_info.value.errors}
        assert failed == {"buyer_id", "quantity"}
        assert exc_info.value.entity == "Transaction"

        count = await test_db.scalar(select(func.count()).select_from(Transaction))
        assert count == 0

    async def test_unknown_field_rejected(self, test_db, clock, ids):
        """Fields that are not columns are refused before validation."""
        from core.errors import RecordValidationError
        from db.models import Transaction
        from db.store import create_record

        with pytest.raises(RecordValidationError, match="colour"):
            await create_record(test_db, Transaction, _transaction_payload(colour="red"), clock=clock, ids=ids)

    async def test_read_only_fields_rejected(self, test_db, clock, ids):
        """Callers cannot supply the primary key or timestamps."""
        from core.errors import RecordValidationError
        from db.models import Transaction
        from db.store import create_record

        with pytest.raises(RecordValidationError, match="id"):
            await create_record(test_db, Transaction, _transaction_payload(id="TX1"), clock=clock, ids=ids)

    async def test_collision_regenerates_id(self, test_db, clock):
        """A taken id is replaced by a freshly generated one."""
        from core.identifiers import IdentifierGenerator
        from db.enums import CropType
        from db.models import Crop
        from db.store import create_record

        payload = {"crop_name": "Maize", "crop_type": CropType.CEREALS}
        first = await create_record(
            test_db, Crop, payload, clock=clock, ids=IdentifierGenerator(lambda alphabet: "A")
        )
        second = await create_record(
            test_db, Crop, dict(payload), clock=clock, ids=IdentifierGenerator(_sequence("A" * 6 + "B" * 6))
        )

        assert first.id == "CR620000AAAAAA"
        assert second.id == "CR620000BBBBBB"

    async def test_collision_attempts_are_bounded(self, test_db, clock):
        """When every candidate is taken the create fails instead of looping."""
        from core.errors import IdentifierCollisionError
        from core.identifiers import IdentifierGenerator
        from db.enums import CropType
        from db.models import Crop
        from db.store import create_record

        ids = IdentifierGenerator(lambda alphabet: "A")
        payload = {"crop_name": "Beans", "crop_type": CropType.LEGUMES}
        await create_record(test_db, Crop, payload, clock=clock, ids=ids)

        with pytest.raises(IdentifierCollisionError, match="after 5 attempt"):
            await create_record(test_db, Crop, dict(payload), clock=clock, ids=ids)

    async def test_get_record(self, test_db, clock, ids):
        from db.models import Transaction
        from db.store import create_record, get_record

        tx = await create_record(test_db, Transaction, _transaction_payload(), clock=clock, ids=ids)

        assert (await get_record(test_db, Transaction, tx.id)) is tx
        assert await get_record(test_db, Transaction, "TX-missing") is None


@pytest.mark.asyncio
class TestUpdateRecord:
    async def test_update_recomputes_and_touches_updated_at(self, test_db, clock, ids):
        """Derived totals follow the new inputs; created_at is kept."""
        from db.models import Transaction
        from db.store import create_record, update_record

        tx = await create_record(test_db, Transaction, _transaction_payload(), clock=clock, ids=ids)
        created_at = tx.created_at
        clock.advance(hours=1)

        await update_record(test_db, tx, {"quantity": Decimal("10")}, clock=clock)

        assert tx.total_amount == Decimal("3505.00")
        assert tx.created_at == created_at
        assert tx.updated_at == clock()

    async def test_invalid_update_leaves_record_unchanged(self, test_db, clock, ids):
        """A rejected change does not touch any field."""
        from core.errors import RecordValidationError
        from db.models import Transaction
        from db.store import create_record, update_record

        tx = await create_record(test_db, Transaction, _transaction_payload(), clock=clock, ids=ids)

        with pytest.raises(RecordValidationError):
            await update_record(test_db, tx, {"quantity": Decimal("0"), "rating_farmer": 9}, clock=clock)

        assert tx.quantity == Decimal("100")
        assert tx.rating_farmer is None
        assert tx.total_amount == Decimal("35050.00")

    async def test_status_persisted_by_name(self, test_db, clock, ids):
        """Enum columns store the member name, never the display label."""
        from sqlalchemy import text

        from db.models import Transaction
        from db.store import create_record

        tx = await create_record(test_db, Transaction, _transaction_payload(), clock=clock, ids=ids)

        result = await test_db.execute(text("SELECT status FROM transactions WHERE id = :id"), {"id": tx.id})
        assert result.scalar_one() == "PENDING"
