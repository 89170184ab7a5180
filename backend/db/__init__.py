"""
Data layer package.

  models    SQLAlchemy tables (one per entity)
  enums     categorical columns, persisted by member name
  schemas   pydantic field constraints checked before every write
  store     create/update/save entry points that run the lifecycle hooks

Usage:
    from db.models import Inventory
    from db.store import create_record

    async with AsyncSessionLocal() as db:
        lot = await create_record(db, Inventory, {...})
        await db.commit()
"""
