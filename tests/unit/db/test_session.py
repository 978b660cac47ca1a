from tokensync.db.models import SyncState
from tokensync.db.session import Base, build_engine, build_session_factory


class TestSession:
    async def test_engine_and_factory(self):
        engine = build_engine("sqlite+aiosqlite:///:memory:")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        factory = build_session_factory(engine)
        async with factory.begin() as session:
            session.add(SyncState(id=1, last_synced_block=5))

        async with factory() as session:
            row = await session.get(SyncState, 1)
            assert row.last_synced_block == 5

        await engine.dispose()
