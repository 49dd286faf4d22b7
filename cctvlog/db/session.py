# cctvlog/db/session.py

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from cctvlog.core.config import settings
from cctvlog.db.base import Base

# URL montada em settings.database_url (asyncpg em produção, aiosqlite nos testes)
engine = create_async_engine(settings.database_url, future=True, echo=False)

# sessões por request saem de cctvlog.api.deps.get_db_session
AsyncSessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_db() -> None:
    """Cria as tabelas que faltam no startup. Migrations de verdade: `alembic upgrade head`."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
