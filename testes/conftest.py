import os
import tempfile

# precisa vir antes de qualquer import de cctvlog (settings/engine são criados no import)
_TMP_DIR = tempfile.mkdtemp(prefix="cctvlog-tests-")
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{os.path.join(_TMP_DIR, 'cctvlog_test.db')}",
)
os.environ.setdefault("ALLOW_ANONYMOUS_DEV_MODE", "true")
os.environ.setdefault("ADMIN_PASSWORD", "s3nha-de-teste")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from cctvlog.db.base import Base
from cctvlog.db.session import engine
from cctvlog.main import app


@pytest_asyncio.fixture
async def reset_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    # cada teste roda no seu próprio event loop; não reaproveita conexões
    await engine.dispose()


@pytest_asyncio.fixture
async def client(reset_db):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
