"""
Test infrastructure for the Blog API.

Strategy
--------
- SQLite in-memory via aiosqlite, so no Postgres instance is needed.
- StaticPool keeps every session on the one connection that owns the
  in-memory database.
- The app's get_db dependency is overridden so every request uses the
  test session factory.
- All tables are created before each test and dropped after it.
"""
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from blog import database
from blog.database import Base, get_db
from blog.main import app
from blog.middleware import install_query_counter
from blog.models import Comment, Post

# ---------------------------------------------------------------------------
# Test database engine: SQLite in-memory with aiosqlite
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Register the per-request SQL query counter on the test engine.
install_query_counter(engine_test)

async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ---------------------------------------------------------------------------
# Dependency override: replace production get_db with the test session factory
# ---------------------------------------------------------------------------

async def override_get_db():
    async with async_session_test() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


app.dependency_overrides[get_db] = override_get_db


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after to guarantee isolation."""
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    """Yield a live AsyncSession for tests that seed or query directly."""
    async with async_session_test() as session:
        yield session


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    """Yield an httpx.AsyncClient wired to the FastAPI app via ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def seed_post():
    """
    Return a factory that inserts a post plus *n* comments and yields the
    post id.  Rows are committed in their own session so the session under
    test starts with an empty identity map.
    """

    async def _seed(n_comments: int = 0, post_id: int | None = None) -> int:
        async with async_session_test() as session:
            record = Post(title="Seeded post", content="Body")
            if post_id is not None:
                record.id = post_id
            session.add(record)
            await session.flush()
            for i in range(n_comments):
                session.add(Comment(
                    content=f"Comment {i}",
                    author_name=f"Reader {i}",
                    post_id=record.id,
                ))
            await session.commit()
            return record.id

    return _seed


@pytest_asyncio.fixture
async def statements():
    """Collect every SQL statement executed on the test engine."""
    captured: list[str] = []

    def _capture(conn, cursor, statement, parameters, context, executemany):
        captured.append(statement)

    event.listen(engine_test.sync_engine, "before_cursor_execute", _capture)
    yield captured
    event.remove(engine_test.sync_engine, "before_cursor_execute", _capture)


@pytest_asyncio.fixture
async def real_get_db(monkeypatch):
    """
    Serve requests through the production ``get_db`` (its commit/rollback
    and logging) while still using the in-memory test database.
    """
    monkeypatch.setattr(database, "async_session", async_session_test)
    monkeypatch.delitem(app.dependency_overrides, get_db)
    yield
