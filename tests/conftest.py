import os
import shutil
import tempfile
import uuid
from pathlib import Path

import pytest
import sqlalchemy as sa
from httpx import ASGITransport, AsyncClient

# IMPORTANT:
# Set env vars BEFORE importing app.settings/app.main (pydantic settings load at import time)
os.environ["ENV"] = "test"
# A file (not :memory:) so concurrent sessions get separate connections.
_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="user_groups_api_tests_"))
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_TEST_DB_DIR / 'test.db'}")
os.environ.setdefault("CORS_ORIGINS", "http://localhost:5173")

from app.main import app as fastapi_app  # noqa: E402
from app.db.base_class import Base  # noqa: E402
import app.db.base  # noqa: F401,E402  (register models)
from app.db.session import engine, AsyncSessionLocal  # noqa: E402
from app.api.deps import get_db  # noqa: E402
from app.db.unit_of_work import UnitOfWork  # noqa: E402
from app.models.group import Group, GroupStatus  # noqa: E402
from app.models.user import User, UserStatus  # noqa: E402
from app.models.user_group import UserGroup  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


def pytest_sessionfinish(session, exitstatus):
    shutil.rmtree(_TEST_DB_DIR, ignore_errors=True)


@pytest.fixture
async def _schema():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def db_session(_schema):
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
def unit_of_work(_schema):
    return UnitOfWork(AsyncSessionLocal)


@pytest.fixture
async def client(_schema):
    """
    Routes get their own session, separate from the one tests seed through,
    so nothing cached in an identity map leaks into the responses.
    """

    async def _override_get_db():
        async with AsyncSessionLocal() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    fastapi_app.dependency_overrides.pop(get_db, None)


# --- Seeding helpers ---

def _unique(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:10]}"


@pytest.fixture
def unique_str():
    return _unique


@pytest.fixture
def user_factory(_schema, unique_str):
    async def _create(
        *,
        id: int | None = None,
        name: str | None = None,
        email: str | None = None,
        status: UserStatus | None = None,
    ) -> int:
        name = name or unique_str("user")
        email = email or f"{unique_str('user')}@example.com"
        async with AsyncSessionLocal() as session:
            user = User(id=id, name=name, email=email, status=status)
            session.add(user)
            await session.commit()
            return user.id

    return _create


@pytest.fixture
def group_factory(_schema, unique_str):
    async def _create(
        *,
        id: int | None = None,
        name: str | None = None,
        status: GroupStatus = GroupStatus.ACTIVE,
        member_ids: list[int] | tuple[int, ...] = (),
    ) -> int:
        async with AsyncSessionLocal() as session:
            group = Group(id=id, name=name or unique_str("group"), status=status)
            session.add(group)
            await session.flush()
            for user_id in member_ids:
                session.add(UserGroup(user_id=user_id, group_id=group.id))
            await session.commit()
            return group.id

    return _create


@pytest.fixture
def fetch_scalar(_schema):
    async def _fetch(stmt):
        async with AsyncSessionLocal() as session:
            return (await session.execute(stmt)).scalar_one_or_none()

    return _fetch


@pytest.fixture
def group_status(fetch_scalar):
    async def _get(group_id: int) -> GroupStatus | None:
        return await fetch_scalar(sa.select(Group.status).where(Group.id == group_id))

    return _get


@pytest.fixture
def user_status(fetch_scalar):
    async def _get(user_id: int) -> UserStatus | None:
        return await fetch_scalar(sa.select(User.status).where(User.id == user_id))

    return _get


@pytest.fixture
def membership_rows(fetch_scalar):
    async def _count(group_id: int | None = None) -> int:
        q = sa.select(sa.func.count()).select_from(UserGroup)
        if group_id is not None:
            q = q.where(UserGroup.group_id == group_id)
        return await fetch_scalar(q)

    return _count
