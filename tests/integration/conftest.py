import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from auth_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from auth_service.app.services.notification_sender import INotificationSender
from auth_service.depends import get_unit_of_work
from auth_service.domain.entities import TokenPurpose
from tests.utils.settings import ADMIN_KEY, JWT_SECRET, STRONG_PASSWORD


class IntegrationTestConfig(ApplicationConfig):
    JWT_SECRET = JWT_SECRET
    BCRYPT_ROUNDS = 4
    ADMIN_API_KEY = ADMIN_KEY
    ENABLE_LOGGING_MIDDLEWARE = True
    EMAIL_API_URL = ""


class RecordingNotificationSender(INotificationSender):
    """Keeps sent tokens so tests can play the part of the mailbox"""

    def __init__(self):
        self.sent = []

    async def send(self, email: str, token: str, purpose: TokenPurpose) -> None:
        self.sent.append((email, token, purpose))

    def last_token(self, email: str, purpose: TokenPurpose) -> str:
        for sent_email, token, sent_purpose in reversed(self.sent):
            if sent_email == email and sent_purpose == purpose:
                return token
        raise AssertionError(f"No {purpose.value} token sent to {email}")


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def mailbox():
    return RecordingNotificationSender()


@pytest_asyncio.fixture
async def app(session_factory, mailbox):
    from auth_service.api.app import create_app

    app = create_app(IntegrationTestConfig)
    app.state.notification_sender = mailbox

    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def register(client):
    async def _register(username="alice", email=None, password=STRONG_PASSWORD):
        response = await client.post(
            "/api/auth/register",
            json={
                "username": username,
                "email": email or f"{username}@example.com",
                "password": password,
            },
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest_asyncio.fixture
async def login(client):
    async def _login(username="alice", password=STRONG_PASSWORD):
        response = await client.post(
            "/api/auth/login", json={"username": username, "password": password}
        )
        assert response.status_code == 200, response.text
        return response.json()["token"]

    return _login
