"""Shared helpers: in-memory SQLite database with seeded roles and a wired TestClient."""

from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from carrental.core.config import Settings, get_settings
from carrental.core.database import get_db
from carrental.core.security import PasswordHasher, TokenCodec
from carrental.main import app
from carrental.models import Base, Role, RoleName, User

TEST_SIGNATURE_KEY = "test-signature-key"


def make_settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "JWT_SIGNATURE_KEY": TEST_SIGNATURE_KEY,
        "JWT_EXPIRE_MINUTES": 60,
        "BCRYPT_ROUNDS": 4,
    }
    values.update(overrides)
    return Settings(**values)


def make_session_factory() -> sessionmaker:
    """
    One shared in-memory SQLite connection (StaticPool) so every session and
    TestClient worker thread sees the same schema and rows.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    with factory() as db:
        db.add_all([Role(name=name) for name in RoleName.ALL])
        db.commit()
    return factory


def add_user(
    factory: sessionmaker,
    email: str,
    password: str,
    role_name: str = RoleName.CUSTOMER,
    name: str = "Test User",
) -> int:
    """Insert a user directly and return its id."""
    with factory() as db:
        role = db.query(Role).filter(Role.name == role_name).one()
        user = User(
            name=name,
            email=email,
            encrypted_password=PasswordHasher(rounds=4).hash(password),
            role_id=role.id,
        )
        db.add(user)
        db.commit()
        return user.id


def token_for(settings: Settings, user_id: int, role_name: str, email: str = "someone@example.com") -> str:
    """Sign a token with the same claim shape the controller issues."""
    role_id = RoleName.ALL.index(role_name) + 1
    return TokenCodec.from_settings(settings).sign(
        {
            "id": user_id,
            "name": "Someone",
            "email": email,
            "image": None,
            "role": {"id": role_id, "name": role_name},
        }
    )


class ApiTestMixin:
    """setUp/tearDown that point the app at a fresh in-memory database."""

    def setUp(self) -> None:
        self.settings = make_settings()
        self.session_factory = make_session_factory()

        def override_get_db() -> Generator[Session, None, None]:
            db = self.session_factory()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_settings] = lambda: self.settings
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
