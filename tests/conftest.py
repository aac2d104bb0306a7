import os

# Settings are read at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["REQUIRE_AUTH"] = "false"
os.environ["STATIC_DIR"] = "does-not-exist"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from marketplace.core.security import hash_password
from marketplace.crud import user as crud_user
from marketplace.db.base import Base
from marketplace.db.deps import get_db
from marketplace.main import app
from marketplace.models.product import Product

PASSWORD = "Secret#123"
_password_hash = None


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    """Create a user directly, skipping the registration rules"""
    global _password_hash
    if _password_hash is None:
        _password_hash = hash_password(PASSWORD)

    counter = {"n": 0}

    def _make_user(display_name=None, email=None, is_active=True):
        counter["n"] += 1
        display_name = display_name or f"user{counter['n']}"
        email = email or f"{display_name}@example.com"
        user = crud_user.create_user(db, display_name, email, _password_hash)
        user.is_active = is_active
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_product(db):
    def _make_product(seller, title="Vintage lamp", price="10.00", quantity=5, category="Home & Garden", **fields):
        product = Product(
            seller_id=seller.id,
            title=title,
            category=category,
            price=Decimal(price),
            quantity=quantity,
            **fields,
        )
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make_product
