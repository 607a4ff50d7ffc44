import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config.database import Base
from controllers import CategoryForm, IngredientForm, RecipeForm
from models.repositories import EntityStore

SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture
def engine():
    # StaticPool so every connection sees the same in-memory database
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db):
    return EntityStore(db)


@pytest.fixture
def make_category(store):
    def _make(name):
        form = CategoryForm.add(store)
        form.name = name
        result = form.save()
        assert result.success, result.error
        return result.entity
    return _make


@pytest.fixture
def make_ingredient(store):
    def _make(name):
        form = IngredientForm.add(store)
        form.name = name
        result = form.save()
        assert result.success, result.error
        return result.entity
    return _make


@pytest.fixture
def make_recipe(store):
    def _make(name, category=None, ingredients=(), **fields):
        form = RecipeForm.add(store)
        form.name = name
        form.category = category
        for attr, value in fields.items():
            setattr(form, attr, value)
        for ingredient, quantity in ingredients:
            form.add_ingredient(ingredient, quantity)
        result = form.save()
        assert result.success, result.error
        return result.entity
    return _make
