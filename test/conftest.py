import pytest

from catalog_api.main import create_app
from catalog_api.extensions import db
from catalog_api.models import Category, Product

TOKEN = "test-token"


@pytest.fixture
def app():
    app = create_app(testing=True)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TOKEN}"}


# One category with two products
@pytest.fixture
def category(app):
    category = Category(name="Periféricos", description="Teclados y ratones")
    db.session.add(category)
    db.session.commit()

    db.session.add_all([
        Product(name="Teclado", description="Mecánico", price=100.0, category_id=category.id),
        Product(name="Mouse", description="Óptico", price=50.0, category_id=category.id),
    ])
    db.session.commit()
    return category


@pytest.fixture
def product(category):
    return Product.query.filter_by(name="Teclado").first()
