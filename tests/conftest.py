import pytest

from crud_service import create_app
from crud_service.model import db


@pytest.fixture
def app():
    app = create_app({'DATABASE_URL': 'sqlite://', 'TESTING': True})
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield


@pytest.fixture
def make_user(client):
    def _make_user(name="Alice", email="a@x.com", gender="F", age="30"):
        response = client.post('/user/create', data={
            "name": name, "email": email, "gender": gender, "age": age
        })
        assert response.status_code == 200
        return response.get_json()["data"]
    return _make_user


@pytest.fixture
def make_product(client):
    def _make_product(user_id, name="Lamp", price="15"):
        response = client.post('/product/create', data={
            "user_id": str(user_id), "name": name, "price": price
        })
        assert response.status_code == 200
        return response.get_json()["data"]
    return _make_product
