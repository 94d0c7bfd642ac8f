from datetime import date, time, timedelta
from decimal import Decimal

import pytest

from luxdrive import create_app
from luxdrive.extensions import db
from luxdrive.models import User, Vehicle
from luxdrive.services.cart import RentalWindow


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    def _make_user(email='alice@luxdrive.io', name='Alice Kerr', role='customer', password='secret123'):
        user = User(email=email, name=name, role=role)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user
    return _make_user


@pytest.fixture
def make_vehicle(app):
    def _make_vehicle(**fields):
        data = {
            'name': 'Huracan EVO',
            'brand': 'Lamborghini',
            'segment': 'exotic',
            'price_per_day': Decimal('100.00'),
            'image_url': 'https://cdn.luxdrive.io/cars/huracan.jpg',
            'available': True,
        }
        data.update(fields)
        vehicle = Vehicle(**data)
        db.session.add(vehicle)
        db.session.commit()
        return vehicle
    return _make_vehicle


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def admin(make_user):
    return make_user(email='admin@luxdrive.io', name='Admin User', role='admin')


def rental_window(days, start=None):
    """Window of ``days`` nights starting a week from today."""
    pickup = start or date.today() + timedelta(days=7)
    return RentalWindow(
        pickup_date=pickup,
        pickup_time=time(10, 0),
        pickup_location='Mumbai Airport T2',
        return_date=pickup + timedelta(days=days),
        return_time=time(10, 0),
        return_location='Mumbai Airport T2',
    )


def login(client, email, password='secret123'):
    response = client.post('/auth/login', json={'email': email, 'password': password})
    assert response.status_code == 200
    return response
