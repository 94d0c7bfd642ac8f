from datetime import date, timedelta
from decimal import Decimal

import pytest

from conftest import login
from luxdrive.extensions import db
from luxdrive.models import Order, Vehicle


def reservation(vehicle_id, days):
    pickup = date.today() + timedelta(days=3)
    return {
        'vehicle_id': vehicle_id,
        'pickup_date': pickup.isoformat(),
        'pickup_time': '09:30',
        'pickup_location': 'Bandra West',
        'return_date': (pickup + timedelta(days=days)).isoformat(),
        'return_time': '18:00',
        'return_location': 'Bandra West',
    }


@pytest.fixture
def customer_client(client, user):
    login(client, user.email)
    return client


@pytest.fixture
def admin_client(client, admin):
    login(client, admin.email)
    return client


def test_register_and_me(client):
    response = client.post('/auth/register', json={
        'name': 'Carol Diaz',
        'email': 'Carol@LuxDrive.io',
        'password': 'hunter22',
        'confirm_password': 'hunter22',
    })
    assert response.status_code == 201
    assert response.get_json()['user']['email'] == 'carol@luxdrive.io'

    login(client, 'carol@luxdrive.io', 'hunter22')
    assert client.get('/auth/me').get_json()['user']['role'] == 'customer'


def test_register_duplicate_email(client, user):
    response = client.post('/auth/register', json={
        'name': 'Alice Again',
        'email': user.email,
        'password': 'hunter22',
        'confirm_password': 'hunter22',
    })
    assert response.status_code == 400
    assert response.get_json()['field'] == 'email'


def test_login_with_wrong_password(client, user):
    response = client.post('/auth/login', json={'email': user.email, 'password': 'nope'})
    assert response.status_code == 400
    assert response.get_json()['message'] == 'Invalid email or password.'


def test_browse_cars(client, make_vehicle):
    make_vehicle(name='S 580', segment='sedan')
    make_vehicle(name='Cullinan', segment='suv')
    make_vehicle(name='SF90', segment='exotic', available=False)

    all_cars = client.get('/cars').get_json()['cars']
    suvs = client.get('/cars?segment=suv').get_json()['cars']

    assert sorted(c['name'] for c in all_cars) == ['Cullinan', 'S 580']
    assert [c['name'] for c in suvs] == ['Cullinan']
    assert client.get('/cars?segment=all').status_code == 200
    assert client.get('/cars?segment=truck').status_code == 400


def test_car_detail(client, make_vehicle):
    vehicle = make_vehicle()

    response = client.get(f'/cars/{vehicle.id}')

    assert response.get_json()['car']['price_per_day'] == '100.00'
    assert client.get('/cars/999').status_code == 404


def test_cart_requires_login(client):
    assert client.get('/cart/').status_code == 401
    assert client.post('/orders/checkout').status_code == 401


def test_add_to_cart_and_view(customer_client, make_vehicle):
    vehicle = make_vehicle()

    response = customer_client.post('/cart/add', json=reservation(vehicle.id, 3))
    assert response.status_code == 201
    assert response.get_json()['cart_count'] == 1

    body = customer_client.get('/cart/').get_json()
    assert body['total'] == '300.00'
    assert body['items'][0]['rental_days'] == 3
    assert body['items'][0]['pickup_time'] == '09:30'
    assert customer_client.get('/cart/count').get_json() == {'count': 1}


def test_add_to_cart_rejects_bad_window(customer_client, make_vehicle):
    vehicle = make_vehicle()
    data = reservation(vehicle.id, 3)
    data['return_location'] = ''

    response = customer_client.post('/cart/add', json=data)

    assert response.status_code == 400
    assert response.get_json()['field'] == 'return_location'


def test_add_to_cart_rejects_past_pickup(customer_client, make_vehicle):
    data = reservation(make_vehicle().id, 3)
    data['pickup_date'] = (date.today() - timedelta(days=1)).isoformat()

    response = customer_client.post('/cart/add', json=data)

    assert response.status_code == 400
    assert response.get_json()['field'] == 'pickup_date'


def test_remove_from_cart_twice(customer_client, make_vehicle):
    item_id = customer_client.post('/cart/add', json=reservation(make_vehicle().id, 1)).get_json()['item']['id']

    assert customer_client.post(f'/cart/remove/{item_id}').status_code == 200
    assert customer_client.post(f'/cart/remove/{item_id}').status_code == 404


def test_checkout_flow(customer_client, make_vehicle):
    a = make_vehicle(name='Cullinan', price_per_day=Decimal('100.00'))
    b = make_vehicle(name='R8', price_per_day=Decimal('50.00'))
    customer_client.post('/cart/add', json=reservation(a.id, 3))
    customer_client.post('/cart/add', json=reservation(b.id, 2))

    response = customer_client.post('/orders/checkout')

    assert response.status_code == 201
    order = response.get_json()['order']
    assert order['total_amount'] == '400.00'
    assert order['status'] == 'confirmed'
    assert sorted(item['subtotal'] for item in order['items']) == ['100.00', '300.00']
    assert customer_client.get('/cart/count').get_json() == {'count': 0}

    history = customer_client.get('/orders/').get_json()['orders']
    assert [o['order_number'] for o in history] == [order['order_number']]
    detail = customer_client.get(f"/orders/{order['order_number']}").get_json()['order']
    assert detail['items'][0]['vehicle']['name'] in ('Cullinan', 'R8')


def test_checkout_empty_cart(customer_client):
    response = customer_client.post('/orders/checkout')

    assert response.status_code == 400
    assert response.get_json()['error'] == 'empty_cart'


def test_checkout_lost_vehicle(customer_client, make_vehicle):
    vehicle = make_vehicle()
    customer_client.post('/cart/add', json=reservation(vehicle.id, 2))
    Vehicle.query.filter_by(id=vehicle.id).update({'available': False})
    db.session.commit()

    response = customer_client.post('/orders/checkout')

    assert response.status_code == 409
    assert response.get_json()['vehicle_id'] == vehicle.id


def test_admin_views_require_admin(client, customer_client):
    assert customer_client.get('/admin/dashboard').status_code == 403
    assert customer_client.post('/admin/cars', json={}).status_code == 403


def test_admin_views_require_login(client):
    assert client.get('/admin/orders').status_code == 401


def test_admin_car_management(admin_client, app):
    response = admin_client.post('/admin/cars', json={
        'name': 'Huracan EVO',
        'brand': 'Lamborghini',
        'segment': 'exotic',
        'price_per_day': 55000,
    })
    assert response.status_code == 201
    car = response.get_json()['car']
    assert car['image_url'] == app.config['SEGMENT_DEFAULT_IMAGES']['exotic']

    response = admin_client.put(f"/admin/cars/{car['id']}", json={'price_per_day': 60000})
    assert response.get_json()['car']['price_per_day'] == '60000.00'

    response = admin_client.put(f"/admin/cars/{car['id']}", json={'segment': 'truck'})
    assert response.status_code == 400
    assert response.get_json()['field'] == 'segment'

    assert admin_client.delete(f"/admin/cars/{car['id']}").status_code == 200
    assert admin_client.get('/admin/cars').get_json()['cars'] == []


def test_admin_dashboard_and_orders(client, user, admin, make_vehicle):
    vehicle = make_vehicle()
    make_vehicle(name='Spare')
    login(client, user.email)
    client.post('/cart/add', json=reservation(vehicle.id, 2))
    client.post('/orders/checkout')
    client.post('/auth/logout')

    login(client, admin.email)
    dashboard = client.get('/admin/dashboard').get_json()
    orders = client.get('/admin/orders').get_json()['orders']

    assert dashboard['cars'] == {'total': 2, 'available': 1, 'booked': 1}
    assert dashboard['total_orders'] == Order.query.count() == 1
    assert orders[0]['customer']['email'] == user.email


@pytest.mark.parametrize('payload', [[], 'Huracan', 42])
def test_admin_rejects_non_object_json(admin_client, make_vehicle, payload):
    vehicle = make_vehicle()

    response = admin_client.post('/admin/cars', json=payload)
    assert response.status_code == 400
    assert response.get_json()['field'] == 'form'

    response = admin_client.put(f'/admin/cars/{vehicle.id}', json=payload)
    assert response.status_code == 400
    assert response.get_json()['field'] == 'form'
