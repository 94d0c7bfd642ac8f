import pytest

from conftest import rental_window
from luxdrive.exceptions import NotFoundError
from luxdrive.services import bookings, cart, inventory
from luxdrive.services.checkout import checkout


@pytest.fixture
def place_order(make_vehicle):
    def _place_order(user, name):
        vehicle = make_vehicle(name=name)
        cart.add(user.id, vehicle.id, rental_window(2))
        return checkout(user.id)
    return _place_order


def test_list_for_user_is_newest_first(user, place_order):
    first = place_order(user, 'Cullinan').id
    second = place_order(user, 'R8').id

    orders = bookings.list_for_user(user.id)

    assert [o.id for o in orders] == [second, first]
    assert orders[0].items[0].vehicle_name == 'R8'


def test_list_for_user_only_returns_own_orders(user, make_user, place_order):
    other = make_user(email='bob@luxdrive.io', name='Bob')
    place_order(other, 'SF90')

    assert bookings.list_for_user(user.id) == []


def test_list_all_returns_every_customer(user, make_user, place_order):
    other = make_user(email='bob@luxdrive.io', name='Bob')
    place_order(user, 'Cullinan')
    place_order(other, 'SF90')

    orders = bookings.list_all()

    assert [o.customer.email for o in orders] == ['bob@luxdrive.io', 'alice@luxdrive.io']


def test_get_for_user(user, make_user, place_order):
    order_number = place_order(user, 'Cullinan').order_number
    other = make_user(email='bob@luxdrive.io', name='Bob')

    assert bookings.get_for_user(user.id, order_number).order_number == order_number
    with pytest.raises(NotFoundError):
        bookings.get_for_user(other.id, order_number)


def test_order_items_survive_vehicle_deletion(user, place_order):
    order = place_order(user, 'Cullinan')
    vehicle_id = order.items[0].vehicle_id

    inventory.delete(vehicle_id)

    item = bookings.list_for_user(user.id)[0].items[0]
    assert item.vehicle_id is None
    assert item.vehicle_name == 'Cullinan'
