"""Order routes."""

from flask import Blueprint, jsonify
from flask_login import login_required, current_user
from luxdrive.services import bookings, checkout as checkout_service

orders_bp = Blueprint('orders', __name__)


@orders_bp.route('/checkout', methods=['POST'])
@login_required
def checkout():
    """Place an order for the whole cart."""
    order = checkout_service.checkout(current_user.id)
    return jsonify({
        'success': True,
        'message': 'Order placed successfully!',
        'order': order.to_dict(),
    }), 201


@orders_bp.route('/')
@login_required
def order_history():
    """Bookings of the current user, newest first."""
    orders = bookings.list_for_user(current_user.id)
    return jsonify({'orders': [order.to_dict() for order in orders]})


@orders_bp.route('/<order_number>')
@login_required
def order_detail(order_number):
    order = bookings.get_for_user(current_user.id, order_number)
    return jsonify({'order': order.to_dict()})
