"""Cart routes."""

from flask import Blueprint, jsonify
from flask_login import login_required, current_user
from luxdrive.forms import form_error
from luxdrive.forms.cart import ReservationForm
from luxdrive.services import cart

cart_bp = Blueprint('cart', __name__)


@cart_bp.route('/')
@login_required
def view_cart():
    """View shopping cart."""
    summary = cart.summary(current_user.id)
    return jsonify({
        'items': [item.to_dict() for item in summary['items']],
        'total': summary['total'],
    })


@cart_bp.route('/count')
@login_required
def cart_count():
    """Get cart item count."""
    return jsonify({'count': cart.count_for_user(current_user.id)})


@cart_bp.route('/add', methods=['POST'])
@login_required
def add_to_cart():
    """Add a vehicle reservation to the cart."""
    form = ReservationForm()
    if not form.validate_on_submit():
        raise form_error(form)

    cart_item = cart.add(current_user.id, form.vehicle_id.data, form.window())
    return jsonify({
        'success': True,
        'message': 'Added to cart!',
        'item': cart_item.to_dict(),
        'cart_count': cart.count_for_user(current_user.id),
    }), 201


@cart_bp.route('/remove/<int:item_id>', methods=['POST'])
@login_required
def remove_from_cart(item_id):
    """Remove item from cart."""
    cart.remove(current_user.id, item_id)
    return jsonify({
        'success': True,
        'message': 'Item removed from cart',
        'cart_count': cart.count_for_user(current_user.id),
    })
