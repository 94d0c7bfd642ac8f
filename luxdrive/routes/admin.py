"""Admin dashboard routes."""

from flask import Blueprint, jsonify, request
from flask_login import login_required
from luxdrive.exceptions import ValidationError
from luxdrive.models import Order
from luxdrive.services import bookings, catalog, inventory
from luxdrive.utils.decorators import admin_required

admin_bp = Blueprint('admin', __name__)


def _submitted_fields():
    if request.is_json:
        fields = request.get_json()
        if fields is None:
            return {}
        if not isinstance(fields, dict):
            raise ValidationError('form', 'Invalid submission')
        return fields
    return request.form.to_dict()


@admin_bp.route('/dashboard')
@login_required
@admin_required
def dashboard():
    """Fleet and booking overview."""
    recent_orders = Order.query.order_by(
        Order.created_at.desc(), Order.id.desc()
    ).limit(10).all()

    return jsonify({
        'cars': catalog.fleet_stats(),
        'total_orders': Order.query.count(),
        'recent_orders': [order.to_dict(include_customer=True) for order in recent_orders],
    })


# --- Car Management ---
@admin_bp.route('/cars')
@login_required
@admin_required
def cars():
    """All cars, booked ones included."""
    return jsonify({'cars': [v.to_dict() for v in catalog.list_all()]})


@admin_bp.route('/cars', methods=['POST'])
@login_required
@admin_required
def create_car():
    vehicle = inventory.create(_submitted_fields())
    return jsonify({'success': True, 'message': 'Car added!', 'car': vehicle.to_dict()}), 201


@admin_bp.route('/cars/<int:vehicle_id>', methods=['PUT'])
@login_required
@admin_required
def update_car(vehicle_id):
    vehicle = inventory.update(vehicle_id, _submitted_fields())
    return jsonify({'success': True, 'message': 'Car updated!', 'car': vehicle.to_dict()})


@admin_bp.route('/cars/<int:vehicle_id>', methods=['DELETE'])
@login_required
@admin_required
def delete_car(vehicle_id):
    inventory.delete(vehicle_id)
    return jsonify({'success': True, 'message': 'Car deleted!'})


# --- Order Monitoring ---
@admin_bp.route('/orders')
@login_required
@admin_required
def orders():
    """All orders."""
    orders = bookings.list_all()
    return jsonify({'orders': [order.to_dict(include_customer=True) for order in orders]})
