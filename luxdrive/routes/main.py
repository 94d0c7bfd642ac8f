"""Fleet browsing routes."""

from flask import Blueprint, jsonify, request
from luxdrive.services import catalog

main_bp = Blueprint('main', __name__)


@main_bp.route('/cars')
def cars():
    """Available cars, optionally filtered by segment."""
    segment = request.args.get('segment', '')
    if segment == 'all':
        segment = ''

    vehicles = catalog.list_available(segment or None)
    return jsonify({'cars': [v.to_dict() for v in vehicles]})


@main_bp.route('/cars/<int:vehicle_id>')
def car_detail(vehicle_id):
    vehicle = catalog.get_by_id(vehicle_id)
    return jsonify({'car': vehicle.to_dict()})
