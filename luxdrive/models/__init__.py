"""Database models package."""

from .user import User
from .vehicle import Vehicle, SEGMENTS
from .cart import CartItem
from .order import Order, OrderItem

__all__ = [
    'User',
    'Vehicle',
    'SEGMENTS',
    'CartItem',
    'Order',
    'OrderItem',
]
