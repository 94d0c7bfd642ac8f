"""Error types raised by the storefront services.

Every error carries the HTTP status the JSON error handler answers with,
so views never translate exceptions by hand.
"""


class StoreError(Exception):
    """Base class for user-facing storefront errors."""
    status_code = 400
    error = 'store_error'

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'success': False, 'error': self.error, 'message': self.message}


class ValidationError(StoreError):
    """Bad input shape or range; reported verbatim."""
    error = 'validation_error'

    def __init__(self, field, reason):
        super().__init__(f'{field}: {reason}')
        self.field = field
        self.reason = reason

    def to_dict(self):
        data = super().to_dict()
        data['field'] = self.field
        data['reason'] = self.reason
        return data


class NotFoundError(StoreError):
    status_code = 404
    error = 'not_found'

    def __init__(self, entity, entity_id):
        super().__init__(f'{entity} {entity_id} not found')
        self.entity = entity
        self.entity_id = entity_id


class EmptyCartError(StoreError):
    error = 'empty_cart'

    def __init__(self, message='Your cart is empty.'):
        super().__init__(message)


class VehicleUnavailableError(StoreError):
    """The vehicle was claimed by another checkout."""
    status_code = 409
    error = 'vehicle_unavailable'

    def __init__(self, vehicle_id):
        super().__init__(f'Vehicle {vehicle_id} is no longer available.')
        self.vehicle_id = vehicle_id

    def to_dict(self):
        data = super().to_dict()
        data['vehicle_id'] = self.vehicle_id
        return data


class CheckoutFailedError(StoreError):
    """Unexpected failure mid-checkout, raised after the rollback."""
    status_code = 500
    error = 'checkout_failed'

    def __init__(self, stage, cause):
        super().__init__('Failed to place order')
        self.stage = stage
        self.cause = cause

    def __str__(self):
        return f'checkout failed at {self.stage.value}: {self.cause!r}'

    def to_dict(self):
        data = super().to_dict()
        data['stage'] = self.stage.value
        return data
