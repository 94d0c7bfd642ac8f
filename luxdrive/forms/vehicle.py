"""Vehicle schema shared by the admin views and the inventory manager."""

from decimal import Decimal

from werkzeug.datastructures import MultiDict
from wtforms import Form, StringField, TextAreaField, DecimalField, IntegerField
from wtforms.validators import (DataRequired, InputRequired, Length, Optional,
                                AnyOf, URL, ValidationError as FieldError)

from luxdrive.exceptions import ValidationError
from luxdrive.models import SEGMENTS
from luxdrive.services.pricing import to_money

VEHICLE_FIELDS = ('name', 'brand', 'segment', 'description', 'price_per_day',
                  'horsepower', 'top_speed', 'acceleration', 'image_url')

MAX_PRICE = Decimal('99999999.995')


def _strip(value):
    return value.strip() if isinstance(value, str) else value


class VehicleForm(Form):
    """Create/edit vehicle form."""
    name = StringField('Name', filters=[_strip], validators=[
        DataRequired(message='Name is required'),
        Length(min=2, max=100, message='Name must be between 2 and 100 characters')
    ])
    brand = StringField('Brand', filters=[_strip], validators=[
        DataRequired(message='Brand is required'),
        Length(min=2, max=50, message='Brand must be between 2 and 50 characters')
    ])
    segment = StringField('Segment', filters=[_strip], validators=[
        DataRequired(message='Segment is required'),
        AnyOf(SEGMENTS, message='Segment must be one of sedan, suv, sports, exotic')
    ])
    description = TextAreaField('Description', filters=[_strip], validators=[
        Optional(),
        Length(max=500)
    ])
    price_per_day = DecimalField('Price per day', places=2, validators=[
        InputRequired(message='Price is required')
    ])
    horsepower = IntegerField('Horsepower', validators=[Optional()])
    top_speed = IntegerField('Top speed (mph)', validators=[Optional()])
    acceleration = StringField('0-60', filters=[_strip], validators=[
        Optional(),
        Length(max=20)
    ])
    image_url = StringField('Image URL', filters=[_strip], validators=[
        Optional(),
        Length(max=2000),
        URL(message='Invalid image URL')
    ])

    def validate_price_per_day(self, field):
        if field.data is None:
            return
        if not field.data.is_finite():
            raise FieldError('Price must be positive')
        if field.data >= MAX_PRICE:
            raise FieldError('Price is too large')
        # Stored as Numeric(10, 2): check the amount that will be saved
        field.data = to_money(field.data)
        if field.data <= 0:
            raise FieldError('Price must be positive')

    def validate_horsepower(self, field):
        if field.data is not None and field.data <= 0:
            raise FieldError('Horsepower must be positive')

    def validate_top_speed(self, field):
        if field.data is not None and field.data <= 0:
            raise FieldError('Top speed must be positive')


def validate_vehicle_fields(fields):
    """Validate raw vehicle fields and return the cleaned values.

    Raises ValidationError naming the first offending field.
    """
    formdata = MultiDict()
    for key in VEHICLE_FIELDS:
        value = fields.get(key)
        if value is not None:
            formdata[key] = str(value)

    form = VehicleForm(formdata)
    if not form.validate():
        for field in form:
            if field.errors:
                raise ValidationError(field.name, field.errors[0])

    return {
        'name': form.name.data,
        'brand': form.brand.data,
        'segment': form.segment.data,
        'description': form.description.data or None,
        'price_per_day': form.price_per_day.data,
        'horsepower': form.horsepower.data,
        'top_speed': form.top_speed.data,
        'acceleration': form.acceleration.data or None,
        'image_url': form.image_url.data or None,
    }
