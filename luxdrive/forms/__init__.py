"""Form schemas."""

from luxdrive.exceptions import ValidationError


def form_error(form):
    """ValidationError for the first field that failed validation."""
    for field in form:
        if field.errors:
            return ValidationError(field.name, field.errors[0])
    return ValidationError('form', 'Invalid submission')
