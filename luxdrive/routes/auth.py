"""Authentication routes."""

from flask import Blueprint, jsonify, current_app
from flask_login import login_user, logout_user, login_required, current_user
from flask_wtf.csrf import generate_csrf
from luxdrive.extensions import db
from luxdrive.exceptions import StoreError
from luxdrive.forms import form_error
from luxdrive.forms.auth import LoginForm, RegistrationForm
from luxdrive.models import User

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/csrf-token')
def csrf_token():
    """Token for the X-CSRFToken header of later POSTs."""
    return jsonify({'csrf_token': generate_csrf()})


@auth_bp.route('/login', methods=['POST'])
def login():
    """User login."""
    form = LoginForm()
    if not form.validate_on_submit():
        raise form_error(form)

    user = User.query.filter_by(email=form.email.data.lower()).first()
    if not user or not user.check_password(form.password.data):
        raise StoreError('Invalid email or password.')
    if not user.is_active:
        raise StoreError('Your account has been deactivated. Please contact support.')

    login_user(user, remember=form.remember.data)
    current_app.logger.info('user %s logged in', user.id)
    return jsonify({'success': True, 'user': user.to_dict()})


@auth_bp.route('/register', methods=['POST'])
def register():
    """Customer registration."""
    form = RegistrationForm()
    if not form.validate_on_submit():
        raise form_error(form)

    user = User(
        email=form.email.data.lower(),
        name=form.name.data,
        role='customer'
    )
    user.set_password(form.password.data)

    db.session.add(user)
    db.session.commit()

    current_app.logger.info('user %s registered', user.id)
    return jsonify({'success': True, 'user': user.to_dict()}), 201


@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    """User logout."""
    logout_user()
    return jsonify({'success': True})


@auth_bp.route('/me')
@login_required
def me():
    return jsonify({'user': current_user.to_dict()})
