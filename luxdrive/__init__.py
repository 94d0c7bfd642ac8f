"""Flask application factory."""

import os
from flask import Flask, jsonify
from flask_wtf.csrf import CSRFError
from .config import config
from .extensions import db, migrate, login_manager, bcrypt, csrf
from .exceptions import StoreError


def create_app(config_name=None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    bcrypt.init_app(app)
    csrf.init_app(app)

    # Register blueprints
    from .routes import register_blueprints
    register_blueprints(app)

    # User loader for Flask-Login
    from .models import User

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'success': False, 'error': 'unauthorized',
                        'message': 'Please log in to continue.'}), 401

    # Error handlers
    @app.errorhandler(StoreError)
    def store_error(error):
        if error.status_code >= 500:
            app.logger.error('request failed: %s', error)
        else:
            app.logger.warning('request rejected: %s', error.message)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(CSRFError)
    def csrf_error(error):
        return jsonify({'success': False, 'error': 'csrf_error',
                        'message': error.description}), 400

    @app.errorhandler(401)
    def unauthorized_error(error):
        return unauthorized()

    @app.errorhandler(403)
    def forbidden_error(error):
        return jsonify({'success': False, 'error': 'forbidden',
                        'message': 'Admin privileges required.'}), 403

    @app.errorhandler(404)
    def not_found_error(error):
        return jsonify({'success': False, 'error': 'not_found',
                        'message': 'Not found.'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        return jsonify({'success': False, 'error': 'server_error',
                        'message': 'Something went wrong.'}), 500

    return app
