# contacts_api/__init__.py
from flask import Flask
from flask_pymongo import PyMongo
from .config import Config
from .logging_setup import setup_logging

mongo = PyMongo()

def create_app(config_class=Config, db=None):
    """
    Builds the Flask app. When `db` is not given, the database comes from
    Flask-PyMongo using MONGO_URI. The store must answer a ping before the
    app is returned; StoreUnavailable is raised otherwise.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    # Keep "id", "name", "phone" in the order they are built
    app.json.sort_keys = False

    logger = setup_logging(app)

    if db is None:
        mongo.init_app(app)
        db = mongo.db if mongo.db is not None else mongo.cx[app.config['MONGO_DBNAME']]

    # Initialize services
    from .services.contact_service import ContactService

    contact_service = ContactService(db, timeout=app.config['STORE_TIMEOUT_SECONDS'])
    contact_service.ping(timeout=app.config['STORE_CONNECT_TIMEOUT_SECONDS'])
    logger.info('Connected to MongoDB successfully!')
    app.extensions['contact_service'] = contact_service

    from .cors import init_cors
    from .errors import register_error_handlers
    init_cors(app)
    register_error_handlers(app)

    # Register blueprints
    from .routes.contact_routes import bp as contact_bp
    from .routes.health_routes import bp as health_bp

    app.register_blueprint(contact_bp)
    app.register_blueprint(health_bp)

    return app
