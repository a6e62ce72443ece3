from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from cycle_tracker.config import config

# Initialize extensions
db = SQLAlchemy()

def create_app(config_name='development'):
    """Application factory pattern"""
    app = Flask(__name__)
    
    # Load configuration
    app.config.from_object(config[config_name])
    app.logger.setLevel(app.config['LOG_LEVEL'])
    
    # Initialize extensions with app
    db.init_app(app)
    
    # Import models so their tables are registered
    from cycle_tracker.models import StoredBlob
    
    # Create storage tables on startup
    with app.app_context():
        db.create_all()
        app.logger.debug("Storage tables ready at %s", app.config['SQLALCHEMY_DATABASE_URI'])
    
    return app
