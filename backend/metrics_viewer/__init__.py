from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
import click

db = SQLAlchemy()


def create_app(config_class=None):
    flask_app = Flask(__name__)
    if config_class is None:
        from config import load_config
        config_class = load_config()
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(flask_app)
    CORS(flask_app)

    # Handlers are built once here and own their statements
    from metrics_viewer.api import register_handlers
    register_handlers(flask_app, db)

    @flask_app.route('/health')
    def health():
        return {'status': 'healthy', 'service': 'pyx-metrics-viewer'}

    @click.command('init-db')
    def init_db_command():
        """Creates the metrics tables if they do not exist."""
        import metrics_viewer.models  # noqa: F401
        with flask_app.app_context():
            db.create_all()
            print('Metrics tables created.')

    flask_app.cli.add_command(init_db_command)

    return flask_app
