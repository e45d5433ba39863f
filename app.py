import logging
from flask import Flask
from model import *
from mongo import config


def app():
    # Create a flask app, the dashboard serves its own static files
    app = Flask(__name__, static_folder=None)
    app.config['PREFERRED_URL_SCHEME'] = 'https'
    app.config['DEBUG'] = config.FLASK_DEBUG
    app.url_map.strict_slashes = False
    # Register flask blueprint
    api2prefix = [
        (auth_api, '/api/auth'),
        (usage_api, '/api/usage'),
        (code_api, '/api/code'),
        (stats_api, '/api/stats'),
        (health_api, '/api/health'),
        (dashboard_api, None),
    ]
    for api, prefix in api2prefix:
        app.register_blueprint(api, url_prefix=prefix)
    app.before_request(page_gate)

    if __name__ != '__main__':
        logger = logging.getLogger('gunicorn.error')
        app.logger.handlers = logger.handlers
        app.logger.setLevel(logger.level)

    check_auth_code(app)
    return app


def check_auth_code(app: Flask):
    if not config.AUTH_CODE:
        app.logger.warning(
            '\'AUTH_CODE\' is not set. every login attempt will be rejected')
