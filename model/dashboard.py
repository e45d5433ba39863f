import os
from flask import Blueprint, request, send_from_directory
from mongo import *
from mongo import config
from .utils import *

__all__ = ('dashboard_api', 'page_gate')

dashboard_api = Blueprint('dashboard_api', __name__)

AUTH_PAGE = '/auth'
# paths the gate never redirects
PASS_THROUGH = ('/api', '/static', '/favicon.ico')


def _dashboard_dir():
    return os.path.abspath(config.DASHBOARD_DIR)


def page_gate():
    '''
    Keep every page behind the auth cookie: clients without a valid cookie
    are sent to the auth page and clients that already have one are sent
    away from it. The API routes do their own checking.
    '''
    path = request.path.rstrip('/') or '/'
    if any(path == p or path.startswith(f'{p}/') for p in PASS_THROUGH):
        return None
    token = request.cookies.get(config.AUTH_COOKIE)
    try:
        authorized = check_token(token)
    except AuthorizationExpired:
        authorized = False
    if not authorized and path != AUTH_PAGE:
        return HTTPRedirect(AUTH_PAGE)
    if authorized and path == AUTH_PAGE:
        return HTTPRedirect('/')
    return None


@dashboard_api.route('/')
def index():
    return send_from_directory(_dashboard_dir(), 'index.html')


@dashboard_api.route(AUTH_PAGE)
def auth_page():
    return send_from_directory(_dashboard_dir(), 'auth.html')


@dashboard_api.route('/static/<path:filename>')
def static_file(filename):
    return send_from_directory(
        os.path.join(_dashboard_dir(), 'static'),
        filename,
    )
