# Standard library
from functools import wraps
# Related third party imports
from flask import Blueprint, current_app, request
# Local application
from mongo import *
from mongo import config
from .utils import *

__all__ = (
    'auth_api',
    'login_required',
)

auth_api = Blueprint('auth_api', __name__)


def login_required(func):
    '''Check if the client holds a valid auth cookie

    Returns:
        - A wrapped function
        - 401 Not Logged In
        - 401 Invalid Token
        - 401 Authorization Expired
    '''

    @wraps(func)
    @Request.cookies(vars_dict={'token': config.AUTH_COOKIE})
    def wrapper(token, *args, **kwargs):
        if token is None:
            return HTTPError('Not Logged In', 401)
        try:
            if not check_token(token):
                return HTTPError('Invalid Token', 401, logout=True)
        except AuthorizationExpired:
            return HTTPError('Authorization Expired', 401, logout=True)
        return func(*args, **kwargs)

    return wrapper


@auth_api.route('/login', methods=['POST'])
def login():
    '''Exchange the shared auth code for a session cookie.
    Returns:
        - 200 Authentication successful
        - 401 Invalid auth code
    '''
    auth_code = request.headers.get('authCode')
    if not verify_auth_code(auth_code):
        current_app.logger.info(f'login failed [ip={get_ip()}]')
        return HTTPError('Invalid auth code', 401)
    cookies = {f'{config.AUTH_COOKIE}_httponly': issue_token()}
    return HTTPResponse('Authentication successful', cookies=cookies)


@auth_api.route('/logout', methods=['GET', 'POST'])
def logout():
    '''Remove the session cookie.
    Returns:
        - 200 Goodbye
    '''
    cookies = {config.AUTH_COOKIE: None}
    return HTTPResponse('Goodbye', cookies=cookies)
