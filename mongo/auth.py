from datetime import datetime, timedelta
from hmac import compare_digest
from typing import Any, Dict, Optional

import jwt
import os

from . import config
from .utils import hash_id

__all__ = [
    'AuthorizationExpired',
    'verify_auth_code',
    'issue_token',
    'jwt_decode',
    'check_token',
]

JWT_EXP = timedelta(days=int(os.environ.get('JWT_EXP', '28')))
JWT_ISS = os.environ.get('JWT_ISS', 'test.test')
JWT_SECRET = os.environ.get('JWT_SECRET', 'SuperSecretString')


class AuthorizationExpired(Exception):
    '''
    the token was issued for an auth code that is no longer configured
    '''


def _digest(auth_code: str) -> str:
    return hash_id(JWT_SECRET, auth_code)


def verify_auth_code(auth_code: Optional[str]) -> bool:
    '''
    check a code sent by the client against the configured `AUTH_CODE`,
    always fails while `AUTH_CODE` is not set
    '''
    if not config.AUTH_CODE or not auth_code:
        return False
    return compare_digest(auth_code.encode(), config.AUTH_CODE.encode())


def issue_token() -> str:
    '''
    Sign the cookie value handed out after a successful login. It carries a
    digest of the current auth code instead of the code itself.
    '''
    payload = {
        'iss': JWT_ISS,
        'exp': datetime.now() + JWT_EXP,
        'secret': True,
        'data': {
            'digest': _digest(config.AUTH_CODE),
        },
    }
    return jwt.encode(payload, JWT_SECRET, algorithm='HS256')


def jwt_decode(token) -> Optional[Dict[str, Any]]:
    try:
        json = jwt.decode(
            token,
            JWT_SECRET,
            issuer=JWT_ISS,
            algorithms='HS256',
        )
    except jwt.exceptions.PyJWTError:
        return None
    return json


def check_token(token: Optional[str]) -> bool:
    '''
    Returns:
        whether the token is a valid session

    Raises:
        AuthorizationExpired: if the auth code has been rotated since the
            token was issued
    '''
    if not token:
        return False
    json = jwt_decode(token)
    if json is None or not json.get('secret'):
        return False
    digest = json.get('data', {}).get('digest', '')
    if not config.AUTH_CODE or not compare_digest(
            digest, _digest(config.AUTH_CODE)):
        raise AuthorizationExpired
    return True
