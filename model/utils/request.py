from functools import wraps
from typing import Any, Dict, Optional, Tuple
from flask import request
from mongo import engine
from mongo.utils import doc_required
from .response import *

__all__ = (
    'Request',
    'get_ip',
)

# types a key may declare, e.g. `user_data: dict`
type_map = {
    'str': str,
    'dict': dict,
}


def camel_case(key: str) -> str:
    '''
    `problem_url` -> `problemUrl`
    '''
    head, *tail = filter(bool, key.split('_'))
    return head + ''.join(map(str.capitalize, tail))


def parse_key(key: str) -> Tuple[str, Optional[type]]:
    name, *hint = key.split(':', 1)
    return name.strip(), type_map.get(hint[0].strip()) if hint else None


def pick(data: Dict[str, Any], keys) -> Dict[str, Any]:
    '''
    read every snake_case `key` from its camelCase field of `data`

    raises:
        ValueError: a present value does not match the declared type
    '''
    ret = {}
    for key in keys:
        name, t = parse_key(key)
        value = data.get(camel_case(name))
        if t is not None and value is not None and type(value) is not t:
            raise ValueError(name)
        ret[name] = value
    return ret


class _Request(type):

    def __getattr__(self, content_type):

        def get(*keys, vars_dict={}):

            def data_func(func):

                @wraps(func)
                def wrapper(*args, **kwargs):
                    data = getattr(request, content_type)
                    if data is None:
                        return HTTPError(
                            f'Unaccepted Content-Type {content_type}', 415)
                    # a json body could be a list or a bare value
                    if not isinstance(data, dict):
                        return HTTPError('Missing required fields', 400)
                    try:
                        kwargs.update(pick(data, keys))
                    except ValueError:
                        return HTTPError('Requested Value With Wrong Type',
                                         400)
                    kwargs.update(
                        {v: data.get(vars_dict[v])
                         for v in vars_dict})
                    return func(*args, **kwargs)

                return wrapper

            return data_func

        return get


class Request(metaclass=_Request):

    @staticmethod
    def doc(src, des, cls=None, src_none_allowed=False):
        '''
        a warpper to `doc_required` for flask route
        '''

        def deco(func):

            @doc_required(src, des, cls, src_none_allowed)
            def inner_wrapper(*args, **ks):
                return func(*args, **ks)

            @wraps(func)
            def real_wrapper(*args, **ks):
                try:
                    return inner_wrapper(*args, **ks)
                # if document not exists in db
                except engine.DoesNotExist as e:
                    return HTTPError(str(e), 404)
                # if args missing
                except TypeError as e:
                    return HTTPError(str(e), 500)
                # if args is None
                except ValueError:
                    return HTTPError(f'{src} is required', 400)

            return real_wrapper

        return deco


def get_ip() -> str:
    ip = request.headers.get('X-Forwarded-For', '').split(',')[-1].strip()
    return ip or request.remote_addr
