import hashlib
from flask import current_app
from functools import wraps
from typing import Dict
from . import engine

__all__ = (
    'hash_id',
    'doc_required',
    'drop_none',
)


def hash_id(salt, text):
    text = ((salt or '') + (text or '')).encode()
    sha = hashlib.sha3_512(text)
    return sha.hexdigest()[:24]


def doc_required(
    src,
    des,
    cls=None,
    src_none_allowed=False,
):
    '''
    query db to inject document into functions.
    if the document does not exist in db, raise `engine.DoesNotExist`.
    if `src` not in parameters, this funtcion will raise `TypeError`
    `doc_required` will check the existence of `des` in `func` parameters,
    if `des` is exist, this function will override it, so `src == des`
    are acceptable
    '''
    # user the same name for `src` and `des`
    # e.g. `doc_required('submission', Submission)` will replace parameter `submission`
    if cls is None:
        cls = des
        des = src

    def deco(func):

        @wraps(func)
        def wrapper(*args, **ks):
            # try get source param
            if src not in ks:
                raise TypeError(f'{src} not found in function argument')
            src_param = ks.get(src)
            if type(cls) != type:
                raise TypeError('cls must be a type')
            # process `None`
            if src_param is None:
                if not src_none_allowed:
                    raise ValueError('src can not be None')
                doc = None
            elif not isinstance(src_param, cls):
                doc = cls(src_param)
            # or, it is already target class instance
            else:
                doc = src_param
            # not None and non-existent
            if doc is not None and not doc:
                raise engine.DoesNotExist(f'{doc} not found!')
            # replace original paramters
            del ks[src]
            if des in ks:
                current_app.logger.warning(
                    f'replace a existed argument in {func}')
            ks[des] = doc
            return func(*args, **ks)

        return wrapper

    return deco


def drop_none(d: Dict):
    return {k: v for k, v in d.items() if v is not None}
