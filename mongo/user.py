from typing import Any, Dict

from . import engine
from .base import *
from .utils import drop_none

__all__ = ['User']


class User(MongoBase, engine=engine.User):
    # keys accepted from the extension's `userData` payload
    FIELDS = (
        'ip',
        'city',
        'region',
        'country',
        'loc',
        'org',
        'postal',
        'timezone',
        'browser',
        'theme',
        'ui',
    )

    @classmethod
    def get_by_ip(cls, ip: str) -> 'User':
        obj = cls.engine.objects.get(ip=ip)
        return cls(obj)

    @classmethod
    def add_or_get(cls, user_data: Dict[str, Any]) -> 'User':
        '''
        Return the user recorded for `user_data['ip']`, create one from
        `user_data` if this address has never been seen

        raises:
            ValueError: when `ip` is missing
            ValidationError: when a field of a new user is invalid
        '''
        ip = user_data.get('ip')
        if not ip:
            raise ValueError('user data must contain an ip')
        try:
            return cls.get_by_ip(ip)
        except engine.DoesNotExist:
            pass
        fields = drop_none({k: user_data.get(k) for k in cls.FIELDS})
        # the extension calls the handle `userId`
        handle = user_data.get('userId') or user_data.get('handle')
        try:
            user = cls.engine(handle=handle, **fields).save(force_insert=True)
        except engine.NotUniqueError:
            # someone else inserted the same ip in between
            return cls.get_by_ip(ip)
        new = cls(user)
        new.logger.info(f'new user recorded [id={user.id}, ip={ip}]')
        return new

    @property
    def display_handle(self) -> str:
        return self.handle or 'Unknown'
