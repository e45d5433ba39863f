import logging
from typing import Any
from flask import current_app
from mongoengine.errors import DoesNotExist, ValidationError

__all__ = ['MongoBase']


class MongoBase:
    '''
    Thin wrapper around a stored document. Construct it from a document,
    another wrapper or a primary key; an id that matches nothing (or is
    not a valid ObjectId) gives an empty wrapper which is falsy.
    '''
    engine: type

    def __init_subclass__(cls, engine, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.engine = engine

    def __new__(cls, pk: Any, *args, **kwargs):
        if isinstance(pk, cls):
            return pk
        new = super().__new__(cls)
        if isinstance(pk, cls.engine):
            new.obj = pk
            return new
        try:
            new.obj = cls.engine.objects.get(pk=pk)
        except (DoesNotExist, ValidationError):
            new.obj = cls.engine(id=pk)
        return new

    def __getattr__(self, name):
        # only reached for names the wrapper itself does not define
        return getattr(self.obj, name)

    def __eq__(self, other):
        return bool(self) and other is not None and self.pk == other.pk

    def __bool__(self):
        if self.obj.pk is None:
            return False
        try:
            return self.engine.objects(pk=self.obj.pk).count() > 0
        except ValidationError:
            return False

    def __str__(self):
        return f'{self.__class__.__name__.lower()} [{self.obj.pk}]'

    @property
    def logger(self):
        try:
            return current_app.logger
        except RuntimeError:
            return logging.getLogger('gunicorn.error')
