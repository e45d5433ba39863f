from mongoengine import connect

from . import user
from . import submission
from .utils import *

__all__ = ['drop_db']


def drop_db(
    host: str = 'mongomock://localhost',
    db: str = 'cf-dashboard',
):
    conn = connect(db, host=host)
    conn.drop_database(db)
