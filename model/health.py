from flask import Blueprint
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from .utils import *
from mongo.engine import MONGO_HOST

__all__ = ('health_api', )

health_api = Blueprint('health_api', __name__)


@health_api.route('/')
def health():
    # Check mongo
    try:
        client = MongoClient(MONGO_HOST, serverSelectionTimeoutMS=3000)
        mongo_ok = client.server_info().get('ok', 0) == 1.0
    except PyMongoError:
        mongo_ok = False
    if mongo_ok:
        return HTTPResponse()
    else:
        return HTTPError(
            message='Service is not available',
            status_code=500,
            data={
                'mongo': mongo_ok,
            },
        )
