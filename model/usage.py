from typing import Optional
from flask import Blueprint, current_app
from mongo import *
from mongo import engine
from mongo.statistic import filter_submissions
from .auth import *
from .utils import *

__all__ = ['usage_api']

usage_api = Blueprint('usage_api', __name__)


@usage_api.route('/', methods=['GET'])
@login_required
@Request.args('q', 'user')
def get_usage(q: Optional[str], user: Optional[str]):
    '''
    get every recorded submission, newest first
    '''
    if not engine.User.objects.count():
        return HTTPError('No users found', 404)
    submissions = [s.to_dict() for s in Submission.list_all()]
    submissions = filter_submissions(
        submissions,
        query=q,
        selected_user=user,
    )
    return HTTPResponse(data=submissions)


@usage_api.route('/', methods=['POST'])
@Request.json('user_data', 'code_info')
def add_usage(user_data, code_info):
    '''
    record a submission sent by the browser extension
    '''
    if not user_data or not code_info:
        return HTTPError('Missing required fields', 400)
    try:
        Submission.add(user_data=user_data, code_info=code_info)
    except ValueError as e:
        return HTTPError(str(e), 400)
    except ValidationError as ve:
        current_app.logger.info(f'Validation error [err={ve.to_dict()}]')
        return HTTPError('Invalid data', 400, data=ve.to_dict())
    return HTTPResponse('Successfully saved')
