from typing import Optional
from flask import Blueprint
from mongo import *
from mongo.statistic import (
    compute_statistics,
    filter_submissions,
    list_users,
)
from .auth import *
from .utils import *

__all__ = ['stats_api']

stats_api = Blueprint('stats_api', __name__)


@stats_api.route('/', methods=['GET'])
@login_required
@Request.args('q', 'user')
def get_stats(q: Optional[str], user: Optional[str]):
    '''
    statistics of the submissions matching the dashboard filters
    '''
    submissions = [s.to_dict() for s in Submission.list_all()]
    stats = compute_statistics(
        filter_submissions(
            submissions,
            query=q,
            selected_user=user,
        ))
    # the user selector always lists everyone
    stats['users'] = list_users(submissions)
    stats['statusDisplay'] = {
        status.value: display.to_dict()
        for status, display in STATUS_DISPLAY.items()
    }
    return HTTPResponse(data=stats)
