from flask import Blueprint
from mongo import *
from .auth import *
from .utils import *

__all__ = ['code_api']

code_api = Blueprint('code_api', __name__)


@code_api.route('/', methods=['GET'])
@login_required
@Request.args('id')
@Request.doc('id', 'submission', Submission)
def get_code(submission: Submission):
    return HTTPResponse(data={
        'code': submission.get_code(),
        'codeLanguage': submission.code_language,
    })
