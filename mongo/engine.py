from mongoengine import *
import mongoengine
import os
import enum
from datetime import datetime

__all__ = [*mongoengine.__all__]

MONGO_HOST = os.environ.get('MONGO_HOST', 'mongomock://localhost')
connect('cf-dashboard', host=MONGO_HOST)


class User(Document):
    meta = {'collection': 'codeforces_user'}

    # external handle reported by the extension, may be absent
    handle = StringField(db_field='userId', max_length=64, null=True)
    ip = StringField(required=True, unique=True, max_length=64)
    city = StringField(default='', max_length=128)
    region = StringField(default='', max_length=128)
    country = StringField(default='', max_length=64)
    loc = StringField(default='', max_length=64)
    org = StringField(default='', max_length=256)
    postal = StringField(default='', max_length=32)
    timezone = StringField(default='', max_length=64)
    browser = StringField(default='', max_length=256)
    theme = StringField(default='', max_length=64)
    ui = StringField(default='', max_length=64)

    @property
    def info(self):
        return {
            'id': str(self.id),
            'userId': self.handle,
            'ip': self.ip,
            'city': self.city,
            'region': self.region,
            'country': self.country,
            'loc': self.loc,
            'org': self.org,
            'postal': self.postal,
            'timezone': self.timezone,
            'browser': self.browser,
            'theme': self.theme,
            'ui': self.ui,
        }


class Submission(Document):

    class Status(str, enum.Enum):
        SUBMITTED = 'Submitted'
        COMPILATION_ERROR = 'Compilation Error'
        TIME_LIMIT_EXCEEDED = 'Time Limit Exceeded'
        MEMORY_LIMIT_EXCEEDED = 'Memory Limit Exceeded'
        RUNTIME_ERROR = 'Runtime Error'
        WRONG_ANSWER = 'Wrong Answer'
        ACCEPTED = 'Accepted'
        UNKNOWN = 'Unknown'

        @classmethod
        def parse(cls, value) -> 'Submission.Status':
            '''
            map a raw status string to a member, anything not recognized
            (including empty and `None`) is `UNKNOWN`
            '''
            try:
                return cls(str(value or '').strip())
            except ValueError:
                return cls.UNKNOWN

    meta = {
        'collection': 'code_info',
        'indexes': [
            ('user', '-created_at'),
            '-created_at',
        ],
    }
    # the raw verdict text is kept as received
    status = StringField(default='', max_length=64)
    problem_name = StringField(db_field='problemName', max_length=256)
    problem_url = URLField(db_field='problemUrl', required=True)
    code = StringField(required=True, max_length=10**6)
    code_language = StringField(
        db_field='codeLanguage',
        required=True,
        max_length=64,
    )
    created_at = DateTimeField(db_field='createdAt', default=datetime.now)
    user = ReferenceField(User, db_field='userId', required=True)
