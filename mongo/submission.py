from __future__ import annotations
from typing import (
    Any,
    Dict,
    List,
    NamedTuple,
    Optional,
)
from datetime import datetime

from . import engine
from .base import MongoBase
from .user import User

__all__ = [
    'Submission',
    'StatusDisplay',
    'STATUS_DISPLAY',
]


class StatusDisplay(NamedTuple):
    short: str
    color: str
    icon: str

    def to_dict(self) -> Dict[str, str]:
        return self._asdict()


_Status = engine.Submission.Status

STATUS_DISPLAY = {
    _Status.SUBMITTED: StatusDisplay('SUB', 'blue', 'clock'),
    _Status.COMPILATION_ERROR: StatusDisplay('CE', 'yellow', 'file-warning'),
    _Status.TIME_LIMIT_EXCEEDED: StatusDisplay('TLE', 'orange', 'timer'),
    _Status.MEMORY_LIMIT_EXCEEDED: StatusDisplay('MLE', 'purple', 'cpu'),
    _Status.RUNTIME_ERROR: StatusDisplay('RE', 'red', 'alert-triangle'),
    _Status.WRONG_ANSWER: StatusDisplay('WA', 'red', 'x-circle'),
    _Status.ACCEPTED: StatusDisplay('AC', 'green', 'check-circle'),
    _Status.UNKNOWN: StatusDisplay('?', 'gray', 'help-circle'),
}


class Submission(MongoBase, engine=engine.Submission):
    Status = _Status

    # keys accepted from the extension's `codeInfo` payload
    FIELDS = {
        'status': 'status',
        'problemName': 'problem_name',
        'problemUrl': 'problem_url',
        'code': 'code',
        'codeLanguage': 'code_language',
    }

    def __str__(self):
        return f'submission [{self.id}]'

    @property
    def id(self) -> str:
        '''
        convert mongo ObjectId to hex string for serialize
        '''
        return str(self.obj.id)

    @property
    def owner(self) -> Optional[User]:
        '''
        the user who sent this submission, `None` if the reference is dangling
        '''
        try:
            user = self.obj.user
        except engine.DoesNotExist:
            return None
        if not isinstance(user, engine.User):
            return None
        return User(user)

    @property
    def parsed_status(self) -> engine.Submission.Status:
        return self.Status.parse(self.status)

    @property
    def display(self) -> StatusDisplay:
        return STATUS_DISPLAY[self.parsed_status]

    @staticmethod
    def count() -> int:
        return engine.Submission.objects.count()

    @classmethod
    def list_all(cls) -> List['Submission']:
        '''
        all submissions, newest first
        '''
        return [
            cls(s) for s in engine.Submission.objects.order_by('-created_at')
        ]

    @classmethod
    def add(
        cls,
        user_data: Optional[Dict[str, Any]],
        code_info: Optional[Dict[str, Any]],
        created_at: Optional[datetime] = None,
    ) -> 'Submission':
        '''
        Insert a new submission into db, the sender is looked up by its
        ip and recorded on first sight

        Returns:
            The created submission
        '''
        if not user_data or not code_info:
            raise ValueError('both user data and code info are required')
        if not isinstance(user_data, dict) or not isinstance(code_info, dict):
            raise ValueError('user data and code info must be objects')
        user = User.add_or_get(user_data)
        fields = {
            attr: code_info.get(key)
            for key, attr in cls.FIELDS.items()
            if code_info.get(key) is not None
        }
        if created_at is None:
            created_at = datetime.now()
        submission = cls.engine(
            user=user.obj,
            created_at=created_at,
            **fields,
        )
        submission.save()
        new = cls(submission)
        new.logger.info(f'new submission saved '
                        f'[id={new.id}, user={user.display_handle}, '
                        f'status={new.parsed_status.value}]')
        return new

    def get_code(self) -> str:
        return self.code

    def to_dict(self) -> Dict[str, Any]:
        owner = self.owner
        return {
            'submissionId': self.id,
            'status': self.status,
            'problemName': self.problem_name,
            'problemUrl': self.problem_url,
            'codeLanguage': self.code_language,
            'createdAt': self.created_at.timestamp(),
            'display': self.display.to_dict(),
            'user': owner.info if owner is not None else None,
        }
