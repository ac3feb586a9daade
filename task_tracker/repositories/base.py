# task_tracker/repositories/base.py
from dataclasses import asdict

from sqlalchemy.exc import SQLAlchemyError

from task_tracker.errors import StorageError


class Patch:
    """Base for partial-update structures.

    A field left as ``None`` was not provided and must not touch the stored
    value.
    """

    @classmethod
    def from_payload(cls, payload):
        names = cls.__dataclass_fields__
        return cls(**{key: value for key, value in payload.items()
                      if key in names and value is not None})

    def provided(self):
        return {key: value for key, value in asdict(self).items() if value is not None}

    def __bool__(self):
        return bool(self.provided())


class SqlRepository:
    def __init__(self, session):
        self.session = session

    def _commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError(str(exc)) from exc
