# task_tracker/models/task.py
from enum import Enum

from task_tracker import db
from .employee import utcnow


class TaskStatus(Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class TaskPriority(Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


def _check_in(column, enum_cls):
    values = ', '.join(f"'{member.value}'" for member in enum_cls)
    return db.CheckConstraint(f'{column} IN ({values})', name=f'ck_tasks_{column}')


class Task(db.Model):
    __tablename__ = 'tasks'
    __table_args__ = (
        _check_in('status', TaskStatus),
        _check_in('priority', TaskPriority),
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(200), nullable=False)
    status = db.Column(db.String(20), nullable=False, default=TaskStatus.PENDING.value)
    priority = db.Column(db.String(10), nullable=False, default=TaskPriority.MEDIUM.value)
    employee_id = db.Column(db.Integer, db.ForeignKey('employees.id', ondelete='CASCADE'),
                            nullable=False, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    employee = db.relationship('Employee', back_populates='tasks')

    def to_dict(self, include_employee=False):
        data = {
            'id': self.id,
            'title': self.title,
            'status': self.status,
            'priority': self.priority,
            'employee_id': self.employee_id,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
        if include_employee:
            data['employee_name'] = self.employee.name
            data['employee_avatar'] = self.employee.avatar
        return data

    def __repr__(self):
        return f'<Task {self.id}: {self.title} ({self.status}, {self.priority})>'
