# task_tracker/models/employee.py
from datetime import datetime, timezone

from task_tracker import db


def utcnow():
    return datetime.now(timezone.utc)


def initials(name):
    return ''.join(part[0] for part in name.split())


class Employee(db.Model):
    __tablename__ = 'employees'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(100), nullable=False)
    role = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(100), unique=True, nullable=False)
    avatar = db.Column(db.String(10))
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    # Rows are removed by the ON DELETE CASCADE on tasks.employee_id
    tasks = db.relationship('Task', back_populates='employee',
                            cascade='all, delete-orphan', passive_deletes=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'role': self.role,
            'email': self.email,
            'avatar': self.avatar,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<Employee {self.id}: {self.name} <{self.email}>>'
