# task_tracker/repositories/tasks.py
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import contains_eager

from task_tracker.models import Task, TaskPriority, TaskStatus
from task_tracker.models.employee import utcnow
from .base import Patch, SqlRepository


@dataclass
class TaskPatch(Patch):
    title: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    employee_id: Optional[int] = None


def completion_rate(completed, total):
    if not total:
        return 0
    # Halves round up; round() would round them to even.
    return int(100 * completed / total + 0.5)


class TaskRepository(SqlRepository):
    """Data access for tasks; reads carry the owning employee's name and avatar."""

    def _with_employee(self):
        return self.session.query(Task).join(Task.employee).options(contains_eager(Task.employee))

    def list_all(self, status=None, employee_id=None, priority=None):
        query = self._with_employee()

        if status:
            query = query.filter(Task.status == status)

        if employee_id is not None:
            query = query.filter(Task.employee_id == employee_id)

        if priority:
            query = query.filter(Task.priority == priority)

        tasks = query.order_by(Task.created_at.desc(), Task.id.desc()).all()
        return [task.to_dict(include_employee=True) for task in tasks]

    def get_by_id(self, task_id):
        task = self._with_employee().filter(Task.id == task_id).first()
        return task.to_dict(include_employee=True) if task else None

    def create(self, title, employee_id, status=None, priority=None):
        task = Task(
            title=title,
            employee_id=employee_id,
            status=status or TaskStatus.PENDING.value,
            priority=priority or TaskPriority.MEDIUM.value,
        )
        self.session.add(task)
        self._commit()
        return self.get_by_id(task.id)

    def update(self, task_id, patch):
        task = self.session.get(Task, task_id)
        if task is None:
            return None
        for field, value in patch.provided().items():
            setattr(task, field, value)
        task.updated_at = utcnow()
        self._commit()
        return self.get_by_id(task_id)

    def delete(self, task_id):
        deleted = self.session.query(Task).filter(Task.id == task_id).delete(
            synchronize_session='fetch')
        self._commit()
        return deleted > 0

    def get_statistics(self):
        counts = dict(
            self.session.query(Task.status, func.count(Task.id)).group_by(Task.status).all()
        )
        total = sum(counts.values())
        completed = counts.get(TaskStatus.COMPLETED.value, 0)
        return {
            'total': total,
            'completed': completed,
            'inProgress': counts.get(TaskStatus.IN_PROGRESS.value, 0),
            'pending': counts.get(TaskStatus.PENDING.value, 0),
            'completionRate': completion_rate(completed, total),
        }
