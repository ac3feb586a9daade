# task_tracker/models/__init__.py
from task_tracker import db

# Import models after db
from .employee import Employee
from .task import Task, TaskPriority, TaskStatus

__all__ = ['Employee', 'Task', 'TaskPriority', 'TaskStatus']
