# task_tracker/repositories/__init__.py
from dataclasses import dataclass

from flask import current_app

from .employees import EmployeePatch, EmployeeRepository
from .tasks import TaskPatch, TaskRepository


@dataclass
class Repositories:
    employees: EmployeeRepository
    tasks: TaskRepository


def init_repositories(app, session):
    app.extensions['repositories'] = Repositories(
        employees=EmployeeRepository(session),
        tasks=TaskRepository(session),
    )
    return app.extensions['repositories']


def get_repositories():
    return current_app.extensions['repositories']


__all__ = ['EmployeePatch', 'EmployeeRepository', 'Repositories', 'TaskPatch',
           'TaskRepository', 'get_repositories', 'init_repositories']
