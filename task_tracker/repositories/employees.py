# task_tracker/repositories/employees.py
from collections import defaultdict
from dataclasses import dataclass
from typing import Optional

from task_tracker.models import Employee, Task
from task_tracker.models.employee import initials, utcnow
from .base import Patch, SqlRepository


@dataclass
class EmployeePatch(Patch):
    name: Optional[str] = None
    role: Optional[str] = None
    email: Optional[str] = None
    avatar: Optional[str] = None


def _newest_first(query, model):
    return query.order_by(model.created_at.desc(), model.id.desc())


class EmployeeRepository(SqlRepository):
    """Data access for employees. Every method returns plain dicts."""

    def list_all(self):
        employees = _newest_first(self.session.query(Employee), Employee).all()
        return [employee.to_dict() for employee in employees]

    def list_all_with_tasks(self):
        employees = self.session.query(Employee).order_by(Employee.id).all()

        tasks_by_employee = defaultdict(list)
        for task in _newest_first(self.session.query(Task), Task):
            tasks_by_employee[task.employee_id].append(task.to_dict())

        result = []
        for employee in employees:
            data = employee.to_dict()
            data['tasks'] = tasks_by_employee[employee.id]
            result.append(data)
        return result

    def get_by_id(self, employee_id):
        employee = self.session.get(Employee, employee_id)
        return employee.to_dict() if employee else None

    def get_by_id_with_tasks(self, employee_id):
        employee = self.session.get(Employee, employee_id)
        if employee is None:
            return None
        tasks = _newest_first(
            self.session.query(Task).filter(Task.employee_id == employee_id), Task
        ).all()
        data = employee.to_dict()
        data['tasks'] = [task.to_dict() for task in tasks]
        return data

    def get_by_email(self, email):
        employee = self.session.query(Employee).filter(Employee.email == email).first()
        return employee.to_dict() if employee else None

    def create(self, name, role, email, avatar=None):
        employee = Employee(name=name, role=role, email=email,
                            avatar=avatar or initials(name))
        self.session.add(employee)
        self._commit()
        return employee.to_dict()

    def update(self, employee_id, patch):
        employee = self.session.get(Employee, employee_id)
        if employee is None:
            return None
        for field, value in patch.provided().items():
            setattr(employee, field, value)
        employee.updated_at = utcnow()
        self._commit()
        return employee.to_dict()

    def delete(self, employee_id):
        employee = self.session.get(Employee, employee_id)
        if employee is None:
            return False
        self.session.delete(employee)
        self._commit()
        return True
