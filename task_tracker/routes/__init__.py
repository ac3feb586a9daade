# task_tracker/routes/__init__.py
from flask import Blueprint

# Create blueprints
employees_bp = Blueprint('employees', __name__, url_prefix='/api/employees')
tasks_bp = Blueprint('tasks', __name__, url_prefix='/api/tasks')

# Import views after blueprints are created
from . import employees, tasks
