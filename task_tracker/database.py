# task_tracker/database.py
import sqlite3
from pathlib import Path

from sqlalchemy import event
from sqlalchemy.engine import Engine

from task_tracker import db


@event.listens_for(Engine, 'connect')
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection.
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys = ON')
        cursor.close()


SAMPLE_EMPLOYEES = [
    ('Alice Johnson', 'Frontend Developer', 'alice@company.com', 'AJ'),
    ('Bob Smith', 'Backend Developer', 'bob@company.com', 'BS'),
    ('Carol Williams', 'UI/UX Designer', 'carol@company.com', 'CW'),
    ('David Lee', 'Full Stack Developer', 'david@company.com', 'DL'),
    ('Emma Davis', 'Project Manager', 'emma@company.com', 'ED'),
]

# (title, status, priority, index into SAMPLE_EMPLOYEES)
SAMPLE_TASKS = [
    ('Build login page', 'Completed', 'High', 0),
    ('Implement dashboard', 'In Progress', 'High', 0),
    ('Write unit tests', 'Pending', 'Medium', 0),
    ('API integration', 'Pending', 'High', 1),
    ('Database optimization', 'In Progress', 'Medium', 1),
    ('Design homepage mockup', 'Completed', 'High', 2),
    ('Create icon set', 'Completed', 'Low', 2),
    ('User research report', 'In Progress', 'Medium', 2),
    ('Setup CI/CD pipeline', 'Pending', 'High', 3),
    ('Code review', 'In Progress', 'Low', 3),
    ('Documentation update', 'Pending', 'Medium', 3),
    ('Sprint planning', 'Completed', 'High', 4),
    ('Client meeting preparation', 'Pending', 'High', 4),
]


def init_db():
    database = db.engine.url.database
    if db.engine.url.get_backend_name() == 'sqlite' and database and database != ':memory:':
        Path(database).parent.mkdir(parents=True, exist_ok=True)

    # create_all only creates missing tables, so this is safe on every start.
    db.create_all()


def seed_db(logger=None):
    """Insert the sample employees and tasks unless employees already exist."""
    from task_tracker.models import Employee, Task

    if db.session.query(Employee.id).first() is not None:
        return False

    if logger:
        logger.info('Seeding database with sample data...')

    employees = [Employee(name=name, role=role, email=email, avatar=avatar)
                 for name, role, email, avatar in SAMPLE_EMPLOYEES]
    db.session.add_all(employees)
    db.session.flush()

    db.session.add_all([
        Task(title=title, status=status, priority=priority, employee_id=employees[owner].id)
        for title, status, priority, owner in SAMPLE_TASKS
    ])
    db.session.commit()

    if logger:
        logger.info('Seeded %d employees and %d tasks', len(SAMPLE_EMPLOYEES), len(SAMPLE_TASKS))
    return True
