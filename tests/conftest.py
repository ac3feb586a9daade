import pytest

from task_tracker import create_app, db
from task_tracker.config import TestConfig


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_employee(client):
    def _make(**fields):
        payload = {'name': 'Alice Johnson', 'role': 'Frontend Developer',
                   'email': 'alice@company.com'}
        payload.update(fields)
        response = client.post('/api/employees', json=payload)
        assert response.status_code == 201, response.get_json()
        return response.get_json()['data']
    return _make


@pytest.fixture()
def make_task(client):
    def _make(employee_id, **fields):
        payload = {'title': 'Write unit tests', 'employee_id': employee_id}
        payload.update(fields)
        response = client.post('/api/tasks', json=payload)
        assert response.status_code == 201, response.get_json()
        return response.get_json()['data']
    return _make
