from task_tracker import create_app, db
from task_tracker.config import TestConfig
from task_tracker.database import SAMPLE_EMPLOYEES, SAMPLE_TASKS, seed_db
from task_tracker.errors import StorageError
from task_tracker.models import Task
from task_tracker.repositories import get_repositories


class SeededConfig(TestConfig):
    SEED_DATABASE = True


def test_index_lists_endpoints(client):
    body = client.get('/').get_json()
    assert body['success'] is True
    assert body['endpoints']['statistics'] == '/api/tasks/statistics'


def test_unknown_route(client):
    response = client.get('/api/nothing-here')
    assert response.status_code == 404
    assert response.get_json() == {'success': False, 'error': 'Route /api/nothing-here not found'}


def test_non_integer_id_is_unmatched(client):
    response = client.get('/api/employees/abc')
    assert response.status_code == 404
    assert response.get_json()['success'] is False


def test_method_not_allowed(client):
    response = client.patch('/api/tasks')
    assert response.status_code == 405
    assert response.get_json()['success'] is False


def test_seeding_runs_once():
    app = create_app(SeededConfig)
    client = app.test_client()

    body = client.get('/api/employees').get_json()
    assert body['count'] == len(SAMPLE_EMPLOYEES)
    assert client.get('/api/tasks').get_json()['count'] == len(SAMPLE_TASKS)

    with app.app_context():
        assert seed_db() is False

    stats = client.get('/api/tasks/statistics').get_json()['data']
    assert stats == {'total': 13, 'completed': 4, 'inProgress': 4, 'pending': 5,
                     'completionRate': 31}


def test_storage_failure_is_not_leaked(app, client, monkeypatch):
    def broken(*args, **kwargs):
        raise StorageError('no such table: employees (SELECT * FROM employees)')

    with app.app_context():
        monkeypatch.setattr(get_repositories().employees, 'list_all', broken)

    response = client.get('/api/employees')
    assert response.status_code == 500
    body = response.get_json()
    assert body == {'success': False, 'error': 'Server Error: Unable to fetch employees'}


def test_unexpected_error_is_generic(app, client, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError('kaboom')

    with app.app_context():
        monkeypatch.setattr(get_repositories().tasks, 'get_statistics', broken)

    response = client.get('/api/tasks/statistics')
    assert response.status_code == 500
    assert response.get_json() == {'success': False, 'error': 'Internal Server Error'}


def test_cli_seed_command(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['seed-db'])
    assert 'Sample data seeded.' in result.output

    result = runner.invoke(args=['seed-db'])
    assert 'nothing seeded' in result.output

    with app.app_context():
        assert db.session.query(Task).count() == 13
