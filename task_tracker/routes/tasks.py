# task_tracker/routes/tasks.py
from flask import current_app, jsonify, request

from task_tracker.errors import NotFoundError, storage_guard
from task_tracker.repositories import TaskPatch, get_repositories
from task_tracker.routes import tasks_bp as bp
from task_tracker.validators import (
    ensure_text, id_in_range, json_body, parse_id, reject_blank, require_fields,
    validate_priority, validate_status,
)


def _get_or_404(task_id):
    if not id_in_range(task_id):
        raise NotFoundError(f'Task with ID {task_id} not found')
    task = get_repositories().tasks.get_by_id(task_id)
    if task is None:
        raise NotFoundError(f'Task with ID {task_id} not found')
    return task


def _ensure_employee_exists(employee_id):
    if get_repositories().employees.get_by_id(employee_id) is None:
        raise NotFoundError(f'Employee with ID {employee_id} not found')


@bp.route('', methods=['GET'])
@storage_guard('fetch tasks')
def list_tasks():
    status = request.args.get('status') or None
    priority = request.args.get('priority') or None
    employee_id = parse_id(request.args.get('employee_id'), 'employee_id')

    tasks = get_repositories().tasks.list_all(
        status=status, employee_id=employee_id, priority=priority)

    current_app.logger.info('GET /api/tasks - Found %d tasks', len(tasks))
    return jsonify({'success': True, 'count': len(tasks), 'data': tasks})


# Registered before /<int:id>; the int converter keeps the two apart anyway.
@bp.route('/statistics', methods=['GET'])
@storage_guard('fetch statistics')
def task_statistics():
    stats = get_repositories().tasks.get_statistics()
    current_app.logger.info('GET /api/tasks/statistics - Completion rate: %d%%',
                            stats['completionRate'])
    return jsonify({'success': True, 'data': stats})


@bp.route('/<int:id>', methods=['GET'])
@storage_guard('fetch task')
def get_task(id):
    return jsonify({'success': True, 'data': _get_or_404(id)})


@bp.route('', methods=['POST'])
@storage_guard('create task')
def create_task():
    data = json_body(request)
    require_fields(data, ('title', 'employee_id'), 'Please provide title and employee_id')
    ensure_text(data, ('title', 'status', 'priority'))

    status = validate_status(data.get('status') or None)
    priority = validate_priority(data.get('priority') or None)
    employee_id = parse_id(data['employee_id'], 'employee_id')
    _ensure_employee_exists(employee_id)

    task = get_repositories().tasks.create(
        title=data['title'],
        employee_id=employee_id,
        status=status,
        priority=priority,
    )

    current_app.logger.info('POST /api/tasks - Created: %s', task['title'])
    return jsonify({
        'success': True,
        'message': 'Task created successfully',
        'data': task,
    }), 201


@bp.route('/<int:id>', methods=['PUT'])
@storage_guard('update task')
def update_task(id):
    data = json_body(request)
    _get_or_404(id)

    ensure_text(data, ('title', 'status', 'priority'))
    reject_blank(data, ('title',))
    patch = TaskPatch.from_payload(data)
    validate_status(patch.status)
    validate_priority(patch.priority)

    if patch.employee_id is not None:
        patch.employee_id = parse_id(patch.employee_id, 'employee_id')
        _ensure_employee_exists(patch.employee_id)

    task = get_repositories().tasks.update(id, patch)
    if task is None:
        raise NotFoundError(f'Task with ID {id} not found')

    current_app.logger.info('PUT /api/tasks/%d - Updated: %s', id, task['title'])
    return jsonify({
        'success': True,
        'message': 'Task updated successfully',
        'data': task,
    })


@bp.route('/<int:id>', methods=['DELETE'])
@storage_guard('delete task')
def delete_task(id):
    existing = _get_or_404(id)
    get_repositories().tasks.delete(id)

    current_app.logger.info('DELETE /api/tasks/%d - Deleted: %s', id, existing['title'])
    return jsonify({
        'success': True,
        'message': 'Task deleted successfully',
        'data': {},
    })
