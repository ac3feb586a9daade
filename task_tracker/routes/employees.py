# task_tracker/routes/employees.py
from flask import current_app, jsonify, request

from task_tracker.errors import ConflictError, NotFoundError, storage_guard
from task_tracker.repositories import EmployeePatch, get_repositories
from task_tracker.routes import employees_bp as bp
from task_tracker.validators import (
    ensure_text, id_in_range, json_body, reject_blank, require_fields,
)

TEXT_FIELDS = ('name', 'role', 'email', 'avatar')


def _include_tasks():
    return request.args.get('include_tasks', '').lower() == 'true'


def _get_or_404(employee_id, with_tasks=False):
    # No stored row can carry an id SQLite cannot bind
    if not id_in_range(employee_id):
        raise NotFoundError(f'Employee with ID {employee_id} not found')
    employees = get_repositories().employees
    if with_tasks:
        employee = employees.get_by_id_with_tasks(employee_id)
    else:
        employee = employees.get_by_id(employee_id)
    if employee is None:
        raise NotFoundError(f'Employee with ID {employee_id} not found')
    return employee


@bp.route('', methods=['GET'])
@storage_guard('fetch employees')
def list_employees():
    employees = get_repositories().employees
    if _include_tasks():
        data = employees.list_all_with_tasks()
    else:
        data = employees.list_all()

    current_app.logger.info('GET /api/employees - Found %d employees', len(data))
    return jsonify({'success': True, 'count': len(data), 'data': data})


@bp.route('/<int:id>', methods=['GET'])
@storage_guard('fetch employee')
def get_employee(id):
    employee = _get_or_404(id, with_tasks=_include_tasks())
    return jsonify({'success': True, 'data': employee})


@bp.route('', methods=['POST'])
@storage_guard('create employee')
def create_employee():
    data = json_body(request)
    require_fields(data, ('name', 'role', 'email'), 'Please provide name, role, and email')
    ensure_text(data, TEXT_FIELDS)

    employees = get_repositories().employees
    if employees.get_by_email(data['email']) is not None:
        raise ConflictError('Employee with this email already exists')

    employee = employees.create(
        name=data['name'],
        role=data['role'],
        email=data['email'],
        avatar=data.get('avatar'),
    )

    current_app.logger.info('POST /api/employees - Created: %s', employee['name'])
    return jsonify({
        'success': True,
        'message': 'Employee created successfully',
        'data': employee,
    }), 201


@bp.route('/<int:id>', methods=['PUT'])
@storage_guard('update employee')
def update_employee(id):
    data = json_body(request)
    existing = _get_or_404(id)

    ensure_text(data, TEXT_FIELDS)
    reject_blank(data, ('name', 'role', 'email'))
    patch = EmployeePatch.from_payload(data)

    # Only another employee can hold the address; keeping your own is fine.
    if patch.email and patch.email != existing['email']:
        if get_repositories().employees.get_by_email(patch.email) is not None:
            raise ConflictError('Email already in use by another employee')

    employee = get_repositories().employees.update(id, patch)
    if employee is None:
        raise NotFoundError(f'Employee with ID {id} not found')

    current_app.logger.info('PUT /api/employees/%d - Updated: %s', id, employee['name'])
    return jsonify({
        'success': True,
        'message': 'Employee updated successfully',
        'data': employee,
    })


@bp.route('/<int:id>', methods=['DELETE'])
@storage_guard('delete employee')
def delete_employee(id):
    existing = _get_or_404(id)

    # Owned tasks go with it through the foreign key cascade.
    get_repositories().employees.delete(id)

    current_app.logger.info('DELETE /api/employees/%d - Deleted: %s', id, existing['name'])
    return jsonify({
        'success': True,
        'message': 'Employee deleted successfully',
        'data': {},
    })
