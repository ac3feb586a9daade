# task_tracker/validators.py
from task_tracker.errors import ValidationError
from task_tracker.models import TaskPriority, TaskStatus


class OneOf:
    """Finite-set membership check for enum-backed fields."""

    def __init__(self, field, choices):
        self.field = field
        self.choices = [getattr(choice, 'value', choice) for choice in choices]

    def __call__(self, value):
        if value is not None and value not in self.choices:
            raise ValidationError(
                f"Invalid {self.field}. Must be one of: {', '.join(self.choices)}"
            )
        return value


validate_status = OneOf('status', TaskStatus)
validate_priority = OneOf('priority', TaskPriority)


def _is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(data, fields, message):
    if any(_is_blank(data.get(field)) for field in fields):
        raise ValidationError(message)


def reject_blank(data, fields):
    # For partial updates: a provided text field may not be emptied.
    for field in fields:
        if field in data and data[field] is not None and _is_blank(data[field]):
            raise ValidationError(f'{field} cannot be empty')


# SQLite stores INTEGER as a signed 64-bit value
MAX_ID = 2 ** 63 - 1


def id_in_range(value):
    return -MAX_ID - 1 <= value <= MAX_ID


def parse_id(value, field):
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        raise ValidationError(f'{field} must be an integer')
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f'{field} must be an integer')
    try:
        parsed = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f'{field} must be an integer')
    if not id_in_range(parsed):
        raise ValidationError(f'{field} is out of range')
    return parsed


def json_body(request):
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def ensure_text(data, fields):
    for field in fields:
        value = data.get(field)
        if value is not None and not isinstance(value, str):
            raise ValidationError(f'{field} must be a string')
