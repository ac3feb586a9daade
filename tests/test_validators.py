import pytest

from task_tracker.errors import ValidationError
from task_tracker.validators import MAX_ID, id_in_range, parse_id, validate_status


@pytest.mark.parametrize('value, expected', [
    (None, None),
    ('', None),
    ('12', 12),
    (7, 7),
    (3.0, 3),
    (MAX_ID, MAX_ID),
])
def test_parse_id_accepts(value, expected):
    assert parse_id(value, 'employee_id') == expected


@pytest.mark.parametrize('value', [
    'abc', True, 1.9, float('inf'), float('nan'), MAX_ID + 1, -MAX_ID - 2,
    '99999999999999999999', [1],
])
def test_parse_id_rejects(value):
    with pytest.raises(ValidationError):
        parse_id(value, 'employee_id')


def test_id_in_range():
    assert id_in_range(1)
    assert not id_in_range(2 ** 63)


def test_status_validator():
    assert validate_status('In Progress') == 'In Progress'
    assert validate_status(None) is None
    with pytest.raises(ValidationError, match='Invalid status'):
        validate_status('Done')
