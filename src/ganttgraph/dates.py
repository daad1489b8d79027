from datetime import date, datetime

from pydantic import TypeAdapter, ValidationError

from .errors import InputError

_DATE_ADAPTER = TypeAdapter(date)
_DATETIME_ADAPTER = TypeAdapter(datetime)


def parse_date(value) -> date:
    """
    Convert user input into a calendar date.

    Accepts ``date`` and ``datetime`` objects (the time part is dropped) and
    ISO 8601 strings, with or without a time component.

    Raises:
        InputError: If the value is None, empty or cannot be parsed.
    """
    if value is None:
        raise InputError("Date input cannot be null")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        value = value.strip()
        if value == '':
            raise InputError("Date input cannot be empty")

    try:
        return _DATE_ADAPTER.validate_python(value)
    except ValidationError:
        pass
    try:
        return _DATETIME_ADAPTER.validate_python(value).date()
    except ValidationError as e:
        raise InputError(f"Invalid date format: {value!r}") from e
