"""Small input checks shared by the services."""
from typing import Dict, Iterable, List


def missing_fields(data: Dict, names: Iterable[str]) -> List[str]:
    """Return one error message per required text field that is absent or
    blank in *data*."""
    errors = []
    for name in names:
        value = data.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            errors.append(f"{name} is required")
    return errors


def int_in_range(data: Dict, name: str, low: int, high: int) -> List[str]:
    value = data.get(name)
    # bool is an int subclass but never a valid rating
    if isinstance(value, bool) or not isinstance(value, int):
        return [f"{name} must be an integer"]
    if not low <= value <= high:
        return [f"{name} must be between {low} and {high}"]
    return []
