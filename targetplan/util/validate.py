from targetplan.errors import ValidationError


def not_none(value, message: str):
    if value is None:
        raise ValidationError(message)
    return value


def is_true(condition: bool, message: str) -> None:
    if not condition:
        raise ValidationError(message)
