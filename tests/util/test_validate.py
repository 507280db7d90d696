import pytest

from targetplan.errors import TargetPlanError, ValidationError
from targetplan.util.validate import is_true, not_none


def test_not_none_returns_value():
    assert not_none(0, "zero is a value") == 0


def test_not_none_raises():
    with pytest.raises(ValidationError, match="location cannot be None"):
        not_none(None, "location cannot be None")


def test_is_true_raises():
    with pytest.raises(ValidationError, match="must be > 0"):
        is_true(False, "minimum_altitude must be > 0")


def test_validation_error_hierarchy():
    assert issubclass(ValidationError, TargetPlanError)
    assert issubclass(ValidationError, ValueError)
