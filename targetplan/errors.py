class TargetPlanError(Exception):
    """Base exception for targetplan errors."""


class ValidationError(TargetPlanError, ValueError):
    """Raised when a caller passes a missing or out-of-contract argument."""
