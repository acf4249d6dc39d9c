import math


def validate_not_empty(value, label):
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"{label} is required")
    return value


def validate_positive_count(value, label):
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValueError(f"{label} must be a valid positive number")
    if value < 1 or value != int(value):
        raise ValueError(f"{label} must be a positive integer")
    return int(value)


def validate_coordinate(value, label):
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValueError(f"{label} must be a valid decimal number")
    return value


def validate_array(value, label):
    if not isinstance(value, list):
        raise ValueError(f"{label} must be an array")
    return value
