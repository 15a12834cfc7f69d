from .preconditions import check_argument_not_empty, default_to, value_null_or_empty

__all__ = [
    "check_argument_not_empty",
    "default_to",
    "value_null_or_empty",
]
