from typing import Optional, TypeVar

T = TypeVar('T')

def value_or_default(value: Optional[T], default: T) -> T:
    """Return ``value`` unless it is None, in which case return ``default``."""
    if value is None:
        return default
    return value
