from .default import value_or_default
from .positions import is_unit_position

__all__ = ["value_or_default", "is_unit_position"]
