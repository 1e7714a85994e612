"""Re-export individual schema modules for easy imports."""

from .rec import ProfileIn, RecRequest, MealOut, RecResponse

__all__ = [
    "ProfileIn",
    "RecRequest",
    "MealOut",
    "RecResponse",
]
