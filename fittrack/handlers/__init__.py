"""HTTP-обработчики ресурсов."""
from fittrack.handlers.users import register_handlers as register_user_handlers
from fittrack.handlers.weight import register_handlers as register_weight_handlers
from fittrack.handlers.nutrition import register_handlers as register_nutrition_handlers
from fittrack.handlers.intensity import register_handlers as register_intensity_handlers

__all__ = [
    "register_user_handlers",
    "register_weight_handlers",
    "register_nutrition_handlers",
    "register_intensity_handlers",
]
