from .config import Settings, get_settings
from .logging_config import configure_logging
from .validators import (
    is_valid_email,
    is_valid_full_name,
    is_valid_password,
    validate_user_input,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "is_valid_email",
    "is_valid_full_name",
    "is_valid_password",
    "validate_user_input",
]
