import logging
import sys


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

# Marks the handler installed here so repeated calls leave other handlers alone
_HANDLER_NAME = "user_service.console"


def configure_logging(level: str = "INFO") -> None:
    """Set the root level and attach this service's stdout handler once."""
    resolved_level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(resolved_level)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(resolved_level)
            return

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(console_handler)
