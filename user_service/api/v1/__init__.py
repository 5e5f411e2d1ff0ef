from .user_controller import router as user_router
from .error_handlers import register_exception_handlers


__all__ = ["user_router", "register_exception_handlers"]
