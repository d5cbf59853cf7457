from .paths import PROJECT_ROOT, STORAGE_DIR, LOG_DIR, ENV_FILE
from .logger import configure_logging, get_logger
from .settings import Settings

__all__ = [
    "PROJECT_ROOT",
    "STORAGE_DIR",
    "LOG_DIR",
    "ENV_FILE",
    "configure_logging",
    "get_logger",
    "Settings",
]
