import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional

from fridgestore.config import StoreSettings, get_settings
from fridgestore.domain.beverages import Beverage

ROOT_LOGGER_NAME = "fridgestore"


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "logger": record.name,
            "ts": record.created,
            "details": render_details(getattr(record, "details", {})),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


def create_logger(name: str, ring_size: int, level: str | int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    if get_ring_buffer(logger) is not None:
        return logger
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    handler = RingBufferHandler(max_entries=ring_size)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str = ROOT_LOGGER_NAME, settings: Optional[StoreSettings] = None) -> logging.Logger:
    """Return a logger under the package root, configuring the root on first use."""
    settings = settings or get_settings()
    create_logger(ROOT_LOGGER_NAME, ring_size=settings.log_ring_size, level=settings.log_level)
    return logging.getLogger(name)


def get_ring_buffer(logger: Optional[logging.Logger] = None) -> Optional[RingBufferHandler]:
    logger = logger or logging.getLogger(ROOT_LOGGER_NAME)
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def render_details(details: Optional[dict]) -> dict:
    """Flatten detail values to plain data; beverages are shown by name."""
    if not details:
        return {}
    cleaned = {}
    for key, value in details.items():
        if isinstance(value, Beverage):
            cleaned[key] = value.name
        else:
            cleaned[key] = value
    return cleaned


def format_event(event: Dict) -> str:
    details = " ".join(f"{key}={value}" for key, value in event.get("details", {}).items())
    return f"{event['level']} {event['logger']} {event['event']} {details}".rstrip()
