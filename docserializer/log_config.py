import atexit
import json
import logging
import logging.handlers
import queue

CONSOLE_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Registry mutations log at DEBUG; consumers only see them when asked to
_log_queue: queue.SimpleQueue = queue.SimpleQueue()
queue_handler = logging.handlers.QueueHandler(_log_queue)

console_handler = logging.StreamHandler()
console_handler.setLevel(logging.INFO)
console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

listener = logging.handlers.QueueListener(
    _log_queue, console_handler, respect_handler_level=True
)
listener.start()
atexit.register(listener.stop)

# Records still propagate, so host handlers and caplog see DEBUG lines
logger = logging.getLogger("docserializer")
logger.setLevel(logging.DEBUG)
logger.addHandler(queue_handler)


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        return json.dumps(payload)


def configure_logging(
    json_logging: bool = False, level: int = logging.INFO
) -> None:
    """
    Call this at application startup to pick the console format and the
    lowest level written to the console.
    """
    console_handler.setLevel(level)
    if json_logging:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
