import json
import sys
import threading
from enum import IntEnum
from utils.timestamp import format_timestamp

class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @classmethod
    def parse(cls, name):
        name = name.upper()
        if name == "WARNING":
            name = "WARN"
        return cls[name]

_logger = None
_logger_lock = threading.Lock()

class StructuredLogger:
    def __init__(self, level=LogLevel.INFO, stream=None, fields=None, parent=None):
        self._level = level
        self._stream = stream
        self.fields = fields or {}
        self.parent = parent

    # Bound children follow their parent's level and stream
    @property
    def level(self):
        return self.parent.level if self.parent else self._level

    @property
    def stream(self):
        return self.parent.stream if self.parent else self._stream

    def _emit(self, level, message, error=None, **kwargs):
        if level < self.level:
            return
        try:
            record = {"timestamp": format_timestamp(), "level": level.name, "msg": message,
                      **self.fields, **kwargs}
            if error:
                record["err"] = str(error)
            print(json.dumps(record, default=str), file=self.stream or sys.stderr, flush=True)
        except Exception:
            pass

    def bind(self, **fields):
        """Child logger that adds fields to every record."""
        return StructuredLogger(fields={**self.fields, **fields}, parent=self)

    def debug(self, message, **kwargs):
        self._emit(LogLevel.DEBUG, message, **kwargs)

    def info(self, message, **kwargs):
        self._emit(LogLevel.INFO, message, **kwargs)

    def warn(self, message, error=None, **kwargs):
        self._emit(LogLevel.WARN, message, error, **kwargs)

    def error(self, message, error=None, **kwargs):
        self._emit(LogLevel.ERROR, message, error, **kwargs)

    @classmethod
    def configure(cls, min_level=LogLevel.INFO, stream=None):
        """Set level and stream on the shared logger; loggers bound from it follow."""
        global _logger
        if isinstance(min_level, str):
            min_level = LogLevel.parse(min_level)
        with _logger_lock:
            if _logger is None:
                _logger = cls(min_level, stream)
            else:
                _logger._level = min_level
                _logger._stream = stream
        return _logger

def get_logger():
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    return _logger
