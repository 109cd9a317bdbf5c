import threading

from config import load_config
from core.errors import ClockMovedBackError
from generation.identity import Identity
from generation.ids import GeneratedID
from generation.layout import Layout
from internal.logging import StructuredLogger, get_logger
from utils.timestamp import now_millis


class Cursor:
    """Last stamped millisecond (relative to epoch) and the sequence used in it."""

    __slots__ = ("last_timestamp", "sequence")

    def __init__(self):
        self.last_timestamp = -1
        self.sequence = 0


class Generator:
    """Thread-safe Snowflake ID generator for one (worker, data center) pair.

    IDs from one instance are unique and strictly increasing in the order
    callers acquire the lock. Nothing is promised across instances.
    """

    def __init__(self, epoch, worker_id, data_center_id, layout=None, clock=None):
        """
        epoch          : Unix milliseconds or datetime, not later than now
        worker_id      : 0..layout.max_worker
        data_center_id : 0..layout.max_data_center
        layout         : bit widths, defaults to 12/5/5
        clock          : zero-arg callable returning Unix milliseconds
        """
        self.layout = layout or Layout()
        self.identity = Identity(epoch, worker_id, data_center_id)
        self._clock = clock or now_millis
        self.identity.validate(self.layout, self._clock())

        self._lock = threading.Lock()
        self._cursor = Cursor()
        self._log = get_logger().bind(component="generator", worker_id=worker_id,
                                      data_center_id=data_center_id)
        self._log.info("generator ready", epoch=self.identity.epoch_millis, **self.layout.to_dict())

    @classmethod
    def from_config(cls, config, clock=None):
        layout = Layout(config.layout.sequence_bits, config.layout.worker_bits,
                        config.layout.data_center_bits)
        identity = config.identity
        return cls(identity.epoch, identity.worker_id, identity.data_center_id,
                   layout=layout, clock=clock)

    @property
    def worker_id(self):
        return self.identity.worker_id

    @property
    def data_center_id(self):
        return self.identity.data_center_id

    @property
    def epoch_millis(self):
        return self.identity.epoch_millis

    @property
    def last_timestamp(self):
        with self._lock:
            return self._cursor.last_timestamp

    @property
    def sequence(self):
        with self._lock:
            return self._cursor.sequence

    def _now(self):
        return self._clock() - self.identity.epoch_millis

    def _til_next_millis(self, last_timestamp):
        # Spin rather than sleep: exhaustion clears within the current millisecond
        timestamp = self._now()
        while timestamp <= last_timestamp:
            timestamp = self._now()
        return timestamp

    def next(self):
        """Return the next GeneratedID.

        Raises ClockMovedBackError if the clock reads earlier than the last
        stamped millisecond; the cursor is left as it was.
        """
        with self._lock:
            cursor = self._cursor
            timestamp = self._now()

            if timestamp < cursor.last_timestamp:
                self._log.warn("clock moved back", last_timestamp=cursor.last_timestamp,
                               observed_timestamp=timestamp)
                raise ClockMovedBackError(
                    f"clock moved back by {cursor.last_timestamp - timestamp}ms",
                    last_timestamp=cursor.last_timestamp, observed_timestamp=timestamp,
                )

            if timestamp == cursor.last_timestamp:
                sequence = (cursor.sequence + 1) & self.layout.sequence_mask
                if sequence == 0:
                    self._log.debug("sequence exhausted", timestamp=timestamp)
                    timestamp = self._til_next_millis(cursor.last_timestamp)
            else:
                sequence = 0

            cursor.last_timestamp = timestamp
            cursor.sequence = sequence

            identity = self.identity
            value = self.layout.pack(timestamp, identity.data_center_id, identity.worker_id, sequence)
            return GeneratedID(value, timestamp, identity.worker_id, identity.data_center_id,
                               sequence, identity.epoch_millis)

    def parse(self, value):
        """Split a packed ID from this generator's layout back into a GeneratedID."""
        timestamp, data_center_id, worker_id, sequence = self.layout.decompose(int(value))
        return GeneratedID(int(value), timestamp, worker_id, data_center_id, sequence,
                           self.identity.epoch_millis)

    def __repr__(self):
        return f"Generator({self.identity!r}, {self.layout!r})"


def create_generator(config=None, clock=None):
    """Build a generator from config.json (or the given Config) and set up logging."""
    config = config or load_config()
    StructuredLogger.configure(min_level=config.logging.level)
    return Generator.from_config(config, clock=clock)
