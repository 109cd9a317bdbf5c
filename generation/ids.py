from functools import total_ordering

from utils.timestamp import format_timestamp


@total_ordering
class GeneratedID:
    """A packed ID together with the components that went into it.

    `timestamp` is milliseconds since the generator's epoch, not since 1970.
    Compares and hashes by `value`.
    """

    __slots__ = ("value", "timestamp", "worker_id", "data_center_id", "sequence", "epoch_millis")

    def __init__(self, value, timestamp, worker_id, data_center_id, sequence, epoch_millis=0):
        self.value = value
        self.timestamp = timestamp
        self.worker_id = worker_id
        self.data_center_id = data_center_id
        self.sequence = sequence
        self.epoch_millis = epoch_millis

    @property
    def unix_millis(self):
        return self.timestamp + self.epoch_millis

    @property
    def issued_at(self):
        return format_timestamp(self.unix_millis)

    def to_dict(self):
        return {
            "id": self.value,
            "timestamp": self.timestamp,
            "issued_at": self.issued_at,
            "worker_id": self.worker_id,
            "data_center_id": self.data_center_id,
            "sequence": self.sequence,
        }

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def __eq__(self, other):
        if not isinstance(other, GeneratedID):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other):
        if not isinstance(other, GeneratedID):
            return NotImplemented
        return self.value < other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return (f"GeneratedID({self.value}, timestamp={self.timestamp}, worker_id={self.worker_id}, "
                f"data_center_id={self.data_center_id}, sequence={self.sequence})")
