"""Bit layout of a packed ID."""

from core.errors import IDWidthExceededError, InvalidBitWidthError

TIMESTAMP_BITS = 41  # ~69 years of milliseconds
ID_BITS = 63  # top bit of a signed 64-bit integer stays clear


class Layout:
    """Shifts and masks derived from three bit widths.

    From the most significant end: timestamp, data center, worker, sequence.
    """

    __slots__ = (
        "sequence_bits", "worker_bits", "data_center_bits",
        "max_worker", "max_data_center", "sequence_mask",
        "worker_shift", "data_center_shift", "timestamp_shift",
    )

    def __init__(self, sequence_bits=12, worker_bits=5, data_center_bits=5):
        for name, bits in (("sequence_bits", sequence_bits),
                           ("worker_bits", worker_bits),
                           ("data_center_bits", data_center_bits)):
            if bits < 0:
                raise InvalidBitWidthError(f"{name} must not be negative", context={name: bits})

        total = sequence_bits + worker_bits + data_center_bits + TIMESTAMP_BITS
        if total > ID_BITS:
            raise IDWidthExceededError(f"id needs {total} bits, at most {ID_BITS} allowed",
                                       total_bits=total)

        self.sequence_bits = sequence_bits
        self.worker_bits = worker_bits
        self.data_center_bits = data_center_bits

        self.max_worker = (1 << worker_bits) - 1
        self.max_data_center = (1 << data_center_bits) - 1
        self.sequence_mask = (1 << sequence_bits) - 1

        self.worker_shift = sequence_bits
        self.data_center_shift = sequence_bits + worker_bits
        self.timestamp_shift = sequence_bits + worker_bits + data_center_bits

    def pack(self, timestamp, data_center_id, worker_id, sequence):
        return ((timestamp << self.timestamp_shift)
                | (data_center_id << self.data_center_shift)
                | (worker_id << self.worker_shift)
                | sequence)

    def decompose(self, value):
        """Inverse of pack: (timestamp, data_center_id, worker_id, sequence)."""
        return (
            value >> self.timestamp_shift,
            (value >> self.data_center_shift) & self.max_data_center,
            (value >> self.worker_shift) & self.max_worker,
            value & self.sequence_mask,
        )

    def to_dict(self):
        return {
            "sequence_bits": self.sequence_bits,
            "worker_bits": self.worker_bits,
            "data_center_bits": self.data_center_bits,
            "timestamp_shift": self.timestamp_shift,
            "max_worker": self.max_worker,
            "max_data_center": self.max_data_center,
        }

    def __eq__(self, other):
        if not isinstance(other, Layout):
            return NotImplemented
        return (self.sequence_bits, self.worker_bits, self.data_center_bits) == \
            (other.sequence_bits, other.worker_bits, other.data_center_bits)

    def __hash__(self):
        return hash((self.sequence_bits, self.worker_bits, self.data_center_bits))

    def __repr__(self):
        return (f"Layout(sequence_bits={self.sequence_bits}, worker_bits={self.worker_bits}, "
                f"data_center_bits={self.data_center_bits})")
