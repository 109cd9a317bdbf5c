"""Epoch and shard ids owned by one generator instance."""

from core.errors import DataCenterIDOutOfRangeError, InvalidEpochError, WorkerIDOutOfRangeError
from generation.layout import TIMESTAMP_BITS
from utils.timestamp import to_millis


class Identity:
    __slots__ = ("epoch_millis", "worker_id", "data_center_id")

    def __init__(self, epoch, worker_id, data_center_id):
        self.epoch_millis = to_millis(epoch)
        self.worker_id = worker_id
        self.data_center_id = data_center_id

    def validate(self, layout, now_millis):
        """Check the epoch against now and both ids against the layout's ranges.

        The epoch must also be recent enough that now fits the timestamp bits.
        """
        if self.epoch_millis > now_millis:
            raise InvalidEpochError(
                f"epoch {self.epoch_millis}ms is later than now ({now_millis}ms)",
                epoch=self.epoch_millis, now=now_millis,
            )
        if now_millis - self.epoch_millis >= 1 << TIMESTAMP_BITS:
            raise InvalidEpochError(
                f"epoch {self.epoch_millis}ms is too far in the past for a {TIMESTAMP_BITS}-bit timestamp",
                epoch=self.epoch_millis, now=now_millis,
            )
        if not 0 <= self.worker_id <= layout.max_worker:
            raise WorkerIDOutOfRangeError(
                f"worker id must be between 0 and {layout.max_worker}",
                value=self.worker_id, maximum=layout.max_worker,
            )
        if not 0 <= self.data_center_id <= layout.max_data_center:
            raise DataCenterIDOutOfRangeError(
                f"data center id must be between 0 and {layout.max_data_center}",
                value=self.data_center_id, maximum=layout.max_data_center,
            )

    def to_dict(self):
        return {
            "epoch": self.epoch_millis,
            "worker_id": self.worker_id,
            "data_center_id": self.data_center_id,
        }

    def __repr__(self):
        return (f"Identity(epoch={self.epoch_millis}, worker_id={self.worker_id}, "
                f"data_center_id={self.data_center_id})")
