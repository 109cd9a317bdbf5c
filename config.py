import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"

# 2020-01-01T00:00:00Z
DEFAULT_EPOCH = 1577836800000


class LayoutConfig:
    __slots__ = ("sequence_bits", "worker_bits", "data_center_bits")

    def __init__(self, sequence_bits=12, worker_bits=5, data_center_bits=5):
        self.sequence_bits = sequence_bits
        self.worker_bits = worker_bits
        self.data_center_bits = data_center_bits


class IdentityConfig:
    __slots__ = ("epoch", "worker_id", "data_center_id")

    def __init__(self, epoch=DEFAULT_EPOCH, worker_id=0, data_center_id=0):
        self.epoch = epoch
        self.worker_id = worker_id
        self.data_center_id = data_center_id


class LoggingConfig:
    __slots__ = ("level",)

    def __init__(self, level="INFO"):
        self.level = level


class Config:
    __slots__ = ("layout", "identity", "logging")

    def __init__(self, layout=None, identity=None, logging=None):
        self.layout = layout or LayoutConfig()
        self.identity = identity or IdentityConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            LayoutConfig(**d.get("layout", {})),
            IdentityConfig(**d.get("identity", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
