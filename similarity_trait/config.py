"""Runtime configuration for the command-line front end."""

from dataclasses import dataclass
import logging

from .metrics import IntegerDomain

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(slots=True)
class SimilarityConfig:
    int_bits: int = 32
    log_level: str = "WARNING"

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")
        # Raises ValueError for an unusable width.
        IntegerDomain(self.int_bits)

    @property
    def domain(self) -> IntegerDomain:
        return IntegerDomain(self.int_bits)

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)

    def as_dict(self) -> dict[str, int | str]:
        return {
            "int_bits": self.int_bits,
            "log_level": self.log_level,
        }
