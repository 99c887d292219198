"""Configuration module for the routing optimizer."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure and return the application logger."""
    logger = logging.getLogger("vrp")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


@dataclass
class OptimizerParams:
    """Parameters for the tabu search and its cost model."""
    max_shift_time: float = 720.0  # 12 hours in minutes
    cost_per_driver: float = 500.0
    tabu_list_size: int = 10
    tabu_tenure: Optional[int] = None  # defaults to tabu_list_size
    max_iterations: int = 100
    neighborhood_size: int = 10
    seed: Optional[int] = None

    def __post_init__(self):
        for name in (
            "max_shift_time",
            "cost_per_driver",
            "tabu_list_size",
            "max_iterations",
            "neighborhood_size",
        ):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.tabu_tenure is not None and self.tabu_tenure <= 0:
            raise ValueError(f"tabu_tenure must be positive, got {self.tabu_tenure}")


@dataclass
class Config:
    """Configuration class for an optimization run."""

    # File paths
    loads_file: str
    results_file: Optional[str] = None

    # Optimizer parameters
    optimizer_params: OptimizerParams = field(default_factory=OptimizerParams)

    # Logging
    log_level: int = logging.INFO

    def __post_init__(self):
        self.loads_file = str(Path(self.loads_file).expanduser())
        if self.results_file is not None:
            self.results_file = str(Path(self.results_file).expanduser())
