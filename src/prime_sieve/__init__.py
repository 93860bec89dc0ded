from .config import ConfigError, SieveConfig, load_config
from .domain import PipelineError, PipelineTimeoutError, SpawnError, StreamError
from .kernel import PipelineReport, collect_primes, run_pipeline

__all__ = [
    "ConfigError",
    "PipelineError",
    "PipelineReport",
    "PipelineTimeoutError",
    "SieveConfig",
    "SpawnError",
    "StreamError",
    "collect_primes",
    "load_config",
    "run_pipeline",
]
