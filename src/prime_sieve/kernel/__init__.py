from .driver import PipelineReport, collect_primes, drive, run_pipeline
from .env import StageEnv, unit_entry
from .feeder import FIRST_CANDIDATE, candidate_range, run_feeder
from .stage import FilterStage, StageState, run_stage, stage_name

# Kernel exports are minimal and runtime-focused.
__all__ = [
    "FIRST_CANDIDATE",
    "FilterStage",
    "PipelineReport",
    "StageEnv",
    "StageState",
    "candidate_range",
    "collect_primes",
    "drive",
    "run_feeder",
    "run_pipeline",
    "run_stage",
    "stage_name",
    "unit_entry",
]
