# src/wiregrid/stats.py
# Batch generation survey: success rate, average path length and attempts.

import logging
from dataclasses import dataclass, replace
from typing import Mapping, Union

from .config import LevelOptions
from .mapgen.generator import LevelGenerationError, generate_level
from .validation import validate_level

logger = logging.getLogger(__name__)


@dataclass
class GenerationStats:
    total_attempts: int
    successful_generations: int
    failed_generations: int
    average_path_length: float
    average_generation_attempts: float
    valid_levels: int
    invalid_levels: int

    def to_dict(self):
        return {
            "total_attempts": self.total_attempts,
            "successful_generations": self.successful_generations,
            "failed_generations": self.failed_generations,
            "average_path_length": self.average_path_length,
            "average_generation_attempts": self.average_generation_attempts,
            "valid_levels": self.valid_levels,
            "invalid_levels": self.invalid_levels,
        }


def survey_generation(
    difficulty: str,
    count: int = 10,
    options: Union[LevelOptions, Mapping, None] = None,
) -> GenerationStats:
    """
    Generate `count` levels and validate each one.

    With a seed in `options`, run i uses seed + i so the survey is
    reproducible. Generation failures are counted, not raised; bad options
    still raise ValueError.
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    if isinstance(options, Mapping):
        options = LevelOptions(**options)
    options = options or LevelOptions()

    ok = failed = valid = invalid = 0
    total_len = total_attempts = 0
    for i in range(count):
        run_opts = options if options.seed is None else replace(options, seed=options.seed + i)
        try:
            level = generate_level(difficulty, run_opts)
        except LevelGenerationError as exc:
            failed += 1
            logger.info("level %d: generation failed - %s", i + 1, exc)
            continue
        ok += 1
        total_len += level.solved_path_length
        total_attempts += level.metadata.generation_attempts
        result = validate_level(level)
        if result.valid:
            valid += 1
            logger.info("level %d: valid (path %d, attempts %d)",
                        i + 1, level.solved_path_length, level.metadata.generation_attempts)
        else:
            invalid += 1
            logger.info("level %d: invalid - %s", i + 1, "; ".join(result.issues))

    return GenerationStats(
        total_attempts=count,
        successful_generations=ok,
        failed_generations=failed,
        average_path_length=total_len / ok if ok else 0.0,
        average_generation_attempts=total_attempts / ok if ok else 0.0,
        valid_levels=valid,
        invalid_levels=invalid,
    )


def format_stats(stats: GenerationStats) -> str:
    bar = "=" * 60
    return "\n".join([
        bar,
        "GENERATION STATISTICS",
        bar,
        f"Total attempts: {stats.total_attempts}",
        f"Successful: {stats.successful_generations}",
        f"Failed: {stats.failed_generations}",
        f"Valid levels: {stats.valid_levels}",
        f"Invalid levels: {stats.invalid_levels}",
        f"Average path length: {stats.average_path_length:.2f}",
        f"Average generation attempts: {stats.average_generation_attempts:.2f}",
        bar,
    ])
