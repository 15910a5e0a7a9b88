"""
Application Entry
=================
Runs the curve demo: random curves are generated, evaluated at one
parameter, and the circles among them are sorted and summed.

Settings are read from `curves3d.config`; the report is written to stdout.
"""
import logging
from typing import Optional

from curves3d import config
from curves3d.logging_config import setup_logging
from curves3d.pipeline import make_rng, run_pipeline
from curves3d.report import format_report

logger = logging.getLogger(__name__)


def main(seed: Optional[int] = None) -> None:
    # 1. Setup Logging (only when requested in config)
    if config.LOG_LEVEL is not None:
        setup_logging(level=config.LOG_LEVEL, log_file=config.LOG_FILE)

    # 2. Random source
    seed = seed if seed is not None else config.RANDOM_SEED
    logger.info(f"Random seed: {seed}")
    rng = make_rng(seed)

    # 3. Run the pipeline
    low, high = config.PARAMETER_RANGE
    result = run_pipeline(
        n=config.SAMPLE_SIZE,
        t=config.EVALUATION_PARAMETER,
        rng=rng,
        low=low,
        high=high
    )

    # 4. Report
    print(format_report(result, config.EVALUATION_LABEL))


if __name__ == "__main__":
    main()
