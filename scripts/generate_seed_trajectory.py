#!/usr/bin/env python3
"""Generate a constant operating-point seed trajectory.

Builds the initial-guess trajectory an SLQ-type solver would start from,
split at the given switching times, and saves it as JSON.

Usage:
    python3 generate_seed_trajectory.py --state 1.0 -1.0 --input 0.5 \
        --start 0.0 --final 2.0 [--event-times 0.5 1.5] [--output seed.json]
"""

import argparse
import logging
from pathlib import Path

import numpy as np


def main() -> None:
    """Generate and save the seed trajectory."""
    parser = argparse.ArgumentParser(
        description="Generate a constant operating-point seed trajectory",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Operating point JSON ({\"state\": [...], \"input\": [...]})",
    )
    parser.add_argument(
        "--state", type=float, nargs="+", default=None,
        help="State operating point (overrides --config)",
    )
    parser.add_argument(
        "--input", type=float, nargs="+", default=None,
        help="Input operating point (overrides --config; omit for autonomous systems)",
    )
    parser.add_argument(
        "--start", type=float, default=0.0,
        help="Start time in seconds (default: 0.0)",
    )
    parser.add_argument(
        "--final", type=float, default=1.0,
        help="Final time in seconds (default: 1.0)",
    )
    parser.add_argument(
        "--event-times", type=float, nargs="*", default=[],
        help="Switching times splitting the horizon (default: none)",
    )
    parser.add_argument(
        "--output", type=str, default=None,
        help="Output JSON path (default: data/seed_trajectory.json)",
    )
    args = parser.parse_args()

    if args.output is None:
        args.output = str(Path(__file__).parent.parent / "data" / "seed_trajectory.json")

    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
    )
    logger = logging.getLogger(__name__)

    from operating_trajectories import (
        ConstantOperatingPointProvider,
        ModeSchedule,
        OperatingPointConfig,
        collect_operating_trajectories,
        load_operating_point_config,
        save_operating_trajectories,
    )

    config = (
        load_operating_point_config(args.config)
        if args.config is not None
        else OperatingPointConfig()
    )
    if args.state is not None:
        config.state = args.state
    if args.input is not None:
        config.input = args.input
    if not config.state:
        parser.error("a state operating point is required (--state or --config)")

    provider = ConstantOperatingPointProvider.from_config(config)
    schedule = ModeSchedule(
        event_times=args.event_times,
        subsystem_ids=list(range(len(args.event_times) + 1)),
    )
    provider.bind(schedule, partition_index=0, algorithm_name="cli")

    logger.info("=" * 60)
    logger.info("Seed Trajectory Generation")
    logger.info("=" * 60)
    logger.info(f"  Provider: {provider!r}")
    logger.info(f"  Interval: [{args.start}, {args.final}] s")
    if provider.input_dim == 0:
        logger.info("  No input operating point: autonomous system")
    logger.info(f"  Event times: {schedule.event_times.tolist()}")

    trajectories = collect_operating_trajectories(
        provider,
        initial_state=np.asarray(config.state),
        start_time=args.start,
        final_time=args.final,
        event_times=schedule.event_times,
    )
    logger.info(f"  Samples: {len(trajectories)}")

    save_operating_trajectories(
        args.output,
        trajectories,
        metadata={
            "provider": type(provider).__name__,
            "event_times": schedule.event_times.tolist(),
        },
    )
    logger.info("")
    logger.info(f"Saved to {args.output}")


if __name__ == "__main__":
    main()
