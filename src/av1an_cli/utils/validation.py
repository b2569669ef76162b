"""Cross-field validation of resolved arguments."""

from typing import Any

from loguru import logger


def check_constraints(args: Any) -> None:
    """Check option combinations that are individually valid but contradict.

    Called for every ``EncodeArgs`` instance before it is handed out, so no
    configuration with contradicting values ever exists.

    Args:
        args: Resolved arguments (any object with the ``EncodeArgs`` fields)

    Raises:
        ValueError: If the combination of values is contradictory
    """
    if args.min_q is not None and args.max_q is not None and args.min_q > args.max_q:
        raise ValueError(
            f"min_q ({args.min_q}) must not be greater than max_q ({args.max_q})"
        )

    if args.target_quality is not None:
        if args.probes == 0:
            raise ValueError("target_quality requires at least one probe")
        if args.probing_rate == 0:
            raise ValueError("target_quality requires a probing_rate of at least 1")
        return

    ignored = []
    if args.min_q is not None:
        ignored.append("min_q")
    if args.max_q is not None:
        ignored.append("max_q")
    if args.vmaf_plots:
        ignored.append("vmaf_plots")
    if ignored:
        verb = "applies" if len(ignored) == 1 else "apply"
        logger.warning(
            f"{', '.join(ignored)} only {verb} with target_quality and will be ignored"
        )
