"""Logging setup for the artifact-cleaner CLI.

Library modules only create module-level loggers; the root logger is
configured once here, from the CLI's global verbosity options.
"""

import logging

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_log_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a logging level.

    ``--verbose`` wins over ``--quiet`` when both are given.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the root logger for a CLI run.

    Args:
        verbose: Log found, ignored and deleted paths (DEBUG).
        quiet: Only log warnings and errors.
    """
    logging.basicConfig(
        level=get_log_level(verbose=verbose, quiet=quiet),
        format=LOG_FORMAT,
        force=True,
    )
