"""Bunch of random utilities."""

import logging
import os

import coloredlogs


def setup_console_logging(default_log_level="warning", simplified_logging=False) -> logging.Logger:
    """Set up coloured log output.

    - Helper function to have nicer logging output in command line scripts
    - Tune down some noisy dependency library logging
    - ``LOG_LEVEL`` environment variable overrides ``default_log_level``

    :return:
        Root logger
    """

    level = os.environ.get("LOG_LEVEL", default_log_level).upper()
    numeric_level = getattr(logging, level, None)
    assert isinstance(numeric_level, int), f"No level: {level}"

    if simplified_logging:
        fmt = "%(message)s"
    else:
        fmt = "%(asctime)s %(name)-30s %(message)s"
    date_fmt = "%H:%M:%S"

    coloredlogs.install(level=numeric_level, fmt=fmt, datefmt=date_fmt)

    # Mute noise
    logging.getLogger("web3.providers.HTTPProvider").setLevel(logging.WARNING)
    logging.getLogger("web3.RequestManager").setLevel(logging.WARNING)
    logging.getLogger("web3.manager.RequestManager").setLevel(logging.WARNING)
    logging.getLogger("urllib3.connectionpool").setLevel(logging.WARNING)
    logging.getLogger("eth.vm").setLevel(logging.WARNING)
    return logging.getLogger()
