"""Logging setup for the lift command line."""

import logging

import click

LOGGER_NAME = "lift_cli"


class ClickHandler(logging.Handler):
    """Write log records to stderr through click.

    The stream is looked up at emit time, so the handler keeps working
    when click swaps out the standard streams.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach the click handler to the package logger and set its level."""
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, ClickHandler) for h in logger.handlers):
        handler = ClickHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
