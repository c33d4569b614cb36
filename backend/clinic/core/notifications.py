"""
Outcome reporting for services.

Services never print or log directly: each success and each failure goes
through a ``Notifier``, which forwards a severity-tagged event to the
notification sink (logging by default) and a human-facing message to the
display.

Usage:
    notifier = Notifier(display=ConsoleDisplay())
    notifier.success("Patient added", patient_id=1)
    raise notifier.failure(NotFoundError("Patient", 7))

    with notifier.validating():
        patient = Patient(name=name, age=age, disease=disease)
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

import click

from ..domain.interfaces import IDisplay, INotificationSink
from .exceptions import ClinicError, ValidationError


class LoggingNotificationSink(INotificationSink):
    """Notification sink backed by the standard logging module."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger("clinic.events")

    def info(self, message: str, **context) -> None:
        self.logger.info(message, extra={"context": context})

    def warning(self, message: str, **context) -> None:
        self.logger.warning(message, extra={"context": context})

    def error(self, message: str, **context) -> None:
        self.logger.error(message, extra={"context": context})


class NullDisplay(IDisplay):
    """Display that discards everything (the default outside a terminal)."""

    def success(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass


class ConsoleDisplay(IDisplay):
    """Colored terminal output via click."""

    def success(self, message: str) -> None:
        click.secho(f"[OK] {message}", fg="green")

    def error(self, message: str) -> None:
        click.secho(f"[ERROR] {message}", fg="red", err=True)

    def info(self, message: str) -> None:
        click.echo(message)

    def warning(self, message: str) -> None:
        click.secho(f"[WARN] {message}", fg="yellow")


class RecordingDisplay(IDisplay):
    """Keeps (level, message) pairs in memory; handy for inspection."""

    def __init__(self) -> None:
        self.messages: List[Tuple[str, str]] = []

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))


class Notifier:
    """Fan-out of service outcomes to the notification sink and the display."""

    def __init__(
        self,
        sink: Optional[INotificationSink] = None,
        display: Optional[IDisplay] = None,
    ) -> None:
        self.sink = sink or LoggingNotificationSink()
        self.display = display or NullDisplay()

    def success(self, message: str, **context) -> None:
        self.sink.info(message, **context)
        self.display.success(message)

    def info(self, message: str, **context) -> None:
        self.sink.info(message, **context)
        self.display.info(message)

    def warning(self, message: str, **context) -> None:
        self.sink.warning(message, **context)
        self.display.warning(message)

    def failure(self, error: ClinicError) -> ClinicError:
        """Report a failed operation and hand the error back for raising."""
        self.sink.warning(error.message, kind=error.kind.value, **error.context)
        self.display.error(error.message)
        return error

    @contextmanager
    def validating(self) -> Iterator[None]:
        """Report field-rule violations raised inside the block.

        A plain ValueError (entity ``__post_init__``, enum coercion, amount
        parsing) is re-raised as a reported ValidationError. ClinicErrors
        pass through untouched since they were reported where raised.
        """
        try:
            yield
        except ClinicError:
            raise
        except ValueError as exc:
            raise self.failure(ValidationError(str(exc))) from exc
