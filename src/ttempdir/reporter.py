"""Diagnostic message assembly."""

from dataclasses import dataclass
from typing import Callable

from .model import Position

FALLBACK_RECEIVER = "testing"
MESSAGE_TEMPLATE = "{target}() should be replaced by `{receiver}.TempDir()` in {function}"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding, as handed to the host sink."""

    position: Position
    message: str
    target_name: str  # e.g. "os.MkdirTemp"
    receiver: str  # parameter name, or "testing"

    @property
    def replacement(self) -> str:
        return f"{self.receiver}.TempDir()"


# Host sink receiving every match.
ReportFunc = Callable[[Diagnostic], None]


def format_message(target_name: str, receiver: str, function_name: str) -> str:
    return MESSAGE_TEMPLATE.format(
        target=target_name, receiver=receiver, function=function_name
    )


class Reporter:
    """A diagnostic bound to a call position, waiting for its target name."""

    def __init__(self, position: Position, builder: "ReporterBuilder"):
        self.position = position
        self.builder = builder

    def report(self, target_name: str) -> None:
        self.builder.report(self.position, target_name)


class ReporterBuilder:
    """Holds the per-function parts of the message.

    Created once per eligible function; ``build`` binds a call position
    and ``report`` renders and emits the final diagnostic.

    Args:
        report: Host sink
        receiver: Replacement receiver (parameter name); empty means the
            ``testing`` fallback
        function_name: Display name of the enclosing function
    """

    def __init__(self, report: ReportFunc, receiver: str, function_name: str):
        self._report = report
        self.receiver = receiver or FALLBACK_RECEIVER
        self.function_name = function_name

    def build(self, position: Position) -> Reporter:
        return Reporter(position, self)

    def report(self, position: Position, target_name: str) -> None:
        self._report(
            Diagnostic(
                position=position,
                message=format_message(target_name, self.receiver, self.function_name),
                target_name=target_name,
                receiver=self.receiver,
            )
        )
