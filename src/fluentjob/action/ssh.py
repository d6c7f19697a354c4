"""Remote command over ssh."""

from __future__ import annotations

from .base import ActionBuilder
from .schema import SshPayload


class SshActionBuilder(ActionBuilder):
    kind = "ssh"

    def __init__(self, settings=None) -> None:
        super().__init__(settings)
        self._host: str = ""
        self._command: str = ""
        self._arguments: list[str] = []
        self._capture_output = False

    def with_host(self, host: str) -> SshActionBuilder:
        self._host = host
        return self

    def with_command(self, command: str) -> SshActionBuilder:
        self._command = command
        return self

    def with_argument(self, argument: str) -> SshActionBuilder:
        self._arguments.append(argument)
        return self

    def with_capture_output(self, capture_output: bool = True) -> SshActionBuilder:
        self._capture_output = capture_output
        return self

    def _build_payload(self) -> SshPayload:
        self._require("host", self._host)
        self._require("command", self._command)
        return SshPayload(
            host=self._host,
            command=self._command,
            arguments=tuple(self._arguments),
            capture_output=self._capture_output,
        )
