"""Shell action builder."""

from __future__ import annotations

from .base import ClusterActionBuilder
from .schema import ShellPayload


class ShellActionBuilder(ClusterActionBuilder):
    kind = "shell"

    def __init__(self, settings=None) -> None:
        super().__init__(settings)
        self._executable: str = ""
        self._arguments: list[str] = []
        self._environment_variables: list[str] = []
        self._capture_output = False

    def with_executable(self, executable: str) -> ShellActionBuilder:
        self._executable = executable
        return self

    def with_argument(self, argument: str) -> ShellActionBuilder:
        self._arguments.append(argument)
        return self

    def with_environment_variable(self, key: str, value: str) -> ShellActionBuilder:
        self._environment_variables.append(f"{key}={value}")
        return self

    def with_capture_output(self, capture_output: bool = True) -> ShellActionBuilder:
        self._capture_output = capture_output
        return self

    def _build_payload(self) -> ShellPayload:
        self._require("executable", self._executable)
        return ShellPayload(
            executable=self._executable,
            arguments=tuple(self._arguments),
            environment_variables=tuple(self._environment_variables),
            capture_output=self._capture_output,
        )
