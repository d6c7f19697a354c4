"""Java main-class action builder."""

from __future__ import annotations

from .base import ClusterActionBuilder
from .schema import JavaPayload


class JavaActionBuilder(ClusterActionBuilder):
    kind = "java"

    def __init__(self, settings=None) -> None:
        super().__init__(settings)
        self._main_class: str = ""
        self._java_opts: list[str] = []
        self._arguments: list[str] = []
        self._capture_output = False

    def with_main_class(self, main_class: str) -> JavaActionBuilder:
        self._main_class = main_class
        return self

    def with_java_opt(self, java_opt: str) -> JavaActionBuilder:
        self._java_opts.append(java_opt)
        return self

    def with_argument(self, argument: str) -> JavaActionBuilder:
        self._arguments.append(argument)
        return self

    def with_capture_output(self, capture_output: bool = True) -> JavaActionBuilder:
        self._capture_output = capture_output
        return self

    def _build_payload(self) -> JavaPayload:
        self._require("main_class", self._main_class)
        return JavaPayload(
            main_class=self._main_class,
            java_opts=tuple(self._java_opts),
            arguments=tuple(self._arguments),
            capture_output=self._capture_output,
        )
