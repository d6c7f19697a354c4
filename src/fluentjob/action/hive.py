"""Hive and Hive2 (beeline) action builders."""

from __future__ import annotations

from typing import Optional

from ..errors import MissingRequiredFieldError
from .base import ClusterActionBuilder
from .schema import Hive2Payload, HivePayload


class _HiveScriptBuilder(ClusterActionBuilder):
    """Script/query handling shared by both Hive flavours."""

    def __init__(self, settings=None) -> None:
        super().__init__(settings)
        self._script: Optional[str] = None
        self._query: Optional[str] = None
        self._parameters: list[str] = []
        self._arguments: list[str] = []

    def with_script(self, script: str):
        self._script = script
        return self

    def with_query(self, query: str):
        self._query = query
        return self

    def with_parameter(self, name: str, value: str):
        self._parameters.append(f"{name}={value}")
        return self

    def with_argument(self, argument: str):
        self._arguments.append(argument)
        return self

    def _check_script_or_query(self) -> None:
        # exactly one of the two
        if bool(self._script) == bool(self._query):
            raise MissingRequiredFieldError("script|query", owner=self._name)


class HiveActionBuilder(_HiveScriptBuilder):
    kind = "hive"

    def _build_payload(self) -> HivePayload:
        self._check_script_or_query()
        return HivePayload(
            script=self._script,
            query=self._query,
            parameters=tuple(self._parameters),
            arguments=tuple(self._arguments),
        )


class Hive2ActionBuilder(_HiveScriptBuilder):
    kind = "hive2"

    def __init__(self, settings=None) -> None:
        super().__init__(settings)
        self._jdbc_url: Optional[str] = None
        self._password: Optional[str] = None

    def with_jdbc_url(self, jdbc_url: str) -> Hive2ActionBuilder:
        self._jdbc_url = jdbc_url
        return self

    def with_password(self, password: str) -> Hive2ActionBuilder:
        self._password = password
        return self

    def _build_payload(self) -> Hive2Payload:
        self._check_script_or_query()
        return Hive2Payload(
            jdbc_url=self._jdbc_url,
            password=self._password,
            script=self._script,
            query=self._query,
            parameters=tuple(self._parameters),
            arguments=tuple(self._arguments),
        )
