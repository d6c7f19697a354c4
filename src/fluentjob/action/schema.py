"""Pydantic models for actions: one payload variant per action kind."""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..credentials import ConfigurationEntry, Credential


class RetryPolicy(BaseModel):
    """How the executor should retry a failed action. Data only."""

    model_config = ConfigDict(frozen=True)

    interval: int = Field(gt=0)  # minutes
    max: int = Field(ge=0)
    policy: str  # "periodic" | "exponential"


class ExecutionContext(BaseModel):
    """Cluster context shared by actions that run on the resource manager."""

    model_config = ConfigDict(frozen=True)

    resource_manager: str
    name_node: str
    job_xmls: tuple[str, ...] = ()
    configuration: tuple[ConfigurationEntry, ...] = ()
    files: tuple[str, ...] = ()
    archives: tuple[str, ...] = ()


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True)


class ShellPayload(_Payload):
    kind: Literal["shell"] = "shell"
    executable: str
    arguments: tuple[str, ...] = ()
    environment_variables: tuple[str, ...] = ()  # "KEY=VALUE"
    capture_output: bool = False


class HivePayload(_Payload):
    kind: Literal["hive"] = "hive"
    script: Optional[str] = None
    query: Optional[str] = None
    parameters: tuple[str, ...] = ()  # "NAME=VALUE"
    arguments: tuple[str, ...] = ()


class Hive2Payload(_Payload):
    kind: Literal["hive2"] = "hive2"
    jdbc_url: Optional[str] = None
    password: Optional[str] = None
    script: Optional[str] = None
    query: Optional[str] = None
    parameters: tuple[str, ...] = ()
    arguments: tuple[str, ...] = ()


class JavaPayload(_Payload):
    kind: Literal["java"] = "java"
    main_class: str
    java_opts: tuple[str, ...] = ()
    arguments: tuple[str, ...] = ()
    capture_output: bool = False


class EmailPayload(_Payload):
    kind: Literal["email"] = "email"
    to: tuple[str, ...]
    cc: tuple[str, ...] = ()
    bcc: tuple[str, ...] = ()
    subject: str
    body: str
    content_type: Optional[str] = None
    attachments: tuple[str, ...] = ()


class SshPayload(_Payload):
    kind: Literal["ssh"] = "ssh"
    host: str
    command: str
    arguments: tuple[str, ...] = ()
    capture_output: bool = False


ActionPayload = Annotated[
    Union[ShellPayload, HivePayload, Hive2Payload, JavaPayload, EmailPayload, SshPayload],
    Field(discriminator="kind"),
]


class Action(BaseModel):
    """A single executable step of a workflow DAG.

    Everything except the DAG links is immutable once built. Links are added
    by :mod:`fluentjob.workflow.dag` as later actions name this one as a
    parent, so equality compares parents by name and ignores children.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    payload: ActionPayload
    credentials: tuple[Credential, ...] = ()
    retry_policy: Optional[RetryPolicy] = None
    context: Optional[ExecutionContext] = None

    _parents: list[Action] = PrivateAttr(default_factory=list)
    _children: list[Action] = PrivateAttr(default_factory=list)

    @property
    def kind(self) -> str:
        return self.payload.kind

    @property
    def parents(self) -> tuple[Action, ...]:
        return tuple(self._parents)

    @property
    def children(self) -> tuple[Action, ...]:
        return tuple(self._children)

    @property
    def credential_names(self) -> list[str]:
        return [credential.name for credential in self.credentials]

    def _definition(self) -> tuple:
        return (self.name, self.payload, self.credentials, self.retry_policy, self.context)

    def _identity(self) -> tuple:
        return self._definition() + (tuple(parent.name for parent in self._parents),)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Action):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash((self.name, self.kind))

    def __repr__(self) -> str:
        return f"Action(name={self.name!r}, kind={self.kind!r})"
