"""Workflow builder: DAG discovery, validation and credential aggregation."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..action.schema import Action
from ..config import Settings, get_settings
from ..credentials import Credential, Credentials
from ..errors import (
    DuplicateActionNameError,
    DuplicateCredentialNameError,
    EmptyWorkflowError,
    MissingRequiredFieldError,
    UndeclaredCredentialError,
)
from . import dag
from .schema import Workflow, WorkflowEdge, WorkflowParameter

logger = logging.getLogger(__name__)


class WorkflowBuilder:
    """Builds an immutable :class:`Workflow` from a DAG of actions.

    Credentials:
      - without ``with_credentials`` the workflow declares the union of all
        action credentials, in traversal order, each name once
      - with ``with_credentials`` exactly that set is declared; action
        credentials stay on the actions but are not collected
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self._name: str = ""
        self._nodes: list[Action] = []
        self._credentials: Optional[Credentials] = None
        self._parameters: list[WorkflowParameter] = []

    @classmethod
    def create(cls, settings: Optional[Settings] = None) -> WorkflowBuilder:
        return cls(settings)

    def with_name(self, name: str) -> WorkflowBuilder:
        self._name = name
        return self

    def with_dag_containing_node(self, action: Action) -> WorkflowBuilder:
        """Include the whole DAG ``action`` belongs to."""
        self._nodes.append(action)
        return self

    def with_credentials(self, credentials: Credentials) -> WorkflowBuilder:
        self._credentials = credentials
        return self

    def with_parameter(
        self, name: str, value: Optional[str] = None, description: Optional[str] = None
    ) -> WorkflowBuilder:
        self._parameters.append(WorkflowParameter(name=name, value=value, description=description))
        return self

    def build(self) -> Workflow:
        if not self._name:
            raise MissingRequiredFieldError("name", owner="workflow")
        if not self._nodes:
            raise EmptyWorkflowError(f"Workflow '{self._name}' has no actions", subject=self._name)

        nodes = dag.connected_nodes(self._nodes)
        entries = dag.entry_nodes(nodes)
        if not entries:
            raise EmptyWorkflowError(
                f"Workflow '{self._name}' has no entry action", subject=self._name
            )
        dag.validate(entries, nodes)

        actions = dag.breadth_first(entries)
        _check_unique_names(actions)
        for action in actions:
            _check_action_credentials(action)

        explicit = self._credentials is not None
        if explicit:
            credentials = _merge(self._credentials, source="workflow credentials")
            self._check_declared(actions, credentials)
        else:
            credentials = _merge(
                (credential for action in actions for credential in action.credentials),
                source="action credentials",
            )

        workflow = Workflow(
            name=self._name,
            parameters=tuple(self._parameters),
            entries=tuple(entries),
            actions=tuple(actions),
            edges=tuple(
                WorkflowEdge(source=source, target=target)
                for source, target in dag.edges_between(actions)
            ),
            credentials=credentials,
            explicit_credentials=explicit,
        )
        logger.debug(
            "Built workflow %s: %d actions, credentials %s (%s)",
            workflow.name,
            len(workflow.actions),
            workflow.credentials.names(),
            "explicit" if explicit else "collected",
        )
        return workflow

    def _check_declared(self, actions: list[Action], credentials: Credentials) -> None:
        declared = set(credentials.names())
        for action in actions:
            undeclared = [name for name in action.credential_names if name not in declared]
            if not undeclared:
                continue
            message = (
                f"Action '{action.name}' references credentials not declared on workflow "
                f"'{self._name}': {', '.join(undeclared)}"
            )
            if self.settings.undeclared_credential_policy == "fail":
                raise UndeclaredCredentialError(message, subject=undeclared)
            logger.warning(message)


def _check_unique_names(actions: list[Action]) -> None:
    seen: set[str] = set()
    for action in actions:
        if action.name in seen:
            raise DuplicateActionNameError(
                f"Action name '{action.name}' is used more than once", subject=action.name
            )
        seen.add(action.name)


def _check_action_credentials(action: Action) -> None:
    seen: set[str] = set()
    for credential in action.credentials:
        if credential.name in seen:
            raise DuplicateCredentialNameError(
                f"Action '{action.name}' attaches credential '{credential.name}' more than once",
                subject=credential.name,
            )
        seen.add(credential.name)


def _merge(credentials: Iterable[Credential], source: str) -> Credentials:
    """Keep the first occurrence of each name; equal repeats collapse."""
    merged: dict[str, Credential] = {}
    for credential in credentials:
        existing = merged.get(credential.name)
        if existing is None:
            merged[credential.name] = credential
        elif existing != credential:
            raise DuplicateCredentialNameError(
                f"Conflicting definitions of credential '{credential.name}' in {source}",
                subject=credential.name,
            )
    return Credentials(credentials=tuple(merged.values()))
