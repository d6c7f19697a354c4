"""Shared builder behaviour for every action kind."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, TypeVar

from ..config import Settings, get_settings
from ..credentials import ConfigurationEntry, Credential
from ..errors import (
    DuplicateDependencyError,
    IncompleteRetryPolicyError,
    InvalidRetryPolicyError,
    MissingRequiredFieldError,
)
from ..workflow import dag
from .schema import Action, ExecutionContext, RetryPolicy

logger = logging.getLogger(__name__)

B = TypeVar("B", bound="ActionBuilder")


class ActionBuilder(ABC):
    """Abstract base for all action builders.

    Subclasses only collect their variant fields and turn them into a payload
    in ``_build_payload``; name, parents, credentials and retry policy are
    handled here once for every kind.
    """

    kind: str = ""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self._name: str = ""
        self._parents: list[Action] = []
        self._credentials: list[Credential] = []
        self._retry_interval: Optional[int] = None
        self._retry_max: Optional[int] = None
        self._retry_policy: Optional[str] = None
        self._last_built: Optional[Action] = None

    @classmethod
    def create(cls: type[B], settings: Optional[Settings] = None) -> B:
        return cls(settings)

    @classmethod
    def create_from_existing_action(
        cls: type[B], action: Action, settings: Optional[Settings] = None
    ) -> B:
        """Start a new action inheriting ``action``'s execution context.

        Credentials, retry policy and cluster context are copied. Name,
        parents and the variant-specific payload are not.
        """
        builder = cls(settings)
        builder._seed_from(action)
        return builder

    def _seed_from(self, action: Action) -> None:
        self._credentials = list(action.credentials)
        if action.retry_policy is not None:
            self._retry_interval = action.retry_policy.interval
            self._retry_max = action.retry_policy.max
            self._retry_policy = action.retry_policy.policy

    # ------------------------------------------------------------------
    # Identity and DAG links
    # ------------------------------------------------------------------

    def with_name(self: B, name: str) -> B:
        self._name = name
        return self

    def with_parent(self: B, parent: Action) -> B:
        if any(existing is parent for existing in self._parents):
            raise DuplicateDependencyError(
                f"'{parent.name}' is already a parent of this action",
                subject=parent.name,
            )
        self._parents.append(parent)
        return self

    def without_parent(self: B, parent: Action) -> B:
        self._parents = [existing for existing in self._parents if existing is not parent]
        return self

    def clear_parents(self: B) -> B:
        self._parents.clear()
        return self

    # ------------------------------------------------------------------
    # Credentials and retries
    # ------------------------------------------------------------------

    def with_credential(self: B, credential: Credential) -> B:
        self._credentials.append(credential)
        return self

    def clear_credentials(self: B) -> B:
        self._credentials.clear()
        return self

    def with_retry_interval(self: B, interval: int) -> B:
        self._retry_interval = interval
        return self

    def with_retry_max(self: B, max: int) -> B:
        self._retry_max = max
        return self

    def with_retry_policy(self: B, policy: str) -> B:
        self._retry_policy = policy
        return self

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    @abstractmethod
    def _build_payload(self):
        """Validate the variant fields and return the payload model."""
        ...

    def _build_context(self) -> Optional[ExecutionContext]:
        return None

    def _require(self, field: str, value) -> None:
        if not value:
            raise MissingRequiredFieldError(field, owner=self._name)

    def _build_retry_policy(self) -> Optional[RetryPolicy]:
        values = {
            "retry_interval": self._retry_interval,
            "retry_max": self._retry_max,
            "retry_policy": self._retry_policy,
        }
        missing = [key for key, value in values.items() if value is None]
        if len(missing) == len(values):
            return None
        if missing:
            raise IncompleteRetryPolicyError(
                f"Action '{self._name}' sets only part of its retry policy; missing: "
                f"{', '.join(missing)}",
                subject=missing,
            )

        for key in ("retry_interval", "retry_max"):
            value = values[key]
            # bool is an int subclass but never a meaningful count
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidRetryPolicyError(
                    f"'{key}' must be an integer, got {value!r}", subject=key
                )

        if self._retry_interval <= 0:
            raise InvalidRetryPolicyError(
                f"Retry interval must be positive, got {self._retry_interval}",
                subject="retry_interval",
            )
        if self._retry_max < 0:
            raise InvalidRetryPolicyError(
                f"Retry max must not be negative, got {self._retry_max}",
                subject="retry_max",
            )
        if self._retry_policy not in self.settings.retry_policies:
            raise InvalidRetryPolicyError(
                f"Unknown retry policy '{self._retry_policy}', expected one of "
                f"{self.settings.retry_policies}",
                subject="retry_policy",
            )
        return RetryPolicy(
            interval=self._retry_interval,
            max=self._retry_max,
            policy=self._retry_policy,
        )

    def build(self) -> Action:
        """Validate, freeze and link the action into its parents' DAG."""
        self._require("name", self._name)
        action = Action(
            name=self._name,
            payload=self._build_payload(),
            credentials=tuple(self._credentials),
            retry_policy=self._build_retry_policy(),
            context=self._build_context(),
        )

        # rebuilding an unchanged builder hands back the already linked action
        last = self._last_built
        if (
            last is not None
            and last._definition() == action._definition()
            and len(last._parents) == len(self._parents)
            and all(a is b for a, b in zip(last._parents, self._parents))
        ):
            return last

        for parent in self._parents:
            dag.link(parent, action)
        self._last_built = action

        logger.debug(
            "Built %s action %s with parents %s",
            action.kind,
            action.name,
            [parent.name for parent in self._parents],
        )
        return action


class ClusterActionBuilder(ActionBuilder):
    """Base for actions that run against a resource manager and name node."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__(settings)
        self._resource_manager: str = ""
        self._name_node: str = ""
        self._job_xmls: list[str] = []
        self._configuration: dict[str, str] = {}
        self._files: list[str] = []
        self._archives: list[str] = []

    def _seed_from(self, action: Action) -> None:
        super()._seed_from(action)
        context = action.context
        if context is None:
            return
        self._resource_manager = context.resource_manager
        self._name_node = context.name_node
        self._job_xmls = list(context.job_xmls)
        self._configuration = {entry.key: entry.value for entry in context.configuration}
        self._files = list(context.files)
        self._archives = list(context.archives)

    def with_resource_manager(self: B, resource_manager: str) -> B:
        self._resource_manager = resource_manager
        return self

    def with_name_node(self: B, name_node: str) -> B:
        self._name_node = name_node
        return self

    def with_job_xml(self: B, job_xml: str) -> B:
        self._job_xmls.append(job_xml)
        return self

    def with_configuration_property(self: B, key: str, value: str) -> B:
        self._configuration[key] = value
        return self

    def with_file(self: B, path: str) -> B:
        self._files.append(path)
        return self

    def with_archive(self: B, path: str) -> B:
        self._archives.append(path)
        return self

    def _build_context(self) -> ExecutionContext:
        self._require("resource_manager", self._resource_manager)
        self._require("name_node", self._name_node)
        return ExecutionContext(
            resource_manager=self._resource_manager,
            name_node=self._name_node,
            job_xmls=tuple(self._job_xmls),
            configuration=tuple(
                ConfigurationEntry(key=key, value=value)
                for key, value in self._configuration.items()
            ),
            files=tuple(self._files),
            archives=tuple(self._archives),
        )
