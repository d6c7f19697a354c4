"""Build-time validation errors raised by the fluent builders."""

from __future__ import annotations

from typing import Any


class WorkflowDefinitionError(ValueError):
    """Raised when a builder is given input that cannot form a valid definition.

    ``subject`` names the offending field, edge or credential so callers can
    report precisely what to fix.
    """

    error_type: str = "invalid_definition"

    def __init__(self, message: str, subject: Any = None):
        self.subject = subject
        super().__init__(message)


class InvalidCredentialError(WorkflowDefinitionError):
    error_type = "invalid_credential"


class MissingRequiredFieldError(WorkflowDefinitionError):
    error_type = "missing_required_field"

    def __init__(self, field: str, owner: str = ""):
        where = f" on '{owner}'" if owner else ""
        super().__init__(f"Required field '{field}' is not set{where}", subject=field)
        self.field = field
        self.owner = owner


class IncompleteRetryPolicyError(WorkflowDefinitionError):
    error_type = "incomplete_retry_policy"


class InvalidRetryPolicyError(WorkflowDefinitionError):
    error_type = "invalid_retry_policy"


class CyclicDependencyError(WorkflowDefinitionError):
    error_type = "cyclic_dependency"


class DuplicateDependencyError(WorkflowDefinitionError):
    error_type = "duplicate_dependency"


class UnreachableNodeError(WorkflowDefinitionError):
    error_type = "unreachable_node"


class DuplicateActionNameError(WorkflowDefinitionError):
    error_type = "duplicate_action_name"


class DuplicateCredentialNameError(WorkflowDefinitionError):
    error_type = "duplicate_credential_name"


class UndeclaredCredentialError(WorkflowDefinitionError):
    error_type = "undeclared_credential"


class EmptyWorkflowError(WorkflowDefinitionError):
    error_type = "empty_workflow"
