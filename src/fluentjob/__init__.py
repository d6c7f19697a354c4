"""Fluent builders for job-orchestration workflow definitions.

Usage:
    from fluentjob import CredentialBuilder, ShellActionBuilder, WorkflowBuilder

    hbase = CredentialBuilder.create().with_name("hbase").with_type("hbase").build()
    action = (
        ShellActionBuilder.create()
        .with_name("call-hbase")
        .with_credential(hbase)
        .with_resource_manager("${resourceManager}")
        .with_name_node("${nameNode}")
        .with_executable("call-hbase.sh")
        .build()
    )
    workflow = WorkflowBuilder().with_name("demo").with_dag_containing_node(action).build()
"""

from .action import (
    Action,
    ActionBuilder,
    EmailActionBuilder,
    ExecutionContext,
    Hive2ActionBuilder,
    HiveActionBuilder,
    JavaActionBuilder,
    RetryPolicy,
    ShellActionBuilder,
    SshActionBuilder,
)
from .config import Settings, get_settings
from .factory import WorkflowFactory
from .credentials import (
    ConfigurationEntry,
    Credential,
    CredentialBuilder,
    Credentials,
    CredentialsBuilder,
)
from .errors import (
    CyclicDependencyError,
    DuplicateActionNameError,
    DuplicateCredentialNameError,
    DuplicateDependencyError,
    EmptyWorkflowError,
    IncompleteRetryPolicyError,
    InvalidCredentialError,
    InvalidRetryPolicyError,
    MissingRequiredFieldError,
    UndeclaredCredentialError,
    UnreachableNodeError,
    WorkflowDefinitionError,
)
from .workflow import Workflow, WorkflowBuilder, WorkflowEdge, WorkflowParameter, render_document

__all__ = [
    "Action",
    "ActionBuilder",
    "ConfigurationEntry",
    "Credential",
    "CredentialBuilder",
    "Credentials",
    "CredentialsBuilder",
    "CyclicDependencyError",
    "DuplicateActionNameError",
    "DuplicateCredentialNameError",
    "DuplicateDependencyError",
    "EmailActionBuilder",
    "EmptyWorkflowError",
    "ExecutionContext",
    "Hive2ActionBuilder",
    "HiveActionBuilder",
    "IncompleteRetryPolicyError",
    "InvalidCredentialError",
    "InvalidRetryPolicyError",
    "JavaActionBuilder",
    "MissingRequiredFieldError",
    "RetryPolicy",
    "Settings",
    "ShellActionBuilder",
    "SshActionBuilder",
    "UndeclaredCredentialError",
    "UnreachableNodeError",
    "Workflow",
    "WorkflowBuilder",
    "WorkflowDefinitionError",
    "WorkflowEdge",
    "WorkflowFactory",
    "WorkflowParameter",
    "get_settings",
    "render_document",
]
