from .base import ActionBuilder, ClusterActionBuilder
from .email import EmailActionBuilder
from .hive import Hive2ActionBuilder, HiveActionBuilder
from .java import JavaActionBuilder
from .schema import (
    Action,
    EmailPayload,
    ExecutionContext,
    Hive2Payload,
    HivePayload,
    JavaPayload,
    RetryPolicy,
    ShellPayload,
    SshPayload,
)
from .shell import ShellActionBuilder
from .ssh import SshActionBuilder

__all__ = [
    "Action",
    "ActionBuilder",
    "ClusterActionBuilder",
    "EmailActionBuilder",
    "EmailPayload",
    "ExecutionContext",
    "Hive2ActionBuilder",
    "Hive2Payload",
    "HiveActionBuilder",
    "HivePayload",
    "JavaActionBuilder",
    "JavaPayload",
    "RetryPolicy",
    "ShellActionBuilder",
    "ShellPayload",
    "SshActionBuilder",
    "SshPayload",
]
