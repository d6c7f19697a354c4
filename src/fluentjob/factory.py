from typing import Protocol

from .workflow.schema import Workflow


class WorkflowFactory(Protocol):
    """Anything that can produce a workflow definition on demand."""

    def create(self) -> Workflow: ...
