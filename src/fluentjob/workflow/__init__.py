from .builder import WorkflowBuilder
from .document import render_document
from .schema import Workflow, WorkflowEdge, WorkflowParameter

__all__ = [
    "Workflow",
    "WorkflowBuilder",
    "WorkflowEdge",
    "WorkflowParameter",
    "render_document",
]
