"""Pydantic models describing a built workflow."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..action.schema import Action
from ..credentials import Credentials
from .document import render_document


class WorkflowParameter(BaseModel):
    """A workflow-level parameter with an optional default value."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: Optional[str] = None
    description: Optional[str] = None


class WorkflowEdge(BaseModel):
    """A parent -> child edge between two actions, by name."""

    model_config = ConfigDict(frozen=True)

    source: str
    target: str


class Workflow(BaseModel):
    """A complete, validated workflow DAG."""

    model_config = ConfigDict(frozen=True)

    name: str
    parameters: tuple[WorkflowParameter, ...] = ()
    entries: tuple[Action, ...]
    actions: tuple[Action, ...]  # entries first, then breadth-first by child order
    edges: tuple[WorkflowEdge, ...] = ()  # links as they stood at build time
    credentials: Credentials
    explicit_credentials: bool = False

    def get_action(self, name: str) -> Optional[Action]:
        return next((action for action in self.actions if action.name == name), None)

    def parents_of(self, name: str) -> list[str]:
        return [edge.source for edge in self.edges if edge.target == name]

    def children_of(self, name: str) -> list[str]:
        return [edge.target for edge in self.edges if edge.source == name]

    def to_dict(self) -> dict:
        return render_document(self)
