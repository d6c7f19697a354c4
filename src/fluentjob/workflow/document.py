"""Plain-dict view of a workflow for downstream serializers.

The layout mirrors the workflow definition document: a credentials section,
one entry per action carrying its variant fields, credential references and
retry attributes, and parent/child transitions. Placeholder tokens such as
``${nameNode}`` are passed through verbatim.

Transitions come from the edges snapshotted when the workflow was built, so
actions linked to a workflow member afterwards do not show up.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from . import dag

if TYPE_CHECKING:
    from ..credentials import Credential
    from .schema import Workflow


def render_document(workflow: Workflow) -> dict[str, Any]:
    edges = [(edge.source, edge.target) for edge in workflow.edges]
    order = dag.topological_order([action.name for action in workflow.actions], edges)
    return {
        "name": workflow.name,
        "parameters": [parameter.model_dump(mode="json") for parameter in workflow.parameters],
        "credentials": [_render_credential(credential) for credential in workflow.credentials],
        "actions": [_render_action(workflow, name) for name in order],
    }


def _render_credential(credential: Credential) -> dict[str, Any]:
    return {
        "name": credential.name,
        "type": credential.type,
        "configuration": [entry.model_dump() for entry in credential.configuration_entries],
    }


def _render_action(workflow: Workflow, name: str) -> dict[str, Any]:
    action = workflow.get_action(name)
    rendered: dict[str, Any] = {
        "name": action.name,
        "kind": action.kind,
        action.kind: action.payload.model_dump(mode="json", exclude={"kind"}),
        "credentials": action.credential_names,
    }
    if action.context is not None:
        rendered["context"] = action.context.model_dump(mode="json")
    if action.retry_policy is not None:
        rendered["retry"] = action.retry_policy.model_dump()
    rendered["parents"] = workflow.parents_of(name)
    rendered["children"] = workflow.children_of(name)
    return rendered
