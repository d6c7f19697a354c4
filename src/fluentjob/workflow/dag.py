"""Parent/child links between actions and the graph checks run over them."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import TYPE_CHECKING, Iterable

from ..errors import CyclicDependencyError, DuplicateDependencyError, UnreachableNodeError

if TYPE_CHECKING:
    from ..action.schema import Action


def link(parent: Action, child: Action) -> None:
    """Add the edge ``parent -> child`` on both ends.

    The graph is left untouched when the edge is rejected.
    """
    if parent is child or is_reachable(child, parent):
        raise CyclicDependencyError(
            f"Adding '{parent.name}' as a parent of '{child.name}' would create a cycle",
            subject=(parent.name, child.name),
        )
    if any(existing is child for existing in parent._children):
        raise DuplicateDependencyError(
            f"Edge '{parent.name}' -> '{child.name}' already exists",
            subject=(parent.name, child.name),
        )

    parent._children.append(child)
    child._parents.append(parent)


def is_reachable(source: Action, target: Action) -> bool:
    """Return True if ``target`` can be reached from ``source`` via child edges."""
    seen: set[int] = set()
    stack = [source]
    while stack:
        node = stack.pop()
        if node is target:
            return True
        if id(node) in seen:
            continue
        seen.add(id(node))
        stack.extend(node._children)
    return False


def connected_nodes(start: Iterable[Action]) -> list[Action]:
    """Every action linked to ``start`` in either direction, in discovery order."""
    found: list[Action] = []
    seen: set[int] = set()
    queue: deque[Action] = deque(start)
    while queue:
        node = queue.popleft()
        if id(node) in seen:
            continue
        seen.add(id(node))
        found.append(node)
        queue.extend(node._parents)
        queue.extend(node._children)
    return found


def entry_nodes(nodes: Iterable[Action]) -> list[Action]:
    return [node for node in nodes if not node._parents]


def breadth_first(entries: Iterable[Action]) -> list[Action]:
    """Entries first, then children level by level in registration order."""
    order: list[Action] = []
    seen: set[int] = set()
    queue: deque[Action] = deque(entries)
    while queue:
        node = queue.popleft()
        if id(node) in seen:
            continue
        seen.add(id(node))
        order.append(node)
        queue.extend(node._children)
    return order


def validate(entries: list[Action], nodes: list[Action]) -> None:
    """Depth-first check that ``nodes`` form a DAG fully reachable from ``entries``."""
    white, grey, black = 0, 1, 2
    colour: dict[int, int] = {id(node): white for node in nodes}

    for entry in entries:
        if colour[id(entry)] != white:
            continue
        colour[id(entry)] = grey
        stack = [(entry, iter(entry._children))]
        while stack:
            node, children = stack[-1]
            child = next(children, None)
            if child is None:
                colour[id(node)] = black
                stack.pop()
                continue
            state = colour.get(id(child), white)
            if state == grey:
                raise CyclicDependencyError(
                    f"Cycle detected through edge '{node.name}' -> '{child.name}'",
                    subject=(node.name, child.name),
                )
            if state == white:
                colour[id(child)] = grey
                stack.append((child, iter(child._children)))

    unreachable = [node.name for node in nodes if colour[id(node)] == white]
    if unreachable:
        raise UnreachableNodeError(
            f"Actions not reachable from any entry action: {', '.join(unreachable)}",
            subject=unreachable,
        )


def edges_between(nodes: list[Action]) -> list[tuple[str, str]]:
    """``(parent, child)`` name pairs for every edge with both ends in ``nodes``."""
    members = {id(node) for node in nodes}
    return [
        (node.name, child.name)
        for node in nodes
        for child in node._children
        if id(child) in members
    ]


def topological_order(names: list[str], edges: Iterable[tuple[str, str]]) -> list[str]:
    """Return ``names`` in topological order, ties broken by input order.

    Edges touching a name outside ``names`` are ignored.
    """
    in_degree: dict[str, int] = {name: 0 for name in names}
    dependents: dict[str, list[str]] = defaultdict(list)
    for source, target in edges:
        if source in in_degree and target in in_degree:
            dependents[source].append(target)
            in_degree[target] += 1

    queue: deque[str] = deque(name for name in names if in_degree[name] == 0)
    order: list[str] = []
    while queue:
        name = queue.popleft()
        order.append(name)
        for dependent in dependents[name]:
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                queue.append(dependent)

    if len(order) != len(in_degree):
        missing = sorted(set(in_degree) - set(order))
        raise CyclicDependencyError(
            f"Cycle detected in workflow DAG involving nodes: {missing}", subject=missing
        )

    return order
