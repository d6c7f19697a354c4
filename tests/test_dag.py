import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from fluentjob.action import ShellActionBuilder
from fluentjob.errors import CyclicDependencyError, DuplicateDependencyError, UnreachableNodeError
from fluentjob.workflow import dag


def _action(name: str, *parents):
    builder = (
        ShellActionBuilder.create()
        .with_name(name)
        .with_resource_manager("rm")
        .with_name_node("nn")
        .with_executable(f"{name}.sh")
    )
    for parent in parents:
        builder.with_parent(parent)
    return builder.build()


class LinkTests(unittest.TestCase):
    def test_link_rejects_cycle_and_leaves_graph_unchanged(self):
        a = _action("a")
        b = _action("b", a)
        c = _action("c", b)

        with self.assertRaises(CyclicDependencyError) as ctx:
            dag.link(c, a)
        self.assertEqual(ctx.exception.subject, ("c", "a"))

        self.assertEqual(a.parents, ())
        self.assertEqual(c.children, ())
        self.assertEqual([child.name for child in a.children], ["b"])

    def test_self_loop_is_rejected(self):
        a = _action("a")
        with self.assertRaises(CyclicDependencyError):
            dag.link(a, a)
        self.assertEqual(a.children, ())

    def test_duplicate_edge_is_rejected(self):
        a = _action("a")
        b = _action("b", a)
        with self.assertRaises(DuplicateDependencyError):
            dag.link(a, b)
        self.assertEqual(len(a.children), 1)

    def test_link_between_existing_actions(self):
        a = _action("a")
        b = _action("b")
        dag.link(a, b)
        self.assertTrue(dag.is_reachable(a, b))
        self.assertFalse(dag.is_reachable(b, a))


class TraversalTests(unittest.TestCase):
    def setUp(self) -> None:
        # a -> b -> d, a -> c -> d, e -> c
        self.a = _action("a")
        self.b = _action("b", self.a)
        self.e = _action("e")
        self.c = _action("c", self.a, self.e)
        self.d = _action("d", self.b, self.c)

    def test_connected_nodes_finds_whole_graph_from_any_node(self):
        found = dag.connected_nodes([self.d])
        self.assertEqual({node.name for node in found}, {"a", "b", "c", "d", "e"})
        self.assertEqual(
            [node.name for node in dag.connected_nodes([self.d])],
            [node.name for node in found],
        )

    def test_entry_nodes_and_breadth_first_order(self):
        nodes = dag.connected_nodes([self.a])
        entries = dag.entry_nodes(nodes)
        self.assertEqual([node.name for node in entries], ["a", "e"])
        self.assertEqual([node.name for node in dag.breadth_first(entries)], ["a", "e", "b", "c", "d"])

    def test_topological_order_respects_every_edge(self):
        nodes = dag.connected_nodes([self.c])
        order = dag.topological_order([node.name for node in nodes], dag.edges_between(nodes))
        for parent, child in [("a", "b"), ("a", "c"), ("e", "c"), ("b", "d"), ("c", "d")]:
            self.assertLess(order.index(parent), order.index(child))

    def test_edges_between_ignores_nodes_outside_the_set(self):
        self.assertEqual(
            dag.edges_between([self.a, self.b, self.c]), [("a", "b"), ("a", "c")]
        )

    def test_topological_order_ignores_edges_to_unknown_names(self):
        order = dag.topological_order(["a", "b"], [("a", "b"), ("b", "late"), ("x", "a")])
        self.assertEqual(order, ["a", "b"])

    def test_validate_accepts_dag(self):
        nodes = dag.connected_nodes([self.a])
        dag.validate(dag.entry_nodes(nodes), nodes)


class ValidateTests(unittest.TestCase):
    def test_validate_detects_back_edge(self):
        a = _action("a")
        b = _action("b", a)
        c = _action("c", b)
        # bypass link() to forge a cycle b -> c -> b
        c._children.append(b)
        b._parents.append(c)

        nodes = dag.connected_nodes([a])
        with self.assertRaises(CyclicDependencyError):
            dag.validate(dag.entry_nodes(nodes), nodes)
        with self.assertRaises(CyclicDependencyError):
            dag.topological_order([node.name for node in nodes], dag.edges_between(nodes))

    def test_validate_reports_unreachable_actions(self):
        a = _action("a")
        x = _action("x")
        y = _action("y")
        x._children.append(y)
        y._children.append(x)
        x._parents.append(y)
        y._parents.append(x)

        with self.assertRaises(UnreachableNodeError) as ctx:
            dag.validate([a], [a, x, y])
        self.assertEqual(ctx.exception.subject, ["x", "y"])


if __name__ == "__main__":
    unittest.main()
