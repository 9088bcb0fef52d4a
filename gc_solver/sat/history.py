"""
Assignment history: a tree of partial assignments stored in an arena.

Every node except the root binds one variable to TRUE or FALSE and points
at its parent, so the path from a node back to the root is the partial
assignment that node stands for. Nodes are addressed by integer handles
that stay valid for as long as the AssignmentHistory object is alive.
"""

from enum import IntEnum
from typing import Dict, Iterator, List, Optional

from ..exceptions import ConflictingAssignmentError


class Value(IntEnum):
    FALSE = -1
    UNASSIGNED = 0
    TRUE = 1


class AssignmentHistory:
    """Arena of decision nodes. Node 0 is the root and decides nothing."""

    ROOT = 0

    def __init__(self):
        self._variable: List[int] = [0]
        self._value: List[Value] = [Value.UNASSIGNED]
        self._parent: List[Optional[int]] = [None]
        # slot 0 holds the TRUE child, slot 1 the FALSE child
        self._children: List[List[Optional[int]]] = [[None, None]]

    @property
    def root(self) -> int:
        return self.ROOT

    def __len__(self) -> int:
        return len(self._variable)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, int) and 0 <= node < len(self._variable)

    def _check(self, node: int) -> None:
        if node not in self:
            raise ValueError(f"Unknown node handle: {node!r}")

    def variable(self, node: int) -> int:
        self._check(node)
        return self._variable[node]

    def value(self, node: int) -> Value:
        self._check(node)
        return self._value[node]

    def parent(self, node: int) -> Optional[int]:
        self._check(node)
        return self._parent[node]

    def child(self, node: int, value: Value) -> Optional[int]:
        self._check(node)
        return self._children[node][self._slot(value)]

    def depth(self, node: int) -> int:
        return sum(1 for _ in self.ancestors(node))

    @staticmethod
    def _slot(value: Value) -> int:
        if value == Value.TRUE:
            return 0
        if value == Value.FALSE:
            return 1
        raise ValueError(f"A decision must be TRUE or FALSE, got {value!r}")

    def branch(self, parent: int, variable: int, value: Value) -> int:
        """Create the child of `parent` that binds `variable` to `value`."""
        self._check(parent)
        slot = self._slot(value)
        if variable < 1:
            raise ValueError(f"Variables are numbered from 1, got {variable}")
        if self._children[parent][slot] is not None:
            raise ValueError(f"Node {parent} already has a {Value(value).name} child")
        if self.assignment_of(parent, variable) != Value.UNASSIGNED:
            raise ConflictingAssignmentError(
                f"Variable {variable} is already bound on the path to node {parent}"
            )

        node = len(self._variable)
        self._variable.append(variable)
        self._value.append(Value(value))
        self._parent.append(parent)
        self._children.append([None, None])
        self._children[parent][slot] = node
        return node

    def ancestors(self, node: int) -> Iterator[int]:
        """Yield node and its ancestors, stopping before the root."""
        self._check(node)
        current: Optional[int] = node
        while current is not None and current != self.ROOT:
            yield current
            current = self._parent[current]

    def assignment_of(self, node: int, variable: int) -> Value:
        """Value bound to `variable` by the nearest inclusive ancestor of `node`."""
        for current in self.ancestors(node):
            if self._variable[current] == variable:
                return self._value[current]
        return Value.UNASSIGNED

    def bindings(self, node: int) -> Dict[int, Value]:
        """Materialize the partial assignment of a path, checking it binds each variable once."""
        result: Dict[int, Value] = {}
        for current in self.ancestors(node):
            variable = self._variable[current]
            if variable in result:
                raise ConflictingAssignmentError(
                    f"Variable {variable} is bound twice on the path to node {node}"
                )
            result[variable] = self._value[current]
        return result
