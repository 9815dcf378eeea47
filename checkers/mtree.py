"""A tree whose nodes carry a sort value and a fixed number of branches."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass
class MNode:
    """A value paired with the number it is ordered by."""

    value: Any = None
    sort_val: float = 0.0


class MTree:
    """A node with up to ``max_branches`` child trees."""

    def __init__(
        self,
        node: MNode | None = None,
        max_branches: int = 2,
        children: Iterable[MTree | MNode] = (),
    ) -> None:
        self.node = node
        self.max_branches = max_branches
        kids = [
            child if isinstance(child, MTree) else MTree(child, max_branches)
            for child in children
        ]
        if len(kids) > max_branches:
            raise ValueError(
                f"{len(kids)} children given for a tree of {max_branches} branches"
            )
        self.branches: list[MTree | None] = kids + [None] * (max_branches - len(kids))

    def branch(self, branch_no: int) -> MTree | None:
        """Return the given branch, or None when out of range or empty."""
        if branch_no < 0 or branch_no >= self.max_branches:
            return None
        return self.branches[branch_no]

    def sort(self) -> float:
        return self.node.sort_val if self.node is not None else 0.0

    def val(self) -> Any:
        return self.node.value if self.node is not None else None

    def _with_branches(self) -> list[MTree]:
        return [self] + [b for b in self.branches if b is not None]

    def ascending(self) -> list[MTree]:
        """This tree and its branches, lowest sort value first."""
        return sorted(self._with_branches(), key=MTree.sort)

    def descending(self) -> list[MTree]:
        """This tree and its branches, highest sort value first."""
        return sorted(self._with_branches(), key=MTree.sort, reverse=True)