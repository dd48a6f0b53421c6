"""Pydantic models for Gradle dependency trees."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field, PrivateAttr


ROOT_LABEL = "Project Dependencies"
CONFIGURATION_LEVEL = -1


class DependencyNode(BaseModel):
    """A configuration or a single resolved dependency in a report tree.

    `parent` is a lookup-only back-reference; ownership flows through
    `children`, which keeps input order.
    """

    label: str
    group: str | None = None
    artifact: str | None = None
    version: str | None = None
    requested_version: str | None = None
    replaced_by_version: str | None = None
    omitted: bool = False
    level: int | None = None
    children: list[DependencyNode] = Field(default_factory=list)

    _parent: DependencyNode | None = PrivateAttr(default=None)

    @property
    def parent(self) -> DependencyNode | None:
        return self._parent

    def add_child(self, child: DependencyNode) -> None:
        """Append `child` and point its parent back at this node."""
        self.children.append(child)
        child._parent = self

    def compact(self) -> str:
        """Return a compact string representation.

        Returns:
            `group:artifact:version` for parsed dependencies, the label otherwise.
        """
        if self.group is None or self.artifact is None:
            return self.label
        return f"{self.group}:{self.artifact}:{self.version}"

    def walk(self) -> Iterator[DependencyNode]:
        """Yield this node and every descendant in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __eq__(self, other: object) -> bool:
        # The parent back-reference would make field-wise comparison recurse forever.
        if not isinstance(other, DependencyNode):
            return NotImplemented
        return self.model_dump() == other.model_dump()


class DependencyReport(BaseModel):
    """A parsed `gradle dependencies` report."""

    root: DependencyNode = Field(default_factory=lambda: DependencyNode(label=ROOT_LABEL))
    unplaced: list[DependencyNode] = Field(default_factory=list)

    @property
    def configurations(self) -> list[DependencyNode]:
        return self.root.children
