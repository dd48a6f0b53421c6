"""Rich rendering utilities for Gradle dependency trees."""

from __future__ import annotations

from rich.text import Text
from rich.tree import Tree

from g_dep_tree.models import DependencyNode, DependencyReport


def node_label(node: DependencyNode) -> Text:
    """Return a styled label for a single node.

    Labels are plain `Text`, so coordinates such as `org.apache.ant:ant:1.10.14`
    are never read as markup or emoji codes.
    """
    if node.group is None:
        return Text(node.label, style="dim")
    text = Text(f"{node.group}:{node.artifact}:")
    if node.requested_version is not None:
        text.append(node.requested_version)
        text.append(f" -> {node.version or ''}", style="yellow")
    else:
        text.append(node.version or "")
    if node.omitted:
        text.append(" (*)", style="dim")
    return text


def _add_children(branch: Tree, node: DependencyNode) -> None:
    for child in node.children:
        _add_children(branch.add(node_label(child)), child)


def build_rich_tree(report: DependencyReport) -> Tree:
    """Build a Rich Tree mirroring the parsed report.

    Args:
        report: Parsed dependency report.

    Returns:
        A Rich Tree object for rendering.
    """
    root = Tree(Text(report.root.label, style="bold"))
    if not report.configurations:
        root.add("[dim]No configurations found[/dim]")
    for configuration in report.configurations:
        _add_children(root.add(Text(configuration.label, style="bold cyan")), configuration)
    if report.unplaced:
        unplaced = root.add("[red]unplaced lines[/red]")
        for node in report.unplaced:
            unplaced.add(Text(node.label, style="dim"))
    return root


def summarize_configuration(configuration: DependencyNode) -> dict[str, int]:
    """Count the nodes of one configuration subtree.

    Returns:
        `direct`, `total`, `omitted` and `conflicts` counts.
    """
    nodes = list(configuration.walk())[1:]
    return {
        "direct": len(configuration.children),
        "total": len(nodes),
        "omitted": sum(1 for n in nodes if n.omitted),
        "conflicts": sum(1 for n in nodes if n.replaced_by_version is not None),
    }
