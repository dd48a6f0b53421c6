"""Rebuild dependency trees from `gradle dependencies` output."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from contextlib import closing
from pathlib import Path
from typing import TextIO

from g_dep_tree.blocks import extract_blocks
from g_dep_tree.exceptions import ReportNotFoundError, ReportReadError
from g_dep_tree.models import CONFIGURATION_LEVEL, DependencyNode, DependencyReport
from g_dep_tree.parser import marker_depth, normalize_line, parse_dependency_line


logger = logging.getLogger(__name__)


def _place(stack: list[DependencyNode], node: DependencyNode, level: int) -> None:
    """Attach `node` relative to the most recently active ancestor on `stack`.

    Each stack entry is the parent of the entry above it, so a sibling of the
    top shares the parent one slot below.
    """
    while stack[-1].level > level:
        stack.pop()
    if stack[-1].level == level:
        stack.pop()
    stack[-1].add_child(node)
    stack.append(node)


def build_configuration(block: list[str], unplaced: list[DependencyNode] | None = None) -> DependencyNode:
    """Build one configuration subtree from a block of report lines.

    Opaque lines are placed at the depth of their marker run. Lines without
    any marker run have no usable depth; they go to `unplaced` instead.

    Args:
        block: `[header, dependency_line, ...]` as produced by `extract_blocks`.
        unplaced: Collects nodes that could not be positioned in the tree.

    Returns:
        The configuration node, not yet attached to a parent.
    """
    header, *lines = block
    configuration = DependencyNode(label=header, level=CONFIGURATION_LEVEL)
    stack = [configuration]

    for line in lines:
        node = parse_dependency_line(line)
        depth = marker_depth(normalize_line(line))
        if depth == 0:
            logger.warning("Skipping line without tree markers in %r: %r", header, line)
            if unplaced is not None:
                unplaced.append(node)
            continue
        if node.level is None:
            logger.debug("Unparsed dependency line placed at depth %d: %r", depth - 1, line)
            node.level = depth - 1
        _place(stack, node, depth - 1)

    return configuration


def build_tree(lines: Iterable[str]) -> DependencyReport:
    """Parse report lines into a tree rooted at a synthetic project node.

    Args:
        lines: Lines of `gradle dependencies` output.

    Returns:
        A report whose root has one child per configuration block, in order.
    """
    report = DependencyReport()
    blocks = extract_blocks(lines)
    logger.debug("Found %d configuration block(s)", len(blocks))
    for block in blocks:
        report.root.add_child(build_configuration(block, report.unplaced))
    return report


def load_report(stream: TextIO) -> DependencyReport:
    """Read and parse a report from a text stream.

    The stream is closed on return, including when reading fails.

    Raises:
        ReportReadError: If the stream cannot be read or decoded.
    """
    with closing(stream):
        try:
            return build_tree(stream)
        except (OSError, UnicodeDecodeError) as exc:
            raise ReportReadError(f"Failed to read dependency report: {exc}") from exc


def load_dependencies(stream: TextIO) -> DependencyNode:
    """Given `gradle dependencies` output, return the root of its dependency tree."""
    return load_report(stream).root


def load_report_file(path: str | Path, encoding: str | None = None) -> DependencyReport:
    """Parse a report saved to disk.

    Args:
        path: Path to a file holding `gradle dependencies` output.
        encoding: Text encoding; the platform default when None.

    Raises:
        ReportNotFoundError: If the file does not exist.
        ReportReadError: If the file cannot be read or decoded.
    """
    report_path = Path(path)
    if not report_path.exists():
        raise ReportNotFoundError(f"Dependency report not found: {report_path}")
    try:
        stream = report_path.open("r", encoding=encoding)
    except OSError as exc:
        raise ReportReadError(f"Failed to open dependency report: {report_path}") from exc
    return load_report(stream)
