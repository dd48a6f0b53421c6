"""Parse single lines of a `gradle dependencies` tree."""

from __future__ import annotations

from g_dep_tree.models import DependencyNode


DEPTH_MARKER = ">"
OMITTED_MARKER = "(*)"
CONFLICT_ARROW = "->"

_LAST_CHILD = "\\---"
_MID_CHILD = "+---"
_INDENT_UNITS = ("|    ", "     ")


def normalize_line(line: str) -> str:
    """Rewrite tree-drawing characters into a countable run of depth markers.

    Example:
        `|    \\--- a:b:1.0` becomes `>> a:b:1.0`.
    """
    normalized = line.replace(_LAST_CHILD, _MID_CHILD)
    for unit in _INDENT_UNITS:
        normalized = normalized.replace(unit, DEPTH_MARKER)
    return normalized.replace(_MID_CHILD, DEPTH_MARKER)


def marker_depth(normalized: str) -> int:
    """Count the leading depth markers of a normalized line."""
    return len(normalized) - len(normalized.lstrip(DEPTH_MARKER))


def _payload(normalized: str) -> str:
    _, _, rest = normalized.partition(" ")
    return rest


def _split_conflict(version: str) -> tuple[str | None, str]:
    """Split `requested -> resolved` into its two sides.

    Returns:
        `(requested, resolved)`; requested is None when no arrow is present.
    """
    if CONFLICT_ARROW not in version:
        return None, version
    requested, _, resolved = version.partition(CONFLICT_ARROW)
    return requested.strip(), resolved.strip()


def parse_dependency_line(line: str) -> DependencyNode:
    """Parse one raw dependency line into a node.

    The payload after the marker run is read as
    `group:artifact:version[ -> resolved][ (*)]`. Lines with fewer than three
    `:` fields become opaque nodes labelled with the raw line and carrying no
    coordinates and no level. A line without a marker run gets no level either.

    Args:
        line: A raw line from a configuration block, e.g.
            `|    +--- org.slf4j:slf4j-api:1.7.5 -> 1.7.36 (*)`.

    Returns:
        The parsed node, not yet attached to any parent.
    """
    normalized = normalize_line(line)
    payload = _payload(normalized)
    fields = payload.split(":")
    if len(fields) < 3:
        return DependencyNode(label=line)

    group, artifact = fields[0], fields[1]
    version = fields[2].replace(OMITTED_MARKER, "").strip()
    omitted = OMITTED_MARKER in payload
    requested, version = _split_conflict(version)
    depth = marker_depth(normalized)

    return DependencyNode(
        label=f"{group}:{artifact}:{version}",
        group=group,
        artifact=artifact,
        version=version,
        requested_version=requested,
        replaced_by_version=version if requested is not None else None,
        omitted=omitted,
        level=depth - 1 if depth else None,
    )
