"""Dot-path segmentation and section walking."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Union

from treeconf.errors import InvalidPathError

if TYPE_CHECKING:
    from treeconf.store.base import HierarchicalStore, Section

__all__ = ["PATH_DELIMITER", "split_path", "walk_sections"]

PATH_DELIMITER = "."


def split_path(path: str | None) -> list[str]:
    """Split a dot-path into ordered, trimmed, non-empty segments.

    ``None``, ``""`` and delimiter-only strings such as ``"..."`` give an
    empty list.

    Example:
        split_path(" Service . Http..Port ")  # ['Service', 'Http', 'Port']
    """
    if not path:
        return []
    segments = []
    for raw in path.split(PATH_DELIMITER):
        segment = raw.strip()
        if segment:
            segments.append(segment)
    return segments


def walk_sections(
    root: Union[HierarchicalStore, Section], segments: Sequence[str]
) -> tuple[Union[HierarchicalStore, Section], str]:
    """Walk all but the last segment from root.

    Every hop is an unconditional ``get_section`` lookup; whether the
    sections exist is left to the caller, at the terminal step.

    Args:
        root: The store, or a section to start from.
        segments: Segments as returned by split_path.

    Returns:
        (parent, terminal_key). For a single segment, parent is root itself.

    Raises:
        InvalidPathError: If segments is empty.
    """
    if not segments:
        raise InvalidPathError()
    parent = root
    for key in segments[:-1]:
        parent = parent.get_section(key)
    return parent, segments[-1]
