"""
Interactive-region lookup for the desk map.

Desks and rooms on the floor map are grouped under labelled parent regions
(the map is exported with group labels such as ``DESKS`` and ``ROOMS``). A
press anywhere inside such a group must select rather than pan, so the
classifier walks from the region under the pointer up through its ancestors
looking for one of the interactive labels.
"""

import json
import logging
import pathlib
from dataclasses import dataclass
from typing import Any, Iterable

from config_manager import config
from custom_types import ContentPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Region:
    """A named area of the content plane, optionally nested in a parent group."""
    region_id: str
    label: str | None = None
    bounds: tuple[float, float, float, float] | None = None  # (x, y, width, height)
    parent_id: str | None = None

    def __post_init__(self) -> None:
        if self.bounds is not None and len(self.bounds) != 4:
            raise ValueError(f"Region '{self.region_id}' bounds must be (x, y, width, height), got {self.bounds!r}")

    def contains(self, point: ContentPoint) -> bool:
        if self.bounds is None:
            return False
        x, y, width, height = self.bounds
        return x <= point.x <= x + width and y <= point.y <= y + height

    @property
    def area(self) -> float:
        if self.bounds is None:
            return 0.0
        return self.bounds[2] * self.bounds[3]


class LabelledRegionClassifier:
    """Region classifier backed by a tree of labelled regions."""

    def __init__(self, regions: Iterable[Region], interactive_labels: Iterable[str] | None = None):
        self.regions: dict[str, Region] = {}
        for region in regions:
            if region.region_id in self.regions:
                raise ValueError(f"Duplicate region ID '{region.region_id}'")
            self.regions[region.region_id] = region
        if interactive_labels is None:
            interactive_labels = config.get_interactive_labels()
        self.interactive_labels = frozenset(interactive_labels)

    def region_at(self, point: ContentPoint) -> Region | None:
        """Innermost (smallest) region containing ``point``."""
        point = ContentPoint(*point)
        hits = [r for r in self.regions.values() if r.contains(point)]
        if not hits:
            return None
        return min(hits, key=lambda r: r.area)

    def has_interactive_label(self, region_id: str | None) -> bool:
        """True if the region or any ancestor carries an interactive label."""
        seen: set[str] = set()
        current = self.regions.get(region_id) if region_id is not None else None
        while current is not None and current.region_id not in seen:
            if current.label in self.interactive_labels:
                return True
            seen.add(current.region_id)
            current = self.regions.get(current.parent_id) if current.parent_id is not None else None
        return False

    def is_interactive(self, target: Any) -> bool:
        """Classify a region ID or a content point.

        Args:
            target: A region ID string, or an ``(x, y)`` content point

        Returns:
            bool: Whether pressing on the target must suppress panning
        """
        if target is None:
            return False
        if isinstance(target, str):
            region_id = target
        else:
            region = self.region_at(ContentPoint(*target))
            region_id = region.region_id if region is not None else None

        interactive = self.has_interactive_label(region_id)
        if interactive:
            logger.debug("Target %r resolved to interactive region %r", target, region_id)
        return interactive


def load_regions(path: str | pathlib.Path) -> list[Region]:
    """Load a region tree from JSON.

    The file holds a list of objects with ``id``, and optionally ``label``,
    ``bounds`` (``[x, y, width, height]``) and ``parent``. IDs and parent
    references are normalized to strings.

    Raises:
        ValueError: If the file is not a list of region objects or a
            region's bounds don't have four values
    """
    with open(path, 'r') as f:
        entries = json.load(f)

    if not isinstance(entries, list):
        raise ValueError(f"Expected a list of regions, got {type(entries).__name__}")

    regions = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"Region #{index} is not an object: {entry!r}")

        bounds = entry.get("bounds")
        if bounds is not None:
            if not isinstance(bounds, list) or len(bounds) != 4:
                raise ValueError(f"Region {entry.get('id')!r} bounds must be [x, y, width, height], got {bounds!r}")
            bounds = tuple(float(v) for v in bounds)

        parent = entry.get("parent")
        label = entry.get("label")
        regions.append(Region(
            region_id=str(entry["id"]),
            label=str(label) if label is not None else None,
            bounds=bounds,
            parent_id=str(parent) if parent is not None else None,
        ))
    logger.info("Loaded %d regions from %s", len(regions), path)
    return regions
