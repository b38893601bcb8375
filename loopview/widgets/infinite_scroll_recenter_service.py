import math
import os
from dataclasses import dataclass
from typing import Optional, Protocol

from loopview.widgets.infinite_scroll_shift_accumulator import ShiftAccumulator
from loopview.widgets.infinite_scroll_viewport import (Axis, CellMetrics,
                                                       ViewportTracker)
from loopview.widgets.infinite_scroll_index_space import TILING_FACTOR


class ItemCountSource(Protocol):
    def item_count(self) -> int: ...


class ReloadSink(Protocol):
    def reload(self) -> None: ...


@dataclass
class RecenterPlan:
    """Outcome of a single layout pass decision."""

    new_offset: float
    shift_cells: int = 0
    should_reload: bool = False
    total_extent: float = 0.0
    center_offset: float = 0.0
    distance: float = 0.0


@dataclass
class RecenterResult:
    new_offset: float
    drift: int
    should_reload: bool


def compute_center_offset(axis: Axis, total_extent: float, viewport_extent: float,
                          fix_vertical_center: bool = False) -> float:
    if axis == Axis.HORIZONTAL or fix_vertical_center:
        return (TILING_FACTOR * total_extent - viewport_extent) / 2
    # Vertical centering leaves the viewport extent out.
    return (TILING_FACTOR * total_extent) / 2


def _offset_in_range(value, min_offset, max_offset) -> bool:
    if min_offset is not None and value < min_offset:
        return False
    if max_offset is not None and value > max_offset:
        return False
    return True


def _reachable_shift(shift_cells, offset, pitch, min_offset, max_offset) -> int:
    # Moving by whole cells keeps every screen position on the same logical row.
    if shift_cells > 0:
        if max_offset is None:
            return shift_cells
        return max(0, min(shift_cells, int(math.floor((max_offset - offset) / pitch))))
    if min_offset is None:
        return shift_cells
    return min(0, max(shift_cells, int(math.ceil((min_offset - offset) / pitch))))


def plan_recenter(
    *,
    item_count: int,
    axis: Axis,
    metrics: CellMetrics,
    offset: float,
    extent: float,
    fix_vertical_center: bool = False,
    min_offset: Optional[float] = None,
    max_offset: Optional[float] = None,
) -> RecenterPlan:
    """Decide whether the viewport drifted far enough to jump back to center.

    Pure: nothing is mutated. The returned `new_offset` equals `offset` when no
    re-center is needed.

    `min_offset`/`max_offset` bound the reachable scroll range. A jump that would
    land outside it is shortened to the whole cells that fit; if none fit the
    pass is a no-op.
    """
    if item_count <= 0:
        return RecenterPlan(new_offset=offset)

    pitch = metrics.pitch
    tracker = ViewportTracker(axis, metrics, offset=offset, extent=extent)
    total_extent = tracker.total_content_extent(item_count)
    center_offset = compute_center_offset(axis, total_extent, extent, fix_vertical_center)
    distance = center_offset - offset

    plan = RecenterPlan(
        new_offset=offset,
        total_extent=total_extent,
        center_offset=center_offset,
        distance=distance,
    )
    if not abs(distance) > total_extent / 4:
        return plan

    cell_count = distance / pitch
    plan.shift_cells = int(math.floor(cell_count) if cell_count > 0 else math.ceil(cell_count))
    offset_correction = math.modf(abs(cell_count))[0] * pitch

    if offset < center_offset:
        plan.new_offset = center_offset - offset_correction
    elif offset > center_offset:
        plan.new_offset = center_offset + offset_correction

    if not _offset_in_range(plan.new_offset, min_offset, max_offset):
        plan.shift_cells = _reachable_shift(plan.shift_cells, offset, pitch, min_offset, max_offset)
        plan.new_offset = offset + plan.shift_cells * pitch
        if plan.shift_cells == 0:
            return plan
    plan.should_reload = True
    return plan


class InfiniteRecenterService:
    """Keeps a tripled list centered while the user scrolls in one direction.

    Every layout pass re-reads the item count from `data_source`. When the
    viewport has drifted more than a quarter of one tile away from the center,
    the offset jumps back by whole cells and the drift grows by the same amount
    of cells, so every screen position keeps showing the same logical row.
    """

    def __init__(
        self,
        data_source: Optional[ItemCountSource],
        renderer: Optional[ReloadSink],
        tracker: ViewportTracker,
        accumulator: Optional[ShiftAccumulator] = None,
        *,
        fix_vertical_center: bool = False,
        debug: bool = False,
    ):
        self._data_source = data_source
        self._renderer = renderer
        self.tracker = tracker
        self.accumulator = accumulator if accumulator is not None else ShiftAccumulator()
        self.fix_vertical_center = fix_vertical_center
        self.debug = debug or os.getenv("LOOPVIEW_DEBUG_RECENTER", "0") == "1"

    @property
    def drift(self) -> int:
        return self.accumulator.drift

    def item_count(self) -> int:
        if self._data_source is None:
            return 0
        return max(0, int(self._data_source.item_count()))

    def on_layout(self, min_offset: Optional[float] = None,
                  max_offset: Optional[float] = None) -> RecenterResult:
        """Run one layout pass against the tracker's current offset and extent.

        Pass the scroll range when the caller cannot reach every offset.
        """
        item_count = self.item_count()
        plan = plan_recenter(
            item_count=item_count,
            axis=self.tracker.axis,
            metrics=self.tracker.metrics,
            offset=self.tracker.offset,
            extent=self.tracker.extent,
            fix_vertical_center=self.fix_vertical_center,
            min_offset=min_offset,
            max_offset=max_offset,
        )
        if not plan.should_reload:
            return RecenterResult(self.tracker.offset, self.accumulator.drift, False)

        self.accumulator.add(plan.shift_cells)
        self.tracker.set_offset(plan.new_offset)
        if self.debug:
            print(
                f"[RECENTER] n={item_count} offset={plan.center_offset - plan.distance:.1f} "
                f"-> {plan.new_offset:.1f} shift={plan.shift_cells} drift={self.accumulator.drift}"
            )
        if self._renderer is not None:
            self._renderer.reload()
        return RecenterResult(plan.new_offset, self.accumulator.drift, True)
