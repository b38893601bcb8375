import pytest

from loopview.widgets.infinite_scroll_shift_accumulator import ShiftAccumulator
from loopview.widgets.infinite_scroll_viewport import (Axis, CellMetrics,
                                                       ViewportTracker)


def test_cell_metrics_rejects_invalid_configuration():
    with pytest.raises(ValueError):
        CellMetrics(cell_extent=0, padding=0)
    with pytest.raises(ValueError):
        CellMetrics(cell_extent=-10, padding=5)
    with pytest.raises(ValueError):
        CellMetrics(cell_extent=10, padding=-1)

    assert CellMetrics(cell_extent=40, padding=10).pitch == 50


def test_total_content_extent_drops_trailing_padding_only_vertically():
    metrics = CellMetrics(cell_extent=40, padding=10)

    assert ViewportTracker(Axis.HORIZONTAL, metrics).total_content_extent(3) == 150
    assert ViewportTracker(Axis.VERTICAL, metrics).total_content_extent(3) == 140


def test_tracker_offset_and_extent_are_only_written_through_setters():
    tracker = ViewportTracker("vertical", CellMetrics(cell_extent=50))
    assert tracker.axis == Axis.VERTICAL
    assert tracker.offset == 0.0

    tracker.set_offset(120)
    tracker.set_extent(300)

    assert tracker.offset == 120.0
    assert tracker.extent == 300.0
    assert tracker.slot_at(0) == 2
    assert tracker.slot_at(31) == 3


def test_shift_accumulator_adds_signed_cells_and_resets():
    accumulator = ShiftAccumulator()
    accumulator.add(6)
    accumulator.add(-9)
    assert accumulator.drift == -3

    accumulator.reset()
    assert accumulator.drift == 0
