from dataclasses import dataclass
from enum import Enum


class Axis(str, Enum):
    HORIZONTAL = 'horizontal'
    VERTICAL = 'vertical'


@dataclass(frozen=True)
class CellMetrics:
    """Uniform cell size and spacing along the scroll axis."""

    cell_extent: float
    padding: float = 0.0

    def __post_init__(self):
        if self.cell_extent <= 0:
            raise ValueError(f'cell_extent must be positive, got {self.cell_extent}')
        if self.padding < 0:
            raise ValueError(f'padding must not be negative, got {self.padding}')
        if self.pitch <= 0:
            raise ValueError(f'cell_extent + padding must be positive, got {self.pitch}')

    @property
    def pitch(self) -> float:
        return self.cell_extent + self.padding


class ViewportTracker:
    """Scroll offset and visible extent along one axis.

    The tracker never decides when to re-center; the recenter service and the
    scroll input are the only writers of `offset`.
    """

    def __init__(self, axis: Axis, metrics: CellMetrics, offset: float = 0.0,
                 extent: float = 0.0):
        self.axis = Axis(axis)
        self.metrics = metrics
        self._offset = float(offset)
        self._extent = float(extent)

    @property
    def offset(self) -> float:
        return self._offset

    @property
    def extent(self) -> float:
        return self._extent

    def set_offset(self, value: float):
        self._offset = float(value)

    def set_extent(self, value: float):
        self._extent = float(value)

    def total_content_extent(self, item_count: int) -> float:
        """Extent of one copy of the collection along the axis."""
        pitch = self.metrics.pitch
        if self.axis == Axis.HORIZONTAL:
            return item_count * pitch
        # Vertical extent does not count the trailing padding.
        return item_count * pitch - self.metrics.padding

    def slot_at(self, position: float) -> int:
        """Virtual slot under a viewport-relative position."""
        return int((self._offset + position) // self.metrics.pitch)
