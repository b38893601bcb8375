from PySide6.QtCore import QAbstractItemModel, QModelIndex, QSize, Qt, QTimer, Signal
from PySide6.QtWidgets import QAbstractItemView, QListView

from loopview.models.infinite_list_model import InfiniteListModel
from loopview.utils.settings import (get_cell_breadth, get_cell_metrics,
                                     get_fix_vertical_center, get_scroll_axis,
                                     is_recenter_debug_enabled)
from loopview.widgets.infinite_list_view_scroll_mixin import \
    InfiniteListViewScrollMixin
from loopview.widgets.infinite_scroll_recenter_service import \
    InfiniteRecenterService
from loopview.widgets.infinite_scroll_shift_accumulator import ShiftAccumulator
from loopview.widgets.infinite_scroll_viewport import (Axis, CellMetrics,
                                                       ViewportTracker)


class InfiniteListView(InfiniteListViewScrollMixin, QListView):
    """List view that scrolls through a finite source model without an end.

    Attach data with `set_source_model()`. Clicks report the logical source row
    through `item_selected`.
    """
    item_selected = Signal(int)
    dragging_started = Signal()
    recentered = Signal(int, int)  # (shift in cells, accumulated drift)

    def __init__(self, parent=None, *, axis: Axis | None = None,
                 metrics: CellMetrics | None = None,
                 cell_breadth: int | None = None,
                 fix_vertical_center: bool | None = None):
        super().__init__(parent)
        axis = Axis(axis) if axis is not None else get_scroll_axis()
        metrics = metrics if metrics is not None else get_cell_metrics()
        self._cell_breadth = cell_breadth if cell_breadth is not None else get_cell_breadth()
        if fix_vertical_center is None:
            fix_vertical_center = get_fix_vertical_center()

        self._recentering = False
        self._mouse_scrolling = False
        self._mouse_scroll_timer = QTimer(self)
        self._mouse_scroll_timer.setSingleShot(True)
        self._mouse_scroll_timer.timeout.connect(self._on_mouse_scroll_stopped)

        self._accumulator = ShiftAccumulator()
        self._infinite_model = InfiniteListModel(self._accumulator)
        self._tracker = ViewportTracker(axis, metrics)
        self._recenter_service = InfiniteRecenterService(
            self._infinite_model,
            self._infinite_model,
            self._tracker,
            self._accumulator,
            fix_vertical_center=fix_vertical_center,
            debug=is_recenter_debug_enabled(),
        )

        self.setUniformItemSizes(True)
        self.setWrapping(False)
        self.setMovement(QListView.Movement.Static)
        self.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.setHorizontalScrollMode(QAbstractItemView.ScrollMode.ScrollPerPixel)
        self.setVerticalScrollMode(QAbstractItemView.ScrollMode.ScrollPerPixel)
        self._apply_geometry()
        super().setModel(self._infinite_model)

        self._infinite_model.reloaded.connect(self.viewport().update)
        self.clicked.connect(self._on_clicked)
        self.horizontalScrollBar().sliderPressed.connect(self._on_slider_pressed)
        self.verticalScrollBar().sliderPressed.connect(self._on_slider_pressed)

    def _apply_geometry(self):
        metrics = self._tracker.metrics
        if self._tracker.axis == Axis.HORIZONTAL:
            self.setFlow(QListView.Flow.LeftToRight)
            cell_size = QSize(round(metrics.cell_extent), self._cell_breadth)
            self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
            self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        else:
            self.setFlow(QListView.Flow.TopToBottom)
            cell_size = QSize(self._cell_breadth, round(metrics.cell_extent))
            self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
            self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.setSpacing(round(metrics.padding))
        self._infinite_model.cell_size = cell_size

    @property
    def axis(self) -> Axis:
        return self._tracker.axis

    @property
    def metrics(self) -> CellMetrics:
        return self._tracker.metrics

    @property
    def drift(self) -> int:
        return self._accumulator.drift

    def infinite_model(self) -> InfiniteListModel:
        return self._infinite_model

    def source_model(self) -> QAbstractItemModel | None:
        return self._infinite_model.sourceModel()

    def set_source_model(self, source_model: QAbstractItemModel | None):
        self._infinite_model.set_source_model(source_model)
        self.scheduleDelayedItemsLayout()

    def setModel(self, model):
        if model is not self._infinite_model:
            print("[INFINITE] WARNING: InfiniteListView model must not be replaced. "
                  "Use set_source_model() instead.")
            return
        super().setModel(model)

    def logical_row(self, index: QModelIndex) -> int:
        return self._infinite_model.logical_row(index.row())

    def scroll_to_logical(self, row: int,
                          hint=QAbstractItemView.ScrollHint.PositionAtCenter):
        """Scroll so that the middle tile shows the given source row."""
        item_count = self._infinite_model.item_count()
        if item_count <= 0:
            return
        slot = item_count + (row + self._accumulator.drift) % item_count
        self.scrollTo(self._infinite_model.index(slot, 0), hint)

    def _on_clicked(self, index: QModelIndex):
        if not index.isValid() or self._infinite_model.item_count() <= 0:
            return
        self.item_selected.emit(self.logical_row(index))

