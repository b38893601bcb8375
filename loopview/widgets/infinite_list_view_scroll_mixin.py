from loopview.widgets.infinite_scroll_index_space import correct_index
from loopview.widgets.infinite_scroll_viewport import Axis


class InfiniteListViewScrollMixin:
    def _axis_scroll_bar(self):
        if self._tracker.axis == Axis.HORIZONTAL:
            return self.horizontalScrollBar()
        return self.verticalScrollBar()

    def _axis_viewport_extent(self) -> int:
        if self._tracker.axis == Axis.HORIZONTAL:
            return self.viewport().width()
        return self.viewport().height()

    def _logical_row_at(self, position: float) -> int:
        """Logical row under a viewport-relative position along the scroll axis."""
        return correct_index(self._tracker.slot_at(position),
                             self._recenter_service.item_count(),
                             self._recenter_service.drift)

    def _recenter_if_needed(self):
        """Feed the scroll position into the recenter service and apply its jump."""
        if self._recentering:
            return
        scroll_bar = self._axis_scroll_bar()
        if scroll_bar.maximum() <= 0:
            # Items are not laid out yet.
            return
        self._tracker.set_offset(scroll_bar.value())
        self._tracker.set_extent(self._axis_viewport_extent())

        center = self._tracker.extent / 2
        center_row_before = self._logical_row_at(center)
        drift_before = self._recenter_service.drift
        # The drift may only move by as many cells as the scroll bar can follow.
        result = self._recenter_service.on_layout(scroll_bar.minimum(), scroll_bar.maximum())
        if not result.should_reload:
            return

        # Writing the scroll bar calls back into scrollContentsBy, which must not
        # start another pass while this one is applying its offset.
        self._recentering = True
        try:
            scroll_bar.setValue(round(result.new_offset))
        finally:
            self._recentering = False
        self._tracker.set_offset(scroll_bar.value())
        if self._recenter_service.debug:
            print(f"[INFINITE] center row {center_row_before} -> {self._logical_row_at(center)}")
        self.recentered.emit(result.drift - drift_before, result.drift)

    def scrollContentsBy(self, dx, dy):
        """Handle scrolling and keep the tiles centered."""
        super().scrollContentsBy(dx, dy)
        self._recenter_if_needed()

    def updateGeometries(self):
        super().updateGeometries()
        self._recenter_if_needed()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._recenter_if_needed()

    def wheelEvent(self, event):
        if not self._mouse_scrolling:
            self._mouse_scrolling = True
            self.dragging_started.emit()
        # Restart the stop timer on every wheel tick.
        self._mouse_scroll_timer.start(200)
        super().wheelEvent(event)

    def _on_mouse_scroll_stopped(self):
        """Called when mouse scrolling stops (200ms after last wheel event)."""
        self._mouse_scrolling = False

    def _on_slider_pressed(self):
        self.dragging_started.emit()
