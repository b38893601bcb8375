from PySide6.QtCore import (QAbstractItemModel, QAbstractListModel, QModelIndex,
                            QSize, Qt, Signal)

from loopview.widgets.infinite_scroll_index_space import (correct_index,
                                                          virtual_slot_count)
from loopview.widgets.infinite_scroll_shift_accumulator import ShiftAccumulator


class InfiniteListModel(QAbstractListModel):
    """Presents a source model three times in a row, rotated by the drift.

    Acts as the data source (`item_count`) and the renderer (`reload`) of the
    recenter service.
    """
    reloaded = Signal()

    def __init__(self, accumulator: ShiftAccumulator | None = None,
                 cell_size: QSize | None = None):
        super().__init__()
        self.accumulator = accumulator if accumulator is not None else ShiftAccumulator()
        self.cell_size = cell_size if cell_size is not None else QSize()
        self._source_model: QAbstractItemModel | None = None
        self._resetting = False

    def sourceModel(self) -> QAbstractItemModel | None:
        return self._source_model

    def set_source_model(self, source_model: QAbstractItemModel | None):
        self.beginResetModel()
        if self._source_model is not None:
            self._disconnect_source(self._source_model)
        self._source_model = source_model
        self.accumulator.reset()
        if source_model is not None:
            self._connect_source(source_model)
        self.endResetModel()

    def _connect_source(self, source_model: QAbstractItemModel):
        for about_signal in (source_model.modelAboutToBeReset,
                             source_model.rowsAboutToBeInserted,
                             source_model.rowsAboutToBeRemoved,
                             source_model.rowsAboutToBeMoved,
                             source_model.layoutAboutToBeChanged):
            about_signal.connect(self._begin_source_change)
        for done_signal in (source_model.modelReset,
                            source_model.rowsInserted,
                            source_model.rowsRemoved,
                            source_model.rowsMoved,
                            source_model.layoutChanged):
            done_signal.connect(self._end_source_change)
        source_model.dataChanged.connect(self._on_source_data_changed)

    def _disconnect_source(self, source_model: QAbstractItemModel):
        for signal in (source_model.modelAboutToBeReset,
                       source_model.rowsAboutToBeInserted,
                       source_model.rowsAboutToBeRemoved,
                       source_model.rowsAboutToBeMoved,
                       source_model.layoutAboutToBeChanged):
            signal.disconnect(self._begin_source_change)
        for signal in (source_model.modelReset,
                       source_model.rowsInserted,
                       source_model.rowsRemoved,
                       source_model.rowsMoved,
                       source_model.layoutChanged):
            signal.disconnect(self._end_source_change)
        source_model.dataChanged.disconnect(self._on_source_data_changed)

    def _begin_source_change(self, *args):
        if self._resetting:
            return
        self._resetting = True
        self.beginResetModel()

    def _end_source_change(self, *args):
        if not self._resetting:
            return
        # Rows changed under us, the old drift no longer lines up with them.
        self.accumulator.reset()
        self._resetting = False
        self.endResetModel()

    def _on_source_data_changed(self, *args):
        self.reload()

    def item_count(self) -> int:
        if self._source_model is None:
            return 0
        return self._source_model.rowCount()

    def logical_row(self, virtual_row: int) -> int:
        return correct_index(virtual_row, self.item_count(),
                             self.accumulator.drift)

    def source_index(self, index: QModelIndex) -> QModelIndex:
        if not index.isValid() or self._source_model is None:
            return QModelIndex()
        return self._source_model.index(self.logical_row(index.row()),
                                        index.column())

    def rowCount(self, parent=QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return virtual_slot_count(self.item_count())

    def data(self, index, role=Qt.ItemDataRole.DisplayRole):
        if not index.isValid() or self._source_model is None:
            return None
        if role == Qt.ItemDataRole.SizeHintRole and self.cell_size.isValid():
            return self.cell_size
        return self._source_model.data(self.source_index(index), role)

    def flags(self, index):
        if not index.isValid() or self._source_model is None:
            return Qt.ItemFlag.NoItemFlags
        return self._source_model.flags(self.source_index(index))

    def reload(self):
        """Redraw every virtual row, their logical rows shifted."""
        row_count = self.rowCount()
        if row_count > 0:
            self.dataChanged.emit(self.index(0, 0), self.index(row_count - 1, 0))
        self.reloaded.emit()
