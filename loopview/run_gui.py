import logging
import os
import signal
import sys
import warnings

from PySide6.QtCore import QStringListModel, qInstallMessageHandler
from PySide6.QtWidgets import QApplication, QMainWindow

from loopview.utils.settings import settings
from loopview.widgets.infinite_list_view import InfiniteListView

SAMPLE_ITEM_COUNT = 12


# Install a message handler to suppress QPainter warnings at Qt level
def qt_message_handler(msg_type, msg_context, msg_string):
    """Suppress Qt's QPainter debug messages."""
    if "QPainter" in msg_string or "Paint device returned engine" in msg_string:
        return
    print(f"[Qt] {msg_string}")


def suppress_warnings():
    """Suppress all warnings when not in a development environment."""
    environment = os.getenv('LOOPVIEW_ENVIRONMENT')
    if environment == 'development':
        print('Running in development environment.')
        logging.basicConfig(level=logging.DEBUG)
        return
    logging.basicConfig(level=logging.ERROR)
    warnings.simplefilter('ignore')


class MainWindow(QMainWindow):
    def __init__(self, item_count: int = SAMPLE_ITEM_COUNT):
        super().__init__()
        self.setWindowTitle('loopview')
        self.source_model = QStringListModel(
            [f'Item {row}' for row in range(item_count)])
        self.list_view = InfiniteListView(self)
        self.list_view.set_source_model(self.source_model)
        self.list_view.item_selected.connect(self._on_item_selected)
        self.list_view.dragging_started.connect(self._on_dragging_started)
        self.setCentralWidget(self.list_view)
        geometry = settings.value('geometry')
        if geometry is not None:
            self.restoreGeometry(geometry)
        else:
            self.resize(800, 240)

    def _on_item_selected(self, row: int):
        print(f"[SELECT] {self.source_model.stringList()[row]} (row {row})")

    def _on_dragging_started(self):
        self.statusBar().showMessage('Scrolling...', 1000)

    def closeEvent(self, event):
        settings.setValue('geometry', self.saveGeometry())
        super().closeEvent(event)


def run_gui():
    qInstallMessageHandler(qt_message_handler)
    app = QApplication([])
    # The application name is shown in the taskbar.
    app.setApplicationName('loopview')
    app.setApplicationDisplayName('loopview')
    app.setStyle('Fusion')

    main_window = MainWindow()
    main_window.show()

    def signal_handler(signum, frame):
        print("\n[SHUTDOWN] Console closing, saving settings...")
        settings.setValue('geometry', main_window.saveGeometry())
        settings.sync()  # Force write to disk
        main_window.close()
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)  # Ctrl+C
    signal.signal(signal.SIGTERM, signal_handler)  # Termination signal

    return int(app.exec())
