from PySide6.QtCore import QSettings, Signal

from loopview.widgets.infinite_scroll_viewport import Axis, CellMetrics

# Defaults for settings that are accessed from multiple places.
DEFAULT_SETTINGS = {
    'infinite_scroll_horizontal': True,
    'infinite_scroll_cell_extent': 120,  # Size of one cell along the scroll axis
    'infinite_scroll_cell_breadth': 80,  # Size of one cell across the scroll axis
    'infinite_scroll_cell_padding': 0,
    # Vertical re-centering historically ignores the viewport height. Opt in to
    # center the vertical axis the same way as the horizontal one.
    'infinite_scroll_fix_vertical_center': False,
    'infinite_scroll_debug': False,
}


class Settings(QSettings):
    # Signal that shows that the setting with the given string was changes
    change = Signal(str, object, name='settingsChanged')

    def __init__(self):
        super().__init__('loopview', 'loopview')

    def setValue(self, key, value):
        super().setValue(key, value)
        self.change.emit(key, value)

# Common shared instance to ensure the Signal is also shared
settings = Settings()


def get_scroll_axis() -> Axis:
    horizontal = settings.value(
        'infinite_scroll_horizontal',
        defaultValue=DEFAULT_SETTINGS['infinite_scroll_horizontal'], type=bool)
    return Axis.HORIZONTAL if horizontal else Axis.VERTICAL


def get_cell_metrics() -> CellMetrics:
    """Build cell metrics from settings. Raises `ValueError` if invalid."""
    cell_extent = settings.value(
        'infinite_scroll_cell_extent',
        defaultValue=DEFAULT_SETTINGS['infinite_scroll_cell_extent'], type=int)
    padding = settings.value(
        'infinite_scroll_cell_padding',
        defaultValue=DEFAULT_SETTINGS['infinite_scroll_cell_padding'], type=int)
    return CellMetrics(cell_extent=float(cell_extent), padding=float(padding))


def get_cell_breadth() -> int:
    return max(1, int(settings.value(
        'infinite_scroll_cell_breadth',
        defaultValue=DEFAULT_SETTINGS['infinite_scroll_cell_breadth'],
        type=int)))


def get_fix_vertical_center() -> bool:
    return settings.value(
        'infinite_scroll_fix_vertical_center',
        defaultValue=DEFAULT_SETTINGS['infinite_scroll_fix_vertical_center'],
        type=bool)


def is_recenter_debug_enabled() -> bool:
    return settings.value(
        'infinite_scroll_debug',
        defaultValue=DEFAULT_SETTINGS['infinite_scroll_debug'], type=bool)
