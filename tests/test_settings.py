import pytest

from loopview.utils import settings as settings_module
from loopview.widgets.infinite_scroll_viewport import Axis


def fake_value(values):
    def value(key, defaultValue=None, type=None):
        return values.get(key, defaultValue)
    return value


def test_defaults_build_horizontal_metrics(monkeypatch):
    monkeypatch.setattr(settings_module.settings, "value", fake_value({}))

    metrics = settings_module.get_cell_metrics()

    assert settings_module.get_scroll_axis() == Axis.HORIZONTAL
    assert metrics.cell_extent == 120
    assert metrics.padding == 0
    assert settings_module.get_cell_breadth() == 80
    assert settings_module.get_fix_vertical_center() is False
    assert settings_module.is_recenter_debug_enabled() is False


def test_vertical_axis_and_padding_from_settings(monkeypatch):
    monkeypatch.setattr(settings_module.settings, "value", fake_value({
        "infinite_scroll_horizontal": False,
        "infinite_scroll_cell_extent": 60,
        "infinite_scroll_cell_padding": 4,
    }))

    assert settings_module.get_scroll_axis() == Axis.VERTICAL
    assert settings_module.get_cell_metrics().pitch == 64


def test_invalid_metrics_are_rejected_at_setup(monkeypatch):
    monkeypatch.setattr(settings_module.settings, "value", fake_value({
        "infinite_scroll_cell_extent": 0,
    }))

    with pytest.raises(ValueError):
        settings_module.get_cell_metrics()


def test_cell_breadth_is_clamped_to_one_pixel(monkeypatch):
    monkeypatch.setattr(settings_module.settings, "value", fake_value({
        "infinite_scroll_cell_breadth": -20,
    }))

    assert settings_module.get_cell_breadth() == 1
