from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for widget tests", exc_type=ImportError)
pytest.importorskip("PySide6.QtWidgets", reason="Qt widgets not available", exc_type=ImportError)
pytest.importorskip("PySide6.QtTest", reason="Qt test helpers not available", exc_type=ImportError)

from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QMouseEvent, QPixmap
from PySide6.QtTest import QSignalSpy
from PySide6.QtWidgets import QApplication

from photopost.gui.ui.widgets.crop_box import AspectRatio, DragMode, PointerPosition, initialize
from photopost.gui.ui.widgets.crop_overlay import CropOverlay
from photopost.settings.manager import SettingsManager


@pytest.fixture(scope="module")
def qapp() -> QApplication:
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def overlay(qapp: QApplication) -> CropOverlay:
    widget = CropOverlay()
    widget.resize(400, 400)
    widget.show()
    qapp.processEvents()
    yield widget
    widget.close()


def _mouse(kind: QEvent.Type, x: float, y: float) -> QMouseEvent:
    pos = QPointF(x, y)
    buttons = Qt.MouseButton.LeftButton
    if kind == QEvent.Type.MouseButtonRelease:
        buttons = Qt.MouseButton.NoButton
    return QMouseEvent(
        kind,
        pos,
        pos,
        Qt.MouseButton.LeftButton,
        buttons,
        Qt.KeyboardModifier.NoModifier,
    )


def _touch(kind: QEvent.Type, x: float | None = None, y: float | None = None) -> MagicMock:
    event = MagicMock()
    event.type.return_value = kind
    if x is None:
        event.points.return_value = []
    else:
        point = MagicMock()
        point.position.return_value = QPointF(x, y)
        event.points.return_value = [point]
    return event


def test_resize_reports_container_size(overlay: CropOverlay) -> None:
    size = overlay.controller.container_size
    assert (size.width, size.height) == (400.0, 400.0)


def test_mouse_drag_moves_crop_and_emits(overlay: CropOverlay) -> None:
    crop_spy = QSignalSpy(overlay.cropChanged)
    drag_spy = QSignalSpy(overlay.dragStateChanged)

    overlay.mousePressEvent(_mouse(QEvent.Type.MouseButtonPress, 200, 200))
    overlay.mouseMoveEvent(_mouse(QEvent.Type.MouseMove, 240, 200))
    overlay.mouseReleaseEvent(_mouse(QEvent.Type.MouseButtonRelease, 240, 200))

    assert [drag_spy.at(i)[0] for i in range(drag_spy.count())] == [True, False]
    last_crop = crop_spy.at(crop_spy.count() - 1)[0]
    assert last_crop["x"] == pytest.approx(25.0)
    assert overlay.crop_values() == last_crop
    assert not overlay.controller.is_dragging()


def test_leave_ends_the_drag(overlay: CropOverlay) -> None:
    overlay.mousePressEvent(_mouse(QEvent.Type.MouseButtonPress, 200, 200))
    assert overlay.controller.drag_mode() is DragMode.MOVE

    overlay.leaveEvent(QEvent(QEvent.Type.Leave))

    assert not overlay.controller.is_dragging()


def test_touch_and_mouse_share_one_pointer_path(overlay: CropOverlay) -> None:
    assert overlay.event(_touch(QEvent.Type.TouchBegin, 200, 200))
    assert overlay.controller.drag_mode() is DragMode.MOVE

    overlay.event(_touch(QEvent.Type.TouchUpdate, 240, 200))
    touched = overlay.crop_values()
    overlay.event(_touch(QEvent.Type.TouchCancel))
    assert not overlay.controller.is_dragging()

    overlay.set_aspect_ratio("square")
    overlay.set_aspect_ratio("horizontal")
    overlay.mousePressEvent(_mouse(QEvent.Type.MouseButtonPress, 200, 200))
    overlay.mouseMoveEvent(_mouse(QEvent.Type.MouseMove, 240, 200))
    overlay.mouseReleaseEvent(_mouse(QEvent.Type.MouseButtonRelease, 240, 200))

    assert overlay.crop_values() == touched


def test_aspect_ratio_locked_while_dragging(overlay: CropOverlay) -> None:
    overlay.mousePressEvent(_mouse(QEvent.Type.MouseButtonPress, 200, 200))
    assert not overlay.set_aspect_ratio("vertical")
    overlay.mouseReleaseEvent(_mouse(QEvent.Type.MouseButtonRelease, 200, 200))

    assert overlay.set_aspect_ratio("vertical")
    assert overlay.controller.rectangle == initialize("vertical")


def test_set_image_recentres_and_repaints(overlay: CropOverlay, qapp: QApplication) -> None:
    overlay.mousePressEvent(_mouse(QEvent.Type.MouseButtonPress, 200, 200))
    overlay.mouseMoveEvent(_mouse(QEvent.Type.MouseMove, 260, 230))
    overlay.mouseReleaseEvent(_mouse(QEvent.Type.MouseButtonRelease, 260, 230))

    pixmap = QPixmap(64, 36)
    pixmap.fill(Qt.GlobalColor.darkGreen)
    overlay.set_image(pixmap)
    overlay.repaint()
    qapp.processEvents()

    assert overlay.controller.image is pixmap
    assert overlay.controller.rectangle == initialize("horizontal")

    overlay.set_image(QPixmap())
    assert overlay.controller.image is None


def test_set_image_during_drag_reports_drag_end(overlay: CropOverlay) -> None:
    drag_spy = QSignalSpy(overlay.dragStateChanged)
    overlay.mousePressEvent(_mouse(QEvent.Type.MouseButtonPress, 200, 200))
    overlay.mouseMoveEvent(_mouse(QEvent.Type.MouseMove, 240, 200))

    pixmap = QPixmap(10, 10)
    pixmap.fill(Qt.GlobalColor.darkGreen)
    overlay.set_image(pixmap)
    overlay.mouseReleaseEvent(_mouse(QEvent.Type.MouseButtonRelease, 240, 200))

    assert [drag_spy.at(i)[0] for i in range(drag_spy.count())] == [True, False]
    assert not overlay.controller.is_dragging()
    assert overlay.controller.rectangle == initialize("horizontal")
    assert overlay.set_aspect_ratio("square")


def test_overlay_reads_crop_settings(qapp: QApplication, tmp_path: Path) -> None:
    settings = SettingsManager(path=tmp_path / "settings.json")
    settings.load()
    settings.set("crop.default_aspect_ratio", "square")
    settings.set("crop.min_size", 40)

    widget = CropOverlay(settings=settings)
    controller = widget.controller
    controller.set_container_size(400, 400)

    assert controller.aspect_ratio is AspectRatio.SQUARE
    assert controller.rectangle == initialize("square")
    # Square default spans (60, 60)-(340, 340); drag its bottom-right handle far left
    assert controller.press(PointerPosition(340.0, 340.0)) is DragMode.RESIZE_BOTTOM_RIGHT
    rect = controller.update_drag(PointerPosition(0.0, 340.0))
    assert rect.width == pytest.approx(40.0)
    widget.close()
