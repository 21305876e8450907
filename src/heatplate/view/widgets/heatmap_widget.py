"""
Heat-Map Widget
Displays RenderedFrame pixel buffers and the colour-scale legend.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import numpy as np
from PySide6.QtCore import Qt
from PySide6.QtGui import QImage, QPixmap
from PySide6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from heatplate.config import CANVAS_HEIGHT, CANVAS_WIDTH
from heatplate.view.colormap import legend

if TYPE_CHECKING:
    import numpy.typing as npt

    from heatplate.view.renderer import RenderedFrame


def rgb_to_qimage(pixels: npt.NDArray[np.uint8]) -> QImage:
    """
    Wrap an (H, W, 3) uint8 buffer as a QImage.

    The image is copied so it does not depend on the lifetime of `pixels`.
    """
    pixels = np.ascontiguousarray(pixels, dtype=np.uint8)
    height, width, _ = pixels.shape
    image = QImage(pixels.data, width, height, 3 * width, QImage.Format.Format_RGB888)
    return image.copy()


class HeatMapWidget(QWidget):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.canvas_width = CANVAS_WIDTH
        self.canvas_height = CANVAS_HEIGHT

        layout = QVBoxLayout(self)

        self.canvas = QLabel()
        self.canvas.setFixedSize(self.canvas_width, self.canvas_height)
        self.canvas.setAlignment(Qt.AlignCenter)
        self.canvas.setStyleSheet("border: 1px solid #B0B0B0;")
        layout.addWidget(self.canvas, alignment=Qt.AlignHCenter)

        self.range_label = QLabel("")
        self.range_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.range_label)

        # --- Legend ---
        caption = QLabel("Temperature Scale")
        caption.setAlignment(Qt.AlignCenter)
        layout.addWidget(caption)

        bar = QLabel()
        bar.setPixmap(QPixmap.fromImage(rgb_to_qimage(legend(256, 16))))
        layout.addWidget(bar, alignment=Qt.AlignHCenter)

        ends = QHBoxLayout()
        ends.addStretch()
        ends.addWidget(QLabel("Cold"))
        ends.addSpacing(200)
        ends.addWidget(QLabel("Hot"))
        ends.addStretch()
        layout.addLayout(ends)

    def show_frame(self, frame: RenderedFrame) -> None:
        self.canvas.setPixmap(QPixmap.fromImage(rgb_to_qimage(frame.pixels)))
        if frame.degenerate_range is not None:
            self.range_label.setText(f"Uniform field: {frame.min_temp:.4g}")
        else:
            self.range_label.setText(f"min {frame.min_temp:.4g} / max {frame.max_temp:.4g}")
        if frame.non_finite_cells:
            self.range_label.setText(f"{self.range_label.text()} ({frame.non_finite_cells} diverged cells)")
