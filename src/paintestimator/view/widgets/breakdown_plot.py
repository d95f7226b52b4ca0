"""
Breakdown Plot
Bar chart of the surface areas and of the primer/paint cost split.
"""
from typing import Dict, List, Optional

import numpy as np
import pyqtgraph as pg
from PySide6.QtWidgets import QWidget, QVBoxLayout

from paintestimator.config import AREA_UNIT, CURRENCY_SYMBOL
from paintestimator.model.estimator import EstimateResult
from paintestimator.model.parameters import ResolvedParameters
from paintestimator.model.report import cost_split
from paintestimator.model.surfaces import SurfaceKind

AREA_COLOR = (0, 120, 215)
OPENING_COLOR = (200, 200, 200)
PRIMER_COLOR = (150, 150, 150)
PAINT_COLOR = (30, 200, 190)


class BreakdownPlotWidget(QWidget):
    def __init__(self, parent=None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.area_plot = self._create_plot(f"Area [{AREA_UNIT}]")
        self.cost_plot = self._create_plot(f"Cost [{CURRENCY_SYMBOL}]")
        layout.addWidget(self.area_plot)
        layout.addWidget(self.cost_plot)

        self.clear()

    @staticmethod
    def _create_plot(y_label: str) -> pg.PlotWidget:
        plot = pg.PlotWidget()
        plot.setBackground('w')
        plot.showGrid(x=False, y=True, alpha=0.3)
        plot.setLabel('left', y_label, color='black')
        plot.getAxis('bottom').setPen('k')
        plot.getAxis('left').setPen('k')
        plot.getAxis('bottom').setTextPen('k')
        plot.getAxis('left').setTextPen('k')
        plot.setMouseEnabled(x=False, y=False)
        plot.setMinimumHeight(150)
        return plot

    @staticmethod
    def _draw_bars(plot: pg.PlotWidget, labels: List[str], values: List[float], colors: List[tuple]) -> None:
        plot.clear()
        x = np.arange(len(values))
        bars = pg.BarGraphItem(
            x=x, height=np.asarray(values, dtype=float), width=0.6,
            brushes=[pg.mkBrush(c) for c in colors], pen=pg.mkPen('k')
        )
        plot.addItem(bars)
        plot.getAxis('bottom').setTicks([list(zip(x.tolist(), labels))])
        plot.autoRange()

    def clear(self) -> None:
        for plot in (self.area_plot, self.cost_plot):
            plot.clear()
            text_item = pg.TextItem('No estimate yet', color=(128, 128, 128), anchor=(0.5, 0.5))
            text_item.setPos(0.5, 0.5)
            plot.addItem(text_item)
            plot.setXRange(0, 1)
            plot.setYRange(0, 1)

    def update_plot(
        self,
        areas: Dict[SurfaceKind, float],
        result: EstimateResult,
        parameters: Optional[ResolvedParameters] = None
    ) -> None:
        labels = [kind.plural for kind in areas] + ["Paintable"]
        values = list(areas.values()) + [result.paintable_area]
        colors = [AREA_COLOR if kind == SurfaceKind.WALL else OPENING_COLOR for kind in areas] + [PAINT_COLOR]
        self._draw_bars(self.area_plot, labels, values, colors)

        if parameters is None:
            self.cost_plot.clear()
            return
        primer, paint = cost_split(result, parameters)
        self._draw_bars(self.cost_plot, ["Primer", "Paint", "Total"], [primer, paint, result.total_cost],
                        [PRIMER_COLOR, PAINT_COLOR, AREA_COLOR])
