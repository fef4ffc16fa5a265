# gui/widgets/travel_table.py
from PySide6.QtWidgets import QWidget, QGroupBox, QVBoxLayout, QTableWidget, \
    QTableWidgetItem, QSizePolicy, QHeaderView, QAbstractItemView
from PySide6.QtCore import Qt

from core.conversion import ConversionRequest
from core.formatting import TABLE_COLUMNS, travel_time_table
from core.units import RESULT_TIME


class TravelTimeTable(QWidget):
    """Travel time for the current speed in every result unit."""

    def __init__(self, parent=None):
        super().__init__(parent)

        self.group = QGroupBox("Travel Time in All Units")
        vbox = QVBoxLayout(self.group)

        self.table = QTableWidget(len(RESULT_TIME), 2)
        self.table.setHorizontalHeaderLabels([TABLE_COLUMNS[0], TABLE_COLUMNS[1]])
        self.table.verticalHeader().setVisible(False)
        self.table.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.verticalHeader().setSectionResizeMode(QHeaderView.Fixed)
        self.table.verticalHeader().setDefaultSectionSize(28)
        self.table.setAlternatingRowColors(True)
        self.table.setWordWrap(False)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        vbox.addWidget(self.table)

        lay = QVBoxLayout(self)
        lay.addWidget(self.group)

        self.refresh(ConversionRequest())

    # ---- public API ----
    def refresh(self, request: ConversionRequest):
        df = travel_time_table(request.raw_speed_text, request.distance_unit, request.input_time_unit)
        self.table.setRowCount(len(df))
        for r, row in enumerate(df.itertuples(index=False)):
            self.table.setItem(r, 0, QTableWidgetItem(row[0]))
            self.table.setItem(r, 1, self._num(row[2]))

    def cell_text(self, row: int, col: int) -> str:
        item = self.table.item(row, col)
        return item.text() if item is not None else ""

    # ---- helpers ----
    @staticmethod
    def _num(txt: str):
        it = QTableWidgetItem(txt)
        it.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
        return it
