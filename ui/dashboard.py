import math

from PyQt6.QtWidgets import (QMainWindow, QLabel, QVBoxLayout, QWidget,
                             QHBoxLayout, QFrame, QPushButton)
from PyQt6.QtCore import Qt, pyqtSignal, QTimer, QPointF, QRectF
from PyQt6.QtGui import QPainter, QColor, QPen, QFont

from core import config
from core.actions import Controls
from core.car_state import VehicleState
from core.smoother import DisplaySmoother


class GaugeWidget(QWidget):
    def __init__(self, title, unit, min_value, max_value, major_step, color="#00d4ff", parent=None):
        super().__init__(parent)
        self.title = title
        self.unit = unit
        self.min_value = min_value
        self.max_value = max_value
        self.major_step = major_step
        self.color = QColor(color)
        self.value = min_value

        # Needle sweeps 240 degrees, starting bottom-left
        self.start_angle = 150
        self.span_angle = 240
        self.setMinimumSize(200, 200)

    def set_value(self, value):
        self.value = max(self.min_value, min(self.max_value, value))
        self.update()

    def _value_to_angle(self, value):
        ratio = (value - self.min_value) / (self.max_value - self.min_value)
        return self.start_angle + self.span_angle * ratio

    def _point(self, center, radius, angle_deg):
        rad = math.radians(angle_deg)
        return QPointF(center.x() + radius * math.cos(rad), center.y() + radius * math.sin(rad))

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        side = min(self.width(), self.height()) - 20
        rect = QRectF((self.width() - side) / 2, (self.height() - side) / 2, side, side)
        center = rect.center()
        radius = side / 2

        # Face
        painter.setPen(QPen(QColor("#2b2b2b"), 4))
        painter.setBrush(QColor(20, 30, 50, 200))
        painter.drawEllipse(center, radius, radius)

        # Ticks and labels
        painter.setFont(QFont("Segoe UI", 8, QFont.Weight.Bold))
        value = self.min_value
        while value <= self.max_value:
            angle = self._value_to_angle(value)
            painter.setPen(QPen(QColor("#d9d9d9"), 2))
            painter.drawLine(self._point(center, radius * 0.78, angle),
                             self._point(center, radius * 0.9, angle))
            label = self._point(center, radius * 0.62, angle)
            painter.drawText(QRectF(label.x() - 20, label.y() - 8, 40, 16),
                             Qt.AlignmentFlag.AlignCenter, f"{value:g}")
            value += self.major_step

        # Needle
        needle_pen = QPen(self.color, 3)
        painter.setPen(needle_pen)
        painter.drawLine(center, self._point(center, radius * 0.85, self._value_to_angle(self.value)))
        painter.setBrush(self.color)
        painter.drawEllipse(center, 6, 6)

        # Readout
        painter.setPen(QColor("white"))
        painter.setFont(QFont("Segoe UI", 14, QFont.Weight.Bold))
        painter.drawText(QRectF(center.x() - 60, center.y() + radius * 0.25, 120, 24),
                         Qt.AlignmentFlag.AlignCenter, f"{self.value:.0f} {self.unit}")
        painter.setPen(self.color)
        painter.setFont(QFont("Segoe UI", 9))
        painter.drawText(QRectF(center.x() - 60, center.y() + radius * 0.5, 120, 20),
                         Qt.AlignmentFlag.AlignCenter, self.title)


class Dashboard(QMainWindow):
    # Define signals
    status_changed = pyqtSignal(str)

    def __init__(self, state: VehicleState, controls: Controls, smoother: DisplaySmoother):
        super().__init__()
        self.state = state
        self.controls = controls
        self.smoother = smoother
        self.setWindowTitle(f"{state.make} {state.model} Dashboard")
        self.setMinimumSize(1000, 450)

        self.init_ui()

        self.controls.on_status_changed(self.status_changed.emit)
        self.status_changed.connect(self.update_status)
        self.smoother.on_tick(self.render_reading)

        # update timer
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.smoother.tick)
        self.timer.start(config.TICK_INTERVAL_MS)

    def init_ui(self):
        central = QWidget()
        self.setCentralWidget(central)

        self.setStyleSheet("""
            QMainWindow {
                background-color: #0f0f1a;
            }
            QLabel {
                color: #00d4ff;
                font-family: 'Segoe UI', sans-serif;
            }
        """)

        top_layout = QVBoxLayout(central)
        top_layout.setContentsMargins(20, 20, 20, 20)

        title = QLabel(f"{self.state.make.upper()} {self.state.model.upper()}")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-size: 22px; font-weight: bold; color: white;")
        top_layout.addWidget(title)

        # Gauges
        gauges = QFrame()
        gauges.setStyleSheet("""
            QFrame {
                background-color: rgba(20, 30, 50, 150);
                border: 1px solid #00d4ff;
                border-radius: 15px;
            }
        """)
        gauge_layout = QHBoxLayout(gauges)

        self.speed_gauge = GaugeWidget("SPEED", "mph", 0, self.state.max_speed, 30)
        self.rpm_gauge = GaugeWidget("RPM", "rpm", 0, config.MAX_RPM, 1000, color="#ff5555")
        self.fuel_gauge = GaugeWidget("FUEL", "%", 0, config.FULL_TANK, 25, color="#00ffaa")
        self.temp_gauge = GaugeWidget("TEMP", "°", config.IDLE_TEMPERATURE, config.MAX_TEMPERATURE, 5,
                                      color="#ffaa00")
        for gauge in (self.speed_gauge, self.rpm_gauge, self.fuel_gauge, self.temp_gauge):
            gauge_layout.addWidget(gauge)
        top_layout.addWidget(gauges, 1)

        # Status line
        self.status_label = QLabel("Ready.")
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.status_label.setStyleSheet("font-size: 16px; color: #ddd; font-family: Consolas; padding: 10px;")
        top_layout.addWidget(self.status_label)

        # Controls
        button_layout = QHBoxLayout()
        self.accelerate_btn = QPushButton("ACCELERATE")
        self.accelerate_btn.setStyleSheet(self.get_btn_style("#00aa66", "#00ffaa"))
        self.accelerate_btn.clicked.connect(self.controls.accelerate_input)
        self.brake_btn = QPushButton("BRAKE")
        self.brake_btn.setStyleSheet(self.get_btn_style("#aa2222", "#ff5555"))
        self.brake_btn.clicked.connect(self.controls.brake_input)
        button_layout.addWidget(self.brake_btn)
        button_layout.addWidget(self.accelerate_btn)
        top_layout.addLayout(button_layout)

        self.render_reading(self.smoother.displayed_speed, self.state.rpm, self.state.fuel,
                            self.state.temperature)

    def get_btn_style(self, start, stop):
        return f"""
            QPushButton {{
                background-color: qlineargradient(x1:0, y1:0, x2:1, y2:0, stop:0 {start}, stop:1 {stop});
                color: white;
                font-weight: bold;
                font-size: 16px;
                padding: 15px;
                border: none;
                border-radius: 25px;
            }}
            QPushButton:pressed {{
                background-color: {start};
            }}
        """

    def update_status(self, text):
        self.status_label.setText(text)
        # rpm, fuel and temperature can change without the speed moving
        reading = self.state.snapshot()
        self.render_reading(self.smoother.displayed_speed, reading.rpm, reading.fuel, reading.temperature)

    def render_reading(self, displayed_speed, rpm, fuel, temperature):
        self.speed_gauge.set_value(displayed_speed)
        self.rpm_gauge.set_value(rpm)
        self.fuel_gauge.set_value(fuel)
        self.temp_gauge.set_value(temperature)

    def closeEvent(self, event):
        self.timer.stop()
        super().closeEvent(event)
