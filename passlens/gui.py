# passlens/gui.py
# PassLens GUI: masked input with live analysis

import sys

from PySide6.QtWidgets import (
    QApplication, QWidget, QVBoxLayout, QLabel, QLineEdit, QCheckBox,
    QTextEdit, QGroupBox, QGridLayout, QMessageBox
)

from passlens.config import build_analyzer, load_config
from passlens.evaluator import PasswordAnalyzer
from passlens.report import ROW_LABELS, Report, report_rows
from passlens.suggestions import GENERAL_TIPS

# ---------------- UI building helpers ----------------

def make_input_group():
    box = QGroupBox("Password")
    layout = QVBoxLayout()
    box.setLayout(layout)

    lbl_input = QLabel("Type or paste a password (live analysis):")
    input_pw = QLineEdit()
    input_pw.setEchoMode(QLineEdit.Password)
    chk_show = QCheckBox("Show characters")

    layout.addWidget(lbl_input)
    layout.addWidget(input_pw)
    layout.addWidget(chk_show)

    return {
        "widget": box,
        "input_pw": input_pw,
        "chk_show": chk_show,
    }


def make_report_group():
    box = QGroupBox("Analysis")
    layout = QGridLayout()
    box.setLayout(layout)

    values = {}
    for row, label in enumerate(ROW_LABELS):
        value = QLabel("N/A")
        layout.addWidget(QLabel(label + ":"), row, 0)
        layout.addWidget(value, row, 1)
        values[label] = value

    txt_suggestions = QTextEdit()
    txt_suggestions.setReadOnly(True)
    txt_suggestions.setMaximumHeight(180)
    layout.addWidget(QLabel("Suggestions:"), len(values), 0, 1, 2)
    layout.addWidget(txt_suggestions, len(values) + 1, 0, 1, 2)
    layout.addWidget(QLabel("Tip: " + GENERAL_TIPS), len(values) + 2, 0, 1, 2)

    return {
        "widget": box,
        "values": values,
        "txt_suggestions": txt_suggestions,
    }


class PassLensGUI(QWidget):
    def __init__(self, analyzer: PasswordAnalyzer):
        super().__init__()
        self.setWindowTitle("PassLens: Password Analyzer")
        self.setMinimumSize(640, 420)
        self.analyzer = analyzer

        main = QVBoxLayout()
        self.setLayout(main)

        self.inp = make_input_group()
        self.rep = make_report_group()
        main.addWidget(self.inp["widget"])
        main.addWidget(self.rep["widget"], 1)

        self.inp["input_pw"].textChanged.connect(self.on_password_changed)
        self.inp["chk_show"].toggled.connect(self.on_show_toggled)

    def on_show_toggled(self, checked: bool):
        mode = QLineEdit.Normal if checked else QLineEdit.Password
        self.inp["input_pw"].setEchoMode(mode)

    def on_password_changed(self, text: str):
        if text == "":
            for value in self.rep["values"].values():
                value.setText("N/A")
            self.rep["txt_suggestions"].setPlainText("")
            return
        self.show_report(self.analyzer.analyze(text))

    def show_report(self, report: Report):
        for label, value in report_rows(report):
            self.rep["values"][label].setText(value)
        self.rep["txt_suggestions"].setPlainText("\n".join("• " + s for s in report.suggestions))


def main():
    app = QApplication(sys.argv)
    try:
        analyzer = build_analyzer(load_config())
    except (ValueError, OSError) as e:
        QMessageBox.warning(None, "Settings", f"Invalid settings, using defaults: {e}")
        analyzer = PasswordAnalyzer()
    gui = PassLensGUI(analyzer)
    gui.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
