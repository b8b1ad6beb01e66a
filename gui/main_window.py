"""
The main window for the drawing command application.
"""
from PySide6.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
                               QPushButton, QFileDialog, QMessageBox, QTextEdit,
                               QSplitter, QLabel, QComboBox, QLineEdit, QScrollArea)
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont

from .editor import Editor
from .canvas_view import CanvasView
from command_processor import CommandProcessor
from config.canvas_config import ConfigManager
from core.grammar import help_text
from utils.errors import CommandError


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Drawing Commands")
        self.setGeometry(100, 100, 1600, 900)

        self.processor = CommandProcessor(ConfigManager.get_config("default"),
                                          on_refresh=self.refresh_canvas)

        self.setup_ui()
        self.connect_signals()
        self.update_state_display()

    def setup_ui(self):
        """Set up the user interface."""
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        # Top toolbar
        toolbar_layout = QHBoxLayout()

        self.load_button = QPushButton("Load Program")
        self.save_button = QPushButton("Save Program")
        self.run_program_button = QPushButton("Run Program")
        self.check_program_button = QPushButton("Check Program")

        self.canvas_selector = QComboBox()
        self.canvas_selector.addItems(ConfigManager.preset_names())

        self.status_label = QLabel("Ready")

        toolbar_layout.addWidget(self.load_button)
        toolbar_layout.addWidget(self.save_button)
        toolbar_layout.addWidget(self.run_program_button)
        toolbar_layout.addWidget(self.check_program_button)
        toolbar_layout.addStretch()
        toolbar_layout.addWidget(QLabel("Canvas:"))
        toolbar_layout.addWidget(self.canvas_selector)
        toolbar_layout.addWidget(self.status_label)

        main_layout.addLayout(toolbar_layout)

        main_splitter = QSplitter(Qt.Orientation.Vertical)
        main_layout.addWidget(main_splitter)

        # Top pane with editor and canvas
        workspace_splitter = QSplitter(Qt.Orientation.Horizontal)

        self.editor = Editor()
        workspace_splitter.addWidget(self.editor)

        self.canvas_view = CanvasView(self.processor.surface)
        scroll_area = QScrollArea()
        scroll_area.setWidget(self.canvas_view)
        scroll_area.setWidgetResizable(True)
        workspace_splitter.addWidget(scroll_area)

        # Bottom pane with command line, state and console
        bottom_pane = QWidget()
        bottom_layout = QVBoxLayout(bottom_pane)
        bottom_layout.setContentsMargins(0, 0, 0, 0)

        command_layout = QHBoxLayout()
        self.command_input = QLineEdit()
        self.command_input.setPlaceholderText("Enter a command, e.g. circle 50")
        self.command_input.setFont(QFont("Courier", 11))
        self.command_input.setToolTip(help_text())
        self.run_button = QPushButton("Run")
        self.check_button = QPushButton("Check Syntax")
        self.clear_button = QPushButton("Clear Canvas")
        self.exit_button = QPushButton("Exit")

        command_layout.addWidget(self.command_input)
        command_layout.addWidget(self.run_button)
        command_layout.addWidget(self.check_button)
        command_layout.addWidget(self.clear_button)
        command_layout.addWidget(self.exit_button)
        bottom_layout.addLayout(command_layout)

        self.state_label = QLabel()
        self.state_label.setFont(QFont("Courier", 9))
        self.state_label.setStyleSheet("QLabel { background-color: #f0f0f0; padding: 5px; }")
        bottom_layout.addWidget(self.state_label)

        console_splitter = QSplitter(Qt.Orientation.Horizontal)

        error_widget = QWidget()
        error_layout = QVBoxLayout(error_widget)
        error_layout.setContentsMargins(0, 0, 0, 0)
        error_layout.addWidget(QLabel("Errors:"))
        self.error_console = QTextEdit()
        self.error_console.setReadOnly(True)
        self.error_console.setMaximumHeight(150)
        error_layout.addWidget(self.error_console)
        console_splitter.addWidget(error_widget)

        console_widget = QWidget()
        console_layout = QVBoxLayout(console_widget)
        console_layout.setContentsMargins(0, 0, 0, 0)
        console_layout.addWidget(QLabel("Console Output:"))
        self.console = QTextEdit()
        self.console.setReadOnly(True)
        self.console.setMaximumHeight(150)
        console_layout.addWidget(self.console)
        console_splitter.addWidget(console_widget)

        bottom_layout.addWidget(console_splitter)

        main_splitter.addWidget(workspace_splitter)
        main_splitter.addWidget(bottom_pane)

        workspace_splitter.setSizes([400, 1100])
        console_splitter.setSizes([700, 700])
        main_splitter.setSizes([650, 250])

    def connect_signals(self):
        """Connect all signal handlers."""
        self.load_button.clicked.connect(self.load_program_file)
        self.save_button.clicked.connect(self.save_program_file)
        self.run_program_button.clicked.connect(self.run_program)
        self.check_program_button.clicked.connect(self.check_program)
        self.canvas_selector.currentTextChanged.connect(self.change_canvas_config)

        self.run_button.clicked.connect(self.run_command)
        self.command_input.returnPressed.connect(self.run_command)
        self.check_button.clicked.connect(self.check_command)
        self.clear_button.clicked.connect(self.clear_canvas)
        self.exit_button.clicked.connect(self.close)

    # Single commands

    def run_command(self):
        """Execute the command line and report failures in a dialog."""
        command = self.command_input.text()
        try:
            outcome = self.processor.execute_command(command)
        except CommandError as e:
            self.console.append(f"Error: {e.message}")
            QMessageBox.critical(self, "Error", e.message)
            return

        self.console.append(f"> {outcome.command}")
        if outcome.message:
            self.console.append(outcome.message)
        if outcome.command.verb == 'fill':
            QMessageBox.information(self, "Fill Mode", outcome.message)

        self.status_label.setText("Command executed")
        self.command_input.clear()

    def check_command(self):
        """Validate the command line without drawing."""
        command = self.command_input.text()
        try:
            self.processor.check_syntax(command)
        except CommandError as e:
            QMessageBox.critical(self, "Syntax Error", e.message)
            return

        QMessageBox.information(self, "Syntax Check", "Syntax is correct.")

    def clear_canvas(self):
        self.processor.execute_command("clear")
        self.console.append("> clear")

    # Programs

    def run_program(self):
        """Run every line of the editor as a command."""
        text = self.editor.toPlainText()
        if not text.strip():
            return

        success = self.processor.run_program(text)
        self.update_error_display()

        if success:
            self.status_label.setText("Program complete")
            self.console.append("Program executed successfully")
        else:
            self.status_label.setText("Program completed with errors")
            self.console.append("Program executed with errors")

    def check_program(self):
        text = self.editor.toPlainText()
        if not text.strip():
            return

        if self.processor.check_program(text):
            self.status_label.setText("Syntax is correct")
        else:
            self.status_label.setText("Syntax errors found")
        self.update_error_display()

    def update_error_display(self):
        """Update the error console and editor highlighting."""
        errors = self.processor.get_all_errors()

        if not errors:
            self.error_console.setText("No errors found.")
            self.editor.clear_error_highlights()
            return

        self.error_console.setText("\n".join(str(error) for error in errors))
        self.editor.highlight_error_lines([error.line_number for error in errors])

    def load_program_file(self):
        """Load a command program from a file."""
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open Program", "",
            "Command Files (*.txt *.cmd);;All Files (*)"
        )

        if file_path:
            with open(file_path, 'r') as f:
                content = f.read()
            self.editor.setPlainText(content)
            self.console.append(f"Loaded: {file_path}")
            self.check_program()

    def save_program_file(self):
        """Save the editor program, or the command history when it is empty."""
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Save Program", "",
            "Command Files (*.txt);;All Files (*)"
        )

        if file_path:
            text = self.editor.toPlainText() or self.processor.get_history_text()
            with open(file_path, 'w') as f:
                f.write(text)
            self.console.append(f"Saved: {file_path}")

    def change_canvas_config(self, preset):
        """Switch to a blank canvas of another size."""
        config = ConfigManager.get_config(preset)
        self.processor.resize(config)
        self.canvas_view.set_surface(self.processor.surface)
        self.console.append(f"Switched to {config.name} canvas ({config.width}x{config.height})")

    # Display

    def refresh_canvas(self):
        """Called by the interpreter after every executed command."""
        self.canvas_view.update()
        self.update_state_display()

    def update_state_display(self):
        state = self.processor.get_state_summary()
        x, y = state['position']
        self.canvas_view.set_pen_position(x, y)
        self.state_label.setText(
            f"Pen: {state['pen_color']}   Fill: {state['fill_mode']}   "
            f"Position: ({x}, {y})"
        )
