"""
Program editor widget with drawing command syntax highlighting and dark mode.
"""
from PySide6.QtWidgets import QPlainTextEdit, QTextEdit
from PySide6.QtGui import (QColor, QTextFormat, QFont, QSyntaxHighlighter,
                           QTextCharFormat, QPalette)

from core.drawing_state import PenColor
from core.grammar import GRAMMAR, PEN_COLORS, FILL_SWITCHES, INTEGER_PATTERN, help_text


class CommandHighlighter(QSyntaxHighlighter):
    """Drawing command syntax highlighter with dark mode colors."""

    MOTION_VERBS = {'moveto', 'drawto'}
    SHAPE_VERBS = {'rectangle', 'circle', 'triangle'}

    def __init__(self, document):
        super().__init__(document)

        font = QFont('Consolas', 11)
        font.setFixedPitch(True)

        self.motion_format = QTextCharFormat()
        self.motion_format.setForeground(QColor('#51cf66'))  # Green for pen movement
        self.motion_format.setFont(font)
        self.motion_format.setFontWeight(QFont.Weight.Bold)

        self.shape_format = QTextCharFormat()
        self.shape_format.setForeground(QColor('#ffd43b'))  # Yellow for shapes
        self.shape_format.setFont(font)
        self.shape_format.setFontWeight(QFont.Weight.Bold)

        self.setting_format = QTextCharFormat()
        self.setting_format.setForeground(QColor('#74c0fc'))  # Light blue for pen/fill/clear/reset
        self.setting_format.setFont(font)

        self.number_format = QTextCharFormat()
        self.number_format.setForeground(QColor('#ff8cc8'))
        self.number_format.setFont(font)

        self.switch_format = QTextCharFormat()
        self.switch_format.setForeground(QColor('#20c997'))
        self.switch_format.setFont(font)

        # Color names are shown in their own color
        self.color_formats = {}
        for name, pen_color in PEN_COLORS.items():
            fmt = QTextCharFormat()
            fmt.setForeground(QColor(self._visible(pen_color)))
            fmt.setFont(font)
            self.color_formats[name] = fmt

        self.unknown_format = QTextCharFormat()
        self.unknown_format.setForeground(QColor('#ff6b6b'))
        self.unknown_format.setUnderlineStyle(QTextCharFormat.UnderlineStyle.WaveUnderline)
        self.unknown_format.setFont(font)

    @staticmethod
    def _visible(pen_color: PenColor) -> str:
        # Pure colors are too dark on the editor background
        return {
            PenColor.RED: '#ff6b6b',
            PenColor.GREEN: '#69db7c',
            PenColor.BLUE: '#4dabf7',
        }.get(pen_color, '#f8f8f2')

    def highlightBlock(self, text):
        """Apply syntax highlighting to one line."""
        pos = 0
        first = True

        for word in text.split(' '):
            if word:
                self.setFormat(pos, len(word), self._format_for(word, first))
                first = False
            pos += len(word) + 1

    def _format_for(self, word: str, is_verb: bool) -> QTextCharFormat:
        lowered = word.lower()
        if is_verb:
            if lowered in self.MOTION_VERBS:
                return self.motion_format
            if lowered in self.SHAPE_VERBS:
                return self.shape_format
            if lowered in GRAMMAR:
                return self.setting_format
            return self.unknown_format

        if INTEGER_PATTERN.fullmatch(word):
            return self.number_format
        if lowered in self.color_formats:
            return self.color_formats[lowered]
        if lowered in FILL_SWITCHES:
            return self.switch_format
        return self.unknown_format


class Editor(QPlainTextEdit):
    """Program editor with command highlighting and error marks."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.error_lines = set()

        self.setup_dark_mode()
        self.setup_editor()
        self.highlighter = CommandHighlighter(self.document())

        self.cursorPositionChanged.connect(self.update_extra_selections)

    def setup_dark_mode(self):
        palette = self.palette()
        palette.setColor(QPalette.ColorRole.Base, QColor('#2b2b2b'))
        palette.setColor(QPalette.ColorRole.Text, QColor('#f8f8f2'))
        palette.setColor(QPalette.ColorRole.Highlight, QColor('#44475a'))
        palette.setColor(QPalette.ColorRole.HighlightedText, QColor('#f8f8f2'))
        self.setPalette(palette)

    def setup_editor(self):
        self.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)

        font = QFont("Consolas", 11)
        font.setStyleHint(QFont.StyleHint.Monospace)
        font.setFixedPitch(True)
        self.setFont(font)

        self.setPlaceholderText("One command per line, e.g.\nmoveto 100 100\ncircle 40")
        self.setToolTip(help_text())

    def highlight_error_lines(self, lines):
        """Mark lines with errors and scroll to the first one."""
        self.error_lines = set(lines) if lines else set()
        self.update_extra_selections()
        if self.error_lines:
            self.goto_line(min(self.error_lines))

    def clear_error_highlights(self):
        self.error_lines.clear()
        self.update_extra_selections()

    def update_extra_selections(self):
        """Current line plus one dark red band per error line."""
        selections = [self._line_selection(self.textCursor().position(), '#44475a')]

        for line_num in sorted(self.error_lines):
            block = self.document().findBlockByNumber(line_num - 1)
            if line_num > 0 and block.isValid():
                selections.append(self._line_selection(block.position(), '#660000'))

        self.setExtraSelections(selections)

    def _line_selection(self, position, color):
        selection = QTextEdit.ExtraSelection()
        selection.format.setBackground(QColor(color))
        selection.format.setProperty(QTextFormat.Property.FullWidthSelection, True)
        selection.cursor = self.textCursor()
        selection.cursor.setPosition(position)
        return selection

    def goto_line(self, line_number):
        """Move the cursor to the start of a 1-based line."""
        block = self.document().findBlockByNumber(line_number - 1)
        if line_number > 0 and block.isValid():
            cursor = self.textCursor()
            cursor.setPosition(block.position())
            self.setTextCursor(cursor)
            self.centerCursor()
