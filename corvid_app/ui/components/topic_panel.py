"""Component listing the vocabulary topics."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QPushButton, QScrollArea, QVBoxLayout, QWidget

from corvid_app.constants.ui_constants import BACK_BUTTON, TOPIC_UNAVAILABLE_TOOLTIP
from corvid_app.core.services.vocabulary_repository import Topic
from corvid_app.core.session_manager import SessionManager


class TopicPanel(QWidget):
    """One button per topic; topics whose word list failed to load are disabled."""

    def __init__(
        self,
        session_manager: SessionManager,
        on_topic_selected: callable,
        on_back: callable,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.session_manager = session_manager
        self.on_topic_selected = on_topic_selected
        self.on_back = on_back
        self.topic_buttons: dict[Topic, QPushButton] = {}

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.back_button = QPushButton(BACK_BUTTON, self)
        self.back_button.clicked.connect(lambda: self.on_back())
        layout.addWidget(self.back_button)

        topic_container = QWidget(self)
        topic_layout = QVBoxLayout()
        topic_container.setLayout(topic_layout)

        available = set(self.session_manager.available_topics())
        for topic in Topic:
            button = QPushButton(topic.title, topic_container)
            button.clicked.connect(lambda _checked=False, t=topic: self.on_topic_selected(t))
            if topic not in available:
                button.setEnabled(False)
                button.setToolTip(TOPIC_UNAVAILABLE_TOOLTIP)
            topic_layout.addWidget(button)
            self.topic_buttons[topic] = button
        topic_layout.addStretch()

        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        scroll.setWidget(topic_container)
        layout.addWidget(scroll, stretch=1)
