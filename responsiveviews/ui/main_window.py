from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QBoxLayout,
    QHBoxLayout,
    QLabel,
    QLayout,
    QMainWindow,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from responsiveviews.core.config import AppConfig
from responsiveviews.core.layout import (
    CLICKER,
    HEADING,
    SCOREBOARD,
    DeviceContext,
    LayoutVariant,
    VariantLayout,
    classify,
    variant_layout,
)
from responsiveviews.ui.colors import (
    CLICKER_BACKGROUNDS,
    HEADING_BACKGROUNDS,
    VARIANT_BACKGROUNDS,
    text_color_for,
)
from responsiveviews.ui.models import SessionStore
from responsiveviews.ui.panels import ClickerPanel, Scoreboard

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Single screen that rearranges its panels to fit the window.

    Every resize derives a :class:`DeviceContext` from the central area and
    re-runs the classifier. When the variant changes, the screen is rebuilt
    from its :class:`VariantLayout`; the counter and score history live in
    the :class:`SessionStore` and survive the rebuild.
    """

    def __init__(
        self,
        config: AppConfig,
        store: Optional[SessionStore] = None,
        is_round: bool = False,
    ) -> None:
        super().__init__()
        self._config = config
        self._store = store if store is not None else SessionStore(parent=self)
        self._is_round = is_round
        self._variant: Optional[LayoutVariant] = None

        self._screen: Optional[QWidget] = None
        self._clicker: Optional[ClickerPanel] = None
        self._scoreboard: Optional[Scoreboard] = None

        self.setWindowTitle(config.title)

        # The window size picks the variant, so the panels' size hints must
        # not put a floor under it.
        container = QWidget()
        container.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Ignored)
        self._container_layout = QVBoxLayout(container)
        self._container_layout.setContentsMargins(0, 0, 0, 0)
        self._container_layout.setSizeConstraint(QLayout.SizeConstraint.SetNoConstraint)
        self.setCentralWidget(container)

        self._layout_timer = QTimer(self)
        self._layout_timer.setSingleShot(True)
        self._layout_timer.setInterval(10)
        self._layout_timer.timeout.connect(self.apply_layout)

        self._store.count_changed.connect(self._on_count_changed)
        self._store.rounds_changed.connect(self._on_rounds_changed)

        self.apply_layout()

    @property
    def store(self) -> SessionStore:
        return self._store

    @property
    def variant(self) -> Optional[LayoutVariant]:
        return self._variant

    @property
    def clicker(self) -> Optional[ClickerPanel]:
        return self._clicker

    @property
    def scoreboard(self) -> Optional[Scoreboard]:
        return self._scoreboard

    def device_context(self) -> DeviceContext:
        """Describe the area currently available to the screen."""
        area = self.centralWidget().size()
        return DeviceContext.from_size(
            area.width(),
            area.height(),
            is_round=self._is_round,
            threshold=self._config.wide_threshold,
        )

    def resizeEvent(self, event) -> None:
        """Re-evaluate the layout variant after the window is resized."""
        super().resizeEvent(event)
        self._layout_timer.start()

    def apply_layout(self) -> LayoutVariant:
        """Classify the current size and rebuild the screen if the variant changed."""
        context = self.device_context()
        variant = classify(context, round_aware=self._config.round_aware)
        if variant is not self._variant:
            logger.info(
                "Layout %s -> %s (%s, %s, round=%s)",
                self._variant.value if self._variant else "none",
                variant.value,
                context.width_class.value,
                context.orientation.value,
                context.is_round,
            )
            self._show_variant(variant)
        return variant

    def _show_variant(self, variant: LayoutVariant) -> None:
        if self._screen is not None:
            self._container_layout.removeWidget(self._screen)
            self._screen.deleteLater()
        self._clicker = None
        self._scoreboard = None
        self._variant = variant
        self._screen = self._build_screen(variant_layout(variant))
        self._container_layout.addWidget(self._screen)

    def _build_screen(self, arrangement: VariantLayout) -> QWidget:
        """Create the widgets for *arrangement* and wire them to the session store."""
        variant = arrangement.variant
        background = VARIANT_BACKGROUNDS[variant]

        screen = QWidget()
        screen.setObjectName("variantScreen")
        screen.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        screen.setStyleSheet(
            f"""
            QWidget#variantScreen {{
                background: {background};
            }}
            QLabel {{
                color: {text_color_for(background)};
            }}
            """
        )

        layout: QBoxLayout
        if arrangement.direction == "row":
            layout = QHBoxLayout(screen)
        else:
            layout = QVBoxLayout(screen)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)
        if arrangement.direction == "column":
            layout.addStretch(1)

        for slot in arrangement.panels:
            if slot.name == HEADING:
                widget = self._build_heading(arrangement, HEADING_BACKGROUNDS.get(variant))
            elif slot.name == CLICKER:
                widget = self._build_clicker(CLICKER_BACKGROUNDS.get(variant))
            elif slot.name == SCOREBOARD:
                widget = self._build_scoreboard()
            else:
                raise ValueError(f"Unknown panel: {slot.name}")
            if arrangement.direction == "column":
                layout.addWidget(widget, slot.stretch, Qt.AlignHCenter)
            else:
                layout.addWidget(widget, slot.stretch)

        if arrangement.direction == "column":
            layout.addStretch(1)
        return screen

    def _build_heading(self, arrangement: VariantLayout, background: Optional[str]) -> QWidget:
        label = QLabel(arrangement.heading)
        label.setObjectName("variantHeading")
        label.setWordWrap(True)
        style = "QLabel#variantHeading { font-size: 28px; font-weight: 700;"
        if background:
            # Side column in row layouts
            label.setAlignment(Qt.AlignLeft | Qt.AlignTop)
            style += f" background: {background}; color: {text_color_for(background)}; padding: 16px;"
        else:
            label.setAlignment(Qt.AlignCenter)
        label.setStyleSheet(style + " }")
        return label

    def _build_clicker(self, background: Optional[str]) -> QWidget:
        clicker = ClickerPanel(self._store.count)
        clicker.action_panel.action_triggered.connect(self._store.handle_action)
        if background:
            clicker.setObjectName("clickerPanel")
            clicker.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
            clicker.setStyleSheet(
                f"QWidget#clickerPanel {{ background: {background}; }}"
                f" QLabel {{ color: {text_color_for(background)}; }}"
            )
        self._clicker = clicker
        return clicker

    def _build_scoreboard(self) -> QWidget:
        scoreboard = Scoreboard(self._store.rounds())
        self._scoreboard = scoreboard
        return scoreboard

    def _on_count_changed(self, count: int) -> None:
        if self._clicker is not None:
            self._clicker.score_panel.set_count(count)

    def _on_rounds_changed(self, rounds: list) -> None:
        if self._scoreboard is not None:
            self._scoreboard.set_rounds(rounds)
