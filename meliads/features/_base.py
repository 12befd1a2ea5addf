"""
Base Feature Template

All screens inherit from this class to maintain consistency.
This provides:
- Access to the current AppState
- Standard page header
- Error boundary around rendering
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import streamlit as st

from meliads.core.state import AppState

logger = logging.getLogger(__name__)


class BaseFeature(ABC):
    """Base class for all dashboard screens."""

    def __init__(self, state: AppState):
        self.state = state

    @abstractmethod
    def render_ui(self):
        """Render the screen."""
        pass

    def render_header(self, title: str, subtitle: Optional[str] = None):
        """Render the standard page title with an optional caption."""
        st.title(title)
        if subtitle:
            st.caption(subtitle)

    def run(self):
        """Render the screen, reporting unexpected errors in the page."""
        try:
            self.render_ui()
        except Exception as e:
            logger.exception("Error rendering %s", self.__class__.__name__)
            st.error(f"❌ Error: {str(e)}")
            st.exception(e)
