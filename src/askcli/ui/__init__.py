"""askcli terminal UI - Rich output and spinner."""

from askcli.ui.console import AssistantConsole
from askcli.ui.formatter import Outcome, clean_answer

__all__ = ["AssistantConsole", "Outcome", "clean_answer"]
