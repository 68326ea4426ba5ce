"""Apply axe accessibility reports to component-framework HTML."""

__version__ = "1.0.0"
