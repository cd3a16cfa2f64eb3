"""ForwardTask: move checklist tasks from any note into dated daily notes."""

__version__ = "0.1.0"
