"""Daily work report files: create today's report from a template, archive old ones."""

__version__ = "0.2.0"
