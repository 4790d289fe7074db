"""Draft body renderers."""

from issue_to_project.renderers.markdown import MarkdownRenderer

__all__ = ["MarkdownRenderer"]
