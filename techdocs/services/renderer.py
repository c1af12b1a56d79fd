"""Markdown → HTML rendering.

A fresh ``markdown.Markdown`` instance per call keeps rendering free of
state carried between documents.
"""

import markdown

MD_EXTENSIONS = ["fenced_code", "tables"]


def render(markdown_text):
    """Return the HTML fragment for *markdown_text*."""
    return markdown.markdown(markdown_text, extensions=MD_EXTENSIONS)
