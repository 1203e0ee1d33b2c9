"""Conversion of fetched payloads to markdown text."""

import logging
import re

from bs4 import BeautifulSoup
from markdownify import ATX, MarkdownConverter

# Tags that mark a payload as HTML rather than markdown/plain text.
# Markdown autolinks like <https://example.com> must not match.
_HTML_MARKER = re.compile(
	r"<(?:!doctype\s+html|html|head|body|meta|title|div|span|p|a|h[1-6]|ul|ol|li|pre|code|table|br|article|main|section)\b",
	re.IGNORECASE,
)
_TRAILING_WHITESPACE = re.compile(r"[ \t]+$", re.MULTILINE)
_EXCESS_BLANK_LINES = re.compile(r"\n{3,}")
_DROPPED_TAGS = ["script", "style", "noscript", "template"]

logger = logging.getLogger(__name__)

_converter = MarkdownConverter(
	heading_style=ATX,
	bullets="-",
	escape_underscores=False,
	escape_asterisks=False,
)


def looks_like_html(raw: str) -> bool:
	return _HTML_MARKER.search(raw) is not None


def to_text(raw: str) -> str:
	"""Convert an HTML document to markdown.

	Non-HTML input (llms.txt files are already markdown) is returned as is.
	Malformed markup is converted best-effort; this never raises on input.
	"""
	if not looks_like_html(raw):
		return raw

	soup = BeautifulSoup(raw, "html.parser")
	for tag in soup.find_all(_DROPPED_TAGS):
		tag.decompose()

	try:
		markdown = _converter.convert_soup(soup)
	except RecursionError:
		# Nesting too deep for the converter; keep the text, lose the markup
		logger.warning("HTML nested too deeply to convert, falling back to plain text")
		markdown = soup.get_text("\n")

	markdown = _TRAILING_WHITESPACE.sub("", markdown)
	return _EXCESS_BLANK_LINES.sub("\n\n", markdown).strip()
