"""
HTML reduction: strip non-content elements and convert what is left to markdown.
"""

import re
from typing import Optional

from bs4 import BeautifulSoup, Comment, Doctype
from markdownify import markdownify as md

# Removed before conversion so none of their text can reach the output
JUNK_SELECTORS = (
    "script",
    "style",
    "nav",
    "footer",
    "iframe",
    "noscript",
    "svg",
    "[role='navigation']",
    "[role='banner']",
    "[role='contentinfo']",
    ".nav",
    ".navbar",
    ".footer",
    ".sidebar",
    ".ads",
    ".advertisement",
)

# Three or more line breaks, allowing stray whitespace on the blank lines
_EXCESS_BLANK_LINES = re.compile(r"\n(?:[ \t]*\n){2,}")


def strip_junk(soup: BeautifulSoup) -> None:
    for element in soup.select(", ".join(JUNK_SELECTORS)):
        # Nested matches are already gone once their ancestor is decomposed
        if not element.decomposed:
            element.decompose()


def extract_title(soup: BeautifulSoup) -> Optional[str]:
    title = soup.find("title")
    if title is None:
        return None
    text = title.get_text().strip()
    return text or None


def collapse_blank_lines(text: str) -> str:
    return _EXCESS_BLANK_LINES.sub("\n\n", text)


def html_to_markdown(html: str) -> str:
    """
    Convert an HTML document to markdown.

    Steps:
    - Remove every element matched by JUNK_SELECTORS
    - Read the <title>
    - Drop <head> and convert everything else, including content html.parser
      left outside <body>, with ATX headings and fenced code blocks
    - Collapse runs of blank lines and prepend the title as "# Title"
    """
    soup = BeautifulSoup(html, "html.parser")
    strip_junk(soup)

    title = extract_title(soup)

    # Convert the whole document: html.parser leaves stray content outside <body>
    for element in soup.find_all(["head", "title"]):
        if not element.decomposed:
            element.decompose()
    for node in soup.find_all(string=lambda s: isinstance(s, (Comment, Doctype))):
        node.extract()

    markdown = md(str(soup), heading_style="ATX", code_language="")
    markdown = collapse_blank_lines(markdown).strip()

    if title:
        markdown = f"# {title}\n\n{markdown}"
    return markdown
