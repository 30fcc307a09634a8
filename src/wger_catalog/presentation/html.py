"""Render wger HTML description fragments as plain text."""

from bs4 import BeautifulSoup


def html_to_text(fragment: str | None) -> str:
    """Strip tags and collapse whitespace.

    Returns an empty string for None or empty input.
    """
    if not fragment:
        return ""
    soup = BeautifulSoup(fragment, "html.parser")
    return " ".join(soup.get_text(" ").split())
