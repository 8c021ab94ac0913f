"""Lyrics page HTML parsing and text clean-up.

Turns a Genius-style lyrics page, already fetched by the song provider,
into the plain text the masker works on.
"""

import re

from bs4 import BeautifulSoup

# Annotations and markers that are not part of the sung text
_SECTION_HEADER_RE = re.compile(r"\[.+?\]")   # [Chorus], [Verse 2: Artist]
_ANNOTATION_RE = re.compile(r"\{.+?\}")
_REPEAT_RE = re.compile(r"\(\d+x\)")           # (2x)
_LINE_SPACE_RE = re.compile(r"[ \t]*\n[ \t]*")
_BLANK_LINES_RE = re.compile(r"\n{3,}")


def clean_lyrics(text: str) -> str:
    """Strip section headers, annotations and repeat markers from *text*."""
    text = _SECTION_HEADER_RE.sub("", text)
    text = _ANNOTATION_RE.sub("", text)
    text = _REPEAT_RE.sub("", text)
    text = _LINE_SPACE_RE.sub("\n", text)
    text = _BLANK_LINES_RE.sub("\n\n", text)
    return text.strip()


def _container_text(tag) -> str:
    for br in tag.find_all("br"):
        br.replace_with("\n")
    return tag.get_text()


def extract_lyrics(html: str) -> str | None:
    """Extract clean lyrics from a lyrics page, or None if there are none.

    Reads every ``[data-lyrics-container]`` block, falling back to the
    legacy ``div.lyrics`` layout.
    """
    soup = BeautifulSoup(html, "lxml")

    containers = soup.find_all(attrs={"data-lyrics-container": True})
    if containers:
        raw = "\n\n".join(_container_text(c).strip() for c in containers)
    else:
        legacy = soup.find("div", class_="lyrics")
        if legacy is None:
            return None
        raw = _container_text(legacy)

    lyrics = clean_lyrics(raw)
    return lyrics or None
