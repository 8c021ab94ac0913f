import re
import unicodedata
from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    value: str
    is_to_guess: bool = False  # only word tokens are guessable


@dataclass(frozen=True)
class Word:
    word: str  # canonical (lowercased) form
    start_index: int
    end_index: int  # inclusive


# Combining diacritical marks; they belong to the letter they follow.
_MARKS = "\u0300-\u036f\u1ab0-\u1aff\u1dc0-\u1dff\u20d0-\u20ff\ufe20-\ufe2f"

# A letter run (with its combining marks) or a digit run, never both.
_WORD = rf"[^\W\d_](?:[^\W\d_]|[{_MARKS}])*|\d+"
_WORD_RE = re.compile(_WORD)
_WORD_CHAR_RE = re.compile(rf"[^\W_]|[{_MARKS}]")

# Every character falls in exactly one of: word run, whitespace run, other run.
_TOKEN_RE = re.compile(rf"({_WORD})|(\s+)|((?:[^\w\s]|_)+)")


def normalize_word(text: str) -> str:
    """Canonical form used for every word comparison.

    Lowercases the NFC-composed text, then keeps its first letter or digit
    run, so surrounding punctuation and whitespace are dropped. Returns ""
    when the text holds no letter or digit. Normalizing twice gives the
    same result as normalizing once.
    """
    folded = unicodedata.normalize("NFC", unicodedata.normalize("NFC", text).lower())
    m = _WORD_RE.search(folded)
    return m.group() if m else ""


def is_word_char(ch: str) -> bool:
    """Letters, digits and the combining marks of a word are masked."""
    return _WORD_CHAR_RE.fullmatch(ch) is not None


def tokenize(text: str | None) -> list[Token]:
    """Split *text* into word, whitespace and punctuation tokens.

    Joining the token values gives back *text* unchanged. Apostrophes and
    hyphens are punctuation, so "it's" yields ``it``, ``'`` and ``s``.
    """
    if not text:
        return []
    return [
        Token(value=m.group(), is_to_guess=m.group(1) is not None)
        for m in _TOKEN_RE.finditer(text)
    ]


def word_tokens(tokens: list[Token]) -> list[Token]:
    return [tok for tok in tokens if tok.is_to_guess]


def extract_words(text: str | None) -> list[Word]:
    """Return the guessable words of *text* with their code-point spans."""
    words: list[Word] = []
    pos = 0
    for tok in tokenize(text):
        end = pos + len(tok.value)
        if tok.is_to_guess:
            words.append(
                Word(word=normalize_word(tok.value), start_index=pos, end_index=end - 1)
            )
        pos = end
    return words
