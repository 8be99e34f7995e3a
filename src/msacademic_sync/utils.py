"""Shared text utilities for the MS Academic synchronization tools.

Title cleaning and Greek transliteration are used both to build query
expressions and to compare local titles with the titles the Knowledge API
returns, so both sides of a match go through the same normalization.
"""

from __future__ import annotations

import re

# ------------- Constants -------------

MSACADEMIC_API = "https://westus.api.cognitive.microsoft.com/academic/v1.0/evaluate"

# Marks a record that must not be looked up by its MS Academic id
CLUSTER_NOT_APPLICABLE = "-"


# ------------- Title Normalization -------------

# LaTeX sub/superscript wrappers, unwrapped to their contents.
# Order matters: the math-mode forms must go before the bare forms.
_LATEX_WRAPPERS = (
    (re.compile(r"\$_\{(.*?)\}\$"), r"\1"),
    (re.compile(r"_\{(.*?)\}"), r"\1"),
    (re.compile(r"\$\^\{(.*?)\}\$"), r"\1"),
    (re.compile(r"\^\{(.*?)\}"), r"\1"),
)
_LATEX_REMOVALS = ("$^", "$_", "\\overline", "\\rightarrow")

# en dash, primes, minus sign, square root
_SPECIAL_CHARS_RE = re.compile("[\u2013\u2032\u2033\u2034\u2212\u221a]")
_PUNCTUATION_RE = re.compile(r"""[+\-_<=>&%()\[\]{}^.,:;?!'"|\\$/*]""")
_WHITESPACE_RE = re.compile(r"\s+")


def clean_title(title: str | None) -> str:
    """Normalize a title for querying and exact comparison.

    Lower-cases, unwraps LaTeX sub/superscripts, drops a few LaTeX macros,
    replaces typographic dashes, primes and punctuation with blanks, and
    collapses whitespace.
    """
    t = (title or "").lower()
    for pattern, repl in _LATEX_WRAPPERS:
        t = pattern.sub(repl, t)
    for token in _LATEX_REMOVALS:
        t = t.replace(token, "")
    t = _SPECIAL_CHARS_RE.sub(" ", t)
    t = _PUNCTUATION_RE.sub(" ", t)
    t = t.replace("\r", "")
    return _WHITESPACE_RE.sub(" ", t).strip()


GREEK_LETTERS: dict[str, str] = {
    "alpha": "α",
    "beta": "β",
    "gamma": "γ",
    "delta": "δ",
    "epsilon": "ε",
    "zeta": "ζ",
    "eta": "η",
    "theta": "θ",
    "iota": "ι",
    "kappa": "κ",
    "lambda": "λ",
    "mu": "μ",
    "nu": "ν",
    "xi": "ξ",
    "omicron": "ο",
    "pi": "π",
    "rho": "ρ",
    "sigma": "σ",
    "tau": "τ",
    "upsilon": "υ",
    "phi": "φ",
    "chi": "χ",
    "psi": "ψ",
    "omega": "ω",
}

# Longest names first so "epsilon" is not eaten by "psi" or "beta" by "eta"
_GREEK_PATTERNS = [
    (re.compile(re.escape(name), re.IGNORECASE), glyph)
    for name, glyph in sorted(GREEK_LETTERS.items(), key=lambda kv: len(kv[0]), reverse=True)
]


def transliterate_greek(title: str) -> str:
    """Replace spelled-out Greek letter names with their glyphs.

    Substitution is plain substring replacement with no word-boundary check,
    so "pi-electron" becomes "π-electron" and "spin" becomes "sπn". A title
    mangled this way simply fails to match, which is the intended outcome
    for the Greek query.
    """
    for pattern, glyph in _GREEK_PATTERNS:
        title = pattern.sub(glyph, title)
    return title


def quoted_value(value: str) -> str:
    """Enclose a value in single quotes for a query expression."""
    return f"'{value}'"


def first_page(pagerange: str | None) -> str | None:
    """Return the first page of a page range such as '101-117'."""
    if not pagerange:
        return None
    if "-" in pagerange:
        return pagerange.split("-", 1)[0]
    return pagerange
