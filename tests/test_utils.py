"""Tests for title normalization and small text helpers."""

from __future__ import annotations

import pytest

from msacademic_sync.utils import clean_title, first_page, quoted_value, transliterate_greek


class TestCleanTitle:
    """Tests for clean_title()."""

    def test_lowercases_and_strips_punctuation(self):
        assert clean_title("Deep Learning: A Survey!") == "deep learning a survey"

    def test_collapses_whitespace(self):
        assert clean_title("  Deep \t Learning\n for   X ") == "deep learning for x"

    @pytest.mark.parametrize(
        "title,expected",
        [
            ("H_{2}O splitting", "h2o splitting"),
            ("$_{2}$ dimers", "2 dimers"),
            ("$^{13}$C NMR spectra", "13c nmr spectra"),
            ("x^{2} growth", "x2 growth"),
        ],
    )
    def test_unwraps_latex_sub_and_superscripts(self, title, expected):
        assert clean_title(title) == expected

    def test_removes_latex_macros(self):
        assert clean_title(r"A \rightarrow B with \overline{x}") == "a b with x"

    def test_special_characters_become_blanks(self):
        assert clean_title("Graph–based methods for x√2") == "graph based methods for x 2"
        assert clean_title("f′(x) − g") == "f x g"

    def test_carriage_returns_removed(self):
        assert clean_title("Deep\r Learning") == "deep learning"

    @pytest.mark.parametrize(
        "title",
        [
            "H_{2}O splitting",
            "$^{13}$C NMR: a (short) review",
            "Graph–based  methods",
            "O'Neill's [revised] edition",
        ],
    )
    def test_idempotent(self, title):
        once = clean_title(title)
        assert clean_title(once) == once

    def test_none_and_empty(self):
        assert clean_title(None) == ""
        assert clean_title("") == ""


class TestTransliterateGreek:
    """Tests for transliterate_greek()."""

    def test_replaces_letter_names(self):
        assert transliterate_greek("alpha decay and beta decay") == "α decay and β decay"

    def test_case_insensitive(self):
        assert transliterate_greek("Gamma RAYS") == "γ RAYS"

    def test_longer_names_win_over_contained_ones(self):
        # "epsilon" contains "psi", "beta" contains "eta"
        assert transliterate_greek("epsilon") == "ε"
        assert transliterate_greek("beta") == "β"

    def test_substitutes_inside_words(self):
        """Names are replaced even mid-word; such titles simply fail to match."""
        assert transliterate_greek("pi-electron") == "π-electron"
        assert transliterate_greek("spin") == "sπn"

    def test_no_greek_names_unchanged(self):
        assert transliterate_greek("deep learning") == "deep learning"


class TestHelpers:
    """Tests for quoted_value() and first_page()."""

    def test_quoted_value(self):
        assert quoted_value("deep learning") == "'deep learning'"

    @pytest.mark.parametrize(
        "pagerange,expected",
        [
            ("101-117", "101"),
            ("e1234", "e1234"),
            ("", None),
            (None, None),
        ],
    )
    def test_first_page(self, pagerange, expected):
        assert first_page(pagerange) == expected
