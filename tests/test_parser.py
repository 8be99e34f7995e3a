"""Tests for response decoding and the extended metadata repair."""

from __future__ import annotations

import pytest
from conftest import error_body, response_body

from msacademic_sync.parser import (
    CandidateEntity,
    ExtendedMetadataError,
    ResponseParseError,
    parse_error,
    parse_extended_metadata,
    parse_response,
    repair_extended_metadata,
)


class TestExtendedMetadataRepair:
    """Fixtures of corrupted extended metadata as the service sends it."""

    def test_clean_document_unchanged(self):
        e = '{"DN":"Deep Learning for X","DOI":"10.1000/dl.1","VFN":"Journal of X","V":"12","I":"3","FP":"101"}'
        assert repair_extended_metadata(e) == e
        assert parse_extended_metadata(e)["VFN"] == "Journal of X"

    def test_escaped_quotes_in_values_become_apostrophes(self):
        e = r'{"DN":"A \"quoted\" title","DOI":"10.1000/x"}'
        assert parse_extended_metadata(e) == {"DN": "A 'quoted' title", "DOI": "10.1000/x"}

    def test_escaped_line_breaks_dropped(self):
        e = r'{"D":"First line\r\nsecond line","V":"3"}'
        assert parse_extended_metadata(e) == {"D": "First linesecond line", "V": "3"}

    def test_stray_backslashes_dropped(self):
        e = r'{"DN":"C:\\path\\file"}'
        assert parse_extended_metadata(e) == {"DN": "C:pathfile"}

    def test_escaped_key_before_array(self):
        e = r'{"CC\\":["context"],"V":"1"}'
        assert parse_extended_metadata(e) == {"CC": ["context"], "V": "1"}

    def test_lone_escaped_backslash_string(self):
        e = r'{"BT":"\\","V":"1"}'
        assert parse_extended_metadata(e) == {"BT": "", "V": "1"}

    @pytest.mark.parametrize("key", ["2143890424", "1965888463", "2021764794"])
    def test_citation_context_closing_quote(self, key):
        """The known citation context keys are repaired before the generic quote rule."""
        e = '{"CC":{"1":["see \\\\"],"%s":["y"]}}' % key
        assert parse_extended_metadata(e) == {"CC": {"1": ["see "], key: ["y"]}}

    def test_empty_is_empty_dict(self):
        assert parse_extended_metadata(None) == {}
        assert parse_extended_metadata("") == {}

    def test_undecodable_raises(self):
        with pytest.raises(ExtendedMetadataError):
            parse_extended_metadata('{"DN":"broken')

    def test_non_object_raises(self):
        with pytest.raises(ExtendedMetadataError):
            parse_extended_metadata("[1, 2]")


class TestParseResponse:
    """Tests for parse_response() and parse_error()."""

    def test_entities_in_order(self, make_entity):
        body = response_body(
            make_entity(id=1, title="first", RId=[10, 11], AA=[{"AuN": "jane doe", "AfId": 5}]),
            make_entity(id=2, title="second"),
        )
        entities = parse_response(body)
        assert [e.id for e in entities] == [1, 2]
        assert entities[0].title == "first"
        assert entities[0].year == 2019
        assert entities[0].citation_count == 7
        assert entities[0].estimated_citation_count == 8
        assert entities[0].reference_ids == [10, 11]
        assert entities[0].authors == [{"AuN": "jane doe", "AfId": 5}]
        assert entities[1].reference_ids == []

    def test_no_entities(self):
        assert parse_response('{"expr":"Id=1","entities":[]}') == []
        assert parse_response('{"expr":"Id=1"}') == []

    def test_bytes_body(self, make_entity):
        body = response_body(make_entity(id=3)).encode("utf-8")
        assert parse_response(body)[0].id == 3

    @pytest.mark.parametrize("body", [None, "not json", "[]", '{"entities": "none"}'])
    def test_malformed_raises(self, body):
        with pytest.raises(ResponseParseError):
            parse_response(body)

    def test_parse_error(self):
        assert parse_error(error_body("BadArgument", "Invalid query expression")) == (
            "BadArgument",
            "Invalid query expression",
        )

    def test_entity_extended_metadata(self, make_entity):
        entity = CandidateEntity.from_json(make_entity(extended={"DOI": "10.1000/x"}))
        assert entity.extended_metadata() == {"DOI": "10.1000/x"}
