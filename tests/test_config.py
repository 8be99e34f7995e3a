"""Tests for SyncConfig loading and validation."""

from __future__ import annotations

import pytest

from msacademic_sync.config import API_KEY_ENV, DEFAULT_EPRINT_FIELDS, ConfigError, SyncConfig


@pytest.fixture(autouse=True)
def no_env_key(monkeypatch):
    monkeypatch.delenv(API_KEY_ENV, raising=False)


class TestSyncConfig:
    """Tests for defaults, YAML loading and validation."""

    def test_defaults(self):
        config = SyncConfig()
        assert config.answer_count == 10
        assert config.crawl_retry == 3
        assert config.crawl_delay == 1.0
        assert config.timeout == 60.0
        assert config.affiliation_id == 202697423
        assert config.eprint_fields == DEFAULT_EPRINT_FIELDS
        assert config.attributes.endswith(",RId,E")
        assert config.api_key is None

    def test_api_key_from_environment(self, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV, "from-env")
        assert SyncConfig().api_key == "from-env"
        assert SyncConfig(api_key="explicit").api_key == "explicit"

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "msacademic.yaml"
        path.write_text(
            "msacademic:\n"
            "  api_key: abc\n"
            "  answer_count: 25\n"
            "  crawl_delay: 0.5\n"
            "  eprint_fields: [eprintid, title]\n"
            "  report_dir: reports\n",
            encoding="utf-8",
        )
        config = SyncConfig.from_yaml(path)
        assert config.api_key == "abc"
        assert config.answer_count == 25
        assert config.crawl_delay == 0.5
        assert config.eprint_fields == ["eprintid", "title"]
        assert config.json_dir.endswith("json")

    def test_from_yaml_flat(self, tmp_path):
        path = tmp_path / "flat.yaml"
        path.write_text("crawl_retry: 5\n", encoding="utf-8")
        assert SyncConfig.from_yaml(path).crawl_retry == 5

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="apikey"):
            SyncConfig.from_dict({"apikey": "x"})

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("crawl_retry: [1,\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            SyncConfig.from_yaml(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            SyncConfig.from_yaml(path)

    def test_to_dict_omits_api_key(self):
        data = SyncConfig(api_key="secret").to_dict()
        assert "api_key" not in data
        assert data["answer_count"] == 10

    def test_validate_requires_key_for_network(self):
        with pytest.raises(ConfigError):
            SyncConfig().validate()
        SyncConfig().validate(needs_network=False)

    @pytest.mark.parametrize(
        "overrides",
        [{"crawl_retry": 0}, {"crawl_delay": -1}, {"answer_count": 0}, {"timeout": 0}],
    )
    def test_validate_rejects_bad_values(self, overrides):
        with pytest.raises(ConfigError):
            SyncConfig(api_key="k", **overrides).validate()
