"""Tests for the YAML configuration loader (finance_contracts/config.py)."""

import logging
from datetime import date, datetime
from pathlib import Path

import pytest
import yaml

from finance_contracts.config import (
    DEFAULT_CONFIG_PATH,
    DemoConfig,
    compute_checksum,
    load_config,
    parse_config,
    parse_date,
    parse_dates,
)


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "settings.yaml"
    path.write_text(text)
    return path


class TestLoadConfig:
    def test_packaged_defaults(self):
        config = load_config()

        assert DEFAULT_CONFIG_PATH.exists()
        assert config == DemoConfig(
            log_level="INFO",
            as_of_dates=(date(2020, 12, 24),),
            json_indent=2,
        )

    def test_full_file(self, tmp_path):
        path = _write(
            tmp_path,
            """
logging:
  level: debug
evaluation:
  as_of_dates: [2020-12-23, 2020-12-24, "2020-12-26"]
output:
  json_indent: null
""",
        )

        config = load_config(path)

        assert config.log_level == "DEBUG"
        assert config.log_level_number == logging.DEBUG
        assert config.as_of_dates == (
            date(2020, 12, 23),
            date(2020, 12, 24),
            date(2020, 12, 26),
        )
        assert config.json_indent is None

    def test_empty_file_gives_defaults(self, tmp_path):
        assert load_config(_write(tmp_path, "")) == DemoConfig()

    def test_accepts_str_path(self, tmp_path):
        path = _write(tmp_path, "output:\n  json_indent: 4\n")
        assert load_config(str(path)).json_indent == 4

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.yaml")

    def test_malformed_yaml(self, tmp_path):
        with pytest.raises(yaml.YAMLError):
            load_config(_write(tmp_path, "logging: [unclosed"))

    def test_scalar_section_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="Section 'logging' must be a mapping"):
            load_config(_write(tmp_path, "logging: DEBUG\n"))

    def test_top_level_list_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="Config must be a mapping"):
            load_config(_write(tmp_path, "- 2020-12-24\n"))


class TestParseConfig:
    def test_unknown_log_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            parse_config({"logging": {"level": "CHATTY"}})

    @pytest.mark.parametrize("indent", [-1, "two", True])
    def test_invalid_indent(self, indent):
        with pytest.raises(ValueError, match="json_indent"):
            parse_config({"output": {"json_indent": indent}})

    def test_dates_must_be_a_list(self):
        with pytest.raises(ValueError, match="must be a list"):
            parse_config({"evaluation": {"as_of_dates": "2020-12-24"}})

    def test_decreasing_dates_rejected(self):
        with pytest.raises(ValueError, match="non-decreasing"):
            parse_config(
                {"evaluation": {"as_of_dates": [date(2020, 12, 26), date(2020, 12, 24)]}}
            )

    def test_repeated_dates_allowed(self):
        config = parse_config(
            {"evaluation": {"as_of_dates": [date(2020, 12, 24), date(2020, 12, 24)]}}
        )
        assert len(config.as_of_dates) == 2

    @pytest.mark.parametrize("section", ["logging", "evaluation", "output"])
    def test_sections_must_be_mappings(self, section):
        with pytest.raises(ValueError, match=f"Section '{section}'"):
            parse_config({section: ["not", "a", "mapping"]})

    def test_null_section_gives_defaults(self):
        assert parse_config({"logging": None, "output": None}) == DemoConfig()


class TestParseDate:
    def test_date_passthrough(self):
        assert parse_date(date(2021, 1, 1)) == date(2021, 1, 1)

    def test_iso_string(self):
        assert parse_date("2021-01-01") == date(2021, 1, 1)

    def test_datetime_truncated(self):
        assert parse_date(datetime(2021, 1, 1, 9, 30)) == date(2021, 1, 1)

    def test_garbage(self):
        with pytest.raises(ValueError):
            parse_date(20210101)

    def test_parse_dates_empty(self):
        assert parse_dates([]) == ()


class TestChecksum:
    def test_deterministic(self):
        assert compute_checksum(DemoConfig()) == compute_checksum(DemoConfig())

    def test_changes_with_content(self):
        other = DemoConfig(as_of_dates=(date(2020, 12, 26),))
        assert compute_checksum(DemoConfig()) != compute_checksum(other)

    def test_is_sha256_hex(self):
        digest = compute_checksum(DemoConfig())
        assert len(digest) == 64
        int(digest, 16)
