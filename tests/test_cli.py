"""
Tests for the roomslots command line.
"""

import json
import logging

import pytest

from roomslots.cli import main
from tests.fixtures import GOLDEN_RANGES_60, GOLDEN_RANGES_60_STRICT


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """main() installs handlers on the root logger; put the old ones back."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def config(tmp_path):
    path = tmp_path / "roomslots.yaml"
    path.write_text("default_min_minutes: 60\nlogging:\n  level: WARNING\n  json: false\n")
    return path


def run(capsys, *argv):
    code = main([str(a) for a in argv])
    out, err = capsys.readouterr()
    return code, out, err


def ranges_from_json(out):
    report = json.loads(out)
    return {
        entry["room"]["room_number"]: [
            (r["start_hour"], r["start_minute"], r["end_hour"], r["end_minute"]) for r in entry["ranges"]
        ]
        for entry in report["rooms"]
    }


class TestRanges:
    def test_json(self, capsys, config, sample_page):
        code, out, _ = run(capsys, "--config", config, "ranges", sample_page, "--json")
        assert code == 0
        assert ranges_from_json(out) == GOLDEN_RANGES_60
        assert json.loads(out)["trailing_policy"] == "as_observed"

    def test_strict(self, capsys, config, sample_page):
        code, out, _ = run(capsys, "--config", config, "ranges", sample_page, "--strict", "--json")
        assert code == 0
        assert ranges_from_json(out) == GOLDEN_RANGES_60_STRICT

    def test_table(self, capsys, config, sample_page):
        code, out, _ = run(capsys, "--config", config, "ranges", sample_page)
        assert code == 0
        assert "08:00-09:00, 16:00-17:00" in out
        assert "16:30-18:00, 10:00-10:30" in out

    def test_min_minutes_flag(self, capsys, config, sample_page):
        code, out, _ = run(capsys, "--config", config, "ranges", sample_page, "--min-minutes", "90", "--json")
        assert code == 0
        assert json.loads(out)["min_minutes"] == 90

    def test_threshold_over_limit(self, capsys, config, sample_page):
        code, _, err = run(capsys, "--config", config, "ranges", sample_page, "--min-minutes", "150")
        assert code == 1
        assert "120" in err

    def test_missing_page(self, capsys, config, tmp_path):
        code, _, err = run(capsys, "--config", config, "ranges", tmp_path / "missing.html")
        assert code == 1
        assert "missing.html" in err

    def test_bad_config(self, capsys, tmp_path, sample_page):
        path = tmp_path / "bad.yaml"
        path.write_text("trailing_block_policy: lenient\n")
        code, _, err = run(capsys, "--config", path, "ranges", sample_page)
        assert code == 1
        assert "trailing_block_policy" in err

    @pytest.mark.parametrize(
        "body, named",
        [
            ("room_label_pattern: '(unclosed'\n", "room_label_pattern"),
            ("logging: INFO\n", "logging"),
        ],
    )
    def test_unusable_config_exits_cleanly(self, capsys, tmp_path, sample_page, body, named):
        path = tmp_path / "bad.yaml"
        path.write_text(body)
        code, _, err = run(capsys, "--config", path, "ranges", sample_page)
        assert code == 1
        assert named in err


class TestAt:
    def test_rooms_free(self, capsys, config, sample_page):
        code, out, _ = run(capsys, "--config", config, "at", sample_page, "--date", "2016-05-08", "--time", "16:30", "--json")
        assert code == 0
        report = json.loads(out)
        assert [r["room_number"] for r in report["rooms"]] == [204, 210]
        assert report["date"] == "2016-05-08"
        assert report["time"] == "16:30"

    def test_none_free(self, capsys, config, sample_page):
        code, out, _ = run(capsys, "--config", config, "at", sample_page, "--date", "2016-05-08", "--time", "09:00")
        assert code == 0
        assert "No rooms free" in out

    def test_table(self, capsys, config, sample_page):
        code, out, _ = run(capsys, "--config", config, "at", sample_page, "--date", "2016-05-08", "--time", "08:15")
        assert code == 0
        assert "204" in out
        assert "210" not in out

    def test_bad_time(self, capsys, config, sample_page):
        code, _, err = run(capsys, "--config", config, "at", sample_page, "--date", "2016-05-08", "--time", "25:00")
        assert code == 1
        assert "Hour" in err

    def test_bad_date(self, capsys, config, sample_page):
        code, _, _ = run(capsys, "--config", config, "at", sample_page, "--date", "08/05/2016", "--time", "10:00")
        assert code == 1


class TestArguments:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])

    def test_log_level_choices(self, sample_page):
        with pytest.raises(SystemExit):
            main(["--log-level", "loud", "ranges", str(sample_page)])
