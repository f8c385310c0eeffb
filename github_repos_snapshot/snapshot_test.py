"""Unit tests for snapshot serialization."""

import json
import os
import stat
from unittest.mock import patch

import pytest

from .models import FileRecord, ReadmeRecord, RepoRecord, RepoSummary
from .snapshot import snapshot_to_json, write_snapshot


def _record(i, **kwargs):
    summary = RepoSummary.from_api(
        {"id": i, "name": f"r{i}", "full_name": f"alice/r{i}", "updated_at": f"2024-01-0{i}T00:00:00Z"}
    )
    return RepoRecord(summary=summary, **kwargs)


def describe_snapshot_to_json():
    def it_writes_an_empty_array():
        assert json.loads(snapshot_to_json([])) == []

    def it_indents_with_two_spaces():
        text = snapshot_to_json([_record(1)])

        assert text.startswith('[\n  {\n    "id": 1,')
        assert text.endswith("]\n")

    def it_keeps_record_order():
        data = json.loads(snapshot_to_json([_record(3), _record(1), _record(2)]))

        assert [r["fullName"] for r in data] == ["alice/r3", "alice/r1", "alice/r2"]

    def it_round_trips():
        records = [
            _record(
                1,
                readme=ReadmeRecord(content="héllo\n", encoding="base64"),
                languages={"Python": 10, "C": 2},
                main_files=[FileRecord(path="app.py", size=3, content="x = '✓'")],
            ),
            _record(2),
        ]

        first = json.loads(snapshot_to_json(records))
        again = json.loads(json.dumps(first, indent=2))

        assert first == again
        assert first[0]["mainFiles"][0]["content"] == "x = '✓'"

    def it_is_deterministic():
        records = [_record(1, languages={"Go": 1, "Rust": 2})]

        assert snapshot_to_json(records) == snapshot_to_json(records)


def describe_write_snapshot():
    def it_creates_parent_directories(tmp_path):
        path = tmp_path / "public" / "repos-data.json"

        write_snapshot([_record(1)], path)

        assert json.loads(path.read_text(encoding="utf-8"))[0]["fullName"] == "alice/r1"

    def it_leaves_no_temp_files(tmp_path):
        path = tmp_path / "repos-data.json"

        write_snapshot([], path)

        assert [p.name for p in tmp_path.iterdir()] == ["repos-data.json"]

    def it_keeps_the_old_file_when_writing_fails(tmp_path):
        path = tmp_path / "repos-data.json"
        path.write_text("[]\n")

        with patch("github_repos_snapshot.snapshot.snapshot_to_json", side_effect=RuntimeError("boom")):
            with pytest.raises(RuntimeError):
                write_snapshot([_record(1)], path)

        assert path.read_text() == "[]\n"
        assert [p.name for p in tmp_path.iterdir()] == ["repos-data.json"]

    def it_creates_a_world_readable_file_under_the_usual_umask(tmp_path):
        path = tmp_path / "public" / "repos-data.json"
        old = os.umask(0o022)
        try:
            write_snapshot([], path)
        finally:
            os.umask(old)

        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    def it_keeps_the_mode_of_an_existing_file(tmp_path):
        path = tmp_path / "repos-data.json"
        path.write_text("[]\n")
        path.chmod(0o640)

        write_snapshot([_record(1)], path)

        assert stat.S_IMODE(path.stat().st_mode) == 0o640
