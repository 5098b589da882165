import json

import pytest

from main import run

PETITIONS = [
    {
        "id": "parks",
        "title": "More benches in the park",
        "submitted_at": "2024-04-01T09:00:00Z",
        "approved_at": "2024-04-02T09:00:00Z",
        "votes": [
            {"voted_at": "2024-04-03T10:00:00Z", "vote_type": "up"},
            {"voted_at": "2024-04-05T10:00:00Z", "vote_type": "up"},
        ],
        "comments": [{"commented_at": "2024-04-04T12:00:00Z"}],
    },
    {
        "id": "parking",
        "submitted_at": "2024-04-01T09:00:00Z",
        "approved_at": "2024-04-02T09:00:00Z",
        "votes": [{"voted_at": "2024-04-03T10:00:00Z", "vote_type": "down"}],
    },
    {
        "id": "time-travel",
        "submitted_at": "2090-01-01T00:00:00Z",
        "approved_at": "2090-01-02T00:00:00Z",
    },
]


@pytest.fixture
def petitions_file(tmp_path):
    path = tmp_path / "petitions.json"
    path.write_text(json.dumps(PETITIONS))
    return path


def test_prints_table(petitions_file, capsys):
    assert run([str(petitions_file)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0].split()[0] == "1"
    assert lines[0].endswith("parks")
    assert lines[1].endswith("parking")
    assert "time-travel" in lines[2]
    assert "temporarily unranked" in lines[2]


def test_json_output_and_top(petitions_file, capsys):
    assert run([str(petitions_file), "--json", "--top", "2"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert [r["petition_id"] for r in out] == ["parks", "parking"]
    assert out[0]["status"] == "ranked"
    assert out[0]["score"]["total"] > out[1]["score"]["total"]


def test_missing_file(tmp_path):
    assert run([str(tmp_path / "nope.json")]) == 2


def test_invalid_file(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"id": "x", "submitted_at": "soon"}]))
    assert run([str(path)]) == 2


def test_negative_top_is_rejected(petitions_file, capsys):
    with pytest.raises(SystemExit) as exc:
        run([str(petitions_file), "--top", "-1"])
    assert exc.value.code == 2
    assert "--top" in capsys.readouterr().err


def test_top_zero_prints_nothing(petitions_file, capsys):
    assert run([str(petitions_file), "--top", "0"]) == 0
    assert capsys.readouterr().out == ""
