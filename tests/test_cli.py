# tests/test_cli.py
"""Tests for the command-line interface."""

import io
import json

import pytest

from eldamo_lookup.cli import format_default, main, sort_results


def test_sort_results_by_score():
    results = [
        {"headword": "a", "score": 40},
        {"headword": "b", "score": 100},
        {"headword": "c", "score": 40},
    ]

    assert [r["headword"] for r in sort_results(results)] == ["b", "a", "c"]
    assert [r["headword"] for r in sort_results(results, limit=1)] == ["b"]


def test_default_output(sample_path, capsys):
    main(["--dictionary", str(sample_path), "nolofinwe"])
    out = capsys.readouterr().out

    assert "Nolofinwë (Quenya, masc-name) [100] *son of Finwë, the proud" in out
    assert "  └─ nolo: wise / lore" in out
    assert "  └─ Finwë: -" in out


def test_json_output(sample_path, capsys):
    main(["--dictionary", str(sample_path), "--json", "nolo"])
    data = json.loads(capsys.readouterr().out)

    assert [r["score"] for r in data] == [100, 100, 100, 44]
    assert data[-1]["headword"] == "Nolofinwë"


def test_simple_output_with_limit(sample_path, capsys):
    main(["--dictionary", str(sample_path), "--simple", "--limit", "1", "moon"])
    out = capsys.readouterr().out

    assert out.strip() == "iþil\t100\tq\tMoon"


def test_no_match_output(sample_path, capsys):
    main(["--dictionary", str(sample_path), "xyzzy"])
    assert capsys.readouterr().out.strip() == "No match."


def test_words_from_stdin(sample_path, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("aragorn\n\nmoon\n"))
    main(["--dictionary", str(sample_path), "--simple"])
    out = capsys.readouterr().out.splitlines()

    assert out == ["aragorn\t100\ts\tKingly Valour", "iþil\t100\tq\tMoon"]


def test_missing_dictionary(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--dictionary", str(tmp_path / "missing.xml"), "aragorn"])

    assert exc.value.code == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_format_default_unknown_language():
    results = [{
        "headword": "x", "score": 50, "language": None, "part_of_speech": "",
        "gloss": None, "elements": [],
    }]
    assert format_default(results) == "x (?) [50]"


def test_missing_dictionary_points_to_option(tmp_path, capsys):
    with pytest.raises(SystemExit):
        main(["--dictionary", str(tmp_path / "missing.xml"), "aragorn"])

    assert "--dictionary" in capsys.readouterr().err
