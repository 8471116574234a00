import json
import logging

import pytest

from string_search.cli import EXIT_ERROR, EXIT_FOUND, EXIT_NOT_FOUND, main


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("alpha beta\ngamma alpha\nalphabet\n", encoding="utf-8")
    return str(path)


def test_prints_row_and_column(data_file, capsys):
    assert main(["alpha", data_file, "--algorithm", "kmp"]) == EXIT_FOUND
    assert capsys.readouterr().out.splitlines() == ["1:1", "2:7", "3:1"]


@pytest.mark.parametrize("algorithm", ["naive", "kmp", "rabinKarp", "horspool"])
def test_prints_indices(data_file, capsys, algorithm):
    assert main(["alpha", data_file, "--algorithm", algorithm, "--indices"]) == EXIT_FOUND
    assert capsys.readouterr().out.splitlines() == ["0", "17", "23"]


def test_not_found_exit_code(data_file, capsys):
    assert main(["omega", data_file]) == EXIT_NOT_FOUND
    assert capsys.readouterr().out == ""


def test_bytes_mode(tmp_path, capsys):
    path = tmp_path / "data.bin"
    path.write_bytes(b"\x00abc\x00abc")
    assert main(["abc", str(path), "--bytes", "--indices"]) == EXIT_FOUND
    assert capsys.readouterr().out.splitlines() == ["1", "5"]


def test_stats_on_stderr(data_file, capsys):
    main(["alpha", data_file, "--algorithm", "horspool", "--stats"])
    err = capsys.readouterr().err
    assert "algorithm: horspool" in err
    assert "matches: 3" in err


def test_missing_file(tmp_path, capsys):
    assert main(["alpha", str(tmp_path / "missing.txt")]) == EXIT_ERROR
    assert "File not found" in capsys.readouterr().err


def test_bad_config(tmp_path, capsys):
    assert main(["alpha", "-", "--config", str(tmp_path / "nope.conf")]) == EXIT_ERROR
    assert "Configuration error" in capsys.readouterr().err


def test_strict_config_rejects_unknown_algorithm(config_file, data_file, capsys):
    conf = config_file(strict="true")
    assert main(["alpha", data_file, "--config", conf, "--algorithm", "quantum"]) == EXIT_ERROR
    assert "Unknown search algorithm" in capsys.readouterr().err


def test_lenient_config_falls_back(config_file, data_file, capsys):
    conf = config_file()
    assert main(["alpha", data_file, "--config", conf, "--algorithm", "quantum", "--indices"]) == EXIT_FOUND
    assert capsys.readouterr().out.splitlines() == ["0", "17", "23"]


def test_pattern_required(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2


def test_json_request(tmp_path, capsys):
    request = tmp_path / "request.json"
    request.write_text(json.dumps({"text": "aaaa", "pattern": "aa", "algorithm": "kmp"}))
    assert main(["--json", str(request)]) == EXIT_FOUND
    body = json.loads(capsys.readouterr().out)
    assert body["count"] == 3
    assert body["matches"][1] == {"index": 1, "row": 1, "col": 2}


def test_json_request_without_matches(tmp_path, capsys):
    request = tmp_path / "request.json"
    request.write_text(json.dumps({"text": "abc", "pattern": "z"}))
    assert main(["--json", str(request)]) == EXIT_NOT_FOUND
    assert json.loads(capsys.readouterr().out)["matches"] == []


def test_json_request_error(tmp_path, capsys):
    request = tmp_path / "request.json"
    request.write_text("{oops")
    assert main(["--json", str(request)]) == EXIT_ERROR
    assert json.loads(capsys.readouterr().out) == {"error": "Invalid JSON"}


def test_json_request_rejects_second_positional(tmp_path, capsys):
    request = tmp_path / "request.json"
    request.write_text(json.dumps({"text": "abc", "pattern": "b"}))
    with pytest.raises(SystemExit) as exc_info:
        main(["--json", str(request), str(tmp_path / "other.txt")])
    assert exc_info.value.code == 2
    assert "single input file" in capsys.readouterr().err


def test_debug_config_logs_statistics(config_file, data_file, caplog):
    conf = config_file(debug="true")
    with caplog.at_level(logging.INFO, logger="string_search"):
        assert main(["alpha", data_file, "--config", conf, "--algorithm", "kmp"]) == EXIT_FOUND
    assert "Search statistics" in caplog.text
    assert "'algorithm': 'kmp'" in caplog.text


def test_statistics_not_logged_without_debug(config_file, data_file, caplog):
    conf = config_file()
    with caplog.at_level(logging.INFO, logger="string_search"):
        main(["alpha", data_file, "--config", conf])
    assert "Search statistics" not in caplog.text


@pytest.fixture
def review_file(tmp_path):
    path = tmp_path / "review.txt"
    path.write_text("Great movie, great cast. The ending was bad but the music was fine.\n", encoding="utf-8")
    return str(path)


def test_sentiment_report(review_file, capsys):
    assert main(["--sentiment", review_file, "--algorithm", "horspool"]) == EXIT_FOUND
    assert capsys.readouterr().out.splitlines() == [
        "overall: POSITIVE",
        "positive: 2 [great(2)]",
        "negative: 1 [bad(1)]",
        "neutral: 1 [fine(1)]",
        "words: 13",
        "algorithm: horspool",
    ]


def test_sentiment_without_keywords(tmp_path, capsys):
    path = tmp_path / "plain.txt"
    path.write_text("Nothing to see here", encoding="utf-8")
    assert main(["--sentiment", str(path)]) == EXIT_NOT_FOUND
    assert "overall: NEUTRAL" in capsys.readouterr().out


def test_sentiment_missing_file(tmp_path, capsys):
    assert main(["--sentiment", str(tmp_path / "missing.txt")]) == EXIT_ERROR
    assert "File not found" in capsys.readouterr().err


def test_sentiment_and_json_are_exclusive(review_file):
    with pytest.raises(SystemExit) as exc_info:
        main(["--sentiment", "--json", review_file])
    assert exc_info.value.code == 2
