import json

from wiregrid.tool import main


def test_emit_json_to_stdout(capsys):
    assert main(["emit", "--seed", "5"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert len(data["grid"]) == 5
    assert data["metadata"]["seed"] == 5


def test_emit_to_file(tmp_path, capsys):
    out = tmp_path / "level.json"
    assert main(["emit", "--difficulty", "medium", "--seed", "3", "--out", str(out), "--pretty"]) == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["metadata"]["difficulty"] == "medium"
    assert "Wrote" in capsys.readouterr().out


def test_show_views(capsys):
    for view in ("level", "solution", "comparison", "connections", "path"):
        assert main(["show", "--seed", "9", "--view", view, "--no-color"]) == 0
    out = capsys.readouterr().out
    assert "PATH DEBUG" in out and "CONNECTION DEBUG VIEW" in out
    assert "\x1b[" not in out


def test_validate_exit_code(capsys):
    assert main(["validate", "--seed", "12"]) == 0
    assert "Status: VALID" in capsys.readouterr().out


def test_stats(capsys):
    assert main(["stats", "--seed", "1", "--count", "2"]) == 0
    assert "Total attempts: 2" in capsys.readouterr().out


def test_render(tmp_path):
    out = tmp_path / "level.png"
    assert main(["render", "--seed", "2", "--out", str(out), "--tile", "8"]) == 0
    assert out.exists()


def test_generation_failure_exit_code(capsys):
    code = main(["emit", "--min-path", "26", "--max-path", "30", "--attempts", "2"])
    assert code == 2
    assert "error:" in capsys.readouterr().err


def test_bad_option_exit_code(capsys):
    assert main(["emit", "--width", "1"]) == 2
    assert "grid must be at least 2x2" in capsys.readouterr().err
