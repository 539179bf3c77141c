# test/test_cli.py
import io
import json

from shotprofile.cli.main import EXIT_FAILURE, EXIT_OK, EXIT_SYNTAX, main

from conftest import PRESSURE_THEN_FLOW, TWO_TEMPERATURES


def test_check_file(tmp_path, capsys):
    path = tmp_path / "shot.txt"
    path.write_text(TWO_TEMPERATURES, encoding="utf-8")

    assert main(["check", str(path)]) == EXIT_OK
    out = capsys.readouterr().out
    assert "1: {temperature 90 seconds 10}" in out
    assert "ok: 2 steps, 15 s" in out


def test_check_syntax_error(tmp_path, capsys):
    path = tmp_path / "shot.txt"
    path.write_text("{seconds 1}\n{weight 36}", encoding="utf-8")

    assert main(["check", str(path)]) == EXIT_SYNTAX
    assert "line 2, column 1" in capsys.readouterr().err


def test_check_lenient(tmp_path, capsys):
    path = tmp_path / "shot.txt"
    path.write_text("{seconds 1 weight 36}", encoding="utf-8")

    assert main(["check", "--lenient", str(path)]) == EXIT_OK
    assert "weight 36" in capsys.readouterr().out


def test_analyze_json_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(PRESSURE_THEN_FLOW))

    assert main(["analyze", "--json", "-"]) == EXIT_OK
    payload = json.loads(capsys.readouterr().out)
    assert payload["duration"] == 30.0
    assert payload["channels"]["pressure"]["segments"][0] == [0.0, 0.0, 0.0, 9.0]
    assert payload["channels"]["pressure"]["unit"] == "bar"


def test_analyze_pixels(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(TWO_TEMPERATURES))

    assert main(["analyze", "--json", "--pixels", "-"]) == EXIT_OK
    payload = json.loads(capsys.readouterr().out)
    assert payload["pixels"]["temperature"][0][0] == 30.0
    assert payload["pixels"]["pressure"] == []


def test_analyze_text_preset(capsys):
    assert main(["analyze", "--preset", "default"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "duration: 60 s" in out
    assert "pressure (bar): 3 segments" in out


def test_unknown_preset(capsys):
    assert main(["analyze", "--preset", "no-such-profile"]) == EXIT_FAILURE
    assert "no-such-profile" in capsys.readouterr().err


def test_missing_source(capsys):
    assert main(["check"]) == EXIT_FAILURE
    assert main(["check", "nope.txt", "--preset", "default"]) == EXIT_FAILURE


def test_missing_file(tmp_path):
    assert main(["check", str(tmp_path / "missing.txt")]) == EXIT_FAILURE


def test_presets_lists_bundled_and_directory(tmp_path, capsys):
    (tmp_path / "mine.tcl").write_text("advanced_shot {{temperature 93 seconds 30}}\n", encoding="utf-8")

    assert main(["--preset-dir", str(tmp_path), "presets"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "default\t3 steps\t60 s" in out
    assert "mine\t1 steps\t30 s" in out


def test_plot(tmp_path, capsys):
    out_path = tmp_path / "shot.png"
    assert main(["plot", "--preset", "default", "-o", str(out_path)]) == EXIT_OK
    assert out_path.exists()
    assert str(out_path) in capsys.readouterr().out


def test_bad_config(tmp_path, capsys):
    path = tmp_path / "shot.ini"
    path.write_text("[x]\n", encoding="utf-8")
    assert main(["--config", str(path), "presets"]) == EXIT_FAILURE
    assert "Unsupported" in capsys.readouterr().err


def test_plot_uses_configured_domains_and_exit_flow_switch(tmp_path, monkeypatch):
    import shotprofile.cli.main as cli

    config = tmp_path / "shot.toml"
    config.write_text("[domains]\nflow = [0, 6]\n", encoding="utf-8")
    profile = tmp_path / "shot.txt"
    profile.write_text(
        "{pump flow flow 2 exit_if 1 exit_type flow_over exit_flow_over 3 seconds 5}\n"
        "{pump flow flow 1 seconds 5}",
        encoding="utf-8",
    )

    calls = []
    monkeypatch.setattr(cli, "save_plot", lambda analysis, path, **kw: calls.append((analysis, kw)) or path)

    out = str(tmp_path / "shot.png")
    assert main(["--config", str(config), "plot", str(profile), "-o", out]) == EXIT_OK
    assert main(["--config", str(config), "plot", "--no-exit-flow", str(profile), "-o", out]) == EXIT_OK

    (carried, kw), (plain, _) = calls
    assert kw["domains"]["flow"] == (0.0, 6.0)
    assert len(carried.flow) == len(plain.flow) + 1
