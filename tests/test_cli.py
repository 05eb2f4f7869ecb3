from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from lifegame.__main__ import _build_parser, main


def _script(tmp_path: Path, *lines: str) -> Path:
    path = tmp_path / "commands.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_scripted_game_prints_results(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = _script(tmp_path, "/m", "/jog:fersp63", "bogus")

    assert main(["--seed", "1", "--script", str(script)]) == 0

    out = capsys.readouterr().out
    assert "Welcome to the game of Life" in out
    assert "> /jog:fersp63" in out
    assert "🏃 Player's running fersp63" in out
    assert "Game Results: " in out


def test_same_seed_same_game(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = _script(tmp_path, "/m", "/mjog:fersp63", "/move:fersp63", "/q", "/q", "/q")

    main(["--seed", "99", "--script", str(script)])
    first = capsys.readouterr().out
    main(["--seed", "99", "--script", str(script)])
    second = capsys.readouterr().out

    assert first == second


def test_json_results(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = _script(tmp_path, "/m")

    assert main(["--seed", "3", "--script", str(script), "--json"]) == 0

    out = capsys.readouterr().out
    payload = json.loads(out[out.index("\n{") + 1 :])
    assert payload["phase"] == "finished"
    assert payload["turns"] == 1
    assert [p["nickname"] for p in payload["players"]] == ["aldrt23", "fersp63"]


def test_seed_from_environment(tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    script = _script(tmp_path, "/m", "/m")

    monkeypatch.setenv("LIFEGAME_SEED", "5")
    main(["--script", str(script)])
    from_env = capsys.readouterr().out
    main(["--seed", "5", "--script", str(script)])
    from_flag = capsys.readouterr().out

    assert from_env == from_flag


def test_bad_config_exits_with_error(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("LIFEGAME_SEED", "nope")

    assert main([]) == 2
    assert "LIFEGAME_SEED" in capsys.readouterr().err


def test_missing_script_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = tmp_path / "nope.txt"

    assert main(["--script", str(missing)]) == 2

    err = capsys.readouterr().err
    assert err.startswith("lifegame: ")
    assert "nope.txt" in err


def test_game_over_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("/jog:fersp63\nbogus\n"))

    assert main(["--seed", "1"]) == 0

    out = capsys.readouterr().out
    assert "🏃 Player's running fersp63" in out
    assert "Game Results: " in out


def test_log_level_flag(tmp_path: Path) -> None:
    args = _build_parser().parse_args(["--log-level", "debug"])
    assert args.log_level == "DEBUG"

    with pytest.raises(SystemExit):
        _build_parser().parse_args(["--log-level", "chatty"])

    assert main(["--log-level", "info", "--script", str(_script(tmp_path, "/m"))]) == 0
