import json

from typer.testing import CliRunner

from text_split.cli import app


def _rows(output: str) -> list[dict]:
    return [json.loads(line) for line in output.splitlines() if line.strip()]


def test_split_command_prints_rows(tmp_path, scenario_text: str) -> None:
    source = tmp_path / "input.txt"
    source.write_text(scenario_text)
    result = CliRunner().invoke(
        app,
        [
            "split",
            str(source),
            "-p",
            "rty",
            "-p",
            " 5 (6) 7 ",
            "-p",
            "never",
            "--slurp",
            "()",
            "--remaining",
            "--config",
            str(tmp_path / "absent.yaml"),
        ],
    )
    assert result.exit_code == 0, result.output
    rows = _rows(result.stdout)
    assert [row.get("index") for row in rows] == [0, 1, None]
    assert rows[0]["found"] == "rty"
    assert rows[0]["slurp"] == "\n{\n    abcdefghijklmnopqrstuvwxyz\n\n"
    assert rows[1]["matched"] == ["6"]
    assert rows[1]["slurp"] == "-\n"
    assert rows[2] == {"remaining": "\n    xyzzy\n\n}\n\n"}


def test_split_command_uses_config_patterns(tmp_path, synopsis_text: str) -> None:
    source = tmp_path / "input.txt"
    source.write_text(synopsis_text)
    config = tmp_path / "text_split.yaml"
    config.write_text('slurp: "@()/"\npatterns: [START, The end]\n')
    result = CliRunner().invoke(app, ["split", str(source), "--config", str(config)])
    assert result.exit_code == 0, result.output
    rows = _rows(result.stdout)
    assert rows[1]["slurp"] == ["    qwerty", "", "        1 2 3 4 5 6"]


def test_split_command_without_patterns_fails(tmp_path) -> None:
    source = tmp_path / "input.txt"
    source.write_text("text\n")
    result = CliRunner().invoke(
        app, ["split", str(source), "--config", str(tmp_path / "absent.yaml")]
    )
    assert result.exit_code == 1


def test_slurp_spec_command() -> None:
    result = CliRunner().invoke(app, ["slurp-spec", "@[]/"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "slurpl": True,
        "slurpr": True,
        "chomp": True,
        "wantlist": True,
        "symbolic": "@[]/",
    }


def test_slurp_spec_command_rejects_bad_spec() -> None:
    result = CliRunner().invoke(app, ["slurp-spec", "[x"])
    assert result.exit_code == 1
