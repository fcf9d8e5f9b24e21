import json

from typer.testing import CliRunner

from buena_vista.cli import app

runner = CliRunner()


def test_truncate_reads_stdin() -> None:
    result = runner.invoke(app, ["truncate", "--length", "10"], input="badgers must win!\n")
    assert result.exit_code == 0
    assert result.stdout == "badgers must\n---\n win!\n"


def test_truncate_json_output_per_paragraph() -> None:
    result = runner.invoke(
        app,
        ["truncate", "--length", "5", "--json"],
        input="hello\n\nworld\n",
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        {"visible": "hello", "hidden": ""},
        {"visible": "", "hidden": "world"},
    ]


def test_truncate_reads_files(tmp_path) -> None:
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_text("Get Started Free accounts and trials. Sign up in 60 seconds.")
    second.write_text("Join companies of all sizes.")
    result = runner.invoke(app, ["truncate", str(first), str(second), "-n", "45", "--json"])
    assert result.exit_code == 0
    rows = json.loads(result.stdout)
    assert rows[0] == {
        "visible": "Get Started Free accounts and trials. ",
        "hidden": "Sign up in 60 seconds.",
    }
    assert rows[1] == {"visible": "", "hidden": "Join companies of all sizes."}


def test_truncate_uses_config_file(tmp_path) -> None:
    cfg = tmp_path / "buena_vista.yaml"
    cfg.write_text("truncate:\n  length: 10\n")
    result = runner.invoke(app, ["truncate", "--config", str(cfg)], input="badgers must win!")
    assert result.exit_code == 0
    assert result.stdout.startswith("badgers must\n---\n")


def test_missing_length_exits_non_zero(monkeypatch) -> None:
    monkeypatch.delenv("TRUNCATE__LENGTH", raising=False)
    result = runner.invoke(app, ["truncate"], input="hello world")
    assert result.exit_code == 1


def test_html_command() -> None:
    result = runner.invoke(
        app, ["html", "--length", "8", "--block-tag", "div", "--no-more"], input="hello. world."
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == '<div>hello. <span class="truncated">world.</span></div>'
