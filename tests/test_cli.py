from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from conftest import RecordingRunner
from rustdoc_publish.publish import cli, pipeline
from rustdoc_publish.shared import run_command


@pytest.fixture
def patch_runner(monkeypatch):
    """Swap the default command runner used by the CLI's export call."""

    def install(runner: RecordingRunner) -> RecordingRunner:
        original = pipeline.export_docs

        def export_with_runner(*args, **kwargs):
            kwargs["run"] = runner
            return original(*args, **kwargs)

        monkeypatch.setattr(cli, "export_docs", export_with_runner)
        return runner

    return install


@pytest.fixture
def set_env(monkeypatch, ci_environ):
    for name in ("DOC", "CRATE", "TOKEN", "TRAVIS_REPO_SLUG"):
        monkeypatch.delenv(name, raising=False)

    def apply(overrides: dict[str, str | None] | None = None) -> None:
        values = dict(ci_environ)
        values.update(overrides or {})
        for name, value in values.items():
            if value is not None:
                monkeypatch.setenv(name, value)

    return apply


def test_skip_exits_zero(set_env, patch_runner, crate_root, capsys) -> None:
    set_env({"DOC": None})
    runner = patch_runner(RecordingRunner())

    assert cli.main(["--root", str(crate_root)]) == 0
    assert runner.calls == []
    assert "skipping" in capsys.readouterr().out


def test_publish_exits_zero(set_env, patch_runner, crate_root) -> None:
    set_env()
    runner = patch_runner(RecordingRunner())

    assert cli.main(["--root", str(crate_root), "--cargo-arg=--no-deps"]) == 0
    assert runner.commands[0] == ["cargo", "doc", "--no-deps"]
    assert (crate_root / "target" / "doc" / "index.html").is_file()


def test_config_error_exits_two(set_env, patch_runner, crate_root, capsys) -> None:
    set_env({"CRATE": None})
    runner = patch_runner(RecordingRunner())

    assert cli.main(["--root", str(crate_root)]) == 2
    assert runner.calls == []
    assert "CRATE" in capsys.readouterr().err


def test_push_failure_exits_one_with_redacted_token(set_env, patch_runner, crate_root, capsys) -> None:
    set_env()

    class LeakyRunner(RecordingRunner):
        def __call__(self, args, cwd=None, env=None, check=True):
            args = list(args)
            if args[0] == "git":
                raise subprocess.CalledProcessError(
                    128, args, output="", stderr=f"fatal: could not read from {args[3]}\n"
                )
            return super().__call__(args, cwd=cwd, env=env, check=check)

    patch_runner(LeakyRunner())

    assert cli.main(["--root", str(crate_root), "--skip-install"]) == 1
    err = capsys.readouterr().err
    assert "ghp_secret123" not in err
    assert "https://***@github.com/octo/strtpl.git" in err
    assert "Command failed (128)" in err


def test_dry_run(set_env, patch_runner, crate_root, capsys) -> None:
    set_env()
    runner = patch_runner(RecordingRunner())

    assert cli.main(["--root", str(crate_root), "--dry-run"]) == 0
    assert runner.calls == []
    assert "Dry run" in capsys.readouterr().out


def test_run_command_captures_output(tmp_path: Path) -> None:
    result = run_command(["git", "--version"], cwd=tmp_path)
    assert result.returncode == 0
    assert result.stdout.startswith("git version")


def test_run_command_raises_on_failure(tmp_path: Path) -> None:
    with pytest.raises(subprocess.CalledProcessError):
        run_command(["git", "rev-parse", "--no-such-flag-here"], cwd=tmp_path)


def test_failure_prints_tool_stdout(set_env, patch_runner, crate_root, capsys) -> None:
    set_env()

    class StdoutRunner(RecordingRunner):
        def __call__(self, args, cwd=None, env=None, check=True):
            args = list(args)
            if args[0] == "cargo":
                raise subprocess.CalledProcessError(
                    101, args, output="error[E0433]: failed to resolve\n", stderr=""
                )
            return super().__call__(args, cwd=cwd, env=env, check=check)

    patch_runner(StdoutRunner())

    assert cli.main(["--root", str(crate_root)]) == 1
    err = capsys.readouterr().err
    assert "Command failed (101): cargo doc" in err
    assert "error[E0433]: failed to resolve" in err


def test_failure_redacts_token_that_needs_quoting(set_env, patch_runner, crate_root, capsys) -> None:
    set_env({"TOKEN": "abc'def"})
    patch_runner(RecordingRunner(fail_on="git"))

    assert cli.main(["--root", str(crate_root), "--skip-install"]) == 1
    err = capsys.readouterr().err
    assert "abc" not in err
    assert "def@github.com" not in err
    assert "https://***@github.com/octo/strtpl.git" in err
