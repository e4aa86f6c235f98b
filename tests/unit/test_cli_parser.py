from __future__ import annotations

import logging
import runpy
import sys
from pathlib import Path

import pytest

import sizearg.cli as cli_module
import sizearg.commands.factory as factory_module
from sizearg.cli import CliApplication
from sizearg.core.sizearg_config import SizeargConfig


class FakeCommand:
    def __init__(self, code: int = 0) -> None:
        self._code = code

    def run(self) -> int:
        return self._code


class FakeFactory:
    def __init__(self, config: SizeargConfig, code: int = 0) -> None:
        self._config = config
        self._code = code
        self.observed: dict[str, object] = {}

    def load_config(self, env_file: str | None) -> SizeargConfig:
        self.observed["env_file"] = env_file
        return self._config

    def create(self, action: str, config: SizeargConfig, **kwargs: object) -> FakeCommand:
        self.observed["action"] = action
        self.observed["config"] = config
        self.observed.update(kwargs)
        return FakeCommand(self._code)


def test_build_parser_accepts_all_actions(tmp_path: Path) -> None:
    parser = CliApplication(tmp_path).build_parser()

    for action in ["parse", "explain"]:
        args = parser.parse_args([action, "4K"])
        assert args.action == action
        assert args.values == ["4K"]
        assert args.env_file is None
        assert args.grammar is None
        assert args.word_bits is None
        assert args.value_files == []
        assert args.verbose is False


def test_build_parser_accepts_options(tmp_path: Path) -> None:
    parser = CliApplication(tmp_path).build_parser()

    args = parser.parse_args(
        [
            "parse",
            "1k",
            "4m",
            "--grammar",
            "legacy",
            "--word-bits",
            "32",
            "--env-file",
            "/tmp/custom.env",
            "--from-file",
            "a.txt",
            "--from-file",
            "b.txt",
            "-v",
        ]
    )

    assert args.values == ["1k", "4m"]
    assert args.grammar == "legacy"
    assert args.word_bits == 32
    assert args.env_file == "/tmp/custom.env"
    assert args.value_files == ["a.txt", "b.txt"]
    assert args.verbose is True


@pytest.mark.parametrize("argv", [["convert", "4K"], ["parse", "--grammar", "iec"], ["parse", "--word-bits", "12"]])
def test_build_parser_rejects_bad_arguments(tmp_path: Path, argv: list[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        CliApplication(tmp_path).build_parser().parse_args(argv)

    assert exc.value.code == 2


def test_run_invokes_factory_and_command(tmp_path: Path, sample_config: SizeargConfig) -> None:
    app = CliApplication(tmp_path)
    factory = FakeFactory(sample_config, code=1)
    app._factory = factory  # type: ignore[assignment]

    result = app.run(["explain", "4K", "--grammar", "legacy", "--env-file", "/tmp/x.env"])

    assert result == 1
    assert factory.observed == {
        "env_file": "/tmp/x.env",
        "action": "explain",
        "config": sample_config,
        "values": ["4K"],
        "value_files": [],
        "grammar": "legacy",
    }


def test_run_word_bits_overrides_config(tmp_path: Path, sample_config: SizeargConfig) -> None:
    app = CliApplication(tmp_path)
    factory = FakeFactory(sample_config)
    app._factory = factory  # type: ignore[assignment]

    app.run(["parse", "1", "--word-bits", "16"])

    config = factory.observed["config"]
    assert isinstance(config, SizeargConfig)
    assert config.word_bits == 16
    assert sample_config.word_bits == 64


def test_run_configures_logging(
    tmp_path: Path,
    sample_config: SizeargConfig,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    levels: list[str] = []
    monkeypatch.setattr(cli_module, "configure_logging", levels.append)
    app = CliApplication(tmp_path)
    app._factory = FakeFactory(sample_config)  # type: ignore[assignment]

    app.run(["parse", "1"])
    app.run(["parse", "1", "--verbose"])

    assert levels == ["WARNING", "DEBUG"]


def test_run_logs_config_source(
    tmp_path: Path,
    sample_config: SizeargConfig,
    caplog: pytest.LogCaptureFixture,
) -> None:
    app = CliApplication(tmp_path)
    app._factory = FakeFactory(sample_config)  # type: ignore[assignment]

    with caplog.at_level(logging.DEBUG, logger="sizearg.cli"):
        app.run(["parse", "1"])

    assert f"Config from {sample_config.env_file}" in caplog.text
    assert str(sample_config.project_root) in caplog.text


def test_main_uses_project_root_and_runs(monkeypatch: pytest.MonkeyPatch) -> None:
    observed: dict[str, Path] = {}

    class AppStub:
        def __init__(self, project_root: Path) -> None:
            observed["project_root"] = project_root

        def run(self) -> int:
            return 13

    monkeypatch.setattr(cli_module, "CliApplication", AppStub)

    result = cli_module.main()

    assert result == 13
    assert observed["project_root"] == Path(cli_module.__file__).resolve().parent.parent


def test_cli_module_main_guard_executes(
    monkeypatch: pytest.MonkeyPatch,
    sample_config: SizeargConfig,
) -> None:
    observed: dict[str, object] = {}

    class FactorySpy:
        def __init__(self, project_root: Path) -> None:
            _ = project_root

        def load_config(self, env_file: str | None) -> SizeargConfig:
            observed["env_file"] = env_file
            return sample_config

        def create(self, action: str, config: SizeargConfig, **kwargs: object) -> FakeCommand:
            observed["action"] = action
            observed["values"] = kwargs["values"]
            return FakeCommand()

    monkeypatch.setattr(factory_module, "CommandFactory", FactorySpy)
    monkeypatch.setattr(sys, "argv", ["sizearg", "parse", "4K"])
    monkeypatch.delitem(sys.modules, "sizearg.cli", raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("sizearg.cli", run_name="__main__")

    assert exc.value.code == 0
    assert observed == {"env_file": None, "action": "parse", "values": ["4K"]}
