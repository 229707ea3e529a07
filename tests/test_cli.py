from pathlib import Path

import pytest
from click.testing import CliRunner

from conftest import TRANSFER_T0
from eventbind.cli import cli
from eventbind.rendering import renderer


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def no_gofmt(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(renderer.shutil, "which", lambda name: None)


def test_generate_to_stdout(runner: CliRunner, write_config, no_gofmt) -> None:
    config = write_config("abi: erc20_abi.json\nevents: [Transfer]\n")

    result = runner.invoke(cli, ["generate", str(config), "--no-format", "--quiet"])

    assert result.exit_code == 0, result.output
    assert "package bindings" in result.output
    assert TRANSFER_T0 in result.output
    assert "type Transfer struct" in result.output


def test_generate_to_file_with_overrides(runner: CliRunner, write_config, tmp_path: Path, no_gofmt) -> None:
    config = write_config("abi: erc20_abi.json\nevents: [Transfer, Approval]\n")
    template = tmp_path / "list.j2"
    template.write_text("{% for e in events %}{{ e.name }}\n{% endfor %}")
    out = tmp_path / "gen" / "events.txt"

    result = runner.invoke(
        cli,
        ["generate", str(config), "--template", str(template), "--package", "token", "-o", str(out)],
    )

    assert result.exit_code == 0, result.output
    assert out.read_text() == "Transfer\nApproval\n"
    assert "gofmt not found" in result.output
    assert "2 events" in result.output


def test_generate_unknown_event(runner: CliRunner, write_config, tmp_path: Path) -> None:
    config = write_config("abi: erc20_abi.json\nevents: [Transfer, Mint]\n")
    out = tmp_path / "events.go"

    result = runner.invoke(cli, ["generate", str(config), "-o", str(out)])

    assert result.exit_code == 1
    assert "Mint" in result.output
    assert "erc20_abi.json" in result.output
    assert not out.exists()


def test_generate_unsupported_type(runner: CliRunner, write_config) -> None:
    config = write_config("abi: erc20_abi.json\nevents: [FeeChanged]\n")

    result = runner.invoke(cli, ["generate", str(config)])

    assert result.exit_code == 1
    assert "uint16" in result.output
    assert "FeeChanged" in result.output


def test_generate_missing_config(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["generate", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 1
    assert "Error opening config file" in result.output


def test_events_listing(runner: CliRunner, erc20_abi_path: Path) -> None:
    result = runner.invoke(cli, ["events", str(erc20_abi_path)])

    assert result.exit_code == 0, result.output
    for name in ("Approval", "Transfer", "MetadataSet", "FeeChanged"):
        assert name in result.output


def test_generate_with_eventdata_flag(runner: CliRunner, write_config, no_gofmt) -> None:
    config = write_config("abi: erc20_abi.json\nevents: [Transfer]\n")

    plain = runner.invoke(cli, ["generate", str(config), "--no-format", "-q"])
    wrapped = runner.invoke(cli, ["generate", str(config), "--no-format", "-q", "--eventdata"])

    assert plain.exit_code == 0, plain.output
    assert wrapped.exit_code == 0, wrapped.output
    assert "type Data[A any] struct" not in plain.output
    assert "type Data[A any] struct" in wrapped.output
