import subprocess
from pathlib import Path

import pytest

from conftest import TRANSFER_T0, event_entry
from eventbind.abi_events import ContractAbi, load_abi
from eventbind.binding.builder import build_model
from eventbind.core.errors import FormatError, RenderError
from eventbind.rendering import renderer
from eventbind.rendering.renderer import format_go_source, gofmt_available, render_model, write_output


def test_render_builtin_template(erc20_abi: ContractAbi) -> None:
    model = build_model("token", ["Transfer", "MetadataSet"], erc20_abi)

    source = render_model(model)

    assert source.startswith("// Code generated by eventbind. DO NOT EDIT.")
    assert "package token\n" in source
    assert '\t"github.com/ethereum/go-ethereum/common"\n' in source
    assert '\t"math/big"\n' in source
    assert f'var TransferEventID = common.HexToHash("{TRANSFER_T0}")' in source
    assert "type Transfer struct {" in source
    assert '\tFrom common.Address `json:"from"`\n' in source
    assert '\tValue *big.Int `json:"value"`\n' in source
    assert '\tTokenURI string `json:"tokenURI"`\n' in source
    assert '\tData []byte `json:"_data"`\n' in source
    assert source.index("type Transfer struct") < source.index("type MetadataSet struct")


def test_render_custom_template(tmp_path: Path, transfer_only_abi: ContractAbi) -> None:
    template = tmp_path / "names.j2"
    template.write_text("{{ package }}:{% for e in events %}{{ e.name }}={{ e.arguments | length }}{% endfor %}")

    model = build_model("bindings", ["Transfer"], transfer_only_abi)

    assert render_model(model, template) == "bindings:Transfer=3"


def test_render_missing_template(tmp_path: Path, transfer_only_abi: ContractAbi) -> None:
    model = build_model("bindings", ["Transfer"], transfer_only_abi)

    with pytest.raises(RenderError):
        render_model(model, tmp_path / "missing.j2")


def test_render_undefined_variable(tmp_path: Path, transfer_only_abi: ContractAbi) -> None:
    template = tmp_path / "bad.j2"
    template.write_text("{{ events[0].nope }}")
    model = build_model("bindings", ["Transfer"], transfer_only_abi)

    with pytest.raises(RenderError):
        render_model(model, template)


def test_format_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(*args, **kwargs):
        return subprocess.CompletedProcess(args=["gofmt"], returncode=2, stdout="", stderr="<standard input>:1:1: expected 'package'")

    monkeypatch.setattr(renderer.subprocess, "run", fake_run)

    with pytest.raises(FormatError, match="expected 'package'"):
        format_go_source("not go")


@pytest.mark.skipif(not gofmt_available(), reason="gofmt not installed")
def test_gofmt_roundtrip(erc20_abi: ContractAbi) -> None:
    source = render_model(build_model("token", ["Transfer", "MetadataSet"], erc20_abi))

    formatted = format_go_source(source)

    assert "type Transfer struct" in formatted
    assert format_go_source(formatted) == formatted


def test_write_output_file(tmp_path: Path) -> None:
    out = tmp_path / "nested" / "events.go"

    write_output("package token\n", str(out))

    assert out.read_text() == "package token\n"


def test_write_output_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    write_output("package token\n", "-")

    assert capsys.readouterr().out == "package token\n"


def test_render_with_eventdata_wrapper(transfer_only_abi: ContractAbi) -> None:
    model = build_model("bindings", ["Transfer"], transfer_only_abi)

    source = render_model(model, eventdata=True)

    assert '\t"time"\n' in source
    assert '\t"math/big"\n' in source
    assert "type LogInfo struct {" in source
    assert "type Block struct {" in source
    assert "type Data[A any] struct {" in source
    assert source.index("type Transfer struct") < source.index("type Data[A any] struct")


def test_render_without_eventdata_wrapper(transfer_only_abi: ContractAbi) -> None:
    source = render_model(build_model("bindings", ["Transfer"], transfer_only_abi))

    assert "type LogInfo struct" not in source
    assert '"time"' not in source


def test_eventdata_name_clash() -> None:
    abi = load_abi([event_entry("Block", ("number", "uint256"))])
    model = build_model("bindings", ["Block"], abi)

    with pytest.raises(RenderError, match="clashes"):
        render_model(model, eventdata=True)
    assert "type Block struct" in render_model(model)
