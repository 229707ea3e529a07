from pathlib import Path
from typing import Any

import pytest

from eventbind.abi_events import ContractAbi, load_abi

ABI_DIR = Path(__file__).parent / "abi"

TRANSFER_T0 = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
APPROVAL_T0 = "0x8c5be1e5ebec7d5bd14f71427d1e84f3dd0314c0f7b2291e5b200ac8c7c3b925"


def event_entry(name: str, *inputs: tuple[str, str]) -> dict[str, Any]:
    """Minimal ABI event entry from (name, type) pairs."""
    return {
        "type": "event",
        "name": name,
        "anonymous": False,
        "inputs": [{"name": n, "type": t, "indexed": False} for n, t in inputs],
    }


@pytest.fixture
def erc20_abi_path() -> Path:
    return ABI_DIR / "erc20_abi.json"


@pytest.fixture
def erc20_abi(erc20_abi_path: Path) -> ContractAbi:
    return load_abi(erc20_abi_path)


@pytest.fixture
def transfer_only_abi() -> ContractAbi:
    entries = [event_entry("Transfer", ("from", "address"), ("to", "address"), ("value", "uint256"))]
    return load_abi(entries, source_name="Transfer.json")


@pytest.fixture
def write_config(tmp_path: Path, erc20_abi_path: Path):
    """Write a config file (plus a copy of the ERC20 ABI) into tmp_path."""

    def _write(body: str, name: str = "eventbind.yaml") -> Path:
        (tmp_path / "erc20_abi.json").write_text(erc20_abi_path.read_text())
        path = tmp_path / name
        path.write_text(body)
        return path

    return _write
