from __future__ import annotations

import json
from pathlib import Path

import pytest

from blockstack_cli.cli.config import (
    NETWORKS,
    apply_option_overrides,
    default_config,
    default_config_path,
    load_config,
    network_from_options,
)
from blockstack_cli.errors import UnrecognizedNetworkError
from blockstack_cli.options import parse_cli_options


@pytest.mark.parametrize("network", NETWORKS)
def test_missing_file_returns_exact_defaults(tmp_path, network) -> None:
    config = load_config(tmp_path / "missing.json", network)
    assert config == default_config(network)


def test_mainnet_defaults() -> None:
    config = default_config("mainnet")
    assert config["api_url"] == "https://core.blockstack.org"
    assert config["node_url"] == "https://node.blockstack.org:6263"
    assert config["broadcast_service_url"] == "https://broadcast.blockstack.org"
    assert config["utxo_service_url"] == "https://blockchain.info"
    assert config["log_config"]["level"] == "warn"


def test_testnet_and_regtest_defaults() -> None:
    testnet = default_config("testnet")
    assert testnet["api_url"] == "http://testnet.blockstack.org:16268"
    assert testnet["log_config"]["level"] == "debug"

    regtest = default_config("regtest")
    assert regtest["utxo_service_url"] == "http://localhost:18332"
    assert regtest["log_config"]["level"] == "warn"


def test_defaults_are_fresh_copies() -> None:
    first = default_config("mainnet")
    first["api_url"] = "http://changed"
    first["log_config"]["level"] = "debug"
    second = default_config("mainnet")
    assert second["api_url"] == "https://core.blockstack.org"
    assert second["log_config"]["level"] == "warn"


def test_file_overlays_defaults_shallowly(tmp_path) -> None:
    config_path = tmp_path / "cli.conf"
    config_path.write_text(
        json.dumps({"api_url": "http://localhost:6270", "log_config": {"level": "info"}}),
        encoding="utf-8",
    )
    config = load_config(config_path, "mainnet")
    assert config["api_url"] == "http://localhost:6270"
    assert config["node_url"] == "https://node.blockstack.org:6263"
    assert config["log_config"] == {"level": "info"}


def test_file_may_add_unknown_keys(tmp_path) -> None:
    config_path = tmp_path / "cli.conf"
    config_path.write_text('{"extra_setting": 7}', encoding="utf-8")
    config = load_config(str(config_path), "testnet")
    assert config["extra_setting"] == 7
    assert config["api_url"] == "http://testnet.blockstack.org:16268"


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", '"just a string"', ""])
def test_malformed_file_is_silently_ignored(tmp_path, content) -> None:
    config_path = tmp_path / "cli.conf"
    config_path.write_text(content, encoding="utf-8")
    assert load_config(config_path, "regtest") == default_config("regtest")


def test_directory_path_is_silently_ignored(tmp_path) -> None:
    assert load_config(tmp_path, "mainnet") == default_config("mainnet")


def test_error_hook_receives_swallowed_failure(tmp_path) -> None:
    config_path = tmp_path / "cli.conf"
    config_path.write_text("{broken", encoding="utf-8")
    seen: list[tuple[Path, Exception]] = []

    config = load_config(config_path, "mainnet", on_error=lambda path, exc: seen.append((path, exc)))

    assert config == default_config("mainnet")
    assert len(seen) == 1
    assert seen[0][0] == config_path
    assert isinstance(seen[0][1], ValueError)


def test_none_path_returns_defaults() -> None:
    assert load_config(None, "mainnet") == default_config("mainnet")


def test_unrecognized_network_is_fatal(tmp_path) -> None:
    with pytest.raises(UnrecognizedNetworkError):
        load_config(tmp_path / "missing.json", "devnet")
    with pytest.raises(ValueError):
        default_config("MAINNET")


def test_network_selected_by_flags() -> None:
    assert network_from_options(parse_cli_options(["lookup"])) == "mainnet"
    assert network_from_options(parse_cli_options(["-t", "lookup"])) == "testnet"
    assert network_from_options(parse_cli_options(["-i", "lookup"])) == "regtest"
    assert network_from_options(parse_cli_options(["-i", "-t", "lookup"])) == "regtest"


def test_default_config_path_per_network(monkeypatch) -> None:
    monkeypatch.delenv("BLOCKSTACK_CLI_CONFIG", raising=False)
    assert default_config_path("mainnet").name == ".blockstack-cli.conf"
    assert default_config_path("testnet").name == ".blockstack-cli-testnet.conf"
    assert default_config_path("regtest").name == ".blockstack-cli-regtest.conf"


def test_env_overrides_default_config_path(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("BLOCKSTACK_CLI_CONFIG", str(tmp_path / "env.conf"))
    assert default_config_path("mainnet") == tmp_path / "env.conf"


def test_url_flags_override_config() -> None:
    options = parse_cli_options(["-H", "http://api.local", "-T", "http://tx.local", "lookup"])
    config = apply_option_overrides(default_config("mainnet"), options)
    assert config["api_url"] == "http://api.local"
    assert config["broadcast_service_url"] == "http://tx.local"
    assert config["node_url"] == "https://node.blockstack.org:6263"


def test_legacy_camel_case_keys_are_accepted(tmp_path) -> None:
    config_path = tmp_path / "cli.conf"
    config_path.write_text(
        json.dumps(
            {
                "blockstackAPIUrl": "http://localhost:6270",
                "blockstackNodeUrl": "http://localhost:6264",
                "broadcastServiceUrl": "http://localhost:6269",
                "utxoServiceUrl": "http://localhost:18332",
                "logConfig": {"level": "info"},
            }
        ),
        encoding="utf-8",
    )
    config = load_config(config_path, "mainnet")
    assert config["api_url"] == "http://localhost:6270"
    assert config["node_url"] == "http://localhost:6264"
    assert config["broadcast_service_url"] == "http://localhost:6269"
    assert config["utxo_service_url"] == "http://localhost:18332"
    assert config["log_config"] == {"level": "info"}
    assert "blockstackAPIUrl" not in config


def test_snake_case_key_wins_over_legacy_alias(tmp_path) -> None:
    config_path = tmp_path / "cli.conf"
    config_path.write_text(
        json.dumps({"api_url": "http://new.local", "blockstackAPIUrl": "http://old.local"}),
        encoding="utf-8",
    )
    assert load_config(config_path, "testnet")["api_url"] == "http://new.local"
