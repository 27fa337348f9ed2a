"""Configuration helpers for the blockstack-cli front end."""

from __future__ import annotations

import copy
import json
import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable

from blockstack_cli.errors import UnrecognizedNetworkError
from blockstack_cli.options import ParsedOptions

MAINNET = "mainnet"
TESTNET = "testnet"
REGTEST = "regtest"
NETWORKS = (MAINNET, TESTNET, REGTEST)

CONFIG_PATH_ENV_VAR = "BLOCKSTACK_CLI_CONFIG"

DEFAULT_CONFIG_PATHS: Mapping[str, str] = MappingProxyType(
    {
        MAINNET: "~/.blockstack-cli.conf",
        TESTNET: "~/.blockstack-cli-testnet.conf",
        REGTEST: "~/.blockstack-cli-regtest.conf",
    }
)

LOG_CONFIG_DEFAULTS: Mapping[str, Any] = MappingProxyType(
    {
        "level": "warn",
        "handle_exceptions": True,
        "timestamp": True,
        "stringify": True,
        "colorize": True,
        "json": True,
    }
)

PUBLIC_TESTNET_HOST = "testnet.blockstack.org"

_NETWORK_DEFAULTS: Mapping[str, Mapping[str, Any]] = MappingProxyType(
    {
        MAINNET: MappingProxyType(
            {
                "api_url": "https://core.blockstack.org",
                "node_url": "https://node.blockstack.org:6263",
                "broadcast_service_url": "https://broadcast.blockstack.org",
                "utxo_service_url": "https://blockchain.info",
                "log_config": LOG_CONFIG_DEFAULTS,
            }
        ),
        TESTNET: MappingProxyType(
            {
                "api_url": f"http://{PUBLIC_TESTNET_HOST}:16268",
                "node_url": f"http://{PUBLIC_TESTNET_HOST}:16264",
                "broadcast_service_url": f"http://{PUBLIC_TESTNET_HOST}:16269",
                "utxo_service_url": f"http://{PUBLIC_TESTNET_HOST}:18332",
                "log_config": MappingProxyType({**LOG_CONFIG_DEFAULTS, "level": "debug"}),
            }
        ),
        REGTEST: MappingProxyType(
            {
                "api_url": "http://localhost:16268",
                "node_url": "http://localhost:16264",
                "broadcast_service_url": "http://localhost:16269",
                "utxo_service_url": "http://localhost:18332",
                "log_config": LOG_CONFIG_DEFAULTS,
            }
        ),
    }
)

# global flags that replace a loaded config setting
URL_OVERRIDE_FLAGS: Mapping[str, str] = MappingProxyType(
    {
        "H": "api_url",
        "I": "node_url",
        "T": "broadcast_service_url",
    }
)

# camelCase keys written by earlier releases of the CLI
CONFIG_KEY_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "blockstackAPIUrl": "api_url",
        "blockstackNodeUrl": "node_url",
        "broadcastServiceUrl": "broadcast_service_url",
        "utxoServiceUrl": "utxo_service_url",
        "logConfig": "log_config",
    }
)

ConfigErrorHook = Callable[[Path, Exception], None]


def _check_network(network: str) -> None:
    if network not in NETWORKS:
        raise UnrecognizedNetworkError(network)


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    return copy.deepcopy(value)


def default_config(network: str) -> dict[str, Any]:
    """Return a fresh, mutable copy of the built-in defaults for ``network``."""
    _check_network(network)
    return _thaw(_NETWORK_DEFAULTS[network])


def default_config_path(network: str) -> Path:
    _check_network(network)
    env_path = os.getenv(CONFIG_PATH_ENV_VAR)
    if env_path and env_path.strip():
        return Path(env_path.strip()).expanduser()
    return Path(DEFAULT_CONFIG_PATHS[network]).expanduser()


def network_from_options(options: ParsedOptions) -> str:
    if options.is_set("i"):
        return REGTEST
    if options.is_set("t"):
        return TESTNET
    return MAINNET


def _normalize_keys(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Rename legacy camelCase keys; a snake_case key wins over its alias."""
    normalized = {
        CONFIG_KEY_ALIASES[key]: value for key, value in payload.items() if key in CONFIG_KEY_ALIASES
    }
    normalized.update(
        {key: value for key, value in payload.items() if key not in CONFIG_KEY_ALIASES}
    )
    return normalized


def _read_overlay(path: Path) -> dict[str, Any]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"config file must contain a JSON object: {path}")
    return _normalize_keys(payload)


def load_config(
    config_file: str | Path | None,
    network: str,
    *,
    on_error: ConfigErrorHook | None = None,
) -> dict[str, Any]:
    """Load ``config_file`` over the built-in defaults for ``network``.

    The file is a JSON object whose top-level keys replace the defaults
    (shallow merge). A missing, unreadable or malformed file leaves the
    defaults untouched; ``on_error`` is the only place such failures surface.
    """
    config = default_config(network)
    if config_file is None:
        return config

    path = Path(config_file).expanduser()
    try:
        overlay = _read_overlay(path)
    except (OSError, ValueError) as exc:
        if on_error is not None:
            on_error(path, exc)
        return config

    config.update(overlay)
    return config


def apply_option_overrides(config: dict[str, Any], options: ParsedOptions) -> dict[str, Any]:
    for letter, key in URL_OVERRIDE_FLAGS.items():
        value = options.get(letter)
        if isinstance(value, str) and value:
            config[key] = value
    return config
