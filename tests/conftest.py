"""
Pytest fixtures for config store tests.
"""

import tomllib

import pytest

from cpconf.store import reset_config


FULL_CONFIG = """\
[API]
Port = 9085
MultiAddress = "/ip4/10.0.0.5/tcp/9085"
Domain = "*.node.example.com"
NodeName = "cp-node-01"
RedisUrl = "redis://127.0.0.1:6379"
RedisPassword = "s3cret"
WalletWhiteList = "https://example.com/whitelist.txt"

[UBI]
UbiTask = false
UbiEnginePk = "0xEngineKey"
UbiUrl = "https://ubi.example.com/v1"

[LOG]
CrtFile = "/etc/cp/server.crt"
KeyFile = "/etc/cp/server.key"

[HUB]
ServerUrl = "https://hub.example.com"
AccessToken = "hub-token"
WalletAddress = "0xWallet"
BalanceThreshold = 2.5
OrchestratorPk = "0xOrchestrator"
VerifySign = true

[MCS]
ApiKey = "mcs-key"
AccessToken = "mcs-token"
BucketName = "bucket"
Network = "polygon.mainnet"
FileCachePath = "/tmp/cache"

[Registry]
ServerAddress = "registry.example.com"
UserName = "user"
Password = "pass"

[RPC]
SWAN_TESTNET = "https://rpc-testnet.example.com"
SWAN_MAINNET = "https://rpc-mainnet.example.com"

[CONTRACT]
SWAN_CONTRACT = "0xToken"
SWAN_COLLATERAL_CONTRACT = "0xCollateral"
"""

STANDALONE_CONFIG = """\
[API]
MultiAddress = "/ip4/10.0.0.5/tcp/9085"
RedisUrl = "redis://127.0.0.1:6379"

[UBI]
UbiTask = true
UbiEnginePk = "0xEngineKey"
UbiUrl = "https://ubi.example.com/v1"

[HUB]

[RPC]
SWAN_TESTNET = "https://rpc-testnet.example.com"

[CONTRACT]
SWAN_CONTRACT = "0xToken"
SWAN_COLLATERAL_CONTRACT = "0xCollateral"
"""


@pytest.fixture(autouse=True)
def _clean_store():
    """Each test starts without a loaded config."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def repo(tmp_path):
    """Repository directory containing the full config.toml."""
    (tmp_path / "config.toml").write_text(FULL_CONFIG, encoding="utf-8")
    return tmp_path


@pytest.fixture
def standalone_repo(tmp_path):
    """Repository directory containing only the standalone-required keys."""
    (tmp_path / "config.toml").write_text(STANDALONE_CONFIG, encoding="utf-8")
    return tmp_path


@pytest.fixture
def full_raw():
    """Parsed full config as a plain dict."""
    return tomllib.loads(FULL_CONFIG)


@pytest.fixture
def standalone_raw():
    return tomllib.loads(STANDALONE_CONFIG)
