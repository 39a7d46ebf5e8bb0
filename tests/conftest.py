"""
Pytest fixtures for the iExec schema validator tests.
"""
import copy

import pytest

from iexec_schema_validator.config import SCHEMA_VERSION_ENV

# EIP-55 reference vectors
CHECKSUM_ADDRESS = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
CHECKSUM_ADDRESSES = [
    "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
    "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
    "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
    "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
]
LOWER_ADDRESS = "0x" + "ab12" * 10
BYTES32 = "0x" + "a" * 64
DESCRIPTION = "d" * 150


@pytest.fixture(autouse=True)
def _default_schema_version(monkeypatch):
    """Run every test against the built-in default schema version."""
    monkeypatch.delenv(SCHEMA_VERSION_ENV, raising=False)


def _descriptor(**fields):
    record = {
        "type": "APP",
        "description": DESCRIPTION,
        "logo": "logo.png",
        "social": {"website": "https://iex.ec", "github": "https://github.com/iExecBlockchainComputing"},
        "addresses": {"5": CHECKSUM_ADDRESS, "134": LOWER_ADDRESS},
        "repo": "https://github.com/iExecBlockchainComputing/iexec-apps",
    }
    record.update(fields)
    return record


@pytest.fixture
def buy_conf():
    return {
        "params": {"0": "--help"},
        "trust": 1,
        "tag": "0x" + "0" * 64,
        "callback": LOWER_ADDRESS,
    }


@pytest.fixture
def dapp(buy_conf):
    """Valid app descriptor in the current marketplace shape."""
    return _descriptor(
        license="MIT",
        author="iExec",
        app={
            "owner": CHECKSUM_ADDRESS,
            "name": "VanityGen",
            "type": "DOCKER",
            "multiaddr": "registry.hub.docker.com/iexechub/vanitygen:1.0.0",
            "checksum": BYTES32,
            "mrenclave": "",
        },
        buyConf=copy.deepcopy(buy_conf),
    )


@pytest.fixture
def dataset(buy_conf):
    """Valid dataset descriptor in the current marketplace shape."""
    return _descriptor(
        license="CC-BY-4.0",
        author="iExec",
        categories="Other",
        dataset={
            "owner": CHECKSUM_ADDRESS,
            "name": "my-dataset",
            "multiaddr": "/ipfs/QmW2WQi7j6c7UgJTarActp7tDNikE4B2qXtFCfLPdsgaTQ",
            "checksum": BYTES32,
        },
        dapps=[
            {"name": "VanityGen", "addresses": {"5": CHECKSUM_ADDRESS}, "buyConf": buy_conf},
            {"name": "Other app", "addresses": {"134": LOWER_ADDRESS}},
        ],
    )


@pytest.fixture
def workerpool():
    """Valid workerpool descriptor in the current marketplace shape."""
    return _descriptor(
        workerpool={"owner": CHECKSUM_ADDRESS, "description": "iExec main pool"},
    )


@pytest.fixture
def legacy_dapp():
    """Valid app descriptor in the legacy marketplace shape."""
    return _descriptor(
        license="MIT",
        author="iExec",
        app={
            "name": "VanityGen",
            "price": 0,
            "params": {"type": "DOCKER", "envvars": "XWDOCKERIMAGE=iexechub/vanitygen"},
        },
    )


@pytest.fixture
def legacy_dataset():
    return _descriptor(
        license="MIT",
        author="iExec",
        dataset={"name": "my-dataset", "price": 10, "uri": "https://example.com/data.zip"},
    )


@pytest.fixture
def legacy_pool():
    return _descriptor(
        workerPool={
            "description": "iExec legacy pool",
            "subscriptionLockStakePolicy": 0,
            "subscriptionMinimumStakePolicy": 10,
            "subscriptionMinimumScorePolicy": 0,
        },
    )


@pytest.fixture
def registry_entry():
    return {"name": "iExec", "org": "iExecBlockchainComputing", "created": "2019-06-12T10:00:00.000Z", "rank": 1}


@pytest.fixture
def partner(registry_entry):
    record = dict(registry_entry)
    record.update({
        "description": DESCRIPTION,
        "logo": "partner.png",
        "license": "MIT",
        "social": {
            "website": "https://iex.ec",
            "github": "https://github.com/iExecBlockchainComputing",
            "linkedin": "https://linkedin.com/company/iex-ec",
            "twitter": "https://twitter.com/iEx_ec",
            "medium": "https://medium.com/iex-ec",
        },
        "type": "Cloud provider",
        "link": "https://iex.ec",
        "buttonText": "Visit",
        "theme": "dark",
        "button": True,
    })
    return record


@pytest.fixture
def chain_conf():
    return {
        "host": "https://bellecour.iex.ec",
        "id": "134",
        "hub": LOWER_ADDRESS,
        "sms": "https://sms.bellecour.iex.ec",
        "ipfsGateway": "https://ipfs-gateway.v8-bellecour.iex.ec",
        "iexecGateway": "https://api.bellecour.iex.ec",
    }


@pytest.fixture
def github_meta():
    return {
        "repo": "https://github.com/iExecBlockchainComputing/iexec-apps",
        "version": "1.2.3",
        "updatedAt": "2019-06-12",
        "owner": CHECKSUM_ADDRESS,
    }
