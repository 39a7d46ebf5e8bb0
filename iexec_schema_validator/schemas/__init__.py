"""
Schema registry for the iExec marketplace records.

Every record kind is registered once per schema version. Kinds whose shape
never changed point to the same model under both versions.
"""
from enum import Enum
from typing import Dict, Tuple, Type, Union

from pydantic import BaseModel

from ..exceptions import UnknownSchemaError
from . import current, legacy
from .common import DeployedConf, FileDBEntry, GithubMeta, Partner, RegistryEntry, WalletConf


class SchemaVersion(str, Enum):
    """Marketplace schema generations."""
    LEGACY = "v1"
    CURRENT = "v2"


class RecordKind(str, Enum):
    """Record kinds that can be validated."""
    REGISTRY_ENTRY = "registry_entry"
    DAPP = "dapp"
    DATASET = "dataset"
    WORKERPOOL = "workerpool"
    PARTNER = "partner"
    CHAIN_CONF = "chain_conf"
    CHAINS_CONF = "chains_conf"
    WALLET_CONF = "wallet_conf"
    ACCOUNT_CONF = "account_conf"
    DEPLOYED_CONF = "deployed_conf"
    GITHUB = "github"
    FILE_DB = "file_db"


_SHARED: Dict[RecordKind, Type[BaseModel]] = {
    RecordKind.REGISTRY_ENTRY: RegistryEntry,
    RecordKind.PARTNER: Partner,
    RecordKind.WALLET_CONF: WalletConf,
    RecordKind.ACCOUNT_CONF: legacy.AccountConf,
    RecordKind.DEPLOYED_CONF: DeployedConf,
    RecordKind.GITHUB: GithubMeta,
    RecordKind.FILE_DB: FileDBEntry,
}

SCHEMAS: Dict[Tuple[RecordKind, SchemaVersion], Type[BaseModel]] = {
    (RecordKind.DAPP, SchemaVersion.LEGACY): legacy.DappDescriptor,
    (RecordKind.DATASET, SchemaVersion.LEGACY): legacy.DatasetDescriptor,
    (RecordKind.WORKERPOOL, SchemaVersion.LEGACY): legacy.PoolDescriptor,
    (RecordKind.CHAIN_CONF, SchemaVersion.LEGACY): legacy.ChainConf,
    (RecordKind.CHAINS_CONF, SchemaVersion.LEGACY): legacy.ChainsConf,
    (RecordKind.DAPP, SchemaVersion.CURRENT): current.DappDescriptor,
    (RecordKind.DATASET, SchemaVersion.CURRENT): current.DatasetDescriptor,
    (RecordKind.WORKERPOOL, SchemaVersion.CURRENT): current.WorkerpoolDescriptor,
    (RecordKind.CHAIN_CONF, SchemaVersion.CURRENT): current.ChainConf,
    (RecordKind.CHAINS_CONF, SchemaVersion.CURRENT): current.ChainsConf,
}
for _kind, _model in _SHARED.items():
    for _version in SchemaVersion:
        SCHEMAS[(_kind, _version)] = _model

VERSIONED_KINDS = frozenset(
    kind for kind in RecordKind
    if SCHEMAS[(kind, SchemaVersion.LEGACY)] is not SCHEMAS[(kind, SchemaVersion.CURRENT)]
)


def get_schema(
    kind: Union[RecordKind, str],
    version: Union[SchemaVersion, str] = SchemaVersion.CURRENT,
) -> Type[BaseModel]:
    """
    Look up the model validating a record kind in a schema version.

    Args:
        kind: Record kind, as enum member or its value (e.g. "dapp")
        version: Schema version, as enum member or its value (e.g. "v1")

    Returns:
        Pydantic model class for the record

    Raises:
        UnknownSchemaError: If the kind or version is not known
    """
    try:
        kind = RecordKind(kind)
    except ValueError:
        raise UnknownSchemaError(f"Unknown record kind: {kind!r}")
    try:
        version = SchemaVersion(version)
    except ValueError:
        raise UnknownSchemaError(f"Unknown schema version: {version!r}")
    return SCHEMAS[(kind, version)]


__all__ = [
    "RecordKind",
    "SchemaVersion",
    "SCHEMAS",
    "VERSIONED_KINDS",
    "get_schema",
]
