"""
iExec schema validator.

Validates marketplace records (apps, datasets, workerpools, registry entries,
chain/wallet/deployment files) and the primitive types they carry.
"""
from .exceptions import SchemaValidatorError, UnknownSchemaError, ValidationError
from .schemas import RecordKind, SchemaVersion, get_schema
from .utils import is_bytes32, is_checksum_address, is_eth_address, is_iso_date, is_semver
from .validator import (
    validate,
    validate_account_conf,
    validate_chain_conf,
    validate_chains_conf,
    validate_dapp,
    validate_dataset,
    validate_deployed_conf,
    validate_file_db,
    validate_github,
    validate_partner,
    validate_pool,
    validate_registry_entry,
    validate_wallet_conf,
    validate_workerpool,
)
from .version import __version__

__all__ = [
    "SchemaValidatorError",
    "UnknownSchemaError",
    "ValidationError",
    "RecordKind",
    "SchemaVersion",
    "get_schema",
    "is_bytes32",
    "is_checksum_address",
    "is_eth_address",
    "is_iso_date",
    "is_semver",
    "validate",
    "validate_account_conf",
    "validate_chain_conf",
    "validate_chains_conf",
    "validate_dapp",
    "validate_dataset",
    "validate_deployed_conf",
    "validate_file_db",
    "validate_github",
    "validate_partner",
    "validate_pool",
    "validate_registry_entry",
    "validate_wallet_conf",
    "validate_workerpool",
    "__version__",
]
