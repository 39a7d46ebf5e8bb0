"""
Validation entry points for the iExec marketplace records.

Every validate_* function takes the record and a strict flag:
- valid record: returns True
- invalid record, strict=True: raises ValidationError listing all violations
- invalid record, strict=False: returns False
"""
import logging
from typing import Any, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from .config import get_schema_version
from .exceptions import ValidationError
from .schemas import RecordKind, SchemaVersion, get_schema

logger = logging.getLogger(__name__)

VersionArg = Optional[Union[SchemaVersion, str]]


def validate(
    kind: Union[RecordKind, str],
    obj: Any,
    strict: bool = True,
    version: VersionArg = None,
) -> bool:
    """
    Validate a record against the schema of its kind.

    Args:
        kind: Record kind, e.g. RecordKind.DAPP or "dapp"
        obj: Record to validate, usually a dict loaded from JSON
        strict: Raise on failure instead of returning False
        version: Schema version; defaults to IEXEC_SCHEMA_VERSION or CURRENT

    Returns:
        True if the record is valid, False if invalid and not strict

    Raises:
        ValidationError: If the record is invalid and strict is True
        UnknownSchemaError: If the kind or version is unknown
    """
    if version is None:
        version = get_schema_version()
    schema = get_schema(kind, version)
    try:
        schema.model_validate(obj)
    except PydanticValidationError as e:
        logger.debug("validate() %s: %s", schema.__name__, e.errors())
        if strict:
            raise ValidationError.from_pydantic(e, kind=RecordKind(kind).value)
        return False
    return True


def _versioned(kind: RecordKind, doc: str):
    def validator(obj: Any, strict: bool = True, version: VersionArg = None) -> bool:
        return validate(kind, obj, strict=strict, version=version)
    validator.__name__ = f"validate_{kind.value}"
    validator.__doc__ = doc
    return validator


def _fixed(
    kind: RecordKind,
    doc: str,
    version: SchemaVersion = SchemaVersion.CURRENT,
    name: Optional[str] = None,
):
    def validator(obj: Any, strict: bool = True) -> bool:
        return validate(kind, obj, strict=strict, version=version)
    validator.__name__ = name or f"validate_{kind.value}"
    validator.__doc__ = doc
    return validator


validate_dapp = _versioned(RecordKind.DAPP, "Validate an app descriptor.")
validate_dataset = _versioned(RecordKind.DATASET, "Validate a dataset descriptor.")
validate_workerpool = _versioned(RecordKind.WORKERPOOL, "Validate a workerpool descriptor.")
validate_chain_conf = _versioned(RecordKind.CHAIN_CONF, "Validate a single chain configuration.")
validate_chains_conf = _versioned(RecordKind.CHAINS_CONF, "Validate a chains file (default + named chains).")

validate_pool = _fixed(
    RecordKind.WORKERPOOL,
    "Validate a workerPool descriptor in the legacy marketplace shape.",
    version=SchemaVersion.LEGACY,
    name="validate_pool",
)

validate_registry_entry = _fixed(RecordKind.REGISTRY_ENTRY, "Validate a registry entry.")
validate_partner = _fixed(RecordKind.PARTNER, "Validate a partner entry.")
validate_wallet_conf = _fixed(RecordKind.WALLET_CONF, "Validate a wallet file.")
validate_account_conf = _fixed(RecordKind.ACCOUNT_CONF, "Validate an account file (JWT).")
validate_deployed_conf = _fixed(RecordKind.DEPLOYED_CONF, "Validate a deployed objects file.")
validate_github = _fixed(RecordKind.GITHUB, "Validate GitHub metadata of a registry entry.")
validate_file_db = _fixed(RecordKind.FILE_DB, "Validate a file-db registry entry.")
