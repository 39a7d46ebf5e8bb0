"""
Schemas whose shape is the same in every marketplace version.
"""
import re
from typing import Annotated, Dict

from pydantic import AfterValidator, Field, RootModel
from pydantic_core import PydanticCustomError

from ..types import (
    AddressMap,
    Description,
    EthAddress,
    Integer,
    IsoDate,
    NonEmptyStr,
    RegistryName,
    SemVer,
)
from .base import FieldSet, StrictModel, compose

DEPLOYED_OBJECT_KEY_REGEX = re.compile(r"(app|dataset|workerpool)", re.IGNORECASE)


REGISTRY_ENTRY_FIELDS: FieldSet = {
    "name": (RegistryName, None),
    "org": (RegistryName, ...),
    "created": (IsoDate, ...),
    "rank": (Integer, None),
}

RegistryEntry = compose("RegistryEntry", REGISTRY_ENTRY_FIELDS)


class PartnerSocial(StrictModel):
    website: NonEmptyStr = None
    github: NonEmptyStr = None
    linkedin: NonEmptyStr = None
    twitter: NonEmptyStr = None
    medium: NonEmptyStr = None


Partner = compose(
    "Partner",
    REGISTRY_ENTRY_FIELDS,
    description=(Description, ...),
    logo=(NonEmptyStr, ...),
    license=(NonEmptyStr, None),
    social=(PartnerSocial, ...),
    type=(NonEmptyStr, ...),
    link=(NonEmptyStr, None),
    button_text=(NonEmptyStr, Field(None, alias="buttonText")),
    theme=(NonEmptyStr, None),
    button=(bool, None),
)


class WalletConf(StrictModel):
    """Keystore-less wallet file; only the presence of each key is checked."""
    private_key: NonEmptyStr = Field(..., alias="privateKey")
    public_key: NonEmptyStr = Field(..., alias="publicKey")
    address: NonEmptyStr


def _check_deployed_object_key(key: str) -> str:
    if not DEPLOYED_OBJECT_KEY_REGEX.fullmatch(key):
        raise PydanticCustomError(
            "object.allowUnknown",
            "is not allowed, expected one of app, dataset, workerpool",
        )
    return key


DeployedObjectKey = Annotated[str, AfterValidator(_check_deployed_object_key)]


class DeployedConf(RootModel[Dict[DeployedObjectKey, AddressMap]]):
    """
    Deployed objects per type, e.g. {"app": {"<chainId>": "<address>"}}.

    Type keys are matched case-insensitively.
    """
    pass


class GithubMeta(StrictModel):
    repo: NonEmptyStr
    version: SemVer
    updated_at: IsoDate = Field(..., alias="updatedAt")
    owner: EthAddress = None


class FileDBEntry(StrictModel):
    """Entry of the file based registry database."""
    name: RegistryName
    version: SemVer
    updated_at: IsoDate = Field(..., alias="updatedAt")
    addresses: AddressMap
    github: GithubMeta = None


def chains_conf_schema(chain_conf: type, name: str):
    """
    Build the chains file schema around one version of the chain schema.

    Args:
        chain_conf: Chain config model used for every entry of "chains"
        name: Model name

    Returns:
        StrictModel subclass with "default" and a required, non-empty "chains" map
    """
    return compose(
        name,
        default=(NonEmptyStr, None),
        chains=(Annotated[Dict[str, chain_conf], Field(min_length=1)], ...),
    )
