"""
Current marketplace shapes: nested app/dataset/workerpool objects,
buy configuration, categories and SMS/gateway chain fields.
"""
from typing import Any, List, Literal, get_args

from pydantic import Field, StrictStr

from ..types import AddressMap, Bytes32, EthAddress, NonEmptyStr, Trust
from .base import AUTHORSHIP_FIELDS, DESCRIPTOR_FIELDS, StrictModel, compose
from .common import chains_conf_schema

Category = Literal["Other"]
AppType = Literal["DOCKER"]

CATEGORIES = get_args(Category)
APP_TYPES = get_args(AppType)


class BuyConf(StrictModel):
    """Parameters used when buying an app or dataset on the marketplace."""
    # Any value, null included, but the key itself must be present
    params: Any = Field(...)
    trust: Trust = None
    tag: Bytes32 = None
    callback: EthAddress = None


class App(StrictModel):
    owner: EthAddress
    name: NonEmptyStr
    type: AppType = None
    multiaddr: NonEmptyStr
    checksum: Bytes32
    mrenclave: StrictStr = None


class Dataset(StrictModel):
    owner: EthAddress
    name: NonEmptyStr
    multiaddr: NonEmptyStr
    checksum: Bytes32


class CompatibleDapp(StrictModel):
    """App a dataset can be used with."""
    name: NonEmptyStr
    addresses: AddressMap
    buy_conf: BuyConf = Field(None, alias="buyConf")


class Workerpool(StrictModel):
    owner: EthAddress
    description: NonEmptyStr


DappDescriptor = compose(
    "DappDescriptor",
    DESCRIPTOR_FIELDS,
    AUTHORSHIP_FIELDS,
    app=(App, ...),
    buy_conf=(BuyConf, Field(..., alias="buyConf")),
)

DatasetDescriptor = compose(
    "DatasetDescriptor",
    DESCRIPTOR_FIELDS,
    AUTHORSHIP_FIELDS,
    categories=(Category, None),
    dataset=(Dataset, ...),
    dapps=(List[CompatibleDapp], None),
)

WorkerpoolDescriptor = compose(
    "WorkerpoolDescriptor",
    DESCRIPTOR_FIELDS,
    workerpool=(Workerpool, ...),
)


class ChainConf(StrictModel):
    host: NonEmptyStr
    id: NonEmptyStr
    hub: NonEmptyStr = None
    sms: NonEmptyStr = None
    ipfs_gateway: NonEmptyStr = Field(None, alias="ipfsGateway")
    iexec_gateway: NonEmptyStr = Field(None, alias="iexecGateway")


ChainsConf = chains_conf_schema(ChainConf, "ChainsConf")
