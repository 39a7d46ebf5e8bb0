"""
Legacy marketplace shapes: flat app/workerPool objects priced on-chain,
JWT based account file and chain config without SMS or gateways.
"""
from typing import Literal

from pydantic import Field

from ..types import NonEmptyStr, NonNegativeInt
from .base import AUTHORSHIP_FIELDS, DESCRIPTOR_FIELDS, StrictModel, compose
from .common import chains_conf_schema


class AppParams(StrictModel):
    type: Literal["DOCKER"]
    envvars: NonEmptyStr = None


class App(StrictModel):
    name: NonEmptyStr
    price: NonNegativeInt
    params: AppParams


class Dataset(StrictModel):
    name: NonEmptyStr
    price: NonNegativeInt
    uri: NonEmptyStr = None


class WorkerPool(StrictModel):
    description: NonEmptyStr
    subscription_lock_stake_policy: NonNegativeInt = Field(..., alias="subscriptionLockStakePolicy")
    subscription_minimum_stake_policy: NonNegativeInt = Field(..., alias="subscriptionMinimumStakePolicy")
    subscription_minimum_score_policy: NonNegativeInt = Field(..., alias="subscriptionMinimumScorePolicy")


DappDescriptor = compose(
    "LegacyDappDescriptor",
    DESCRIPTOR_FIELDS,
    AUTHORSHIP_FIELDS,
    app=(App, ...),
)

DatasetDescriptor = compose(
    "LegacyDatasetDescriptor",
    DESCRIPTOR_FIELDS,
    AUTHORSHIP_FIELDS,
    dataset=(Dataset, ...),
)

PoolDescriptor = compose(
    "LegacyPoolDescriptor",
    DESCRIPTOR_FIELDS,
    worker_pool=(WorkerPool, Field(..., alias="workerPool")),
)


class ChainConf(StrictModel):
    host: NonEmptyStr
    id: NonEmptyStr
    hub: NonEmptyStr = None


ChainsConf = chains_conf_schema(ChainConf, "LegacyChainsConf")


class AccountConf(StrictModel):
    """Marketplace account file holding the session JWT."""
    jwtoken: NonEmptyStr
