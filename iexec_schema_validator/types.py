"""
Field types shared by the iExec schemas.

Each custom rule is a plain predicate from utils wrapped in an AfterValidator,
so a failing field reports a stable error code and message.
"""
from typing import Annotated, Callable, Dict

from pydantic import AfterValidator, BeforeValidator, Field, StrictStr
from pydantic_core import PydanticCustomError

from .utils import is_bytes32, is_eth_address, is_iso_date, is_semver

# Largest integer a JSON number can hold without losing precision
MAX_SAFE_INTEGER = 2 ** 53 - 1

DESCRIPTION_MIN_LENGTH = 150
DESCRIPTION_MAX_LENGTH = 2000


def _rule(predicate: Callable[[str], bool], code: str, message: str) -> AfterValidator:
    def check(value: str) -> str:
        if not predicate(value):
            raise PydanticCustomError(code, message, {"value": value})
        return value
    return AfterValidator(check)


NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]

EthAddress = Annotated[
    NonEmptyStr,
    _rule(is_eth_address, "string.ethaddress", "needs to be a valid ethereum address"),
]
Bytes32 = Annotated[
    NonEmptyStr,
    _rule(is_bytes32, "string.bytes32", "needs to be a valid bytes32 hexString"),
]
SemVer = Annotated[
    NonEmptyStr,
    _rule(is_semver, "string.semver", "needs to be a valid semver version"),
]
IsoDate = Annotated[
    NonEmptyStr,
    _rule(is_iso_date, "string.isoDate", "must be a valid ISO 8601 date"),
]

Description = Annotated[
    StrictStr,
    Field(min_length=DESCRIPTION_MIN_LENGTH, max_length=DESCRIPTION_MAX_LENGTH),
]
RegistryName = Annotated[StrictStr, Field(min_length=1, max_length=40)]


def _reject_bool(value):
    # bool is an int subclass
    if isinstance(value, bool):
        raise PydanticCustomError("number.base", "must be a number")
    return value


# Numeric strings are still converted
Integer = Annotated[int, BeforeValidator(_reject_bool)]

Trust = Annotated[Integer, Field(ge=0, le=MAX_SAFE_INTEGER)]
NonNegativeInt = Annotated[Integer, Field(gt=-1)]

AddressMap = Dict[str, EthAddress]
