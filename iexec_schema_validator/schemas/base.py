"""
Base model and shape composition for the iExec schemas.
"""
from typing import Any, Dict, Tuple, Type

from pydantic import BaseModel, ConfigDict, create_model

from ..types import AddressMap, Description, NonEmptyStr

# Field name -> (type, default) as accepted by pydantic.create_model
FieldSet = Dict[str, Tuple[Any, Any]]


class StrictModel(BaseModel):
    """
    Model rejecting keys that are not declared in the shape.

    Optional keys are declared with their plain type and a None default:
    defaults are not validated, so an absent key passes while an explicit
    null is still a violation.
    """

    model_config = ConfigDict(extra="forbid")


def compose(name: str, *field_sets: FieldSet, **fields: Tuple[Any, Any]) -> Type[StrictModel]:
    """
    Build a schema from copies of existing field sets plus extra fields.

    Later definitions override earlier ones, so a kind can both extend a base
    shape and redefine one of its fields.

    Args:
        name: Model name, shown in pydantic error titles
        *field_sets: Field sets to copy, in order
        **fields: Kind-specific fields added last

    Returns:
        New StrictModel subclass holding the merged fields
    """
    merged: FieldSet = {}
    for field_set in field_sets:
        merged.update(field_set)
    merged.update(fields)
    return create_model(name, __base__=StrictModel, **merged)


class Social(StrictModel):
    website: NonEmptyStr = None
    github: NonEmptyStr = None


# Fields every app/dataset/workerpool descriptor starts from
DESCRIPTOR_FIELDS: FieldSet = {
    "type": (NonEmptyStr, None),
    "description": (Description, ...),
    "logo": (NonEmptyStr, ...),
    "social": (Social, ...),
    "addresses": (AddressMap, None),
    "repo": (NonEmptyStr, None),
}

AUTHORSHIP_FIELDS: FieldSet = {
    "license": (NonEmptyStr, ...),
    "author": (NonEmptyStr, ...),
}
