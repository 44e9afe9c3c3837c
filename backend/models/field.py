"""Field definition and descriptor models."""

from __future__ import annotations

from typing import Annotated, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys for API clients."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TextFieldDefinition(CamelModel):
    """Free text question answered with a single string."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    name: str = Field(..., min_length=1)
    label: str
    placeholder: str = ""
    mutable: bool = True
    regex: str = ".+"


class SelectFieldDefinition(CamelModel):
    """Question answered by choosing one of a fixed set of options."""

    model_config = ConfigDict(frozen=True)

    type: Literal["select"] = "select"
    name: str = Field(..., min_length=1)
    label: str
    options: Tuple[str, ...] = ()
    mutable: bool = True


FieldDefinition = Annotated[Union[TextFieldDefinition, SelectFieldDefinition], Field(discriminator="type")]


class TextFieldDescriptor(TextFieldDefinition):
    value: str = ""
    event_id: str


class SelectFieldDescriptor(SelectFieldDefinition):
    value: str = ""
    event_id: str


FieldDescriptor = Annotated[Union[TextFieldDescriptor, SelectFieldDescriptor], Field(discriminator="type")]


class FieldStore(CamelModel):
    """Fields an event needs from the caller, with any values already on file."""

    event_id: str
    fields: List[FieldDescriptor] = Field(default_factory=list)
