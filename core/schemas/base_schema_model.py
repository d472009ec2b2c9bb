"""Base pydantic model shared by every request and response schema."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchemaModel(BaseModel):
    """Base pydantic model with the API's wire conventions.

    Fields are snake_case in Python and camelCase on the wire; either form
    is accepted on input. Responses are dumped with ``by_alias=True``.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
        str_strip_whitespace=True,
    )
