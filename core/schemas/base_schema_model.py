"""Shared pydantic base for the result payloads handed to the email service."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchemaModel(BaseModel):
    """Common model config for every schema in the app.

    Result structures handed to the email service are built from ORM rows
    (``from_attributes``) and serialized with camelCase keys. Strings are
    kept verbatim since message bodies are forwarded as written.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )
