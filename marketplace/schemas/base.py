from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# 👇 Shared base: snake_case in Python, camelCase on the wire
class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
