from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AuthModel(BaseModel):
    """
    Base model for auth service payloads

    Attributes are snake_case in Python and camelCase on the wire
    (device_id <-> deviceId). Both names are accepted on input. Keys the
    model does not declare are kept under their wire name.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, extra="allow"
    )

    def to_wire(self) -> dict:
        """JSON-ready dict using wire names, unset optionals omitted"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
