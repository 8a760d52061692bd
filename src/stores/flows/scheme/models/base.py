from pydantic import BaseModel, ConfigDict

class FlowModel(BaseModel):
    """Base for flow payloads: snake_case attributes, camelCase on the wire."""
    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
