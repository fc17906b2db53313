"""Relation field type wire schemas (hash representation)."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class RelationHash(BaseModel):
    """Hash form of a relation value used for import/export and API payloads.

    Accepts 'destinationContentId' in JSON. The key is required; null marks
    an empty relation. Unknown keys are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    destination_content_id: StrictInt | StrictStr | None = Field(
        ..., alias="destinationContentId"
    )
