"""Link processing statistics snapshot (UNO: single model)."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class LinkStats(BaseModel):
    """Totals accumulated while processing links.

    Attributes are snake_case; serialized names are camelCase
    (totalLinks, filesModified, linksByCategory). Either is accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_links: int = Field(0, description="Links observed across all processed files")
    files_modified: int = Field(0, description="Files whose content was changed")
    links_by_category: dict[str, int] = Field(
        default_factory=dict, description="Link counts keyed by transformation category"
    )
