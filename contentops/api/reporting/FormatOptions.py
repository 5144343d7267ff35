"""Options annotating a rendered report."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .PathMode import PathMode


class FormatOptions(BaseModel):
    """Run options shown alongside link statistics.

    Unset fields are left out of JSON output entirely.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid", validate_assignment=True)

    path_mode: PathMode | None = Field(None, description="How the run resolved link paths")
    dry_run: bool | None = Field(None, description="Run executed without writing file changes")
    verbose: bool | None = Field(None, description="Reserved detail level; does not change output")
