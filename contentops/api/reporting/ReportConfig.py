"""Report configuration (UNO: single model)."""

from dataclasses import dataclass
from typing import Any

from .FormatOptions import FormatOptions
from .PathMode import PathMode
from .ReportConfigError import ReportConfigError

OUTPUT_FORMATS = ("summary", "json")
DEFAULT_OUTPUT_FORMAT = "summary"


@dataclass
class ReportConfig:
    """Report configuration loaded from config dict with validation."""

    output_format: str = DEFAULT_OUTPUT_FORMAT
    path_mode: PathMode | None = None
    dry_run: bool = False
    verbose: bool = False

    def _validate_output_format(self) -> list[str]:
        if self.output_format not in OUTPUT_FORMATS:
            return [
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)} "
                f"(found: {self.output_format!r})"
            ]
        return []

    def _validate_path_mode(self) -> list[str]:
        if self.path_mode is None:
            return []
        try:
            self.path_mode = PathMode(self.path_mode)
        except ValueError:
            return [
                f"path_mode must be one of {', '.join(m.value for m in PathMode)} "
                f"(found: {self.path_mode!r})"
            ]
        return []

    def _validate_flags(self) -> list[str]:
        errors: list[str] = []
        for name in ("dry_run", "verbose"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                errors.append(f"{name} must be a boolean (found: {type(value).__name__})")
        return errors

    def __post_init__(self):
        """Validate report configuration after initialization.

        Collects all validation errors and raises a single ReportConfigError.
        """
        errors: list[str] = []
        errors.extend(self._validate_output_format())
        errors.extend(self._validate_path_mode())
        errors.extend(self._validate_flags())

        if errors:
            raise ReportConfigError(errors)

    @classmethod
    def from_config(cls, cfg: dict[str, Any]) -> "ReportConfig":
        """Load report config from config dict.

        Missing section or keys fall back to defaults.

        Raises:
            ReportConfigError: If field values are invalid
        """
        report_cfg = cfg.get("report")
        if report_cfg is None:
            report_cfg = {}
        if not isinstance(report_cfg, dict):
            raise ReportConfigError([f"section must be a dict (found: {type(report_cfg).__name__})"])
        return cls(
            output_format=report_cfg.get("output_format", DEFAULT_OUTPUT_FORMAT),
            path_mode=report_cfg.get("path_mode"),
            dry_run=report_cfg.get("dry_run", False),
            verbose=report_cfg.get("verbose", False),
        )

    def to_format_options(self) -> FormatOptions:
        """Build rendering options; path mode stays unset when not configured."""
        return FormatOptions(path_mode=self.path_mode, dry_run=self.dry_run, verbose=self.verbose)
