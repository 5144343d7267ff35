"""Report configuration error."""


class ReportConfigError(Exception):
    """Raised when a configuration section for reports fails validation.

    Attributes:
        errors: One message per invalid field, relative to the section
        section: Name of the config section the errors refer to
    """

    def __init__(self, errors: list[str] | str, section: str = "report"):
        self.errors = [errors] if isinstance(errors, str) else list(errors)
        self.section = section
        details = "\n".join(f"  - {self.section}: {error}" for error in self.errors)
        super().__init__(f"Invalid '{self.section}' configuration ({len(self.errors)} error(s)):\n{details}")
