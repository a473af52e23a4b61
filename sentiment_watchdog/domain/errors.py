"""Domain errors surfaced at the HTTP boundary."""


class WatchdogError(Exception):
    """Base class for errors the API translates into client responses."""


class MissingFieldError(WatchdogError):
    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"{field_name} is required")


class UnsupportedFormatError(WatchdogError):
    def __init__(self, fmt: str | None):
        self.format = fmt
        super().__init__("Unsupported format")
