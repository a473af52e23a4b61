"""Exported report — rendered file content ready to be sent as an attachment."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExportedFile:
    content: str
    media_type: str
    filename: str

    @property
    def content_disposition(self) -> str:
        return f'attachment; filename="{self.filename}"'
