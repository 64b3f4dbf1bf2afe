"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ProjectConfig:
    """Bot credentials for one project, keyed by ``id``."""

    id: str
    bot_token: str
    channel_id: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProjectConfig":
        return cls(
            id=data.get("id"),
            bot_token=data.get("botToken", ""),
            channel_id=data.get("channelId", ""),
        )


@dataclass
class FileAttachment:
    filename: str
    content: str  # base64
    mime_type: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "FileAttachment":
        """Build from a request entry. Anything that is not an object yields an
        empty attachment, which fails on its own when decoded.
        """
        if not isinstance(data, dict):
            data = {}
        return cls(
            filename=data.get("filename"),
            content=data.get("content"),
            mime_type=data.get("mimeType"),
        )


@dataclass
class RelayRequest:
    """What a caller asked us to deliver."""

    project_id: Optional[str] = None
    message: Optional[str] = None
    files: List[FileAttachment] = field(default_factory=list)


@dataclass
class OutcomeItem:
    """Result of one send attempt (the message or a single file)."""

    type: str  # "message" | "file"
    filename: Optional[str] = None
    result: Any = None
    error: Optional[str] = None

    @classmethod
    def for_message(cls, result: Any) -> "OutcomeItem":
        return cls(type="message", result=result)

    @classmethod
    def for_file(cls, filename: str, result: Any) -> "OutcomeItem":
        return cls(type="file", filename=filename, result=result)

    @classmethod
    def for_file_error(cls, filename: str, error: str) -> "OutcomeItem":
        return cls(type="file", filename=filename, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type}
        if self.type == "file":
            data["filename"] = self.filename
        if self.error is not None:
            data["error"] = self.error
        else:
            data["result"] = self.result
        return data
