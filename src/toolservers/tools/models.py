"""Tool input schemas, result shapes and discovery/response models."""

from enum import Enum
from typing import Annotated, Any, Literal, TypedDict

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter
from pydantic_core import PydanticCustomError

_URL_ADAPTER = TypeAdapter(AnyUrl)


class ToolName(str, Enum):
    """Closed set of tools served by this package."""

    CURL = "curl"
    SYSTEM_INFO = "systemInfo"
    SEND_NOTIFICATION = "sendNotification"


def _require_url(value: str) -> str:
    """Reject strings that do not parse as an absolute URL.

    The caller's string is kept verbatim; parsing is only a check.
    """
    try:
        _URL_ADAPTER.validate_python(value)
    except ValueError:
        raise PydanticCustomError("url_format", "Invalid url") from None
    return value


UrlString = Annotated[
    str,
    AfterValidator(_require_url),
    Field(json_schema_extra={"format": "uri"}),
]


# ---------------------------------------------------------------------------
# Input schemas
# ---------------------------------------------------------------------------

class ToolInput(BaseModel):
    """Base for tool argument schemas: strict types, unknown keys dropped."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)


class CurlOptions(ToolInput):
    url: UrlString = Field(description="The URL to make the request to")
    method: Literal["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"] = Field(
        default="GET", description="HTTP method to use"
    )
    headers: dict[str, str] | None = Field(
        default=None, description="HTTP headers to include in the request"
    )
    body: str | None = Field(
        default=None, description="Request body (for POST, PUT, PATCH requests)"
    )
    timeout: int = Field(
        default=30000,
        ge=0,
        le=300000,
        description="Request timeout in milliseconds (max 300000ms/5min)",
    )


class SystemInfoOptions(ToolInput):
    category: Literal["cpu", "memory", "disk", "network", "all"] = Field(
        description="Category of system information to retrieve"
    )


class NotificationOptions(ToolInput):
    title: str = Field(description="Title of the notification")
    message: str = Field(description="Content of the notification")
    sound: bool = Field(default=True, description="Whether to play a sound")


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class HttpCallResult(TypedDict):
    status: int
    statusText: str
    headers: dict[str, str]
    body: str


class CpuInfo(TypedDict):
    model: str
    cores: int | None


class MemoryInfo(TypedDict):
    total: str
    vmStat: str


class DiskInfo(TypedDict):
    diskInfo: str


class NetworkInfo(TypedDict):
    networkInfo: str


class AllSystemInfo(TypedDict):
    cpu: CpuInfo
    memory: MemoryInfo
    disk: DiskInfo
    network: NetworkInfo


SystemInfoResult = CpuInfo | MemoryInfo | DiskInfo | NetworkInfo | AllSystemInfo


class NotificationResult(TypedDict):
    success: bool
    message: str


# ---------------------------------------------------------------------------
# Discovery and response envelopes
# ---------------------------------------------------------------------------

class ToolSchema(BaseModel):
    """Schema for a tool definition as advertised to the host."""

    model_config = {"populate_by_name": True}

    name: str
    description: str
    inputSchema: dict[str, Any] = Field(alias="input_schema")


class TextContent(BaseModel):
    """A single text item of a tool response."""

    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    """Successful tool call response."""

    content: list[TextContent]
