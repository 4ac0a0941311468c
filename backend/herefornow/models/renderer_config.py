"""Token metadata configuration supplied by the caller."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_NAME = "Here, For Now"
DEFAULT_DESCRIPTION = (
    "Here, For Now is a shared intimate space held by a single collector.\n\n"
    "Anyone can enter the space through a small onchain act of presence, adding "
    "themselves to the moment and shaping the image for as long as they choose to "
    "remain.\n\n"
    "The work reflects the brief overlaps of the people who were here at the same time."
)
DEFAULT_AUTHOR = "ripe0x.eth"
DEFAULT_URLS = ["https://hfn.ripe.wtf"]


class RendererConfig(BaseModel):
    """Metadata fields and attribute labels. Strings are passed through as-is."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default=DEFAULT_NAME, description="Token display name")
    description: str = Field(default=DEFAULT_DESCRIPTION, description="Token description")
    author: str | None = Field(default=None, description="Artist/author credit")
    urls: list[str] = Field(default_factory=list, description="Related links")

    presence_trait: str = Field(default="Present Depositors")
    held_trait: str = Field(default="Total ETH Held")
    unit_label: str = Field(default="ETH")
