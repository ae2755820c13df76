from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class TagOutputRules(BaseModel):
    style: Literal["html", "xhtml"] = "html"
    title_placeholder: str = Field(default="%s", min_length=1)

    model_config = ConfigDict(extra="forbid")


class TagRules(BaseModel):
    tags: TagOutputRules = Field(default_factory=TagOutputRules)
    # camelCase page config shape, merged under every page
    defaults: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")
