"""Request / response models for the analysis endpoints."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AnalysisMode(str, Enum):
    QUICK = "quick"
    DETAILED = "detailed"
    LLAVA = "llava"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalyzeRequest(_CamelModel):
    # data URL ("data:image/jpeg;base64,...") or a plain image URL
    image: Optional[str] = None
    # Sent by the web client; the route decides the mode
    analysis_type: Optional[str] = None


class QuickScanResult(_CamelModel):
    food_name: str
    calories: int = Field(ge=0)
    serving_size: str
    confidence: float = Field(ge=0, le=1)


class MarkdownResult(_CamelModel):
    markdown: str
    confidence: float = Field(ge=0, le=1)


class ErrorResponse(BaseModel):
    error: str
