from pydantic import BaseModel, Field, field_validator, model_validator


class PromptResponseIn(BaseModel):
    prompt: str = ""
    response: str = ""


class CompetitorIn(BaseModel):
    """Competitor as entered; ``tracked_name`` falls back to ``display_name``."""

    display_name: str = Field(default="", max_length=255)
    tracked_name: str = Field(default="", max_length=255)

    @field_validator("display_name", "tracked_name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()

    @model_validator(mode="after")
    def default_tracked_name(self) -> "CompetitorIn":
        if not self.tracked_name:
            self.tracked_name = self.display_name
        if not self.tracked_name:
            raise ValueError("tracked_name or display_name is required")
        return self


class AnalysisRequest(BaseModel):
    """Everything the engine needs for one analysis run."""

    brand_name: str = Field(min_length=1, max_length=255)
    country: str = ""
    competitors: list[CompetitorIn] = Field(default_factory=list)  # order is significant
    responses: list[PromptResponseIn] = Field(default_factory=list)

    @field_validator("brand_name")
    @classmethod
    def clean_brand_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("brand_name must not be blank")
        return v


class BrandMetricSchema(BaseModel):
    name: str
    display_name: str = ""
    sentiment: int = Field(ge=1, le=100)
    position: int = Field(ge=0)
    visibility: float = Field(ge=0.0, le=100.0)

    model_config = {"from_attributes": True}


class DomainCitationSchema(BaseModel):
    domain: str
    used: int = Field(default=1, ge=1)
    avg_citations: float = 0.0
    type: str = "unknown"

    model_config = {"from_attributes": True}


class AnalysisResultSchema(BaseModel):
    prompt: str
    response: str
    country: str = ""
    tags: list[str] = Field(default_factory=list)
    sentiment: int
    position: int
    visibility: float
    mentions: dict[str, int] = Field(default_factory=dict)
    domains: list[DomainCitationSchema] = Field(default_factory=list)
    word_volume: int = Field(ge=0)
    brands: list[BrandMetricSchema] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class BrandOverviewSchema(BaseModel):
    brand_name: str
    avg_visibility: float
    avg_position: float
    avg_sentiment: float
    responses: int = 0

    model_config = {"from_attributes": True}
