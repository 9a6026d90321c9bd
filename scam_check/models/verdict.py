from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr
from pydantic.alias_generators import to_camel


RiskLevel = Literal["high", "medium", "low"]

REQUIRED_FIELDS: tuple[str, ...] = ("isScam", "confidence", "reasons", "riskLevel", "details")

REQUIRED_DETAIL_FIELDS: tuple[str, ...] = (
    "urgency",
    "moneyRequest",
    "personalInfo",
    "unnaturalInvitation",
    "fearAppeal",
    "suspiciousUrl",
    "suspiciousSender",
    "otherRisks",
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class AnalysisRequest(BaseModel):
    text: Optional[str] = Field(None, description="Raw text to analyze.")
    image: Optional[str] = Field(
        None,
        description="Image as a data URL (data:image/...;base64,...) or bare base64.",
    )


class CategoryDetail(_CamelModel):
    detected: StrictBool
    examples: list[StrictStr]


class ScamDetails(_CamelModel):
    urgency: CategoryDetail
    money_request: CategoryDetail
    personal_info: CategoryDetail
    unnatural_invitation: CategoryDetail
    fear_appeal: CategoryDetail
    suspicious_url: CategoryDetail
    suspicious_sender: CategoryDetail
    other_risks: CategoryDetail

    def items(self) -> list[tuple[str, CategoryDetail]]:
        """(camelCase key, detail) pairs in the fixed category order."""
        return [(to_camel(name), getattr(self, name)) for name in type(self).model_fields]


class ScamVerdict(_CamelModel):
    is_scam: StrictBool
    confidence: float = Field(ge=0.0, le=1.0)
    reasons: list[StrictStr]
    risk_level: RiskLevel
    details: ScamDetails


class ErrorResponse(BaseModel):
    error: str
    raw: Optional[str] = None
    missingFields: Optional[list[str]] = None
    missingDetailFields: Optional[list[str]] = None
