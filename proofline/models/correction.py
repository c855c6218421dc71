from pydantic import BaseModel, Field
from typing import Dict, List, Literal, Optional, Union

Category = Literal["grammar", "spelling", "punctuation", "style", "clarity"]
Severity = Literal["error", "warning", "suggestion"]
Mode = Literal["basic", "extended"]
StyleType = Literal["clarity", "conciseness", "engagement", "formality"]

class CorrectionError(BaseModel):
    id: str
    type: Category
    severity: Severity
    rule: Optional[str] = None
    original: str
    suggestion: str
    explanation: str
    start: int = Field(ge=0)
    end: int = Field(gt=0)

class StyleSuggestion(BaseModel):
    type: StyleType
    original: str
    suggestion: str
    explanation: str
    start: int
    end: int

class AdvancedStats(BaseModel):
    sentence_complexity: int
    vocabulary_level: Literal["Elementary", "Intermediate", "Advanced"]
    tone: Literal["Casual", "Professional", "Formal", "Academic"]
    formality_score: int
    clarity_score: int
    engagement_score: int
    readability: dict

class CorrectionResult(BaseModel):
    original: str
    corrected: str
    errors: List[CorrectionError]
    improvements: List[str] = Field(default_factory=list)
    readability_score: int = Field(ge=0, le=100)
    score: int = Field(ge=0, le=100)
    totals: Dict[str, int] = Field(default_factory=dict)
    mode: Mode = "basic"
    style_suggestions: Optional[List[StyleSuggestion]] = None
    advanced_stats: Optional[AdvancedStats] = None

class CorrectionSuccess(BaseModel):
    status: Literal["ok"] = "ok"
    result: CorrectionResult
    warnings: List[str] = Field(default_factory=list)

class CorrectionFailure(BaseModel):
    status: Literal["rejected"] = "rejected"
    reason: str
    errors: List[str]

CorrectionOutcome = Union[CorrectionSuccess, CorrectionFailure]

class CorrectRequest(BaseModel):
    text: str
    mode: Mode = "basic"
