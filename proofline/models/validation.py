from pydantic import BaseModel, Field
from typing import List

class ValidationResult(BaseModel):
    is_valid: bool
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

class UploadResult(BaseModel):
    filename: str
    text: str
    validation: ValidationResult
