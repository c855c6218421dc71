from fastapi import APIRouter
from proofline.models.analytics import TextRequest
from proofline.models.validation import ValidationResult
from proofline.services.validation import sanitize, validate

router = APIRouter(tags=["validate"])

@router.post("/validate", response_model=ValidationResult)
def validate_text(req: TextRequest):
    return validate(req.text)

@router.post("/sanitize")
def sanitize_text(req: TextRequest):
    return {"text": sanitize(req.text)}
