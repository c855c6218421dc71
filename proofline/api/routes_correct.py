from fastapi import APIRouter, HTTPException
from proofline.models.correction import CorrectRequest, CorrectionFailure, CorrectionSuccess
from proofline.services.engine import correct

router = APIRouter(tags=["correct"])

@router.post("/correct", response_model=CorrectionSuccess)
def correct_text(req: CorrectRequest):
    outcome = correct(req.text, mode=req.mode)
    if isinstance(outcome, CorrectionFailure):
        raise HTTPException(status_code=400, detail=outcome.reason)
    return outcome
