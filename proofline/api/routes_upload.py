import os
from fastapi import APIRouter, UploadFile, File
from proofline.models.validation import UploadResult
from proofline.services.extract import extract_text
from proofline.services.validation import sanitize, validate
from proofline.utils.uploads import read_upload

router = APIRouter(tags=["upload"])

@router.post("/upload", response_model=UploadResult)
async def upload(file: UploadFile = File(...)):
    path = await read_upload(file)
    try:
        text = sanitize(extract_text(path))
    finally:
        os.remove(path)
    return UploadResult(filename=file.filename or "", text=text, validation=validate(text))
