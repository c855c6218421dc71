import os, tempfile
from fastapi import UploadFile, HTTPException
import magic
from proofline.core.config import MAX_UPLOAD_BYTES
from proofline.services.validation import validate_file

async def read_upload(file: UploadFile) -> str:
    """
    Spool an upload to a temporary file and check its extension, size and
    sniffed MIME type. Returns the temp path; the caller removes it.
    """
    _, ext = os.path.splitext(file.filename or "")
    ext = ext.lower()
    check = validate_file(file.filename or "", 0)
    if not check.is_valid:
        raise HTTPException(status_code=400, detail=check.errors[0])

    size = 0
    with tempfile.NamedTemporaryFile(delete=False, suffix=ext) as tmp:
        tmp_path = tmp.name
        while True:
            chunk = await file.read(1 << 20)  # 1 MB
            if not chunk:
                break
            size += len(chunk)
            if size > MAX_UPLOAD_BYTES:
                break
            tmp.write(chunk)

    mime = magic.Magic(mime=True)
    file_mime = mime.from_file(tmp_path) if size <= MAX_UPLOAD_BYTES else None
    check = validate_file(file.filename or "", size, file_mime)
    if not check.is_valid:
        os.remove(tmp_path)
        status = 413 if size > MAX_UPLOAD_BYTES else 400
        raise HTTPException(status_code=status, detail=check.errors[0])
    return tmp_path
