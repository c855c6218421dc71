from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from proofline.core.config import MAX_UPLOAD_BYTES

class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        cl = request.headers.get("content-length")
        if cl is not None:
            try:
                too_large = int(cl) > MAX_UPLOAD_BYTES
            except ValueError:
                return JSONResponse({"detail": "Bad Content-Length"}, status_code=400)
            if too_large:
                return JSONResponse({"detail": "Request body too large"}, status_code=413)
        return await call_next(request)
