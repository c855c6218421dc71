from fastapi import FastAPI
from proofline.api.routes_correct import router as correct_router
from proofline.api.routes_analytics import router as analytics_router
from proofline.api.routes_validate import router as validate_router
from proofline.middleware.limits import BodySizeLimitMiddleware
from proofline.api.routes_upload import router as upload_router

app = FastAPI(title="proofline")

app.add_middleware(BodySizeLimitMiddleware)

@app.get("/health")
def health():
    return {"status": "ok"}

app.include_router(correct_router)
app.include_router(analytics_router)
app.include_router(validate_router)
app.include_router(upload_router)
