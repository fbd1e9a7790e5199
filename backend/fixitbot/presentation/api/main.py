from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fixitbot.core.di.service_locator import ServiceLocator
from fixitbot.presentation.api.v1.catalog_router import router as catalog_router
from fixitbot.presentation.api.v1.chat_router import router as chat_router
from fixitbot.presentation.api.v1.detector_router import router as detector_router
from fixitbot.presentation.api.v1.estimate_router import router as estimate_router
from fixitbot.presentation.api.v1.report_router import router as report_router


app = FastAPI(title="FixItBot Backend", version="1.0.0")

_origins = [o.strip() for o in ServiceLocator.config().cors_allow_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def root():
    return {"status": "ok", "message": "FixItBot Backend running"}


app.include_router(estimate_router)
app.include_router(detector_router)
app.include_router(report_router)
app.include_router(chat_router)
app.include_router(catalog_router)
