from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config import CORS_ALLOW_ORIGINS, LOG_LEVEL
from guidance.routes import router as guidance_router
from profile_routes import router as profile_router

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logging.info("EduPath guidance API starting")

app = FastAPI(title="EduPath Guidance API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(guidance_router)
app.include_router(profile_router)


@app.get("/", tags=["meta"], summary="Service info")
def root():
    return {"service": "edupath-guidance", "docs": "/docs"}
