import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config

# Routers
from routers.health import router as health_router
from routers.marking import router as marking_router
from routers.questions import router as questions_router

logger = logging.getLogger("hebrew-maths")
logging.basicConfig(level=config.LOG_LEVEL)

app = FastAPI(title="Hebrew Maths Practice – Quiz API")

# Allow calls from the browser UI dev servers
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(questions_router)  # /topics, /questions/{topic}
app.include_router(marking_router)  # /evaluate, /mark, /mark-batch, /stars
app.include_router(health_router)  # /health
