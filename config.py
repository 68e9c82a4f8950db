from __future__ import annotations

import os

# Questions per quiz session
SESSION_LENGTH = int(os.getenv("QUIZ_SESSION_LENGTH", "10"))

# Hard cap for rejection-sampling loops in the topic generators
MAX_SAMPLING_ATTEMPTS = int(os.getenv("QUIZ_MAX_SAMPLING_ATTEMPTS", "10000"))

LOG_LEVEL = os.getenv("QUIZ_LOG_LEVEL", "INFO").upper()

_DEFAULT_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000"
CORS_ORIGINS = [
    o.strip() for o in os.getenv("QUIZ_CORS_ORIGINS", _DEFAULT_ORIGINS).split(",") if o.strip()
]
