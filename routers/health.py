# routers/health.py
from fastapi import APIRouter

from bank import QuestionBank

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health():
    return {"ok": True, "topics": QuestionBank.topics()}
