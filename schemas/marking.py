# schemas/marking.py
from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel

from schemas.questions import Question

# ---------- Evaluate ----------


class EvaluateRequest(BaseModel):
    expr: str


class EvaluateResponse(BaseModel):
    ok: bool
    value: Optional[float] = None
    feedback: Optional[str] = None


# ---------- Mark single ----------


class DistributionSteps(BaseModel):
    # split of the two-digit factor, then the two partial products
    tens: Union[str, int]
    ones: Union[str, int]
    tens_product: Union[str, int]
    ones_product: Union[str, int]


class MarkRequest(BaseModel):
    question: Question
    answer: Union[str, int]
    # distribution questions only; `answer` is then the final sum
    steps: Optional[DistributionSteps] = None


class MarkResponse(BaseModel):
    ok: bool
    correct: bool
    score: int
    feedback: str
    expected: Optional[str] = None
    hint: Tuple[str, ...] = ()
    # per-stage results for staged questions (split, multiply, sum)
    stages: Optional[Dict[str, bool]] = None


# ---------- Mark batch ----------


class MarkBatchRequest(BaseModel):
    items: List[MarkRequest]


class MarkBatchResponse(BaseModel):
    ok: bool
    total: int
    correct: int
    stars: Optional[int] = None
    results: List[MarkResponse]


class StarsResponse(BaseModel):
    score: int
    total: int
    stars: int
