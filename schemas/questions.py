# schemas/questions.py
#
# One immutable record per question slot. The `topic` field is the tag of
# the Question union, so a question can travel to the client and come back
# to /mark unchanged.
from __future__ import annotations

from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class TopicOut(_Frozen):
    id: str
    name: str
    description: str
    icon: str


class Option(_Frozen):
    value: Union[int, str]
    label: str


class ColumnStep(_Frozen):
    place: str
    digit_a: int
    digit_b: int
    carry_in: int  # carry (addition) or borrow (subtraction) coming in
    result: int
    carry_out: int
    label: str
    expr: str


class ArithmeticQuestion(_Frozen):
    topic: Literal["arithmetic"] = "arithmetic"
    a: int
    b: int
    op: Literal["+", "-", "×", "÷"]
    answer: int
    hint: Tuple[str, ...] = ()


class OrderOfOpsQuestion(_Frozen):
    topic: Literal["orderOfOps"] = "orderOfOps"
    shape: int
    expression: str
    answer: int
    hint: Tuple[str, ...] = ()


class DecimalQuestion(_Frozen):
    topic: Literal["decimalStructure"] = "decimalStructure"
    kind: Literal["decompose", "compose", "digitValue", "compare"]
    number: int
    thousands: int
    hundreds: int
    tens: int
    ones: int
    prompt: str
    answer: int
    options: Optional[Tuple[Option, ...]] = None
    hint: Tuple[str, ...] = ()


class DistributionQuestion(_Frozen):
    topic: Literal["distribution"] = "distribution"
    two_digit: int
    one_digit: int
    tens: int
    ones: int
    tens_product: int
    ones_product: int
    answer: int
    hint: Tuple[str, ...] = ()


class TriangleQuestion(_Frozen):
    topic: Literal["triangles"] = "triangles"
    points: Tuple[Tuple[int, int], Tuple[int, int], Tuple[int, int]]
    sides: Tuple[int, int, int]
    angles: Tuple[int, int, int]
    angle_type: Literal["acute", "right", "obtuse"]
    side_type: Literal["equilateral", "isosceles", "scalene"]
    mode: Literal["angles", "sides"]
    answer: str
    options: Tuple[Option, ...] = ()
    hint: Tuple[str, ...] = ()


class VerticalMathQuestion(_Frozen):
    topic: Literal["verticalMath"] = "verticalMath"
    a: int
    b: int
    op: Literal["+", "-"]
    answer: int
    mode: Literal["horizontal", "vertical"]
    has_carry: bool
    steps: Tuple[ColumnStep, ...] = ()
    hint: Tuple[str, ...] = ()


Question = Annotated[
    Union[
        ArithmeticQuestion,
        OrderOfOpsQuestion,
        DecimalQuestion,
        DistributionQuestion,
        TriangleQuestion,
        VerticalMathQuestion,
    ],
    Field(discriminator="topic"),
]
