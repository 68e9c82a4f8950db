# topics/distribution.py
#
# Split multiplication: 23 × 4 = 20 × 4 + 3 × 4.
from __future__ import annotations

from typing import Optional

from rng import RandomSource, rand_int
from sampling import sample_until
from schemas.questions import DistributionQuestion

MAX_PRODUCT = 200


def generate_question(rng: Optional[RandomSource] = None) -> DistributionQuestion:
    two_digit, one_digit = sample_until(
        lambda: (rand_int(11, 29, rng), rand_int(2, 9, rng)),
        lambda pair: pair[0] * pair[1] <= MAX_PRODUCT,
    )

    tens = (two_digit // 10) * 10
    ones = two_digit % 10
    tens_product = tens * one_digit
    ones_product = ones * one_digit
    answer = two_digit * one_digit

    return DistributionQuestion(
        two_digit=two_digit,
        one_digit=one_digit,
        tens=tens,
        ones=ones,
        tens_product=tens_product,
        ones_product=ones_product,
        answer=answer,
        hint=(
            f"{two_digit} = {tens} + {ones}",
            f"{tens} × {one_digit} = {tens_product}",
            f"{ones} × {one_digit} = {ones_product}",
            f"{tens_product} + {ones_product} = {answer}",
        ),
    )
