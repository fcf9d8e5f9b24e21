from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Tuple
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from buena_vista.truncation import truncation_pairs  # noqa: E402

CUSTOMER_FEEDBACK = (
    "Customer Feedback 2.0 - Harness the ideas of your customers. "
    "Build great products. Turn customers into champions."
)

USERVOICE_BLOCKS = (
    "Uservoice communities are the easiest way to turn customer feedback into action:",
    "Get Started Free accounts and trials. Sign up in 60 seconds.",
    "Join companies & organizations of all sizes that already depend on UserVoice for feedback.",
)


@pytest.fixture
def customer_feedback() -> str:
    return CUSTOMER_FEEDBACK


@pytest.fixture
def uservoice_blocks() -> List[str]:
    return list(USERVOICE_BLOCKS)


@pytest.fixture
def pairs() -> Callable[..., List[Tuple[str, str]]]:
    """Return ``truncation_pairs`` with options given as keyword arguments."""
    return lambda text, **options: truncation_pairs(text, options)
