"""
Shared fixtures for performance checks.

Generates synthetic narrative text for timing detection, including
adversarial passages that stress the name-tail grammar's backtracking.
"""

from __future__ import annotations

import random

import pytest

_NARRATION_TEMPLATES = [
    "The wind howled through the ancient corridors of the castle.",
    "A long silence filled the room, broken only by the ticking of the clock.",
    "Shadows danced across the walls as the candle flickered and sputtered.",
    "Far below, the river churned and foamed over jagged rocks.",
]

_DIALOGUE_TEMPLATES = [
    '{speaker} said, "We need to leave before dawn."',
    '"I don\'t trust {other}," {speaker} whispered.',
    '{speaker}, the tall one, slowly nodded. "Fine."',
    '{speaker}: "Get back! It\'s not safe!"',
    'She frowned at {other}\'s map.',
    '"Where did you find it, {other}?" {speaker} asked.',
]

SPEAKERS = ["Alice", "Marcus", "Elena", "Thomas", "Sarah", "James", "Lily", "Victor"]


def generate_passages(count: int = 200, seed: int = 42) -> list[str]:
    """Synthetic passages mixing narration and dialogue."""
    rng = random.Random(seed)
    passages = []
    for _ in range(count):
        if rng.random() < 0.5:
            speaker = rng.choice(SPEAKERS)
            other = rng.choice([s for s in SPEAKERS if s != speaker])
            passages.append(rng.choice(_DIALOGUE_TEMPLATES).format(speaker=speaker, other=other))
        else:
            passages.append(" ".join(rng.choice(_NARRATION_TEMPLATES) for _ in range(3)))
    return passages


def generate_adversarial(repeats: int = 200) -> str:
    """Names followed by long comma/paren runs that never reach a verb."""
    clause = ", one two three four five six seven eight (nine ten eleven)"
    return " ".join(f"{name}{clause * 3} and" for name in SPEAKERS * (repeats // len(SPEAKERS)))


@pytest.fixture
def speakers():
    return list(SPEAKERS)


@pytest.fixture
def passages():
    return generate_passages()


@pytest.fixture
def adversarial_text():
    return generate_adversarial()
