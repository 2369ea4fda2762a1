"""Race-preparation tips shown alongside the schedule."""

import random

from couch_to_mcg.plans.types import Tip

TIPS: list[Tip] = [
    Tip(category="Shoes", content="Never wear brand new shoes on race day. Break them in for at least 50km first."),
    Tip(
        category="Shoes",
        content="Visit a specialty running store for a gait analysis to find the right support for your feet.",
    ),
    Tip(category="Nutrition", content="Practice your race-day breakfast during your long Sunday runs."),
    Tip(category="Nutrition", content="Stay hydrated throughout the week, not just on the mornings of your runs."),
    Tip(
        category="Pacing",
        content="Start slow. If you feel like you are going too slow in the first 3km, you are probably at the right pace.",
    ),
    Tip(category="Pacing", content='Use the "Talk Test": You should be able to hold a conversation during your easy runs.'),
    Tip(
        category="Nutrition",
        content="Post-run recovery starts with a mix of protein and carbohydrates within 30 minutes of finishing.",
    ),
    Tip(category="Pacing", content="The goal of the long run is time on feet, not speed. Don't worry about your pace."),
]


def random_tip(rng: random.Random | None = None) -> Tip:
    """Pick a tip at random (pass a seeded Random for repeatable picks)."""
    return (rng or random).choice(TIPS)
