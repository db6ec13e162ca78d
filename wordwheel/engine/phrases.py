"""Word categories and challenge phrase generation."""

import random
from typing import Optional


# All available words, by category
SUBJECTS = (
    "I", "You", "Kim", "Shruthi", "Josh", "Andrea", "People", "We", "They", "Mary",
)

VERBS = (
    "will search for", "will get", "will find", "attained", "found",
    "will start interacting", "will accept", "accepted", "loved", "will paint",
)

OBJECTS = (
    "an offer", "an apple", "a car", "an orange", "a treasure", "a surface", "snow",
    "alligators", "good code", "a dog", "cookies", "foxes", "aubergines", "zebras",
)


class PhraseGenerator:
    """Builds random SUBJECT VERB OBJECT phrases from the fixed word lists."""

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize the generator.

        Args:
            rng: Randomness source. Pass a seeded instance for repeatable phrases.
        """
        self.rng = rng or random.Random()

    def generate_challenge(self) -> str:
        """Pick one word group from each category.

        Returns:
            The uppercased phrase, e.g. "KIM WILL PAINT ZEBRAS".
        """
        subject = self.rng.choice(SUBJECTS).upper()
        verb = self.rng.choice(VERBS).upper()
        obj = self.rng.choice(OBJECTS).upper()
        return f"{subject} {verb} {obj}"
