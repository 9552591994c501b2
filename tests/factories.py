"""Deterministic blog post data for tests."""

import random

SEED_COUNT = 10

FIRST_NAMES = ["Ada", "Grace", "Linus", "Margaret", "Ken", "Barbara", "Dennis", "Frances"]
LAST_NAMES = ["Lovelace", "Hopper", "Torvalds", "Hamilton", "Thompson", "Liskov", "Ritchie", "Allen"]
WORDS = [
    "system", "garden", "river", "compiler", "autumn", "signal", "harbor", "lantern",
    "kernel", "meadow", "protocol", "orchard", "cache", "summit", "thread", "island",
]


def generate_blog_post_data(rng: random.Random) -> dict:
    """Build one {author, title, content} record from a seeded generator."""
    return {
        "author": f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
        "title": " ".join(rng.sample(WORDS, 3)).title(),
        "content": " ".join(rng.choices(WORDS, k=25)),
    }


def generate_many(rng: random.Random, count: int) -> list[dict]:
    return [generate_blog_post_data(rng) for _ in range(count)]
