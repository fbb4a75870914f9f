"""Score contestants by judges' marks with the highest and lowest dropped."""

import argparse
import random
import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional

NAME_SEED = "ABCDE"
JUDGES = 10
LOWEST_MARK = 60
HIGHEST_MARK = 100


@dataclass
class Contestant:
    """A contestant and their final score."""

    name: str
    score: int = 0


def create_contestants() -> List[Contestant]:
    """Five contestants named 选手A to 选手E, each with a score of 0."""
    return [Contestant(f"选手{letter}") for letter in NAME_SEED]


def judge(rng: random.Random) -> List[int]:
    """Ten marks, each between 60 and 100 inclusive."""
    return [rng.randint(LOWEST_MARK, HIGHEST_MARK) for _ in range(JUDGES)]


def trimmed_mean(scores: Iterable[int]) -> int:
    """Integer mean of the marks left after dropping one lowest and one highest.

    Raises ValueError when fewer than three marks are given.
    """
    ordered = sorted(scores)
    if len(ordered) < 3:
        raise ValueError("at least three scores are needed")
    kept = ordered[1:-1]
    return sum(kept) // len(kept)


def score_contestants(contestants: Iterable[Contestant], rng: random.Random) -> None:
    """Give every contestant the trimmed mean of a fresh round of judging."""
    for contestant in contestants:
        contestant.score = trimmed_mean(judge(rng))


def _format(contestant: Contestant) -> str:
    return f"姓名:{contestant.name} 得分:{contestant.score}"


def main(argv=None) -> int:
    """Create, score and list the contestants."""
    parser = argparse.ArgumentParser(description="Score five contestants.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    print("创建5名选手...")
    contestants = create_contestants()
    for contestant in contestants:
        print(_format(contestant))
    print()

    print("给每位选手打分...")
    score_contestants(contestants, rng)

    print("最终得分...")
    for contestant in contestants:
        print(_format(contestant))
    return 0


if __name__ == "__main__":
    sys.exit(main())