"""Hash map drills: fruit baskets and a football scores table."""

from collections.abc import MutableMapping
from dataclasses import dataclass
from enum import Enum

_U8_MAX = 255


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and five fruits in total."""
    return {"banana": 2, "potato": 5, "tomato": 4}


class Fruit(Enum):
    """Kinds of fruit for the cake."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add one of every fruit kind not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """A team's name and goal tally."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not text.isascii() or not text.lstrip("+").isdigit() or text.count("+") > 1:
        raise ValueError(f"invalid goal count: {text!r}")
    goals = int(text)
    if goals > _U8_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return goals


def _record(scores: dict[str, Team], name: str, scored: int, conceded: int) -> None:
    team = scores.setdefault(name, Team(name))
    team.goals_scored += scored
    team.goals_conceded += conceded


def build_scores_table(results: str) -> dict[str, Team]:
    """Build the scores table from lines "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"expected 4 fields in {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1, goals_2 = _parse_goals(fields[2]), _parse_goals(fields[3])
        _record(scores, team_1, goals_1, goals_2)
        _record(scores, team_2, goals_2, goals_1)
    return scores