"""The fixed scoring rubric, expressed as ordered rule cascades."""

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Rule(Generic[T]):
    """A predicate and the score awarded when it holds."""

    name: str
    predicate: Callable[[T], bool]
    score: int


@dataclass(frozen=True)
class RuleCascade(Generic[T]):
    """Rules evaluated in order; the first match decides the score."""

    rules: list[Rule[T]]
    default: int = 0
    name: str = field(default="cascade")

    def evaluate(self, value: T) -> int:
        return self.match(value)[1]

    def match(self, value: T) -> tuple[str, int]:
        """Name and score of the first matching rule."""
        for rule in self.rules:
            if rule.predicate(value):
                return rule.name, rule.score
        return "default", self.default


def _contains(label: str) -> Callable[[str], bool]:
    return lambda text: label in text


def _equals_ignore_case(label: str) -> Callable[[Any], bool]:
    return lambda text: str(text).lower() == label


# Budget brackets as written on the application form. The en-dash
# spellings are the same labels as typeset in the scoring guide.
BUDGET_SCORES = {
    "$500,001 - 1,000,000": 5,
    "$1,000,001 or more": 4,
    "$250,001 - $500,000": 3,
    "$100,001 - $250,000": 2,
    "$0 - $100,000": 1,
    "$500,001–1,000,000": 5,
    "$250,001–$500,000": 3,
    "$100,001–$250,000": 2,
    "$0–$100,000": 1,
}

FORM_COMPLETION_SCORES = {
    "yes": 5,
    "half": 3,
    "no": 1,
}

HEADCOUNT_CASCADE: RuleCascade[int] = RuleCascade(
    name="headcount",
    rules=[
        Rule("over 20", lambda n: n > 20, 5),
        Rule("11-20", lambda n: n >= 11, 4),
        Rule("6-10", lambda n: n >= 6, 3),
        Rule("0-5", lambda n: n >= 0, 2),
    ],
    default=1,
)

# Most senior combination first
TEAM_CASCADE: RuleCascade[str] = RuleCascade(
    name="team",
    rules=[
        Rule(
            "executive director and board member",
            lambda roles: "Executive Director" in roles and "Board Member" in roles,
            5,
        ),
        Rule("board member", _contains("Board Member"), 4),
        Rule("executive director", _contains("Executive Director"), 3),
        Rule(
            "staff",
            lambda roles: "Senior Staff" in roles or "Staff" in roles,
            2,
        ),
        Rule("volunteer", _contains("Volunteer"), 1),
    ],
    default=0,
)

PARTNER_CASCADE: RuleCascade[str] = RuleCascade(
    name="partner",
    rules=[Rule("partner", _equals_ignore_case("yes"), 5)],
    default=1,
)

TIME_COMMITMENT_CASCADE: RuleCascade[str] = RuleCascade(
    name="time commitment",
    rules=[Rule("committed", _equals_ignore_case("yes"), 5)],
    default=1,
)


def headcount_score(count: int) -> int:
    return HEADCOUNT_CASCADE.evaluate(count)


def team_score(roles: str) -> int:
    return TEAM_CASCADE.evaluate(roles)


def partner_score(partner: str) -> int:
    return PARTNER_CASCADE.evaluate(partner)


def time_commitment_score(answer: str) -> int:
    return TIME_COMMITMENT_CASCADE.evaluate(answer)


def budget_score(bracket: str) -> int:
    """Exact label lookup; unknown brackets score 0."""
    return BUDGET_SCORES.get(bracket, 0)


def form_completion_score(status: str) -> int:
    return FORM_COMPLETION_SCORES.get(str(status).lower(), 0)
