"""
Completion Scoring

Maps a ResumeData draft to an integer completeness score in [0, 100] using a
fixed weighted rule table. The weights sum to exactly 100, so the score is
the plain sum of satisfied rules' points.

Every rule only checks "non-empty", "longer than" or "at least N entries",
so adding entries or lengthening text can never lower the score.
"""

from dataclasses import dataclass
from typing import Callable, List, Tuple

from vitae.contexts.drafting.resume_data_structure import ResumeData

MAX_SCORE = 100
MIN_TEXT_LENGTH = 50

# Download is offered from this score upwards
DOWNLOAD_THRESHOLD = 40
# Finalize step is complete (and the draft "excellent") from this score upwards
EXCELLENT_THRESHOLD = 70


@dataclass(frozen=True)
class ScoringRule:
    """
    One row of the completion rule table.

    Attributes:
        name: Short identifier
        points: Points awarded when the predicate holds
        predicate: Pure function of the draft
        description: Human-readable explanation for review screens
    """

    name: str
    points: int
    predicate: Callable[[ResumeData], bool]
    description: str = ""


SCORING_RULES: Tuple[ScoringRule, ...] = (
    ScoringRule(
        "full_name",
        5,
        lambda d: bool(d.contacts.first_name and d.contacts.last_name),
        "First and last name",
    ),
    ScoringRule("email", 5, lambda d: bool(d.contacts.email), "Email address"),
    ScoringRule("phone", 5, lambda d: bool(d.contacts.phone), "Phone number"),
    ScoringRule("location", 5, lambda d: bool(d.contacts.location), "Location"),
    ScoringRule(
        "summary",
        15,
        lambda d: len(d.summary) > MIN_TEXT_LENGTH,
        f"Summary longer than {MIN_TEXT_LENGTH} characters",
    ),
    ScoringRule("experience", 10, lambda d: len(d.experience) > 0, "At least one job"),
    ScoringRule(
        "experience_description",
        10,
        lambda d: any(len(exp.description) > MIN_TEXT_LENGTH for exp in d.experience),
        f"A job description longer than {MIN_TEXT_LENGTH} characters",
    ),
    ScoringRule("experience_depth", 10, lambda d: len(d.experience) >= 2, "Two or more jobs"),
    ScoringRule("education", 15, lambda d: len(d.education) > 0, "At least one education entry"),
    ScoringRule("skills_basic", 5, lambda d: len(d.skills) >= 3, "Three or more skills"),
    ScoringRule("skills_rich", 5, lambda d: len(d.skills) >= 6, "Six or more skills"),
    ScoringRule("certificates", 10, lambda d: len(d.certificates) > 0, "At least one certificate"),
)


def _check_weights() -> None:
    total = sum(rule.points for rule in SCORING_RULES)
    if total != MAX_SCORE:
        raise RuntimeError(f"Scoring weights sum to {total}, expected {MAX_SCORE}")


_check_weights()


def score_breakdown(data: ResumeData) -> List[Tuple[ScoringRule, bool]]:
    """Evaluate every rule, in table order."""
    return [(rule, rule.predicate(data)) for rule in SCORING_RULES]


def score(data: ResumeData) -> int:
    """
    Compute the completion score of a draft.

    Args:
        data: Resume draft (read-only)

    Returns:
        Integer in [0, 100]

    Example:
        >>> score(ResumeData())
        0
    """
    return sum(rule.points for rule, satisfied in score_breakdown(data) if satisfied)


def missing_rules(data: ResumeData) -> List[ScoringRule]:
    """Rules not yet satisfied, in table order (largest gains are not sorted first)."""
    return [rule for rule, satisfied in score_breakdown(data) if not satisfied]


def can_download(value: int) -> bool:
    return value >= DOWNLOAD_THRESHOLD


def score_band(value: int) -> str:
    """
    Classify a score for the finalize screen.

    Returns:
        "needs_improvement" below DOWNLOAD_THRESHOLD, "excellent" at or above
        EXCELLENT_THRESHOLD, otherwise "good"
    """
    if value < DOWNLOAD_THRESHOLD:
        return "needs_improvement"
    if value >= EXCELLENT_THRESHOLD:
        return "excellent"
    return "good"
