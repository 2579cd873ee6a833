"""Rubric weights, thresholds and grading."""

from dataclasses import dataclass


# Evaluated high to low, first match wins
GRADE_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (90, "A+"),
    (80, "A"),
    (70, "B"),
    (60, "C"),
    (50, "D"),
)
FAILING_GRADE = "F"


def grade_for(score: int) -> str:
    """Map a 0-100 score to a letter grade."""
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return FAILING_GRADE


@dataclass(frozen=True)
class Rubric:
    """Point weights and thresholds for every check.

    ``*_points`` is full credit, ``*_partial`` the credit awarded when a check
    is only partly satisfied. A check whose full credit is 0 is skipped.
    """
    title_points: int = 15
    title_partial: int = 5
    title_length: tuple[int, int] = (30, 60)

    description_points: int = 15
    description_partial: int = 5
    description_length: tuple[int, int] = (120, 160)

    h1_points: int = 10
    h1_partial: int = 5

    word_count_points: int = 15
    min_word_count: int = 300

    image_alt_points: int = 10
    image_alt_partial: int = 5

    open_graph_points: int = 5
    twitter_card_points: int = 5
    canonical_points: int = 5
    structured_data_points: int = 5
    robots_points: int = 5

    linking_points: int = 10
    linking_partial: int = 5

    heading_hierarchy_points: int = 0
    heading_hierarchy_partial: int = 0

    @property
    def max_score(self) -> int:
        return sum(
            getattr(self, name)
            for name in self.__dataclass_fields__
            if name.endswith("_points")
        )


DEFAULT_RUBRIC = Rubric()

# Richer variant: lighter technical gates, lighter linking, plus heading hierarchy
EXTENDED_RUBRIC = Rubric(
    canonical_points=3,
    structured_data_points=4,
    robots_points=3,
    linking_points=5,
    linking_partial=2,
    heading_hierarchy_points=10,
    heading_hierarchy_partial=5,
)

RUBRICS = {
    "standard": DEFAULT_RUBRIC,
    "extended": EXTENDED_RUBRIC,
}
