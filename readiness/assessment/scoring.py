"""
Readiness Scoring Engine

Pure functions that turn Likert responses into reportable metrics:
- Overall readiness percentage (0-100)
- Per-pillar breakdown
- Gap analysis against a best-practice benchmark
- Running score while an assessment is in progress

Nothing here performs I/O or keeps shared state. Callers own the question
list and the response mapping and may call these functions from any thread.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Hashable, List, Mapping, Optional, Sequence, Tuple, Union

from ..patterns.rounding import round_half_up

logger = logging.getLogger(__name__)

LIKERT_MIN = 1
LIKERT_MAX = 5

BEST_PRACTICE_BENCHMARK = 80

DEFAULT_PILLAR_NAMES = [
    "Strategy",
    "Architecture",
    "Foundation",
    "Ethics",
    "Culture",
    "Capability",
    "Governance",
    "Performance",
]

# (minimum gap, severity, priority), checked top-down with >=
GAP_TIERS = [
    (40, "Critical", "high"),
    (20, "High", "medium"),
    (0, "Moderate", "low"),
]


class InvalidResponseError(ValueError):
    """A response value is not an integer on the 1-5 Likert scale."""

    def __init__(self, question_id: Hashable, value: Any):
        self.question_id = question_id
        self.value = value
        super().__init__(
            f"Response for question '{question_id}' must be an integer "
            f"between {LIKERT_MIN} and {LIKERT_MAX}, got {value!r}"
        )


class LikertPolicy(Enum):
    """How out-of-range response values are handled."""
    REJECT = "reject"
    CLAMP = "clamp"
    IGNORE = "ignore"


class PillarAssignment(Enum):
    """How questions are mapped onto pillars."""
    POSITIONAL = "positional"
    EXPLICIT = "explicit"


@dataclass(frozen=True)
class PillarScore:
    """Score for a single readiness pillar"""
    pillar_name: str
    score: int  # 0-100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pillar_name": self.pillar_name,
            "dimension_name": self.pillar_name,
            "score": self.score
        }


@dataclass(frozen=True)
class Gap:
    """Shortfall of a pillar against the best-practice benchmark"""
    pillar: str
    score: int
    gap: Union[int, float]
    severity: str  # Critical, High, Moderate
    priority: str  # high, medium, low

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pillar": self.pillar,
            "score": self.score,
            "gap": self.gap,
            "severity": self.severity,
            "priority": self.priority
        }


PolicyLike = Union[LikertPolicy, str]
AssignmentLike = Union[PillarAssignment, str]


def _as_policy(policy: PolicyLike) -> LikertPolicy:
    return policy if isinstance(policy, LikertPolicy) else LikertPolicy(str(policy).lower())


def _as_assignment(assignment: AssignmentLike) -> PillarAssignment:
    if isinstance(assignment, PillarAssignment):
        return assignment
    return PillarAssignment(str(assignment).lower())


def _coerce_int(value: Any) -> Optional[int]:
    """Best-effort integer view of a submitted value; None if not integral."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _percentage(total: int, count: int) -> int:
    """round(total / (count * 5) * 100) in exact integer arithmetic."""
    if count == 0:
        return 0
    return (40 * total + count) // (2 * count)


def normalize_response(
    question_id: Hashable,
    value: Any,
    policy: PolicyLike = LikertPolicy.REJECT
) -> Optional[int]:
    """
    Validate a single response value.

    Args:
        question_id: Question the value belongs to (used in errors and logs)
        value: Submitted value; None means unanswered
        policy: What to do with values outside the Likert scale

    Returns:
        The Likert integer, or None when the value does not count

    Raises:
        InvalidResponseError: under the reject policy, or when a value
            cannot be read as an integer and the policy is clamp
    """
    if value is None:
        return None

    policy = _as_policy(policy)
    number = _coerce_int(value)

    if number is not None and LIKERT_MIN <= number <= LIKERT_MAX:
        return number

    if policy is LikertPolicy.IGNORE:
        logger.warning(f"Ignoring out-of-range response for question '{question_id}': {value!r}")
        return None

    if policy is LikertPolicy.CLAMP and number is not None:
        clamped = max(LIKERT_MIN, min(LIKERT_MAX, number))
        logger.warning(f"Clamped response for question '{question_id}' from {number} to {clamped}")
        return clamped

    raise InvalidResponseError(question_id, value)


def answered_values(
    responses: Mapping[Hashable, Any],
    policy: PolicyLike = LikertPolicy.REJECT
) -> Dict[Hashable, int]:
    """Return only the responses that count toward a score."""
    answered = {}
    for q_id, value in responses.items():
        number = normalize_response(q_id, value, policy)
        if number is not None:
            answered[q_id] = number
    return answered


def compute_overall_score(
    responses: Mapping[Hashable, Any],
    policy: PolicyLike = LikertPolicy.REJECT
) -> int:
    """
    Overall readiness percentage from answered questions.

    Sums every answered value, divides by (answered count x 5), scales to
    100 and rounds. Unanswered questions do not pull the score down; an
    empty mapping scores 0.
    """
    values = list(answered_values(responses, policy).values())
    return _percentage(sum(values), len(values))


def compute_live_score(
    responses: Mapping[Hashable, Any],
    policy: PolicyLike = LikertPolicy.REJECT
) -> int:
    """Running score shown while the assessment is in progress."""
    return compute_overall_score(responses, policy)


def question_id(question: Any) -> Hashable:
    """Identifier of a question given as a dict, a model object or a bare id."""
    if isinstance(question, Mapping):
        return question["id"]
    return getattr(question, "id", question)


def _question_pillar(question: Any) -> Optional[str]:
    if isinstance(question, Mapping):
        return question.get("pillar")
    return getattr(question, "pillar", None)


def partition_questions(
    questions: Sequence[Any],
    pillar_names: Sequence[str],
    assignment: AssignmentLike = PillarAssignment.POSITIONAL
) -> List[List[Any]]:
    """
    Split questions into one group per pillar, in pillar order.

    Positional assignment slices the ordered question list into contiguous
    chunks of ceil(N / P) questions; trailing pillars may be empty. Explicit
    assignment groups by each question's own pillar and drops questions whose
    pillar is not one of pillar_names.
    """
    if not pillar_names:
        raise ValueError("At least one pillar name is required")

    questions = list(questions)
    assignment = _as_assignment(assignment)

    if assignment is PillarAssignment.POSITIONAL:
        chunk_size = math.ceil(len(questions) / len(pillar_names))
        return [
            questions[index * chunk_size:(index + 1) * chunk_size]
            for index in range(len(pillar_names))
        ]

    groups: Dict[str, List[Any]] = {name: [] for name in pillar_names}
    for question in questions:
        pillar = _question_pillar(question)
        if pillar in groups:
            groups[pillar].append(question)
        else:
            logger.warning(
                f"Question '{question_id(question)}' has unknown pillar {pillar!r}; excluded from pillar scores"
            )
    return [groups[name] for name in pillar_names]


def compute_pillar_scores(
    questions: Sequence[Any],
    responses: Mapping[Hashable, Any],
    pillar_names: Optional[Sequence[str]] = None,
    policy: PolicyLike = LikertPolicy.REJECT,
    assignment: AssignmentLike = PillarAssignment.POSITIONAL
) -> List[PillarScore]:
    """
    Per-pillar scores for an ordered question list.

    Args:
        questions: Ordered questions (dicts with "id", model objects, or ids)
        responses: question_id -> Likert value
        pillar_names: Ordered pillar names; defaults to the eight readiness pillars
        policy: Handling of out-of-range values
        assignment: Positional chunking (default) or the questions' own pillar

    Returns:
        Exactly one PillarScore per pillar name, in pillar order
    """
    names = list(pillar_names) if pillar_names is not None else list(DEFAULT_PILLAR_NAMES)
    answered = answered_values(responses, policy)

    pillar_scores = []
    for name, group in zip(names, partition_questions(questions, names, assignment)):
        values = [answered[q_id] for q_id in map(question_id, group) if q_id in answered]
        pillar_scores.append(PillarScore(pillar_name=name, score=_percentage(sum(values), len(values))))

    return pillar_scores


def classify_gap(gap: float) -> Tuple[str, str]:
    """Severity and priority for a positive gap."""
    for minimum, severity, priority in GAP_TIERS:
        if gap >= minimum:
            return severity, priority
    return GAP_TIERS[-1][1], GAP_TIERS[-1][2]


def _pillar_fields(item: Any) -> Tuple[str, int]:
    if isinstance(item, PillarScore):
        return item.pillar_name, item.score
    if isinstance(item, Mapping):
        name = item.get("pillar_name") or item.get("dimension_name")
        return name, round_half_up(float(item.get("score", 0)))
    return item.pillar_name, round_half_up(float(item.score))


def compute_gap_analysis(
    pillar_scores: Sequence[Any],
    benchmark: Union[int, float] = BEST_PRACTICE_BENCHMARK
) -> List[Gap]:
    """
    Gaps between each pillar and the best-practice benchmark.

    Only pillars below the benchmark produce a Gap. The result is sorted by
    gap size, largest first; equal gaps keep their pillar order.
    """
    gaps = []
    for item in pillar_scores:
        name, score = _pillar_fields(item)
        gap = benchmark - score
        if gap > 0:
            severity, priority = classify_gap(gap)
            gaps.append(Gap(pillar=name, score=score, gap=gap, severity=severity, priority=priority))

    return sorted(gaps, key=lambda g: g.gap, reverse=True)


def compute_completion(
    questions: Sequence[Any],
    responses: Mapping[Hashable, Any],
    policy: PolicyLike = LikertPolicy.REJECT
) -> Dict[str, Any]:
    """
    Progress through a question set.

    Returns dict with:
    - score: overall score over answered questions in the set
    - completion_rate: answered / total as a rounded percentage
    - total_questions, answered_questions
    - raw_average: mean Likert value, None when nothing is answered
    """
    ids = [question_id(q) for q in questions]
    answered = answered_values({q_id: responses.get(q_id) for q_id in ids}, policy)
    total = len(ids)
    count = len(answered)

    if count == 0:
        return {
            "score": 0,
            "completion_rate": 0,
            "total_questions": total,
            "answered_questions": 0,
            "raw_average": None
        }

    value_sum = sum(answered.values())
    return {
        "score": _percentage(value_sum, count),
        "completion_rate": (200 * count + total) // (2 * total),
        "total_questions": total,
        "answered_questions": count,
        "raw_average": value_sum / count
    }


class LiveScoreTracker:
    """
    Incremental running score for an in-progress assessment.

    Keeps the answered total and count so each update is O(1). The score
    always equals compute_live_score() over the same responses.

    Example:
        tracker = LiveScoreTracker()
        tracker.update("q1", 5)   # 100
        tracker.update("q2", 1)   # 60
        tracker.remove("q1")      # 20
    """

    def __init__(
        self,
        responses: Optional[Mapping[Hashable, Any]] = None,
        policy: PolicyLike = LikertPolicy.REJECT
    ):
        self.policy = _as_policy(policy)
        self._answers: Dict[Hashable, int] = {}
        self._total = 0

        for q_id, value in (responses or {}).items():
            self.update(q_id, value)

    def update(self, question_id: Hashable, value: Any) -> int:
        """Record (or replace) one answer and return the new score."""
        number = normalize_response(question_id, value, self.policy)

        previous = self._answers.pop(question_id, None)
        if previous is not None:
            self._total -= previous

        if number is not None:
            self._answers[question_id] = number
            self._total += number

        return self.score

    def remove(self, question_id: Hashable) -> int:
        """Forget an answer and return the new score."""
        previous = self._answers.pop(question_id, None)
        if previous is not None:
            self._total -= previous
        return self.score

    @property
    def answered_count(self) -> int:
        return len(self._answers)

    @property
    def score(self) -> int:
        return _percentage(self._total, len(self._answers))

    @property
    def responses(self) -> Dict[Hashable, int]:
        return dict(self._answers)
