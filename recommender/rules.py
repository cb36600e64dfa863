"""Recommendation rule type and the ranking policy shared by every dimension."""

from typing import Any, Callable, Iterable, List, NamedTuple

Predicate = Callable[[Any], bool]


class RecommendationRule(NamedTuple):
    """A suggestion emitted when `when` holds. Higher priority ranks first."""
    when: Predicate
    text: str
    priority: int = 50


def rank_and_cap(matches: Iterable[RecommendationRule], limit: int) -> List[str]:
    """Order matched rules and apply the dimension cap.

    Rules are sorted by descending priority; the sort is stable, so equal
    priorities keep declaration order. Repeated texts are emitted once, at
    their best rank. When the cap falls inside a group of equal priority the
    whole group is kept, so the result may exceed `limit`.
    """
    if limit <= 0:
        return []

    ranked: List[RecommendationRule] = []
    seen = set()
    for rule in sorted(matches, key=lambda r: -r.priority):
        if rule.text in seen:
            continue
        seen.add(rule.text)
        ranked.append(rule)

    if len(ranked) <= limit:
        return [rule.text for rule in ranked]

    boundary = ranked[limit - 1].priority
    return [rule.text for i, rule in enumerate(ranked) if i < limit or rule.priority == boundary]
