"""Aggregated outcomes of one ``fire_checks`` run."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .check_outcome import CheckOutcome


@dataclass(frozen=True, slots=True)
class ConnectivityReport:
    """Outcomes in check-registry order, tagged with the run's topic and id."""

    topic: str
    correlation_id: str
    outcomes: Tuple[CheckOutcome, ...]

    @property
    def passed(self) -> bool:
        return all(o.passed for o in self.outcomes)

    @property
    def failed(self) -> List[CheckOutcome]:
        return [o for o in self.outcomes if not o.passed]

    def as_dicts(self) -> List[Dict[str, Any]]:
        return [o.to_dict() for o in self.outcomes]
