from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple


@dataclass(frozen=True)
class DimensionSelection:
    code: str
    filter: str
    values: Sequence[str]

    def __post_init__(self) -> None:
        # freeze the value list so catalog entries stay immutable
        object.__setattr__(self, "values", tuple(self.values))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "selection": {"filter": self.filter, "values": list(self.values)},
        }


@dataclass(frozen=True)
class QuerySpecification:
    """URL plus PxWeb query for one dataset variant."""

    dataset_id: str
    url: str
    selections: Tuple[DimensionSelection, ...]
    response_format: str = "json"

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError(f"{self.dataset_id}: url is required.")
        if not self.selections:
            raise ValueError(f"{self.dataset_id}: at least one selection is required.")
        object.__setattr__(self, "selections", tuple(self.selections))

    @property
    def payload(self) -> Dict[str, Any]:
        """Request body, rebuilt on every access."""
        return {
            "query": [s.to_dict() for s in self.selections],
            "response": {"format": self.response_format},
        }
