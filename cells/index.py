"""
Purpose: Derived lookups over the loaded Dataset.
What it does:
- Exposes the full feature sequence
- Derives the sorted unique origin / destination id option lists
- Derives max_visit_count (floor 1) for the color ramp
- Resolves the feature matching a selected origin or destination id

Derivations are memoized on the index; the application root builds a new
index only when the Dataset reference changes.
"""

from __future__ import annotations

from functools import cached_property
from typing import List, Optional, Tuple

from .models import Dataset, Feature


class DatasetIndex:
    """
    Read-only view over an optional Dataset.
    A missing dataset (load failure) yields empty options and max_visit_count 1.
    """

    def __init__(self, dataset: Optional[Dataset] = None):
        self.dataset = dataset

    @property
    def loaded(self) -> bool:
        return self.dataset is not None

    @property
    def features(self) -> Tuple[Feature, ...]:
        if self.dataset is None:
            return ()
        return self.dataset.features

    @cached_property
    def origin_options(self) -> List[str]:
        return sorted({f.origin_code for f in self.features if f.origin_code is not None})

    @cached_property
    def destination_options(self) -> List[str]:
        return sorted({f.destination_code for f in self.features if f.destination_code is not None})

    @cached_property
    def max_visit_count(self) -> float:
        peak = max((f.visit_count for f in self.features), default=0)
        #floor keeps the color ramp away from a zero divisor
        return peak if peak > 0 else 1

    def find_origin(self, origin_id: str) -> Optional[Feature]:
        """First feature whose origin code equals origin_id."""
        for feature in self.features:
            if feature.origin_code == origin_id:
                return feature
        return None

    def find_destination(self, destination_id: str) -> Optional[Feature]:
        """First feature whose destination code equals destination_id."""
        for feature in self.features:
            if feature.destination_code == destination_id:
                return feature
        return None
