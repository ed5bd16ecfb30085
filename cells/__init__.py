"""
Purpose: Package entry + stable exports for the cells capability.
What it does:

Marks cells as a Python package and re-exports the public API so other
modules can do:

from cells import Dataset, DatasetIndex, load_dataset

Should not contain business logic.

Public API:
- Domain models: Feature, Dataset
- Derived lookups: DatasetIndex
- Loading: load_dataset, load_dataset_or_none
- Errors: DatasetLoadFailure
"""
from .models import Feature, Dataset
from .index import DatasetIndex
from .loader import load_dataset, load_dataset_or_none
from .errors import DatasetLoadFailure

__all__ = ["Feature",
           "Dataset",
             "DatasetIndex",
               "load_dataset",
               "load_dataset_or_none",
                 "DatasetLoadFailure",
               ]
