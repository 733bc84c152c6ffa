from .loader import DatasetError, load_dataset
from .sample import Dataset, build_dataset

__all__ = ["Dataset", "DatasetError", "build_dataset", "load_dataset"]
