from .core import run_case, run_batch, MAX_TURNS
from .io import write_csv, write_manifest

__all__ = ["run_case", "run_batch", "MAX_TURNS", "write_csv", "write_manifest"]
