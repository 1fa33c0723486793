from .core import play_round, run_batch
from .io import write_csv, write_manifest

__all__ = ["play_round", "run_batch", "write_csv", "write_manifest"]
