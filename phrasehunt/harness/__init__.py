from .core import solve
from .config import PuzzleConfig, load_config
from .io import write_csv, write_manifest

__all__ = ["solve", "PuzzleConfig", "load_config", "write_csv", "write_manifest"]
