from .core import play_game, run_batch, summarize
from .io import write_csv, write_manifest

__all__ = ["play_game", "run_batch", "summarize", "write_csv", "write_manifest"]
