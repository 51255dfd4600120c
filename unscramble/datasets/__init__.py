from .catalog import default_catalog_path, load_catalog, validate_catalog, pretty_summary
from .io import read_words, write_words

__all__ = ["default_catalog_path", "load_catalog", "validate_catalog", "pretty_summary",
           "read_words", "write_words"]
