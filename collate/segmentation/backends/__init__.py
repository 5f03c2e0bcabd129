"""Structure sources for the code segmenter.

Available sources:
- TreeSitterStructureSource: AST-based Java and Python structure

Use ``get_shared_structure_source()`` to obtain a shared
``TreeSitterStructureSource`` so grammars load once per process.
"""

import threading

from collate.segmentation.backends.tree_sitter_backend import TreeSitterStructureSource

__all__ = ["TreeSitterStructureSource", "get_shared_structure_source"]

_shared_lock = threading.Lock()
_shared_source: TreeSitterStructureSource | None = None


def get_shared_structure_source() -> TreeSitterStructureSource:
    """Return a module-level shared TreeSitterStructureSource.

    Thread-safe. The source is created on first call and reused by every
    extractor in the process.
    """
    global _shared_source
    if _shared_source is not None:
        return _shared_source
    with _shared_lock:
        # Re-check after acquiring lock (double-checked locking)
        if _shared_source is None:  # pragma: no branch
            _shared_source = TreeSitterStructureSource()
    return _shared_source
