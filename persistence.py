# persistence.py

from graph import Graph, GraphConfig
from errors import GraphFileCorruptedError
from datetime import datetime
from pathlib import Path
from typing import List, Optional
import json
import logging

logger = logging.getLogger(__name__)


def save_to_json(graph: Graph, filepath) -> Path:
    """Write ``graph.toDocument()`` to ``filepath`` as indented JSON.

    I/O errors propagate to the caller unchanged.
    """
    path = Path(filepath)
    with open(path, 'w') as f:
        json.dump(graph.toDocument(), f, indent=graph.config.json_indent)
    logger.info("saved graph with %d vertices to %s", len(graph), path)
    return path


def load_from_json(filepath, config: Optional[GraphConfig] = None) -> Graph:
    """Read a graph saved by ``save_to_json``.

    Unreadable files, invalid JSON and documents that break a graph
    invariant all raise GraphFileCorruptedError.
    """
    path = Path(filepath)
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except (OSError, ValueError, RecursionError) as e:
        logger.warning("could not read graph file %s", path)
        logger.debug("load failure cause: %r", e)
        raise GraphFileCorruptedError() from None

    try:
        graph = Graph.fromDocument(data, config)
    except GraphFileCorruptedError:
        logger.warning("graph file %s is corrupted", path)
        raise
    logger.info("loaded graph with %d vertices from %s", len(graph), path)
    return graph


def timestamped_filename(config: Optional[GraphConfig] = None, now: Optional[datetime] = None) -> str:
    config = config or GraphConfig()
    now = now or datetime.now()
    return now.strftime(config.save_name_format) + config.save_suffix


def list_saved_graphs(directory, config: Optional[GraphConfig] = None) -> List[Path]:
    config = config or GraphConfig()
    root = Path(directory)
    return sorted(p for p in root.iterdir() if p.is_file() and p.suffix == config.save_suffix)
