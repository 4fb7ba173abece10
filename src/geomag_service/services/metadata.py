"""
Observatory metadata loading.

The mapping is loaded once at startup and shared read-only between requests.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

from ..core.config import BUNDLED_METADATA_FILE
from ..models import Observatory


def load_observatories(
    metadata_file: Optional[Union[str, Path]] = None,
    logger: Optional[logging.Logger] = None
) -> Mapping[str, Observatory]:
    """
    Load observatory metadata.

    Expected format: a JSON list of objects with at least ``id``, ``name``,
    ``latitude``, ``longitude`` and ``elevation``.

    Args:
        metadata_file: Path to metadata JSON; defaults to the bundled file
        logger: Logger instance

    Returns:
        Read-only mapping keyed by upper case observatory id

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If an entry is missing a required field
    """
    logger = logger or logging.getLogger(__name__)
    path = Path(metadata_file or BUNDLED_METADATA_FILE)
    if not path.exists():
        raise FileNotFoundError(f"Metadata file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        entries = json.load(f)

    observatories = {}
    for entry in entries:
        try:
            observatory = Observatory.from_dict(entry)
        except KeyError as e:
            raise ValueError(f"Observatory entry missing field {e}: {entry}")
        observatories[observatory.id] = observatory

    logger.info(f"Loaded {len(observatories)} observatories from {path}")
    return MappingProxyType(observatories)
