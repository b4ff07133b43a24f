"""
Content Loader

Reads the JSON records of each content type from disk. A file that cannot
be read or parsed is recorded as a load error and the remaining files are
still loaded.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from content_audit.config.schema import AuditConfig
from content_audit.errors import ContentLoadError
from content_audit.schemas import CONTENT_TYPES, default_directories, get_schema


logger = logging.getLogger(__name__)

INDEX_FILE = "index.json"


@dataclass
class LoadError:
    """A file skipped because it could not be loaded."""
    file: str
    message: str

    def to_dict(self) -> dict:
        return {"file": self.file, "message": self.message}


@dataclass
class LoadResult:
    """Records loaded from one content directory.

    Attributes:
        directory: Directory that was read
        exists: False when the directory was not found
        records: (file name, record) pairs in file name order
        errors: Files that could not be loaded
    """
    directory: str
    exists: bool = True
    records: List[Tuple[str, Dict[str, Any]]] = field(default_factory=list)
    errors: List[LoadError] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.records) + len(self.errors)

    def slugs(self) -> set:
        return {
            record["slug"]
            for _, record in self.records
            if isinstance(record.get("slug"), str) and record["slug"]
        }


def list_content_files(directory: str) -> List[str]:
    """List the JSON record files of a directory, skipping index.json."""
    return sorted(
        name for name in os.listdir(directory)
        if name.endswith(".json") and name != INDEX_FILE
        and os.path.isfile(os.path.join(directory, name))
    )


def load_record(file_path: str) -> Dict[str, Any]:
    """Load one JSON record.

    Raises:
        ContentLoadError: If the file is unreadable, is not valid JSON,
            or does not hold a JSON object.
    """
    name = os.path.basename(file_path)
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ContentLoadError(name, f"Invalid JSON: {e}") from e
    except (IOError, UnicodeDecodeError) as e:
        raise ContentLoadError(name, f"Cannot read file: {e}") from e

    if not isinstance(data, dict):
        raise ContentLoadError(
            name, f"Expected a JSON object, got {type(data).__name__}"
        )
    return data


def load_directory(directory: str) -> LoadResult:
    """Load every record file of a content directory."""
    result = LoadResult(directory=directory)

    if not os.path.isdir(directory):
        logger.warning(f"Content directory not found: {directory}")
        result.exists = False
        return result

    logger.info(f"Reading content directory {directory}")
    for name in list_content_files(directory):
        try:
            record = load_record(os.path.join(directory, name))
        except ContentLoadError as e:
            logger.error(f"Failed to load {name}: {e.message}")
            result.errors.append(LoadError(file=name, message=e.message))
            continue
        result.records.append((name, record))

    logger.info(f"Loaded {len(result.records)} of {result.total} files from {directory}")
    return result


class ContentStore:
    """All content types loaded from a data root.

    Every directory is read before any cross-reference check runs, so
    references can be resolved against the full set of slugs.
    """

    def __init__(
        self,
        results: Dict[str, LoadResult],
        directories: Optional[Dict[str, str]] = None,
    ):
        self.results = results
        self.directories = directories or default_directories()

    @classmethod
    def load(
        cls,
        config: AuditConfig,
        content_types: Optional[List[str]] = None,
    ) -> "ContentStore":
        """Load the given content types (all of them by default).

        Args:
            config: Audit settings giving the data root and the directory
                of each content type.
            content_types: Subset of types to load.
        """
        results = {
            content_type: load_directory(str(config.directory_for(content_type)))
            for content_type in content_types or CONTENT_TYPES
        }
        return cls(results, config.directories)

    def get(self, content_type: str) -> LoadResult:
        return self.results.get(content_type) or LoadResult(directory="", exists=False)

    def slugs(self, content_type: str) -> set:
        return self.get(content_type).slugs()

    def source_path(self, content_type: str, file_name: str) -> str:
        """Path of a record as shown in reports: configured directory, then file."""
        directory = self.directories.get(content_type) or get_schema(content_type).directory
        return f"{directory.rstrip('/')}/{file_name}"
