"""
Content Audit Engine

Central orchestrator of a content audit: loads every content type, runs
the per-collection analysis, checks cross references once all content is
loaded, and produces an AuditReport. Also validates single record files.
"""

import json
import logging
import os
import time
from pathlib import Path
from typing import List, Optional

from content_audit.analyzer import analyze_collection
from content_audit.catalog import ColCatalog
from content_audit.config.schema import AuditConfig
from content_audit.cross_reference import validate_cross_references
from content_audit.errors import ContentLoadError
from content_audit.loader import ContentStore, LoadError, LoadResult, load_record
from content_audit.logging_config import logging_config
from content_audit.markdown_report import render_markdown
from content_audit.report import AuditReport
from content_audit.schemas import CONTENT_COLS, CONTENT_TYPES, get_schema


logger = logging.getLogger(__name__)


class ContentAuditEngine:
    """Runs content audits for one configuration.

    Reads a content tree, validates every record and every reference
    between records, and reports without modifying any content.
    """

    def __init__(self, config: Optional[AuditConfig] = None):
        """Initialize the audit engine.

        Args:
            config: Audit settings; defaults apply when omitted.
        """
        self.config = config or AuditConfig()

    def load(self, content_types: Optional[List[str]] = None) -> ContentStore:
        """Load the content tree described by the configuration."""
        return ContentStore.load(self.config, content_types)

    def catalog(self) -> ColCatalog:
        """Load the col records into a queryable catalog."""
        store = self.load([CONTENT_COLS])
        return ColCatalog(record for _, record in store.get(CONTENT_COLS).records)

    def run(self) -> AuditReport:
        """Audit every content type and the references between them."""
        start = time.time()
        logger.info(f"Auditing content under {self.config.data_root}")

        store = self.load()
        collections = {
            content_type: analyze_collection(
                content_type,
                store.get(content_type),
                self.config.similarity_threshold,
            )
            for content_type in CONTENT_TYPES
        }
        references = validate_cross_references(store)

        duration = time.time() - start
        logging_config.log_operation_timing("Content audit", duration)
        report = AuditReport(
            data_root=self.config.data_root,
            collections=collections,
            references=references,
            strict=self.config.strict,
            duration_ms=int(duration * 1000),
        )
        logger.info(
            f"Audit finished: {report.total_records} records, "
            f"{len(report.errors)} errors, {len(report.warnings)} warnings"
        )
        return report

    def validate_record_file(self, file_path: str, content_type: str) -> AuditReport:
        """Validate a single record file without cross references.

        Args:
            file_path: Path to the JSON record.
            content_type: One of cols, training, recipes, plans.

        Raises:
            UnknownContentTypeError: If content_type is not a known type.
        """
        get_schema(content_type)
        start = time.time()
        name = os.path.basename(file_path)
        loaded = LoadResult(directory=str(Path(file_path).parent))

        if not os.path.isfile(file_path):
            loaded.errors.append(LoadError(file=name, message=f"File not found: {file_path}"))
        else:
            try:
                loaded.records.append((name, load_record(file_path)))
            except ContentLoadError as e:
                loaded.errors.append(LoadError(file=name, message=e.message))

        result = analyze_collection(content_type, loaded, similarity_threshold=None)
        return AuditReport(
            data_root=file_path,
            collections={content_type: result},
            strict=self.config.strict,
            duration_ms=int((time.time() - start) * 1000),
        )

    def write_reports(
        self,
        report: AuditReport,
        report_path: Optional[str] = None,
        json_report_path: Optional[str] = None,
    ) -> List[str]:
        """Write the Markdown report and, if configured, the JSON report.

        Returns:
            Paths of the files written.
        """
        written = []
        markdown_path = report_path or self.config.report_path
        if markdown_path:
            _write_text(markdown_path, render_markdown(report, self.config.max_examples))
            logger.info(f"Content quality report written: {markdown_path}")
            written.append(markdown_path)

        json_path = json_report_path or self.config.json_report_path
        if json_path:
            Path(json_path).parent.mkdir(parents=True, exist_ok=True)
            with open(json_path, "w", encoding="utf-8") as f:
                json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)
            logger.info(f"JSON report written: {json_path}")
            written.append(json_path)
        return written


def _write_text(path: str, content: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
