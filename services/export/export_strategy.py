# -*- coding: utf-8 -*-
"""
Export Strategy Pattern - Abstract interface for BEP export formats.

Each strategy renders a BEPDocument to text (``render``) and writes it to a
file (``export``). Rendering never modifies the document.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from models import BEPDocument
from utils.logger import get_logger

from .html_report import render_html_report

logger = get_logger(__name__)


def serialize_json(document: BEPDocument) -> str:
    """
    Full-fidelity JSON snapshot of a document (camelCase keys, UTF-8 text).
    """
    return json.dumps(document.to_dict(), indent=2, ensure_ascii=False)


def deserialize_json(text: str) -> BEPDocument:
    """
    Parse a JSON snapshot back into a document.

    Unknown keys are ignored and missing keys take schema defaults, so
    snapshots from newer or older versions still load.

    Raises:
        json.JSONDecodeError: if ``text`` is not JSON
        ValidationException: if an enumerated field holds an unknown value
    """
    return BEPDocument.from_dict(json.loads(text))


class ExportStrategy(ABC):
    """
    Abstract base class for export strategies.

    Each strategy implements a specific export format (JSON, HTML, ...)
    """

    @abstractmethod
    def render(self, document: BEPDocument, **kwargs) -> str:
        """
        Render the document in the strategy's format.

        Args:
            document: Document to render
            **kwargs: Additional format-specific options

        Returns:
            Rendered text
        """
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """
        Get the file extension for this export format.

        Returns:
            File extension including the dot (e.g., '.json')
        """
        pass

    def export(self, document: BEPDocument, file_path: Union[str, Path], **kwargs) -> bool:
        """
        Render the document and write it to ``file_path`` as UTF-8.

        Returns:
            True if export succeeded, False otherwise
        """
        try:
            content = self.render(document, **kwargs)
            path = Path(file_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            logger.info(f"Exported BEP {document.id} to {path}")
            return True

        except OSError as e:
            logger.error(f"{type(self).__name__} export to {file_path} failed: {e}")
            return False


class JsonExportStrategy(ExportStrategy):
    """Strategy for exporting the full document as JSON."""

    def render(self, document: BEPDocument, **kwargs) -> str:
        return serialize_json(document)

    def get_file_extension(self) -> str:
        """Return JSON file extension."""
        return '.json'


class HtmlExportStrategy(ExportStrategy):
    """Strategy for exporting a human-readable HTML report."""

    def render(self, document: BEPDocument, **kwargs) -> str:
        """
        Render the HTML report.

        Args:
            document: Document to render
            **kwargs: Optional parameters:
                - generated_at: Generation timestamp (default: now)
                - empty_value: Placeholder for empty fields (default: Config.EMPTY_VALUE)
        """
        return render_html_report(
            document,
            generated_at=kwargs.get('generated_at'),
            empty_value=kwargs.get('empty_value'),
        )

    def get_file_extension(self) -> str:
        """Return HTML file extension."""
        return '.html'
