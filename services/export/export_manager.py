# -*- coding: utf-8 -*-
"""
Export Manager - Manages and dispatches BEP export strategies.

Provides a central point for registering and executing export formats and
for naming the exported files.
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

from models import BEPDocument
from utils.logger import get_logger

from .export_strategy import ExportStrategy, HtmlExportStrategy, JsonExportStrategy

logger = get_logger(__name__)


class ExportManager:
    """
    Registry of export strategies keyed by format name.
    """

    def __init__(self):
        """Initialize the export manager with default strategies."""
        self._strategies: Dict[str, ExportStrategy] = {}
        self._register_default_strategies()

    def _register_default_strategies(self):
        """Register built-in export strategies."""
        self.register_strategy('json', JsonExportStrategy())
        self.register_strategy('html', HtmlExportStrategy())

    def register_strategy(self, format_name: str, strategy: ExportStrategy):
        """
        Register an export strategy for a specific format.

        Args:
            format_name: Format identifier (e.g., 'json', 'html')
            strategy: ExportStrategy implementation
        """
        self._strategies[format_name.lower()] = strategy

    def get_strategy(self, format_name: str) -> Optional[ExportStrategy]:
        """
        Get a registered export strategy by format name.

        Returns:
            ExportStrategy instance or None if not found
        """
        return self._strategies.get(format_name.lower())

    def render(self, document: BEPDocument, format_name: str = 'json', **kwargs) -> str:
        """
        Render a document without writing a file.

        Raises:
            ValueError: if the format is not registered
        """
        strategy = self.get_strategy(format_name)
        if not strategy:
            raise ValueError(f"Export format '{format_name}' not registered")
        return strategy.render(document, **kwargs)

    def export(self, document: BEPDocument, file_path: Union[str, Path],
               format_name: str = 'json', **kwargs) -> bool:
        """
        Export a document using the specified format strategy.

        Args:
            document: Document to export
            file_path: Target file path
            format_name: Export format identifier (default: 'json')
            **kwargs: Format-specific options passed to strategy

        Returns:
            True if export succeeded, False otherwise
        """
        strategy = self.get_strategy(format_name)
        if not strategy:
            logger.error(f"Export format '{format_name}' not registered")
            return False

        return strategy.export(document, file_path, **kwargs)

    def export_to_directory(self, document: BEPDocument, directory: Union[str, Path],
                            format_name: str = 'json', **kwargs) -> Optional[Path]:
        """
        Export into ``directory`` under the standard file name.

        Returns:
            Path of the written file, or None on failure
        """
        filename = self.export_filename(document, format_name)
        if filename is None:
            logger.error(f"Export format '{format_name}' not registered")
            return None

        path = Path(directory) / filename
        return path if self.export(document, path, format_name, **kwargs) else None

    def get_available_formats(self) -> List[str]:
        """
        Get list of registered export formats.

        Returns:
            List of format names
        """
        return list(self._strategies.keys())

    def get_file_extension(self, format_name: str) -> Optional[str]:
        """
        Get file extension for a specific format.

        Returns:
            File extension (e.g., '.json') or None if format not found
        """
        strategy = self.get_strategy(format_name)
        return strategy.get_file_extension() if strategy else None

    def export_filename(self, document: BEPDocument, format_name: str = 'json') -> Optional[str]:
        """
        Standard export file name: ``BEP-<project number or draft>-v<version><ext>``.

        Example: BEP-BP-2025-001-v0.1.json
        """
        extension = self.get_file_extension(format_name)
        if extension is None:
            return None
        return f"BEP-{document.display_number}-v{document.version}{extension}"
