# -*- coding: utf-8 -*-
"""Export services package."""

from .export_strategy import (
    ExportStrategy,
    HtmlExportStrategy,
    JsonExportStrategy,
    deserialize_json,
    serialize_json,
)
from .export_manager import ExportManager
from .html_report import render_html_report

__all__ = [
    'ExportStrategy',
    'HtmlExportStrategy',
    'JsonExportStrategy',
    'ExportManager',
    'deserialize_json',
    'serialize_json',
    'render_html_report',
]
