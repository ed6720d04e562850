"""Transport request builders."""

from .import_export_request_builder import ImportExportRequestBuilder

__all__ = ["ImportExportRequestBuilder"]
