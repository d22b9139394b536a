"""HTTP-facing request handlers for spendbook."""

from spendbook.api.imports import ImportRequest, handle_import_request

__all__ = ["ImportRequest", "handle_import_request"]
