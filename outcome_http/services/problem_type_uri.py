"""
Problem type URI generator: error code -> documentation URI.
"""
from __future__ import annotations

from typing import Optional

DEFAULT_PROBLEM_TYPE_URI = "about:blank"


def normalize_error_code(code: str) -> str:
    """'Invalid Input' -> 'INVALID-INPUT'."""
    return code.upper().replace(" ", "-")


class ProblemTypeUriGenerator:
    """
    Builds `{base_uri}{NORMALIZED-CODE}` for a problem's `type` member.

    A blank code yields the base URI itself. The `about:blank` base is
    returned unchanged for every code, since it denotes an untyped problem.
    """

    def __init__(self, base_uri: Optional[str] = None):
        if base_uri is None or not base_uri.strip():
            self.base_uri = DEFAULT_PROBLEM_TYPE_URI
        elif base_uri.strip() == DEFAULT_PROBLEM_TYPE_URI:
            self.base_uri = DEFAULT_PROBLEM_TYPE_URI
        else:
            base_uri = base_uri.strip()
            self.base_uri = base_uri if base_uri.endswith("/") else f"{base_uri}/"

    def generate_uri(self, code: Optional[str]) -> str:
        if code is None or not code.strip():
            return self.base_uri
        if self.base_uri == DEFAULT_PROBLEM_TYPE_URI:
            return self.base_uri
        return self.base_uri + normalize_error_code(code)
