"""Script block isolation for single-file page components."""

import re

_SCRIPT_RE = re.compile(r"<script\s*[^>]*>([\s\S]*?)</script\s*[^>]*>", re.IGNORECASE)


def extract_script_content(source: str) -> str | None:
    """Return the stripped body of the first ``<script>`` block, or ``None``."""
    match = _SCRIPT_RE.search(source)
    if match and match.group(1):
        return match.group(1).strip()
    return None


def meta_call_pattern(function_name: str) -> re.Pattern[str]:
    """Text pattern used to skip parsing scripts that never call *function_name*."""
    return re.compile(rf"{re.escape(function_name)}\([\s\S]*?\)")
