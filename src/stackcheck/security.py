"""Best-effort content lint for module templates and names.

This is a coarse textual scan, not a security boundary: it will flag harmless
code that happens to match and miss anything written to avoid the patterns.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

from stackcheck.modules.types import ExecutableModule, ModuleDescriptor

logger = logging.getLogger(__name__)

__all__ = ["DANGEROUS_PATTERNS", "SUSPICIOUS_NAMES", "SecurityScanner"]

DANGEROUS_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"eval\s*\("),
    re.compile(r"new\s+Function\s*\("),
    re.compile(r"require\s*\(\s*[^'\"]"),  # dynamic require
    re.compile(r"__dirname\s*\+[^/]"),  # path traversal
    re.compile(r"process\.env\.(PASSWORD|SECRET|KEY)", re.IGNORECASE),
)

SUSPICIOUS_NAMES: tuple[str, ...] = ("eval", "exec", "shell", "cmd", "backdoor")


def _template_content(template: Any) -> Any:
    if isinstance(template, str):
        return template
    if isinstance(template, Mapping):
        return template.get("content")
    return None


class SecurityScanner:
    """Scans file templates and module names for suspicious patterns.

    Every finding is a blocking error.
    """

    def __init__(
        self,
        suspicious_names: Sequence[str] = SUSPICIOUS_NAMES,
        patterns: Sequence[re.Pattern[str]] = DANGEROUS_PATTERNS,
        scan_templates: bool = True,
    ) -> None:
        self._suspicious_names = tuple(suspicious_names)
        self._patterns = tuple(patterns)
        self._scan_templates = scan_templates

    def scan(self, descriptor: ModuleDescriptor) -> list[str]:
        """Return blocking error strings for ``descriptor``."""
        issues: list[str] = []
        if self._scan_templates and isinstance(descriptor, ExecutableModule):
            issues.extend(self.scan_templates(descriptor))
        issues.extend(self.check_name(descriptor.name))
        return issues

    def scan_templates(self, descriptor: ExecutableModule) -> list[str]:
        """Scan the contents returned by ``get_file_templates()``.

        A failing or missing accessor skips the scan; the failure is logged only.
        """
        accessor = getattr(descriptor.implementation, "get_file_templates", None)
        if not callable(accessor):
            return []

        try:
            templates = accessor()
            entries = list(templates.items())
        except Exception as e:
            # TODO: surface template retrieval failures as a warning in the result
            logger.warning(
                "Skipping template scan for module '%s': %s", descriptor.name, e
            )
            return []

        issues: list[str] = []
        for file_name, template in entries:
            content = _template_content(template)
            if not isinstance(content, str) or not content:
                continue
            for _ in self.matching_patterns(content):
                issues.append(f"Potentially dangerous pattern found in template {file_name}")
        return issues

    def matching_patterns(self, content: str) -> list[re.Pattern[str]]:
        """Patterns found in ``content``; each one is reported separately."""
        return [pattern for pattern in self._patterns if pattern.search(content)]

    def check_name(self, name: Any) -> list[str]:
        if not isinstance(name, str):
            return []
        if any(keyword in name for keyword in self._suspicious_names):
            return [f"Module name '{name}' contains suspicious keywords"]
        return []
