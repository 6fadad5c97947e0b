from __future__ import annotations

import re
from dataclasses import dataclass, field

from rsa_ops.prompts import ALTERNATIVES_PER_ASSET

# "1. ", "2) ", "3: ", "1 - ", "1.2. " and "- ", "* ", "• " bullets; a marker must be
# followed by whitespace or end of line
_LEADING_MARKER_RE = re.compile(r"^\s*(?:\d+(?:\.\d+)*[.):]|\d+\s+-|[-*•]+)(?:\s+|$)")


@dataclass(frozen=True)
class ValidationResult:
    alternatives: list[str] = field(default_factory=list)
    found: int = 0

    @property
    def accepted(self) -> bool:
        return len(self.alternatives) == ALTERNATIVES_PER_ASSET

    @property
    def reason(self) -> str | None:
        if self.accepted:
            return None
        return (
            f"Insufficient alternatives generated: {self.found} valid, "
            f"{ALTERNATIVES_PER_ASSET} required"
        )


def clean_line(line: str) -> str:
    return _LEADING_MARKER_RE.sub("", line, count=1).strip()


def parse_alternatives(content: str | None, max_length: int) -> list[str]:
    if not content:
        return []
    alternatives: list[str] = []
    for line in content.splitlines():
        cleaned = clean_line(line)
        if not cleaned or len(cleaned) > max_length:
            continue
        alternatives.append(cleaned)
    return alternatives


def validate_alternatives(content: str | None, max_length: int) -> ValidationResult:
    candidates = parse_alternatives(content, max_length)
    if len(candidates) < ALTERNATIVES_PER_ASSET:
        return ValidationResult(alternatives=[], found=len(candidates))
    return ValidationResult(
        alternatives=candidates[:ALTERNATIVES_PER_ASSET], found=len(candidates)
    )
