"""Labeled-field extraction from a free-text requirements report."""

import re

from core.state import ExtractedInfo

# Case-sensitive line labels -> field name
FIELD_LABELS = {
    "Main purpose/goal:": "purpose",
    "Target audience:": "target_audience",
    "Business objectives:": "business_objectives",
}

_EXPLICIT_NAME_RE = re.compile(r".*(?:project|website)\s+name:\s*", re.IGNORECASE)


def extract_fields(text, labels=None):
    """Return {field: value} for every label found in the text.

    Everything up to and including the label is stripped from the line and
    the remainder trimmed. A later line with the same label replaces an
    earlier one. Labels that never appear are simply absent from the result.
    """
    labels = labels or FIELD_LABELS
    found = {}
    for line in (text or "").splitlines():
        for label, field_name in labels.items():
            idx = line.rfind(label)
            if idx == -1:
                continue
            found[field_name] = line[idx + len(label):].strip()
    return found


def extract_info(text):
    """Wrap extract_fields() in an ExtractedInfo; empty values count as absent."""
    fields = extract_fields(text)
    return ExtractedInfo(**{k: v for k, v in fields.items() if v})


def find_explicit_name(text):
    """Value of a 'Project name:' or 'Website name:' line, or None."""
    name = None
    for line in (text or "").splitlines():
        lower = line.lower()
        if "project name:" in lower or "website name:" in lower:
            value = _EXPLICIT_NAME_RE.sub("", line.strip(), count=1).strip()
            if value:
                name = value
    return name
