"""Project naming: short, repository-safe slugs from free-text purpose."""

import re
import time
from datetime import date

from config.defaults import DEFAULTS

STOPWORDS = {
    "a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "is", "are", "was", "were", "be", "been", "being", "have",
    "has", "had", "create", "build", "make", "develop", "design", "website",
    "site", "web", "page",
}

PRIORITY_TERMS = {
    "portfolio", "business", "shop", "store", "blog", "agency", "studio", "company",
}

MIN_TERM_LENGTH = 3
MAX_TERM_LENGTH = 12
MAX_TERMS = 3


def extract_key_terms(text):
    """Meaningful words of text, business nouns first, original order otherwise."""
    words = re.sub(r"[^a-z0-9\s]", " ", text.lower()).split()
    words = [
        w for w in words
        if w not in STOPWORDS and MIN_TERM_LENGTH <= len(w) <= MAX_TERM_LENGTH
    ]
    priority = [w for w in words if w in PRIORITY_TERMS]
    others = [w for w in words if w not in PRIORITY_TERMS]
    return priority + others


def _timestamp_fallback():
    return f"project-{str(int(time.time() * 1000))[-6:]}"


def sanitize_project_name(name, max_length=None):
    """Lowercase hyphenated slug, truncated; timestamp fallback when empty."""
    max_length = max_length or DEFAULTS["max_name_length"]
    slug = name.lower()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    slug = slug.strip("-")
    slug = slug[:max_length].rstrip("-")
    return slug or _timestamp_fallback()


def generate_project_name(purpose, today=None):
    """Derive a repository name from the purpose text.

    No purpose gives "website-YYYYMMDD"; a purpose with no usable terms
    gives "project-<6 digits of epoch millis>".
    """
    if not purpose or not purpose.strip():
        today = today or date.today()
        return f"website-{today.strftime('%Y%m%d')}"
    terms = extract_key_terms(purpose)[:MAX_TERMS]
    return sanitize_project_name("-".join(terms))
