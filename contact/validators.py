"""
Input rules for contact form submissions.
"""
import re

from django.core.validators import RegexValidator

NAME_PATTERN = r"^[a-zA-ZÀ-ÿ\s'-]+$"
SUBJECT_PATTERN = r'^[a-zA-ZÀ-ÿ0-9\s\-_.,!?]+$'

validate_name_characters = RegexValidator(
    NAME_PATTERN,
    message='Name may only contain letters, spaces, apostrophes and hyphens.',
)
validate_subject_characters = RegexValidator(
    SUBJECT_PATTERN,
    message='Subject contains invalid characters.',
)

SPAM_PATTERNS = (
    re.compile(r'https?://', re.IGNORECASE),
    re.compile(r'\b(click here|buy now|free|winner|congratulations)\b', re.IGNORECASE),
    re.compile(r'<script|javascript:|on\w+=', re.IGNORECASE),
)


def looks_like_spam(*parts):
    """True if any spam pattern matches the joined text."""
    text = ' '.join(part for part in parts if part)
    return any(pattern.search(text) for pattern in SPAM_PATTERNS)
