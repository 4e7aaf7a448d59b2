"""Text formatting utilities for the TUI.

Hides the details of timestamp display and math cleanup in assistant answers.
"""

import re
from datetime import datetime

from .config import LOG_MAX_MESSAGE_LENGTH, MESSAGE_TIMESTAMP_FORMAT


def clean_latex(text: str) -> str:
    """Convert LaTeX notation to plain text equivalents.

    Physics and chemistry answers often contain math the terminal cannot
    render:
    - \\( ... \\) inline math -> just the content
    - \\[ ... \\] display math -> just the content
    - $...$ inline math -> just the content
    - $$...$$ display math -> just the content
    """
    text = re.sub(r'\\\(\s*', '', text)
    text = re.sub(r'\s*\\\)', '', text)

    text = re.sub(r'\\\[\s*', '', text)
    text = re.sub(r'\s*\\\]', '', text)

    # $$ before single $
    text = re.sub(r'\$\$\s*', '', text)

    # $ ... $ inline math (but not escaped \$)
    text = re.sub(r'(?<!\\)\$([^$]+)(?<!\\)\$', r'\1', text)

    text = re.sub(r'\\frac\{([^}]*)\}\{([^}]*)\}', r'(\1)/(\2)', text)
    text = re.sub(r'\\sqrt\{([^}]*)\}', r'sqrt(\1)', text)
    text = re.sub(r'\\times', 'x', text)
    text = re.sub(r'\\cdot', '*', text)
    text = re.sub(r'\\pm', '+/-', text)
    text = re.sub(r'\\leq', '<=', text)
    text = re.sub(r'\\geq', '>=', text)
    text = re.sub(r'\\neq', '!=', text)
    text = re.sub(r'\\approx', '~=', text)
    text = re.sub(r'\\rightarrow', '->', text)
    text = re.sub(r'\\Delta', 'Delta', text)
    text = re.sub(r'\\lambda', 'lambda', text)
    text = re.sub(r'\\pi', 'pi', text)
    text = re.sub(r'\\text\{([^}]*)\}', r'\1', text)
    text = re.sub(r'\\mathrm\{([^}]*)\}', r'\1', text)

    # Remaining backslash commands keep their argument
    text = re.sub(r'\\[a-zA-Z]+\{([^}]*)\}', r'\1', text)

    text = re.sub(r'\^{([^}]*)}', r'^(\1)', text)
    text = re.sub(r'_{([^}]*)}', r'_(\1)', text)

    return text


def format_timestamp(moment: datetime) -> str:
    """Format a message time as two-digit hour and minute."""
    return moment.strftime(MESSAGE_TIMESTAMP_FORMAT)


def truncate(text: str, limit: int = LOG_MAX_MESSAGE_LENGTH) -> str:
    """Shorten `text` to `limit` characters, marking the cut with '...'."""
    if len(text) <= limit:
        return text
    return text[: max(limit - 3, 0)] + "..."
