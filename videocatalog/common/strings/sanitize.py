# videocatalog/common/strings/sanitize.py
from __future__ import annotations

import html


def normalize_text(value: str | None) -> str:
    """
    Clean a free-text field before it is validated or stored:
      - strip leading/trailing whitespace
      - escape HTML-significant characters (& < > " ')

    Trimming happens first, so escaped entities never get stripped.

    Examples:
      "  <b>Hi</b>  " -> "&lt;b&gt;Hi&lt;/b&gt;"
      "Tom & Jerry"   -> "Tom &amp; Jerry"
      None            -> ""
    """
    if value is None:
        return ""
    return html.escape(str(value).strip(), quote=True)
