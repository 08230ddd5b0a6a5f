# hospital_forms/utils/formatting.py
from datetime import datetime, timezone
from html import unescape
import re
import pytz

DEFAULT_TZ = "Asia/Kolkata"

def format_datetime(dt: datetime, tz_name: str = DEFAULT_TZ) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(pytz.timezone(tz_name)).strftime("%d/%m/%Y, %I:%M %p")

def html_to_text(html: str) -> str:
    # Version texte brute pour les clients mail sans HTML
    text = re.sub(r"(?is)<(style|head)[^>]*>.*?</\1>", "", html)
    text = re.sub(r"(?i)<br\s*/?>|</(p|div|tr|h[1-6]|li)>", "\n", text)
    text = re.sub(r"<[^>]+>", "", text)
    lines = [line.strip() for line in unescape(text).splitlines()]
    return "\n".join(line for line in lines if line)
