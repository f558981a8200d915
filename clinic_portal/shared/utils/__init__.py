"""Small shared helpers (dates, lenient parameter parsing)."""

from clinic_portal.shared.utils.datetime import parse_iso_date, today_in
from clinic_portal.shared.utils.params import clamp_int, parse_identifier

__all__ = ["clamp_int", "parse_identifier", "parse_iso_date", "today_in"]
