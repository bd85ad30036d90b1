from .get_status_text import STATUS_TEXT, get_status_text
from .parse_response import parse_response
from .render_response import render_response
