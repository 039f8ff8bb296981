"""Render validation reports as console text."""

from collections.abc import Iterable, Iterator

from ...utils.render_template import render_template
from .DocumentReport import DocumentReport

_REPORT_TEMPLATE = """
Checking file: {{ report.path }}
{% if report.error is not none %}
  Cannot parse file: {{ report.error }}
{% else %}
  Found {{ report.links | length }} pagination links:
{% for link in report.links %}
    - link: {{ link.target }}, text: "{{ link.label }}"
{% if link.exists %}
      ✓ target file exists
{% else %}
      ✗ error: target file does not exist!
{% endif %}
{% endfor %}
{% endif %}
"""


def render_report(reports: Iterable[DocumentReport]) -> Iterator[str]:
    """Yield the human-readable lines for each report.

    Each document gets a blank separator line and a header, then either
    the read error or the link count followed by an entry and a verdict
    line per link.
    """
    for report in reports:
        yield from render_template(_REPORT_TEMPLATE, {"report": report}).splitlines()
