"""
Profile ➜ standalone HTML CV.

Rendering goes through a Jinja2 environment with autoescaping on, so
every profile string (which comes from an untrusted PDF) is escaped.
Output is deterministic: the same Profile always gives the same document.
"""
from __future__ import annotations
import re
from pathlib import Path
from jinja2 import Environment, FileSystemLoader

from webcv.schema_profile import Profile

env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=True, trim_blocks=True, lstrip_blocks=True)

_SPACES = re.compile(r"\s+")
_CONTROL = re.compile(r"[\x00-\x20]+")
_SCRIPT_SCHEME = re.compile(r"^(javascript|vbscript|data):", re.I)


def link_href(url: str) -> str:
    """Website href; schemes a browser would execute are replaced by "#"."""
    # browsers drop tabs/newlines inside the scheme, so check the squeezed form
    if _SCRIPT_SCHEME.match(_CONTROL.sub("", url)):
        return "#"
    return url


env.filters["link_href"] = link_href


def render_html(profile: Profile) -> str:
    """Render a normalised profile as a complete HTML document."""
    return env.get_template("cv.html").render(p=profile)


def cv_filename(profile: Profile) -> str:
    return f"{_SPACES.sub('_', profile.name)}_CV.html"
