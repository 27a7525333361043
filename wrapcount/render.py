"""Contract sheet rendering using Jinja2 templates."""

import os
from typing import Any

import jinja2

from .contracts import CONTRACTS
from .spec import Spec
from .terms import show_formula
from .theorems import counter_spec

_TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")
_ENV = jinja2.Environment(
    loader=jinja2.FileSystemLoader(_TEMPLATE_DIR),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)
_ENV.filters["formula"] = show_formula


def render(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template with the given keyword arguments."""
    template = _ENV.get_template(template_name)
    return template.render(**kwargs)


def render_contracts(spec: Spec | None = None) -> str:
    """Markdown sheet of every operation's Hoare triple and every axiom."""
    spec = spec or counter_spec()
    return render(
        "contracts.md.j2",
        spec=spec,
        contracts=list(CONTRACTS.values()),
        signature=spec.signature,
    )
