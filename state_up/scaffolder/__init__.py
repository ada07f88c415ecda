"""state-up scaffolder -- writes the Redux store files into a React project.

Quick usage::

    from state_up.models import Selection
    from state_up.scaffolder import TemplateEmitter

    selection = Selection(framework="Next.js", language="TypeScript")
    written = await TemplateEmitter("./my-app").emit(selection)
"""

from state_up.scaffolder.emitter import TemplateEmitter, emit
from state_up.scaffolder.templates import TEMPLATES, render_templates

__all__ = [
    "TEMPLATES",
    "TemplateEmitter",
    "emit",
    "render_templates",
]
