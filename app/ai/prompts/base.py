"""
Flow Prompt Templates

A FlowPrompt is configuration, not logic: a name, a version and a
mustache template rendered by LangChain's PromptTemplate.

Template conventions:
- ``{{{var}}}`` interpolates a value without HTML escaping
- ``{{#flag}}...{{/flag}}`` renders only when ``flag`` is truthy,
  ``{{^flag}}...{{/flag}}`` only when it is falsy
- Variables named in ``media_variables`` hold data URIs. They are never
  interpolated into the text; the engine sends them as inline parts.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from langchain_core.prompts import PromptTemplate


@dataclass(frozen=True)
class FlowPrompt:
    name: str
    version: str
    template: str
    media_variables: Tuple[str, ...] = ()

    @property
    def key(self) -> str:
        return f"{self.name}@{self.version}"

    def render(self, variables: Dict[str, Any]) -> str:
        lc_template = PromptTemplate.from_template(
            self.template, template_format="mustache"
        )
        return lc_template.format(**variables)
