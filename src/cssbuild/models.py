"""
models.py
=========
Pydantic models describing a selector tree as plain data.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

FragmentName = Literal['element', 'id', 'class', 'attribute', 'pseudo_class', 'pseudo_element']


class FragmentStep(BaseModel):
    """One fragment call on a simple selector.

    Attributes:
        kind: Which fragment method to call
        value: Argument passed to that method

    """

    model_config = ConfigDict(extra='forbid')

    kind: FragmentName = Field(description='Fragment kind')
    value: str = Field(description='Fragment text, e.g. a tag name or raw attribute')


class SimpleSelector(BaseModel):
    """A simple selector as an ordered list of fragment calls."""

    model_config = ConfigDict(extra='forbid')

    fragments: list[FragmentStep] = Field(default_factory=list, description='Fragment calls in call order')


class CombinedSelector(BaseModel):
    """Two selectors joined by a combinator.

    Attributes:
        left: Selector on the left of the combinator
        combinator: Combinator symbol (' ', '+', '~', '>')
        right: Selector on the right of the combinator

    """

    model_config = ConfigDict(extra='forbid')

    left: 'SelectorNode'
    combinator: str
    right: 'SelectorNode'


SelectorNode = SimpleSelector | CombinedSelector

CombinedSelector.model_rebuild()
