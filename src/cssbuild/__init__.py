"""
cssbuild - CSS selector builder
===============================

Builds CSS selector strings from ordered fragments, with combinators for
composing selectors, plus a couple of small record helpers.

Main Components:
    - css_selector_builder: Entry point for building selectors
    - SelectorExpression: A simple or combined selector
    - Blueprints: Selector trees loaded from JSON
    - Rectangle, to_json, from_json: Record helpers

Example:
    >>> from cssbuild import css_selector_builder as builder
    >>> builder.id('main').class_name('container').class_name('editable').stringify()
    '#main.container.editable'
"""

__version__ = '0.1.0'

from cssbuild.blueprint import build_expression, load_blueprint, parse_blueprint, render_blueprint
from cssbuild.exceptions import BlueprintError, CombinedSelectorError, CssBuildError, OrderOrCardinalityError
from cssbuild.models import CombinedSelector, FragmentStep, SimpleSelector
from cssbuild.records import Rectangle, from_json, to_json
from cssbuild.selector import FragmentKind, SelectorBuilder, SelectorExpression, css_selector_builder

__all__ = [
    'css_selector_builder',
    'SelectorBuilder',
    'SelectorExpression',
    'FragmentKind',
    'CssBuildError',
    'OrderOrCardinalityError',
    'CombinedSelectorError',
    'BlueprintError',
    'FragmentStep',
    'SimpleSelector',
    'CombinedSelector',
    'parse_blueprint',
    'load_blueprint',
    'build_expression',
    'render_blueprint',
    'Rectangle',
    'to_json',
    'from_json',
]
