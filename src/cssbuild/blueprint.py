"""
blueprint.py
============
Loads selector trees from JSON and replays them through the selector builder.

A blueprint is either a simple selector:

    {"fragments": [{"kind": "element", "value": "a"}, {"kind": "pseudo_class", "value": "focus"}]}

or a combination of two blueprints:

    {"left": {...}, "combinator": "+", "right": {...}}
"""

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from cssbuild.exceptions import BlueprintError
from cssbuild.models import CombinedSelector, SelectorNode
from cssbuild.selector import SelectorBuilder, SelectorExpression, css_selector_builder

logger = logging.getLogger(__name__)

_METHODS = {
    'element': 'element',
    'id': 'id',
    'class': 'class_name',
    'attribute': 'attribute',
    'pseudo_class': 'pseudo_class',
    'pseudo_element': 'pseudo_element',
}

_node_adapter: TypeAdapter[SelectorNode] = TypeAdapter(SelectorNode)


def parse_blueprint(text: str | bytes) -> SelectorNode:
    """Validate blueprint JSON text.

    Args:
        text: JSON text describing a selector tree, or its UTF-8 encoded bytes

    Returns:
        The validated tree.

    Raises:
        BlueprintError: If the text is not valid UTF-8, not valid JSON or not a valid tree

    """
    try:
        return _node_adapter.validate_json(text)
    except ValidationError as e:
        raise BlueprintError(f'Invalid selector blueprint: {e.error_count()} error(s)\n{e}') from e


def load_blueprint(path: str | Path) -> SelectorNode:
    """Read and validate a blueprint file."""
    path = Path(path)
    logger.debug('Loading blueprint from %s', path)
    return parse_blueprint(path.read_bytes())


def build_expression(node: SelectorNode, builder: SelectorBuilder = css_selector_builder) -> SelectorExpression:
    """Replay a blueprint through the builder.

    Fragment steps are applied in the order they are listed, so an
    out-of-order blueprint raises OrderOrCardinalityError just as the
    equivalent chained calls would.
    """
    if isinstance(node, CombinedSelector):
        return builder.combine(
            build_expression(node.left, builder),
            node.combinator,
            build_expression(node.right, builder),
        )

    steps = iter(node.fragments)
    first = next(steps, None)
    if first is None:
        return SelectorExpression()

    expression = getattr(builder, _METHODS[first.kind])(first.value)
    for step in steps:
        getattr(expression, _METHODS[step.kind])(step.value)
    return expression


def render_blueprint(text: str) -> str:
    """Parse blueprint JSON text and return the rendered selector."""
    return build_expression(parse_blueprint(text)).stringify()
