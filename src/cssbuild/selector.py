"""
selector.py
===========
Builds CSS selector strings from typed fragments.

Each simple selector is made of element, id, class, attribute, pseudo-class
and pseudo-element fragments, which must be appended in that order:

    element#id.class[attr]:pseudoClass::pseudoElement

Simple selectors can be joined with a combinator (' ', '+', '~', '>') and
combinations nest to any depth.

Example:
    >>> from cssbuild import css_selector_builder as builder
    >>> builder.element('a').attr('href$=".png"').pseudo_class('focus').stringify()
    'a[href$=".png"]:focus'
"""

import logging
from enum import IntEnum

from cssbuild.exceptions import CombinedSelectorError, OrderOrCardinalityError
from cssbuild.models import SimpleSelector

logger = logging.getLogger(__name__)


class FragmentKind(IntEnum):
    """Fragment kinds, valued by the rank that fixes their order."""

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6


SINGULAR_KINDS = frozenset({FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT})


class SelectorExpression:
    """A simple selector built from fragments, or two rendered selectors joined by a combinator.

    Fragment methods return the expression itself so calls can be chained.
    A rejected call raises OrderOrCardinalityError and leaves the expression
    unchanged.
    """

    def __init__(self):
        self._clear_fragments()

        # Set only once combine() has been called
        self._combination: tuple[str, str, str] | None = None

    def _clear_fragments(self) -> None:
        self.element_name: str | None = None
        self.id_name: str | None = None
        self.class_names: list[str] = []
        self.attributes: list[str] = []
        self.pseudo_classes: list[str] = []
        self.pseudo_element_name: str | None = None
        self._last_rank = 0

    @property
    def last_rank(self) -> int:
        """Rank of the most recently appended fragment kind (0 when empty)."""
        return self._last_rank

    @property
    def is_combined(self) -> bool:
        """Whether this expression holds a combination of two selectors."""
        return self._combination is not None

    def _check(self, kind: FragmentKind) -> None:
        if self._combination is not None:
            raise CombinedSelectorError(self.stringify())

        if self._last_rank > kind:
            logger.debug('Rejected %s after rank %d', kind.name, self._last_rank)
            raise OrderOrCardinalityError(kind, 'order')

        if kind in SINGULAR_KINDS and self._singular_value(kind) is not None:
            logger.debug('Rejected duplicate %s', kind.name)
            raise OrderOrCardinalityError(kind, 'duplicate')

    def _singular_value(self, kind: FragmentKind) -> str | None:
        if kind == FragmentKind.ELEMENT:
            return self.element_name
        if kind == FragmentKind.ID:
            return self.id_name
        return self.pseudo_element_name

    def _advance(self, kind: FragmentKind, value: str) -> 'SelectorExpression':
        self._last_rank = kind
        logger.debug('Appended %s %r', kind.name, value)
        return self

    def element(self, name: str) -> 'SelectorExpression':
        """Set the element (tag name) fragment."""
        self._check(FragmentKind.ELEMENT)
        self.element_name = name
        return self._advance(FragmentKind.ELEMENT, name)

    def id(self, name: str) -> 'SelectorExpression':
        """Set the id fragment."""
        self._check(FragmentKind.ID)
        self.id_name = name
        return self._advance(FragmentKind.ID, name)

    def class_name(self, name: str) -> 'SelectorExpression':
        """Append a class fragment."""
        self._check(FragmentKind.CLASS)
        self.class_names.append(name)
        return self._advance(FragmentKind.CLASS, name)

    def attribute(self, raw: str) -> 'SelectorExpression':
        """Append an attribute fragment.

        Args:
            raw: Text between the brackets, e.g. 'href$=".png"'. Rendered verbatim.

        """
        self._check(FragmentKind.ATTRIBUTE)
        self.attributes.append(raw)
        return self._advance(FragmentKind.ATTRIBUTE, raw)

    attr = attribute

    def pseudo_class(self, name: str) -> 'SelectorExpression':
        """Append a pseudo-class fragment."""
        self._check(FragmentKind.PSEUDO_CLASS)
        self.pseudo_classes.append(name)
        return self._advance(FragmentKind.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> 'SelectorExpression':
        """Set the pseudo-element fragment."""
        self._check(FragmentKind.PSEUDO_ELEMENT)
        self.pseudo_element_name = name
        return self._advance(FragmentKind.PSEUDO_ELEMENT, name)

    def combine(self, left: 'SelectorExpression', combinator: str, right: 'SelectorExpression') -> 'SelectorExpression':
        """Turn this expression into `left <combinator> right`.

        Both operands are rendered immediately; later changes to them are not
        seen. Any fragments this expression held are dropped. The combinator
        is stored as given, without validation.

        Args:
            left: Expression on the left of the combinator
            combinator: Combinator symbol, normally one of ' ', '+', '~', '>'
            right: Expression on the right of the combinator

        Returns:
            This expression, now in combination form.

        """
        # Render first: either operand may be this expression
        combination = (left.stringify(), combinator, right.stringify())
        self._clear_fragments()
        self._combination = combination
        logger.debug('Combined %r %r %r', *self._combination)
        return self

    def parts(self) -> SimpleSelector:
        """Return the fragments of a simple selector in rank order.

        Raises:
            CombinedSelectorError: If this expression is a combination

        """
        if self._combination is not None:
            raise CombinedSelectorError(self.stringify())

        steps: list[tuple[str, str]] = []
        if self.element_name is not None:
            steps.append(('element', self.element_name))
        if self.id_name is not None:
            steps.append(('id', self.id_name))
        steps.extend(('class', name) for name in self.class_names)
        steps.extend(('attribute', raw) for raw in self.attributes)
        steps.extend(('pseudo_class', name) for name in self.pseudo_classes)
        if self.pseudo_element_name is not None:
            steps.append(('pseudo_element', self.pseudo_element_name))

        return SimpleSelector(fragments=[{'kind': kind, 'value': value} for kind, value in steps])

    def stringify(self) -> str:
        """Render the expression as CSS selector text."""
        if self._combination is not None:
            left, combinator, right = self._combination
            # Spaces always surround the combinator, even a ' ' combinator
            return f'{left} {combinator} {right}'

        return (
            (self.element_name or '')
            + (f'#{self.id_name}' if self.id_name else '')
            + ''.join(f'.{name}' for name in self.class_names)
            + ''.join(f'[{raw}]' for raw in self.attributes)
            + ''.join(f':{name}' for name in self.pseudo_classes)
            + (f'::{self.pseudo_element_name}' if self.pseudo_element_name else '')
        )

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f'SelectorExpression({self.stringify()!r})'


class SelectorBuilder:
    """Entry point for building selectors.

    Every fragment method starts a new SelectorExpression, so the builder
    itself holds no state and a single instance can be shared.
    """

    def element(self, name: str) -> SelectorExpression:
        return SelectorExpression().element(name)

    def id(self, name: str) -> SelectorExpression:
        return SelectorExpression().id(name)

    def class_name(self, name: str) -> SelectorExpression:
        return SelectorExpression().class_name(name)

    def attribute(self, raw: str) -> SelectorExpression:
        return SelectorExpression().attribute(raw)

    attr = attribute

    def pseudo_class(self, name: str) -> SelectorExpression:
        return SelectorExpression().pseudo_class(name)

    def pseudo_element(self, name: str) -> SelectorExpression:
        return SelectorExpression().pseudo_element(name)

    def combine(self, left: SelectorExpression, combinator: str, right: SelectorExpression) -> SelectorExpression:
        """Join two expressions with a combinator into a new expression."""
        return SelectorExpression().combine(left, combinator, right)


css_selector_builder = SelectorBuilder()
