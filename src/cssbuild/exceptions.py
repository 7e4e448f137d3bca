"""Custom exceptions for cssbuild."""

from typing import Literal

ORDER_MESSAGE = (
    'Selector parts should be arranged in the following order: '
    'element, id, class, attribute, pseudo-class, pseudo-element'
)
DUPLICATE_MESSAGE = 'Element, id and pseudo-element should not occur more then one time inside the selector'


class CssBuildError(Exception):
    """Base class for all cssbuild exceptions."""

    pass


class OrderOrCardinalityError(CssBuildError):
    """Raised when a selector fragment is appended out of order or twice."""

    def __init__(self, kind: int, reason: Literal['order', 'duplicate']):
        """Initialize the error for a rejected fragment.

        Args:
            kind: FragmentKind of the fragment that was rejected
            reason: 'order' for a rank violation, 'duplicate' for a second singular fragment

        """
        self.kind = kind
        self.reason = reason
        super().__init__(ORDER_MESSAGE if reason == 'order' else DUPLICATE_MESSAGE)


class CombinedSelectorError(CssBuildError):
    """Raised when fragments are appended to a combined selector."""

    def __init__(self, rendered: str):
        self.rendered = rendered
        super().__init__(f"Cannot append fragments to combined selector '{rendered}'; wrap it in combine() instead")


class BlueprintError(CssBuildError):
    """Raised when a selector blueprint cannot be parsed."""

    pass
