"""
Multiplicative (log-domain) uncertain values.

Modules:
    value:
        ``MultiplicativeUncertainValue``: sign plus ``ln|x|`` with the log of
        the error factor. Cannot represent zero, so reciprocal and division
        always succeed.

    conversions:
        Additive <-> multiplicative conversion with validation.
"""

from .conversions import to_multiplicative, to_uncertain_value
from .value import MultiplicativeUncertainValue

__all__ = ["MultiplicativeUncertainValue", "to_multiplicative", "to_uncertain_value"]
