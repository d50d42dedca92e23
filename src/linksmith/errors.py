"""Exceptions raised at the public API boundary."""


class ContractViolationError(ValueError):
    """Raised when a public entry point receives arguments it cannot accept.

    Only contract faults are raised. Malformed header content never raises;
    it is reported as issues in the returned report.
    """
