"""
Exceptions raised by the account core and its gateways.

Expected order-flow conditions (unresolved contract, unknown order) are not
exceptions; they are logged and recorded in the account's rejected log.
"""


class AccountValidationError(ValueError):
    """Account identifier does not match the D?[UF]nnnnn format."""


class GatewayError(Exception):
    """Failure reported by a gateway. Passed through the core unchanged."""
