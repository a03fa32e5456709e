"""Exceptions raised by the pricing pipeline."""


class PricingError(Exception):
    """Base class for pricing failures."""


class AccountClientUnavailable(PricingError):
    """No authenticated session to query the account API with."""


class CatalogFetchFailed(PricingError):
    """The remote call failed or returned no usable content."""


class ComboCalculationError(PricingError):
    """A single combo could not be priced."""
