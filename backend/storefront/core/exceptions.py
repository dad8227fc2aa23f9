"""
Storefront error taxonomy

Validation and gateway errors surface to HTTP callers as 400 {"error": ...}.
ForwardingError never leaves the fulfillment layer; it is turned into a
failed FulfillmentResult and logged.

Author: TM3
Date: 2026-10-19
"""


class StorefrontError(Exception):
    """Base class for errors the API reports back to the caller"""


class ValidationError(StorefrontError):
    """Malformed or empty checkout request"""


class AuthError(StorefrontError):
    """PayPal client-credentials exchange failed"""


class GatewayError(StorefrontError):
    """PayPal rejected a create or capture request"""


class ForwardingError(StorefrontError):
    """DSers request failed"""
