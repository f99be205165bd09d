"""
Authentication context for request lifecycle.

Provides a typed container for the caller identity that the API auth class
populates and endpoints consume.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthContext:
    """
    Caller identity attached to requests as request.auth.

    Identity comes from an external provider, so there is no local User
    table: user_id is the provider's identifier and is what Member rows
    reference.

    Attributes:
        user_id: External user identifier, e.g. 'user_2abc...'
        email: Email reported by the identity provider, may be empty
    """

    user_id: str
    email: str = ""

    @property
    def is_authenticated(self) -> bool:
        """Check if the request carries an identity."""
        return bool(self.user_id)
