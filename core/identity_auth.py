# core/identity_auth.py
# DRF authentication class that verifies identity-provider JWTs

import logging
import jwt
from django.conf import settings
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed

from core.errors import StoreError
from core.storage import storage

logger = logging.getLogger("shramdaan.auth")


class IdentityJWTAuthentication(BaseAuthentication):
    """
    Authenticates requests carrying a bearer JWT from the external sign-in
    provider.

    This authenticator:
    1. Extracts the JWT from the Authorization header
    2. Verifies the signature and audience with IDENTITY_JWT_SECRET
    3. Syncs the local User keyed by the token's subject: the first
       signed-in request creates the profile, later ones only fill gaps
       and never overwrite fields the user edited
    """
    keyword = "Bearer"

    def authenticate(self, request):
        auth_header = request.headers.get("Authorization", "")

        if not auth_header.startswith(f"{self.keyword} "):
            return None  # Let other auth backends handle it

        token = auth_header.split(" ", 1)[1].strip()

        secret = settings.IDENTITY_JWT_SECRET
        if not secret:
            logger.warning("IDENTITY_JWT_SECRET not configured")
            return None

        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=settings.IDENTITY_JWT_ALGORITHMS,
                audience=settings.IDENTITY_JWT_AUDIENCE,
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationFailed("Token has expired")
        except jwt.InvalidTokenError as e:
            logger.debug(f"Invalid identity token: {e}")
            return None  # Let other auth backends try

        subject = payload.get("sub")
        if not subject:
            raise AuthenticationFailed("Invalid token: missing user ID")

        try:
            user = storage.sync_identity(self._identity_from_claims(payload))
        except StoreError as e:
            logger.error(f"Could not upsert user {subject}: {e}")
            raise AuthenticationFailed("Could not load user profile")

        return (user, payload)

    def authenticate_header(self, request):
        return self.keyword

    @staticmethod
    def _identity_from_claims(payload):
        """
        Map provider claims onto User fields. Only claims that are present
        are passed on, so a sparse token never blanks out a profile.
        """
        claim_map = {
            "email": ("email",),
            "first_name": ("first_name", "given_name"),
            "last_name": ("last_name", "family_name"),
            "profile_image_url": ("profile_image_url", "picture"),
        }
        identity = {"id": str(payload["sub"])}
        for field, claims in claim_map.items():
            for claim in claims:
                if payload.get(claim):
                    identity[field] = payload[claim]
                    break
        return identity
