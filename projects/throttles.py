# projects/throttles.py

from rest_framework.permissions import SAFE_METHODS
from rest_framework.throttling import ScopedRateThrottle


class WriteScopedRateThrottle(ScopedRateThrottle):
    """
    Scoped throttle that only counts writes, so public reads on the same
    view are never limited.

    Cache key shape:
      throttle_<scope>_u<user_id>
    """

    def get_cache_key(self, request, view):
        if request.method in SAFE_METHODS:
            return None

        user = getattr(request, "user", None)
        if not user or not user.is_authenticated:
            return None

        return f"throttle_{self.scope}_u{user.pk}"
