from types import SimpleNamespace

from django.test import SimpleTestCase

from projects.throttles import WriteScopedRateThrottle


class WriteScopedRateThrottleTest(SimpleTestCase):
    def setUp(self):
        self.throttle = WriteScopedRateThrottle()
        self.throttle.scope = "message-post"
        self.user = SimpleNamespace(pk="u-42", is_authenticated=True)

    def test_reads_are_not_counted(self):
        request = SimpleNamespace(method="GET", user=self.user)
        self.assertIsNone(self.throttle.get_cache_key(request, view=None))

    def test_anonymous_writes_are_left_to_permissions(self):
        request = SimpleNamespace(method="POST", user=SimpleNamespace(pk=None, is_authenticated=False))
        self.assertIsNone(self.throttle.get_cache_key(request, view=None))

    def test_writes_are_keyed_per_user_and_scope(self):
        request = SimpleNamespace(method="POST", user=self.user)
        self.assertEqual(self.throttle.get_cache_key(request, view=None), "throttle_message-post_uu-42")
