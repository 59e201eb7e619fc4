# analytics/tests/test_tracking.py

from django.contrib.auth import get_user_model
from django.test import SimpleTestCase, TestCase
from rest_framework import status
from rest_framework.test import APIClient

from analytics.models import AnalyticsEvent
from analytics.services import hash_ip, parse_user_agent

User = get_user_model()

IPHONE = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
)
IPAD = (
    "Mozilla/5.0 (iPad; CPU OS 16_6 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/16.6 Mobile/15E148 Safari/604.1"
)
ANDROID_TABLET = "Mozilla/5.0 (Linux; Android 13; SM-X700) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0 Safari/537.36"
WINDOWS_EDGE = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 Edg/120.0.0.0"
)
MAC_FIREFOX = "Mozilla/5.0 (Macintosh; Intel Mac OS X 14.1; rv:120.0) Gecko/20100101 Firefox/120.0"
LINUX_OPERA = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 OPR/105.0.0.0"
)


class UserAgentParsingTests(SimpleTestCase):
    """
    GUARANTEES:
    - Tablets win over mobiles; Android without "Mobile" is a tablet
    - Edge/Opera are not reported as Chrome; iOS is not reported as macOS
    """

    def test_devices(self):
        self.assertEqual(parse_user_agent(IPHONE)["device_type"], "mobile")
        self.assertEqual(parse_user_agent(IPAD)["device_type"], "tablet")
        self.assertEqual(parse_user_agent(ANDROID_TABLET)["device_type"], "tablet")
        self.assertEqual(parse_user_agent(WINDOWS_EDGE)["device_type"], "desktop")
        self.assertEqual(parse_user_agent("")["device_type"], "unknown")

    def test_browser_and_os(self):
        self.assertEqual(parse_user_agent(IPHONE), {"device_type": "mobile", "browser": "Safari", "os": "iOS"})
        self.assertEqual(parse_user_agent(WINDOWS_EDGE)["browser"], "Edge")
        self.assertEqual(parse_user_agent(WINDOWS_EDGE)["os"], "Windows")
        self.assertEqual(parse_user_agent(MAC_FIREFOX)["browser"], "Firefox")
        self.assertEqual(parse_user_agent(MAC_FIREFOX)["os"], "macOS")
        self.assertEqual(parse_user_agent(LINUX_OPERA)["browser"], "Opera")
        self.assertEqual(parse_user_agent(LINUX_OPERA)["os"], "Linux")
        self.assertEqual(parse_user_agent(ANDROID_TABLET)["os"], "Android")


class TrackingEndpointTests(TestCase):
    """
    GUARANTEES:
    - Tracking endpoints are public and return 201
    - Device fields come from the User-Agent header; the IP is stored hashed
    - Missing url / session_id is a 400
    """

    def setUp(self):
        self.client = APIClient()

    def test_pageview(self):
        res = self.client.post(
            "/api/analytics/pageview/",
            {"url": "https://shop.example.com/products/oak-table?ref=home", "session_id": "s1", "title": "Oak"},
            format="json",
            HTTP_USER_AGENT=IPHONE,
            REMOTE_ADDR="203.0.113.7",
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)

        event = AnalyticsEvent.objects.get()
        self.assertEqual(event.type, AnalyticsEvent.TYPE_PAGEVIEW)
        self.assertEqual(event.path, "/products/oak-table")
        self.assertEqual(event.device_type, "mobile")
        self.assertEqual(event.os, "iOS")
        self.assertEqual(event.ip_hash, hash_ip("203.0.113.7"))
        self.assertEqual(len(event.ip_hash), 64)
        self.assertFalse(event.is_authenticated)

    def test_forwarded_ip_is_used(self):
        self.client.post(
            "/api/analytics/click/",
            {"url": "https://shop.example.com/", "session_id": "s1", "element_type": "button"},
            format="json",
            HTTP_X_FORWARDED_FOR="198.51.100.1, 10.0.0.1",
        )
        self.assertEqual(AnalyticsEvent.objects.get().ip_hash, hash_ip("198.51.100.1"))

    def test_authenticated_event(self):
        user = User.objects.create_user(email="u@example.com", password="pass12345")
        self.client.force_authenticate(user=user)
        res = self.client.post(
            "/api/analytics/event/",
            {"url": "https://shop.example.com/cart", "session_id": "s2", "event_name": "add_to_cart", "event_data": {"qty": 2}},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)

        event = AnalyticsEvent.objects.get()
        self.assertEqual(event.user, user)
        self.assertTrue(event.is_authenticated)
        self.assertEqual(event.event_data, {"qty": 2})

    def test_invalid_payloads(self):
        res = self.client.post("/api/analytics/pageview/", {"session_id": "s1"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

        res = self.client.post("/api/analytics/click/", {"url": "https://x.example"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

        res = self.client.post(
            "/api/analytics/event/", {"url": "https://x.example", "session_id": "s"}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(AnalyticsEvent.objects.count(), 0)
