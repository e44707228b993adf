from django.test import SimpleTestCase

from core.sanitizers import sanitize_description, sanitize_phone, sanitize_text, sanitize_title


class SanitizeTextTest(SimpleTestCase):
    def test_tags_are_removed(self):
        cleaned = sanitize_text("<b>Weekend</b> volunteer<script>alert(1)</script>")
        self.assertNotIn("<", cleaned)
        self.assertTrue(cleaned.startswith("Weekend volunteer"))

    def test_escaped_markup_stays_escaped(self):
        cleaned = sanitize_text("&lt;script&gt;alert(1)&lt;/script&gt;")

        self.assertEqual(cleaned, "&lt;script&gt;alert(1)&lt;/script&gt;")
        self.assertNotIn("<script>", cleaned)

    def test_existing_entities_are_kept(self):
        self.assertEqual(sanitize_text("AT&amp;T"), "AT&amp;T")

    def test_bare_specials_are_escaped(self):
        self.assertEqual(sanitize_text("AT&T"), "AT&amp;T")
        self.assertEqual(sanitize_text("2 < 3"), "2 &lt; 3")

    def test_truncation_does_not_split_entities(self):
        self.assertEqual(sanitize_text("ab&amp;cd", max_length=4), "ab")

    def test_none_and_whitespace(self):
        self.assertEqual(sanitize_text(None), "")
        self.assertEqual(sanitize_text("  hello \n"), "hello")


class FieldSanitizersTest(SimpleTestCase):
    def test_title_is_single_line(self):
        self.assertEqual(sanitize_title("Tree   Planting\r\nDay"), "Tree Planting Day")

    def test_description_keeps_safe_tags_only(self):
        cleaned = sanitize_description('<p>Bring <em>gloves</em></p><iframe src="x"></iframe>')
        self.assertIn("<em>gloves</em>", cleaned)
        self.assertNotIn("<iframe", cleaned)

    def test_phone_keeps_dialable_characters(self):
        self.assertEqual(sanitize_phone("+91 (22) 555-0100 ext<b>"), "+91 (22) 555-0100")
