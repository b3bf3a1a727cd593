from unittest import TestCase

from icalwriter.lib.python_utilities import to_unicode


class TestUtils(TestCase):
    def test_to_unicode(self):
        # fmt: off
        self.assertEqual(to_unicode('blatti'), 'blatti')
        self.assertEqual(to_unicode(b'blatti'), 'blatti')
        self.assertEqual(to_unicode(bytearray(b'blatti')), 'blatti')
        self.assertEqual(to_unicode('老虎'.encode('utf-8')), '老虎')
        self.assertEqual(to_unicode(''), '')
        self.assertEqual(to_unicode(b''), '')
        self.assertEqual(to_unicode(None), None)
        self.assertEqual(to_unicode(3), 3)
        # fmt: on

    def test_invalid_utf8(self):
        with self.assertRaises(UnicodeDecodeError):
            to_unicode(b'\xff\xfe')
