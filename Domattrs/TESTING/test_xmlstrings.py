#!/usr/bin/env python3
#
# Unit tests for xmlstrings package.
#
#pylint: disable=W0212
#
import unittest

from xmlstrings import XmlStrings, WSHandler, rangelist2rangespec

x = XmlStrings

class TestXmlStrings(unittest.TestCase):
    def test_isa(self):
        self.assertTrue(x.isXmlName("para3"))
        self.assertTrue(x.isXmlName("óhello"))
        self.assertTrue(x.isXmlName("_hello"))
        self.assertFalse(x.isXmlName(":hello"))
        self.assertFalse(x.isXmlName("-hello"))
        self.assertFalse(x.isXmlName(".hello"))
        self.assertFalse(x.isXmlName("7hello"))
        self.assertFalse(x.isXmlName("#hello"))
        self.assertFalse(x.isXmlName("hello#"))
        self.assertFalse(x.isXmlName(""))
        self.assertFalse(x.isXmlName(None))

        self.assertTrue(x.isXmlQName("docbook:para.2"))
        self.assertTrue(x.isXmlQName("spam.1_eggs-2"))
        self.assertFalse(x.isXmlQName("spam.1:2eggs"))
        self.assertFalse(x.isXmlQName("a:b:c"))

    def test_parts(self):
        self.assertEqual(x.getPrefixPart("svg:rect"), "svg")
        self.assertEqual(x.getPrefixPart("rect"), "")
        self.assertEqual(x.getLocalPart("svg:rect"), "rect")
        self.assertEqual(x.getLocalPart("rect"), "rect")

    def test_escapers(self):
        self.assertEqual(x.escapeAttribute(
            "this is  fine", addQuotes=False),
            "this is  fine")
        self.assertEqual(x.escapeAttribute(
            '"this is "also" \'just\' fine"', quoteChar='"', addQuotes=False),
            '&quot;this is &quot;also&quot; \'just\' fine&quot;')
        self.assertEqual(x.escapeAttribute(
            '"this is "also" \'just\' fine"', quoteChar="'", addQuotes=False),
            '"this is "also" &apos;just&apos; fine"')
        self.assertEqual(x.escapeAttribute("a<b & c"), '"a&lt;b &amp; c"')
        with self.assertRaises(ValueError):
            x.escapeAttribute("foo", quoteChar="`")

        self.assertEqual(x.escapeText(
            "The tags <para> & </para> &c are data, as is ]]>."),
            "The tags &lt;para> &amp; &lt;/para> &amp;c are data, as is ]]&gt;.")

        self.assertEqual(x.escapeComment(
            "This is a comment -- or is it?"),
            "This is a comment -&#x2d; or is it?")
        self.assertEqual(x.dropNonXmlChars("a\x00b\x07c\td"), "abc\td")

    def test_rangespec(self):
        self.assertEqual(rangelist2rangespec([ (0x41, 0x5A), (0x5F, 0x5F) ]),
            "\\u0041-\\u005a\\u005f")
        with self.assertRaises(ValueError):
            rangelist2rangespec([ (0x5A, 0x41) ])


class TestWSHandler(unittest.TestCase):
    def test_construct(self):
        self.assertIs(WSHandler("WHATWG"), WSHandler.WHATWG)
        self.assertIs(WSHandler(WSHandler.CPP), WSHandler.CPP)
        with self.assertRaises(ValueError):
            WSHandler("NOT_A_SPACE_DEF")

    def test_split(self):
        ws = WSHandler.WHATWG
        self.assertEqual(ws.split(""), [])
        self.assertEqual(ws.split(" \t\n"), [])
        self.assertEqual(ws.split(" a\tb\r\nc\f "), ["a", "b", "c"])
        self.assertEqual(ws.split("a\x0Bb"), ["a\x0Bb"])
        self.assertEqual(WSHandler.CPP.split("a\x0Bb"), ["a", "b"])
        self.assertEqual(WSHandler.XML.split("a\fb"), ["a\fb"])
        self.assertEqual(WSHandler.UNICODE_ALL.split("a\u00a0b\u3000c"),
            ["a", "b", "c"])

    def test_predicates(self):
        ws = WSHandler.WHATWG
        self.assertTrue(ws.isSpace(" \f"))
        self.assertFalse(ws.isSpace(""))
        self.assertFalse(ws.isSpace(" x "))
        self.assertTrue(ws.hasSpace("a b"))
        self.assertFalse(ws.hasSpace("ab"))

    def test_strip_normalize(self):
        ws = WSHandler.XML
        self.assertEqual(ws.strip("\t a b \n"), "a b")
        self.assertEqual(ws.normalize("\t a \r\n  b \n"), "a b")
        self.assertEqual(ws.collapse("a    b"), "a b")
        self.assertEqual(ws.spaces, " \t\r\n")


if __name__ == '__main__':
    unittest.main()
