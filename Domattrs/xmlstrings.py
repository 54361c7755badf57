#!/usr/bin/env python3
#
# xmlstrings: Name tests, escapers, and whitespace definitions for domattrs.
#
import re
from typing import List, Final

from basedomtypes import FlexibleEnum

__metadata__ = {
    "title"        : "xmlstrings",
    "description"  : "Escapers, isa() testers, and space handling for XML constructs.",
    "type"         : "http://purl.org/dc/dcmitype/Software",
    "language"     : "Python 3.11",
    "created"      : "2026-10-17",
    "modified"     : "2026-10-17",
    "license"      : "https://creativecommons.org/licenses/by-sa/3.0/"
}
__version__ = __metadata__['modified']


descr = """
=Description=

Static helpers used by basedom and domadditions.

* '''escapeAttribute'''(string, quoteChar='"', addQuotes:bool=True)

Escape the string as needed for it to fit in an attribute value, including
the 'quoteChar' to be used around the value.

* '''escapeText'''(string)

Escape "&", "<", and the ">" of "]]>".

* '''escapeComment'''(string)

Break up any "--", which is not allowed inside a comment.

* '''isXmlName'''(s), '''isXmlQName'''(s)

Test whether the whole string is an XML NCName or QName.

==WSHandler==

An enum of whitespace definitions. Class tokens are split, and style
declarations trimmed, using whichever one the document's ''wsDef'' option
names (default WHATWG, which is XML space plus FORM FEED).
"""


###############################################################################
#
def rangelist2rangespec(ranges:List) -> str:
    """Convert a list of codepoint pairs (start, end) to the form to put
    inside [] in a regex. Doesn't insert the brackets themselves.
    """
    buf = ""
    for r in ranges:
        if r[0] > r[1] or r[0] < 0 or r[1] > 0xFFFF:
            raise ValueError("Bad range, %04x to %04x." % (r[0], r[1]))
        if r[0] == r[1]: buf += "\\u%04x" % (r[0])
        else: buf += "\\u%04x-\\u%04x" % (r[0], r[1])
    return buf

class XmlStrings:
    """This class contains static methods and variables for basic XML
    operations such as testing syntax forms, escaping strings, etc.
    """
    xmlSpaces_list = " \t\r\n"

    # This excludes colon (":") b/c we want to distinguish QNames.
    _nameStartChar_rangelist:Final = [
        ( ord("_"), ord("_") ),
        ( ord("A"), ord("Z") ),
        ( ord("a"), ord("z") ),
        ( 0x00C0, 0x00D6 ),
        ( 0x00D8, 0x00F6 ),
        ( 0x00F8, 0x02FF ),
        ( 0x0370, 0x037D ),
        ( 0x037F, 0x1FFF ),
        ( 0x200C, 0x200D ),     # ZERO WIDTH NON-JOINER, ZERO WIDTH JOINER
        ( 0x2070, 0x218F ),
        ( 0x2C00, 0x2FEF ),
        ( 0x3001, 0xD7FF ),
        ( 0xF900, 0xFDCF ),
        ( 0xFDF0, 0xFFFD ),
    ]

    _nameCharAddl_rangelist:Final = [
        ( ord("-"), ord("-") ), # Watch out for regex
        ( ord("."), ord(".") ),
        ( ord("0"), ord("9") ),
        ( 0x00B7, 0x00B7 ),     # MIDDLE DOT (e.g. for Catalan)
        ( 0x0300, 0x036F ),     # Combining Diacritical Marks
        ( 0x203F, 0x2040 ),     # Undertie and Char tie
    ]

    _nonXml_rangelist:Final = [
        ( 0x0000, 0x0008 ),
        ( 0x000B, 0x000C ),
        ( 0x000E, 0x001F ),
        ( 0xD800, 0xDFFF ),
    ]

    _nameStartChar_rangespec:Final = rangelist2rangespec(_nameStartChar_rangelist)
    _addl_rangespec:Final = rangelist2rangespec(_nameCharAddl_rangelist)
    _nameChar_rangespec:Final = _nameStartChar_rangespec + _addl_rangespec
    _nonXml_rangespec:Final = rangelist2rangespec(_nonXml_rangelist)

    NCName_re:Final  = r"[%s][%s]*" % (_nameStartChar_rangespec, _nameChar_rangespec)
    QName_re:Final = r"%s(:%s)?" % (NCName_re, NCName_re)

    isXmlName_cre:Final = re.compile(NCName_re)
    isXmlQName_cre:Final = re.compile(QName_re)


    ###########################################################################
    # XML string predicates
    #
    @staticmethod
    def isXmlName(s:str) -> bool:
        """Return True for a NON-namespace-prefixed (aka) local name.
        """
        if not isinstance(s, str): return False
        return bool(re.fullmatch(XmlStrings.isXmlName_cre, s))
    isXmlNCName = isXmlName

    @staticmethod
    def isXmlQName(s:str) -> bool:
        """Return True for a namespace-prefixed OR unprefixed name.
        """
        if not isinstance(s, str): return False
        return bool(re.fullmatch(XmlStrings.isXmlQName_cre, s))


    ###########################################################################
    # Escapers and cleaners
    #
    @staticmethod
    def dropNonXmlChars(s:str) -> str:
        """Remove the C0 control characters not allowed in XML.
        """
        return re.sub(r"[%s]+" % (XmlStrings._nonXml_rangespec), "", str(s))

    @staticmethod
    def escapeAttribute(s:str, quoteChar:str='"', addQuotes:bool=True) -> str:
        """Turn characters special in attributes into char refs, including
        whichever 'quoteChar' will delimit the value.
        If 'addQuotes' is set, also add the quotes.
        """
        if quoteChar not in "\"'":
            raise ValueError(f"Bad quoteChar {quoteChar!r}.")
        s = XmlStrings.dropNonXmlChars(s)
        s = s.replace('&', "&amp;")
        s = s.replace('<', "&lt;")
        if quoteChar == '"': s = s.replace('"', "&quot;")
        else: s = s.replace("'", "&apos;")
        if addQuotes: return quoteChar + s + quoteChar
        return s

    @staticmethod
    def escapeText(s:str) -> str:
        """Turn things special in text content, into char refs.
        """
        s = XmlStrings.dropNonXmlChars(s)
        s = s.replace('&',   "&amp;")
        s = s.replace('<',   "&lt;")
        s = s.replace(']]>', "]]&gt;")
        return s

    @staticmethod
    def escapeComment(s:str) -> str:
        s = XmlStrings.dropNonXmlChars(s)
        return s.replace('--', "-&#x2d;")

    @staticmethod
    def getPrefixPart(s:str) -> str:
        p, _, l = s.partition(":")
        return p if l else ""

    @staticmethod
    def getLocalPart(s:str) -> str:
        return s.partition(":")[2] or s


###############################################################################
# Define exactly what characters count as whitespace, according to
# various standards.
#
_xmlSpaces:Final = XmlStrings.xmlSpaces_list
_unicodeZs:Final = ( ""
    # TAB LF CR are all Cc
    + "\u00a0"  # (Zs) NO-BREAK SPACE
    + "\u1680"  # (Zs) OGHAM SPACE MARK
    + "\u2000"  # (Zs) EN QUAD
    + "\u2001"  # (Zs) EM QUAD
    + "\u2002"  # (Zs) EN SPACE
    + "\u2003"  # (Zs) EM SPACE
    + "\u2004"  # (Zs) THREE-PER-EM SPACE
    + "\u2005"  # (Zs) FOUR-PER-EM SPACE
    + "\u2006"  # (Zs) SIX-PER-EM SPACE
    + "\u2007"  # (Zs) FIGURE SPACE
    + "\u2008"  # (Zs) PUNCTUATION SPACE
    + "\u2009"  # (Zs) THIN SPACE
    + "\u200a"  # (Zs) HAIR SPACE
    + "\u202f"  # (Zs) NARROW NO-BREAK SPACE
    + "\u205f"  # (Zs) MEDIUM MATHEMATICAL SPACE
    + "\u3000"  # (Zs) IDEOGRAPHIC SPACE
)
_unicodeAll:Final = (
    _xmlSpaces
    + _unicodeZs
    + "\x0C"    # FORM FEED (Cc)
    + "\x0B"    # LINE TABULATION (Cc)
    + "\x85"    # NEXT LINE (Cc)
    + "\u2028"  # LINE SEPARATOR (Zl)
    + "\u2029"  # PARAGRAPH SEPARATOR (Zp)
)


###############################################################################
#
class WSHandler(FlexibleEnum):
    """Make functions to do one of the space cleanups given a space def.
    CPP is the same set as \\s in PCRE (and so PHP) without /u.

    "The universe will become as big as my fist."
        -- Umberto Eco
    """
    XML = _xmlSpaces
    WHATWG = _xmlSpaces + "\f"
    CPP = _xmlSpaces + "\f\x0B"
    UNICODE_ALL = _unicodeAll

    @property
    def spaces(self) -> str:
        """Return the list of all characters in the designated spaceList.
        """
        return self.value

    def isSpace(self, s:str) -> bool:
        """Like Python is___(), True if non-empty and all chars in category.
        """
        return bool(s) and not re.search(f"[^{self.value}]", s)

    def hasSpace(self, s:str) -> bool:
        """True if there is at least one space character in s.
        """
        return bool(re.search(f"[{self.value}]", s))

    def strip(self, s:str) -> str:
        return s.strip(self.value)

    def split(self, s:str) -> List[str]:
        """Break at runs of space, dropping the empty ends.
        """
        if not s: return []
        return [ tok for tok in re.split(f"[{self.value}]+", s) if tok ]

    def normalize(self, s:str) -> str:
        """Reduce internal spaces/runs to a single space and
        drop leading and trailing spaces.
        """
        return re.sub(f"[{self.value}]+", " ", s).strip(" ")
    collapse = normalize
