#!/usr/bin/env python3
#
# Small/shared types, including:
#     Exceptions
#     Enum enhancements
#     NewTypes for XML names
#
from typing import NewType, Union, Any
from enum import Enum

__metadata__ = {
    "title"        : "basedomtypes",
    "description"  : "Exceptions, enums, and name types shared by domattrs.",
    "type"         : "http://purl.org/dc/dcmitype/Software",
    "language"     : "Python 3.11",
    "created"      : "2026-10-17",
    "modified"     : "2026-10-17",
    "license"      : "https://creativecommons.org/licenses/by-sa/3.0/"
}
__version__ = __metadata__['modified']

###############################################################################
# DOM Exceptions
#
# https://developer.mozilla.org/en-US/docs/Web/API/DOMException
# https://webidl.spec.whatwg.org/#dfn-error-names-table
#
class DOMException(Exception): pass
DE = DOMException

class HierarchyRequestError(DE): pass # would yield an incorrect node tree. (3)
class InvalidCharacterError(DE): pass # string contains invalid characters. (5)
class InvalidNodeTypeError(DE): pass  # bad node (or anc) for op. (24)

# WebIDL says to use TypeError for invalid arguments; this is both.
class InvalidArgumentError(DE, TypeError): pass

### Abbreviations
#
HReqE = HierarchyRequestError
ICharE = InvalidCharacterError
INodeE = InvalidNodeTypeError
IArgE = InvalidArgumentError

###############################################################################
#
class FlexibleEnum(Enum):
    """Subclass from this to make enums that can construct from any of:
        E.XYZ       -- the usual enumclass.name form,
        E(E.XYZ)    -- an instance of the Enum as argument,
        E("XYZ")    -- a string that matches a member name,
        E(1)        -- a value of a member.

    "And the people did whatever seemed right in their own eyes."
        -- Judges 21:25
    """
    @classmethod
    def _missing_(cls, value: Any):
        """Handle cases where the value isn't a proper instance already.
        """
        if isinstance(value, str):
            try:
                return cls[value]
            except KeyError:
                for member in cls:
                    if member.value == value: return member
        return None

###############################################################################
#
class NodeType(FlexibleEnum):
    ABSTRACT_NODE                = 0  # Not in DOM
    ELEMENT_NODE                 = 1
    ATTRIBUTE_NODE               = 2
    TEXT_NODE                    = 3
    CDATA_SECTION_NODE           = 4
    PROCESSING_INSTRUCTION_NODE  = 7
    COMMENT_NODE                 = 8
    DOCUMENT_NODE                = 9
    DOCUMENT_TYPE_NODE           = 10
    DOCUMENT_FRAGMENT_NODE       = 11

    @staticmethod
    def okNodeType(nt:Union[int, 'NodeType'], die:bool=True) -> 'NodeType':
        """Check a nodeType property. You can pass either a NodeType or an int,
        (so people who remember the ints and just test are still ok).
        Returns the actual NodeType.x (or None on fail).
        """
        if isinstance(nt, NodeType): return nt
        try:
            return NodeType(nt)
        except ValueError as e:
            if not die: return None
            raise INodeE(f"nodeType {nt!r} is a {type(nt).__name__}, "
                "not int or NodeType.") from e

###############################################################################
# Name types, for hints only.
#
NMTOKEN_t           = NewType("NMTOKEN_t", str)
QName_t             = NewType("QName_t", str)
