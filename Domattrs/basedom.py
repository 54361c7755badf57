#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# A small pure Python DOM: just enough tree to carry attributes for the
# class and style editors in domadditions.
#
#pylint: disable=W0212
#
from collections import OrderedDict
from types import SimpleNamespace
from typing import Any, Dict, Iterable, List
import logging

from basedomtypes import NodeType, NMTOKEN_t, QName_t
from basedomtypes import HReqE, ICharE
from xmlstrings import XmlStrings as XStr, WSHandler
from domadditions import ClassListEditor, StyleMapEditor

lg = logging.getLogger("basedom")

__metadata__ = {
    "title"        : "basedom",
    "description"  : "Element, Text, Comment, and Document for domattrs.",
    "type"         : "http://purl.org/dc/dcmitype/Software",
    "language"     : "Python 3.11",
    "created"      : "2026-10-17",
    "modified"     : "2026-10-17",
    "license"      : "https://creativecommons.org/licenses/by-sa/3.0/"
}
__version__ = __metadata__['modified']

descr = """
=Description=

Nodes know their ''nodeType'' (a basedomtypes.NodeType), their
''ownerDocument'' (may be None), and their ''parentNode''. Only Element
has attributes, which are kept as plain strings in a NamedNodeMap.

Element also offers ''classList'' and ''styleMap'', which return fresh
editors (see domadditions) over its "class" and "style" attributes.

=Options=

Options live on the Document (see Document.setOption()). Nodes with no
ownerDocument use the defaults from defaultOptions():

* ''wsDef'' (WSHandler, default WHATWG) -- what counts as whitespace
when splitting class tokens and trimming style declarations.
* ''quoteChar'' (default '"') -- quote used around serialized attributes.
"""


###############################################################################
#
def defaultOptions() -> SimpleNamespace:
    return SimpleNamespace(**{
        "wsDef":          WSHandler.WHATWG,  # Space def for class/style
        "quoteChar":      '"',               # For startTag/outerXML
    })

_detachedOptions = defaultOptions()


###############################################################################
#
class NamedNodeMap(OrderedDict):
    """Attribute name -> string value, in the order set.
    minidom and the full DOM keep Attr nodes here; the editors only ever
    need the string, so that's all we keep.
    """
    def setNamedItem(self, attrName:NMTOKEN_t, attrValue:str) -> None:
        self[attrName] = attrValue

    def getNamedItem(self, attrName:NMTOKEN_t) -> str:
        return self.get(attrName)

    def removeNamedItem(self, attrName:NMTOKEN_t) -> str:
        return self.pop(attrName, None)

    def item(self, index:int) -> str:
        """Get the attribute *name* at the given position.
        """
        if index < 0 or index >= len(self): return None
        return list(self.keys())[index]

    @property
    def length(self) -> int:
        return len(self)


###############################################################################
#
class Node:
    """The main (basically abstract) class for DOM nodes.
    Subclasses set ''nodeType''; callers that care what kind of node they
    have should test that, not the Python class.
    """
    ELEMENT_NODE                = NodeType.ELEMENT_NODE
    TEXT_NODE                   = NodeType.TEXT_NODE
    COMMENT_NODE                = NodeType.COMMENT_NODE
    DOCUMENT_NODE               = NodeType.DOCUMENT_NODE
    ABSTRACT_NODE               = NodeType.ABSTRACT_NODE

    def __init__(self, ownerDocument:'Document'=None, nodeName:NMTOKEN_t=None):
        self.ownerDocument = ownerDocument
        self.parentNode = None
        self.nodeType = Node.ABSTRACT_NODE
        self.nodeName = nodeName

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.nodeName!r}>"

    @property
    def options(self) -> SimpleNamespace:
        if self.ownerDocument is not None: return self.ownerDocument.options
        return _detachedOptions

    @property
    def isElement(self) -> bool:
        return self.nodeType == Node.ELEMENT_NODE
    @property
    def isComment(self) -> bool:
        return self.nodeType == Node.COMMENT_NODE
    @property
    def isDocument(self) -> bool:
        return self.nodeType == Node.DOCUMENT_NODE

    @property
    def childNodes(self) -> List['Node']:
        return None

    def hasAttributes(self) -> bool:
        return False

    def appendChild(self, newChild:'Node') -> 'Node':
        raise HReqE(f"Can't do child operations on node type '{self.nodeType.name}'.")

    @property
    def textContent(self) -> str:
        return None

    @property
    def outerXML(self) -> str:
        raise NotImplementedError


###############################################################################
#
class Branchable(Node):
    """Supply childNodes and appendChild for nodes that can have children.
    """
    def __init__(self, ownerDocument:'Document'=None, nodeName:NMTOKEN_t=None):
        super().__init__(ownerDocument, nodeName)
        self._childNodes:List[Node] = []

    @property
    def childNodes(self) -> List[Node]:
        return self._childNodes

    @property
    def firstChild(self) -> Node:
        return self._childNodes[0] if self._childNodes else None

    @property
    def lastChild(self) -> Node:
        return self._childNodes[-1] if self._childNodes else None

    def appendChild(self, newChild:Node) -> Node:
        if not isinstance(newChild, Node):
            raise HReqE(f"appendChild() takes a Node, not a '{type(newChild).__name__}'.")
        if newChild.isDocument:
            raise HReqE("A Document cannot be a child.")
        cur = self
        while cur is not None:
            if cur is newChild:
                raise HReqE("Can't append a node to itself or its descendant.")
            cur = cur.parentNode
        oldParent = newChild.parentNode
        if oldParent is not None:
            oldParent._childNodes.remove(newChild)
            if oldParent.isDocument and oldParent.documentElement is newChild:
                oldParent.documentElement = None
        newChild.parentNode = self
        self._childNodes.append(newChild)
        return newChild

    @property
    def textContent(self) -> str:
        """Cat together all descendant text nodes.
        """
        return "".join(ch.textContent or "" for ch in self._childNodes
            if not ch.isComment)


###############################################################################
#
class Document(Branchable):
    """Holds the options, and makes nodes that belong to it.
    """
    def __init__(self, options:Dict=None):
        super().__init__(ownerDocument=None, nodeName="#document")
        self.nodeType = Node.DOCUMENT_NODE
        self.documentElement:'Element' = None
        self.options = self.initOptions()
        if options:
            for k, v in options.items(): self.setOption(k, v)

    def initOptions(self) -> SimpleNamespace:
        return defaultOptions()

    def setOption(self, k:str, v:Any) -> None:  # Document
        try:
            getattr(self.options, k)
        except AttributeError as e:
            raise KeyError(f"Document: unknown option '{k}'.") from e
        if k == "wsDef":
            if not isinstance(v, (str, WSHandler)):
                raise TypeError(f"Document: Bad value type '{type(v)}' for option '{k}'.")
            v = WSHandler(v)
        elif k == "quoteChar":
            if not isinstance(v, str):
                raise TypeError(f"Document: Bad value type '{type(v)}' for option '{k}'.")
            if v not in ( '"', "'" ):
                raise ValueError(f"Document: quoteChar must be a quote, not {v!r}.")
        lg.debug("Document option %s = %r.", k, v)
        setattr(self.options, k, v)

    def getOption(self, k:str) -> Any:
        try:
            return getattr(self.options, k)
        except AttributeError as e:
            raise KeyError(f"Document: unknown option '{k}'.") from e

    @property
    def options(self) -> SimpleNamespace:
        return self._options

    @options.setter
    def options(self, newOptions:SimpleNamespace) -> None:
        self._options = newOptions

    def appendChild(self, newChild:Node) -> Node:  # Document
        if not newChild.isElement and not newChild.isComment: raise HReqE(
            f"Document child must not be a '{newChild.nodeType.name}'.")
        if newChild.isElement:
            if self.documentElement is not None: raise HReqE(
                "Document already has a documentElement.")
            self.documentElement = newChild
        return super().appendChild(newChild)

    def createElement(self, tagName:QName_t, attributes:Dict=None) -> 'Element':
        return Element(ownerDocument=self, nodeName=tagName, attributes=attributes)

    def createTextNode(self, data:str) -> 'Text':
        return Text(ownerDocument=self, data=data)

    def createComment(self, data:str) -> 'Comment':
        return Comment(ownerDocument=self, data=data)

    @property
    def outerXML(self) -> str:
        return "".join(ch.outerXML for ch in self.childNodes)


###############################################################################
#
class Element(Branchable):
    """An element, with attributes.
    """
    def __init__(self, ownerDocument:Document=None, nodeName:QName_t=None,
        attributes:Dict=None):
        if not XStr.isXmlQName(nodeName):
            raise ICharE(f"Element nodeName {nodeName!r} is not an XML QName.")
        super().__init__(ownerDocument, nodeName)
        self.nodeType = Node.ELEMENT_NODE
        self.attributes:NamedNodeMap = None  # Lazy creation in setAttribute()
        if attributes:
            for k, v in attributes.items(): self.setAttribute(k, v)

    def __repr__(self) -> str:
        return f"<Element {self.nodeName!r}>"

    @property
    def tagName(self) -> QName_t:
        return self.nodeName
    @property
    def prefix(self) -> str:
        return XStr.getPrefixPart(self.nodeName)
    @property
    def localName(self) -> str:
        return XStr.getLocalPart(self.nodeName)


    ### Attributes
    #
    def _checkAttrName(self, attrName:NMTOKEN_t) -> None:
        if not XStr.isXmlQName(attrName):
            raise ICharE(f"Attr name {attrName!r} not an XML QName.")

    def hasAttributes(self) -> bool:
        return bool(self.attributes)

    def hasAttribute(self, attrName:NMTOKEN_t) -> bool:
        self._checkAttrName(attrName)
        return bool(self.attributes) and attrName in self.attributes

    def setAttribute(self, attrName:NMTOKEN_t, attrValue:Any) -> None:
        self._checkAttrName(attrName)
        if self.attributes is None: self.attributes = NamedNodeMap()
        self.attributes.setNamedItem(attrName, str(attrValue))

    def getAttribute(self, attrName:NMTOKEN_t, default:Any=None) -> str:
        """Normal getAttribute, but returns 'default' (not "") when absent.
        """
        self._checkAttrName(attrName)
        if not self.attributes or attrName not in self.attributes: return default
        return self.attributes.getNamedItem(attrName)

    def removeAttribute(self, attrName:NMTOKEN_t) -> None:
        """Silent no-op if not present.
        """
        self._checkAttrName(attrName)
        if not self.attributes: return
        self.attributes.removeNamedItem(attrName)
        if len(self.attributes) == 0: self.attributes = None


    ### whatwg-ish conveniences
    #
    @property
    def className(self) -> str:
        return self.getAttribute("class", default="")

    @property
    def classList(self) -> 'ClassListEditor':
        """A new editor on each call; it keeps no state of its own.
        """
        return ClassListEditor(self)

    @property
    def styleMap(self) -> 'StyleMapEditor':
        return StyleMapEditor(self)

    def getElementsByClassName(self, name:str) -> List['Element']:
        """Descendant elements (not self) whose class list includes 'name'.
        """
        return [ el for el in iterElements(self)
            if el is not self and el.hasAttribute("class")
            and el.classList.contains(name) ]


    ### Serializing
    #
    @property
    def startTag(self) -> str:
        return self._startTag()

    @property
    def endTag(self) -> str:
        return f"</{self.nodeName}>"

    def _startTag(self, empty:bool=False) -> str:
        buf = f"<{self.nodeName}"
        if self.attributes:
            buf += self.formatAttributes()
        buf += (" /" if empty else "") + ">"
        return buf

    def formatAttributes(self) -> str:
        """Serialize the attributes, in order, escaped as needed.
        """
        if not self.attributes: return ""
        quoteChar = self.options.quoteChar
        attrString = ""
        for attrName, attrValue in self.attributes.items():
            fValue = XStr.escapeAttribute(attrValue, quoteChar=quoteChar)
            attrString += f" {attrName}={fValue}"
        return attrString

    @property
    def innerXML(self) -> str:
        return "".join(ch.outerXML for ch in self.childNodes)

    @property
    def outerXML(self) -> str:  # Element
        if not self.childNodes: return self._startTag(empty=True)
        return self.startTag + self.innerXML + self.endTag


###############################################################################
#
class CharacterData(Node):
    """Text and Comment. No attributes, no children.
    """
    def __init__(self, ownerDocument:Document=None, nodeName:NMTOKEN_t=None,
        data:str=""):
        super().__init__(ownerDocument, nodeName)
        if not isinstance(data, str):
            raise TypeError(f"{type(self).__name__} data must be a str, not '{type(data).__name__}'.")
        self.data = data

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.data!r}>"

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def textContent(self) -> str:  # CharacterData
        return self.data


class Text(CharacterData):
    def __init__(self, ownerDocument:Document=None, data:str=""):
        super().__init__(ownerDocument, "#text", data)
        self.nodeType = Node.TEXT_NODE

    @property
    def outerXML(self) -> str:  # Text
        return XStr.escapeText(self.data)


class Comment(CharacterData):
    def __init__(self, ownerDocument:Document=None, data:str=""):
        super().__init__(ownerDocument, "#comment", data)
        self.nodeType = Node.COMMENT_NODE

    @property
    def outerXML(self) -> str:  # Comment
        return f"<!--{XStr.escapeComment(self.data)}-->"


###############################################################################
#
def iterElements(node:Node) -> Iterable[Element]:
    """Generate the node (if an element) and all its descendant elements,
    in document order.
    """
    if node.isElement: yield node
    for ch in node.childNodes or []:
        yield from iterElements(ch)
