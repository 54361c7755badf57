#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Extensions for basedom: editors for the "class" and "style" attributes,
# drawn from whatwg's Element.classList and the CSSOM's element.style.
#
import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Dict, List

from basedomtypes import NodeType, IArgE, ICharE, INodeE
lg = logging.getLogger("domadditions")

__metadata__ = {
    "title"        : "domadditions",
    "description"  : "Class-list and inline-style editors for basedom Elements.",
    "type"         : "http://purl.org/dc/dcmitype/Software",
    "language"     : "Python 3.11",
    "created"      : "2026-10-17",
    "modified"     : "2026-10-17",
    "license"      : "https://creativecommons.org/licenses/by-sa/3.0/"
}
__version__ = __metadata__['modified']

descr = """
=Description=

Two editors, each over one attribute of one Element:

* ClassListEditor treats "class" as an ordered list of whitespace-separated
tokens (like whatwg DOMTokenList, but duplicates already in the attribute
are reported as found).

* StyleMapEditor treats "style" as an ordered map of declaration names to
values: "name: value" pairs separated by ";".

Neither keeps any parsed state. Every call re-reads the attribute from the
element, and every change is written straight back. So two editors on the
same element (or an editor and direct setAttribute() calls) never disagree.

==Batch operations==

addMultiple(), removeMultiple(), removeAll(), getMultipleProperties(),
setMultipleProperties(), removeMultipleProperties(), and
removeAllProperties() check every entry before changing anything. If any
entry is not a str, InvalidArgumentError is raised and the attribute is
untouched. Otherwise the whole batch is applied with a single write.

==Serialization==

Class tokens are re-joined with single spaces. Style declarations are
written as "name: value", joined by "; ". An emptied attribute becomes ""
(it is not removed).
"""


###############################################################################
#
def checkString(value:Any, role:str) -> None:
    """Raise unless 'value' is a str. 'role' names it for the message,
    such as "Class name" or "Property value".
    """
    if not isinstance(value, str):
        raise IArgE(f"{role} must be a string, {type(value).__name__} given.")

def checkStrings(values:Iterable, role:str) -> List[str]:
    """Check a whole batch before anybody acts on any of it.
    Returns the batch as a list, so one-shot iterators survive.
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise IArgE(f"{role}s must be a sequence of strings, "
            f"{type(values).__name__} given.")
    values = list(values)
    for value in values: checkString(value, role)
    return values


###############################################################################
#
class AttributeEditor:
    """Shared plumbing: hold the element, read and write the one attribute.
    """
    ownerAttribute:str = None

    def __init__(self, ownerElement:'Element'):
        if getattr(ownerElement, "nodeType", None) != NodeType.ELEMENT_NODE:
            raise INodeE("The element must contain an element node.")
        self.ownerElement = ownerElement

    def __repr__(self) -> str:
        return (f"<{type(self).__name__} {self.ownerAttribute}="
            f"{self._getRaw()!r} of {self.ownerElement!r}>")

    def getElement(self) -> 'Element':
        return self.ownerElement

    @property
    def wsHandler(self) -> 'WSHandler':
        return self.ownerElement.options.wsDef

    def _getRaw(self) -> str:
        return self.ownerElement.getAttribute(self.ownerAttribute) or ""

    def _setRaw(self, value:str) -> None:
        lg.debug("%s: %s=%r", self.ownerElement.nodeName, self.ownerAttribute, value)
        self.ownerElement.setAttribute(self.ownerAttribute, value)

    def _hasRaw(self) -> bool:
        return self.ownerElement.hasAttribute(self.ownerAttribute)


###############################################################################
#
class ClassListEditor(AttributeEditor):
    """The "class" attribute as an order-preserving set of tokens.

    DOM: add, remove, toggle, replace, contains.
    We add the batch forms addMultiple, removeMultiple, and removeAll.

    contains() raises InvalidArgumentError for a non-str, like the other
    methods. The "in" operator just answers False for one, as Python
    containers do.

    "Order is Heaven's first law."
        -- Alexander Pope, An Essay on Man
    """
    ownerAttribute = "class"

    def _parse(self) -> List[str]:
        return self.wsHandler.split(self._getRaw())

    def _write(self, tokens:List[str]) -> None:
        self._setRaw(" ".join(tokens))

    def _checkToken(self, token:str) -> None:
        """Tokens going *into* the attribute must survive re-splitting.
        """
        checkString(token, "Class name")
        if token == "":
            raise ICharE("Class name must not be empty.")
        if self.wsHandler.hasSpace(token):
            raise ICharE(f"Class name {token!r} must not contain whitespace.")

    def __len__(self) -> int:
        return len(self._parse())

    def __iter__(self) -> Iterator[str]:
        return iter(self._parse())

    def __contains__(self, token:Any) -> bool:
        return isinstance(token, str) and token in self._parse()

    def getAll(self) -> List[str]:
        """The tokens as found, duplicates included, in order.
        """
        return self._parse()

    def contains(self, token:str) -> bool:
        checkString(token, "Class name")
        return token in self._parse()

    def add(self, token:str) -> None:
        self._checkToken(token)
        tokens = self._parse()
        if token in tokens: return
        tokens.append(token)
        self._write(tokens)

    def addMultiple(self, tokens:Iterable[str]) -> None:
        newTokens = checkStrings(tokens, "Class name")
        for token in newTokens: self._checkToken(token)
        curTokens = self._parse()
        changed = False
        for token in newTokens:
            if token in curTokens: continue
            curTokens.append(token)
            changed = True
        if changed: self._write(curTokens)

    def remove(self, token:str) -> None:
        """Drop every occurrence. No write at all if it isn't there.
        """
        checkString(token, "Class name")
        tokens = self._parse()
        if token not in tokens: return
        self._write([ t for t in tokens if t != token ])

    def removeMultiple(self, tokens:Iterable[str]) -> None:
        doomed = set(checkStrings(tokens, "Class name"))
        curTokens = self._parse()
        keep = [ t for t in curTokens if t not in doomed ]
        if len(keep) != len(curTokens): self._write(keep)

    def removeAll(self, exclusions:Iterable[str]=()) -> None:
        """Keep only the 'exclusions' that are already present, in the order
        given by 'exclusions' (not the attribute's order).
        """
        exclusions = checkStrings(exclusions, "Class name")
        if not self._hasRaw(): return
        curTokens = self._parse()
        keep = []
        for token in exclusions:
            if token in curTokens and token not in keep: keep.append(token)
        self._write(keep)

    def toggle(self, token:str, force:bool=None) -> bool:
        """Remove 'token' if present, else add it. With 'force', only ever
        add (True) or only ever remove (False).
        Returns whether 'token' is present afterward.
        """
        self._checkToken(token)
        present = token in self._parse()
        if present and force is not True:
            self.remove(token)
            return False
        if not present and force is not False:
            self.add(token)
            return True
        return present

    def replace(self, token:str, newToken:str) -> bool:
        """Put 'newToken' where 'token' was (at its first position).
        Returns False, changing nothing, if 'token' is not present.
        """
        checkString(token, "Class name")
        self._checkToken(newToken)
        tokens = self._parse()
        if token not in tokens: return False
        result = []
        for t in tokens:
            if t == token: t = newToken
            if t == newToken and newToken in result: continue
            result.append(t)
        self._write(result)
        return True


###############################################################################
#
class StyleMapEditor(AttributeEditor):
    """The "style" attribute as an ordered map of declarations.

    This is not a CSS parser: names are opaque, values are not checked,
    and "!important" is just part of the value. Declarations are split at
    ";", then each at its first ":". A segment with no ":" or no name is
    dropped.

    If a name occurs twice, it keeps its first position but takes the last
    value. Any write re-serializes everything, so such duplicates collapse.

    setProperty() and setMultipleProperties() refuse (InvalidCharacterError)
    anything that would not read back as written: an empty or padded name,
    a name with ":" or ";", or a padded value or one with ";".
    """
    ownerAttribute = "style"

    def _parse(self) -> Dict[str, str]:
        ws = self.wsHandler
        props = {}
        for seg in self._getRaw().split(";"):
            if not ws.strip(seg): continue
            name, colon, value = seg.partition(":")
            name = ws.strip(name)
            if not colon or not name:
                lg.debug("Discarding style declaration %r.", seg)
                continue
            props[name] = ws.strip(value)
        return props

    @staticmethod
    def serialize(props:Mapping) -> str:
        return "; ".join(f"{name}: {value}" for name, value in props.items())

    def _write(self, props:Mapping) -> None:
        self._setRaw(self.serialize(props))

    def _checkName(self, name:str) -> None:
        """Names going *into* the attribute must read back unchanged.
        """
        checkString(name, "Property name")
        if name == "":
            raise ICharE("Property name must not be empty.")
        if ":" in name or ";" in name:
            raise ICharE(f"Property name {name!r} must not contain ':' or ';'.")
        if self.wsHandler.strip(name) != name:
            raise ICharE(f"Property name {name!r} must not start or end with whitespace.")

    def _checkValue(self, value:str) -> None:
        checkString(value, "Property value")
        if ";" in value:
            raise ICharE(f"Property value {value!r} must not contain ';'.")
        if self.wsHandler.strip(value) != value:
            raise ICharE(f"Property value {value!r} must not start or end with whitespace.")

    def __len__(self) -> int:
        return len(self._parse())

    def __iter__(self) -> Iterator[str]:
        return iter(self._parse())

    def __contains__(self, name:Any) -> bool:
        return isinstance(name, str) and name in self._parse()

    def getAllProperties(self) -> Dict[str, str]:
        return self._parse()

    def getProperty(self, name:str, default:Any=None) -> Any:
        checkString(name, "Property name")
        return self._parse().get(name, default)

    def getMultipleProperties(self, names:Iterable[str]) -> Dict[str, str]:
        """Names that aren't there are just left out of the result.
        """
        names = checkStrings(names, "Property name")
        props = self._parse()
        return { name: props[name] for name in names if name in props }

    def hasProperty(self, name:str) -> bool:
        checkString(name, "Property name")
        return name in self._parse()

    def setProperty(self, name:str, value:str) -> None:
        """Replace in place if present, else append.
        """
        self._checkName(name)
        self._checkValue(value)
        props = self._parse()
        props[name] = value
        self._write(props)

    def setMultipleProperties(self, properties:Mapping) -> None:
        if not isinstance(properties, Mapping):
            raise IArgE("Properties must be a mapping, "
                f"{type(properties).__name__} given.")
        pairs = list(properties.items())
        for name, value in pairs:
            self._checkName(name)
            self._checkValue(value)
        props = self._parse()
        for name, value in pairs: props[name] = value
        self._write(props)

    def removeProperty(self, name:str) -> None:
        checkString(name, "Property name")
        props = self._parse()
        if name not in props: return
        del props[name]
        self._write(props)

    def removeMultipleProperties(self, names:Iterable[str]) -> None:
        names = checkStrings(names, "Property name")
        props = self._parse()
        keep = { k: v for k, v in props.items() if k not in names }
        if len(keep) != len(props): self._write(keep)

    def removeAllProperties(self, exclusions:Iterable[str]=()) -> None:
        """Keep only the declarations named in 'exclusions', in their
        original order (unlike ClassListEditor.removeAll()).
        """
        exclusions = checkStrings(exclusions, "Property name")
        if not self._hasRaw(): return
        props = self._parse()
        self._write({ k: v for k, v in props.items() if k in exclusions })
