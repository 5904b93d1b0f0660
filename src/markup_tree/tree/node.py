"""Mutable markup node tree.

This module implements ``Node``, a single tagged element of a document tree,
together with the structural mutation, attribute, text extraction and
serialization operations that keep the tree consistent.

The model makes no attempt at validating markup. ``"<"`` is accepted inside a
Text node even though it could never be serialized back faithfully; escaping
and validation belong to the calling library.

Traversals (``text``, ``character_data``, ``to_string``, ``iter_descendants``)
use explicit work lists so arbitrarily deep trees never hit the recursion
limit. Mutating a tree while one of these traversals runs is undefined.
"""

from collections import abc, deque
from typing import (
    Any,
    Deque,
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
)

from markup_tree.character import is_whitespace
from markup_tree.declarations import DoctypeDeclaration, XmlDeclaration
from markup_tree.shared import (
    InvalidArgumentError,
    NoParentError,
    OperationNotSupportedError,
    SerializationConfig,
    get_logger,
)
from markup_tree.shared.validation import require_name, require_string

from . import _links
from .node_types import (
    CDATA,
    CHARACTER_DATA_TYPES,
    COMMENT,
    CONTAINER_TYPES,
    DOCUMENT,
    ELEMENT,
    ELEMENT_TYPES,
    NAMED_TYPES,
    PROCESSING_INSTRUCTION,
    TEXT,
    VOID_ELEMENT,
    NodeType,
    resolve_node_type,
    type_name,
)

logger = get_logger(__name__, component="node")

_TEXT_ONLY: FrozenSet[NodeType] = frozenset({TEXT})

NodeArgs = Union["Node", Iterable["Node"]]
ClassNames = Union[str, Iterable[str]]


def _split_class_tokens(value: str) -> List[str]:
    """Split a class attribute on whitespace, dropping empty tokens."""
    tokens: List[str] = []
    current: List[str] = []
    for char in value:
        if is_whitespace(char):
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return tokens


def _class_tokens(class_names: Any) -> List[str]:
    if isinstance(class_names, str):
        class_names = [class_names]
    elif not isinstance(class_names, abc.Iterable):
        raise InvalidArgumentError(
            f"Expected class_name to be one of str|Iterable[str], "
            f"instead got {type(class_names).__name__}",
            "class_name",
        )

    tokens: List[str] = []
    for class_name in class_names:
        tokens.extend(_split_class_tokens(require_string(class_name, "class_name")))
    return tokens


class Node:
    """A single node of a markup document tree.

    A node is tagged with one of the seven ``NodeType`` variants. Fields that do
    not apply to the current type are always empty: a Text node has no
    attributes and no children, a VoidElement has no children, and only a
    Document carries declarations.

    ``parent``, ``previous`` and ``next`` are navigation links maintained by the
    tree operations. They cannot be assigned from outside the package.

    Examples:
        >>> div = Node(ELEMENT, name="div", attributes={"id": "main"})
        >>> div.append_child(Node(TEXT, value="hi")).to_string()
        '<div id="main">hi</div>'
    """

    __slots__ = (
        "_type",
        "_attributes",
        "_children",
        "_name",
        "_value",
        "_xml_declaration",
        "_doctype_declaration",
        "_parent",
        "_previous",
        "_next",
    )

    def __init__(
        self,
        node_type: Union[NodeType, int],
        *,
        name: Optional[str] = None,
        attributes: Optional[Mapping[str, str]] = None,
        children: Optional[Iterable["Node"]] = None,
        value: Optional[str] = None,
        xml_declaration: Optional[XmlDeclaration] = None,
        doctype_declaration: Optional[DoctypeDeclaration] = None
    ) -> None:
        """Initialize node.

        Fields that do not apply to ``node_type`` are ignored.

        Args:
            node_type: The node variant, a ``NodeType`` or its ordinal
            name: Name of an Element, VoidElement or ProcessingInstruction
            attributes: Attributes of an Element or VoidElement
            children: Children of a Document or Element
            value: Raw character data of a CDATA, ProcessingInstruction, Text
                or Comment node
            xml_declaration: XML declaration of a Document
            doctype_declaration: DOCTYPE declaration of a Document

        Raises:
            UnregisteredTypeError: If ``node_type`` is not a registered type
        """
        self._type = resolve_node_type(node_type)
        self._attributes: Dict[str, str] = {}
        self._children: List[Node] = []
        self._name = ""
        self._value = ""
        self._xml_declaration: Optional[XmlDeclaration] = None
        self._doctype_declaration: Optional[DoctypeDeclaration] = None
        self._parent: Optional[Node] = None
        self._previous: Optional[Node] = None
        self._next: Optional[Node] = None

        if self._type == DOCUMENT:
            if xml_declaration is not None:
                self.set_xml_declaration(xml_declaration)
            if doctype_declaration is not None:
                self.set_doctype_declaration(doctype_declaration)
        if self._type in NAMED_TYPES and name:
            self.set_name(name)
        if self._type in ELEMENT_TYPES and attributes:
            self.set_attributes(attributes)
        if self._type in CHARACTER_DATA_TYPES and value:
            self.set_value(value)
        if self._type in CONTAINER_TYPES and children:
            self.append_child(children)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    @staticmethod
    def is_node(value: Any) -> bool:
        return isinstance(value, Node)

    @staticmethod
    def is_document(value: Any) -> bool:
        return isinstance(value, Node) and value._type == DOCUMENT

    @staticmethod
    def is_element(value: Any) -> bool:
        """Check for an Element or a VoidElement."""
        return isinstance(value, Node) and value._type in ELEMENT_TYPES

    @staticmethod
    def is_non_void_element(value: Any) -> bool:
        return isinstance(value, Node) and value._type == ELEMENT

    @staticmethod
    def is_void_element(value: Any) -> bool:
        return isinstance(value, Node) and value._type == VOID_ELEMENT

    @staticmethod
    def is_character_data(value: Any) -> bool:
        """Check for any raw character data node.

        This is not the CDATA check: CDATA, ProcessingInstruction, Text and
        Comment nodes all qualify. See ``is_cdata``.
        """
        return isinstance(value, Node) and value._type in CHARACTER_DATA_TYPES

    @staticmethod
    def is_cdata(value: Any) -> bool:
        return isinstance(value, Node) and value._type == CDATA

    @staticmethod
    def is_processing_instruction(value: Any) -> bool:
        return isinstance(value, Node) and value._type == PROCESSING_INSTRUCTION

    @staticmethod
    def is_text(value: Any) -> bool:
        return isinstance(value, Node) and value._type == TEXT

    @staticmethod
    def is_comment(value: Any) -> bool:
        return isinstance(value, Node) and value._type == COMMENT

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @property
    def type(self) -> NodeType:
        return self._type

    @property
    def type_text(self) -> str:
        """The type as text, e.g. ``"ProcessingInstruction"``."""
        return type_name(self._type)

    @property
    def attributes(self) -> Dict[str, str]:
        """A copy of the attributes."""
        return dict(self._attributes)

    @property
    def children(self) -> List["Node"]:
        """A copy of the children in document order."""
        return list(self._children)

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> str:
        """The raw character data of this node."""
        return self._value

    @property
    def xml_declaration(self) -> Optional[XmlDeclaration]:
        return self._xml_declaration

    @property
    def doctype_declaration(self) -> Optional[DoctypeDeclaration]:
        return self._doctype_declaration

    @property
    def can_contain_children(self) -> bool:
        """Only Document and Element nodes hold children."""
        return self._type in CONTAINER_TYPES

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def parent(self) -> Optional["Node"]:
        return self._parent

    @property
    def previous(self) -> Optional["Node"]:
        """The previous sibling."""
        return self._previous

    @property
    def next(self) -> Optional["Node"]:
        """The next sibling."""
        return self._next

    @property
    def first_child(self) -> Optional["Node"]:
        return self._children[0] if self._children else None

    @property
    def last_child(self) -> Optional["Node"]:
        return self._children[-1] if self._children else None

    @property
    def root(self) -> "Node":
        """The highest ancestor, or this node when it has no parent."""
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    @property
    def oldest_sibling(self) -> Optional["Node"]:
        """The first child of this node's parent."""
        return self._parent.first_child if self._parent is not None else None

    @property
    def youngest_sibling(self) -> Optional["Node"]:
        """The last child of this node's parent."""
        return self._parent.last_child if self._parent is not None else None

    @property
    def is_child(self) -> bool:
        return self._parent is not None

    @property
    def is_first_child(self) -> bool:
        return self._parent is not None and self._parent.first_child is self

    @property
    def is_last_child(self) -> bool:
        return self._parent is not None and self._parent.last_child is self

    @property
    def is_only_child(self) -> bool:
        return self._parent is not None and len(self._parent._children) == 1

    @property
    def is_sibling(self) -> bool:
        """True when the parent holds at least one other child."""
        return self._parent is not None and len(self._parent._children) > 1

    @property
    def is_parent(self) -> bool:
        return bool(self._children)

    @property
    def is_grandchild(self) -> bool:
        return self._parent is not None and self._parent._parent is not None

    @property
    def is_grandparent(self) -> bool:
        return any(child._children for child in self._children)

    def is_child_of(self, node: "Node") -> bool:
        return self._parent is node

    def is_parent_of(self, node: "Node") -> bool:
        return isinstance(node, Node) and node._parent is self

    def nth_child(self, n: int) -> Optional["Node"]:
        """Get a child by 1-based position.

        Negative positions count back from the last child, so ``-1`` is the last
        child. Position ``0`` and positions out of range return None.
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidArgumentError(
                f"Expected n to be an integer, instead got {type(n).__name__}", "n"
            )
        if n == 0:
            return None

        index = n - 1 if n > 0 else len(self._children) + n
        if 0 <= index < len(self._children):
            return self._children[index]
        return None

    def iter_descendants(self) -> Iterator["Node"]:
        """Yield every descendant in document order (pre-order)."""
        stack: List[Node] = list(reversed(self._children))
        while stack:
            node = stack.pop()
            yield node
            if node._children:
                stack.extend(reversed(node._children))

    # ------------------------------------------------------------------
    # Type, name, value and declarations
    # ------------------------------------------------------------------

    def set_type(self, node_type: Union[NodeType, int]) -> "Node":
        """Convert this node to another type.

        Every field that is not meaningful for the new type is cleared. For
        example an Element turned into a VoidElement loses its children, and a
        node turned into a Document is detached from its parent first.

        Raises:
            UnregisteredTypeError: If ``node_type`` is not a registered type
        """
        new_type = resolve_node_type(node_type)
        old_type = self._type

        if new_type == DOCUMENT:
            self.emancipate()
            self._attributes = {}
            self._name = ""
            self._value = ""
        elif new_type == ELEMENT:
            self._xml_declaration = None
            self._doctype_declaration = None
            self._value = ""
        elif new_type == VOID_ELEMENT:
            self.remove_children()
            self._xml_declaration = None
            self._doctype_declaration = None
            self._value = ""
        elif new_type == PROCESSING_INSTRUCTION:
            self.remove_children()
            self._attributes = {}
            self._xml_declaration = None
            self._doctype_declaration = None
        else:
            self.remove_children()
            self._attributes = {}
            self._xml_declaration = None
            self._doctype_declaration = None
            self._name = ""

        self._type = new_type

        logger.debug(
            "Node type changed",
            extra={"from_type": type_name(old_type), "to_type": type_name(new_type)},
        )
        return self

    def set_name(self, name: str) -> "Node":
        """Set the name of an Element, VoidElement or ProcessingInstruction."""
        self._require(NAMED_TYPES, "set_name")
        self._name = require_name(name, "name")
        return self

    def remove_name(self) -> "Node":
        """Clear the name. A ProcessingInstruction always keeps its target name."""
        if self._type == PROCESSING_INSTRUCTION:
            raise OperationNotSupportedError(
                "Cannot use remove_name on a ProcessingInstruction Node",
                "remove_name",
                self.type_text,
            )
        self._name = ""
        return self

    def set_value(self, value: str) -> "Node":
        """Set the raw character data of a character data node."""
        self._require(CHARACTER_DATA_TYPES, "set_value")
        self._value = require_string(value, "value")
        return self

    def remove_value(self) -> "Node":
        self._value = ""
        return self

    def set_xml_declaration(self, xml_declaration: XmlDeclaration) -> "Node":
        self._require(frozenset({DOCUMENT}), "set_xml_declaration")
        if not XmlDeclaration.is_xml_declaration(xml_declaration):
            raise InvalidArgumentError(
                f"Expected xml_declaration to be an XmlDeclaration, "
                f"instead got {type(xml_declaration).__name__}",
                "xml_declaration",
            )
        self._xml_declaration = xml_declaration
        return self

    def remove_xml_declaration(self) -> "Node":
        self._xml_declaration = None
        return self

    def set_doctype_declaration(self, doctype_declaration: DoctypeDeclaration) -> "Node":
        self._require(frozenset({DOCUMENT}), "set_doctype_declaration")
        if not DoctypeDeclaration.is_doctype_declaration(doctype_declaration):
            raise InvalidArgumentError(
                f"Expected doctype_declaration to be a DoctypeDeclaration, "
                f"instead got {type(doctype_declaration).__name__}",
                "doctype_declaration",
            )
        self._doctype_declaration = doctype_declaration
        return self

    def remove_doctype_declaration(self) -> "Node":
        self._doctype_declaration = None
        return self

    # ------------------------------------------------------------------
    # Structural mutation
    # ------------------------------------------------------------------

    def append_child(self, *nodes: NodeArgs) -> "Node":
        """Append nodes as the last children of this node.

        Accepts several nodes or a single iterable of nodes. Nodes that already
        have a parent are moved.

        Raises:
            OperationNotSupportedError: If this node cannot contain children
            InvalidArgumentError: For non-Node arguments, Document nodes, or an
                argument that is this node or one of its ancestors
        """
        self._require_container("append_child")
        incoming = self._prepare_insert(nodes, self, "append_child")
        self._insert(incoming)
        return self

    def prepend_child(self, *nodes: NodeArgs) -> "Node":
        """Insert nodes, in the given order, before the current first child."""
        self._require_container("prepend_child")
        incoming = self._prepare_insert(nodes, self, "prepend_child")
        self._insert(incoming, at_start=True)
        return self

    def set_children(self, *nodes: NodeArgs) -> "Node":
        """Replace all children with the given nodes."""
        self._require_container("set_children")
        incoming = self._prepare_insert(nodes, self, "set_children")
        keep = {id(node) for node in incoming}
        self.remove_child([child for child in self._children if id(child) not in keep])
        self._insert(incoming)
        return self

    def append_sibling(self, *nodes: NodeArgs) -> "Node":
        """Insert nodes, in the given order, directly after this node.

        Raises:
            OperationNotSupportedError: If this node is a Document
            NoParentError: If this node has no parent
        """
        parent = self._require_parent("append_sibling")
        incoming = self._prepare_insert(nodes, parent, "append_sibling")
        parent._insert_relative(self, incoming, after=True)
        return self

    def prepend_sibling(self, *nodes: NodeArgs) -> "Node":
        """Insert nodes, in the given order, directly before this node."""
        parent = self._require_parent("prepend_sibling")
        incoming = self._prepare_insert(nodes, parent, "prepend_sibling")
        parent._insert_relative(self, incoming, after=False)
        return self

    def remove_child(self, *nodes: NodeArgs) -> "Node":
        """Remove the given nodes from this node's children.

        Nodes that are not children of this node are ignored. Each removed node
        becomes an independent root with no parent and no siblings.
        """
        targets = {id(node) for node in self._flatten(nodes, "remove_child")}
        if not self._children:
            return self

        remaining: List[Node] = []
        removed: List[Node] = []
        for child in self._children:
            (removed if id(child) in targets else remaining).append(child)

        if not removed:
            return self

        self._children = remaining
        for child in removed:
            _links.sever(child)
        _links.relink(self, remaining)
        return self

    def remove_children(self) -> "Node":
        """Remove every child of this node."""
        return self.remove_child(self._children)

    def emancipate(self) -> "Node":
        """Remove this node from its parent. No-op for a root node."""
        if self._parent is not None:
            self._parent.remove_child(self)
        return self

    batman = emancipate

    def _insert(self, incoming: List["Node"], at_start: bool = False) -> None:
        if not incoming:
            return
        for node in incoming:
            node.emancipate()
        index = 0 if at_start else len(self._children)
        self._children[index:index] = incoming
        _links.relink(self, self._children, index, index + len(incoming))

    def _insert_relative(self, anchor: "Node", incoming: List["Node"], after: bool) -> None:
        if not incoming:
            return
        for node in incoming:
            node.emancipate()
        # the anchor's position may have shifted when siblings were moved
        index = self._children.index(anchor) + (1 if after else 0)
        self._children[index:index] = incoming
        _links.relink(self, self._children, index, index + len(incoming))

    # ------------------------------------------------------------------
    # Attributes and classes
    # ------------------------------------------------------------------

    def add_attribute(self, name: str, value: str = "") -> "Node":
        """Add an attribute, overwriting any attribute with the same name."""
        self._require(ELEMENT_TYPES, "add_attribute")
        name = require_name(name, "name")
        self._attributes[name] = require_string(value, "value")
        return self

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        self._require(ELEMENT_TYPES, "get_attribute")
        return self._attributes.get(require_string(name, "name").strip(), default)

    def has_attribute(self, name: str) -> bool:
        self._require(ELEMENT_TYPES, "has_attribute")
        return require_string(name, "name").strip() in self._attributes

    def remove_attribute(self, name: str) -> "Node":
        self._require(ELEMENT_TYPES, "remove_attribute")
        self._attributes.pop(require_string(name, "name").strip(), None)
        return self

    def remove_attributes(self) -> "Node":
        self._require(ELEMENT_TYPES, "remove_attributes")
        self._attributes = {}
        return self

    def set_attributes(self, attributes: Mapping[str, str]) -> "Node":
        """Replace every attribute with ``attributes``.

        All entries are validated before the current attributes are discarded.
        """
        self._require(ELEMENT_TYPES, "set_attributes")
        if not isinstance(attributes, abc.Mapping):
            raise InvalidArgumentError(
                f"Expected attributes to be a mapping, instead got {type(attributes).__name__}",
                "attributes",
            )

        validated: Dict[str, str] = {}
        for name, value in attributes.items():
            validated[require_name(name, "name")] = require_string(value, "value")

        self._attributes = validated
        return self

    @property
    def class_list(self) -> List[str]:
        """The tokens of the ``class`` attribute, in order."""
        return _split_class_tokens(self._attributes.get("class", ""))

    def add_class(self, class_name: ClassNames) -> "Node":
        """Add class names, skipping the ones already present."""
        self._require(ELEMENT_TYPES, "add_class")
        tokens = _class_tokens(class_name)
        self._attributes["class"] = " ".join(dict.fromkeys(self.class_list + tokens))
        return self

    def remove_class(self, class_name: ClassNames) -> "Node":
        self._require(ELEMENT_TYPES, "remove_class")
        tokens = set(_class_tokens(class_name))
        if "class" not in self._attributes:
            return self
        self._attributes["class"] = " ".join(
            token for token in dict.fromkeys(self.class_list) if token not in tokens
        )
        return self

    def toggle_class(self, class_name: ClassNames) -> "Node":
        """Flip the membership of each class name independently.

        Names being added go to the end of the class list.
        """
        self._require(ELEMENT_TYPES, "toggle_class")
        tokens = _class_tokens(class_name)
        current = dict.fromkeys(self.class_list)
        for token in tokens:
            if token in current:
                del current[token]
            else:
                current[token] = None
        self._attributes["class"] = " ".join(current)
        return self

    # ------------------------------------------------------------------
    # Text extraction
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        """Concatenated values of all Text nodes in document order.

        Formatting whitespace is kept verbatim; this is not a browser's
        ``textContent``.
        """
        return self._collect_values(_TEXT_ONLY)

    @property
    def character_data(self) -> str:
        """Concatenated values of all character data nodes in document order."""
        return self._collect_values(CHARACTER_DATA_TYPES)

    def _collect_values(self, accepted: FrozenSet[NodeType]) -> str:
        if self._type in accepted:
            return self._value

        parts: List[str] = []
        work: Deque[Tuple[Node, Deque[Node]]] = deque([(self, deque(self._children))])

        while work:
            node, remaining = work.popleft()
            while remaining:
                child = remaining.popleft()
                if child._children:
                    if remaining:
                        work.appendleft((node, remaining))
                    work.appendleft((child, deque(child._children)))
                    break
                if child._type in accepted:
                    parts.append(child._value)

        return "".join(parts)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_string(self, config: Optional[SerializationConfig] = None, **options: Any) -> str:
        """Render this node and its descendants as markup.

        Args:
            config: Serialization settings; defaults to ``SerializationConfig()``
            **options: ``indent_char``, ``indent_size`` and ``use_new_line``,
                overriding the matching ``config`` fields. Other options are
                ignored.

        Returns:
            The rendered markup. Nothing is escaped.
        """
        ignored = sorted(set(options) - set(SerializationConfig.known_fields(options)))
        if ignored:
            logger.debug("Unrecognized serialization options ignored", extra={"options": ignored})

        if config is None:
            config = SerializationConfig.from_dict(options)
        elif options:
            config = config.override(**options)

        segments: List[str] = []
        queue: Deque[Tuple[Node, int, bool]] = deque([(self, 0, False)])

        while queue:
            node, depth, should_close = queue.popleft()
            indent = config.indent_for(depth)
            node_type = node._type

            if node_type == ELEMENT:
                if should_close:
                    segments.append(f"{indent}</{node._name}>")
                    continue

                attributes = "".join(f' {name}="{value}"' for name, value in node._attributes.items())
                segments.append(f"{indent}<{node._name}{attributes}>")

                if node._children:
                    queue.appendleft((node, depth, True))
                    queue.extendleft((child, depth + 1, False) for child in reversed(node._children))
            elif node_type == TEXT:
                if node._value:
                    segments.append(f"{indent}{node._value}")
            elif node_type == COMMENT:
                segments.append(f"{indent}<!-- {node._value} -->")
            elif node_type == CDATA:
                # no closing ">" is emitted
                segments.append(f"{indent}<![CDATA[{node._value}]]")
            elif node_type == PROCESSING_INSTRUCTION:
                segments.append(f"<?{node._name} {node._value}?>")
            elif node_type == DOCUMENT:
                if node._xml_declaration is not None:
                    segments.append(node._xml_declaration.to_string())
                if node._doctype_declaration is not None:
                    segments.append(node._doctype_declaration.to_string())
                queue.extendleft((child, depth, False) for child in reversed(node._children))
            else:
                logger.debug(
                    "VoidElement has no serialized form; skipped",
                    extra={"element_name": node._name, "depth": depth},
                )

        return config.separator.join(segments)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self._type in CHARACTER_DATA_TYPES and self._type != PROCESSING_INSTRUCTION:
            return f"<Node {self.type_text} value={self._value!r}>"
        return f"<Node {self.type_text} name={self._name!r} children={len(self._children)}>"

    # ------------------------------------------------------------------
    # Guards
    # ------------------------------------------------------------------

    def _require(self, allowed: FrozenSet[NodeType], operation: str) -> None:
        if self._type not in allowed:
            raise OperationNotSupportedError(
                f"Cannot use {operation} on {self.type_text} Node",
                operation,
                self.type_text,
            )

    def _require_container(self, operation: str) -> None:
        self._require(CONTAINER_TYPES, operation)

    def _require_parent(self, operation: str) -> "Node":
        if self._type == DOCUMENT:
            raise OperationNotSupportedError(
                f"Cannot use {operation} on Document Node", operation, self.type_text
            )
        if self._parent is None:
            raise NoParentError(
                f"Cannot use {operation} on Nodes without a parent Node", operation
            )
        return self._parent

    @staticmethod
    def _flatten(nodes: Tuple[Any, ...], operation: str) -> List["Node"]:
        """Accept ``f(a, b)`` as well as ``f([a, b])``."""
        if len(nodes) == 1 and not isinstance(nodes[0], Node):
            candidate = nodes[0]
            if isinstance(candidate, (str, bytes)) or not isinstance(candidate, abc.Iterable):
                raise InvalidArgumentError(
                    f"Expected {operation} to receive Node|Iterable[Node], "
                    f"instead got {type(candidate).__name__}",
                    "nodes",
                )
            nodes = tuple(candidate)

        flattened: List[Node] = []
        for node in nodes:
            if not isinstance(node, Node):
                raise InvalidArgumentError(
                    f"Expected {operation} to receive only Nodes, instead found {type(node).__name__}",
                    "nodes",
                )
            flattened.append(node)
        return flattened

    def _prepare_insert(self, nodes: Tuple[Any, ...], container: "Node", operation: str) -> List["Node"]:
        """Validate nodes about to be inserted into ``container``.

        Duplicates collapse to their first occurrence. Nothing is mutated here.
        """
        incoming: List[Node] = []
        seen = set()
        for node in self._flatten(nodes, operation):
            if id(node) in seen:
                continue
            seen.add(id(node))

            if node._type == DOCUMENT:
                raise InvalidArgumentError(
                    f"Cannot use {operation} with a Document Node; Document Nodes cannot be children",
                    "nodes",
                )
            if container is not self and node is self:
                raise InvalidArgumentError(
                    f"Cannot use {operation} with the Node itself", "nodes"
                )
            ancestor: Optional[Node] = container
            while ancestor is not None:
                if ancestor is node:
                    raise InvalidArgumentError(
                        f"Cannot use {operation} with an ancestor of the target Node; "
                        "the tree would contain a cycle",
                        "nodes",
                    )
                ancestor = ancestor._parent
            incoming.append(node)
        return incoming
