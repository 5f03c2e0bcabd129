"""Tree-sitter structure source.

Parses Java and Python with grammars from tree-sitter-language-pack and
reports declared types and their members as TypeNode/MemberNode values.

- Java: each top-level class, interface, enum, record or annotation
  type is a TypeNode; its body declarations are the members.
- Python: the module is the single enclosing type (starting at line 1);
  top-level ``class`` and ``def`` statements are its members.

A member's leading comment is the run of comment siblings directly above
it, each ending on the line before the next one starts. Comments that
share a line with the end of the previous declaration are not leading.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from loguru import logger

from collate.segmentation.types import MemberNode, NodeKind, TypeNode
from collate.types.core import line_from_row, split_lines
from collate.types.errors import StructuralParseError

if TYPE_CHECKING:
    from tree_sitter import Node, Parser


_JAVA_TYPE_NODES: frozenset[str] = frozenset(
    {
        "class_declaration",
        "interface_declaration",
        "enum_declaration",
        "record_declaration",
        "annotation_type_declaration",
    }
)

_JAVA_MEMBER_KINDS: dict[str, NodeKind] = {
    "method_declaration": NodeKind.METHOD,
    "constructor_declaration": NodeKind.CONSTRUCTOR,
    "compact_constructor_declaration": NodeKind.CONSTRUCTOR,
    "field_declaration": NodeKind.FIELD,
    "constant_declaration": NodeKind.FIELD,
    **{t: NodeKind.TYPE for t in _JAVA_TYPE_NODES},
}

_PYTHON_MEMBER_KINDS: dict[str, NodeKind] = {
    "function_definition": NodeKind.METHOD,
    "class_definition": NodeKind.TYPE,
}

_COMMENT_NODES: frozenset[str] = frozenset({"comment", "line_comment", "block_comment"})

_SUPPORTED_LANGUAGES: frozenset[str] = frozenset({"java", "python"})


def _node_name(node: Node) -> str | None:
    name = node.child_by_field_name("name")
    if name is None or name.text is None:
        return None
    return name.text.decode("utf-8", errors="replace")


def _start_line(node: Node) -> int:
    return line_from_row(node.start_point[0])


def _end_line(node: Node) -> int:
    return line_from_row(node.end_point[0])


def _with_leading_comments(children: list[Node]) -> list[tuple[Node, int | None]]:
    """Pair every non-comment node with the start line of its leading comment.

    A comment starting on the row where the previous node ends trails that
    node and never leads the next one.
    """
    paired: list[tuple[Node, int | None]] = []
    run: list[Node] = []
    previous_end_row = -1
    for child in children:
        if child.type in _COMMENT_NODES:
            if child.start_point[0] <= previous_end_row:
                continue
            if run and child.start_point[0] - run[-1].end_point[0] > 1:
                run = []
            run.append(child)
            continue
        comment_start = None
        if run and child.start_point[0] - run[-1].end_point[0] <= 1:
            comment_start = _start_line(run[0])
        paired.append((child, comment_start))
        run = []
        previous_end_row = child.end_point[0]
    return paired


def _java_body_children(type_node: Node) -> list[Node]:
    body = type_node.child_by_field_name("body")
    if body is None:
        return []
    children: list[Node] = []
    for child in body.named_children:
        # enum members live in a nested enum_body_declarations node
        if child.type == "enum_body_declarations":
            children.extend(child.named_children)
        else:
            children.append(child)
    return children


class TreeSitterStructureSource:
    """StructureSource backed by tree-sitter.

    Parsers are created lazily per language and shared; parsing is
    serialized with a lock so one instance can serve several worker
    threads.
    """

    def __init__(self) -> None:
        self._parsers: dict[str, Parser] = {}
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "tree_sitter"

    def supports_language(self, language: str) -> bool:
        return language in _SUPPORTED_LANGUAGES

    def _ensure_parser(self, language: str, file_path: str) -> Parser:
        if language in self._parsers:
            return self._parsers[language]

        try:
            import tree_sitter_language_pack as tslp
            from tree_sitter import Parser

            lang = tslp.get_language(language)
            parser = Parser(lang)
        except Exception as e:
            raise StructuralParseError(
                f"failed to initialize tree-sitter for {language}: {e}",
                file_path=file_path,
                original_error=e,
            ) from e

        self._parsers[language] = parser
        logger.debug("Initialized tree-sitter parser for {}", language)
        return parser

    def parse_types(
        self,
        content: str,
        file_path: str,
        language: str,
    ) -> list[TypeNode]:
        if not self.supports_language(language):
            raise StructuralParseError(
                f"no structural grammar for language '{language}'",
                file_path=file_path,
            )

        with self._lock:
            parser = self._ensure_parser(language, file_path)
            tree = parser.parse(content.encode("utf-8"))

        root = tree.root_node
        if root.has_error:
            raise StructuralParseError(
                f"syntax errors in {language} source",
                file_path=file_path,
            )

        if language == "java":
            return self._java_types(root)
        return self._python_types(root, content)

    # ----------------------------------------------------------------
    # Java
    # ----------------------------------------------------------------

    def _java_types(self, root: Node) -> list[TypeNode]:
        types: list[TypeNode] = []
        for node, comment_start in _with_leading_comments(root.named_children):
            if node.type not in _JAVA_TYPE_NODES:
                continue
            members = tuple(
                MemberNode(
                    kind=_JAVA_MEMBER_KINDS.get(child.type, NodeKind.OTHER),
                    start_line=_start_line(child),
                    end_line=_end_line(child),
                    comment_start_line=child_comment,
                    name=_node_name(child),
                )
                for child, child_comment in _with_leading_comments(_java_body_children(node))
            )
            types.append(
                TypeNode(
                    start_line=_start_line(node),
                    end_line=_end_line(node),
                    members=members,
                    comment_start_line=comment_start,
                    name=_node_name(node),
                )
            )
        return types

    # ----------------------------------------------------------------
    # Python
    # ----------------------------------------------------------------

    def _python_types(self, root: Node, content: str) -> list[TypeNode]:
        if not content.strip():
            return []

        members: list[MemberNode] = []
        for child, comment_start in _with_leading_comments(root.named_children):
            # decorators belong to the definition they wrap
            definition = child
            if child.type == "decorated_definition":
                definition = child.child_by_field_name("definition") or child
            members.append(
                MemberNode(
                    kind=_PYTHON_MEMBER_KINDS.get(definition.type, NodeKind.OTHER),
                    start_line=_start_line(child),
                    end_line=_end_line(child),
                    comment_start_line=comment_start,
                    name=_node_name(definition),
                )
            )

        return [
            TypeNode(
                start_line=1,
                end_line=max(1, len(split_lines(content))),
                members=tuple(members),
                name="<module>",
            )
        ]
