"""
Tests for the S-expression debug rendering of declaration sequences.
"""

import pytest
import sexpdata

from modport.shared.nodes import (
    Comment, Default, ImportDeclaration, Item, Namespace, UnknownExpression,
)
from modport.shared.serialization import deserialize_nodes, serialize_nodes


class TestSerializeNodes:

    def test_empty_program(self):
        assert serialize_nodes([]) == "(program)"

    def test_compact_form(self):
        nodes = [
            Comment(" hello"),
            ImportDeclaration("developers", [Namespace("daniel")]),
        ]
        assert serialize_nodes(nodes, pretty=False) == (
            '(program (comment " hello") (import "developers" (namespace "daniel")))'
        )

    def test_specifier_forms(self):
        decl = ImportDeclaration("m", [Default("d"), Item("a", "b")])
        assert serialize_nodes([decl], pretty=False) == (
            '(program (import "m" (default "d") (item "a" "b")))'
        )

    def test_short_programs_stay_on_one_line(self):
        nodes = [UnknownExpression("x;")]
        assert serialize_nodes(nodes) == serialize_nodes(nodes, pretty=False)

    def test_long_programs_break_per_node(self):
        nodes = [Comment("c" * 60), UnknownExpression("u" * 60)]
        out = serialize_nodes(nodes)
        assert out.split("\n") == [
            "(program",
            '  (comment "' + "c" * 60 + '")',
            '  (unknown "' + "u" * 60 + '")',
            ")",
        ]

    def test_special_characters_are_escaped(self):
        out = serialize_nodes([Comment('\nsay "hi"\\\n')], pretty=False)
        assert out == '(program (comment "\\nsay \\"hi\\"\\\\\\n"))'


class TestDeserializeNodes:

    def test_reads_back_a_mixed_sequence(self):
        nodes = [
            Comment("\nHello there\n"),
            ImportDeclaration("./.gen/all", [Item.bare("foo"), Item("baz", "bar"), Namespace("lib"), Default("d")]),
            UnknownExpression('console.log("hi");'),
        ]
        assert deserialize_nodes(serialize_nodes(nodes)) == nodes

    @pytest.mark.parametrize("text", [
        "(comment \"x\")",
        "\"just a string\"",
        "(program (comment \"x\")",
        "(program (export \"x\"))",
        "(program (comment))",
        "(program (import))",
        '(program (import "m" (item "a")))',
        '(program (comment "a" "b"))',
        '(program (import "m" "n"))',
        "(program (unknown nil))",
        "(program comment)",
    ])
    def test_malformed_input(self, text):
        with pytest.raises(ValueError):
            deserialize_nodes(text)


class TestSexpdataInterop:

    def test_compact_form_reads_back_with_sexpdata(self):
        out = serialize_nodes([ImportDeclaration("m", [Item("a", "b")])], pretty=False)
        parsed = sexpdata.loads(out)
        assert isinstance(parsed[0], sexpdata.Symbol)
        assert parsed[0].value() == "program"
        assert sexpdata.dumps(parsed) == out

    def test_pretty_and_compact_forms_read_back_alike(self):
        nodes = [Comment("c" * 60), UnknownExpression("u" * 60)]
        assert deserialize_nodes(serialize_nodes(nodes)) == deserialize_nodes(
            serialize_nodes(nodes, pretty=False)
        )
