"""
Tests for the recognizer: each rule on its own, rule priority, scanning,
and failure reporting.
"""

import pytest

from modport import Language, recognize, recognize_prefix
from modport.frontend.recognizer import (
    match_default_import,
    match_multi_line_comment,
    match_named_import,
    match_namespace_import,
    match_single_line_comment,
)
from modport.shared.errors import RecognitionError, UnsupportedLanguageError
from modport.shared.nodes import (
    Comment, Default, ImportDeclaration, Item, Namespace,
)
from modport.utils.config import (
    AS_KEYWORD, BLOCK_COMMENT_CLOSE, BLOCK_COMMENT_OPEN, FROM_KEYWORD, IMPORT_KEYWORD,
    LINE_COMMENT_MARKER, NAMESPACE_MARKER, STATEMENT_TERMINATOR, STRING_QUOTE_CHAR,
)

TS = Language.TYPESCRIPT


def _single(text):
    nodes, consumed = recognize(TS, text)
    assert consumed == len(text)
    assert len(nodes) == 1
    return nodes[0]


class TestComments:

    def test_single_line_comment_keeps_leading_space(self):
        assert _single("// hello") == Comment(" hello")

    def test_single_line_comment_stops_before_line_break(self):
        match = match_single_line_comment("// Foo\nbar", 0)
        assert match.node == Comment(" Foo")
        assert match.end == 6

    def test_empty_single_line_comment(self):
        assert _single("//") == Comment("")

    def test_multi_line_comment_keeps_inner_text_verbatim(self):
        assert _single("/*\nHello there\n*/") == Comment("\nHello there\n")

    def test_multi_line_comment_ends_at_first_close(self):
        match = match_multi_line_comment("/* a */ b */", 0)
        assert match.node == Comment(" a ")
        assert match.end == 7

    def test_unterminated_multi_line_comment_is_no_match(self):
        assert match_multi_line_comment("/* never closed", 0) is None

    def test_rules_respect_position(self):
        text = "x // tail"
        assert match_single_line_comment(text, 0) is None
        assert match_single_line_comment(text, 2).node == Comment(" tail")


class TestImportRules:

    def test_namespace_import(self):
        expected = ImportDeclaration("developers", [Namespace("daniel")])
        assert _single('import * as daniel from "developers";') == expected

    def test_namespace_local_name_is_trimmed(self):
        node = _single('import   *   as   daniel    from "developers";')
        assert node.specifiers == (Namespace("daniel"),)

    def test_namespace_name_may_start_with_from(self):
        node = _single('import * as fromage from "cheese";')
        assert node == ImportDeclaration("cheese", [Namespace("fromage")])

    def test_default_import(self):
        expected = ImportDeclaration("developers", [Default("peter")])
        assert _single('import peter from "developers";') == expected

    def test_single_named_import(self):
        expected = ImportDeclaration("developers", [Item("thorsten", "thorsten")])
        assert _single('import { thorsten } from "developers";') == expected

    def test_single_renamed_named_import(self):
        expected = ImportDeclaration("developers", [Item("thorsten", "sabine")])
        assert _single('import { thorsten as sabine } from "developers";') == expected

    def test_multiple_named_imports(self):
        expected = ImportDeclaration("developers", [
            Item("katrin", "katrin"),
            Item("thorsten", "sabine"),
        ])
        assert _single('import { katrin, thorsten as sabine } from "developers";') == expected

    def test_named_import_across_lines(self):
        text = 'import {\n  readFile,\n  writeFile as save,\n} from "./io";'
        assert _single(text) == ImportDeclaration("./io", [Item.bare("readFile"), Item("writeFile", "save")])

    def test_source_is_kept_as_written(self):
        node = _single('import x from " ./lib/../x ";')
        assert node.source == " ./lib/../x "

    def test_rule_reports_end_after_terminator(self):
        text = 'import peter from "developers"; // trailing'
        match = match_default_import(text, 0)
        assert match.end == text.index(";") + 1

    def test_rules_do_not_match_other_shapes(self):
        namespace = 'import * as daniel from "developers";'
        default = 'import peter from "developers";'
        named = 'import { thorsten } from "developers";'
        assert match_default_import(namespace, 0) is None
        assert match_named_import(namespace, 0) is None
        assert match_namespace_import(default, 0) is None
        assert match_named_import(default, 0) is None
        assert match_namespace_import(named, 0) is None
        assert match_default_import(named, 0) is None

    def test_star_inside_source_is_not_a_namespace(self):
        node = _single('import { a } from "glob/*";')
        assert node == ImportDeclaration("glob/*", [Item.bare("a")])

    def test_rules_use_configured_tokens(self):
        text = (
            f"{LINE_COMMENT_MARKER} a\n"
            f"{BLOCK_COMMENT_OPEN}b{BLOCK_COMMENT_CLOSE}\n"
            f"{IMPORT_KEYWORD} {NAMESPACE_MARKER} {AS_KEYWORD} ns {FROM_KEYWORD} "
            f"{STRING_QUOTE_CHAR}m{STRING_QUOTE_CHAR}{STATEMENT_TERMINATOR}"
        )
        nodes, consumed = recognize(TS, text)
        assert consumed == len(text)
        assert nodes == [Comment(" a"), Comment("b"), ImportDeclaration("m", [Namespace("ns")])]


class TestScanning:

    def test_empty_input(self):
        result = recognize(TS, "")
        assert result.nodes == []
        assert result.consumed == 0

    def test_whitespace_only_input(self):
        assert recognize(TS, "  \n\t\n") == ([], 5)

    def test_sequence_keeps_textual_order(self):
        text = (
            "// bindings\n"
            'import * as path from "path";\n'
            "\n"
            'import React from "react";  import { a } from "a";\n'
            "/* done */\n"
        )
        nodes, consumed = recognize(TS, text)
        assert consumed == len(text)
        assert nodes == [
            Comment(" bindings"),
            ImportDeclaration("path", [Namespace("path")]),
            ImportDeclaration("react", [Default("React")]),
            ImportDeclaration("a", [Item.bare("a")]),
            Comment(" done "),
        ]

    def test_javascript_uses_same_rules(self):
        assert recognize(Language.JAVASCRIPT, 'import a from "b";').nodes == [
            ImportDeclaration("b", [Default("a")])
        ]

    def test_language_by_name(self):
        assert recognize("ts", "// x").nodes == [Comment(" x")]

    def test_prefix_stops_at_first_unmatched_position(self):
        nodes, consumed = recognize_prefix(TS, "/* a */ b */")
        assert nodes == [Comment(" a ")]
        assert consumed == 8


class TestRecognitionFailures:

    @pytest.mark.parametrize("text", [
        'import a from "b"',                  # missing terminator
        "import a from 'b';",                 # single quotes
        'import {} from "b";',                # empty specifier list
        'import { a { b } } from "c";',       # nested braces
        'importa from "b";',                  # not the import keyword
        'import foo, * as ns from "lib";',    # combined clause
        'export const x = 1;',
    ])
    def test_unrecognized_statements(self, text):
        with pytest.raises(RecognitionError) as exc_info:
            recognize(TS, text)
        assert exc_info.value.position == 0

    def test_unterminated_statement_does_not_swallow_the_next_one(self):
        text = 'import a from "x"\nimport * as b from "c";'
        with pytest.raises(RecognitionError) as exc_info:
            recognize(TS, text)
        assert exc_info.value.position == 0

    def test_error_carries_position_and_location(self):
        text = "// ok\n  export x;"
        with pytest.raises(RecognitionError) as exc_info:
            recognize(TS, text, source_file="main.ts")
        error = exc_info.value
        assert error.position == 8
        assert error.location.file == "main.ts"
        assert (error.location.line, error.location.column) == (2, 3)
        assert error.excerpt == "export x;"
        assert "main.ts:2:3" in str(error)

    def test_unsupported_language(self):
        with pytest.raises(UnsupportedLanguageError):
            recognize("cobol", "// x")
        with pytest.raises(UnsupportedLanguageError):
            recognize(None, "// x")
