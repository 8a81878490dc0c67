"""
Transpile Driver

Chains recognition and emission for a source/target language pair, applies
the recovery policy for unrecognized text and collects diagnostics.
"""

import logging
from enum import Enum
from typing import List, Optional

from ..backends.base import Emitter
from ..backends.codegen import get_emitter
from ..frontend.recognizer import ImportRecognizer, get_recognizer
from ..shared.errors import (
    EmissionError, ErrorReporter, RecognitionError, UnsupportedLanguageError,
)
from ..shared.languages import Language
from ..shared.nodes import Declaration, UnknownExpression
from ..utils.config import LINE_TERMINATORS

logger = logging.getLogger("modport.compiler.driver")


class RecoveryMode(Enum):
    """What the driver does where no recognizer rule matches."""
    ABORT = "abort"              # stop, report the position
    PASSTHROUGH = "passthrough"  # keep the text verbatim as UnknownExpression nodes


class TranspileResult:
    """Transpile result"""
    def __init__(
        self,
        output: Optional[str] = None,
        nodes: Optional[List[Declaration]] = None,
        reporter: Optional[ErrorReporter] = None,
        success: bool = False
    ):
        self.output = output
        self.nodes = nodes if nodes is not None else []
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.success = success

    def has_errors(self) -> bool:
        return self.reporter.has_errors()

    def format_errors(self, color: Optional[bool] = None) -> str:
        if not self.reporter.has_errors():
            return ""
        return self.reporter.format_all_errors(color=color)


class TranspileDriver:
    """
    Transpile driver.

    Phases:
    1. Language selection (recognizer for the source, emitter for the target)
    2. Recognition (text → declaration nodes), with the recovery policy
    3. Emission (declaration nodes → text)

    Any failure means no output for the call; every diagnostic ends up in
    result.reporter.
    """

    def __init__(
        self,
        recovery: RecoveryMode = RecoveryMode.ABORT,
        terminate_statements: bool = False,
    ):
        self.recovery = recovery
        self.terminate_statements = terminate_statements

    def transpile(
        self,
        source: str,
        source_language=Language.TYPESCRIPT,
        target_language=Language.TYPESCRIPT,
        source_file: str = "<input>",
    ) -> TranspileResult:
        reporter = ErrorReporter({source_file: source})

        # Phase 1: language selection
        try:
            recognizer = get_recognizer(source_language)
            emitter = get_emitter(target_language, terminate_statements=self.terminate_statements)
        except UnsupportedLanguageError as e:
            reporter.report_error(
                e.message,
                None,
                code=e.code,
                help="supported languages: " + ", ".join(lang.value for lang in Language),
            )
            return TranspileResult(reporter=reporter)

        # Phase 2: recognition
        if self.recovery is RecoveryMode.PASSTHROUGH:
            nodes = self.recognize_with_passthrough(recognizer, source)
        else:
            try:
                nodes = recognizer.recognize(source, source_file).nodes
            except RecognitionError as e:
                reporter.report_error(
                    "unrecognized input",
                    e.location,
                    code=e.code,
                    label="no comment or import declaration starts here",
                    help="use passthrough recovery to keep unrecognized text verbatim",
                )
                return TranspileResult(reporter=reporter)
        logger.debug("%s: %d nodes recognized", source_file, len(nodes))

        # Phase 3: emission
        return self._emit(emitter, nodes, reporter)

    def _emit(self, emitter: Emitter, nodes: List[Declaration], reporter: ErrorReporter) -> TranspileResult:
        try:
            output = emitter.emit(nodes)
        except EmissionError as e:
            for failure in e.failures:
                reporter.report_error(
                    f"cannot emit node: {failure.reason}",
                    None,
                    code=failure.code,
                    note=f"node: {failure.node}",
                )
            return TranspileResult(nodes=nodes, reporter=reporter)
        return TranspileResult(output=output, nodes=nodes, reporter=reporter, success=True)

    def recognize_with_passthrough(self, recognizer: ImportRecognizer, text: str) -> List[Declaration]:
        """
        Recognize text, turning unmatched regions into UnknownExpression nodes.

        Unmatched characters are skipped one at a time (every rule is retried
        at the next position) and collected into one node per line, or per
        run between two recognized nodes, with trailing whitespace removed.

        Rules are not aware of string literals in the skipped text, so a `//`
        or `/*` inside a passed-through string starts a Comment:
        `const u = "http://x";` splits into `UnknownExpression('const u = "http:')`
        and `Comment('x";')`, which does not re-emit as the input.
        """
        nodes: List[Declaration] = []
        pending: List[str] = []

        def flush() -> None:
            chunk = "".join(pending).rstrip()
            pending.clear()
            if chunk:
                nodes.append(UnknownExpression(chunk))

        position = recognizer.skip_separator(text, 0)
        while position < len(text):
            match = recognizer.match_at(text, position)
            if match is not None:
                flush()
                nodes.append(match.node)
                position = recognizer.skip_separator(text, match.end)
                continue
            ch = text[position]
            if ch in LINE_TERMINATORS:
                flush()
                position = recognizer.skip_separator(text, position)
                continue
            pending.append(ch)
            position += 1
        flush()
        return nodes


def transpile(
    source: str,
    source_language=Language.TYPESCRIPT,
    target_language=Language.TYPESCRIPT,
    recovery: RecoveryMode = RecoveryMode.ABORT,
    source_file: str = "<input>",
    terminate_statements: bool = False,
) -> TranspileResult:
    return TranspileDriver(
        recovery=recovery, terminate_statements=terminate_statements
    ).transpile(
        source, source_language, target_language, source_file
    )
