"""Workbench - renders a session's input in the requested output mode.

All state lives in an explicit WorkbenchSession value. The caller (CLI or
any UI) owns and mutates that value and re-invokes ``Workbench.render`` on
every change; rendering itself is a pure function of the session and the
configuration. Errors are reported inline in the output, never raised.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field

from json_workbench.config.base import OutputMode, WorkbenchConfig
from json_workbench.converters.serializers import to_csv, to_json, to_xml, to_yaml
from json_workbench.engine.diff_engine import DiffEngine, DiffResult
from json_workbench.parsing.base import ParseResult
from json_workbench.parsing.detector import FormatDetector
from json_workbench.schemas.registry import render_schema
from json_workbench.tools.jwt_debugger import JwtDetails, decode_jwt
from json_workbench.tools.mock import MockDataGenerator
from json_workbench.tools.query import query_json
from json_workbench.tools.strings import escape_json, to_base64, url_encode
from json_workbench.tools.transform import run_transform

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input format"


class WorkbenchSession(BaseModel):
    """Everything the user has entered, as one explicit value."""

    mode: OutputMode = Field(default=OutputMode.TREE, description="Active output mode")
    input: str = Field(default="", description="Primary input text")
    second_input: str = Field(default="", description="Diff target or transform expression")
    query: str = Field(default="", description="JMESPath expression for query mode")
    mock_count: int | None = Field(default=None, ge=0, description="Mock records to generate")
    root_name: str | None = Field(default=None, description="Root name override for schema modes")


class WorkbenchOutput(BaseModel):
    """What the workbench rendered for a session."""

    mode: OutputMode = Field(..., description="Mode that was rendered")
    parse_result: ParseResult | None = Field(default=None, description="Detection result for the primary input")
    content: str = Field(default="", description="Rendered text output")
    data: Any = Field(default=None, description="Structured result for data-producing modes")
    diff: DiffResult | None = Field(default=None, description="Diff result in diff mode")
    jwt: JwtDetails | None = Field(default=None, description="Decoded token in jwt mode")
    error: str | None = Field(default=None, description="Inline error message")


def render_diff(result: DiffResult) -> str:
    """Render diff segments with ``+``/``-``/space line prefixes."""
    lines = []
    for segment in result:
        prefix = "+ " if segment.added else "- " if segment.removed else "  "
        for line in segment.content.splitlines():
            lines.append(f"{prefix}{line}")
    return "\n".join(lines)


class Workbench:
    """Engine rendering WorkbenchSession values.

    Ties the format detector, diff engine, schema generators, converters and
    tools together behind one ``render`` call.
    """

    def __init__(self, config: WorkbenchConfig | None = None):
        self.config = config or WorkbenchConfig()
        self.detector = FormatDetector()
        self.diff_engine = DiffEngine(self.detector)

    def render(self, session: WorkbenchSession) -> WorkbenchOutput:
        """Render a session.

        Args:
            session: Current session state

        Returns:
            WorkbenchOutput for the session's mode
        """
        mode = session.mode
        logger.debug("Rendering %s mode", mode.value)

        if mode == OutputMode.MOCK:
            return self._render_mock(session)
        if mode == OutputMode.JWT:
            return self._render_jwt(session)
        if mode == OutputMode.UTILS:
            return self._render_utils(session)

        if not session.input.strip():
            return WorkbenchOutput(mode=mode)

        if mode == OutputMode.DIFF:
            result = self.diff_engine.diff(session.input, session.second_input)
            return WorkbenchOutput(
                mode=mode,
                parse_result=self.detector.detect(session.input),
                content=render_diff(result),
                diff=result,
            )

        parse_result = self.detector.detect(session.input)
        if parse_result.data is None:
            return WorkbenchOutput(
                mode=mode,
                parse_result=parse_result,
                error=parse_result.error or INVALID_INPUT_MESSAGE,
            )

        return self._render_structured(session, parse_result)

    def _render_structured(self, session: WorkbenchSession, parse_result: ParseResult) -> WorkbenchOutput:
        mode = session.mode
        data = parse_result.data
        output = WorkbenchOutput(mode=mode, parse_result=parse_result)

        if mode == OutputMode.TREE:
            output.data = data
            output.content = to_json(data, self.config.json_indent)
        elif mode == OutputMode.QUERY:
            output.data = query_json(data, session.query)
            output.content = to_json(output.data, self.config.json_indent)
        elif mode == OutputMode.TRANSFORM:
            output.data = run_transform(data, session.second_input)
            output.content = to_json(output.data, self.config.json_indent)
        elif mode == OutputMode.YAML:
            output.content = to_yaml(data)
        elif mode == OutputMode.XML:
            output.content = to_xml(data)
        elif mode == OutputMode.CSV:
            output.content = to_csv(data)
        else:
            target = mode.schema_target
            root_name = session.root_name or self.config.schemas.root_name_for(target)
            output.content = render_schema(target, data, root_name)

        if isinstance(output.data, dict) and set(output.data) == {"error"}:
            output.error = output.data["error"]

        return output

    def _render_mock(self, session: WorkbenchSession) -> WorkbenchOutput:
        settings = self.config.mock
        count = settings.count if session.mock_count is None else session.mock_count
        generator = MockDataGenerator(seed=settings.seed, locale=settings.locale)
        records = generator.generate(session.input, count)

        return WorkbenchOutput(
            mode=OutputMode.MOCK,
            content=to_json(records, self.config.json_indent),
            data=records,
        )

    def _render_jwt(self, session: WorkbenchSession) -> WorkbenchOutput:
        if not session.input.strip():
            return WorkbenchOutput(mode=OutputMode.JWT)

        details = decode_jwt(session.input)
        content = ""
        if details.is_valid:
            content = to_json({"header": details.header, "payload": details.payload}, self.config.json_indent)

        return WorkbenchOutput(mode=OutputMode.JWT, content=content, jwt=details, error=details.error)

    def _render_utils(self, session: WorkbenchSession) -> WorkbenchOutput:
        text = session.input
        encodings = {
            "base64": to_base64(text),
            "url_encoded": url_encode(text),
            "json_escaped": escape_json(text),
        }
        return WorkbenchOutput(
            mode=OutputMode.UTILS,
            content=to_json(encodings, self.config.json_indent),
            data=text,
        )

    def format_input(self, text: str, minify: bool = False) -> str:
        """Prettify or minify structured input as JSON.

        Input that cannot be parsed is returned unchanged.
        """
        result = self.detector.detect(text)
        if result.data is None:
            return text
        return to_json(result.data, None if minify else self.config.json_indent)
