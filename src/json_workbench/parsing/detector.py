"""Best-effort format auto-detection.

Candidate formats are tried in a fixed priority order and the first
structurally plausible match wins:

1. JSON  - explicit sigils make it the most specific signature
2. XML   - text starting with ``<``
3. YAML  - gated by a colon+newline heuristic and a non-scalar result
4. CSV   - last, because delimited parsing accepts almost anything
5. JSON  - one more attempt through the unwrapper for bare stringified JSON

A malformed candidate never raises; it falls through to the next one.
"""

import logging
import xml.etree.ElementTree as ET

import yaml

from json_workbench.parsing.base import InputFormat, ParseResult
from json_workbench.parsing.readers import read_csv, read_xml, read_yaml
from json_workbench.parsing.unwrap import parse_json_strict, unwrap

logger = logging.getLogger(__name__)

UNDETECTABLE_MESSAGE = "Could not auto-detect format. Please ensure valid JSON, XML, YAML, or CSV."

JSON_SIGILS = ("{", "[", '"')


class FormatDetector:
    """Classifies raw text into one of the supported structural formats."""

    def detect(self, text: str) -> ParseResult:
        """Detect the format of ``text`` and parse it.

        Args:
            text: Raw input text

        Returns:
            ParseResult with the inferred value and detected format. Empty
            input yields ``unknown`` with no error; unrecognised input yields
            ``unknown`` with a diagnostic message.
        """
        trimmed = text.strip()
        if not trimmed:
            return ParseResult(data=None, format=InputFormat.UNKNOWN)

        for attempt in (self._try_json, self._try_xml, self._try_yaml, self._try_csv):
            result = attempt(trimmed)
            if result is not None:
                logger.debug("Detected %s input", result.format.value)
                return result

        fallback = unwrap(text)
        if fallback != text:
            logger.debug("Detected json input through the unwrap fallback")
            return ParseResult(data=fallback, format=InputFormat.JSON)

        return ParseResult(data=None, format=InputFormat.UNKNOWN, error=UNDETECTABLE_MESSAGE)

    def _try_json(self, trimmed: str) -> ParseResult | None:
        if not trimmed.startswith(JSON_SIGILS):
            return None

        try:
            parse_json_strict(trimmed)
        except (ValueError, RecursionError) as e:
            logger.debug("Not JSON: %s", e)
            return None

        return ParseResult(data=unwrap(trimmed), format=InputFormat.JSON)

    def _try_xml(self, trimmed: str) -> ParseResult | None:
        if not trimmed.startswith("<"):
            return None

        try:
            data = read_xml(trimmed)
        except ET.ParseError as e:
            logger.debug("Not XML: %s", e)
            return None

        return ParseResult(data=data, format=InputFormat.XML)

    def _try_yaml(self, trimmed: str) -> ParseResult | None:
        # Plain sentences and path-like strings would otherwise parse as YAML scalars
        if ":" not in trimmed or "\n" not in trimmed:
            return None

        try:
            data = read_yaml(trimmed)
        except yaml.YAMLError as e:
            logger.debug("Not YAML: %s", e)
            return None

        if not isinstance(data, (dict, list)):
            logger.debug("Rejected YAML scalar result")
            return None

        return ParseResult(data=data, format=InputFormat.YAML)

    def _try_csv(self, trimmed: str) -> ParseResult | None:
        result = read_csv(trimmed)

        if result.errors:
            logger.debug("Not CSV: %s", result.errors[0].message)
            return None
        if not result.rows:
            return None

        # Single-column text is not treated as tabular data
        if len(result.rows[0]) <= 1:
            return None

        return ParseResult(data=result.rows, format=InputFormat.CSV)


_default_detector = FormatDetector()


def detect(text: str) -> ParseResult:
    """Convenience function to detect and parse raw text.

    Args:
        text: Raw input text

    Returns:
        ParseResult for the input
    """
    return _default_detector.detect(text)
