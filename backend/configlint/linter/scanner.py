"""Section scanner — line-oriented state machine that builds a ParsedConfig.

The scanner has no indentation awareness. A key named ``metadata``,
``settings`` or ``features`` switches the active section wherever it
appears, including inside a feature entry.

State:
    section  — which top-level section subsequent key/value lines belong to
    pending  — the feature entry currently being filled, if any

The scan never fails on content. Anything it cannot place is dropped and
surfaces later as a validator issue (missing field, missing section).
"""

from enum import Enum
from typing import Iterable, Optional

from configlint.linter.classifier import (
    Blank,
    KeyValue,
    LineClass,
    NoColon,
    Structural,
    classify,
    normalize,
    parse_key_value,
)
from configlint.linter.models import FeatureEntry, FieldInfo, ParsedConfig

ENTRY_MARKERS = ("-", "{")


class Section(str, Enum):
    NONE = "none"
    METADATA = "metadata"
    SETTINGS = "settings"
    FEATURES = "features"


SECTION_HEADERS = {
    "metadata": Section.METADATA,
    "settings": Section.SETTINGS,
    "features": Section.FEATURES,
}


class SectionScanner:
    """Consumes lines in order and assembles the parsed config.

    One scanner per lint call; call ``feed`` for every line then ``finish``.
    """

    def __init__(self):
        self.section = Section.NONE
        self.pending: Optional[FeatureEntry] = None
        self._metadata: dict[str, FieldInfo] = {}
        self._settings: dict[str, FieldInfo] = {}
        self._features: list[FeatureEntry] = []
        self._header_lines = {s: 0 for s in SECTION_HEADERS.values()}

    # ── Feature entry bookkeeping ──

    def _flush(self, allow_empty: bool = False) -> None:
        """Move the pending entry into the feature list.

        Empty entries are dropped unless they were explicitly closed, in
        which case they are kept so the features validator can flag them.
        """
        if self.pending is None:
            return
        if self.pending.fields or allow_empty:
            self._features.append(self.pending)
        self.pending = None

    def _begin_entry(self, line_no: int) -> None:
        self._flush()
        self.pending = FeatureEntry(line=line_no)

    # ── Line handlers ──

    def feed(self, line_no: int, line: str) -> None:
        """Process one physical line (1-based ``line_no``)."""
        classification = classify(line)

        if isinstance(classification, Blank):
            return

        if isinstance(classification, Structural):
            self._on_structural(classification)
            return

        if self.section is Section.FEATURES:
            classification = self._strip_entry_markers(line_no, normalize(line))
            if classification is None:
                return

        if isinstance(classification, NoColon):
            return

        self._on_key_value(line_no, classification)

    def _on_structural(self, token: Structural) -> None:
        if self.section is Section.FEATURES and token.token == "}":
            self._flush(allow_empty=True)

    def _strip_entry_markers(self, line_no: int, text: str) -> Optional[LineClass]:
        """Handle ``-`` / ``{`` entry starts inside the features section.

        Returns the classification of whatever follows the markers, or None
        when nothing is left on the line.
        """
        for marker in ENTRY_MARKERS:
            if text.startswith(marker):
                self._begin_entry(line_no)
                text = text[len(marker):].strip()
                if not text:
                    return None

        if text == "}":
            self._flush(allow_empty=True)
            return None

        return parse_key_value(text)

    def _on_key_value(self, line_no: int, kv: KeyValue) -> None:
        header = SECTION_HEADERS.get(kv.key)
        if header is not None:
            self.section = header
            if not self._header_lines[header]:
                self._header_lines[header] = line_no
            return

        if not kv.has_value:
            return

        field = FieldInfo(value=kv.value, line=line_no)

        if self.section is Section.METADATA:
            self._metadata[kv.key] = field
        elif self.section is Section.SETTINGS:
            self._settings[kv.key] = field
        elif self.section is Section.FEATURES:
            if self.pending is None:
                self.pending = FeatureEntry(line=line_no)
            self.pending.fields[kv.key] = field

    def finish(self) -> ParsedConfig:
        """Flush the last entry and freeze the result."""
        self._flush()
        return ParsedConfig(
            metadata=self._metadata,
            metadata_line=self._header_lines[Section.METADATA],
            settings=self._settings,
            settings_line=self._header_lines[Section.SETTINGS],
            features=tuple(self._features),
            features_line=self._header_lines[Section.FEATURES],
        )


def scan_lines(lines: Iterable[str]) -> ParsedConfig:
    """Run the scanner over an iterable of lines (without line endings)."""
    scanner = SectionScanner()
    for line_no, line in enumerate(lines, start=1):
        scanner.feed(line_no, line)
    return scanner.finish()


def scan_text(text: str) -> ParsedConfig:
    """Scan a whole document. Accepts ``\\n`` and ``\\r\\n`` line endings."""
    return scan_lines(line.rstrip("\r") for line in text.split("\n"))
