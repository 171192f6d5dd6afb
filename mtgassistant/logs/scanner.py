"""
Extraction of JSON messages from the MTGA client log.

The client writes its log as plain lines, but the interesting messages carry
a JSON document that may start after some text on the announcing line and
may run over any number of following lines:

    <== PlayerInventory.GetPlayerCardsV3(12)
    {
      "66619": 4,
      ...
    }

The scanner reads lines until one starts with a known prefix, then consumes
exactly one JSON object from the stream. Whatever follows the object, even
the rest of a physical line, is where the next line scan resumes. Lines and
documents are read through one buffer so that no byte is read twice or
skipped.
"""

import logging
import re
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import IO

from mtgassistant.models.events import EventKind, LogEvent

logger = logging.getLogger(__name__)

DEFAULT_EVENT_PREFIXES: Mapping[EventKind, str] = MappingProxyType(
    {
        EventKind.COLLECTION: "<== PlayerInventory.GetPlayerCardsV3",
        EventKind.INVENTORY: "<== PlayerInventory.GetPlayerInventory",
        EventKind.INVENTORY_UPDATE: "[UnityCrossThreadLogger]Incoming Inventory.Updated",
    }
)

DEFAULT_CHUNK_SIZE = 64 * 1024

_OPEN_BRACE = ord("{")
_QUOTE = ord('"')
_BACKSLASH = ord("\\")

# Bytes that matter while tracking object depth, outside and inside strings
_STRUCTURAL = re.compile(rb'[{}"]')
_STRING_SPECIAL = re.compile(rb'["\\]')


class LogScanError(Exception):
    """Raised when the log can't be scanned any further."""

    pass


class UnterminatedPayloadError(LogScanError):
    """Raised when the stream ends before a message's JSON object is complete."""

    def __init__(self, kind: EventKind, line_number: int, offset: int, reason: str) -> None:
        self.kind = kind
        self.line_number = line_number
        self.offset = offset
        super().__init__(f"{kind.value} message at line {line_number} (byte {offset}): {reason}")


class MessageScanner:
    """
    Iterates over the JSON payloads of recognized messages in a binary log stream.

    Args:
        stream: Binary stream positioned where scanning should start
        prefixes: Literal line prefix per event kind; matching is exact and
            case-sensitive
        chunk_size: Bytes requested from the stream per read

    The scanner only holds local cursor state. Don't share one instance, or
    one stream, between concurrent consumers.
    """

    def __init__(
        self,
        stream: IO[bytes],
        prefixes: Mapping[EventKind, str] = DEFAULT_EVENT_PREFIXES,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        if not prefixes:
            raise ValueError("at least one message prefix is required")
        if chunk_size < 1:
            raise ValueError("chunk_size must be positive")

        self._stream = stream
        self._prefixes = tuple((prefix.encode("utf-8"), kind) for kind, prefix in prefixes.items())
        self._chunk_size = chunk_size

        self._buffer = bytearray()
        self._pos = 0
        # Stream offset of self._buffer[0]
        self._base = 0
        self._newlines = 0
        self._eof = False

    @property
    def position(self) -> int:
        """Byte offset in the stream of the next unread byte."""
        return self._base + self._pos

    @property
    def line_number(self) -> int:
        """1-based line number of the next unread byte."""
        return self._newlines + 1

    def __iter__(self) -> Iterator[LogEvent]:
        return self._scan()

    def _scan(self) -> Iterator[LogEvent]:
        while True:
            line_number = self.line_number
            line = self._read_line()
            if line is None:
                return

            match = self._match(line)
            if match is None:
                continue
            prefix, kind = match

            brace = line.find(b"{", len(prefix))
            if brace >= 0:
                # Hand the rest of the line, from the brace on, back to the stream
                self._move_to(self._pos - (len(line) - brace))
            else:
                self._seek_object_start(kind, line_number)

            offset = self.position
            payload = self._read_object(kind, line_number)
            logger.debug(
                "Found %s message at line %d (%d bytes)", kind.value, line_number, len(payload)
            )
            yield LogEvent(kind=kind, raw_payload=payload, line_number=line_number, offset=offset)

    def _match(self, line: bytes) -> tuple[bytes, EventKind] | None:
        for prefix, kind in self._prefixes:
            if line.startswith(prefix):
                return prefix, kind
        return None

    def _fill(self) -> bool:
        """Append the next chunk of the stream to the buffer. False at end of stream."""
        if self._eof:
            return False

        chunk = self._stream.read(self._chunk_size)
        if not chunk:
            self._eof = True
            return False
        if isinstance(chunk, str):
            raise TypeError("MessageScanner requires a binary stream")

        if self._pos:
            del self._buffer[: self._pos]
            self._base += self._pos
            self._pos = 0
        self._buffer += chunk
        return True

    def _move_to(self, pos: int) -> None:
        if pos >= self._pos:
            self._newlines += self._buffer.count(b"\n", self._pos, pos)
        else:
            self._newlines -= self._buffer.count(b"\n", pos, self._pos)
        self._pos = pos

    def _read_line(self) -> bytes | None:
        """Next line including its newline; the last line may lack one."""
        search_from = self._pos
        while True:
            end = self._buffer.find(b"\n", search_from)
            if end >= 0:
                line = bytes(self._buffer[self._pos : end + 1])
                self._move_to(end + 1)
                return line

            scanned = len(self._buffer) - self._pos
            if not self._fill():
                if self._pos == len(self._buffer):
                    return None
                line = bytes(self._buffer[self._pos :])
                self._move_to(len(self._buffer))
                return line
            search_from = self._pos + scanned

    def _seek_object_start(self, kind: EventKind, line_number: int) -> None:
        """Advance to the next opening brace, wherever it is in the stream."""
        while True:
            start = self._buffer.find(b"{", self._pos)
            if start >= 0:
                self._move_to(start)
                return
            self._move_to(len(self._buffer))
            if not self._fill():
                raise UnterminatedPayloadError(
                    kind, line_number, self.position, "no JSON object follows the message"
                )

    def _read_object(self, kind: EventKind, line_number: int) -> bytes:
        """
        Consume one complete JSON object starting at the cursor.

        Only brace depth is tracked (skipping over string contents); whether
        the bytes are valid JSON is left to the decoder.
        """
        depth = 0
        in_string = False
        i = self._pos

        while True:
            pattern = _STRING_SPECIAL if in_string else _STRUCTURAL
            match = pattern.search(self._buffer, i)
            if match is None:
                i = self._refill(kind, line_number, len(self._buffer))
                continue

            i = match.end()
            char = self._buffer[match.start()]
            if in_string:
                if char == _BACKSLASH:
                    if i >= len(self._buffer):
                        i = self._refill(kind, line_number, i)
                    # Skip the escaped byte
                    i += 1
                else:
                    in_string = False
            elif char == _QUOTE:
                in_string = True
            elif char == _OPEN_BRACE:
                depth += 1
            else:
                depth -= 1
                if depth == 0:
                    payload = bytes(self._buffer[self._pos : i])
                    self._move_to(i)
                    return payload

    def _refill(self, kind: EventKind, line_number: int, i: int) -> int:
        """Read more of an object in progress; returns ``i`` rebased onto the new buffer."""
        consumed = i - self._pos
        if not self._fill():
            raise UnterminatedPayloadError(
                kind, line_number, self.position, "stream ended inside the JSON object"
            )
        return self._pos + consumed


def scan_events(
    stream: IO[bytes], prefixes: Mapping[EventKind, str] = DEFAULT_EVENT_PREFIXES
) -> Iterator[LogEvent]:
    """Convenience wrapper around ``MessageScanner``."""
    return iter(MessageScanner(stream, prefixes))
