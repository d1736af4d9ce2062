"""
Repairing JSON parser - patches truncated or malformed JSON into valid JSON.

A single forward-only pass over the input validates the JSON grammar and
emits a corrected token stream at the same time. Defects typical of
interrupted streams are patched as they are met:

- missing commas between values and missing colons after keys
- unterminated strings (closed with a synthetic quote)
- numerals cut off at end of input (replaced with null)
- missing object values (replaced with null)
- trailing commas (dropped)
- containers left open at end of input (closed)

Only objects and arrays are accepted as the top-level value. Anything the
parser cannot make sense of ends the document at that point; everything
committed before it is kept and all open containers are closed.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

WHITESPACE = " \t\n\r"
SIMPLE_ESCAPES = '"\\/bfnrt'
HEX_DIGITS = "0123456789abcdefABCDEF"
LITERALS = ("true", "false", "null")

NUMBER_PATTERN = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
# Fraction or exponent marker left dangling by a cut-off numeral, e.g. "12." or "1e+"
NUMBER_TAIL_PATTERN = re.compile(r"\.|[eE][+-]?")


class ContainerKind(Enum):
    """Kind of container open on the nesting stack."""

    OBJECT = "object"
    ARRAY = "array"


CLOSERS = {ContainerKind.OBJECT: "}", ContainerKind.ARRAY: "]"}


class RepairKind(str, Enum):
    """Kinds of patch the parser can apply."""

    MISSING_COMMA = "missing_comma"
    TRAILING_COMMA = "trailing_comma"
    MISSING_COLON = "missing_colon"
    MISSING_VALUE = "missing_value"
    UNTERMINATED_STRING = "unterminated_string"
    INCOMPLETE_NUMBER = "incomplete_number"
    UNCLOSED_CONTAINER = "unclosed_container"
    REJECTED_TOKEN = "rejected_token"
    TRAILING_CONTENT = "trailing_content"
    NO_CONTAINER = "no_container"


@dataclass
class RepairResult:
    """Repaired text plus the patches applied to produce it."""

    text: str
    repairs: List[RepairKind] = field(default_factory=list)

    @property
    def was_repaired(self) -> bool:
        return bool(self.repairs)


class RepairingParser:
    """
    One-shot repairing parser.

    Holds the cursor, nesting stack and output buffer for a single run.
    Create a new instance per input; use repair() or repair_with_report()
    rather than driving it directly.
    """

    def __init__(self, text: str):
        self.text = text.strip(WHITESPACE)
        self.pos = 0
        self.stack: List[ContainerKind] = []
        self.out: List[str] = []
        self.repairs: List[RepairKind] = []
        # Separator text recognized but not yet written: a comma, or a key and its colon
        self.pending = ""
        self.pending_comma = False
        self.rejected = False

    # ------------------------------------------------------------------
    # Driver
    # ------------------------------------------------------------------

    def run(self) -> RepairResult:
        if not self.text:
            return RepairResult("")

        first = self.text[0]
        try:
            if first == "{":
                closed = self.consume_object()
            elif first == "[":
                closed = self.consume_array()
            else:
                self.note(RepairKind.NO_CONTAINER)
                closed = False
        except RecursionError:
            # Nesting deeper than the interpreter allows; keep what was committed
            closed = self.reject()

        if closed and self.skip_whitespace():
            self.note(RepairKind.TRAILING_CONTENT)

        self.pending = ""
        while self.stack:
            kind = self.stack.pop()
            self.out.append(CLOSERS[kind])
            self.note(RepairKind.UNCLOSED_CONTAINER)

        return RepairResult("".join(self.out), self.repairs)

    # ------------------------------------------------------------------
    # Output helpers
    # ------------------------------------------------------------------

    def note(self, kind: RepairKind) -> None:
        self.repairs.append(kind)

    def reject(self) -> bool:
        """Record a structural rejection; the first one ends the document."""
        if not self.rejected:
            self.rejected = True
            self.note(RepairKind.REJECTED_TOKEN)
        return False

    def emit(self, token: str) -> None:
        """Write a token, preceded by any pending separator."""
        if self.pending:
            self.out.append(self.pending)
            self.pending = ""
            self.pending_comma = False
        self.out.append(token)

    def close(self, kind: ContainerKind) -> None:
        """Close the innermost container, dropping a dangling separator."""
        if self.pending_comma:
            self.note(RepairKind.TRAILING_COMMA)
        self.pending = ""
        self.pending_comma = False
        self.stack.pop()
        self.out.append(CLOSERS[kind])

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    # ------------------------------------------------------------------
    # Recognizers
    # ------------------------------------------------------------------

    def skip_whitespace(self) -> bool:
        """Skip whitespace; return True if input remains."""
        text = self.text
        while self.pos < len(text) and text[self.pos] in WHITESPACE:
            self.pos += 1
        return self.pos < len(text)

    def consume_comma(self) -> bool:
        if not self.skip_whitespace():
            return True

        char = self.text[self.pos]
        if char == ",":
            self.pos += 1
        elif char in "]}":
            return True
        else:
            self.note(RepairKind.MISSING_COMMA)

        self.pending += ","
        self.pending_comma = True
        return True

    def scan_string(self) -> Optional[str]:
        """
        Scan a string starting at the cursor.

        Returns the string token (always terminated) or None if the cursor
        is not on a double quote.
        """
        text = self.text
        length = len(text)
        if self.pos >= length or text[self.pos] != '"':
            return None

        start = self.pos
        index = start + 1
        while index < length:
            char = text[index]
            if char == '"':
                self.pos = index + 1
                return text[start:self.pos]

            if char == "\\":
                if index + 1 >= length:
                    break
                escape = text[index + 1]
                if escape in SIMPLE_ESCAPES:
                    index += 2
                    continue
                if escape == "u":
                    digits = text[index + 2:index + 6]
                    if len(digits) == 4 and all(d in HEX_DIGITS for d in digits):
                        index += 6
                        continue
                break

            if ord(char) < 32:
                break
            index += 1

        # Truncated: keep what was read so far and abandon the rest of the input
        self.pos = length
        self.note(RepairKind.UNTERMINATED_STRING)
        return text[start:index] + '"'

    def consume_string(self) -> bool:
        token = self.scan_string()
        if token is None:
            return False
        self.emit(token)
        return True

    def consume_number(self) -> bool:
        text = self.text
        match = NUMBER_PATTERN.match(text, self.pos)
        if not match:
            return False

        end = match.end()
        if end == len(text) or NUMBER_TAIL_PATTERN.fullmatch(text, end):
            # Numeral runs into end of input; it may have been cut mid-write
            self.emit("null")
            self.note(RepairKind.INCOMPLETE_NUMBER)
            self.pos = len(text)
        else:
            self.emit(match.group())
            self.pos = end
        return True

    def consume_literal(self, literal: str) -> bool:
        if self.text.startswith(literal, self.pos):
            self.emit(literal)
            self.pos += len(literal)
            return True
        return False

    def consume_value(self) -> bool:
        if not self.skip_whitespace():
            return False

        char = self.text[self.pos]
        if char == '"':
            ok = self.consume_string()
        elif char == "-" or "0" <= char <= "9":
            ok = self.consume_number()
        elif char == "{":
            ok = self.consume_object()
        elif char == "[":
            ok = self.consume_array()
        elif char == "t":
            ok = self.consume_literal("true")
        elif char == "f":
            ok = self.consume_literal("false")
        elif char == "n":
            ok = self.consume_literal("null")
        else:
            ok = False

        if ok:
            self.skip_whitespace()
        return ok

    def truncated_scalar(self) -> bool:
        """True if the rest of the input is the start of a scalar cut short."""
        rest = self.text[self.pos:]
        if rest == "-":
            return True
        return bool(rest) and any(literal.startswith(rest) for literal in LITERALS)

    def consume_object(self) -> bool:
        if self.at_end() or self.text[self.pos] != "{":
            return False

        self.emit("{")
        self.pos += 1
        self.stack.append(ContainerKind.OBJECT)

        while self.skip_whitespace():
            if self.text[self.pos] == "}":
                self.pos += 1
                self.close(ContainerKind.OBJECT)
                return True

            # Keys must already be strings
            key = self.scan_string()
            if key is None:
                return self.reject()

            if self.skip_whitespace() and self.text[self.pos] == ":":
                self.pos += 1
            else:
                self.note(RepairKind.MISSING_COLON)
            self.pending += key + ":"

            if not self.consume_value():
                if self.rejected:
                    return False
                if self.at_end() or self.text[self.pos] in "},":
                    self.emit("null")
                    self.note(RepairKind.MISSING_VALUE)
                elif self.truncated_scalar():
                    self.emit("null")
                    self.note(RepairKind.MISSING_VALUE)
                    self.pos = len(self.text)
                else:
                    return self.reject()

            self.consume_comma()

        # Input ran out before the closing brace
        self.close(ContainerKind.OBJECT)
        self.note(RepairKind.UNCLOSED_CONTAINER)
        return True

    def consume_array(self) -> bool:
        if self.at_end() or self.text[self.pos] != "[":
            return False

        self.emit("[")
        self.pos += 1
        self.stack.append(ContainerKind.ARRAY)

        while self.skip_whitespace():
            if self.text[self.pos] == "]":
                self.pos += 1
                self.close(ContainerKind.ARRAY)
                return True

            if not self.consume_value():
                return self.reject()

            self.consume_comma()

        self.close(ContainerKind.ARRAY)
        self.note(RepairKind.UNCLOSED_CONTAINER)
        return True


def repair_with_report(text: str) -> RepairResult:
    """
    Repair a JSON document and report the patches applied.

    Args:
        text: Possibly truncated or malformed JSON text

    Returns:
        RepairResult with the repaired text (empty if no top-level object
        or array was found) and the list of RepairKind applied, in order
    """
    return RepairingParser(text).run()


def repair(text: str) -> str:
    """
    Repair a possibly truncated JSON document.

    Never raises. Returns an empty string for empty input or when the
    input does not start with an object or array.

    Example: '{"a": 1, "b": ' -> '{"a":1,"b":null}'
    """
    return repair_with_report(text).text
