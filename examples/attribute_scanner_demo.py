#!/usr/bin/env python3
"""Demonstration of a caller-driven scanner built on lex_cursor.

The cursor has no grammar of its own. This script supplies one: a tiny scanner
that splits a start tag into its name and its attribute name/value pairs, using
marks for range extraction and the quote detector to keep quoted spaces
inside attribute values.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto

from lex_cursor import CursorConfig, create_cursor


class TagState(Enum):
    """Scanner states chosen by the caller."""

    NAME = auto()
    ATTRIBUTES = auto()


@dataclass
class TagToken:
    """Token produced by the demo scanner."""

    kind: str
    text: str


def scan_tag(source: str, config: CursorConfig) -> list:
    """Split ``<name attr='value' ...>`` into tokens."""
    cursor = create_cursor(source, TagState.NAME, config)

    # Skip the opening '<' and remember where the name starts.
    cursor.step_forward()
    cursor.mark()

    while True:
        symbol = cursor.current()
        boundary = symbol in (" ", ">") and not cursor.in_quotes()

        if boundary:
            word = ""
            if not cursor.at_mark():
                cursor.step_back()
                word = cursor.slice_from_mark()
                cursor.step_forward()

            if cursor.state() is TagState.NAME:
                cursor.push_token(TagToken("name", word))
                cursor.set_state(TagState.ATTRIBUTES)
            elif word:
                attr_name, _, attr_value = word.partition("=")
                cursor.push_token(TagToken("attribute", attr_name))
                if attr_value:
                    cursor.push_token(TagToken("value", attr_value.strip("'\"")))

            if cursor.at_end():
                break
            cursor.step_forward()
            cursor.mark()
        elif cursor.at_end():
            break
        else:
            cursor.step_forward()

    return cursor.take_tokens()


def main() -> None:
    """Run the scanner on a few inputs and print the tokens."""
    logging.basicConfig(level=logging.INFO)

    samples = [
        "<p name='bob'>",
        '<img alt="a quiet café" src=\'logo.png\'>',
        "<日本 語='テスト'>",
    ]

    for sample in samples:
        print(f"Scanning {sample}")
        for token in scan_tag(sample, CursorConfig.default()):
            print(f"  {token.kind:<10} {token.text}")

    print("\nTrace of the first sample:")
    traced = create_cursor(samples[0], TagState.NAME, CursorConfig.debugging())
    traced.advance_until("=")
    traced.mark()
    traced.advance_until(">")
    traced.step_back()
    traced.slice_from_mark()
    traced.in_quotes()
    print(traced.emit_trace(), end="")


if __name__ == "__main__":
    main()
