# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0
"""A mail message inside its envelope, travelling between two servers."""

from __future__ import annotations

from svgdiagrams import diagram, svg

GAP = 40
MESSAGE_WIDTH = 240
ENVELOPE_MARGIN = 2 * diagram.STROKE_WIDTH
TOP_LEFT = diagram.Alignment("left", "top")

CLIENT = [diagram.join_text(diagram.bold("Mail client"), " of"), "alice"]
SERVER = [diagram.bold("Outgoing"), diagram.bold("mail server"), "of bob"]

MESSAGE = [
    diagram.bold("Message"),
    "From: Alice <alice@example.org>",
    "To: Bob <bob@example.com>",
    diagram.join_text(
        "Bcc: ", diagram.uppercase("ietf"), " <ietf@ietf.org>"
    ),
]
ENVELOPE = [
    diagram.bold("Envelope"),
    "MAIL FROM:<alice@example.org>",
    "RCPT TO:<bob@example.com>",
]


def main() -> None:
    size = diagram.estimate_text_size_with_margin(SERVER)

    left = diagram.Rectangle((0, -size.y / 2), size)
    message_size = diagram.Vector2D(
        MESSAGE_WIDTH, diagram.calculate_text_height(MESSAGE)
    ) + diagram.DOUBLE_TEXT_MARGIN
    envelope_size = diagram.Vector2D(
        message_size.x + 2 * ENVELOPE_MARGIN,
        message_size.y
        + diagram.calculate_text_height(ENVELOPE)
        + diagram.DOUBLE_TEXT_MARGIN.y
        + 3 * ENVELOPE_MARGIN,
    )
    envelope = diagram.Rectangle(
        (size.x + GAP, -envelope_size.y / 2),
        envelope_size,
        corner_radius=0,
        color="green",
        classes="angular",
    )
    message = diagram.Rectangle(
        (
            size.x + GAP + ENVELOPE_MARGIN,
            envelope_size.y / 2 - ENVELOPE_MARGIN - message_size.y,
        ),
        message_size,
        corner_radius=0,
        color="blue",
        classes="angular",
    )
    right = diagram.Rectangle(
        (size.x + 2 * GAP + envelope_size.x, -size.y / 2), size
    )

    envelope_margin = diagram.TEXT_MARGIN + (ENVELOPE_MARGIN, ENVELOPE_MARGIN)
    svg.print_svg(
        diagram.connection_line(
            envelope, "right", right, "left", color="green"
        ),
        diagram.connection_line(
            left, "right", envelope, "left", color="green", marker=()
        ),
        left,
        left.text(CLIENT),
        envelope,
        envelope.text(ENVELOPE, TOP_LEFT, envelope_margin),
        message,
        message.text(MESSAGE, TOP_LEFT),
        right,
        right.text(SERVER),
        name="message-envelope",
    )


if __name__ == "__main__":
    main()
