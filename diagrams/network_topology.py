# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0
"""A small mesh of end nodes and relays connected by links."""

from __future__ import annotations

from svgdiagrams import diagram, svg

NODE_RADIUS = 16
DEFAULT_DISTANCE = 6 * NODE_RADIUS


def node(x: float, y: float, label: str) -> diagram.Circle:
    return diagram.Circle((x, y), NODE_RADIUS, color="green", title=label)


def relay(x: float, y: float, label: str) -> diagram.Circle:
    return diagram.Circle((x, y), NODE_RADIUS, color="blue", title=label)


def link(a: diagram.Circle, b: diagram.Circle) -> diagram.Line:
    return diagram.diagonal_line(
        a, b, color="yellow", marker=("start", "end")
    )


def main() -> None:
    alice = node(0, 0, "Alice")
    r1 = relay(DEFAULT_DISTANCE, -DEFAULT_DISTANCE / 2, "Relay 1")
    r2 = relay(DEFAULT_DISTANCE, DEFAULT_DISTANCE / 2, "Relay 2")
    bob = node(2 * DEFAULT_DISTANCE, 0, "Bob")

    links = [link(alice, r1), link(alice, r2), link(r1, bob), link(r2, bob)]
    labels = [
        alice.center.x - NODE_RADIUS - diagram.LINE_TO_TEXT_DISTANCE,
        bob.center.x + NODE_RADIUS + diagram.LINE_TO_TEXT_DISTANCE,
    ]
    texts = [
        diagram.Text((labels[0], 0), "Alice", horizontal_alignment="right"),
        diagram.Text((labels[1], 0), "Bob", horizontal_alignment="left"),
        links[0].text("link", color="text"),
    ]
    svg.print_svg(*links, alice, r1, r2, bob, *texts, name="network-topology")


if __name__ == "__main__":
    main()
