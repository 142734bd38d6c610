"""A network of fifty Intcode computers exchanging packets, with a NAT."""

from __future__ import annotations

from collections import deque
from typing import Sequence

from aoc2019.intcode.core import IOWrapper, LogicError, Output, Signal, StepResult
from aoc2019.intcode.cpu import CPU, parse_code
from aoc2019.runner import load_input, run_parts

NETWORK_SIZE = 50
NAT_ADDRESS = 255
IDLE_THRESHOLD = 10

Packet = tuple[int, int]


class NIC:
    """Network interface: hands out the address, then packets or -1; groups outputs."""

    def __init__(self, address: int) -> None:
        self.packets: deque[Packet] = deque()
        self.started = False
        self.pending_address: int | None = address
        self.num_neg_ones = 0
        self.output: list[int] = []

    def is_idle(self) -> bool:
        """No queued packets and many empty reads in a row."""
        return not self.packets and self.num_neg_ones >= IDLE_THRESHOLD

    def provide_input(self) -> tuple[Signal, int]:
        if self.pending_address is not None:
            address, self.pending_address = self.pending_address, None
            return Signal.CONTINUE, address
        if self.packets:
            self.num_neg_ones = 0
            x, y = self.packets[0]
            if self.started:
                self.started = False
                self.packets.popleft()
                return Signal.CONTINUE, y
            self.started = True
            return Signal.CONTINUE, x
        self.num_neg_ones += 1
        return Signal.CONTINUE, -1

    def receive_input(self, value: Packet) -> None:
        x, y = value
        self.packets.append((x, y))

    def handle_output(self, value: int) -> StepResult:
        self.output.append(value)
        if len(self.output) == 3:
            dest, x, y = self.output
            self.output.clear()
            return Output((dest, (x, y)))
        return Signal.CONTINUE


def build_network(code: str) -> list[IOWrapper]:
    """One computer per address, all running the same program."""
    program = parse_code(code)
    return [CPU(program).wrap(NIC(address)) for address in range(NETWORK_SIZE)]


def _deliver(nics: list[IOWrapper], dest: int, packet: Packet) -> None:
    if not 0 <= dest < len(nics):
        raise LogicError(f"Packet sent to unknown address {dest}")
    nics[dest].accept_input(packet)


def part1(text: str) -> int:
    """Y value of the first packet sent to the NAT."""
    nics = build_network(text)
    while True:
        for nic in nics:
            state = nic.step()
            if isinstance(state, Output):
                dest, packet = state.value
                if dest == NAT_ADDRESS:
                    return packet[1]
                _deliver(nics, dest, packet)


def part2(text: str) -> int:
    """First Y value the NAT delivers to address 0 twice in a row."""
    nics = build_network(text)
    nat_memory: Packet | None = None
    nat_prev_y: int | None = None
    while True:
        for nic in nics:
            state = nic.step()
            if isinstance(state, Output):
                dest, packet = state.value
                if dest == NAT_ADDRESS:
                    nat_memory = packet
                else:
                    _deliver(nics, dest, packet)
        if all(nic.outer.is_idle() for nic in nics):
            if nat_memory is None:
                raise LogicError("Fired NAT without packet")
            y = nat_memory[1]
            if nat_prev_y == y:
                return y
            nat_prev_y = y
            nics[0].accept_input(nat_memory)


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day23.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()