"""The network play screen: address, link status and host/connect menu."""

from __future__ import annotations

from typing import Optional, Sequence

from .ui_screen import MessageFunc, PadButton, Screen

NETPLAY_PORT = 6113
IP_DIGITS = 12
DEFAULT_LATENCY = 5

MSG_CONNECT = 1
MSG_HOST = 2
MSG_EDIT_REQUEST = 3

OPTION_HOST = 0
OPTION_CONNECT = 1

EDIT_FORMAT = "abc.def.ghi.jkl"

DHCP_STATUS_NAMES = (
    "disabled",
    "requesting",
    "init",
    "rebooting",
    "rebinding",
    "renewing",
    "selecting",
    "informing",
    "checking",
    "permanent",
    "bound",
    "releasing",
    "backingoff",
    "off",
)

CLIENT_STATUS_NAMES = ("not connected", "connecting", "connected")
SERVER_STATUS_NAMES = ("idle", "connecting", "listening")


def _octets(ip: int) -> tuple[int, int, int, int]:
    return tuple((ip >> shift) & 0xFF for shift in (0, 8, 16, 24))


def format_ip(ip: int) -> str:
    """Dotted address of ``ip``, lowest byte first, each octet padded to three places."""
    return "%3d.%3d.%3d.%3d" % _octets(ip)


def format_ip_port(ip: int, port: int) -> str:
    """``format_ip`` followed by ``port``, which is given in network byte order."""
    host_port = ((port & 0xFF) << 8) | ((port >> 8) & 0xFF)
    return f"{format_ip(ip)}:{host_port}"


def dhcp_status_name(status: int) -> str:
    """Name of a DHCP client state."""
    if not 0 <= status < len(DHCP_STATUS_NAMES):
        raise ValueError(f"unknown DHCP status: {status}")
    return DHCP_STATUS_NAMES[status]


def edit_ip_digits_text(digits: Sequence[int]) -> str:
    """The twelve edit digits laid out as ``ddd.ddd.ddd.ddd``."""
    if len(digits) != IP_DIGITS:
        raise ValueError(f"expected {IP_DIGITS} digits, got {len(digits)}")
    return "".join(
        ch if ch == "." else str(digits[ord(ch) - ord("a")]) for ch in EDIT_FORMAT
    )


class NetworkScreen(Screen):
    """Hosts or joins a network game.

    Messages sent: ``MSG_HOST`` with the latency, ``MSG_EDIT_REQUEST`` to ask
    whether the address may be edited (a true reply starts editing), and
    ``MSG_CONNECT`` with the edited address.
    """

    def __init__(self, msg_func: Optional[MessageFunc] = None, render=None) -> None:
        super().__init__(msg_func, render)
        self.option = OPTION_HOST
        self.digit = -1
        self.latency = DEFAULT_LATENCY
        self.port = NETPLAY_PORT
        self.init_ip = False
        self.digits = [0] * IP_DIGITS

    @property
    def editing(self) -> bool:
        return self.digit != -1

    def set_edit_ip(self, ip: int) -> None:
        """Load the edit digits from ``ip``, lowest byte first."""
        digits = []
        for octet in _octets(ip):
            digits += [(octet // 100) % 10, (octet // 10) % 10, octet % 10]
        self.digits = digits

    def get_edit_ip(self) -> int:
        """The address spelled by the edit digits, as a 32-bit value."""
        ip = 0
        for group in range(4):
            hundreds, tens, ones = self.digits[group * 3:group * 3 + 3]
            ip += (hundreds * 100 + tens * 10 + ones) << (group * 8)
        return ip & 0xFFFFFFFF

    def init_edit_ip(self, ip: int) -> None:
        """Start editing from the local address the first time a non-zero one is known."""
        if not self.init_ip and ip:
            self.set_edit_ip(ip)
            self.init_ip = True

    def _edit_input(self, trigger: int) -> None:
        if trigger & PadButton.LEFT:
            self.digit -= 1
            if self.digit < 0:
                self.digit = IP_DIGITS - 1
        if trigger & PadButton.RIGHT:
            self.digit += 1
            if self.digit > IP_DIGITS - 1:
                self.digit = 0
        if trigger & PadButton.UP:
            self.digits[self.digit] = (self.digits[self.digit] + 1) % 10
        if trigger & PadButton.DOWN:
            self.digits[self.digit] = (self.digits[self.digit] - 1) % 10
        if trigger & PadButton.TRIANGLE:
            self.digit = -1
            self.option = OPTION_CONNECT
        if trigger & PadButton.CROSS:
            self.send_message(MSG_CONNECT, self.get_edit_ip(), 0)
            self.option = OPTION_CONNECT
            self.digit = -1

    def _menu_input(self, trigger: int) -> None:
        if trigger & PadButton.SQUARE:
            self.latency = max(self.latency - 1, 1)
        if trigger & PadButton.TRIANGLE:
            self.latency += 1
        if trigger & PadButton.UP:
            self.option = max(self.option - 1, OPTION_HOST)
        if trigger & PadButton.DOWN:
            self.option = min(self.option + 1, OPTION_CONNECT)
        if trigger & (PadButton.CROSS | PadButton.START):
            if self.option == OPTION_HOST:
                self.send_message(MSG_HOST, self.latency, 0)
            elif self.option == OPTION_CONNECT:
                if self.send_message(MSG_EDIT_REQUEST, 0, 0):
                    self.option = -1
                    self.digit = 0

    def handle_input(self, buttons: int, trigger: int) -> None:
        if self.editing:
            self._edit_input(trigger)
        else:
            self._menu_input(trigger)