"""Enumerate serial ports and describe them for the ``list`` command."""

from __future__ import annotations

from dataclasses import dataclass
import enum
import logging
import sys
from typing import Any, Iterable

from serial.tools import list_ports as serial_list_ports

_LOGGER = logging.getLogger(__name__)


class PortKind(enum.Enum):
    USB = "USB"
    BLUETOOTH = "Bluetooth"
    PCI = "PCI"
    UNKNOWN = "Unknown"


@dataclass(slots=True)
class PortDescriptor:
    name: str
    kind: PortKind
    vid: int | None = None
    pid: int | None = None
    serial_number: str | None = None
    manufacturer: str | None = None
    product: str | None = None
    interface: str | None = None


def _classify(info: Any) -> PortKind:
    if getattr(info, "vid", None) is not None:
        return PortKind.USB
    hwid = (getattr(info, "hwid", None) or "").upper()
    device = getattr(info, "device", "") or ""
    if "BTHENUM" in hwid or "rfcomm" in device or "Bluetooth" in device:
        return PortKind.BLUETOOTH
    if hwid.startswith("PCI") or getattr(info, "subsystem", None) == "pci":
        return PortKind.PCI
    return PortKind.UNKNOWN


def describe_port(info: Any) -> PortDescriptor:
    """Build a descriptor from a pyserial ``ListPortInfo``."""
    kind = _classify(info)
    descriptor = PortDescriptor(name=info.device, kind=kind)
    if kind is PortKind.USB:
        descriptor.vid = info.vid
        descriptor.pid = info.pid
        descriptor.serial_number = getattr(info, "serial_number", None)
        descriptor.manufacturer = getattr(info, "manufacturer", None)
        descriptor.product = getattr(info, "product", None)
        descriptor.interface = getattr(info, "interface", None)
    return descriptor


def describe_ports(comports: Iterable[Any] | None = None) -> list[PortDescriptor]:
    if comports is None:
        comports = serial_list_ports.comports()
    return [describe_port(info) for info in comports]


def _count_header(count: int) -> str:
    if count == 0:
        return "No ports found."
    if count == 1:
        return "Found 1 port:"
    return f"Found {count} ports:"


def _optional_row(label: str, value: str | None) -> str:
    return f"    {label:<15}: {value or ''}"


def format_listing(ports: list[PortDescriptor]) -> list[str]:
    lines = [_count_header(len(ports))]
    for port in ports:
        lines.append(f"  {port.name}")
        lines.append(f"    Type: {port.kind.value}")
        if port.kind is not PortKind.USB:
            continue
        lines.append(f"    VID:{port.vid or 0:04x} PID:{port.pid or 0:04x}")
        lines.append(_optional_row("Serial Number", port.serial_number))
        lines.append(_optional_row("Manufacturer", port.manufacturer))
        lines.append(_optional_row("Product", port.product))
        if port.interface:
            lines.append(_optional_row("Interface", port.interface))
    return lines


def list_ports(comports: Iterable[Any] | None = None) -> int:
    """Print every available port. Enumeration problems never fail the command."""
    try:
        ports = describe_ports(comports)
    except Exception as exc:  # noqa: BLE001 - listing is best effort
        _LOGGER.debug("Port enumeration failed: %r", exc)
        print("Error listing serial ports", file=sys.stderr)
        return 0

    for line in format_listing(ports):
        print(line)
    return 0
