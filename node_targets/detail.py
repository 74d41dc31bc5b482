"""Parse target triples into Node.js platform metadata."""

from __future__ import annotations

import dataclasses
import typing as typ

from .arch import NodeArch
from .errors import MalformedTripleError
from .platforms import NodePlatform, parse_platform

__all__ = ["TargetDetail"]


@dataclasses.dataclass(frozen=True, slots=True)
class TargetDetail:
    """Node.js view of a target triple."""

    platform_abi: str
    arch: NodeArch
    platform: NodePlatform
    abi: str | None = None

    @classmethod
    def from_triple(cls, triple: str) -> TargetDetail:
        """Build the detail for ``triple`` (``<arch>-<vendor>-<os>[-<abi>]``).

        The OS is always read from the third field, which suits the
        registered triples (``aarch64-linux-android`` reports ``android``).

        Raises
        ------
        MalformedTripleError
            If ``triple`` has fewer than three fields.
        UnsupportedArchitectureError
            If the CPU field has no Node.js equivalent.

        Examples
        --------
        >>> TargetDetail.from_triple("armv7-unknown-linux-gnueabihf").platform_abi
        'linux-arm-gnueabihf'
        """
        parts = triple.split("-")
        if len(parts) < 3:
            raise MalformedTripleError(triple)
        cpu, sys_name = parts[0], parts[2]
        abi = parts[3] if len(parts) > 3 else None

        platform = parse_platform(sys_name)
        arch = NodeArch.from_compiler_name(cpu)
        platform_abi = (
            f"{platform}-{arch}-{abi}" if abi is not None else f"{platform}-{arch}"
        )
        return cls(platform_abi=platform_abi, arch=arch, platform=platform, abi=abi)

    def to_dict(self) -> dict[str, typ.Any]:
        """Return the serialised form using runtime-ecosystem names."""
        return {
            "platform_abi": self.platform_abi,
            "arch": str(self.arch),
            "platform": str(self.platform),
            "abi": self.abi,
        }
