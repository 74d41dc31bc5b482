"""Node.js architecture names and their compiler-style aliases."""

from __future__ import annotations

import enum

from .errors import UnsupportedArchitectureError

__all__ = ["NodeArch"]


class NodeArch(enum.StrEnum):
    """CPU architecture as reported by Node.js ``process.arch``.

    The member value is the runtime-ecosystem name, so ``str(NodeArch.IA32)``
    is ``"ia32"``.
    """

    X86 = "x86"
    X64 = "x64"
    IA32 = "ia32"
    ARM = "arm"
    ARM64 = "arm64"
    MIPS = "mips"
    MIPSEL = "mipsel"
    PPC = "ppc"
    PPC64 = "ppc64"
    S390 = "s390"
    S390X = "s390x"

    @classmethod
    def from_compiler_name(cls, name: str) -> NodeArch:
        """Return the member for the CPU field of a target triple.

        Raises
        ------
        UnsupportedArchitectureError
            If ``name`` has no Node.js equivalent.
        """
        try:
            return _COMPILER_NAMES[name]
        except KeyError:
            raise UnsupportedArchitectureError(name) from None

    @property
    def github_action_arch(self) -> str:
        """Host architecture label understood by ``actions/setup-node``."""
        # Hosted runners only come in two flavours.
        return "x86" if self is NodeArch.X86 else "x64"


_COMPILER_NAMES: dict[str, NodeArch] = {
    "x32": NodeArch.X86,
    "x86_64": NodeArch.X64,
    "i686": NodeArch.IA32,
    "armv7": NodeArch.ARM,
    "aarch64": NodeArch.ARM64,
    "mips": NodeArch.MIPS,
    "mipsel": NodeArch.MIPSEL,
    "ppc": NodeArch.PPC,
    "ppc64": NodeArch.PPC64,
    "s390": NodeArch.S390,
    "s390x": NodeArch.S390X,
}
