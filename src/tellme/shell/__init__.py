"""Shell integration scripts emitted by ``tellme init``."""

from __future__ import annotations

from importlib import resources

SUPPORTED_SHELLS = ("bash", "zsh")


def integration_script(shell: str) -> str:
    """Return the hook script for ``shell``."""

    if shell not in SUPPORTED_SHELLS:
        raise ValueError(f"Unsupported shell '{shell}'; expected one of {', '.join(SUPPORTED_SHELLS)}")
    return resources.files(__name__).joinpath(f"{shell}.sh").read_text(encoding="utf-8")


__all__ = ["SUPPORTED_SHELLS", "integration_script"]
