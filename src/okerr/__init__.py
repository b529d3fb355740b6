"""okerr: explicit, typed success/failure values.

Usage:
    from okerr import Result, ok, err

    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return err(f"not a port: {raw!r}")
        return ok(int(raw))

    port = parse_port(raw).unwrap_or(8080)
"""

from __future__ import annotations

from okerr.core.result import Err, Ok, Result, UnwrapError, empty, err, ok

__all__ = [
    "Err",
    "Ok",
    "Result",
    "UnwrapError",
    "__version__",
    "empty",
    "err",
    "ok",
]
__version__ = "0.1.0"
