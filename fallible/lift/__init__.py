"""
Lift helpers with semantic namespaces.

Supports three import styles:
    from fallible import lift as L   # Recommended (balance)
    from fallible import lift as _   # Minimal
    from fallible import lift        # Explicit

Architecture:
- L.up.*    - lifting exception-based code into Result
- L.call()  - calling functions with lifting
- L.lifted  - decorator form of L.call

Examples:
    from fallible import lift as L

    # Lifting
    parsed = L.up.from_(lambda: json.loads(raw), fallback="invalid json")
    user = await L.up.from_(fetch_user(42))
    loaded = L.up.try_catch(lambda: load_config(path), on_catch="config error")

    # Calling
    port = L.call(int, raw_port, fallback="invalid port")

    # Decorators
    @L.lifted
    def parse(raw): ...
"""

from __future__ import annotations

# Import namespaces
from . import up as up_ns

# Convenience: most common functions in root for easy access
from .up import from_, try_catch
from .call import call, lifted

# Namespace alias: L.up.*
up = up_ns

__all__ = (
    # Namespaces (L.up.*)
    "up",
    # Up
    "from_",
    "try_catch",
    # Call
    "call",
    "lifted",
)
