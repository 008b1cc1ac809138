from __future__ import annotations

import json

from _infra import Failure, banner

from fallible import Err, Ok, Result, err, lift as L, ok


def parse_payload(raw: str) -> Result[dict[str, object], Failure]:
    # Exception-based json.loads lifted at the call site.
    return L.up.from_(lambda: json.loads(raw), fallback=Failure("invalid json"))


def require_port(payload: dict[str, object]) -> Result[int, Failure]:
    port = payload.get("port")
    if not isinstance(port, int):
        return err(Failure("port missing"), f"payload keys: {sorted(payload)}")
    return ok(port)


def main() -> None:
    banner("01_quickstart: from_ + and_then + map + match")

    for raw in ('{"port": 8080}', '{"host": "db"}', "not json"):
        result = (
            parse_payload(raw)
            .and_then(require_port)
            .map(lambda port: f"listening on :{port}")
            .tap_err(lambda failure: print(f"  → failed: {failure.message}"))
        )
        match result:
            case Ok(message):
                print(f"  ✓ {message}")
            case Err(failure, origin):
                print(f"  ✗ {failure.message} (origin: {origin})")

        print(f"  unwrap_or: {result.unwrap_or('offline')}")


if __name__ == "__main__":
    main()
