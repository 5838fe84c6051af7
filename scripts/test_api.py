# =============================================================================
# scripts/test_api.py — Quick API smoke test (run with backend on 127.0.0.1:8000)
# =============================================================================
# Usage: python scripts/test_api.py [google|openai]
# =============================================================================

import os
import sys

import requests

BASE = os.environ.get("BASE_URL", "http://127.0.0.1:8000")
TIMEOUT = 5


def get(path: str) -> dict | None:
    try:
        r = requests.get(f"{BASE}{path}", timeout=TIMEOUT)
        r.raise_for_status()
        return r.json()
    except requests.RequestException as e:
        print(f"GET {path} failed: {e}")
        return None


def post(path: str, json: dict) -> tuple[dict | None, int | None]:
    # The envelope is JSON on every status, so don't raise_for_status here.
    try:
        r = requests.post(f"{BASE}{path}", json=json, timeout=70)
    except requests.RequestException as e:
        print(f"POST {path} failed: {e}")
        return None, None
    try:
        return r.json(), r.status_code
    except ValueError:
        print(f"POST {path} returned non-JSON (status={r.status_code}): {r.text[:500]}")
        return None, r.status_code


def main() -> int:
    provider = sys.argv[1] if len(sys.argv) > 1 else "google"

    print("1. GET /health ...")
    h = get("/health")
    if not h:
        print("   Backend not reachable. Start with: uvicorn llm_gateway.main:app --host 127.0.0.1 --port 8000")
        return 1
    print("   OK:", h.get("status"), "| providers:", h.get("providers"))

    print("2. GET /models ...")
    m = get("/models")
    if m is None:
        return 1
    print("   OK:", {p: v.get("models") for p, v in m.items()})

    print("3. POST /api/llm without prompt (expect 400) ...")
    out, status = post("/api/llm", {"provider": provider})
    if status != 400 or not out or out.get("error") != "Prompt is required":
        print("   Unexpected:", status, out)
        return 1
    print("   OK:", out)

    print(f"4. POST /api/llm (provider={provider}) ...")
    out, status = post("/api/llm", {
        "provider": provider,
        "prompt": "In which year did the USSR fall? Answer in one sentence.",
        "temperature": 0.7,
        "maxTokens": 256,
    })
    if out and out.get("success"):
        print("   OK: text (first 200 chars):", (out.get("text") or "")[:200])
    elif status == 429:
        print("   OK: 429 rate limited by provider:", out.get("error") if out else None)
    else:
        print("   Failed:", status, out)
        print("   Tip: set GEMINI_API_KEY / OPENAI_API_KEY and ensure outbound HTTPS.")
        return 1

    print("All checks passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
