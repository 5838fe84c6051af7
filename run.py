# =============================================================================
# run.py — Start the gateway with uvicorn
# =============================================================================
# Usage: python run.py
# Backend: http://127.0.0.1:8000 (HOST / PORT env vars override)
# =============================================================================

import os

import uvicorn

BACKEND_HOST = os.environ.get("HOST", "127.0.0.1")
BACKEND_PORT = int(os.environ.get("PORT", "8000"))


def main() -> None:
    print(f"Starting LLM gateway on http://{BACKEND_HOST}:{BACKEND_PORT} ...")
    uvicorn.run("llm_gateway.main:app", host=BACKEND_HOST, port=BACKEND_PORT)


if __name__ == "__main__":
    main()
