"""
Run the API server: python -m api (from repo root, with .env or env vars set).
"""
import os

import uvicorn


def main() -> None:
    host = os.environ.get("HOST", "0.0.0.0").strip() or "0.0.0.0"
    port = int(os.environ.get("PORT", "3000").strip() or 3000)
    uvicorn.run("api.main:app", host=host, port=port)


if __name__ == "__main__":
    main()
