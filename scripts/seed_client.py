#!/usr/bin/env python3
"""Store one tenant's CRM credentials as a Client node in Neo4j.

Usage: python scripts/seed_client.py <client_id> <api_token> <location_id>
Run from repo root with .env (NEO4J_URI, NEO4J_USER, NEO4J_PASSWORD).
Idempotent: re-running overwrites the token and location.
"""
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT / "src"))

from dotenv import load_dotenv  # noqa: E402
from neo4j import GraphDatabase  # noqa: E402

from leadsync.infrastructure import save_client_credentials  # noqa: E402

load_dotenv(REPO_ROOT / ".env")


def main(argv: list[str]) -> int:
    if len(argv) != 3:
        print(__doc__.strip().splitlines()[2], file=sys.stderr)
        return 2
    client_id, api_token, location_id = argv
    uri = os.environ.get("NEO4J_URI", "bolt://localhost:7687").strip()
    user = os.environ.get("NEO4J_USER", "neo4j").strip()
    password = os.environ.get("NEO4J_PASSWORD", "password").strip()
    driver = GraphDatabase.driver(uri, auth=(user, password))
    try:
        save_client_credentials(driver, client_id, api_token, location_id)
        print(f"Stored CRM credentials for client {client_id} (location {location_id}).")
        return 0
    finally:
        driver.close()


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
