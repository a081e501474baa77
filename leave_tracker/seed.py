"""Seed script for development data.

Run with:  python -m leave_tracker.seed
Point it at another instance with SEED_BASE_URL=http://host:port.
"""

from __future__ import annotations

import asyncio
import os
import sys
from datetime import date, timedelta

import httpx

BASE_URL = os.environ.get("SEED_BASE_URL", "http://localhost:8000")
ADMIN_ID = "00000000-0000-0000-0000-000000000001"

ADMIN_HEADERS = {
    "Content-Type": "application/json",
    "X-User-Id": ADMIN_ID,
    "X-Role": "ADMIN",
}

# Well-known user UUIDs
ALICE_ID = "00000000-0000-0000-0000-000000000002"
BOB_ID = "00000000-0000-0000-0000-000000000003"
CAROL_ID = "00000000-0000-0000-0000-000000000004"

USERS = [
    {"id": ADMIN_ID, "name": "Ada Admin", "email": "admin@example.com", "role": "ADMIN"},
    {"id": ALICE_ID, "name": "Alice Johnson", "email": "alice.johnson@example.com", "role": "USER"},
    {"id": BOB_ID, "name": "Bob Smith", "email": "bob.smith@example.com", "role": "USER"},
    {"id": CAROL_ID, "name": "Carol Diaz", "email": "carol.diaz@example.com", "role": "USER"},
]

# (user_id, type, reason, start offset in days from today, length in days, final status)
REQUESTS = [
    (ALICE_ID, "holiday", "Summer trip to the coast", 21, 5, "pending"),
    (ALICE_ID, "work_from_home", "Plumber visit", -7, 1, "accepted"),
    (BOB_ID, "halfday", "Dentist appointment", 3, 1, "pending"),
    (BOB_ID, "holiday", "Family wedding", -30, 3, "accepted"),
    (CAROL_ID, "other", "Jury duty", 10, 2, "denied"),
    (CAROL_ID, "work_from_home", "Moving house", -2, 4, "pending"),
]


def _user_headers(user_id: str) -> dict[str, str]:
    return {"Content-Type": "application/json", "X-User-Id": user_id, "X-Role": "USER"}


async def seed_users(client: httpx.AsyncClient) -> dict[str, dict]:
    print("\n--- Seeding users ---")
    seeded: dict[str, dict] = {}
    for user in USERS:
        body = {k: v for k, v in user.items() if k != "id"}
        resp = await client.put(f"{BASE_URL}/users/{user['id']}", json=body, headers=ADMIN_HEADERS)
        if resp.status_code == 200:
            print(f"  [OK] {user['name']}")
            seeded[user["id"]] = user
        else:
            print(f"  [ERROR] {user['name']}: {resp.status_code} {resp.text[:200]}")
    return seeded


async def seed_requests(client: httpx.AsyncClient, users: dict[str, dict]) -> None:
    print("\n--- Seeding requests ---")
    today = date.today()

    for user_id, request_type, reason, offset, length, final_status in REQUESTS:
        user = users.get(user_id)
        if user is None:
            print(f"  [SKIP] {reason}: user {user_id[:12]}... not seeded")
            continue

        start = today + timedelta(days=offset)
        end = start + timedelta(days=length - 1)
        resp = await client.post(
            f"{BASE_URL}/users/{user_id}/requests",
            json={
                "name": user["name"],
                "email": user["email"],
                "type": request_type,
                "reason": reason,
                "start_date": start.isoformat(),
                "end_date": end.isoformat(),
            },
            headers=_user_headers(user_id),
        )
        if resp.status_code != 201:
            print(f"  [ERROR] {reason}: {resp.status_code} {resp.text[:200]}")
            continue
        print(f"  [OK] {user['name']}: {reason}")

        if final_status == "pending":
            continue
        request_id = resp.json()["id"]
        resp = await client.patch(
            f"{BASE_URL}/requests/{request_id}",
            json={"status": final_status},
            headers=ADMIN_HEADERS,
        )
        if resp.status_code == 200:
            print(f"  [OK] Marked {final_status}")
        else:
            print(f"  [ERROR] Marking {final_status}: {resp.status_code}")


async def main() -> None:
    print("=" * 60)
    print("  Leave Tracker - Development Seed Script")
    print("=" * 60)

    async with httpx.AsyncClient(timeout=30.0) as client:
        try:
            resp = await client.get(f"{BASE_URL}/health")
            if resp.status_code != 200:
                print(f"API health check failed: {resp.status_code}")
                sys.exit(1)
            print("\n[OK] API is healthy")
        except httpx.ConnectError:
            print("ERROR: Cannot connect to API at", BASE_URL)
            print("Make sure the API is running (uvicorn leave_tracker.main:app)")
            sys.exit(1)

        users = await seed_users(client)
        await seed_requests(client, users)

    print("\n" + "=" * 60)
    print("  Seeding complete!")
    print("=" * 60)


def main_sync() -> None:
    """Console-script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    main_sync()
