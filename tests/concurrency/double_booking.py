"""
Concurrency check: many users race for the same seats on a running server

Usage (server started with seeded data):
    python tests/concurrency/double_booking.py --users 100 --flight-id 1 --seat-ids 37 38

Expected: exactly one booking succeeds, every other request gets 409.
"""
import argparse
import asyncio
import logging
import time
from collections import Counter
from typing import Dict, List

import aiohttp

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

API_URL = "http://localhost:8000/api"


async def attempt_booking(session: aiohttp.ClientSession, user_id: int, flight_id: int,
                          seat_ids: List[int]) -> Dict:
    """One user tries to book all target seats"""
    start_time = time.time()
    payload = {
        "flightId": flight_id,
        "cabinClass": "economy",
        "seatIds": seat_ids,
        "paymentMethod": "card",
        "passengers": [
            {"firstName": f"Racer{user_id}", "lastName": f"Seat{i}", "dateOfBirth": "1990-01-01"}
            for i in range(len(seat_ids))
        ],
    }

    try:
        async with session.post(
            f"{API_URL}/bookings",
            json=payload,
            headers={"X-User-Id": f"racer-{user_id}"},
        ) as response:
            result = {
                "user_id": user_id,
                "status_code": response.status,
                "success": response.status == 201,
                "duration_ms": (time.time() - start_time) * 1000,
                "response": None,
                "error": None,
            }
            body = await response.json(content_type=None)
            if response.status == 201:
                result["response"] = body
            else:
                result["error"] = body.get("detail") if isinstance(body, dict) else str(body)
            return result

    except aiohttp.ClientError as e:
        return {
            "user_id": user_id,
            "status_code": 0,
            "success": False,
            "duration_ms": (time.time() - start_time) * 1000,
            "error": str(e),
        }


async def run_concurrent_booking(num_users: int, flight_id: int, seat_ids: List[int]) -> bool:
    logger.info(f"Starting concurrent booking run with {num_users} users")
    logger.info(f"Target flight {flight_id}, seats {seat_ids}")

    connector = aiohttp.TCPConnector(limit=50, limit_per_host=50)
    timeout = aiohttp.ClientTimeout(total=30)

    async with aiohttp.ClientSession(connector=connector, timeout=timeout) as session:
        start_time = time.time()
        results = await asyncio.gather(*[
            attempt_booking(session, user_id, flight_id, seat_ids)
            for user_id in range(1, num_users + 1)
        ])
        total_duration = time.time() - start_time

    return analyze_results(results, total_duration)


def analyze_results(results: List[Dict], total_duration: float) -> bool:
    """Returns True when exactly one booking won the seats"""
    successes = [r for r in results if r["success"]]
    status_codes = Counter(r["status_code"] for r in results)
    durations = [r["duration_ms"] for r in results]

    logger.info("=" * 60)
    logger.info(f"Total requests: {len(results)}")
    logger.info(f"Successful bookings: {len(successes)}")
    for code, count in sorted(status_codes.items()):
        logger.info(f"  {code}: {count}")
    logger.info(f"Response times: avg {sum(durations) / len(durations):.2f}ms, "
                f"min {min(durations):.2f}ms, max {max(durations):.2f}ms")
    logger.info(f"Throughput: {len(results) / total_duration:.2f} req/s")
    logger.info("=" * 60)

    if status_codes.get(500, 0):
        logger.error(f"{status_codes[500]} requests got HTTP 500")
        for err in [r for r in results if r["status_code"] == 500][:3]:
            logger.error(f"  User {err['user_id']}: {str(err.get('error'))[:100]}")

    if len(successes) == 1:
        winner = successes[0]
        logger.info(f"PASS: exactly one booking succeeded (user {winner['user_id']}, "
                    f"PNR {winner['response']['pnr']})")
    elif not successes:
        logger.error("FAIL: no booking succeeded")
        return False
    else:
        logger.error(f"FAIL: {len(successes)} bookings hold the same seats: "
                     f"{[s['user_id'] for s in successes]}")
        return False

    conflicts = status_codes.get(409, 0)
    if conflicts != len(results) - 1:
        logger.warning(f"Expected {len(results) - 1} conflicts, got {conflicts}")
    return True


def main():
    parser = argparse.ArgumentParser(description="Race many users for the same seats")
    parser.add_argument("--users", type=int, default=100)
    parser.add_argument("--flight-id", type=int, default=1)
    parser.add_argument("--seat-ids", type=int, nargs="+", default=[37, 38])  # 7A, 7B on the first seeded flight
    args = parser.parse_args()

    passed = asyncio.run(run_concurrent_booking(args.users, args.flight_id, args.seat_ids))
    raise SystemExit(0 if passed else 1)


if __name__ == "__main__":
    main()
