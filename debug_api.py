import sys

from evmart.api_client import get_api_client
from evmart.config import get_settings
from evmart.errors import ApiError


def log(msg):
    print(msg)
    with open("debug_log.txt", "a", encoding="utf-8") as f:
        f.write(msg + "\n")


def check_connection():
    # Clear previous log
    with open("debug_log.txt", "w", encoding="utf-8") as f:
        f.write("Starting debug...\n")

    settings = get_settings()
    log(f"Override configured: {bool(settings.API_URL)}")
    log(f"Platform: {settings.PLATFORM}")

    client = get_api_client()
    log(f"Resolved base URL: {client.base_url}")

    log("Listing public packages...")
    try:
        res = client.shop.get_available_packages()
        log(f"Success! Response: {res}")
    except ApiError as e:
        kind = "Network error" if e.is_network_error else f"HTTP {e.status}"
        log(f"{kind}: {e.message}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(check_connection())
