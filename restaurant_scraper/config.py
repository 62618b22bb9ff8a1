import os

SCRAPE_CONFIG = {
    "start_id": int(os.environ.get("START_ID", "13000001")),
    "quantity": int(os.environ.get("QUANTITY", "10")),
    "output_path": os.environ.get("OUTPUT_PATH", "restaurants.csv"),
    "base_url": os.environ.get("BASE_URL", "https://tabelog.com/en/tokyo/A0000/A000000/"),
    "request_timeout": float(os.environ.get("REQUEST_TIMEOUT", "30")),
    "user_agent": os.environ.get(
        "USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
    ),
    "impersonate": os.environ.get("IMPERSONATE", ""),
}
